import json

import pytest

from application.services.port_wait import PortWaiter
from application.use_cases.wait_for_port import WaitForPortUseCase
from domain.entities.poll import PollResult
from domain.exceptions import PortWaitTimeout
from presentation.cli.port_wait_command import (
    EXIT_AVAILABLE,
    EXIT_FAILED,
    EXIT_UNAVAILABLE,
    PortWaitCommand,
    build_parser,
)


class StubWaiter:
    default_cooldown_ms = 500

    def __init__(self, available=True, error=None):
        self.available = available
        self.error = error
        self.requests = []

    def poll(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return PollResult(identifier=request.address, available=self.available)


def _command(waiter):
    return PortWaitCommand(WaitForPortUseCase(waiter))


def test_parser_leaves_optionals_unset():
    args = build_parser().parse_args(["--host", "db", "--port", "5432"])

    assert args.timeout_sec is None
    assert args.cooldown_ms is None
    assert args.error_on_timeout is None


def test_available_exit_code(capsys):
    waiter = StubWaiter(available=True)

    code = _command(waiter).run(["--host", "db", "--port", "5432", "--timeout-sec", "5"])

    assert code == EXIT_AVAILABLE
    assert capsys.readouterr().out.strip() == "db:5432: available"
    assert waiter.requests[0].timeout_sec == 5


def test_unavailable_exit_code(capsys):
    code = _command(StubWaiter(available=False)).run(["--host", "db", "--port", "5432", "--timeout-sec", "1"])

    assert code == EXIT_UNAVAILABLE
    assert "db:5432: unavailable" in capsys.readouterr().out


def test_timeout_failure_json(capsys):
    waiter = StubWaiter(error=PortWaitTimeout(
        "connection timeout", "timed out trying to connect to db:5432", address="db:5432",
    ))

    code = _command(waiter).run(
        ["--host", "db", "--port", "5432", "--timeout-sec", "1", "--error-on-timeout", "--json"]
    )

    assert code == EXIT_FAILED
    payload = json.loads(capsys.readouterr().out)
    assert payload["state"] is None
    assert payload["diagnostics"] == [{
        "severity": "error",
        "summary": "connection timeout",
        "detail": "timed out trying to connect to db:5432",
    }]
    assert waiter.requests[0].error_on_timeout is True


def test_missing_host_fails(capsys):
    code = _command(StubWaiter()).run(["--port", "80"])

    assert code == EXIT_FAILED
    assert "missing required attribute" in capsys.readouterr().out


def test_interactive_prompt(monkeypatch, capsys):
    answers = iter(["db", "5432", "3", "0", "y"])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))
    waiter = StubWaiter(available=True)

    code = _command(waiter).run_interactive()

    req = waiter.requests[0]
    assert code == EXIT_AVAILABLE
    assert (req.host, req.port, req.timeout_sec, req.cooldown_ms, req.error_on_timeout) == ("db", 5432, 3, 0, True)


def test_end_to_end_against_listener(listener, capsys):
    command = PortWaitCommand(WaitForPortUseCase(PortWaiter()))

    code = command.run(["--host", "127.0.0.1", "--port", str(listener), "--timeout-sec", "5", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == EXIT_AVAILABLE
    assert payload["state"]["id"] == f"127.0.0.1:{listener}"
    assert payload["state"]["available"] is True
    assert payload["diagnostics"] == []


def test_bad_port_argument_exits():
    with pytest.raises(SystemExit):
        _command(StubWaiter()).run(["--host", "db", "--port", "http"])
