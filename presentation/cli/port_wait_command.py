from __future__ import annotations

import argparse
import json
from typing import Any, Dict, List, Optional, Sequence

from application.services.port_wait import PollConfig, PortWaiter
from application.use_cases.wait_for_port import PORT_WAIT_SCHEMA, WaitForPortUseCase
from config.settings import settings
from core.logging.logger import StructuredLogger, get_logger
from domain.entities.diagnostics import Diagnostics

EXIT_AVAILABLE = 0
EXIT_UNAVAILABLE = 1
EXIT_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="port-wait",
        description="Wait until a TCP port accepts connections.",
    )
    parser.add_argument("--host", help=PORT_WAIT_SCHEMA["host"].description)
    parser.add_argument("--port", type=int, help=PORT_WAIT_SCHEMA["port"].description)
    parser.add_argument("--timeout-sec", type=int, default=None, help=PORT_WAIT_SCHEMA["timeout_sec"].description)
    parser.add_argument("--cooldown-ms", type=int, default=None, help=PORT_WAIT_SCHEMA["cooldown_ms"].description)
    parser.add_argument(
        "--error-on-timeout",
        action="store_true",
        default=None,
        help=PORT_WAIT_SCHEMA["error_on_timeout"].description,
    )
    parser.add_argument("--json", action="store_true", help="Print the state and diagnostics as JSON")
    return parser


class PortWaitCommand:
    """Port wait command: argument driven, or interactive when run without arguments."""

    def __init__(self, use_case: Optional[WaitForPortUseCase] = None) -> None:
        self.logger: StructuredLogger = get_logger(__name__, service="port-wait-cli")
        if use_case is None:
            config = PollConfig.from_settings(settings)
            use_case = WaitForPortUseCase(
                PortWaiter(default_cooldown_ms=config.default_cooldown_ms),
                config=config,
            )
        self.use_case = use_case
        self.json_out: bool = False

    def run(self, argv: Sequence[str]) -> int:
        args = build_parser().parse_args(list(argv))
        self.json_out = args.json
        raw: Dict[str, Any] = {
            "host": args.host,
            "port": args.port,
            "timeout_sec": args.timeout_sec,
            "cooldown_ms": args.cooldown_ms,
            "error_on_timeout": args.error_on_timeout,
        }
        return self._execute(raw)

    def run_interactive(self) -> int:
        print("\n=== Port Wait ===")
        host = input("Host: ").strip()
        port = input("Port: ").strip()
        raw: Dict[str, Any] = {"host": host or None, "port": port or None}
        timeout = input("Timeout seconds [0 = wait forever]: ").strip()
        if timeout:
            raw["timeout_sec"] = timeout
        cooldown = input(f"Cooldown ms [default {self.use_case.waiter.default_cooldown_ms}]: ").strip()
        if cooldown:
            raw["cooldown_ms"] = cooldown
        if raw.get("timeout_sec") not in (None, "0"):
            answer = input("Treat timeout as error? [y/N]: ").strip().lower()
            raw["error_on_timeout"] = answer in ("y", "yes")
        return self._execute(raw)

    def _execute(self, raw: Dict[str, Any]) -> int:
        self.logger.debug(lambda: f"execute {raw}")
        state, diags = self.use_case.execute(raw)
        if self.json_out:
            print(json.dumps({"state": state, "diagnostics": diags.to_list()}, separators=(",", ":")))
        else:
            self._print_human(state, diags)

        if diags.has_error() or state is None:
            return EXIT_FAILED
        return EXIT_AVAILABLE if state["available"] else EXIT_UNAVAILABLE

    @staticmethod
    def _print_human(state: Optional[Dict[str, Any]], diags: Diagnostics) -> None:
        lines: List[str] = []
        if state is not None:
            lines.append(f"{state['id']}: {'available' if state['available'] else 'unavailable'}")
        for d in diags:
            lines.append(f"- {d}")
        print("\n".join(lines))


def run(argv: Optional[Sequence[str]] = None) -> int:
    cmd = PortWaitCommand()
    return cmd.run(list(argv or []))
