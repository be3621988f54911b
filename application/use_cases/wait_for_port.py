"""Use case adapting the port waiter to a host's config/state contract."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from application.services.port_wait import DEFAULT_COOLDOWN_MS, PollConfig, PortWaiter
from core.logging.logger import StructuredLogger, get_logger
from domain.entities.diagnostics import Diagnostics
from domain.entities.poll import PollRequest
from domain.exceptions import InvalidPollRequest, PortWaitTimeout


@dataclass(frozen=True)
class SchemaAttribute:
    type: str
    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False


PORT_WAIT_SCHEMA: Dict[str, SchemaAttribute] = {
    "id": SchemaAttribute("string", "Polled address as host:port", computed=True),
    "available": SchemaAttribute("bool", "Whether the port is available after timeout", computed=True),
    "timeout_sec": SchemaAttribute(
        "int",
        "How many seconds to wait before timing out. 0 means infinite (default).",
        optional=True,
    ),
    "error_on_timeout": SchemaAttribute(
        "bool",
        "Treats a timeout as error causing the operation to fail",
        optional=True,
    ),
    "host": SchemaAttribute("string", "Hostname, domain name, IP address", required=True),
    "port": SchemaAttribute("int", "TCP Port", required=True),
    "cooldown_ms": SchemaAttribute(
        "int",
        "How many milliseconds to wait before each connection attempt or zero to not wait. "
        f"Default: {DEFAULT_COOLDOWN_MS}",
        optional=True,
    ),
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _as_int(attribute: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidPollRequest(attribute, "expected an integer, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidPollRequest(attribute, f"expected an integer, got {value!r}")


def _as_bool(attribute: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        v = value.strip().lower()
        if v in _TRUE:
            return True
        if v in _FALSE:
            return False
    raise InvalidPollRequest(attribute, f"expected a boolean, got {value!r}")


class WaitForPortUseCase:
    """Reads a config record, polls the port and builds the state record.

    Mirrors a data-source read: problems are reported as diagnostics rather
    than raised, and the state is only returned when polling actually ran.
    """

    def __init__(
        self,
        waiter: Optional[PortWaiter] = None,
        *,
        config: Optional[PollConfig] = None,
        logger: Optional[StructuredLogger] = None,
    ) -> None:
        self.config = config or PollConfig()
        self.waiter = waiter or PortWaiter(default_cooldown_ms=self.config.default_cooldown_ms)
        self.logger = logger or get_logger(__name__, service="port-wait")

    def decode(self, raw: Mapping[str, Any], diags: Diagnostics) -> Optional[PollRequest]:
        for name, attr in PORT_WAIT_SCHEMA.items():
            if attr.required and raw.get(name) is None:
                diags.add_error("missing required attribute", f'"{name}" must be set', attribute=name)
        unknown = sorted(k for k in raw if k not in PORT_WAIT_SCHEMA)
        for name in unknown:
            diags.add_warning("unknown attribute ignored", f'"{name}" is not part of the schema', attribute=name)
        if diags.has_error():
            return None

        try:
            timeout = raw.get("timeout_sec")
            cooldown = raw.get("cooldown_ms")
            error_on_timeout = raw.get("error_on_timeout")
            return PollRequest(
                host=str(raw["host"]).strip(),
                port=_as_int("port", raw["port"]),
                timeout_sec=self.config.default_timeout_sec if timeout is None else _as_int("timeout_sec", timeout),
                cooldown_ms=None if cooldown is None else _as_int("cooldown_ms", cooldown),
                error_on_timeout=False if error_on_timeout is None else _as_bool("error_on_timeout", error_on_timeout),
            )
        except InvalidPollRequest as e:
            diags.add_error("invalid attribute value", e.message, attribute=e.attribute)
            return None

    def execute(self, raw: Mapping[str, Any]) -> Tuple[Optional[Dict[str, Any]], Diagnostics]:
        diags = Diagnostics()
        request = self.decode(raw, diags)
        if request is None:
            self.logger.error(lambda: "config-invalid", extra={"error": "; ".join(str(d) for d in diags.errors)})
            return None, diags

        state: Dict[str, Any] = {
            "id": request.address,
            "available": False,
            "host": request.host,
            "port": request.port,
            "timeout_sec": request.timeout_sec,
            "cooldown_ms": request.cooldown_ms,
            "error_on_timeout": request.error_on_timeout,
        }
        try:
            result = self.waiter.poll(request)
        except PortWaitTimeout as e:
            diags.add_error(e.summary, e.detail)
            return None, diags

        state["id"] = result.identifier
        state["available"] = result.available
        return state, diags
