from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class PollConfig:
    """Waiter-wide defaults; read from ``config.settings`` so env parsing lives in one place."""
    default_cooldown_ms: int = 500
    default_timeout_sec: int = 0

    @classmethod
    def from_settings(cls, settings) -> "PollConfig":
        """Build PollConfig from validated settings."""
        return cls(
            default_cooldown_ms=settings.DEFAULT_COOLDOWN_MS,
            default_timeout_sec=settings.DEFAULT_TIMEOUT_SEC,
        )
