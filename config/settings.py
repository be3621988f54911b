"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


class Settings:
    """
    Process-wide defaults for the port waiter.

    Every value can be overridden from the environment or from config/.env.
    Per-request fields (timeout, cooldown, error-on-timeout) still win over
    these when a caller provides them.
    """

    # ── Polling ────────────────────────────────────────────────────────────
    # Pause between failed attempts when a request leaves cooldown unset.
    DEFAULT_COOLDOWN_MS: int = _env_int('PORT_WAIT_DEFAULT_COOLDOWN_MS', 500)
    # 0 = no deadline, keep retrying until the port answers
    DEFAULT_TIMEOUT_SEC: int = _env_int('PORT_WAIT_DEFAULT_TIMEOUT_SEC', 0)

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    LOG_DIR:  Path = Path(os.getenv('PORT_WAIT_LOG_DIR', str(BASE_DIR / 'data' / 'logs')))

    # ── Logging ────────────────────────────────────────────────────────────
    LOG_LEVEL:   str  = os.getenv('LOG_LEVEL', 'INFO')
    LOG_TO_FILE: bool = _env_bool('PORT_WAIT_LOG_TO_FILE', False)

    @classmethod
    def validate(cls) -> None:
        if cls.DEFAULT_COOLDOWN_MS < 0:
            raise ValueError("PORT_WAIT_DEFAULT_COOLDOWN_MS must be >= 0")
        if cls.DEFAULT_TIMEOUT_SEC < 0:
            raise ValueError("PORT_WAIT_DEFAULT_TIMEOUT_SEC must be >= 0")

    @classmethod
    def create_directories(cls) -> None:
        if cls.LOG_TO_FILE:
            cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
