"""Main CLI entry-point."""
from __future__ import annotations

import sys

from config.settings import settings
from core.logging.config import bootstrap_logging, shutdown_logging

EXIT_CONFIG_ERROR = 2


def main(argv: list[str]) -> int:
    try:
        settings.validate()
        settings.create_directories()
    except (ValueError, OSError) as e:
        print(f"  Invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    bootstrap_logging(
        service="port-wait",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR if settings.LOG_TO_FILE else None,
        log_file_name="port_wait.jsonl",
    )
    # imported after logging is configured
    from presentation.cli import PortWaitCommand

    try:
        command = PortWaitCommand()
        if argv:
            return command.run(argv)
        return command.run_interactive()
    except KeyboardInterrupt:
        print("\n  Interrupted.", file=sys.stderr)
        return 130
    finally:
        shutdown_logging()


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
