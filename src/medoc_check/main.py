"""Main CLI entry point for medoc-check."""

import asyncio
import sys

from medoc_check.cli import CLIRunner
from medoc_check.logger import get_logger

logger = get_logger(__name__)


async def async_main() -> None:
    """Run the CLI asynchronously."""
    logger.debug("CLI started")
    runner = CLIRunner()
    await runner.run()


def _run(coro) -> None:
    """Run a coroutine on uvloop; uvloop does not support Windows."""
    if sys.platform == "win32":
        asyncio.run(coro)
        return

    import uvloop  # noqa: PLC0415

    uvloop.run(coro)


def main() -> None:
    """Run the CLI application.

    Unexpected errors are logged with traceback and exit with code 1, the
    same code an Error outcome produces.
    """
    try:
        _run(async_main())
    except KeyboardInterrupt:
        logger.info("CLI cancelled by user")
        sys.exit(1)
    except Exception:
        logger.exception("❌ Unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
