"""CLI runner for medoc-check.

Routes parsed arguments to command handlers and turns configuration
errors into a clean exit.
"""

import sys
from argparse import Namespace

from medoc_check import __version__
from medoc_check.config import GlobalConfigManager
from medoc_check.core.token import KeyringTokenStore
from medoc_check.exceptions import ConfigurationError
from medoc_check.logger import get_logger, update_logger_from_config

from .commands import AuthHandler, BaseCommandHandler, CheckHandler
from .parser import CLIParser

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and composition root."""

    def __init__(
        self,
        config_manager: GlobalConfigManager | None = None,
        token_store: KeyringTokenStore | None = None,
    ) -> None:
        """Initialize CLI runner with shared dependencies."""
        self.config_manager = config_manager or GlobalConfigManager()
        self.global_config = self.config_manager.load_global_config()
        self.token_store = token_store or KeyringTokenStore()
        update_logger_from_config(self.global_config)

        self.command_handlers: dict[str, BaseCommandHandler] = {
            "check": CheckHandler(self.config_manager, self.token_store),
            "auth": AuthHandler(self.config_manager, self.token_store),
        }

    async def run(self, argv: list[str] | None = None) -> None:
        """Parse arguments and dispatch to the command handler.

        Exits with code 1 on configuration errors or a missing command.
        """
        parser = CLIParser(self.global_config)
        args = parser.parse_args(argv)

        if getattr(args, "version", False):
            print(__version__)
            return

        if not args.command:
            print("No command specified. Use --help.")
            sys.exit(1)

        try:
            await self._execute_command(args)
        except ConfigurationError as e:
            logger.error("%s", e)  # noqa: TRY400
            print(f"❌ {e}", file=sys.stderr)
            sys.exit(1)

    async def _execute_command(self, args: Namespace) -> None:
        handler = self.command_handlers[args.command]
        logger.debug("Executing command: %s", args.command)
        await handler.execute(args)
