"""Base command handler for medoc-check CLI commands."""

from abc import ABC, abstractmethod
from argparse import Namespace

from medoc_check.config import GlobalConfigManager
from medoc_check.core.token import KeyringTokenStore


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    Dependencies are injected by CLIRunner (the composition root) so
    tests can pass mocks.
    """

    def __init__(
        self,
        config_manager: GlobalConfigManager,
        token_store: KeyringTokenStore,
    ) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            config_manager: Configuration management instance
            token_store: Bot token storage

        """
        self.config_manager = config_manager
        self.global_config = config_manager.load_global_config()
        self.token_store = token_store

    @abstractmethod
    async def execute(self, args: Namespace) -> None:
        """Execute the command with the given arguments.

        Args:
            args: Parsed command-line arguments

        """
