"""Auth command handler: Telegram bot token management.

The token is stored in the system keyring, never in settings.conf.
"""

import getpass
import sys
from argparse import Namespace

import keyring.errors

from medoc_check.constants import TOKEN_ENV_VAR
from medoc_check.core.token import validate_bot_token
from medoc_check.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class AuthHandler(BaseCommandHandler):
    """Handler for auth command operations."""

    async def execute(self, args: Namespace) -> None:
        """Execute the auth command."""
        if args.save_token:
            self._save_token()
        elif args.remove_token:
            self._remove_token()
        elif args.status:
            self._show_status()

    def _save_token(self) -> None:
        """Prompt for a token twice, validate it and store it.

        Exits with code 1 on empty, mismatched or malformed input.
        """
        try:
            token = getpass.getpass(
                prompt="Enter your Telegram bot token (input hidden): "
            ).strip()
            confirm = getpass.getpass(prompt="Confirm token: ").strip()
        except (EOFError, KeyboardInterrupt):
            logger.error("Token input aborted by user")  # noqa: TRY400
            sys.exit(1)

        if not token:
            logger.error("Token cannot be empty")
            sys.exit(1)
        if token != confirm:
            logger.error("Tokens do not match")
            sys.exit(1)
        if not validate_bot_token(token):
            logger.error("Invalid bot token format, expected <id>:<secret>")
            sys.exit(1)

        self.token_store.set(token)
        print("Bot token saved to keyring.")

    def _remove_token(self) -> None:
        """Remove the stored token; a missing token is not an error."""
        try:
            self.token_store.delete()
        except keyring.errors.PasswordDeleteError:
            logger.warning("No bot token found in keyring.")
            return
        print("Bot token removed from keyring.")

    def _show_status(self) -> None:
        chat_id = self.global_config["telegram"]["chat_id"]
        token = self.token_store.get()
        print(f"Bot token: {'configured' if token else 'not configured'}")
        if not self.token_store.is_available():
            print(f"Keyring: unavailable (set {TOKEN_ENV_VAR} instead)")
        print(f"Chat id: {chat_id or 'not configured'}")
        enabled = self.global_config["telegram"]["enabled"]
        print(f"Notifications: {'enabled' if enabled else 'disabled'}")
