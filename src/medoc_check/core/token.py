"""Telegram bot token storage.

The token lives in the platform keyring (Credential Manager on Windows,
SecretService on Linux, Keychain on macOS), never in settings.conf.
Service accounts without a keyring can export MEDOC_CHECK_TELEGRAM_TOKEN
instead; the variable wins over the keyring.
"""

import os
import re

import keyring
import keyring.errors

from medoc_check.constants import KEYRING_SERVICE_NAME, TOKEN_ENV_VAR
from medoc_check.logger import get_logger

logger = get_logger(__name__)

MAX_TOKEN_LENGTH: int = 128

# <numeric bot id>:<url-safe secret>
_BOT_TOKEN_RE = re.compile(r"^\d{5,16}:[A-Za-z0-9_-]{30,100}$")


def validate_bot_token(token: str | None) -> bool:
    """Check that a value looks like a Telegram bot token.

    Surrounding whitespace is ignored; anything that is not a string,
    longer than MAX_TOKEN_LENGTH or not ``<bot id>:<secret>`` is rejected.
    """
    if not isinstance(token, str):
        return False
    candidate = token.strip()
    if not candidate or len(candidate) > MAX_TOKEN_LENGTH:
        return False
    return _BOT_TOKEN_RE.fullmatch(candidate) is not None


class KeyringTokenStore:
    """Bot token persistence backed by ``keyring``.

    Without a usable backend (headless server, fail.Keyring) the store is
    "unavailable": get() returns None instead of raising, and the status
    command suggests the environment variable.
    """

    def __init__(
        self, service: str = KEYRING_SERVICE_NAME, username: str = "token"
    ) -> None:
        """Initialize the store.

        Args:
            service: Keyring service name
            username: Keyring entry name within the service

        """
        self.service = service
        self.username = username
        self._available: bool | None = None

    def is_available(self) -> bool:
        """Whether a keyring backend with non-zero priority is configured."""
        if self._available is None:
            try:
                backend = keyring.get_keyring()
            except keyring.errors.KeyringError:
                self._available = False
            else:
                # keyring.backends.fail.Keyring has priority 0
                self._available = getattr(backend, "priority", 1) > 0
            if not self._available:
                logger.debug("No usable keyring backend for bot token")
        return self._available

    def get(self) -> str | None:
        """Return the bot token, or None if none is configured."""
        from_env = (os.getenv(TOKEN_ENV_VAR) or "").strip()
        if from_env:
            logger.debug("Using bot token from %s", TOKEN_ENV_VAR)
            return from_env

        if not self.is_available():
            return None

        try:
            stored = keyring.get_password(self.service, self.username)
        except keyring.errors.KeyringError:
            # The error text can echo backend details; keep it out of logs
            logger.debug("Bot token lookup in keyring failed")
            return None

        if not stored:
            logger.debug("No bot token in keyring service %s", self.service)
            return None
        return stored

    def set(self, token: str) -> None:
        """Store the bot token.

        Raises:
            keyring.errors.KeyringError: If the backend refuses the write

        """
        try:
            keyring.set_password(self.service, self.username, token)
        except keyring.errors.KeyringError:
            logger.error("Could not write bot token to keyring")
            raise
        logger.debug("Bot token stored in keyring service %s", self.service)

    def delete(self) -> None:
        """Delete the stored bot token.

        Raises:
            keyring.errors.PasswordDeleteError: If no token is stored

        """
        keyring.delete_password(self.service, self.username)
        logger.debug("Bot token deleted from keyring service %s", self.service)
