"""Telegram Bot API notification delivery."""

import asyncio
from http import HTTPStatus

import aiohttp

from medoc_check.constants import (
    DEFAULT_RETRY_ATTEMPTS,
    TELEGRAM_API_URL,
    TELEGRAM_MAX_MESSAGE_LENGTH,
)
from medoc_check.exceptions import NotificationError
from medoc_check.logger import get_logger

logger = get_logger(__name__)

_BACKOFF_BASE_SECONDS = 1.0


def _is_retryable(status: int) -> bool:
    return (
        status == HTTPStatus.TOO_MANY_REQUESTS
        or status >= HTTPStatus.INTERNAL_SERVER_ERROR
    )


class TelegramNotifier:
    """Send plain-text messages to one chat through a bot.

    Transient failures (network errors, HTTP 429 and 5xx) are retried with
    exponential backoff; other HTTP errors fail at once. The bot token is
    part of the request URL and is never logged.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        token: str,
        chat_id: str,
        retry_attempts: int = DEFAULT_RETRY_ATTEMPTS,
    ) -> None:
        """Initialize the notifier.

        Args:
            session: Open aiohttp session
            token: Bot token
            chat_id: Target chat identifier
            retry_attempts: Total attempts per message (at least 1)

        """
        self.session = session
        self._token = token
        self.chat_id = chat_id
        self.retry_attempts = max(1, retry_attempts)

    @property
    def _url(self) -> str:
        return f"{TELEGRAM_API_URL}/bot{self._token}/sendMessage"

    async def send(self, text: str) -> None:
        """Deliver a message.

        Args:
            text: Message body; truncated to Telegram's length limit

        Raises:
            NotificationError: If every attempt failed

        """
        payload = {
            "chat_id": self.chat_id,
            "text": text[:TELEGRAM_MAX_MESSAGE_LENGTH],
            "disable_web_page_preview": True,
        }

        last_error = ""
        for attempt in range(1, self.retry_attempts + 1):
            try:
                async with self.session.post(self._url, json=payload) as resp:
                    if resp.status == HTTPStatus.OK:
                        logger.debug(
                            "Telegram message delivered to chat %s",
                            self.chat_id,
                        )
                        return
                    body = await resp.text()
                    last_error = f"HTTP {resp.status}: {body[:200]}"
                    if not _is_retryable(resp.status):
                        break
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                last_error = f"{type(e).__name__}: {e}"

            if attempt < self.retry_attempts:
                delay = _BACKOFF_BASE_SECONDS * 2 ** (attempt - 1)
                logger.debug(
                    "Telegram attempt %d/%d failed (%s), retrying in %.1fs",
                    attempt,
                    self.retry_attempts,
                    last_error,
                    delay,
                )
                await asyncio.sleep(delay)

        raise NotificationError(last_error, target=f"telegram:{self.chat_id}")
