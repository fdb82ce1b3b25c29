"""Notification delivery for classified update outcomes."""

from medoc_check.core.notify.http_session import create_http_session
from medoc_check.core.notify.telegram import TelegramNotifier

__all__ = ["TelegramNotifier", "create_http_session"]
