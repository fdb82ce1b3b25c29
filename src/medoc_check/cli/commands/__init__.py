"""Command handlers for the medoc-check CLI."""

from .auth import AuthHandler
from .base import BaseCommandHandler
from .check import CheckHandler

__all__ = ["AuthHandler", "BaseCommandHandler", "CheckHandler"]
