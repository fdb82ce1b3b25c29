"""Check command handler: classify, report, checkpoint, notify."""

import logging
import sys
from argparse import Namespace

import orjson

from medoc_check.core.checkpoint import CheckpointStore
from medoc_check.core.classifier import UpdateOperationClassifier
from medoc_check.core.notify import TelegramNotifier, create_http_session
from medoc_check.domain.types import UpdateOutcome, UpdateStatus, exit_code_for
from medoc_check.exceptions import (
    CheckpointError,
    ConfigurationError,
    NotificationError,
)
from medoc_check.logger import get_logger
from medoc_check.ui.formatters import format_outcome_message, outcome_log_level
from medoc_check.utils.datetime_utils import parse_checkpoint_argument

from .base import BaseCommandHandler

logger = get_logger(__name__)

# Outcomes whose trigger is considered handled once reported
_CHECKPOINT_STATUSES = frozenset({UpdateStatus.SUCCESS, UpdateStatus.FAILED})


class CheckHandler(BaseCommandHandler):
    """Handler for the check command."""

    async def execute(self, args: Namespace) -> None:
        """Classify the latest update run and act on the outcome.

        Exits the process with the outcome's exit code when it is
        non-zero.

        Raises:
            ConfigurationError: If the logs directory, encoding or
                --since value is invalid

        """
        # Validate logs_dir and encoding before touching stored state
        classifier = UpdateOperationClassifier(args.logs_dir, args.encoding)

        store = self._checkpoint_store(args)
        if store is not None and args.reset_checkpoint:
            store.clear()

        checkpoint = None
        if args.since:
            try:
                checkpoint = parse_checkpoint_argument(args.since)
            except ValueError as e:
                raise ConfigurationError(str(e), target="--since") from e
        elif store is not None:
            checkpoint = store.load()

        outcome = classifier.classify(checkpoint)
        message = format_outcome_message(outcome, host=args.host)

        logger.log(outcome_log_level(outcome), "%s", message)
        if args.json:
            payload = orjson.dumps(
                outcome.to_dict(), option=orjson.OPT_INDENT_2
            )
            print(payload.decode())
        elif outcome_log_level(outcome) < self._console_threshold():
            # Console handler would hide it; the operator still needs it
            print(message)

        if store is not None and outcome.status in _CHECKPOINT_STATUSES:
            try:
                store.save(outcome)
            except CheckpointError as e:
                logger.error("%s", e)  # noqa: TRY400

        if self._should_notify(args, outcome):
            await self._notify(message)

        code = exit_code_for(outcome.status)
        if code:
            sys.exit(code)

    def _checkpoint_store(self, args: Namespace) -> CheckpointStore | None:
        settings = self.global_config["checkpoint"]
        if args.no_checkpoint or not settings["enabled"]:
            return None
        return CheckpointStore(settings["file"])

    def _console_threshold(self) -> int:
        return getattr(
            logging, self.global_config["console_log_level"], logging.WARNING
        )

    def _should_notify(self, args: Namespace, outcome: UpdateOutcome) -> bool:
        telegram = self.global_config["telegram"]
        enabled = telegram["enabled"] if args.notify is None else args.notify
        if not enabled:
            return False
        if outcome.status is UpdateStatus.NO_UPDATE:
            return telegram["notify_on_no_update"]
        return True

    async def _notify(self, message: str) -> None:
        """Send the message; delivery problems never change the exit code."""
        chat_id = self.global_config["telegram"]["chat_id"]
        token = self.token_store.get()
        if not token or not chat_id:
            logger.warning(
                "Telegram notification skipped: bot token or chat_id "
                "not configured"
            )
            return

        async with create_http_session(self.global_config) as session:
            notifier = TelegramNotifier(
                session,
                token,
                chat_id,
                retry_attempts=self.global_config["network"]["retry_attempts"],
            )
            try:
                await notifier.send(message)
            except NotificationError as e:
                logger.error("%s", e)  # noqa: TRY400
            else:
                logger.debug("Notification sent")
