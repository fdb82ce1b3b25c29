"""Tests for the check command handler."""

import logging
from argparse import Namespace
from datetime import datetime
from unittest.mock import MagicMock

import orjson
import pytest
from log_samples import PLANNER_NO_TRIGGER_TEXT

from medoc_check.cli.commands.check import CheckHandler
from medoc_check.core.checkpoint import CheckpointStore
from medoc_check.exceptions import ConfigurationError, NotificationError

TRIGGER_TIME = datetime(2025, 10, 23, 10, 30, 15)


@pytest.fixture
def global_config(tmp_path):
    return {
        "config_version": "1.0.0",
        "log_level": "INFO",
        "console_log_level": "WARNING",
        "medoc": {"logs_dir": None, "encoding": "cp1251"},
        "checkpoint": {
            "enabled": True,
            "file": tmp_path / "state" / "checkpoint.json",
        },
        "telegram": {
            "enabled": False,
            "chat_id": "-100123",
            "notify_on_no_update": False,
        },
        "network": {"retry_attempts": 3, "timeout_seconds": 10},
    }


@pytest.fixture
def token_store():
    store = MagicMock()
    store.get.return_value = "123456789:secret"
    return store


@pytest.fixture
def handler(global_config, token_store):
    """CheckHandler with mocked configuration manager."""
    config_manager = MagicMock()
    config_manager.load_global_config.return_value = global_config
    return CheckHandler(config_manager, token_store)


@pytest.fixture
def telegram(mocker):
    """Patch notification delivery; returns the notifier instance mock."""
    mocker.patch("medoc_check.cli.commands.check.create_http_session")
    notifier_cls = mocker.patch(
        "medoc_check.cli.commands.check.TelegramNotifier"
    )
    notifier_cls.return_value.send = mocker.AsyncMock()
    return notifier_cls.return_value


def make_args(logs_dir, **overrides) -> Namespace:
    values = {
        "command": "check",
        "logs_dir": logs_dir,
        "encoding": "cp1251",
        "since": None,
        "no_checkpoint": False,
        "reset_checkpoint": False,
        "notify": None,
        "json": False,
        "host": None,
    }
    values.update(overrides)
    return Namespace(**values)


class TestCheckHandler:
    """Test suite for CheckHandler.execute."""

    @pytest.mark.asyncio
    async def test_success_prints_and_saves_checkpoint(
        self, handler, make_logs_dir, global_config, capsys
    ):
        """Test a successful run is printed and checkpointed."""
        await handler.execute(make_args(make_logs_dir()))

        assert "✅ M.E.Doc update succeeded" in capsys.readouterr().out
        store = CheckpointStore(global_config["checkpoint"]["file"])
        assert store.load() == TRIGGER_TIME

    @pytest.mark.asyncio
    async def test_second_run_is_no_update(self, handler, make_logs_dir, capsys):
        """Test the stored checkpoint suppresses a repeated report."""
        logs_dir = make_logs_dir()
        await handler.execute(make_args(logs_dir))
        capsys.readouterr()

        await handler.execute(make_args(logs_dir))

        assert "No new M.E.Doc update" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_failed_exits_with_code_2(
        self, handler, make_logs_dir, global_config
    ):
        """Test a failed update exits 2 and still advances the checkpoint."""
        with pytest.raises(SystemExit) as exc_info:
            await handler.execute(make_args(make_logs_dir(update=None)))

        assert exc_info.value.code == 2
        assert global_config["checkpoint"]["file"].exists()

    @pytest.mark.asyncio
    async def test_error_exits_with_code_1(self, handler, tmp_path):
        """Test an Error outcome exits 1 without a checkpoint."""
        with pytest.raises(SystemExit) as exc_info:
            await handler.execute(make_args(tmp_path / "missing"))
        assert exc_info.value.code == 1

    @pytest.mark.asyncio
    async def test_json_output(self, handler, make_logs_dir, capsys):
        """Test --json prints the outcome record."""
        await handler.execute(make_args(make_logs_dir(), json=True))

        data = orjson.loads(capsys.readouterr().out)
        assert data["status"] == "Success"
        assert data["error_id"] == 0
        assert data["update_duration_seconds"] == 159

    @pytest.mark.asyncio
    async def test_no_checkpoint_flag(
        self, handler, make_logs_dir, global_config
    ):
        """Test --no-checkpoint neither reads nor writes the store."""
        await handler.execute(make_args(make_logs_dir(), no_checkpoint=True))
        assert not global_config["checkpoint"]["file"].exists()

    @pytest.mark.asyncio
    async def test_reset_checkpoint(self, handler, make_logs_dir, capsys):
        """Test --reset-checkpoint re-evaluates a processed trigger."""
        logs_dir = make_logs_dir()
        await handler.execute(make_args(logs_dir))
        capsys.readouterr()

        await handler.execute(make_args(logs_dir, reset_checkpoint=True))

        assert "update succeeded" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_since_overrides_checkpoint(
        self, handler, make_logs_dir, capsys
    ):
        """Test --since marks older triggers as processed."""
        await handler.execute(
            make_args(make_logs_dir(), since="23.10.2025 11:00:00")
        )
        assert "No new M.E.Doc update" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_invalid_since(self, handler, make_logs_dir):
        """Test an unparseable --since is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            await handler.execute(make_args(make_logs_dir(), since="soon"))
        assert exc_info.value.target == "--since"

    @pytest.mark.asyncio
    async def test_unknown_encoding(self, handler, make_logs_dir):
        """Test an unknown encoding propagates as ConfigurationError."""
        with pytest.raises(ConfigurationError):
            await handler.execute(
                make_args(make_logs_dir(), encoding="klingon-8")
            )

    @pytest.mark.asyncio
    async def test_reset_with_bad_encoding_keeps_checkpoint(
        self, handler, make_logs_dir, global_config
    ):
        """Test bad settings fail before the checkpoint is cleared."""
        logs_dir = make_logs_dir()
        await handler.execute(make_args(logs_dir))
        store = CheckpointStore(global_config["checkpoint"]["file"])
        assert store.load() == TRIGGER_TIME

        with pytest.raises(ConfigurationError):
            await handler.execute(
                make_args(
                    logs_dir, encoding="klingon-8", reset_checkpoint=True
                )
            )

        assert store.load() == TRIGGER_TIME


class TestCheckNotifications:
    """Tests for Telegram notification decisions."""

    @pytest.mark.asyncio
    async def test_notify_flag_sends_message(
        self, handler, make_logs_dir, telegram
    ):
        """Test --notify sends the formatted outcome."""
        await handler.execute(
            make_args(make_logs_dir(), notify=True, host="ACC-01")
        )

        telegram.send.assert_awaited_once()
        message = telegram.send.await_args.args[0]
        assert message.startswith("✅ M.E.Doc update succeeded")
        assert "Host: ACC-01" in message

    @pytest.mark.asyncio
    async def test_disabled_by_default(self, handler, make_logs_dir, telegram):
        """Test nothing is sent while telegram is disabled."""
        await handler.execute(make_args(make_logs_dir()))
        telegram.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_enabled_in_config(
        self, handler, make_logs_dir, global_config, telegram
    ):
        """Test the telegram.enabled setting turns notifications on."""
        global_config["telegram"]["enabled"] = True
        await handler.execute(make_args(make_logs_dir()))
        telegram.send.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_no_notify_overrides_config(
        self, handler, make_logs_dir, global_config, telegram
    ):
        """Test --no-notify wins over settings.conf."""
        global_config["telegram"]["enabled"] = True
        await handler.execute(make_args(make_logs_dir(), notify=False))
        telegram.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_update_not_sent_by_default(
        self, handler, make_logs_dir, global_config, telegram
    ):
        """Test routine NoUpdate outcomes stay quiet."""
        logs_dir = make_logs_dir(planner=PLANNER_NO_TRIGGER_TEXT)
        await handler.execute(make_args(logs_dir, notify=True))
        telegram.send.assert_not_awaited()

        global_config["telegram"]["notify_on_no_update"] = True
        await handler.execute(make_args(logs_dir, notify=True))
        telegram.send.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_token_skips(
        self, handler, make_logs_dir, token_store, telegram, caplog
    ):
        """Test a missing token only logs a warning."""
        token_store.get.return_value = None
        with caplog.at_level(logging.WARNING):
            await handler.execute(make_args(make_logs_dir(), notify=True))

        telegram.send.assert_not_awaited()
        assert "notification skipped" in caplog.text

    @pytest.mark.asyncio
    async def test_delivery_failure_does_not_change_exit(
        self, handler, make_logs_dir, telegram, caplog
    ):
        """Test a delivery error is logged and the run still succeeds."""
        telegram.send.side_effect = NotificationError(
            "HTTP 400: chat not found", target="telegram:-100123"
        )
        with caplog.at_level(logging.ERROR):
            await handler.execute(make_args(make_logs_dir(), notify=True))

        assert "chat not found" in caplog.text
