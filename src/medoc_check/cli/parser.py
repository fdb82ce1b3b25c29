"""CLI argument parser for medoc-check."""

import argparse
from argparse import Namespace

from medoc_check.config import GlobalConfig


class CLIParser:
    """Command-line argument parser for medoc-check."""

    def __init__(self, global_config: GlobalConfig) -> None:
        """Initialize the CLI parser with global configuration.

        Args:
            global_config: Loaded settings, used for option defaults.

        """
        self.global_config = global_config

    def parse_args(self, argv: list[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:]).

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="medoc-check",
            description="Classify scheduled M.E.Doc update runs from logs",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Check the last update run using settings.conf
  %(prog)s check

  # Check a specific logs directory, print JSON, ignore the checkpoint
  %(prog)s check --logs-dir "D:\\MEDOC\\LOG" --json --no-checkpoint

  # Re-evaluate everything triggered after a given moment
  %(prog)s check --since "23.10.2025 10:00:00"

  # Telegram bot token management (stored in the system keyring)
  %(prog)s auth --save-token
  %(prog)s auth --status

Exit codes: 0 success or no update, 1 error, 2 update failed.
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show medoc-check version and exit",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )
        self._add_check_command(subparsers)
        self._add_auth_command(subparsers)

    def _add_check_command(self, subparsers) -> None:
        """Add check command parser.

        Args:
            subparsers: The subparsers object to add the command to.

        """
        medoc = self.global_config["medoc"]
        check_parser = subparsers.add_parser(
            "check",
            help="Classify the most recent update run",
        )
        check_parser.add_argument(
            "--logs-dir",
            default=medoc["logs_dir"],
            help="Directory with Planner.log and update_<date>.log "
            "(default: [medoc] logs_dir)",
        )
        check_parser.add_argument(
            "--encoding",
            default=medoc["encoding"],
            help="Log text encoding (default: %(default)s)",
        )
        check_parser.add_argument(
            "--since",
            metavar="TIMESTAMP",
            help="Treat triggers at or before TIMESTAMP as processed "
            "(overrides the stored checkpoint)",
        )
        check_parser.add_argument(
            "--no-checkpoint",
            action="store_true",
            help="Neither read nor advance the stored checkpoint",
        )
        check_parser.add_argument(
            "--reset-checkpoint",
            action="store_true",
            help="Delete the stored checkpoint before checking",
        )
        notify_group = check_parser.add_mutually_exclusive_group()
        notify_group.add_argument(
            "--notify",
            dest="notify",
            action="store_true",
            default=None,
            help="Send a Telegram notification",
        )
        notify_group.add_argument(
            "--no-notify",
            dest="notify",
            action="store_false",
            help="Do not send a Telegram notification",
        )
        check_parser.add_argument(
            "--json",
            action="store_true",
            help="Print the outcome as JSON",
        )
        check_parser.add_argument(
            "--host",
            help="Machine label included in notifications",
        )

    def _add_auth_command(self, subparsers) -> None:
        auth_parser = subparsers.add_parser(
            "auth", help="Manage the Telegram bot token"
        )
        group = auth_parser.add_mutually_exclusive_group(required=True)
        group.add_argument(
            "--save-token",
            action="store_true",
            help="Save the bot token to the system keyring",
        )
        group.add_argument(
            "--remove-token",
            action="store_true",
            help="Remove the bot token from the system keyring",
        )
        group.add_argument(
            "--status",
            action="store_true",
            help="Show whether a bot token is configured",
        )
