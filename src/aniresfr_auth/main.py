"""
Command line entry point for the NGO portal authentication client.

Runs a login or registration attempt and prints the form feedback to the
console.
"""

import argparse
import getpass
import sys
from typing import List, Optional

from .core import Config, setup_logger, LoggerContext
from .api import AniresfrAPI
from .models import ButtonState
from .services import AuthOrchestrator
from .session import BrowserNavigator, JsonFileSessionStore, Navigator, RecordingNavigator


class AuthApp:
    """Wires configuration, backend client and session capabilities together."""

    def __init__(self, config_file: Optional[str] = None, log_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
            log_file: Path to log file
        """
        self.config = Config(config_file)
        self.logger = setup_logger(log_file=log_file)
        self.logger.info(f"Configuration: {self.config}")

        self.api_client: Optional[AniresfrAPI] = None
        self.orchestrator: Optional[AuthOrchestrator] = None

    def build_navigator(self) -> Navigator:
        """Open the portal in a browser when its URL is configured."""
        if self.config.portal_url:
            return BrowserNavigator(self.config.portal_url, logger=self.logger)
        return RecordingNavigator(logger=self.logger)

    def initialize_components(self) -> None:
        """Initialize all application components."""
        self.api_client = AniresfrAPI.from_config(self.config, logger=self.logger)
        self.orchestrator = AuthOrchestrator(
            api_client=self.api_client,
            session_store=JsonFileSessionStore(self.config.session_store_file, logger=self.logger),
            navigator=self.build_navigator(),
            token_key=self.config.session_token_key,
            logger=self.logger
        )

    @staticmethod
    def report_error(message: str) -> None:
        if message:
            print(f"Error: {message}", file=sys.stderr)

    @staticmethod
    def report_button_state(state: ButtonState) -> None:
        print(f"[{state.value}]")

    def run(self, args: argparse.Namespace) -> bool:
        """
        Run the requested command.

        Args:
            args: Parsed command line arguments

        Returns:
            True if the attempt succeeded
        """
        self.initialize_components()
        if self.orchestrator is None:
            raise RuntimeError("Components not properly initialized")

        password = args.password or getpass.getpass("Password: ")

        try:
            with LoggerContext(self.logger, args.command) as attempt:
                if args.command == "login":
                    outcome = self.orchestrator.login(
                        args.email,
                        password,
                        self.report_error,
                        self.report_button_state
                    )
                else:
                    outcome = self.orchestrator.registration(
                        args.org_name,
                        args.phone_number,
                        args.email,
                        args.emergency_contact,
                        password,
                        args.location,
                        args.website,
                        args.latitude,
                        args.longitude,
                        self.report_error,
                        self.report_button_state
                    )
                attempt.record(outcome)
        finally:
            if self.api_client:
                self.api_client.close()

        return outcome.ok


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Aniresfr NGO portal login and registration"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Path to log file"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    login_parser = subparsers.add_parser("login", help="Log in to an NGO account")
    login_parser.add_argument("--email", required=True)
    login_parser.add_argument("--password", help="Prompted for when omitted")

    register_parser = subparsers.add_parser("register", help="Register a new NGO")
    register_parser.add_argument("--org-name", required=True)
    register_parser.add_argument("--phone-number", required=True)
    register_parser.add_argument("--email", required=True)
    register_parser.add_argument("--emergency-contact", required=True)
    register_parser.add_argument("--password", help="Prompted for when omitted")
    register_parser.add_argument("--location", default="")
    register_parser.add_argument("--website", default="")
    register_parser.add_argument("--latitude", type=float, required=True)
    register_parser.add_argument("--longitude", type=float, required=True)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        app = AuthApp(config_file=args.config, log_file=args.log_file)
        succeeded = app.run(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    if not succeeded:
        sys.exit(1)


if __name__ == "__main__":
    main()
