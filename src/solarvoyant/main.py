"""
Main entry point for the solarvoyant analytics and solar estimation system.

Exposes the analytics, energy estimation and notification workflows on the
command line.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .core import Config, logger_from_config, LoggerContext
from .api import SolarvoyantAPI
from .services import AnalyticsService, CoefficientService, EnergyService, NotificationService


class SolarvoyantApp:
    """Main application wiring configuration, store client and services."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
        """
        self.config = Config(config_file)

        self.logger = logger_from_config(self.config)
        self.logger.info("=" * 60)
        self.logger.info("Solarvoyant Analytics and Solar Estimation")
        self.logger.info("=" * 60)
        self.logger.info(f"Configuration: {self.config}")

        self._api_client: Optional[SolarvoyantAPI] = None

    @property
    def api_client(self) -> SolarvoyantAPI:
        """Store client, created on first use so local analytics need no store."""
        if self._api_client is None:
            self._api_client = SolarvoyantAPI(
                base_url=self.config.store_base_url,
                timeout=self.config.store_timeout,
                max_retries=self.config.store_max_retries,
                verify_ssl=self.config.store_verify_ssl,
                logger=self.logger
            )
        return self._api_client

    def _coefficient_service(self) -> CoefficientService:
        return CoefficientService.from_config(self.api_client, self.config, self.logger)

    def analyse(
        self,
        input_file: Optional[str] = None,
        key: Optional[str] = None,
        aggregates: Optional[str] = None
    ) -> Dict[str, Any]:
        """Analyse a series read from a file or from the weather store."""
        with LoggerContext(self.logger, "analyse", source=key or input_file):
            if key:
                service = AnalyticsService(self.api_client, self.config, self.logger)
                result = service.analyse_key(key, aggregates)
            else:
                service = AnalyticsService(config=self.config, logger=self.logger)
                result = service.analyse(Path(input_file).read_text(), aggregates)
        return result.to_dict()

    def summarise(self, input_file: str) -> Dict[str, Any]:
        """Analyse a {"weather": ..., "query": ...} request body read from a file."""
        with LoggerContext(self.logger, "summarise", input=input_file):
            service = AnalyticsService(config=self.config, logger=self.logger)
            result = service.summarise(Path(input_file).read_text())
        return result.to_dict()

    def energy(self, user_id: str) -> Dict[str, Any]:
        """Estimate hourly production and consumption for a user."""
        with LoggerContext(self.logger, "energy estimate", user_id=user_id):
            service = EnergyService(
                self.api_client,
                self.config,
                coefficient_service=self._coefficient_service(),
                logger=self.logger
            )
            estimate = service.estimate_for_user(user_id)
        return estimate.to_dict()

    def notify(self, user_id: Optional[str] = None) -> Dict[str, Any]:
        """Run the notification flow for one user, or for every user."""
        with LoggerContext(self.logger, "notification run", user_id=user_id or "all"):
            service = NotificationService(
                self.api_client,
                self.config,
                coefficient_service=self._coefficient_service(),
                logger=self.logger
            )
            if user_id:
                users = [self.api_client.get_user(user_id)]
            else:
                users = None
            results = service.process_users(users)

        return {
            uid: notification.to_dict() if notification else None
            for uid, notification in results.items()
        }


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Solarvoyant weather analytics and solar estimation"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyse_parser = subparsers.add_parser("analyse", help="Aggregate every attribute of a series")
    source = analyse_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", type=str, help="Weather series JSON file")
    source.add_argument("--key", type=str, help="Weather store key of the series")
    analyse_parser.add_argument(
        "--aggregates",
        type=str,
        default=None,
        help="Comma-separated aggregates (default: all)"
    )

    summarise_parser = subparsers.add_parser(
        "summarise", help="Aggregate a series with a per-attribute query"
    )
    summarise_parser.add_argument(
        "--input", type=str, required=True, help="JSON file with weather and query components"
    )

    energy_parser = subparsers.add_parser("energy", help="Estimate hourly energy for a user")
    energy_parser.add_argument("--user-id", type=str, required=True, help="User ID")

    notify_parser = subparsers.add_parser("notify", help="Evaluate notification limits")
    notify_parser.add_argument(
        "--user-id", type=str, default=None, help="User ID (default: every user)"
    )

    args = parser.parse_args()

    try:
        app = SolarvoyantApp(config_file=args.config)
        if args.command == "analyse":
            output = app.analyse(args.input, args.key, args.aggregates)
        elif args.command == "summarise":
            output = app.summarise(args.input)
        elif args.command == "energy":
            output = app.energy(args.user_id)
        else:
            output = app.notify(args.user_id)
    except Exception as e:
        print(f"Application failed: {e}")
        sys.exit(1)

    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
