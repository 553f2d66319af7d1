#!/usr/bin/env python3
"""
PorkDyn - Command Line Interface

Runs a single dynamic DNS update from the command line.
"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from ..config import configure_logging, load_config
from ..core.dns_manager import ADDRESS_PARAMETERS, DNSManager
from ..exceptions import ConfigError, PorkDynError
from ..models import CombinedResult, OutcomeKind, OverallStatus

console = Console()
logger = logging.getLogger(__name__)

OUTCOME_STYLES = {
    OutcomeKind.CREATED: "green",
    OutcomeKind.UPDATED: "yellow",
    OutcomeKind.SKIPPED: "blue",
    OutcomeKind.FAILED: "red",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="PorkDyn - Update Porkbun A/AAAA records to the given addresses"
    )

    parser.add_argument(
        "--config",
        "-c",
        default="configs/config.yaml",
        help="Configuration file path (default: configs/config.yaml)",
    )
    parser.add_argument("--apikey", help="Porkbun API key")
    parser.add_argument("--secretapikey", help="Porkbun secret API key")
    parser.add_argument("--domain", "-d", help="Qualified domain name, e.g. home.example.com")
    parser.add_argument("--ip", help="IPv4 address for the A record")
    parser.add_argument("--ipv6", help="IPv6 address for the AAAA record")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def display_result(result: CombinedResult):
    """Display the per-family outcomes."""
    table = Table(title="DNS Update Summary")
    table.add_column("Record", style="cyan")
    table.add_column("Parameter", style="magenta")
    table.add_column("Outcome")
    table.add_column("Record ID", style="white")

    for record_type, outcome in result.outcomes.items():
        style = OUTCOME_STYLES[outcome.kind]
        table.add_row(
            record_type.value,
            ADDRESS_PARAMETERS[record_type],
            f"[{style}]{outcome.describe()}[/{style}]",
            outcome.record_id or "-",
        )

    console.print(table)


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    if args.verbose:
        config["logging"] = dict(config.get("logging") or {}, level="DEBUG")
    configure_logging(config)

    request = {
        "apikey": args.apikey,
        "secretapikey": args.secretapikey,
        "domain": args.domain,
        "ip": args.ip,
        "ipv6": args.ipv6,
    }

    try:
        result = DNSManager(config).run(request)
    except PorkDynError as e:
        print(json.dumps({"status": OverallStatus.ERROR.value, "message": str(e)}))
        sys.exit(1)

    display_result(result)
    print(json.dumps(result.to_response()))
    sys.exit(0 if result.overall_status is OverallStatus.SUCCESS else 1)


if __name__ == "__main__":
    main()
