"""
Command-line interface
Quick checks of a MizbanCloud configuration:
- effective settings
- wallet, catalog, domains and servers listings
"""

import argparse
import asyncio
import sys
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from mizbancloud.api.exceptions import MizbanCloudError
from mizbancloud.client import MizbanCloud
from mizbancloud.factory import create_client
from mizbancloud.utils.config import Settings, get_settings
from mizbancloud.utils.logger import get_logger

logger = get_logger(__name__)

console = Console()


# Command name -> (description, resource call, table columns)
LISTINGS: Dict[str, tuple] = {
    "wallet": (
        "Show wallet balance",
        lambda client: client.auth.get_wallet(),
        ["balance", "currency"],
    ),
    "datacenters": (
        "List datacenters",
        lambda client: client.statics.list_datacenters(),
        ["id", "name", "location", "country", "status"],
    ),
    "os-list": (
        "List operating systems",
        lambda client: client.statics.list_operating_systems(),
        ["id", "name", "version", "family"],
    ),
    "domains": (
        "List CDN domains",
        lambda client: client.cdn.list_domains(),
        ["id", "name", "status", "plan_name", "ssl_status"],
    ),
    "servers": (
        "List cloud servers",
        lambda client: client.cloud.list_servers(),
        ["id", "name", "status", "cpu", "ram", "ip_address"],
    ),
}


def mask_token(token: Optional[str]) -> str:
    """Show only the edges of a token"""
    if not token:
        return "-"
    if len(token) <= 12:
        return "*" * len(token)
    return f"{token[:8]}...{token[-4:]}"


def render_table(title: str, rows: List[Dict[str, Any]], columns: Sequence[str]) -> Table:
    """
    Build a rich table from envelope data.

    Args:
        title: Table title
        rows: List of records (dicts)
        columns: Keys to display, in order

    Returns:
        rich Table
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")
    for column in columns:
        table.add_column(column, style="cyan" if column == "id" else None)

    for row in rows:
        table.add_row(*[
            "-" if row.get(column) is None else str(row.get(column))
            for column in columns
        ])

    return table


def cmd_config(settings: Settings) -> int:
    """Print the effective settings"""
    info_table = Table(show_header=False, box=None)
    info_table.add_row("[cyan]Auth URL:[/cyan]", f"[blue]{settings.auth_base_url}[/blue]")
    info_table.add_row("[cyan]CDN URL:[/cyan]", f"[blue]{settings.cdn_base_url}[/blue]")
    info_table.add_row("[cyan]Cloud URL:[/cyan]", f"[blue]{settings.cloud_base_url}[/blue]")
    info_table.add_row("[cyan]Timeout:[/cyan]", f"{settings.timeout} ms")
    info_table.add_row("[cyan]Language:[/cyan]", f"[yellow]{settings.language}[/yellow]")
    info_table.add_row("[cyan]API Token:[/cyan]", f"[green]{mask_token(settings.api_token)}[/green]")

    console.print(info_table)
    return 0


async def run_listing(
    client: MizbanCloud,
    name: str,
    call: Callable[[MizbanCloud], Awaitable[Dict[str, Any]]],
    columns: Sequence[str]
) -> int:
    """
    Run one listing command and print its result.

    Returns:
        Process exit code
    """
    try:
        envelope = await call(client)
    except MizbanCloudError as e:
        console.print(Panel(
            f"[bold red]❌ API Error[/bold red]\n\n{e}",
            title="Error",
            border_style="red"
        ))
        return 1
    finally:
        await client.aclose()

    data = envelope.get("data") if isinstance(envelope, dict) else None
    rows = data if isinstance(data, list) else ([data] if isinstance(data, dict) else [])

    console.print(render_table(name, rows, columns))
    if isinstance(envelope, dict) and envelope.get("total") is not None:
        console.print(f"[dim]Total: {envelope['total']}[/dim]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mizbancloud",
        description="MizbanCloud CDN & Cloud API client"
    )
    parser.add_argument("--token", help="API token (overrides MIZBANCLOUD_API_TOKEN)")
    parser.add_argument("--language", choices=["en", "fa"], help="Response language")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("config", help="Show effective configuration")
    for name, (description, _, _) in LISTINGS.items():
        subparsers.add_parser(name, help=description)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides: Dict[str, Any] = {}
    if args.token:
        overrides["api_token"] = args.token
    if args.language:
        overrides["language"] = args.language
    if args.log_level:
        overrides["log_level"] = args.log_level

    settings = get_settings()
    if overrides:
        settings = settings.model_copy(update=overrides)

    if args.command == "config":
        return cmd_config(settings)

    description, call, columns = LISTINGS[args.command]
    logger.debug(f"Running command: {args.command}")

    client = create_client(settings)
    return asyncio.run(run_listing(client, description, call, columns))


if __name__ == "__main__":
    sys.exit(main())
