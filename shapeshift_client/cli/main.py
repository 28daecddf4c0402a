"""CLI entry point for the ShapeShift client.

Usage:
    shapeshift coins
    shapeshift rate btc_ltc --output json
    shapeshift market-info btc ltc
    shapeshift recent --max 20
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..client import ShapeShiftClient
from ..core.exceptions import ShapeShiftError
from ..output.formatters import JSONFormatter, TableFormatter

# Initialize app
app = typer.Typer(
    name="shapeshift",
    help="Query the ShapeShift exchange API",
    add_completion=False,
)

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
    )


def make_client() -> ShapeShiftClient:
    """Build a client from environment configuration."""
    return ShapeShiftClient()


def _emit(records, output: str, title: str) -> None:
    if output.lower() == "json":
        print(JSONFormatter().format(records))
    else:
        print(TableFormatter(title=title).format(records), end="")


def _run(fetch, output: str, title: str, verbose: bool) -> None:
    setup_logging(verbose)
    try:
        with make_client() as client:
            records = fetch(client)
    except ShapeShiftError as e:
        console.print(f"[red]Error: {e.message}[/]")
        raise typer.Exit(1)
    _emit(records, output, title)


OutputOption = typer.Option("table", "--output", "-o", help="Output format: table, json")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Enable verbose logging")


@app.command()
def coins(output: str = OutputOption, verbose: bool = VerboseOption) -> None:
    """List every supported coin."""
    _run(lambda c: c.get_all_coins(), output, "Coins", verbose)


@app.command()
def coin(
    symbol: str = typer.Argument(..., help="Ticker symbol, e.g. BTC"),
    output: str = OutputOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show one coin from the catalog."""
    _run(lambda c: c.get_coin(symbol), output, symbol, verbose)


@app.command()
def pairs(output: str = OutputOption, verbose: bool = VerboseOption) -> None:
    """List every trading pair between available coins."""
    _run(lambda c: c.get_all_pairs(), output, "Trading Pairs", verbose)


@app.command()
def rate(
    pair: str = typer.Argument(..., help="Pair token (btc_ltc) or first ticker"),
    ticker2: Optional[str] = typer.Argument(None, help="Second ticker"),
    output: str = OutputOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show the exchange rate for a pair."""
    _run(lambda c: c.get_exchange_rate(pair, ticker2), output, "Rate", verbose)


@app.command()
def limit(
    pair: str = typer.Argument(..., help="Pair token (btc_ltc) or first ticker"),
    ticker2: Optional[str] = typer.Argument(None, help="Second ticker"),
    output: str = OutputOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show the deposit limit for a pair."""
    _run(lambda c: c.get_trade_limit(pair, ticker2), output, "Limit", verbose)


@app.command("market-info")
def market_info(
    pair: str = typer.Argument(..., help="Pair token (btc_ltc) or first ticker"),
    ticker2: Optional[str] = typer.Argument(None, help="Second ticker"),
    output: str = OutputOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show rate, limit, minimum and miner fee for a pair."""
    _run(lambda c: c.get_market_info(pair, ticker2), output, "Market Info", verbose)


@app.command()
def recent(
    max_transactions: int = typer.Option(5, "--max", "-m", help="Number of transactions (1-50)"),
    output: str = OutputOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show recent exchanges on the public feed."""
    _run(
        lambda c: c.get_recent_transactions(max_transactions),
        output,
        "Recent Transactions",
        verbose,
    )


@app.command()
def status(
    address: str = typer.Argument(..., help="Deposit address"),
    output: str = OutputOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show the status of a deposit address."""
    _run(lambda c: c.get_transaction_status(address), output, "Transaction Status", verbose)


@app.command("time-remaining")
def time_remaining(
    address: str = typer.Argument(..., help="Deposit address"),
    output: str = OutputOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show time left on a pending deposit address."""
    _run(lambda c: c.check_time_remaining(address), output, "Time Remaining", verbose)


@app.command()
def validate(
    address: str = typer.Argument(..., help="Address to check"),
    symbol: str = typer.Argument(..., help="Coin ticker symbol"),
    output: str = OutputOption,
    verbose: bool = VerboseOption,
) -> None:
    """Check that an address is valid for a coin."""
    _run(lambda c: c.validate_address(address, symbol), output, "Address Validation", verbose)


@app.command()
def version() -> None:
    """Show version information."""
    from .. import __version__
    console.print(f"shapeshift-client v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
