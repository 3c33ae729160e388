from __future__ import annotations

import typer
from rich.table import Table

from .. import console
from ..http import call

NETWORK_OPTION = typer.Option(None, "-n", "--network", help="main, test or stn (overrides settings).")


def status(network: str | None = NETWORK_OPTION):
    """Check that the API is up."""
    if call(network, lambda c: c.status()):
        console.ok("WhatsOnChain API is up.")
        return
    console.err("WhatsOnChain API did not answer with the expected status.")
    raise typer.Exit(code=1)


def info(
        network: str | None = NETWORK_OPTION,
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Chain state for the selected network."""
    data = call(network, lambda c: c.chain_info())
    if json_out or not isinstance(data, dict):
        console.print_json(data)
        return
    table = Table(title="Chain info")
    table.add_column("field", style="bold")
    table.add_column("value")
    for key in ("chain", "blocks", "headers", "bestblockhash", "difficulty", "mediantime", "chainwork"):
        if key in data:
            table.add_row(key, str(data[key]))
    console.print(table)


def supply(network: str | None = NETWORK_OPTION):
    """Circulating supply."""
    console.print(str(call(network, lambda c: c.circulating_supply())))


def mempool(
        network: str | None = NETWORK_OPTION,
        txids: bool = typer.Option(False, "--txids", help="List mempool transaction ids instead of the summary."),
):
    """Mempool summary or transaction ids."""
    if txids:
        console.print_json(call(network, lambda c: c.mempool_txs()))
        return
    console.print_json(call(network, lambda c: c.mempool_info()))


def rate(
        network: str | None = NETWORK_OPTION,
        from_ts: int | None = typer.Option(None, "--from", help="Unix timestamp, switches to historical rates."),
        to_ts: int | None = typer.Option(None, "--to", help="Unix timestamp, switches to historical rates."),
):
    """Exchange rate (current, or historical with --from/--to)."""
    if from_ts is None and to_ts is None:
        console.print_json(call(network, lambda c: c.exchange_rate()))
        return
    console.print_json(call(network, lambda c: c.historical_exchange_rate(from_ts, to_ts)))


def search(
        query: str = typer.Argument(..., help="Block hash, txid or address."),
        network: str | None = NETWORK_OPTION,
):
    """Explorer links for a block hash, txid or address."""
    console.print_json(call(network, lambda c: c.search(query)))
