from __future__ import annotations

import typer
from rich.table import Table

from .. import console
from ..http import call
from .chain_cmd import NETWORK_OPTION

app = typer.Typer(help="Address lookups.")
script_app = typer.Typer(help="Script hash lookups.")


def _print_outputs(title: str, rows, json_out: bool) -> None:
    if json_out or not isinstance(rows, list):
        console.print_json(rows)
        return
    table = Table(title=title)
    table.add_column("tx_hash", style="bold")
    table.add_column("pos", justify="right")
    table.add_column("height", justify="right")
    table.add_column("value", justify="right")
    for row in rows:
        if not isinstance(row, dict):
            continue
        table.add_row(
            str(row.get("tx_hash") or "-"),
            str(row.get("tx_pos", "-")),
            str(row.get("height", "-")),
            str(row.get("value", "-")),
        )
    console.print(table)


@app.command("info")
def address_info(
        address: str = typer.Argument(..., help="Address."),
        network: str | None = NETWORK_OPTION,
):
    console.print_json(call(network, lambda c: c.address_info(address)))


@app.command("balance")
def balance(
        address: str = typer.Argument(..., help="Address."),
        network: str | None = NETWORK_OPTION,
):
    data = call(network, lambda c: c.balance(address))
    if isinstance(data, dict):
        console.print(f"confirmed={data.get('confirmed', 0)} unconfirmed={data.get('unconfirmed', 0)}")
        return
    console.print_json(data)


@app.command("history")
def history(
        address: str = typer.Argument(..., help="Address."),
        network: str | None = NETWORK_OPTION,
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    _print_outputs(f"History {address}", call(network, lambda c: c.history(address)), json_out)


@app.command("utxos")
def utxos(
        address: str = typer.Argument(..., help="Address."),
        network: str | None = NETWORK_OPTION,
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    _print_outputs(f"Unspent {address}", call(network, lambda c: c.utxos(address)), json_out)


@script_app.command("history")
def script_history(
        script_hash: str = typer.Argument(..., help="sha256 of the locking script, hex."),
        network: str | None = NETWORK_OPTION,
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    _print_outputs(f"History {script_hash}", call(network, lambda c: c.script_history(script_hash)), json_out)


@script_app.command("utxos")
def script_utxos(
        script_hash: str = typer.Argument(..., help="sha256 of the locking script, hex."),
        network: str | None = NETWORK_OPTION,
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    _print_outputs(f"Unspent {script_hash}", call(network, lambda c: c.script_utxos(script_hash)), json_out)
