from __future__ import annotations

import typer

from .. import console
from ..http import call
from .chain_cmd import NETWORK_OPTION

app = typer.Typer(help="Transaction lookups and broadcast.")


@app.command("get")
def get_tx(
        txid: str = typer.Argument(..., help="Transaction id."),
        network: str | None = NETWORK_OPTION,
):
    console.print_json(call(network, lambda c: c.tx_hash(txid)))


@app.command("raw")
def raw_tx(
        txid: str = typer.Argument(..., help="Transaction id."),
        output: int | None = typer.Option(None, "--output", help="Only this output index."),
        network: str | None = NETWORK_OPTION,
):
    if output is None:
        data = call(network, lambda c: c.raw_tx_data(txid))
    else:
        data = call(network, lambda c: c.raw_tx_output_data(txid, output))
    console.print(str(data))


@app.command("proof")
def proof(
        txid: str = typer.Argument(..., help="Transaction id."),
        network: str | None = NETWORK_OPTION,
):
    console.print_json(call(network, lambda c: c.merkle_proof(txid)))


@app.command("decode")
def decode(
        txhex: str = typer.Argument(..., help="Raw transaction hex."),
        network: str | None = NETWORK_OPTION,
):
    console.print_json(call(network, lambda c: c.decode_tx(txhex)))


@app.command("broadcast")
def broadcast(
        txhex: str = typer.Argument(..., help="Raw transaction hex."),
        network: str | None = NETWORK_OPTION,
):
    txid = call(network, lambda c: c.broadcast(txhex))
    console.ok(f"Broadcast accepted: {txid}")
