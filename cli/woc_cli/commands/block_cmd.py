from __future__ import annotations

import typer

from .. import console
from ..http import call
from .chain_cmd import NETWORK_OPTION

app = typer.Typer(help="Block lookups.")


@app.command("get")
def get_block(
        block_hash: str | None = typer.Option(None, "--hash", help="Block hash."),
        height: int | None = typer.Option(None, "--height", help="Block height."),
        page: int | None = typer.Option(None, "--page", help="Transaction page (hash only, blocks over 1000 txs)."),
        stats: bool = typer.Option(False, "--stats", help="Show block stats instead of block details."),
        network: str | None = NETWORK_OPTION,
):
    if (block_hash is None) == (height is None):
        console.err("Pass exactly one of --hash or --height.")
        raise typer.Exit(code=2)
    if page is not None:
        if block_hash is None:
            console.err("--page needs --hash.")
            raise typer.Exit(code=2)
        console.print_json(call(network, lambda c: c.block_hash_by_page(block_hash, page)))
        return

    if block_hash is not None:
        fetch = (lambda c: c.block_hash_stats(block_hash)) if stats else (lambda c: c.block_hash(block_hash))
    else:
        fetch = (lambda c: c.block_height_stats(height)) if stats else (lambda c: c.block_height(height))
    console.print_json(call(network, fetch))


@app.command("header")
def get_header(
        block_hash: str = typer.Argument(..., help="Block hash."),
        network: str | None = NETWORK_OPTION,
):
    console.print_json(call(network, lambda c: c.block_header_by_hash(block_hash)))


@app.command("headers")
def headers(network: str | None = NETWORK_OPTION):
    """Last 10 block headers."""
    console.print_json(call(network, lambda c: c.block_headers()))
