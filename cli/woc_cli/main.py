from __future__ import annotations

import typer

from .commands import chain_cmd, settings_cmd
from .commands.address_cmd import app as address_app
from .commands.address_cmd import script_app
from .commands.block_cmd import app as block_app
from .commands.tx_cmd import app as tx_app
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="woc",
        help="WhatsOnChain CLI",
        no_args_is_help=True,
    )

    app.command("status")(chain_cmd.status)
    app.command("info")(chain_cmd.info)
    app.command("supply")(chain_cmd.supply)
    app.command("mempool")(chain_cmd.mempool)
    app.command("rate")(chain_cmd.rate)
    app.command("search")(chain_cmd.search)
    app.add_typer(block_app, name="block")
    app.add_typer(tx_app, name="tx")
    app.add_typer(address_app, name="address")
    app.add_typer(script_app, name="script")
    app.add_typer(settings_cmd.app, name="settings")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
