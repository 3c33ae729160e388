from __future__ import annotations

from typing import Any, Callable

import typer
from woc_client import NetworkError, RequestSetupError, ServerError, WhatsOnChainClient
from woc_client.config_types import ClientConfig

from . import console
from .config import AppConfig, load_config


def make_client(cfg: AppConfig, *, network_override: str | None = None) -> WhatsOnChainClient:
    return WhatsOnChainClient(
        ClientConfig(
            network=network_override or cfg.network,
            timeout_ms=cfg.timeout_ms,
            user_agent=cfg.user_agent or None,
            api_key=cfg.api_key or None,
            enable_cache=cfg.enable_cache,
            profile=cfg.profile,
        )
    )


def call(network: str | None, fn: Callable[[WhatsOnChainClient], Any]) -> Any:
    """Run one API call with a client built from local settings; exit 1 on failure."""
    client = make_client(load_config(), network_override=network)
    try:
        return fn(client)
    except ServerError as exc:
        console.err(f"WhatsOnChain returned {exc.status_code}: {exc}")
        raise typer.Exit(code=1)
    except NetworkError as exc:
        console.err(f"Request failed: {exc}")
        raise typer.Exit(code=1)
    except RequestSetupError as exc:
        console.err(str(exc))
        raise typer.Exit(code=2)
    finally:
        client.close()
