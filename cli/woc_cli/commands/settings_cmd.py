from __future__ import annotations

import os

import typer
from woc_client.config_types import PROFILES, normalize_network

from .. import console
from ..config import config_path, default_config, load_config, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/woc/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        network: str = typer.Option("main", "--network", prompt="Network (main, test, stn)", help="Default network."),
        api_key: str = typer.Option("", "--api-key", help="WhatsOnChain API key (optional)."),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.network = normalize_network(network)
    cfg.api_key = api_key.strip()
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    key_state = "(set)" if cfg.api_key else "(empty)"
    console.console.print(
        f"network={cfg.network} profile={cfg.profile} api_key={key_state} timeout_ms={cfg.timeout_ms} "
        f"enable_cache={str(cfg.enable_cache).lower()} user_agent={cfg.user_agent or '-'}"
    )


@app.command("set")
def set_setting(
        network: str | None = typer.Option(None, "--network", help="Default network."),
        api_key: str | None = typer.Option(None, "--api-key", help="API key, empty string clears it."),
        user_agent: str | None = typer.Option(None, "--user-agent", help="User-Agent header value."),
        timeout_ms: int | None = typer.Option(None, "--timeout-ms", help="Request timeout in milliseconds."),
        enable_cache: bool | None = typer.Option(None, "--cache/--no-cache", help="Client-side response cache."),
        profile: str | None = typer.Option(None, "--profile", help="Endpoint profile: current or legacy."),
):
    cfg = load_config()
    if network is not None:
        cfg.network = normalize_network(network)
    if api_key is not None:
        cfg.api_key = api_key.strip()
    if user_agent is not None:
        cfg.user_agent = user_agent.strip()
    if timeout_ms is not None:
        if timeout_ms <= 0:
            console.err("--timeout-ms must be positive.")
            raise typer.Exit(code=2)
        cfg.timeout_ms = timeout_ms
    if enable_cache is not None:
        cfg.enable_cache = enable_cache
    if profile is not None:
        value = profile.strip().lower()
        if value not in PROFILES:
            console.err(f"Unknown profile: {profile}. Use {' or '.join(PROFILES)}.")
            raise typer.Exit(code=2)
        cfg.profile = value
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
