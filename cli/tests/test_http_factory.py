from __future__ import annotations

from woc_cli import config
from woc_cli.http import make_client


def test_make_client_maps_settings(monkeypatch) -> None:
    captured = {}

    class _FakeClient:
        def __init__(self, client_cfg):
            captured["cfg"] = client_cfg

    monkeypatch.setattr("woc_cli.http.WhatsOnChainClient", _FakeClient)
    cfg = config.AppConfig(network="test", api_key="abc", user_agent="", timeout_ms=1500, enable_cache=False)

    make_client(cfg)

    client_cfg = captured["cfg"]
    assert client_cfg.network == "test"
    assert client_cfg.api_key == "abc"
    assert client_cfg.user_agent is None
    assert client_cfg.timeout_ms == 1500
    assert client_cfg.enable_cache is False


def test_make_client_network_override(monkeypatch) -> None:
    captured = {}

    class _FakeClient:
        def __init__(self, client_cfg):
            captured["network"] = client_cfg.network
            captured["api_key"] = client_cfg.api_key

    monkeypatch.setattr("woc_cli.http.WhatsOnChainClient", _FakeClient)

    make_client(config.default_config(), network_override="mainnet")

    assert captured["network"] == "main"
    assert captured["api_key"] is None
