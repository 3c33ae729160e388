from __future__ import annotations

import json

import httpx
import pytest

from woc_client import RequestSetupError, ServerError, WhatsOnChainClient
from woc_client.endpoints import BULK_LIMIT

KNOWN_BLOCK = "000000000000000004a288072ebb35e37233f419918f9783d499979cb6ac33eb"


def test_status_true_only_for_sentinel(make_client, recorder) -> None:
    recorder.routes["/v1/bsv/main/woc"] = httpx.Response(200, text="Whats On Chain")
    assert make_client().status() is True


@pytest.mark.parametrize("body", ["Whats On Chain!", "", "maintenance"])
def test_status_false_for_other_bodies(make_client, recorder, body) -> None:
    recorder.routes["/v1/bsv/main/woc"] = httpx.Response(200, text=body)
    assert make_client().status() is False


def test_block_lookup_returns_object(make_client, recorder) -> None:
    recorder.routes[f"/v1/bsv/main/block/hash/{KNOWN_BLOCK}"] = httpx.Response(
        200, json={"hash": KNOWN_BLOCK, "height": 575191, "txcount": 1520}
    )
    recorder.routes["/v1/bsv/main/block/height/575191"] = httpx.Response(
        200, json={"hash": KNOWN_BLOCK, "height": 575191}
    )
    client = make_client()

    by_hash = client.block_hash(KNOWN_BLOCK)
    by_height = client.block_height(575191)

    assert isinstance(by_hash, dict) and by_hash["height"] == 575191
    assert by_height["hash"] == KNOWN_BLOCK


def test_unknown_block_raises_server_error(make_client, recorder) -> None:
    recorder.routes["/v1/bsv/main/block/hash/not-a-block"] = httpx.Response(404, text="Not Found")
    with pytest.raises(ServerError) as exc_info:
        make_client().block_hash("not-a-block")
    assert exc_info.value.status_code == 404


def test_broadcast_invalid_hex_is_server_error(make_client, recorder) -> None:
    recorder.routes["/v1/bsv/main/tx/raw"] = httpx.Response(
        400, text="unexpected response code 500: 16: bad-txns-inputs-missingorspent"
    )
    client = make_client()

    with pytest.raises(ServerError) as exc_info:
        client.broadcast("zz")

    assert "bad-txns" in str(exc_info.value)
    assert json.loads(recorder.last.content) == {"txhex": "zz"}


@pytest.mark.parametrize(
    "call, method, path",
    [
        (lambda c: c.chain_tips(), "GET", "chain/tips"),
        (lambda c: c.circulating_supply(), "GET", "circulatingsupply"),
        (lambda c: c.block_hash_by_page("bh", 2), "GET", "block/hash/bh/page/2"),
        (lambda c: c.block_header_by_hash("bh"), "GET", "block/bh/header"),
        (lambda c: c.block_headers_resources(), "GET", "block/headers/resources"),
        (lambda c: c.block_height_stats(100), "GET", "block/height/100/stats"),
        (lambda c: c.tx_propagation("t1"), "GET", "tx/hash/t1/propagation"),
        (lambda c: c.raw_tx_output_data("t1", 3), "GET", "tx/t1/out/3/hex"),
        (lambda c: c.merkle_proof("t1"), "GET", "tx/t1/proof"),
        (lambda c: c.op_return_by_tx_hash("t1"), "GET", "tx/t1/opreturn"),
        (lambda c: c.mempool_txs(), "GET", "mempool/raw"),
        (lambda c: c.address_used("1A"), "GET", "address/1A/used"),
        (lambda c: c.utxos("1A"), "GET", "address/1A/unspent"),
        (lambda c: c.script_history("sh"), "GET", "script/sh/history"),
        (lambda c: c.bulk_script_utxos(["sh"]), "POST", "scripts/unspent"),
        (lambda c: c.search("1A"), "POST", "search/links"),
    ],
)
def test_endpoint_paths(make_client, recorder, call, method, path) -> None:
    call(make_client())

    assert recorder.last.method == method
    assert recorder.last.url.path == f"/v1/bsv/main/{path}"


def test_bulk_payload_shape(make_client, recorder) -> None:
    client = make_client()

    client.bulk_balance(["1A", "1B"])
    assert json.loads(recorder.last.content) == {"addresses": ["1A", "1B"]}

    client.bulk_tx_status(("t1",))
    assert json.loads(recorder.last.content) == {"txids": ["t1"]}


def test_bulk_limit_checked_before_dispatch(make_client, recorder) -> None:
    client = make_client()

    with pytest.raises(RequestSetupError):
        client.bulk_utxos([f"addr{i}" for i in range(BULK_LIMIT + 1)])
    with pytest.raises(RequestSetupError):
        client.bulk_raw_tx_data("t1")

    assert recorder.requests == []


def test_statement_pdf_bypasses_api_base(make_client, recorder) -> None:
    make_client(network="testnet").statement_pdf("mxAddr")
    assert str(recorder.last.url) == "https://test.whatsonchain.com/statement/mxAddr"


def test_legacy_routes_need_legacy_profile(make_client, recorder) -> None:
    client = make_client()

    with pytest.raises(RequestSetupError, match="legacy profile"):
        client.fee_quotes()
    assert recorder.requests == []


def test_legacy_profile_routes_and_header(make_client, recorder) -> None:
    client = make_client(api_key="abc", profile="legacy")

    client.fee_quotes()
    assert recorder.last.url.path == "/v1/bsv/main/mapi/feeQuotes"
    assert recorder.last.headers["woc-api-key"] == "abc"
    assert "Authorization" not in recorder.last.headers

    client.merchant_tx_status("taal", "t1")
    assert recorder.last.url.path == "/v1/bsv/main/mapi/taal/tx/t1"

    client.bulk_broadcast(["00", "01"], feedback=True)
    assert recorder.last.url.path == "/v1/bsv/main/tx/broadcast"
    assert recorder.last.url.params["feedback"] == "true"
    assert json.loads(recorder.last.content) == ["00", "01"]

    client.receipt_pdf("t1")
    assert str(recorder.last.url) == "https://main.whatsonchain.com/receipt/t1"


def test_client_defaults_and_context_manager() -> None:
    with WhatsOnChainClient() as client:
        assert client.network == "main"
        assert client.config.timeout_ms == 30000
        assert client.config.enable_cache is True
