"""WhatsOnChain endpoint catalogue.

Methods here only turn arguments into a path, a query and a body and
hand them to ``self._t``. They return whatever the transport returns, so
the same catalogue serves the sync client (plain values) and the async
client (awaitables).

Reference: https://docs.taal.com/core-products/whatsonchain
"""
from __future__ import annotations

from typing import Any, Sequence

from .config_types import PROFILE_LEGACY
from .errors import RequestSetupError

STATUS_SENTINEL = "Whats On Chain"
BULK_LIMIT = 20


def _bulk(name: str, items: Sequence[str]) -> list[str]:
    if isinstance(items, str):
        raise RequestSetupError(f"{name} expects a list, got a single string")
    values = list(items)
    if len(values) > BULK_LIMIT:
        raise RequestSetupError(f"{name} accepts at most {BULK_LIMIT} items per request, got {len(values)}")
    return values


class Endpoints:
    _t: Any

    @property
    def network(self) -> str:
        return self._t.config.network

    # --- health / chain ---
    def chain_info(self):
        return self._t.get("chain/info")

    def chain_tips(self):
        return self._t.get("chain/tips")

    def peer_info(self):
        return self._t.get("peer/info")

    def circulating_supply(self):
        return self._t.get("circulatingsupply")

    # --- blocks ---
    def block_hash(self, block_hash: str):
        return self._t.get(f"block/hash/{block_hash}")

    def block_height(self, height: int):
        return self._t.get(f"block/height/{height}")

    def block_hash_by_page(self, block_hash: str, page: int):
        """Transaction ids of one page of a block with more than 1000 transactions."""
        return self._t.get(f"block/hash/{block_hash}/page/{page}")

    def block_header_by_hash(self, block_hash: str):
        return self._t.get(f"block/{block_hash}/header")

    def block_headers(self):
        """Last 10 block headers."""
        return self._t.get("block/headers")

    def block_headers_resources(self):
        return self._t.get("block/headers/resources")

    def block_headers_latest(self, count: int | None = None):
        """Latest headers as raw 80-byte records (up to 100, or the latest file when count is omitted)."""
        return self._t.get("block/headers/latest", {"count": count})

    def block_height_stats(self, height: int):
        return self._t.get(f"block/height/{height}/stats")

    def block_hash_stats(self, block_hash: str):
        return self._t.get(f"block/hash/{block_hash}/stats")

    def miner_blocks_stats(self, days: int):
        return self._t.get("miner/blocks/stats", {"days": days})

    def miner_summary_stats(self, days: int):
        return self._t.get("miner/summary/stats", {"days": days})

    # --- transactions ---
    def tx_hash(self, txid: str):
        return self._t.get(f"tx/hash/{txid}")

    def tx_propagation(self, txid: str):
        return self._t.get(f"tx/hash/{txid}/propagation")

    def broadcast(self, txhex: str):
        """Broadcast a raw transaction; returns the txid or raises ServerError with the node's message."""
        return self._t.post("tx/raw", {"txhex": txhex})

    def decode_tx(self, txhex: str):
        return self._t.post("tx/decode", {"txhex": txhex})

    def bulk_tx_details(self, txids: Sequence[str]):
        return self._t.post("txs", {"txids": _bulk("bulk_tx_details", txids)})

    def bulk_tx_status(self, txids: Sequence[str]):
        return self._t.post("txs/status", {"txids": _bulk("bulk_tx_status", txids)})

    def raw_tx_data(self, txid: str):
        return self._t.get(f"tx/{txid}/hex")

    def bulk_raw_tx_data(self, txids: Sequence[str]):
        return self._t.post("txs/hex", {"txids": _bulk("bulk_raw_tx_data", txids)})

    def raw_tx_output_data(self, txid: str, output_index: int):
        return self._t.get(f"tx/{txid}/out/{output_index}/hex")

    def merkle_proof(self, txid: str):
        return self._t.get(f"tx/{txid}/proof")

    def op_return_by_tx_hash(self, txid: str):
        return self._t.get(f"tx/{txid}/opreturn")

    # --- mempool ---
    def mempool_info(self):
        return self._t.get("mempool/info")

    def mempool_txs(self):
        return self._t.get("mempool/raw")

    # --- addresses ---
    def address_info(self, address: str):
        return self._t.get(f"address/{address}/info")

    def address_used(self, address: str):
        return self._t.get(f"address/{address}/used")

    def balance(self, address: str):
        return self._t.get(f"address/{address}/balance")

    def bulk_balance(self, addresses: Sequence[str]):
        return self._t.post("address/balance", {"addresses": _bulk("bulk_balance", addresses)})

    def history(self, address: str):
        return self._t.get(f"address/{address}/history")

    def utxos(self, address: str):
        return self._t.get(f"address/{address}/unspent")

    def bulk_utxos(self, addresses: Sequence[str]):
        return self._t.post("address/unspent", {"addresses": _bulk("bulk_utxos", addresses)})

    def statement_pdf(self, address: str):
        return self._t.get(f"{self._t.config.explorer_url}/statement/{address}")

    # --- scripts ---
    # script_hash is the sha256 of the locking script bytes, hex encoded.
    def script_used(self, script_hash: str):
        return self._t.get(f"script/{script_hash}/used")

    def script_history(self, script_hash: str):
        return self._t.get(f"script/{script_hash}/history")

    def script_utxos(self, script_hash: str):
        return self._t.get(f"script/{script_hash}/unspent")

    def bulk_script_utxos(self, script_hashes: Sequence[str]):
        return self._t.post("scripts/unspent", {"scripts": _bulk("bulk_script_utxos", script_hashes)})

    # --- exchange rate / search ---
    def exchange_rate(self):
        return self._t.get("exchangerate")

    def historical_exchange_rate(self, from_ts: int | None = None, to_ts: int | None = None):
        """Daily rates back to 2018-11-19; bounds are unix timestamps."""
        return self._t.get("exchangerate/historical", {"from": from_ts, "to": to_ts})

    def search(self, query: str):
        """Explorer links for a block hash, txid or address."""
        return self._t.post("search/links", {"query": query})

    # --- legacy profile ---
    def _require_legacy(self, name: str) -> None:
        if self._t.config.profile != PROFILE_LEGACY:
            raise RequestSetupError(f"{name} is only available with the legacy profile")

    def bulk_broadcast(self, txhexes: Sequence[str], *, feedback: bool = False):
        self._require_legacy("bulk_broadcast")
        return self._t.post(
            "tx/broadcast",
            _bulk("bulk_broadcast", txhexes),
            params={"feedback": "true" if feedback else "false"},
        )

    def fee_quotes(self):
        self._require_legacy("fee_quotes")
        return self._t.get("mapi/feeQuotes")

    def merchant_tx_status(self, provider_id: str, txid: str):
        self._require_legacy("merchant_tx_status")
        return self._t.get(f"mapi/{provider_id}/tx/{txid}")

    def receipt_pdf(self, txid: str):
        self._require_legacy("receipt_pdf")
        return self._t.get(f"{self._t.config.explorer_url}/receipt/{txid}")
