from __future__ import annotations
from dataclasses import dataclass

API_ROOT = "https://api.whatsonchain.com/v1/bsv"
EXPLORER_URL = "https://{network}.whatsonchain.com"

PROFILE_CURRENT = "current"
PROFILE_LEGACY = "legacy"
PROFILES = (PROFILE_CURRENT, PROFILE_LEGACY)

# Unauthenticated clients get up to 3 requests/sec.
UNAUTHENTICATED_INTERVAL_S = 0.334

_MAIN_ALIASES = {"main", "mainnet", "livenet"}
_TEST_ALIASES = {"test", "testnet"}
_AUTH_PREFIX = {"main": "mainnet", "test": "testnet", "stn": "stn"}


def normalize_network(network: str | None) -> str:
    """Map a network alias to ``main``, ``test`` or ``stn``.

    Aliases match exactly. ``None`` means the default network.
    """
    if network is None:
        return "main"
    if network in _MAIN_ALIASES:
        return "main"
    if network in _TEST_ALIASES:
        return "test"
    return "stn"


@dataclass(frozen=True)
class ClientConfig:
    network: str = "main"
    timeout_ms: int = 30000
    user_agent: str | None = None
    api_key: str | None = None
    enable_cache: bool = True
    profile: str = PROFILE_CURRENT
    cache_maxsize: int = 1024

    def __post_init__(self) -> None:
        object.__setattr__(self, "network", normalize_network(self.network))
        if self.profile not in PROFILES:
            raise ValueError(f"unknown profile {self.profile!r}, expected one of {', '.join(PROFILES)}")
        if int(self.timeout_ms) <= 0:
            raise ValueError("timeout_ms must be positive")

    @property
    def base_url(self) -> str:
        return f"{API_ROOT}/{self.network}/"

    @property
    def explorer_url(self) -> str:
        return EXPLORER_URL.format(network=self.network)

    @property
    def timeout_s(self) -> float:
        return self.timeout_ms / 1000.0

    @property
    def auth_header(self) -> tuple[str, str] | None:
        if not self.api_key:
            return None
        if self.profile == PROFILE_LEGACY:
            return "woc-api-key", self.api_key
        return "Authorization", f"{_AUTH_PREFIX[self.network]}_{self.api_key}"

    @property
    def throttle_interval_s(self) -> float:
        # Keyed clients are rate limited by their plan on the server side.
        return 0.0 if self.api_key else UNAUTHENTICATED_INTERVAL_S
