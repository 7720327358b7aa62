from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType

SYMBOL_BEFORE = 'before'
SYMBOL_AFTER = 'after'


class RateSource(str, Enum):
    PROVIDER = 'provider'
    FALLBACK = 'fallback'


@dataclass(frozen=True)
class CurrencyMetadata:
    code: str
    symbol: str
    position: str  # 'before' puts the symbol in front, anything else after
    cent_precision: int
    name: str | None = None


@dataclass(frozen=True)
class ConversionRequest:
    amount: float
    from_currency: str
    to_currency: str


@dataclass(frozen=True)
class RateFetchResult:
    rates: Mapping[str, float]
    source: RateSource
    error: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.source is RateSource.FALLBACK


@dataclass(frozen=True)
class RateTable:
    base_currency: str
    rates: Mapping[str, float]
    fetched_at: float  # monotonic clock reading
    updated_at: datetime
    source: RateSource

    def __post_init__(self):
        # Read-only view so a cached table can never be partially mutated
        object.__setattr__(self, 'rates', MappingProxyType(dict(self.rates)))

    @property
    def is_fallback(self) -> bool:
        return self.source is RateSource.FALLBACK
