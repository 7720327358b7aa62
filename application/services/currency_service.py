import asyncio
import logging
import math
import time
from collections.abc import Callable, Iterable, Mapping
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal

from domain.exceptions.currency import ProviderError, UnknownCurrencyCodeError
from domain.models.currency import SYMBOL_BEFORE, CurrencyMetadata, RateFetchResult, RateSource, RateTable
from domain.models.currency_list import CURRENCY_LIST, FALLBACK_RATES
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class CurrencyService:
	"""Owns the cached rate table and all amount conversion and formatting.

	Build one instance per application and hand it to whatever needs currency
	math. The cache starts empty and is filled on the first ``get_rates()``
	call, either from the provider or from the fixed fallback table.
	"""

	def __init__(
		self,
		provider: ExchangeRateProvider,
		currencies: Iterable[CurrencyMetadata] = CURRENCY_LIST,
		base_currency: str = 'KES',
		refresh_interval: float = 3600,
		fallback_rates: Mapping[str, float] = FALLBACK_RATES,
		fallback_retry_interval: float | None = None,
		clock: Callable[[], float] = time.monotonic,
	):
		self.provider = provider
		self.currencies = tuple(currencies)
		self.base_currency = base_currency
		self.refresh_interval = refresh_interval
		self.fallback_rates = dict(fallback_rates)
		self.fallback_retry_interval = fallback_retry_interval
		self._clock = clock
		self._metadata = {c.code: c for c in self.currencies}
		self._cache: RateTable | None = None
		self._refresh_lock = asyncio.Lock()

	@property
	def default_currency(self) -> str:
		return self.base_currency

	@property
	def snapshot(self) -> RateTable | None:
		return self._cache

	def _is_stale(self, table: RateTable | None) -> bool:
		if table is None:
			return True
		interval = self.refresh_interval
		if table.is_fallback and self.fallback_retry_interval is not None:
			interval = self.fallback_retry_interval
		return self._clock() - table.fetched_at > interval

	async def get_rates(self) -> dict[str, float]:
		table = self._cache
		if self._is_stale(table):
			async with self._refresh_lock:
				# Another caller may have refreshed while we waited for the lock
				table = self._cache
				if self._is_stale(table):
					table = await self._refresh()
		return dict(table.rates)

	async def _refresh(self) -> RateTable:
		result = await self._fetch_rates()
		table = RateTable(
			base_currency=self.base_currency,
			rates=result.rates,
			fetched_at=self._clock(),
			updated_at=datetime.now(UTC),
			source=result.source,
		)
		self._cache = table
		return table

	async def _fetch_rates(self) -> RateFetchResult:
		try:
			rates = await self.provider.fetch_latest_rates(self.base_currency)
		except ProviderError as e:
			logger.warning(f'Error fetching exchange rates from {self.provider.name}, using fallback rates: {e}')
			return RateFetchResult(rates=self.fallback_rates, source=RateSource.FALLBACK, error=str(e))

		logger.info(f'Fetched {len(rates)} exchange rates from {self.provider.name}')
		return RateFetchResult(rates=rates, source=RateSource.PROVIDER)

	async def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
		rates = await self.get_rates()
		for code in (from_currency, to_currency):
			if code not in rates:
				raise UnknownCurrencyCodeError(code)

		in_base = amount / rates[from_currency]
		return in_base * rates[to_currency]

	def get_metadata(self, currency_code: str) -> CurrencyMetadata | None:
		return self._metadata.get(currency_code)

	def format_amount(self, amount: float, currency_code: str) -> str:
		info = self.get_metadata(currency_code)
		if info is None or not math.isfinite(amount):
			return _plain_number(amount)

		precision = max(0, info.cent_precision)
		quantum = Decimal(1).scaleb(-precision)
		rounded = Decimal(repr(float(amount))).quantize(quantum, rounding=ROUND_HALF_UP)
		formatted = f'{rounded:,.{precision}f}'

		if info.position == SYMBOL_BEFORE:
			return f'{info.symbol}{formatted}'
		return f'{formatted}{info.symbol}'

	async def close(self) -> None:
		await self.provider.close()


def _plain_number(amount: float) -> str:
	if isinstance(amount, int):
		return str(amount)
	if math.isnan(amount):
		return 'NaN'
	if math.isinf(amount):
		return 'Infinity' if amount > 0 else '-Infinity'
	# Whole numbers print without a fraction below 1e21, above that in exponent form
	if amount.is_integer() and abs(amount) < 1e21:
		return str(int(amount))
	return repr(amount)
