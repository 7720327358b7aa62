import math

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from domain.exceptions.currency import ProviderError


class ExchangeRateAPIProvider:
	BASE_URL = 'https://api.exchangerate-api.com/v4'

	def __init__(
		self,
		base_url: str | None = None,
		client: httpx.AsyncClient | None = None,
		timeout: float = 5.0,
		max_attempts: int = 2,
		retry_backoff: float = 0.5,
	):
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self.max_attempts = max(1, max_attempts)
		self.retry_backoff = retry_backoff
		self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

	@property
	def name(self) -> str:
		return 'exchangerate-api'

	async def _get(self, url: str) -> httpx.Response:
		# Only transport failures (connect, timeout) are worth another attempt
		async for attempt in AsyncRetrying(
			stop=stop_after_attempt(self.max_attempts),
			wait=wait_exponential(multiplier=self.retry_backoff, max=2),
			retry=retry_if_exception_type(httpx.TransportError),
			reraise=True,
		):
			with attempt:
				return await self._client.get(url)

	async def _request(self, endpoint: str) -> dict:
		url = f'{self.base_url}/{endpoint}'

		try:
			response = await self._get(url)
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'ExchangeRate-API HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'ExchangeRate-API request failed: {e.__class__.__name__}') from e
		except ValueError as e:
			raise ProviderError(f'ExchangeRate-API response parsing error: {str(e)}') from e

		if not isinstance(data, dict):
			raise ProviderError('ExchangeRate-API response parsing error: body is not an object')
		return data

	async def fetch_latest_rates(self, base_currency: str) -> dict[str, float]:
		data = await self._request(f'latest/{base_currency}')

		raw_rates = data.get('rates')
		if not isinstance(raw_rates, dict) or not raw_rates:
			raise ProviderError('Missing rates in ExchangeRate-API response')

		rates: dict[str, float] = {}
		for code, value in raw_rates.items():
			if isinstance(value, bool) or not isinstance(value, (int, float)):
				raise ProviderError(f'Invalid rate for {code}: {value!r}')
			try:
				rate = float(value)
			except (OverflowError, ValueError, TypeError) as e:
				raise ProviderError(f'Invalid rate for {code}: {e}') from e
			if not math.isfinite(rate) or rate <= 0:
				raise ProviderError(f'Invalid rate for {code}: {value!r}')
			rates[str(code)] = rate

		base_rate = rates.setdefault(base_currency, 1.0)
		if base_rate != 1.0:
			raise ProviderError(f'Base currency {base_currency} has rate {base_rate}, expected 1')

		return rates

	async def close(self) -> None:
		await self._client.aclose()
