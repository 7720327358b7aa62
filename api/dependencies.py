import logging
from typing import Annotated

from fastapi import Depends

from application.services import ConversionService, CurrencyService
from config.settings import Settings, get_settings
from infrastructure.providers import ExchangeRateAPIProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	currency_service: CurrencyService | None = None


deps = AppDependencies()


def build_currency_service(settings: Settings) -> CurrencyService:
	provider = ExchangeRateAPIProvider(
		base_url=settings.EXCHANGE_RATE_API_URL,
		timeout=settings.RATE_REQUEST_TIMEOUT_SECONDS,
		max_attempts=settings.RATE_FETCH_MAX_ATTEMPTS,
	)
	return CurrencyService(
		provider=provider,
		base_currency=settings.BASE_CURRENCY,
		refresh_interval=settings.RATE_REFRESH_INTERVAL_SECONDS,
		fallback_retry_interval=settings.FALLBACK_RETRY_SECONDS,
	)


def init_dependencies(currency_service: CurrencyService | None = None) -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')

	if deps.currency_service is None:
		deps.currency_service = currency_service or build_currency_service(get_settings())

	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.currency_service:
		await deps.currency_service.close()
		deps.currency_service = None

	logger.info('Cleanup complete')


def get_currency_service() -> CurrencyService:
	if deps.currency_service is None:
		raise RuntimeError('Currency service not initialized')
	return deps.currency_service


def get_conversion_service(
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> ConversionService:
	return ConversionService(currency_service=currency_service)
