from .requests import ConversionRequest
from .responses import (
	ConversionResponse,
	CurrenciesResponse,
	CurrencyInfo,
	FormattedAmountResponse,
	HealthResponse,
)

__all__ = [
	'ConversionRequest',
	'ConversionResponse',
	'CurrenciesResponse',
	'CurrencyInfo',
	'FormattedAmountResponse',
	'HealthResponse',
]
