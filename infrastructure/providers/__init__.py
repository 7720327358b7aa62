from .base import ExchangeRateProvider
from .exchangerate_api import ExchangeRateAPIProvider

__all__ = ['ExchangeRateProvider', 'ExchangeRateAPIProvider']
