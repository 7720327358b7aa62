from .conversion_service import ConversionService
from .currency_service import CurrencyService

__all__ = ['ConversionService', 'CurrencyService']
