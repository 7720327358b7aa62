from application.services.currency_service import CurrencyService
from domain.models.currency import ConversionRequest


class ConversionService:
	def __init__(self, currency_service: CurrencyService):
		self.currency_service = currency_service

	async def convert(self, request: ConversionRequest) -> dict:
		converted_amount = await self.currency_service.convert(
			request.amount, request.from_currency, request.to_currency
		)
		# convert() has just populated the cache
		table = self.currency_service.snapshot

		return {
			'from_currency': request.from_currency,
			'to_currency': request.to_currency,
			'original_amount': request.amount,
			'converted_amount': converted_amount,
			'formatted_amount': self.currency_service.format_amount(converted_amount, request.to_currency),
			'rates_updated_at': table.updated_at,
			'rates_source': table.source.value,
		}
