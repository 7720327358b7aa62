from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CurrencyInfo(BaseModel):
	code: str = Field(..., description='Currency code')
	symbol: str = Field(..., description='Display symbol')
	position: str = Field(..., description="Symbol position, 'before' or 'after' the amount")
	cent_precision: int = Field(..., description='Number of fractional digits to render')
	name: str | None = Field(None, description='Currency name')


class CurrenciesResponse(BaseModel):
	default_currency: str = Field(..., description='Base currency of the rate table')
	currency_list: list[CurrencyInfo] = Field(..., description='Supported currency metadata')
	rates: dict[str, float] = Field(..., description='Rates relative to the default currency')
	rates_updated_at: datetime = Field(..., description='When the rate table was fetched')
	rates_source: str = Field(..., description="'provider' or 'fallback'")


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	original_amount: float = Field(..., description='Original amount requested')
	converted_amount: float = Field(..., description='Converted amount, unrounded')
	formatted_amount: str = Field(..., description='Converted amount formatted for display')
	rates_updated_at: datetime = Field(..., description='When the rate table was fetched')
	rates_source: str = Field(..., description="'provider' or 'fallback'")

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'KES',
				'to_currency': 'USD',
				'original_amount': 1500.00,
				'converted_amount': 10.5,
				'formatted_amount': '$10.50',
				'rates_updated_at': '2025-09-27T10:30:00Z',
				'rates_source': 'provider',
			}
		}
	)


class FormattedAmountResponse(BaseModel):
	currency_code: str
	amount: float
	formatted: str


class HealthResponse(BaseModel):
	status: str
	rates_cached: bool
	rates_source: str | None = None
