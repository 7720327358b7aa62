from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConversionRequest(BaseModel):
	amount: float = Field(..., allow_inf_nan=False)
	from_currency: str = Field(..., min_length=3, max_length=5)
	to_currency: str = Field(..., min_length=3, max_length=5)

	@field_validator('from_currency', 'to_currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.upper()

	model_config = ConfigDict(
		json_schema_extra={
			'example': {'amount': 1500.00, 'from_currency': 'KES', 'to_currency': 'USD'}
		}
	)
