from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from api.dependencies import get_conversion_service, get_currency_service
from api.schemas import (
	ConversionRequest,
	ConversionResponse,
	CurrenciesResponse,
	CurrencyInfo,
	FormattedAmountResponse,
	HealthResponse,
)
from application.services import ConversionService, CurrencyService
from domain.models import currency as models

router = APIRouter(prefix='/api/currency', tags=['currency'])


@router.get(
	'/currencies',
	response_model=CurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='Default currency, currency list and current rates',
)
async def get_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> CurrenciesResponse:
	rates = await service.get_rates()
	table = service.snapshot
	return CurrenciesResponse(
		default_currency=service.default_currency,
		currency_list=[
			CurrencyInfo(
				code=c.code,
				symbol=c.symbol,
				position=c.position,
				cent_precision=c.cent_precision,
				name=c.name,
			)
			for c in service.currencies
		],
		rates=rates,
		rates_updated_at=table.updated_at,
		rates_source=table.source.value,
	)


@router.post(
	'/convert',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert an amount between currencies',
)
async def convert_amount(
	request: ConversionRequest,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	result = await service.convert(
		models.ConversionRequest(
			amount=request.amount,
			from_currency=request.from_currency,
			to_currency=request.to_currency,
		)
	)
	return ConversionResponse(**result)


@router.get(
	'/format/{currency_code}',
	response_model=FormattedAmountResponse,
	status_code=status.HTTP_200_OK,
	summary='Format an amount for display',
)
async def format_amount(
	currency_code: Annotated[str, Path(min_length=3, max_length=5)],
	amount: Annotated[float, Query(allow_inf_nan=False)],
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> FormattedAmountResponse:
	currency_code = currency_code.upper()
	return FormattedAmountResponse(
		currency_code=currency_code,
		amount=amount,
		formatted=service.format_amount(amount, currency_code),
	)


@router.get('/health', response_model=HealthResponse, summary='Rate cache status')
async def health(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> HealthResponse:
	table = service.snapshot
	return HealthResponse(
		status='ok',
		rates_cached=table is not None,
		rates_source=table.source.value if table else None,
	)
