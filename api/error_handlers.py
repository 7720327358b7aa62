import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import InvalidCurrencyError, UnknownCurrencyCodeError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(UnknownCurrencyCodeError)
	async def unknown_currency_handler(request: Request, exc: UnknownCurrencyCodeError):
		logger.info(f'Rejected {request.url.path}: no rate for {exc.currency_code}')
		return JSONResponse(
			status_code=400,
			content={'detail': str(exc), 'currency_code': exc.currency_code},
		)

	@app.exception_handler(InvalidCurrencyError)
	async def invalid_currency_handler(request: Request, exc: InvalidCurrencyError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})
