class CurrencyException(Exception):
    pass


class InvalidCurrencyError(CurrencyException):
    pass


class UnknownCurrencyCodeError(InvalidCurrencyError):
    def __init__(self, currency_code: str):
        self.currency_code = currency_code
        super().__init__(f'Currency {currency_code} is not in the exchange rate table')


class ProviderError(CurrencyException):
    pass
