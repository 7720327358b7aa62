from domain.models.currency import SYMBOL_BEFORE, CurrencyMetadata

# First entry is the default (base) currency
CURRENCY_LIST: tuple[CurrencyMetadata, ...] = (
    CurrencyMetadata(code='KES', symbol='KSh', position=SYMBOL_BEFORE, cent_precision=2, name='Kenyan Shilling'),
    CurrencyMetadata(code='USD', symbol='$', position=SYMBOL_BEFORE, cent_precision=2, name='US Dollar'),
    CurrencyMetadata(code='GBP', symbol='£', position=SYMBOL_BEFORE, cent_precision=2, name='British Pound'),
    CurrencyMetadata(code='EUR', symbol='€', position=SYMBOL_BEFORE, cent_precision=2, name='Euro'),
    CurrencyMetadata(code='AED', symbol='د.إ', position=SYMBOL_BEFORE, cent_precision=2, name='UAE Dirham'),
)

FALLBACK_RATES: dict[str, float] = {
    'KES': 1.0,
    'USD': 0.007,
    'GBP': 0.0055,
    'EUR': 0.0065,
    'AED': 0.026,
}
