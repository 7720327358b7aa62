from typing import Protocol


class ExchangeRateProvider(Protocol):
    """Anything that can return a rate table for a base currency."""

    @property
    def name(self) -> str:
        ...

    async def fetch_latest_rates(self, base_currency: str) -> dict[str, float]:
        ...

    async def close(self) -> None:
        ...
