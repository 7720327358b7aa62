# nosec B101


import pytest
from unittest.mock import Mock, AsyncMock
import httpx

from infrastructure.providers.exchangerate_api import ExchangeRateAPIProvider
from domain.exceptions.currency import ProviderError


def make_client(json_data=None, json_error=None):
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    if json_error is not None:
        mock_response.json.side_effect = json_error
    else:
        mock_response.json.return_value = json_data
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response
    return mock_client


@pytest.mark.asyncio
async def test_fetch_latest_rates_success_returns_floats():
    mock_client = make_client({
        'base': 'KES',
        'date': '2025-11-05',
        'rates': {'KES': 1, 'USD': 0.0077, 'EUR': 0.0066}
    })
    provider = ExchangeRateAPIProvider(client=mock_client)

    rates = await provider.fetch_latest_rates('KES')

    assert rates == {'KES': 1.0, 'USD': 0.0077, 'EUR': 0.0066}
    assert all(isinstance(r, float) for r in rates.values())
    mock_client.get.assert_called_once_with('https://api.exchangerate-api.com/v4/latest/KES')


@pytest.mark.asyncio
async def test_fetch_latest_rates_uses_configured_base_url():
    mock_client = make_client({'rates': {'KES': 1, 'USD': 0.0077}})
    provider = ExchangeRateAPIProvider(base_url='http://rates.local/v4/', client=mock_client)

    await provider.fetch_latest_rates('KES')

    mock_client.get.assert_called_once_with('http://rates.local/v4/latest/KES')


@pytest.mark.asyncio
async def test_fetch_latest_rates_fills_missing_base_entry():
    mock_client = make_client({'rates': {'USD': 0.0077}})
    provider = ExchangeRateAPIProvider(client=mock_client)

    rates = await provider.fetch_latest_rates('KES')

    assert rates['KES'] == 1.0


@pytest.mark.asyncio
async def test_fetch_latest_rates_rejects_wrong_base_rate():
    mock_client = make_client({'rates': {'KES': 0.5, 'USD': 0.0077}})
    provider = ExchangeRateAPIProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_latest_rates('KES')

    assert 'Base currency KES' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_latest_rates_missing_rates_field():
    mock_client = make_client({'result': 'error', 'error-type': 'unsupported-code'})
    provider = ExchangeRateAPIProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_latest_rates('KES')

    assert 'Missing rates' in str(exc_info.value)


@pytest.mark.asyncio
@pytest.mark.parametrize('bad_rate', [0, -0.5, 'abc', None, True, float('inf'), 10 ** 400])
async def test_fetch_latest_rates_rejects_invalid_rate_values(bad_rate):
    mock_client = make_client({'rates': {'KES': 1, 'USD': bad_rate}})
    provider = ExchangeRateAPIProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_latest_rates('KES')

    assert 'Invalid rate for USD' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_latest_rates_non_object_body():
    mock_client = make_client(['not', 'a', 'dict'])
    provider = ExchangeRateAPIProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_latest_rates('KES')

    assert 'parsing error' in str(exc_info.value).lower()


@pytest.mark.asyncio
async def test_fetch_latest_rates_http_500_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)

    error_response = Mock()
    error_response.status_code = 500
    error_response.text = 'Internal Server Error'

    mock_client.get.side_effect = httpx.HTTPStatusError(
        'Server error',
        request=Mock(),
        response=error_response
    )

    provider = ExchangeRateAPIProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_latest_rates('KES')

    assert 'HTTP error 500' in str(exc_info.value)
    # Status errors are not retried
    assert mock_client.get.call_count == 1


@pytest.mark.asyncio
async def test_fetch_latest_rates_network_timeout():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.TimeoutException('Request timed out')
    provider = ExchangeRateAPIProvider(client=mock_client, max_attempts=1)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_latest_rates('KES')

    assert 'request failed' in str(exc_info.value).lower()


@pytest.mark.asyncio
async def test_fetch_latest_rates_connection_error_is_retried():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.ConnectError('Connection refused')
    provider = ExchangeRateAPIProvider(client=mock_client, max_attempts=3, retry_backoff=0)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_latest_rates('KES')

    assert 'ConnectError' in str(exc_info.value)
    assert mock_client.get.call_count == 3


@pytest.mark.asyncio
async def test_fetch_latest_rates_recovers_after_transient_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.json.return_value = {'rates': {'KES': 1, 'USD': 0.0077}}
    mock_response.raise_for_status = Mock()
    mock_client.get.side_effect = [httpx.ConnectError('Connection refused'), mock_response]
    provider = ExchangeRateAPIProvider(client=mock_client, max_attempts=2, retry_backoff=0)

    rates = await provider.fetch_latest_rates('KES')

    assert rates['USD'] == 0.0077
    assert mock_client.get.call_count == 2


@pytest.mark.asyncio
async def test_fetch_latest_rates_invalid_json_response():
    mock_client = make_client(json_error=ValueError('Invalid JSON'))
    provider = ExchangeRateAPIProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_latest_rates('KES')

    assert 'parsing error' in str(exc_info.value).lower()


@pytest.mark.asyncio
async def test_close_closes_client():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    provider = ExchangeRateAPIProvider(client=mock_client)

    await provider.close()

    mock_client.aclose.assert_awaited_once()
