from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	EXCHANGE_RATE_API_URL: str = 'https://api.exchangerate-api.com/v4'
	BASE_CURRENCY: str = 'KES'

	RATE_REFRESH_INTERVAL_SECONDS: float = 3600
	# When set, a fallback table is retried after this many seconds instead of a full interval
	FALLBACK_RETRY_SECONDS: float | None = None
	RATE_REQUEST_TIMEOUT_SECONDS: float = 5.0
	RATE_FETCH_MAX_ATTEMPTS: int = 2

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	# Application
	APP_NAME: str = 'Invoicing Currency Service'
	DEBUG: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
