from pydantic import AnyHttpUrl, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from deposit_relay.app.core.exceptions import ConfigurationError


LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    ENGINE_URL: AnyHttpUrl
    ENGINE_ACCESS_TOKEN: str = Field(min_length=1)
    BACKEND_WALLET_ADDRESS: str = Field(min_length=1)

    CONTRACT_ADDRESS: str = Field(min_length=1)
    # Find chain IDs: https://thirdweb.com/chains
    CHAIN_ID: str = Field(min_length=1)

    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got: {value}")
        return value

    @property
    def engine_base_url(self) -> str:
        return str(self.ENGINE_URL).rstrip("/")


def load_settings(**overrides) -> Settings:
    """
    Build the settings object once at startup.

    Raises:
        ConfigurationError: if a required variable is missing or invalid.
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
        raise ConfigurationError(
            f"Missing or invalid configuration: {', '.join(fields)}",
            details={"fields": fields},
        ) from exc
