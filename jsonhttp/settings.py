"""Environment-backed default settings for jsonhttp clients."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from jsonhttp.options import DEFAULT_TIMEOUT, ClientConfig, VerifyTypes


class ClientSettings(BaseSettings):
    """Client defaults loaded from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    timeout: float = Field(default=DEFAULT_TIMEOUT, alias="JSONHTTP_TIMEOUT")
    retries: int = Field(default=0, alias="JSONHTTP_RETRIES")
    retry_delay: float = Field(default=0.0, alias="JSONHTTP_RETRY_DELAY")
    enable_logging: bool = Field(default=False, alias="JSONHTTP_LOGGING")
    enable_body_logging: bool = Field(default=False, alias="JSONHTTP_BODY_LOGGING")
    user_agent: str | None = Field(default=None, alias="JSONHTTP_USER_AGENT")
    proxy_url: str | None = Field(default=None, alias="JSONHTTP_PROXY")
    verify_tls: bool = Field(default=True, alias="JSONHTTP_VERIFY_TLS")
    ca_bundle: str | None = Field(default=None, alias="JSONHTTP_CA_BUNDLE")
    lenient_status: bool = Field(default=False, alias="JSONHTTP_LENIENT_STATUS")

    @property
    def verify(self) -> VerifyTypes:
        if not self.verify_tls:
            return False
        return self.ca_bundle or True

    def to_config(self) -> ClientConfig:
        return ClientConfig(
            timeout=self.timeout,
            retries=self.retries,
            retry_delay=self.retry_delay,
            enable_logging=self.enable_logging,
            enable_body_logging=self.enable_body_logging,
            user_agent=self.user_agent,
            proxy_url=self.proxy_url,
            verify=self.verify,
            lenient_status=self.lenient_status,
        )
