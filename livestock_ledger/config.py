from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

from livestock_ledger.constants import (
  DEFAULT_LEDGER_API_URL,
  DEFAULT_TRANSACTION_DATE,
  NAME_SUGGESTION_LIMIT,
)

# Ensure environment variables from the repository root .env are available
# regardless of the working directory used to start the process.
ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(ROOT_DIR / ".env")


class Settings(BaseSettings):
  azure_openai_api_key: str | None = Field(default=None, alias="AZURE_OPENAI_API_KEY")
  azure_openai_endpoint: str = Field(default="", alias="AZURE_OPENAI_ENDPOINT")
  azure_openai_api_version: str = Field(default="2024-12-01-preview", alias="AZURE_OPENAI_API_VERSION")
  azure_openai_deployment_name: str | None = Field(default=None, alias="AZURE_OPENAI_DEPLOYMENT_NAME")
  azure_openai_vision_model: str | None = Field(default=None, alias="AZURE_OPENAI_VISION_MODEL")
  ledger_api_url: str = Field(default=DEFAULT_LEDGER_API_URL, alias="LEDGER_API_URL")
  ledger_api_token: str | None = Field(default=None, alias="LEDGER_API_TOKEN")
  ledger_api_timeout: float = Field(default=15.0, alias="LEDGER_API_TIMEOUT")
  ledger_api_dry_run: bool = Field(default=False, alias="LEDGER_API_DRY_RUN")
  name_registry_path: str | None = Field(default=None, alias="NAME_REGISTRY_PATH")
  duplicate_mapping_policy: str = Field(default="last_write_wins", alias="DUPLICATE_MAPPING_POLICY")
  default_transaction_date: str = Field(default=DEFAULT_TRANSACTION_DATE, alias="DEFAULT_TRANSACTION_DATE")
  name_suggestion_limit: int = Field(default=NAME_SUGGESTION_LIMIT, alias="NAME_SUGGESTION_LIMIT")

  def ensure_endpoint(self) -> str:
    endpoint = (self.azure_openai_endpoint or "").strip()
    if not endpoint:
      return ""
    return endpoint.rstrip("/") + "/"

  class Config:
    case_sensitive = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  return Settings()  # type: ignore[arg-type]
