"""Azure OpenAI vision client that turns ledger photos into tables."""
from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from azure.identity import DefaultAzureCredential, get_bearer_token_provider
from openai import AzureOpenAI, OpenAIError

from livestock_ledger.config import get_settings
from livestock_ledger.domain.entities.extracted_table import ExtractedTable
from livestock_ledger.domain.exceptions import ExtractionError

from .extraction_prompt_builder import ExtractionPromptAttempt, build_prompt_attempts
from .extraction_response_parser import ExtractionResponseParser, extract_json_payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageInput:
    """Binary image plus its declared media type."""

    data: bytes
    media_type: str

    def __post_init__(self) -> None:
        if not self.data:
            raise ValueError("image data must not be empty")
        if not (self.media_type or "").lower().startswith("image/"):
            raise ValueError(f"unsupported media type: {self.media_type!r}")

    def to_data_url(self) -> str:
        """Data URL suitable for OpenAI Vision."""
        encoded = base64.b64encode(self.data).decode("utf-8")
        return f"data:{self.media_type};base64,{encoded}"


class AzureTableExtractionClient:
    """High-level client responsible for orchestrating Azure OpenAI Vision calls."""

    def __init__(
        self,
        *,
        client: Optional[AzureOpenAI] = None,
        parser: Optional[ExtractionResponseParser] = None,
        model: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        model = model or settings.azure_openai_vision_model or settings.azure_openai_deployment_name

        if client is not None:
            self._client = client
        else:
            endpoint = settings.ensure_endpoint()
            if not endpoint:
                raise RuntimeError("AZURE_OPENAI_ENDPOINT must be configured before using the vision client")
            api_key = settings.azure_openai_api_key
            if api_key:
                self._client = AzureOpenAI(
                    api_key=api_key,
                    api_version=settings.azure_openai_api_version,
                    azure_endpoint=endpoint,
                )
            else:
                token_provider = get_bearer_token_provider(
                    DefaultAzureCredential(),
                    "https://cognitiveservices.azure.com/.default",
                )
                self._client = AzureOpenAI(
                    api_version=settings.azure_openai_api_version,
                    azure_endpoint=endpoint,
                    azure_ad_token_provider=token_provider,
                )

        if not model:
            raise RuntimeError("AZURE_OPENAI_VISION_MODEL or AZURE_OPENAI_DEPLOYMENT_NAME must be configured")

        self._model = model
        self._parser = parser or ExtractionResponseParser()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def extract_table(self, image: ImageInput) -> ExtractedTable:
        """Extract the ledger table shown in ``image``.

        Raises:
            ExtractionError: the model could not be reached or never returned
                a usable ``columns``/``rows`` object.
        """
        attempts = build_prompt_attempts(image.to_data_url())
        payload = self._run_attempts(attempts)
        if payload is None:
            logger.error("Vision model returned no usable payload", extra={"media_type": image.media_type})
            raise ExtractionError("Failed to extract data from image.")

        table = self._parser.parse_table(payload)
        logger.info(
            "Extracted table with %d columns and %d rows", len(table.columns), len(table.rows),
            extra={"media_type": image.media_type},
        )
        return table

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _run_attempts(self, attempts: Iterable[ExtractionPromptAttempt]) -> Optional[dict]:
        content: Optional[str] = None

        for attempt in attempts:
            content = self._invoke_model(attempt)
            if content:
                payload = extract_json_payload(content)
                if isinstance(payload, dict):
                    return payload
                logger.debug(
                    "Vision attempt yielded invalid JSON (force_json=%s): %.200s",
                    attempt.force_json,
                    content,
                )

        if content:
            logger.warning("Failed to parse vision payload after retries")
        return None

    def _invoke_model(self, attempt: ExtractionPromptAttempt) -> Optional[str]:
        kwargs = {
            "model": self._model,
            "messages": attempt.messages,
        }
        if attempt.force_json:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = self._client.chat.completions.create(**kwargs)
        except OpenAIError as exc:
            logger.exception("Vision model call failed")
            raise ExtractionError(f"Extraction service unavailable: {exc}") from exc

        content = response.choices[0].message.content if response.choices else None
        return content or None
