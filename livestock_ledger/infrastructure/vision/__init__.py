"""Vision infrastructure adapters."""

from .azure_table_extraction_client import AzureTableExtractionClient, ImageInput
from .extraction_prompt_builder import build_prompt_attempts, DEFAULT_PROMPT_TEMPLATE
from .extraction_response_parser import ExtractionResponseParser, extract_json_payload

__all__ = [
    "AzureTableExtractionClient",
    "ImageInput",
    "ExtractionResponseParser",
    "build_prompt_attempts",
    "extract_json_payload",
    "DEFAULT_PROMPT_TEMPLATE",
]
