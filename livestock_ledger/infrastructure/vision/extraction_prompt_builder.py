"""Utilities for constructing Azure OpenAI table-extraction prompts."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

DEFAULT_PROMPT_TEMPLATE = (
    "You are an expert ledger digitization system. Analyze this image containing a list of data"
    " (likely names and numbers in Persian/Arabic) and extract the tabular data into structured JSON only."
    " Return an object with two properties:\n"
    "1. \"columns\": an array of string headers. Use generic names like \"col1\", \"col2\" if headers"
    " aren't clear, but prefer inferred headers from the image text.\n"
    "2. \"rows\": an array of arrays of strings. Each inner array represents a row of data, containing"
    " values strictly corresponding to the order of \"columns\".\n"
    "Ensure Persian/Arabic characters and digits are preserved exactly; do not translate or transliterate."
    " Do not add commentary. If no table is found return {\"columns\": [], \"rows\": []}."
)


@dataclass(frozen=True)
class ExtractionPromptAttempt:
    """Encapsulates a single attempt payload for the vision model."""

    messages: List[dict[str, Any]]
    force_json: bool


def build_prompt_attempts(image_data_url: str) -> List[ExtractionPromptAttempt]:
    """Construct prompt attempts for one ledger image.

    The vision model occasionally answers with prose around the JSON, so the
    first attempt forces JSON output and the second relaxes the instruction.
    """

    base_messages = [
        {"role": "system", "content": DEFAULT_PROMPT_TEMPLATE},
        {
            "role": "user",
            "content": [
                {"type": "text", "text": "Extract the table from this ledger image."},
                {"type": "image_url", "image_url": {"url": image_data_url}},
            ],
        },
    ]

    relaxed_messages = [
        base_messages[0],
        {
            "role": "user",
            "content": [
                {
                    "type": "text",
                    "text": (
                        "Extract the table from this ledger image as JSON with \"columns\" and \"rows\"."
                        " If no table can be read, reply with empty arrays."
                    ),
                },
                {"type": "image_url", "image_url": {"url": image_data_url}},
            ],
        },
    ]

    return [
        ExtractionPromptAttempt(messages=base_messages, force_json=True),
        ExtractionPromptAttempt(messages=relaxed_messages, force_json=False),
    ]
