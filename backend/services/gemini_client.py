"""Google Gemini API wrapper with error handling.

Every failure mode (missing key, SDK error, unparseable reply) collapses
into a ``None`` return so callers can switch to their deterministic path.
"""

import json
import logging
import re
from typing import Literal

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None

_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_ARRAY_RE = re.compile(r"\[[\s\S]*\]")


def is_configured() -> bool:
    return bool(settings.gemini_api_key)


def get_client() -> genai.Client | None:
    global _client
    if not is_configured():
        logger.debug("No GEMINI_API_KEY set - using local fallbacks")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def extract_json(text: str, shape: Literal["object", "array"] = "object") -> dict | list | None:
    """Locate the outermost JSON object (or array) in free text and parse it.

    Models like to wrap JSON in prose or code fences, so the reply is searched
    from the first opening bracket to the last closing one.
    """
    pattern = _OBJECT_RE if shape == "object" else _ARRAY_RE
    match = pattern.search(text or "")
    if match is None:
        return None
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse Gemini response as JSON: %s", e)
        return None

    expected = dict if shape == "object" else list
    if not isinstance(parsed, expected):
        return None
    return parsed


async def generate_json(
    system_instruction: str,
    user_message: str,
    shape: Literal["object", "array"] = "object",
    temperature: float | None = None,
    max_output_tokens: int | None = None,
) -> dict | list | None:
    """Send a system instruction plus user message to Gemini and parse JSON from the reply."""
    client = get_client()
    if client is None:
        return None

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=user_message,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                temperature=settings.llm_temperature if temperature is None else temperature,
                max_output_tokens=(
                    settings.llm_max_output_tokens if max_output_tokens is None else max_output_tokens
                ),
            ),
        )
        text = response.text or ""
    except Exception as e:
        logger.warning("Gemini API error: %s", e)
        return None

    parsed = extract_json(text, shape)
    if parsed is None:
        logger.warning("Gemini response contained no JSON %s", shape)
    return parsed
