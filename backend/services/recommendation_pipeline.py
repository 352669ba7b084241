"""
Recommendation normalization pipeline - Gemini single-shot text generation

Shared by the three suggestion flows (hobby ideas, course recommendations,
trending hobbies). Turns whatever the model returns into a non-empty list of
records, or tells the caller to substitute its default batch.

Pipeline:
    prompt -> invoke_model() -> extract_json_text() -> json.loads
           -> validate_batch() -> ValidBatch | InvalidBatch

Architecture:
- Model: Gemini 2.5 Flash via the Google Gen AI SDK (google-genai)
- One synchronous call per request, no retries, no streaming
- Output: JSON array parsed from free text. The prompt asks for "JSON array
  only" but the model is never trusted to comply.

IMPORTANT: validate_batch() is the single authority on whether a decoded
value is usable. It only checks "non-empty list"; record fields are passed
through untouched because the client treats every field as optional.
"""

import json
import logging
import random
import re
from dataclasses import dataclass, field
from typing import Any, List, Literal, Optional, Union

from google import genai
from google.genai import types

from backend.agents.recommendation.types import HobbyIdea
from backend.config import settings
from backend.utils.constants import SALVAGE_ICONS
from backend.utils.logging import preview

logger = logging.getLogger(__name__)

# Initialize Gemini client (lazy initialization)
_gemini_client = None

# ```json ... ``` (tag is case-insensitive)
FENCED_JSON_PATTERN = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)
# ``` ... ``` with or without any tag
FENCED_BLOCK_PATTERN = re.compile(r"```\s*([\s\S]*?)\s*```")
# Leading enumeration marker on a prose line ("3. ", "3 ", "12.")
ENUMERATION_PREFIX_PATTERN = re.compile(r"^\d+\.?\s*")

MAX_SALVAGED_IDEAS = 10
SALVAGE_TOOLS = "Various platforms"
SALVAGE_EARNINGS = "$50-$500/month"

BatchSource = Literal["model", "salvage", "default"]


# =============================================================================
# ERRORS
# =============================================================================

class ModelNotConfiguredError(Exception):
    """Raised when no Gemini credential is available."""


class ModelInvocationError(Exception):
    """Raised when the Gemini call fails or returns no usable text."""


# =============================================================================
# DECODE RESULT
# =============================================================================

@dataclass(frozen=True)
class ValidBatch:
    """A decoded model output that can be served as-is."""
    records: List[Any]


@dataclass(frozen=True)
class InvalidBatch:
    """A decoded model output that must be replaced."""
    reason: str
    parse_failed: bool = False


DecodeResult = Union[ValidBatch, InvalidBatch]


@dataclass
class SuggestionBatch:
    """
    Records ready to be returned to the client.

    source tells where they came from: the model, the idea salvage pass, or
    the endpoint's default batch. The HTTP body does not expose it.
    """
    records: List[Any]
    source: BatchSource = "model"
    fallback_reason: Optional[str] = field(default=None)


# =============================================================================
# MODEL INVOCATION
# =============================================================================

def _get_gemini_client():
    """
    Lazy initialization of Gemini client.
    Uses the Google Gen AI SDK.

    Returns None when GOOGLE_API_KEY is not configured.
    """
    global _gemini_client

    if _gemini_client is not None:
        return _gemini_client

    api_key = settings.GOOGLE_API_KEY

    if not api_key:
        logger.warning(
            "GOOGLE_API_KEY not configured. AI suggestions will use default batches. "
            "Please set GOOGLE_API_KEY in your .env file."
        )
        return None

    try:
        _gemini_client = genai.Client(api_key=api_key)
        logger.info("Gemini client initialized successfully for suggestions")
        return _gemini_client
    except Exception as e:
        logger.error(f"Failed to initialize Gemini client: {e}")
        return None


def _extract_response_text(response: Any) -> Optional[str]:
    """
    Get the text of the first candidate.

    Parts are read first since response.text can be None even when the
    parts carry text.
    """
    if not response.candidates:
        return None

    candidate = response.candidates[0]
    if candidate.content and candidate.content.parts:
        for part in candidate.content.parts:
            if getattr(part, "text", None):
                return part.text

    return response.text


def invoke_model(
    prompt: str,
    system_instruction: str,
    temperature: float,
    max_output_tokens: int,
    model: Optional[str] = None,
) -> str:
    """
    Issue one generate_content call and return the raw text.

    Args:
        prompt: User prompt (see backend/agents/recommendation/prompts.py)
        system_instruction: Role definition for the model
        temperature: Sampling temperature (0.8-0.9 for creative suggestions)
        max_output_tokens: Output token budget
        model: Model id, defaults to settings.GEMINI_MODEL

    Returns:
        Raw, untrusted model text

    Raises:
        ModelNotConfiguredError: GOOGLE_API_KEY is missing
        ModelInvocationError: network/API failure or empty response
    """
    client = _get_gemini_client()
    if client is None:
        raise ModelNotConfiguredError("GOOGLE_API_KEY is not configured")

    model_name = model or settings.GEMINI_MODEL

    try:
        logger.info(f"Calling Gemini API (model={model_name}, temperature={temperature})")

        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )

        response = client.models.generate_content(
            model=model_name,
            contents=prompt,
            config=config,
        )
    except Exception as e:
        logger.error(f"Error calling Gemini API: {e}")
        raise ModelInvocationError(str(e)) from e

    content = _extract_response_text(response)
    if not content:
        logger.error("Empty text in Gemini response")
        raise ModelInvocationError("Empty response from Gemini")

    logger.info("Gemini API response received")
    return content


# =============================================================================
# EXTRACTION, DECODING, VALIDATION
# =============================================================================

def extract_json_text(content: str) -> str:
    """
    Pick the part of the model text that should contain the JSON.

    Priority:
        1. interior of a ```json fenced block
        2. interior of any fenced block
        3. the whole text

    The result is whitespace-trimmed.
    """
    match = FENCED_JSON_PATTERN.search(content) or FENCED_BLOCK_PATTERN.search(content)
    json_text = match.group(1) if match else content
    return json_text.strip()


def parse_model_json(content: str) -> Any:
    """
    Strictly parse the JSON payload of a model response.

    No repair is attempted (no trailing-comma or quote fixes).

    Raises:
        json.JSONDecodeError: The extracted text is not valid JSON
    """
    return json.loads(extract_json_text(content))


def validate_batch(value: Any) -> DecodeResult:
    """Accept ``value`` only if it is a non-empty list."""
    if not isinstance(value, list):
        return InvalidBatch(reason=f"expected a JSON array, got {type(value).__name__}")
    if len(value) == 0:
        return InvalidBatch(reason="empty array")
    return ValidBatch(records=value)


def decode_model_output(content: str) -> DecodeResult:
    """Parse and validate raw model text in one step."""
    try:
        value = parse_model_json(content)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON response: {e}")
        logger.error(f"Raw content: {preview(content)}")
        return InvalidBatch(reason=f"invalid JSON: {e.msg}", parse_failed=True)

    result = validate_batch(value)
    if isinstance(result, InvalidBatch):
        logger.error(f"Unusable model output shape: {result.reason}")
    return result


# =============================================================================
# SALVAGE (hobby ideas only)
# =============================================================================

def salvage_ideas_from_text(
    content: str,
    hobby: str,
    rng: Optional[random.Random] = None,
) -> List[HobbyIdea]:
    """
    Build placeholder ideas from prose when the model ignored the JSON format.

    One idea per non-empty line, at most MAX_SALVAGED_IDEAS. The icon is
    drawn from SALVAGE_ICONS with ``rng`` (pass a seeded Random for
    reproducible output). Returns an empty list when there are no lines.
    """
    rng = rng or random.Random()
    lines = [line for line in content.split("\n") if line.strip()]

    ideas: List[HobbyIdea] = []
    for index, line in enumerate(lines[:MAX_SALVAGED_IDEAS]):
        ideas.append({
            "method": f"{hobby} Opportunity {index + 1}",
            "description": ENUMERATION_PREFIX_PATTERN.sub("", line.strip()).strip(),
            "tools": SALVAGE_TOOLS,
            "earnings": SALVAGE_EARNINGS,
            "icon": rng.choice(SALVAGE_ICONS),
        })

    if ideas:
        logger.warning(f"Salvaged {len(ideas)} ideas from non-JSON model output")
    return ideas
