import json
import re
from typing import Any, List

from pantry_chef.logging import get_logger
from pantry_chef.services.matching.normalizer import normalize

logger = get_logger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def clean_ingredients(ingredients: List[str]) -> List[str]:
    """Normalize each ingredient and drop blanks, keeping order."""
    cleaned = [normalize(item) for item in ingredients]
    return [item for item in cleaned if item]


def parse_ingredient_list(text: str) -> List[str]:
    """Split the recipe form's comma-separated ingredient text."""
    return clean_ingredients(text.split(","))


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences LLMs wrap around JSON answers."""
    return _FENCE_RE.sub("", text or "").strip()


def parse_json_object(text: str) -> dict[str, Any]:
    """
    Parse a JSON object out of a model response.
    Raises ValueError when the payload is not valid JSON or not an object.
    """
    cleaned = strip_code_fences(text)
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.warning("parser.json_invalid error=%s text=%s", e, cleaned[:200])
        raise ValueError(f"invalid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise ValueError("expected a JSON object")
    return payload
