"""
Defensive parsing of the vision model's answer.

The model is asked for a JSON array of ``{"name", "x", "y"}`` objects but
answers in free text often enough: wrapped in Markdown fences, as a bare
list of names, or as prose. Every shape maps to at least one Detection.
"""
import json
import logging
import re
from typing import Any, List, Optional

from ...domain.models.detection import Detection

logger = logging.getLogger(__name__)

COMMON_OBJECTS = (
    "chair", "table", "book", "phone", "laptop", "cup", "bottle", "bag",
    "keys", "glasses", "pen", "paper", "clock", "lamp", "plant", "picture",
    "computer", "mouse", "keyboard", "monitor", "headphones", "camera",
    "wallet", "watch", "shoe", "shirt", "jacket", "hat", "pillow", "blanket",
)
MAX_KEYWORD_OBJECTS = 5
DEFAULT_POSITION = 50.0

_FENCE_START = re.compile(r"^```(?:json)?\s*")
_FENCE_END = re.compile(r"\s*```$")
_WORD = re.compile(r"\b[a-z]+\b")


def strip_code_fences(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _FENCE_END.sub("", _FENCE_START.sub("", cleaned))
    return cleaned.strip()


def _clamp_position(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_POSITION
    return float(max(0, min(100, value)))


def _from_item(item: Any, index: int) -> Optional[Detection]:
    if isinstance(item, dict):
        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            return None
        return Detection(
            name=name.strip().lower(),
            x=_clamp_position(item.get("x")),
            y=_clamp_position(item.get("y")),
        )
    if isinstance(item, str) and item.strip():
        # Bare names: spread them over the image
        return Detection(
            name=item.strip().lower(),
            x=float(20 + (index * 15) % 60),
            y=float(20 + (index * 20) % 60),
        )
    return None


def extract_objects_from_text(text: str) -> List[str]:
    """Known object words in order of appearance, unique, at most five."""
    found: List[str] = []
    for word in _WORD.findall(text.lower()):
        if word in COMMON_OBJECTS and word not in found:
            found.append(word)
            if len(found) == MAX_KEYWORD_OBJECTS:
                break
    return found


def parse_detections(text: Optional[str]) -> List[Detection]:
    """
    Turn the raw model answer into detections.

    Args:
        text: Content of the chat completion message

    Returns:
        Detections, empty only when the model answered with an empty array
    """
    text = text or ""
    try:
        data = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as e:
        logger.warning(f"Vision response is not JSON ({e}), extracting keywords")
        names = extract_objects_from_text(text)
        if not names:
            return [Detection("detected object", DEFAULT_POSITION, DEFAULT_POSITION)]
        return [
            Detection(name, float(25 + (i * 20) % 50), float(25 + (i * 25) % 50))
            for i, name in enumerate(names)
        ]

    if not isinstance(data, list):
        logger.warning(f"Vision response is not an array: {text[:200]}")
        return [Detection("unknown object", DEFAULT_POSITION, DEFAULT_POSITION)]

    detections = [d for d in (_from_item(item, i) for i, item in enumerate(data)) if d]
    logger.debug(f"Parsed {len(detections)} detections from vision response")
    return detections
