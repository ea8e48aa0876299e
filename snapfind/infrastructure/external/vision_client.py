"""OpenAI-compatible vision client for object detection in images."""
import logging
from typing import Any, Dict, List, Optional

import httpx

from ...core.config import get_settings
from ...domain.models.detection import Detection
from ..http_client_factory import get_shared_http_client
from .detection_parser import parse_detections

logger = logging.getLogger(__name__)

DETECTION_PROMPT = (
    "Analyze this image and identify all objects with their approximate positions. "
    "For each object, estimate its position as a percentage from the top-left corner. "
    "Return a JSON array like this: "
    '[{"name": "phone", "x": 25, "y": 30}, {"name": "book", "x": 70, "y": 60}] '
    "Where x is percentage from left (0-100) and y is percentage from top (0-100). "
    "Focus on clearly visible objects. Only return the JSON array, no other text."
)

# Returned when no API key is configured
DEMO_DETECTIONS = (
    Detection("phone", 30.0, 40.0),
    Detection("table", 60.0, 70.0),
    Detection("book", 45.0, 25.0),
)

# Returned when the API call itself fails
FALLBACK_DETECTIONS = (
    Detection("camera", 40.0, 50.0),
    Detection("object", 65.0, 35.0),
)


class VisionClient:
    """
    Sends an image URL to a chat-completions endpoint and parses the answer.

    Never raises for API trouble: the capture flow keeps going with the demo
    or fallback detections and the user confirms or edits them.
    """

    MAX_TOKENS = 300
    TEMPERATURE = 0.3

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        settings = get_settings()
        self._http_client = http_client
        self.api_key = api_key if api_key is not None else settings.openai_api_key
        self.model = model or settings.vision_model
        self.api_url = api_url or settings.vision_api_url
        self.timeout = timeout or settings.vision_timeout_seconds

        if not self.api_key:
            logger.warning("OPENAI_API_KEY not configured, vision client returns demo detections")

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client or get_shared_http_client()

    def _build_payload(self, image_url: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": DETECTION_PROMPT},
                        {"type": "image_url", "image_url": {"url": image_url, "detail": "high"}},
                    ],
                }
            ],
            "max_tokens": self.MAX_TOKENS,
            "temperature": self.TEMPERATURE,
        }

    async def analyze_image_url(self, image_url: str) -> List[Detection]:
        """
        Detect objects in the image behind ``image_url``.

        Returns:
            Detections with positions in percent of width/height
        """
        if not self.api_key:
            return list(DEMO_DETECTIONS)

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        logger.debug(f"Calling vision API with model: {self.model}")

        try:
            response = await self.http_client.post(
                self.api_url,
                headers=headers,
                json=self._build_payload(image_url),
                timeout=self.timeout,
            )
            response.raise_for_status()
            result = response.json()
        except httpx.TimeoutException:
            logger.error(f"Vision API did not answer within {self.timeout}s")
            return list(FALLBACK_DETECTIONS)
        except httpx.HTTPStatusError as e:
            logger.error(f"Vision API error: {e.response.status_code} - {e.response.text[:500]}")
            return list(FALLBACK_DETECTIONS)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error calling vision API: {e}", exc_info=True)
            return list(FALLBACK_DETECTIONS)

        content = self._extract_content(result)
        if content is None:
            logger.error(f"Vision API returned an unexpected body: {str(result)[:500]}")
            return list(FALLBACK_DETECTIONS)
        logger.debug(f"Raw vision response: {content[:500]}")
        return parse_detections(content)

    @staticmethod
    def _extract_content(result: Any) -> Optional[str]:
        """Message content of the first choice, None when the body has another shape"""
        if not isinstance(result, dict):
            return None
        choices = result.get("choices")
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            return None
        message = choices[0].get("message")
        if not isinstance(message, dict):
            return None
        content = message.get("content")
        return content if isinstance(content, str) else ""
