from .vision_client import VisionClient
from .detection_parser import parse_detections

__all__ = ["VisionClient", "parse_detections"]
