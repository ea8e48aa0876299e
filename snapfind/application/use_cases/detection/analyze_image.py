# Standard library imports
import logging

# Local application imports
from ....core.config import get_settings
from ....core.exceptions import ValidationError
from ....infrastructure.external.vision_client import VisionClient
from ....infrastructure.storage.object_storage import ObjectStorageService
from ....infrastructure.storage.url_helpers import create_storage_reference
from ...dto.image_dto import AnalyzeImageResponse, DetectionResponse

logger = logging.getLogger(__name__)


class AnalyzeImageUseCase:
    """
    Ask the vision API which objects an image shows.

    The image is signed with a short lifetime just for the API call. URLs
    that do not point into the bucket are sent as they are.
    """

    def __init__(self, storage_service: ObjectStorageService, vision_client: VisionClient) -> None:
        self.storage_service = storage_service
        self.vision_client = vision_client

    async def execute(self, image_url: str) -> AnalyzeImageResponse:
        if not image_url:
            raise ValidationError("Image reference is required")

        reference = create_storage_reference(image_url)
        if reference.startswith("http"):
            analysis_url = reference
        else:
            analysis_url = await self.storage_service.create_signed_url(
                reference, get_settings().analysis_url_ttl_seconds
            )

        detections = await self.vision_client.analyze_image_url(analysis_url)
        logger.info(f"Vision analysis of {reference} found {len(detections)} objects")
        return AnalyzeImageResponse(
            image_url=reference,
            detections=[DetectionResponse(name=d.name, x=d.x, y=d.y) for d in detections],
        )
