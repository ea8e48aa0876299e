# Standard library imports
import logging
from datetime import datetime
from typing import Any, Optional

# Local application imports
from ....core.config import get_settings
from ....core.exceptions import RemoteStoreError
from ....domain.repositories.picture_repository import PictureRepository
from ....utils.datetime_utils import local_day_bounds
from ....utils.user_id import safe_user_id
from ...dto.picture_dto import DailyQuotaResponse

logger = logging.getLogger(__name__)


class CheckDailyQuotaUseCase:
    """
    Whether the owner may capture another picture today.

    Counts active pictures created between local midnight and the next
    local midnight in the configured timezone. Deleting a picture frees a
    slot. When the count cannot be read the check lets the capture through.
    """

    def __init__(self, picture_repository: PictureRepository, daily_limit: Optional[int] = None) -> None:
        self.picture_repository = picture_repository
        self.daily_limit = daily_limit if daily_limit is not None else get_settings().daily_picture_limit

    async def execute(self, user: Any, reference: Optional[datetime] = None) -> DailyQuotaResponse:
        user_id = safe_user_id(user)
        if not user_id:
            logger.error("No valid user ID available for checking daily limit")
            return DailyQuotaResponse(can_capture=False, today_count=0, limit=self.daily_limit)

        start_utc, end_utc = local_day_bounds(reference)
        try:
            today_count = await self.picture_repository.count_created_between(user_id, start_utc, end_utc)
        except RemoteStoreError as e:
            logger.error(f"Daily limit check failed for user {user_id}, allowing capture: {e}")
            return DailyQuotaResponse(can_capture=True, today_count=0, limit=self.daily_limit)

        logger.info(f"Daily usage for user {user_id}: {today_count}/{self.daily_limit} pictures")
        return DailyQuotaResponse(
            can_capture=today_count < self.daily_limit,
            today_count=today_count,
            limit=self.daily_limit,
        )
