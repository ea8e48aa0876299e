# Standard library imports
import asyncio
import logging
from datetime import datetime, timedelta
from typing import Any, Optional

# Local application imports
from ....core.config import get_settings
from ....core.exceptions import AuthenticationError
from ....domain.repositories.picture_repository import PictureRepository
from ....utils.datetime_utils import local_day_bounds
from ....utils.user_id import safe_user_id
from ...dto.picture_dto import UsageStatsResponse

logger = logging.getLogger(__name__)


class GetUsageStatsUseCase:
    """Active picture counts for today, the last 7 days and the last 30 days"""

    def __init__(self, picture_repository: PictureRepository, daily_limit: Optional[int] = None) -> None:
        self.picture_repository = picture_repository
        self.daily_limit = daily_limit if daily_limit is not None else get_settings().daily_picture_limit

    async def execute(self, user: Any, reference: Optional[datetime] = None) -> UsageStatsResponse:
        user_id = safe_user_id(user)
        if not user_id:
            raise AuthenticationError("No valid user ID available for usage stats")

        today_start, today_end = local_day_bounds(reference)
        today, week, month = await asyncio.gather(
            self.picture_repository.count_created_between(user_id, today_start, today_end),
            self.picture_repository.count_created_between(user_id, today_start - timedelta(days=7), today_end),
            self.picture_repository.count_created_between(user_id, today_start - timedelta(days=30), today_end),
        )
        logger.info(f"Usage stats for user {user_id} - today: {today}, week: {week}, month: {month}")

        return UsageStatsResponse(
            today=today,
            this_week=week,
            this_month=month,
            daily_limit=self.daily_limit,
            remaining_today=max(0, self.daily_limit - today),
        )
