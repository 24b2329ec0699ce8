"""Activity tracking and lookup."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.exceptions import ActivityNotFoundError
from app.models.database_models import Activity
from app.models.schemas import ActivityCreate


logger = logging.getLogger(__name__)


class ActivityService:
    """Stores activities and reads them back."""

    def __init__(self, db: Session):
        self.db = db

    def track_activity(self, payload: ActivityCreate) -> Activity:
        """Persist a new activity and return it with its generated id."""
        activity = Activity(
            user_id=payload.user_id,
            type=payload.type.value,
            duration=payload.duration,
            calories_burned=payload.calories_burned,
            start_time=payload.start_time,
            additional_metrics=dict(payload.additional_metrics),
        )
        self.db.add(activity)
        self.db.flush()
        logger.info("Tracked activity %s for user %s (type=%s)", activity.id, activity.user_id, activity.type)
        return activity

    def get_user_activities(self, user_id: str) -> list[Activity]:
        return (
            self.db.query(Activity)
            .filter(Activity.user_id == user_id)
            .order_by(Activity.created_at.desc())
            .all()
        )

    def get_activity(self, activity_id: str) -> Activity:
        activity = self.db.get(Activity, activity_id)
        if activity is None:
            raise ActivityNotFoundError(activity_id)
        return activity
