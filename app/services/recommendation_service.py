"""Read access to stored recommendations."""
from __future__ import annotations

from sqlalchemy.orm import Session

from app.exceptions import RecommendationNotFoundError
from app.models.database_models import Recommendation
from app.services.recommendation_store import RecommendationStore


class RecommendationService:
    def __init__(self, db: Session):
        self.store = RecommendationStore(db)

    def get_user_recommendations(self, user_id: str) -> list[Recommendation]:
        return self.store.find_by_user_id(user_id)

    def get_activity_recommendation(self, activity_id: str) -> Recommendation:
        """Return the newest recommendation for an activity.

        Raises:
            RecommendationNotFoundError: nothing has been generated for it.
        """
        recommendation = self.store.find_by_activity_id(activity_id)
        if recommendation is None:
            raise RecommendationNotFoundError(activity_id)
        return recommendation
