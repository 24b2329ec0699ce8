"""Persistence for generated recommendations."""
from __future__ import annotations

from sqlalchemy.orm import Session

from app.models.database_models import Recommendation


class RecommendationStore:
    """Repository for recommendation rows."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, recommendation: Recommendation) -> Recommendation:
        """Insert ``recommendation`` and flush so its id is populated."""
        self.db.add(recommendation)
        self.db.flush()
        return recommendation

    def find_by_user_id(self, user_id: str) -> list[Recommendation]:
        """All recommendations for a user, newest first."""
        return (
            self.db.query(Recommendation)
            .filter(Recommendation.user_id == user_id)
            .order_by(Recommendation.created_at.desc())
            .all()
        )

    def find_by_activity_id(self, activity_id: str) -> Recommendation | None:
        """The newest recommendation for an activity, if any."""
        return (
            self.db.query(Recommendation)
            .filter(Recommendation.activity_id == activity_id)
            .order_by(Recommendation.created_at.desc())
            .first()
        )
