"""API endpoints for tracking fitness activities."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import SessionLocal, get_db
from app.exceptions import NotFoundError
from app.models.schemas import ActivityCreate, ActivityResponse
from app.services.activity_analyzer import ActivityAnalyzer, get_activity_analyzer
from app.services.activity_service import ActivityService
from app.services.recommendation_store import RecommendationStore


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/activities", tags=["activities"])


async def generate_recommendation_for_activity(activity_id: str, analyzer: ActivityAnalyzer) -> None:
    """Background job run once per tracked activity.

    Uses its own session because the request session is closed by the time
    background tasks execute.
    """
    with SessionLocal() as session:
        try:
            activity = ActivityService(session).get_activity(activity_id)
            recommendation = await analyzer.generate_recommendation(activity)
            RecommendationStore(session).save(recommendation)
            session.commit()
        except Exception:
            session.rollback()
            logger.exception("Background recommendation failed for activity %s", activity_id)


@router.post("", response_model=ActivityResponse, status_code=201)
async def track_activity(
    payload: ActivityCreate,
    background_tasks: BackgroundTasks,
    db: Annotated[Session, Depends(get_db)],
    analyzer: Annotated[ActivityAnalyzer, Depends(get_activity_analyzer)],
):
    """
    Track a new activity.

    The activity is committed before responding; recommendation generation
    runs afterwards so a slow or failing AI call never blocks tracking.
    """

    try:
        activity = ActivityService(db).track_activity(payload)
        db.commit()
    except Exception as e:
        logger.exception("Failed to track activity for user %s", payload.user_id)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to track activity: {str(e)}"
        )

    background_tasks.add_task(generate_recommendation_for_activity, activity.id, analyzer)
    return activity


@router.get("/user/{user_id}", response_model=list[ActivityResponse])
async def get_user_activities(
    user_id: str,
    db: Annotated[Session, Depends(get_db)],
):
    """List a user's activities, newest first."""

    return ActivityService(db).get_user_activities(user_id)


@router.get("/{activity_id}", response_model=ActivityResponse)
async def get_activity(
    activity_id: str,
    db: Annotated[Session, Depends(get_db)],
):
    """Return one activity, or 404."""

    try:
        return ActivityService(db).get_activity(activity_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
