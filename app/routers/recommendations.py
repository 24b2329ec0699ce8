"""API endpoints for AI-generated activity recommendations."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.exceptions import NotFoundError
from app.models.schemas import RecommendationResponse
from app.services.activity_analyzer import ActivityAnalyzer, get_activity_analyzer
from app.services.activity_service import ActivityService
from app.services.recommendation_service import RecommendationService
from app.services.recommendation_store import RecommendationStore


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


@router.get("/user/{user_id}", response_model=list[RecommendationResponse])
async def get_user_recommendations(
    user_id: str,
    db: Annotated[Session, Depends(get_db)],
):
    """Return every recommendation generated for a user (empty list if none)."""

    try:
        recommendations = RecommendationService(db).get_user_recommendations(user_id)
        logger.info("Retrieved %d recommendation(s) for user %s", len(recommendations), user_id)
        return recommendations
    except Exception as e:
        logger.exception("Failed to list recommendations for user %s", user_id)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve recommendations: {str(e)}"
        )


@router.get("/activity/{activity_id}", response_model=RecommendationResponse)
async def get_activity_recommendation(
    activity_id: str,
    db: Annotated[Session, Depends(get_db)],
):
    """Return the newest recommendation for an activity, or 404."""

    try:
        return RecommendationService(db).get_activity_recommendation(activity_id)
    except NotFoundError as e:
        logger.info("Recommendation lookup miss: %s", e)
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception("Failed to retrieve recommendation for activity %s", activity_id)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve recommendation: {str(e)}"
        )


@router.post("/activity/{activity_id}/generate", response_model=RecommendationResponse, status_code=201)
async def regenerate_activity_recommendation(
    activity_id: str,
    db: Annotated[Session, Depends(get_db)],
    analyzer: Annotated[ActivityAnalyzer, Depends(get_activity_analyzer)],
):
    """
    Generate a fresh recommendation for a stored activity.

    Earlier recommendations are kept; lookups return the newest one.
    """

    try:
        activity = ActivityService(db).get_activity(activity_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        recommendation = await analyzer.generate_recommendation(activity)
        return RecommendationStore(db).save(recommendation)
    except Exception as e:
        logger.exception("Failed to regenerate recommendation for activity %s", activity_id)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to generate recommendation: {str(e)}"
        )
