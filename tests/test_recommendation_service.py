"""Tests for recommendation persistence and queries."""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta

import pytest

from app.exceptions import NotFoundError, RecommendationNotFoundError
from app.models.database_models import Activity
from app.services.recommendation_builder import default_recommendation
from app.services.recommendation_service import RecommendationService
from app.services.recommendation_store import RecommendationStore


def make_activity(user_id: str) -> Activity:
    return Activity(
        id=str(uuid.uuid4()),
        user_id=user_id,
        type="CYCLING",
        duration=60,
        calories_burned=600,
        additional_metrics={},
    )


def test_user_without_recommendations_gets_empty_list(db_session):
    assert RecommendationService(db_session).get_user_recommendations("nobody") == []


def test_unknown_activity_raises_not_found(db_session):
    with pytest.raises(RecommendationNotFoundError) as excinfo:
        RecommendationService(db_session).get_activity_recommendation("missing-activity")

    assert isinstance(excinfo.value, NotFoundError)
    assert "missing-activity" in str(excinfo.value)


def test_saved_recommendations_are_returned_per_user(db_session):
    user_id = f"user-{uuid.uuid4()}"
    store = RecommendationStore(db_session)
    first, second = make_activity(user_id), make_activity(user_id)
    store.save(default_recommendation(first))
    store.save(default_recommendation(second))
    store.save(default_recommendation(make_activity("someone-else")))

    recommendations = RecommendationService(db_session).get_user_recommendations(user_id)

    assert {r.activity_id for r in recommendations} == {first.id, second.id}
    assert all(r.id for r in recommendations)


def test_activity_lookup_returns_newest(db_session):
    activity = make_activity(f"user-{uuid.uuid4()}")
    store = RecommendationStore(db_session)
    older = default_recommendation(activity)
    older.created_at = datetime.utcnow() - timedelta(hours=1)
    store.save(older)
    newer = store.save(default_recommendation(activity))

    found = RecommendationService(db_session).get_activity_recommendation(activity.id)

    assert found.id == newer.id
    assert found.id != older.id
