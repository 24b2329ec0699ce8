"""Domain errors surfaced to API callers."""


class NotFoundError(Exception):
    """Raised when a lookup by identifier finds nothing."""


class ActivityNotFoundError(NotFoundError):
    def __init__(self, activity_id: str) -> None:
        super().__init__(f"Activity not found with id: {activity_id}")
        self.activity_id = activity_id


class RecommendationNotFoundError(NotFoundError):
    def __init__(self, activity_id: str) -> None:
        super().__init__(f"No recommendation found for the activity: {activity_id}")
        self.activity_id = activity_id


class AITransportError(Exception):
    """The generative-AI endpoint could not produce a response."""
