"""FastAPI application entry point."""
from fastapi import FastAPI

from app.logging_config import configure_logging
from app.routers import activities, recommendations


configure_logging()

app = FastAPI(title="Activity Coach API")


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Simple health probe for liveness checks."""
    return {"status": "ok"}


# Include routers
app.include_router(activities.router)
app.include_router(recommendations.router)


if __name__ == "__main__":
    import uvicorn

    from app.config import get_settings

    settings = get_settings()
    uvicorn.run(app, host=settings.app_host, port=settings.app_port, log_level=settings.log_level.lower())
