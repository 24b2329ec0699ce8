"""Regenerate AI coaching feedback for a stored activity."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import get_settings
from app.database import SessionLocal, run_migrations
from app.exceptions import ActivityNotFoundError
from app.logging_config import configure_logging
from app.services.activity_analyzer import ActivityAnalyzer
from app.services.activity_service import ActivityService
from app.services.recommendation_store import RecommendationStore


logger = logging.getLogger("scripts.generate_recommendation")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a recommendation for a tracked activity",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate and store a new recommendation
  python scripts/generate_recommendation.py --activity-id 3f2c...

  # Print the recommendation without storing it
  python scripts/generate_recommendation.py --activity-id 3f2c... --dry-run
        """
    )
    parser.add_argument(
        "--activity-id",
        type=str,
        required=True,
        help="Identifier of the stored activity"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the recommendation without saving it"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show detailed output"
    )
    return parser.parse_args()


async def generate(activity_id: str, dry_run: bool = False, verbose: bool = False) -> int:
    """Generate feedback for one activity. Returns a process exit code."""

    analyzer = ActivityAnalyzer()
    with SessionLocal() as db:
        try:
            activity = ActivityService(db).get_activity(activity_id)
        except ActivityNotFoundError as e:
            logger.error("❌ %s", e)
            return 1

        recommendation = await analyzer.generate_recommendation(activity)

        if verbose or dry_run:
            logger.info("Recommendation: %s", recommendation.recommendation or "(no analysis)")
            for label, items in (
                ("Improvements", recommendation.improvements),
                ("Suggestions", recommendation.suggestions),
                ("Safety", recommendation.safety),
            ):
                logger.info("%s:", label)
                for item in items:
                    logger.info("  - %s", item)

        if dry_run:
            logger.info("⏭️  Dry run, recommendation not saved")
            return 0

        RecommendationStore(db).save(recommendation)
        db.commit()
        logger.info("✅ Saved recommendation %s for activity %s", recommendation.id, activity_id)
    return 0


def main() -> None:
    args = parse_args()

    configure_logging()
    # Validate configuration early to surface a missing API key before work begins.
    get_settings()

    # Ensure database schema is up to date
    run_migrations()

    sys.exit(asyncio.run(generate(args.activity_id, dry_run=args.dry_run, verbose=args.verbose)))


if __name__ == "__main__":
    main()
