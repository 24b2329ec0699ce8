"""Create the data directory and apply database migrations."""
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from app.database import run_migrations
from app.logging_config import configure_logging


logger = logging.getLogger("scripts.initial_setup")


def main() -> None:
    configure_logging()
    data_dir = Path("data")
    data_dir.mkdir(exist_ok=True)
    run_migrations()
    logger.info("Database initialised at %s", data_dir)


if __name__ == "__main__":
    main()
