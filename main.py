"""
Main entry point for the application

Runs the recap pipeline over every recorded session:
1. Load sessions from the sessions folder and validate them
2. Generate the recap content for each session
3. Save each recap to the content folder

Pass --force to regenerate recaps that already exist.
"""
import sys

from config.settings import settings
from layer_3_content_generation.generate_content import generate_all_content
from utils.logger import get_logger

logger = get_logger(__name__)


def main(argv=None):
    """
    Main entry point - runs the complete workflow

    Returns:
        0 on success, 1 if the run failed or any session could not be processed
    """
    argv = sys.argv[1:] if argv is None else argv
    force_regenerate = "--force" in argv

    try:
        logger.info("=" * 60)
        logger.info("Recap Content Engine - Starting")
        logger.info("=" * 60)

        settings.ensure_directories()

        results = generate_all_content(force_regenerate=force_regenerate)

        failed = [r for r in results if 'error' in r]
        logger.info("=" * 60)
        logger.info(f"✅ Content generation complete! Generated {len(results) - len(failed)} recaps")
        if failed:
            logger.warning(f"{len(failed)} sessions failed: {', '.join(r['session_id'] for r in failed)}")
        logger.info("=" * 60)

        return 1 if failed else 0

    except Exception as e:
        logger.error(f"Error in main workflow: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
