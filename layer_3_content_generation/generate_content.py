"""
Entry point for generating recap content

This file turns every recorded session in the sessions folder into a recap
bundle (title, summary, insights, takeaways, action items, related topics,
timeline, tags and confidence) and saves it to the content folder.
"""
from typing import Any, Dict, List, Optional

from layer_1_session_import.storage import SessionStorage, ContentStorage
from layer_1_session_import.validator import InvalidInputError
from layer_3_content_generation.session_content_generator import SessionContentGenerator
from utils.logger import get_logger

logger = get_logger(__name__)


def generate_all_content(session_storage: Optional[SessionStorage] = None,
                         content_storage: Optional[ContentStorage] = None,
                         force_regenerate: bool = False) -> List[Dict[str, Any]]:
    """
    Generate content for all stored sessions - Main function

    A session that fails to load or validate is logged and reported with an
    "error" key; the remaining sessions are still processed.

    Args:
        session_storage: Where sessions are read from
        content_storage: Where generated content is written
        force_regenerate: If True, regenerate content that already exists

    Returns:
        List of result dictionaries - one for each session
    """
    logger.info("=" * 80)
    logger.info("Starting Recap Content Generation Workflow")
    logger.info("=" * 80)

    session_storage = session_storage or SessionStorage()
    session_ids = session_storage.list_session_ids()

    if not session_ids:
        logger.warning(f"No session files found in {session_storage.sessions_dir}")
        return []

    logger.info(f"Found {len(session_ids)} sessions to process")

    generator = SessionContentGenerator(content_storage)
    results = []

    for session_id in session_ids:
        try:
            logger.info(f"Processing session: {session_id}")
            session = session_storage.load_session(session_id)
            results.append(generator.generate_content(session, force_regenerate=force_regenerate))

        except (InvalidInputError, OSError) as e:
            logger.error(f"Error generating content for session {session_id}: {e}", exc_info=True)
            results.append({
                "session_id": session_id,
                "error": str(e)
            })

    successful = len([r for r in results if 'error' not in r])
    logger.info(f"\n{'=' * 80}")
    logger.info("Content Generation Summary")
    logger.info(f"{'=' * 80}")
    logger.info(f"Processed: {successful}/{len(session_ids)} sessions successfully")
    logger.info(f"{'=' * 80}")

    return results


def generate_content_for_session(session_id: str,
                                 session_storage: Optional[SessionStorage] = None,
                                 content_storage: Optional[ContentStorage] = None,
                                 force_regenerate: bool = False) -> Dict[str, Any]:
    """
    Generate content for a specific session

    Args:
        session_id: Session id (session_<id>.json)
        session_storage: Where the session is read from
        content_storage: Where generated content is written
        force_regenerate: If True, regenerate content that already exists

    Returns:
        Result dictionary, with an "error" key if the session could not be processed
    """
    logger.info(f"Generating content for session: {session_id}")

    session_storage = session_storage or SessionStorage()
    try:
        session = session_storage.load_session(session_id)
    except FileNotFoundError:
        logger.error(f"Session file not found for session {session_id}")
        return {
            "session_id": session_id,
            "error": "Session file not found"
        }
    except InvalidInputError as e:
        logger.error(f"Invalid session {session_id}: {e}")
        return {
            "session_id": session_id,
            "error": str(e)
        }

    generator = SessionContentGenerator(content_storage)
    try:
        return generator.generate_content(session, force_regenerate=force_regenerate)
    except InvalidInputError as e:
        logger.error(f"Could not generate content for session {session_id}: {e}")
        return {
            "session_id": session_id,
            "error": str(e)
        }


if __name__ == "__main__":
    import sys

    if len(sys.argv) > 1:
        session_id = sys.argv[1]
        result = generate_content_for_session(session_id, force_regenerate=True)
        if 'error' not in result:
            content = result.get('content', {})
            print(f"\n✅ Content generated for session {session_id}")
            print(f"Title: {content.get('title', 'N/A')}")
            print(f"Confidence: {content.get('confidence', 'N/A')}")
        else:
            print(f"\n❌ Error: {result.get('error')}")
    else:
        results = generate_all_content()
        print(f"\n✅ Generated content for {len([r for r in results if 'error' not in r])} sessions")
