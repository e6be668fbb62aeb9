"""
Session content generator - generates and stores the recap for one session
1. Reuse stored content unless regeneration is forced
2. Run the content engine on the session
3. Save the bundle with metadata
"""
from typing import Any, Dict, Optional

from models.activity import RecordingSession
from layer_1_session_import.storage import ContentStorage
from layer_3_content_generation.content_generator import generate_for_session
from utils.logger import get_logger

logger = get_logger(__name__)


class SessionContentGenerator:
    """Generate recap content for recorded sessions"""

    def __init__(self, content_storage: Optional[ContentStorage] = None):
        """
        Initialize session content generator

        Args:
            content_storage: ContentStorage instance (creates new one if not provided)
        """
        self.content_storage = content_storage or ContentStorage()

    def generate_content(self, session: RecordingSession,
                         force_regenerate: bool = False) -> Dict[str, Any]:
        """
        Generate recap content for a session

        Args:
            session: Session to summarize
            force_regenerate: If True, regenerate even if content already exists

        Returns:
            Stored record with session_id, profile_type, generated_at and content
        """
        if not force_regenerate:
            existing = self.content_storage.load_content(session.id)
            if existing is not None:
                logger.info(f"Content already exists for session {session.id}, loading existing...")
                return {
                    "session_id": session.id,
                    "profile_type": session.profile_type,
                    "content": existing.to_dict(),
                }

        logger.info(f"Generating content for session {session.id} ({len(session.events)} events)")
        content = generate_for_session(session)

        return self.content_storage.save_content(session.id, session.profile_type, content)
