"""
Storage module for recorded sessions and generated recap content

Sessions are read from SESSIONS_DIR (session_<id>.json) and each generated
bundle is written to CONTENT_DIR (content_<id>.json).
"""
import json
import os
from datetime import datetime
from typing import Any, Dict, List, Optional

from config.settings import settings
from models.activity import RecordingSession
from models.generated_content import GeneratedContent
from layer_1_session_import.validator import EventValidator, InvalidInputError
from utils.logger import get_logger

logger = get_logger(__name__)


class SessionStorage:
    """Load recorded sessions from JSON files"""

    def __init__(self, sessions_dir: str = None):
        """
        Initialize storage

        Args:
            sessions_dir: Directory holding session files
        """
        self.sessions_dir = sessions_dir or settings.SESSIONS_DIR
        os.makedirs(self.sessions_dir, exist_ok=True)

    def _get_filename(self, session_id: str) -> str:
        """Get filename for a session"""
        return os.path.join(self.sessions_dir, f"session_{session_id}.json")

    def list_session_ids(self) -> List[str]:
        """
        List the ids of all stored sessions, sorted

        Returns:
            Session ids taken from session_<id>.json filenames
        """
        session_files = [
            f for f in os.listdir(self.sessions_dir)
            if f.startswith('session_') and f.endswith('.json')
        ]
        return sorted(f[len('session_'):-len('.json')] for f in session_files)

    def load_session(self, session_id: str) -> RecordingSession:
        """
        Load and parse one session

        Args:
            session_id: Session id

        Returns:
            Parsed RecordingSession

        Raises:
            FileNotFoundError: if the session file does not exist
            InvalidInputError: if the file does not hold a well-formed session
        """
        filename = self._get_filename(session_id)
        with open(filename, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidInputError(f"Session file {filename} is not valid JSON: {e}") from e

        return self.parse_session(data)

    @staticmethod
    def parse_session(data: Dict[str, Any]) -> RecordingSession:
        """
        Parse a session dictionary, checking every event first

        Args:
            data: Session dictionary as written by the recorder

        Returns:
            Parsed RecordingSession

        Raises:
            InvalidInputError: on missing fields or unparsable values
        """
        if not isinstance(data, dict):
            raise InvalidInputError("Session must be a JSON object")

        for index, event_data in enumerate(data.get('events') or []):
            is_valid, error = EventValidator.validate_dict(event_data)
            if not is_valid:
                raise InvalidInputError(f"Invalid event #{index}: {error}")

        try:
            return RecordingSession.from_dict(data, default_profile=settings.DEFAULT_PROFILE_TYPE)
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidInputError(f"Malformed session {data.get('id', 'unknown')}: {e}") from e

    def save_session(self, session: RecordingSession):
        """
        Save a session to its JSON file

        Args:
            session: Session to store
        """
        filename = self._get_filename(session.id)
        with open(filename, 'w', encoding='utf-8') as f:
            f.write(session.to_json())
        logger.info(f"Saved session {session.id} with {len(session.events)} events to {filename}")


class ContentStorage:
    """Store generated recap content, one file per session"""

    def __init__(self, content_dir: str = None):
        """
        Initialize storage

        Args:
            content_dir: Directory to store content files
        """
        self.content_dir = content_dir or settings.CONTENT_DIR
        os.makedirs(self.content_dir, exist_ok=True)

    def _get_filename(self, session_id: str) -> str:
        """Get filename for a session's content"""
        return os.path.join(self.content_dir, f"content_{session_id}.json")

    def save_content(self, session_id: str, profile_type: str, content: GeneratedContent) -> Dict[str, Any]:
        """
        Save generated content with metadata

        Args:
            session_id: Session the content was generated from
            profile_type: Profile used for generation
            content: Generated bundle

        Returns:
            The stored record
        """
        record = {
            "session_id": session_id,
            "profile_type": profile_type,
            "generated_at": datetime.now().isoformat(),
            "content": content.to_dict(),
        }

        filename = self._get_filename(session_id)
        with open(filename, 'w', encoding='utf-8') as f:
            json.dump(record, f, indent=2, ensure_ascii=False)

        logger.info(f"Saved generated content for session {session_id} to {filename}")
        return record

    def load_content(self, session_id: str) -> Optional[GeneratedContent]:
        """
        Load previously generated content

        Args:
            session_id: Session id

        Returns:
            GeneratedContent, or None if nothing was generated yet

        Raises:
            InvalidInputError: if the stored file is not a readable content record
        """
        filename = self._get_filename(session_id)
        if not os.path.exists(filename):
            return None

        with open(filename, 'r', encoding='utf-8') as f:
            try:
                record = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidInputError(f"Content file {filename} is not valid JSON: {e}") from e

        try:
            return GeneratedContent.from_dict(record["content"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidInputError(f"Malformed content record in {filename}: {e}") from e
