"""
Comprehensive tests for Layer 1: Session Import & Validation
Tests model parsing, validator, session/content storage and the batch workflow
"""
import sys
import os
import json
import tempfile
import shutil
from datetime import datetime, timezone

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.activity import ActivityEvent, EventContent, RecordingSession, parse_timestamp
from models.generated_content import GeneratedContent
from layer_1_session_import.validator import (
    EventValidator,
    InvalidInputError,
    is_valid_profile,
    validate_engine_input
)
from layer_1_session_import.storage import SessionStorage, ContentStorage
from layer_3_content_generation.session_content_generator import SessionContentGenerator
from layer_3_content_generation.generate_content import generate_all_content, generate_content_for_session
from utils.logger import get_logger

logger = get_logger(__name__)


def sample_session_data(session_id="abc", profile="developer"):
    """Session dictionary in the recorder's camelCase format"""
    return {
        "id": session_id,
        "name": "Auth fixes",
        "startTime": "2026-10-19T09:00:00Z",
        "status": "completed",
        "profileType": profile,
        "tags": ["auth"],
        "events": [
            {
                "id": "e1",
                "timestamp": "2026-10-19T09:00:00Z",
                "type": "action",
                "source": "GitHub",
                "title": "Fix auth bug",
                "description": "PR opened",
                "content": {
                    "text": "Resolved issue where users were logged out unexpectedly",
                    "highlights": ["2 files changed"]
                }
            },
            {
                "id": "e2",
                "timestamp": 1792400700000,
                "type": "app",
                "source": "VS Code",
                "title": "Edit useAuth hook",
                "content": {"code": "export const useAuth = () => {}"}
            }
        ]
    }


class TestModels:
    """Test data model parsing"""

    def test_parse_timestamp_formats(self):
        """Test ISO strings with Z, epoch millis and datetimes"""
        iso = parse_timestamp("2026-10-19T09:00:00Z")
        assert iso == datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)
        assert parse_timestamp(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
        now = datetime.now()
        assert parse_timestamp(now) is now

    def test_parse_timestamp_invalid(self):
        with pytest.raises(ValueError):
            parse_timestamp("yesterday")
        with pytest.raises(ValueError):
            parse_timestamp(None)
        with pytest.raises(ValueError):
            parse_timestamp(True)

    def test_parse_timestamp_naive_iso_is_local(self):
        """Test ISO strings without an offset are read as local time"""
        parsed = parse_timestamp("2026-10-19T09:00:00")
        assert parsed.tzinfo is not None
        assert parsed == datetime(2026, 10, 19, 9, 0).astimezone()

    def test_session_mixing_epoch_and_naive_iso(self):
        """Test a session mixing epoch millis and offset-less ISO strings is accepted"""
        data = sample_session_data()
        data["events"][0]["timestamp"] = "2026-10-19T09:00:00"
        session = SessionStorage.parse_session(data)
        events = validate_engine_input(session.events, session.profile_type)
        assert len(events) == 2

    def test_event_from_dict(self):
        event = ActivityEvent.from_dict(sample_session_data()["events"][0])
        assert event.type == "action"
        assert event.content.highlights == ("2 files changed",)
        assert event.text_content.startswith("Resolved")
        assert event.code_content == ""

    def test_event_without_content(self):
        """Test missing content is treated as empty"""
        event = ActivityEvent.from_dict({
            "timestamp": "2026-10-19T09:00:00",
            "type": "tab",
            "source": "Chrome",
            "title": "Search"
        })
        assert event.content is None
        assert event.text_content == ""
        assert event.content_length == 0
        assert event.description == ""

    def test_summary_used_when_text_missing(self):
        event = ActivityEvent(
            timestamp=datetime(2026, 1, 1),
            type="tab",
            source="YouTube",
            title="Video",
            content=EventContent(summary="Key topics: hooks", code="x"),
        )
        assert event.text_content == "Key topics: hooks"
        assert event.content_length == len("Key topics: hooks") + 1

    def test_session_round_trip(self):
        session = RecordingSession.from_dict(sample_session_data())
        assert session.profile_type == "developer"
        assert len(session.events) == 2
        restored = RecordingSession.from_dict(json.loads(session.to_json()))
        assert restored == session

    def test_session_default_profile(self):
        data = sample_session_data()
        del data["profileType"]
        session = RecordingSession.from_dict(data, default_profile="student")
        assert session.profile_type == "student"


class TestValidator:
    """Test boundary validation"""

    def test_is_valid_profile(self):
        for profile in ("student", "developer", "support", "researcher", "custom"):
            assert is_valid_profile(profile) == True
        assert is_valid_profile("manager") == False
        assert is_valid_profile("") == False

    def test_validate_dict_missing_field(self):
        data = dict(sample_session_data()["events"][0])
        del data["title"]
        is_valid, error = EventValidator.validate_dict(data)
        assert is_valid == False
        assert "title" in error

    def test_validate_dict_bad_content(self):
        data = dict(sample_session_data()["events"][0], content="text")
        is_valid, error = EventValidator.validate_dict(data)
        assert is_valid == False

    def test_validate_event(self):
        event = ActivityEvent.from_dict(sample_session_data()["events"][0])
        assert EventValidator.validate(event) == (True, None)

    def test_validate_non_string_source(self):
        event = ActivityEvent(timestamp=datetime(2026, 1, 1), type="tab", source=None, title="x")
        is_valid, error = EventValidator.validate(event)
        assert is_valid == False
        assert "source" in error

    def test_validate_engine_input_returns_list(self):
        events = tuple(RecordingSession.from_dict(sample_session_data()).events)
        result = validate_engine_input(events, "developer")
        assert isinstance(result, list)
        assert len(result) == 2

    def test_validate_engine_input_rejects_string(self):
        with pytest.raises(InvalidInputError):
            validate_engine_input("events", "developer")

    def test_invalid_input_is_value_error(self):
        assert issubclass(InvalidInputError, ValueError)


class TestStorage:
    """Test session and content storage"""

    def test_save_and_load_session(self):
        temp_dir = tempfile.mkdtemp()
        try:
            storage = SessionStorage(temp_dir)
            session = RecordingSession.from_dict(sample_session_data("s1"))
            storage.save_session(session)

            assert storage.list_session_ids() == ["s1"]
            assert storage.load_session("s1") == session
        finally:
            shutil.rmtree(temp_dir)

    def test_list_ignores_other_files(self):
        temp_dir = tempfile.mkdtemp()
        try:
            storage = SessionStorage(temp_dir)
            for name in ("session_b.json", "session_a.json", "notes.txt", "content_a.json"):
                with open(os.path.join(temp_dir, name), 'w', encoding='utf-8') as f:
                    f.write("{}")
            assert storage.list_session_ids() == ["a", "b"]
        finally:
            shutil.rmtree(temp_dir)

    def test_load_invalid_json(self):
        temp_dir = tempfile.mkdtemp()
        try:
            with open(os.path.join(temp_dir, "session_bad.json"), 'w', encoding='utf-8') as f:
                f.write("{not json")
            with pytest.raises(InvalidInputError):
                SessionStorage(temp_dir).load_session("bad")
        finally:
            shutil.rmtree(temp_dir)

    def test_load_corrupt_content(self):
        """Test unreadable content files raise InvalidInputError"""
        temp_dir = tempfile.mkdtemp()
        try:
            storage = ContentStorage(temp_dir)
            with open(os.path.join(temp_dir, "content_bad.json"), 'w', encoding='utf-8') as f:
                f.write("{broken")
            with pytest.raises(InvalidInputError):
                storage.load_content("bad")

            with open(os.path.join(temp_dir, "content_norecord.json"), 'w', encoding='utf-8') as f:
                json.dump({"session_id": "norecord"}, f)
            with pytest.raises(InvalidInputError):
                storage.load_content("norecord")
        finally:
            shutil.rmtree(temp_dir)

    def test_parse_session_missing_event_field(self):
        data = sample_session_data()
        del data["events"][1]["source"]
        with pytest.raises(InvalidInputError):
            SessionStorage.parse_session(data)

    def test_parse_session_bad_timestamp(self):
        data = sample_session_data()
        data["events"][0]["timestamp"] = "not a date"
        with pytest.raises(InvalidInputError):
            SessionStorage.parse_session(data)

    def test_content_round_trip(self):
        temp_dir = tempfile.mkdtemp()
        try:
            storage = ContentStorage(temp_dir)
            assert storage.load_content("s1") is None

            content = GeneratedContent(title="T", summary="S", insights=("i",), confidence=42)
            record = storage.save_content("s1", "developer", content)
            assert record["session_id"] == "s1"
            assert record["content"]["confidence"] == 42
            assert storage.load_content("s1") == content
        finally:
            shutil.rmtree(temp_dir)


class TestGenerationWorkflow:
    """Test the batch generation workflow over stored sessions"""

    def test_generate_all_content(self):
        """Test good sessions are generated and bad ones reported"""
        temp_dir = tempfile.mkdtemp()
        try:
            sessions_dir = os.path.join(temp_dir, "sessions")
            content_dir = os.path.join(temp_dir, "content")
            session_storage = SessionStorage(sessions_dir)
            content_storage = ContentStorage(content_dir)

            session_storage.save_session(RecordingSession.from_dict(sample_session_data("good")))
            with open(os.path.join(sessions_dir, "session_wrong.json"), 'w', encoding='utf-8') as f:
                json.dump(sample_session_data("wrong", profile="manager"), f)

            results = generate_all_content(session_storage, content_storage)

            assert len(results) == 2
            by_id = {r["session_id"]: r for r in results}
            assert "error" in by_id["wrong"]
            assert "error" not in by_id["good"]
            assert by_id["good"]["content"]["title"].startswith("Dev Session: GitHub & VS Code")
            assert os.path.exists(os.path.join(content_dir, "content_good.json"))
        finally:
            shutil.rmtree(temp_dir)

    def test_generate_all_content_no_sessions(self):
        temp_dir = tempfile.mkdtemp()
        try:
            results = generate_all_content(SessionStorage(temp_dir), ContentStorage(temp_dir))
            assert results == []
        finally:
            shutil.rmtree(temp_dir)

    def test_existing_content_reused(self):
        """Test stored content is loaded unless regeneration is forced"""
        temp_dir = tempfile.mkdtemp()
        try:
            content_storage = ContentStorage(temp_dir)
            session = RecordingSession.from_dict(sample_session_data("s1"))
            placeholder = GeneratedContent(title="Stored", summary="Stored summary")
            content_storage.save_content("s1", "developer", placeholder)

            generator = SessionContentGenerator(content_storage)
            assert generator.generate_content(session)["content"]["title"] == "Stored"

            regenerated = generator.generate_content(session, force_regenerate=True)
            assert regenerated["content"]["title"] != "Stored"
            assert content_storage.load_content("s1").title == regenerated["content"]["title"]
        finally:
            shutil.rmtree(temp_dir)

    def test_corrupt_content_does_not_stop_batch(self):
        """Test a broken stored content file only fails its own session"""
        temp_dir = tempfile.mkdtemp()
        try:
            sessions_dir = os.path.join(temp_dir, "sessions")
            content_dir = os.path.join(temp_dir, "content")
            session_storage = SessionStorage(sessions_dir)
            content_storage = ContentStorage(content_dir)

            session_storage.save_session(RecordingSession.from_dict(sample_session_data("a")))
            session_storage.save_session(RecordingSession.from_dict(sample_session_data("b")))
            with open(os.path.join(content_dir, "content_a.json"), 'w', encoding='utf-8') as f:
                f.write("{broken")

            results = generate_all_content(session_storage, content_storage)

            by_id = {r["session_id"]: r for r in results}
            assert "error" in by_id["a"]
            assert "error" not in by_id["b"]
            assert os.path.exists(os.path.join(content_dir, "content_b.json"))

            single = generate_content_for_session("a", session_storage, content_storage)
            assert "error" in single

            forced = generate_all_content(session_storage, content_storage, force_regenerate=True)
            assert all("error" not in r for r in forced)
            assert content_storage.load_content("a") is not None
        finally:
            shutil.rmtree(temp_dir)

    def test_generate_content_for_missing_session(self):
        temp_dir = tempfile.mkdtemp()
        try:
            result = generate_content_for_session("nope", SessionStorage(temp_dir), ContentStorage(temp_dir))
            assert result == {"session_id": "nope", "error": "Session file not found"}
        finally:
            shutil.rmtree(temp_dir)


def run_all_tests():
    """Run all test suites"""
    print("=" * 80)
    print("Layer 1 Session Import - Comprehensive Test Suite")
    print("=" * 80)

    test_classes = [
        ("Models", TestModels),
        ("Validator", TestValidator),
        ("Storage", TestStorage),
        ("Generation Workflow", TestGenerationWorkflow),
    ]

    total_tests = 0
    failed_tests = []

    for suite_name, test_class in test_classes:
        print(f"\nRunning {suite_name} Tests")
        test_instance = test_class()
        for test_method in [m for m in dir(test_instance) if m.startswith('test_')]:
            total_tests += 1
            try:
                getattr(test_instance, test_method)()
                print(f"  ✅ {test_method}")
            except Exception as e:
                print(f"  ❌ {test_method}: {e}")
                failed_tests.append((suite_name, test_method, str(e)))
                logger.error(f"Test failed: {suite_name}.{test_method}: {e}", exc_info=True)

    print(f"\nTotal tests: {total_tests}, Failed: {len(failed_tests)}")
    return 1 if failed_tests else 0


if __name__ == "__main__":
    sys.exit(run_all_tests())
