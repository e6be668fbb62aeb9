"""
Application settings and configuration

This file contains all the settings for the recap engine.
Most settings can be changed by creating a .env file in the project root.
If a setting isn't in .env, it uses the default value shown here.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file (if it exists)
load_dotenv()


class Settings:
    """
    Application configuration settings

    This class holds all the configuration for the entire application.
    You can change these values by setting environment variables in a .env file.
    """

    # ============================================================
    # Storage Settings
    # ============================================================
    # Recorded sessions are read from SESSIONS_DIR (session_<id>.json)
    # Generated recap bundles are written to CONTENT_DIR (content_<id>.json)
    DATA_DIR = os.getenv("DATA_DIR", "data")
    SESSIONS_DIR = os.getenv("SESSIONS_DIR", os.path.join(DATA_DIR, "sessions"))
    CONTENT_DIR = os.getenv("CONTENT_DIR", os.path.join(DATA_DIR, "content"))

    # ============================================================
    # Profile Settings
    # ============================================================
    # Used when a session file does not say which profile recorded it
    # Options: student, developer, support, researcher, custom
    DEFAULT_PROFILE_TYPE = os.getenv("DEFAULT_PROFILE_TYPE", "developer")

    # ============================================================
    # Formatting Settings
    # ============================================================
    # strftime formats for the timeline entries and the recap title
    TIMELINE_TIME_FORMAT = os.getenv("TIMELINE_TIME_FORMAT", "%I:%M:%S %p")  # 03:04:05 PM
    TITLE_DATE_FORMAT = os.getenv("TITLE_DATE_FORMAT", "%m/%d/%Y")  # 10/19/2026

    # ============================================================
    # Logging Settings
    # ============================================================
    # Options: DEBUG (very detailed), INFO (normal), WARNING (only problems), ERROR (only errors)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE", "logs/app.log")  # Set to empty to log to console only

    @staticmethod
    def ensure_directories():
        """
        Create necessary directories if they don't exist

        This prevents errors when reading sessions or saving generated content.
        """
        os.makedirs(Settings.DATA_DIR, exist_ok=True)
        os.makedirs(Settings.SESSIONS_DIR, exist_ok=True)
        os.makedirs(Settings.CONTENT_DIR, exist_ok=True)
        # Create logs folder (extract folder name from log file path)
        if Settings.LOG_FILE:
            os.makedirs(os.path.dirname(Settings.LOG_FILE) or "logs", exist_ok=True)


# Global settings instance
settings = Settings()
