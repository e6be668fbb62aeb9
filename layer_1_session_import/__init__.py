"""
Layer 1: Session Import & Validation
- Schema Validator (reject malformed events and unknown profiles)
- Session Storage (load recorded sessions from JSON)
- Content Storage (persist generated recap bundles)
"""
from .validator import EventValidator, InvalidInputError, is_valid_profile, validate_engine_input
from .storage import SessionStorage, ContentStorage

__all__ = [
    'EventValidator',
    'InvalidInputError',
    'is_valid_profile',
    'validate_engine_input',
    'SessionStorage',
    'ContentStorage',
]
