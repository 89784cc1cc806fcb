"""
Utils Package - Centralized utility modules initialization
"""

from .errors import (
    ApiError,
    ValidationError,
    MalformedInputError,
    DuplicateEntryError,
    StoreUnavailableError,
    classify_error,
    handle_error
)
from .decorators import api_wrapper
from .validation import validate_contact_payload, is_valid_email, is_valid_phone
from .helpers import parse_timestamp, to_iso, build_enquiry_stats
from .tasks import run_best_effort
from .notifications import (
    send_email,
    send_enquiry_notification,
    send_error_notification,
    send_telegram_alert,
    get_notifier
)
from .security import get_client_ip, get_user_agent, apply_security_headers
from .logging_config import configure_logging, register_request_logging

__all__ = [
    # Errors
    'ApiError',
    'ValidationError',
    'MalformedInputError',
    'DuplicateEntryError',
    'StoreUnavailableError',
    'classify_error',
    'handle_error',

    # Decorators
    'api_wrapper',

    # Validation
    'validate_contact_payload',
    'is_valid_email',
    'is_valid_phone',

    # Helpers
    'parse_timestamp',
    'to_iso',
    'build_enquiry_stats',

    # Tasks
    'run_best_effort',

    # Notifications
    'send_email',
    'send_enquiry_notification',
    'send_error_notification',
    'send_telegram_alert',
    'get_notifier',

    # Security
    'get_client_ip',
    'get_user_agent',
    'apply_security_headers',

    # Logging
    'configure_logging',
    'register_request_logging'
]
