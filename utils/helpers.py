"""
Helpers Module - Utility functions for common operations
"""

from datetime import datetime, timezone
from flask import current_app


RECENT_ENQUIRIES_LIMIT = 5


def parse_timestamp(value):
    """
    Parse a client-supplied timestamp into a naive UTC datetime

    Accepts ISO-8601 strings (a trailing 'Z' or an offset is honoured)
    and epoch milliseconds as produced by Date.now() in the browser.

    Args:
        value (str|int|float): Timestamp to parse

    Returns:
        datetime or None: Parsed value, None if it cannot be interpreted
    """
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        elif isinstance(value, str):
            text = value.strip()
            if text.endswith('Z'):
                text = text[:-1] + '+00:00'
            parsed = datetime.fromisoformat(text)
        else:
            return None
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    except (ValueError, OverflowError, OSError):
        return None
    return parsed


def to_iso(value):
    """Format a naive UTC datetime the way browsers serialize dates"""
    if value is None:
        return None
    return value.isoformat(timespec='milliseconds') + 'Z'


def serialize_enquiry_summary(enquiry):
    """Compact enquiry representation used by the stats endpoint"""
    return {
        'id': enquiry.id,
        'name': enquiry.name,
        'email': enquiry.email,
        'phone': enquiry.phone,
        'submittedAt': to_iso(enquiry.submitted_at),
        'status': enquiry.status
    }


def build_enquiry_stats(store, recent_limit=RECENT_ENQUIRIES_LIMIT):
    """
    Get enquiry statistics from the store

    Args:
        store (EnquiryStore): Store to query
        recent_limit (int): How many recent enquiries to include

    Returns:
        dict: Totals per status and the most recent enquiries
    """
    stats = {
        'totalEnquiries': store.count(),
        'newEnquiries': store.count(status='new'),
        'contactedEnquiries': store.count(status='contacted'),
        'recentEnquiries': [serialize_enquiry_summary(e) for e in store.recent(recent_limit)]
    }
    current_app.logger.debug(
        f"Enquiry stats: total={stats['totalEnquiries']}, new={stats['newEnquiries']}, "
        f"contacted={stats['contactedEnquiries']}"
    )
    return stats
