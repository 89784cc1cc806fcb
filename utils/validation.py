"""
Validation Module - Contact form payload validation and normalization
"""

import re
from datetime import datetime
from .errors import ValidationError, MalformedInputError
from .helpers import parse_timestamp


EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
PHONE_PATTERN = re.compile(r'^[\+]?[1-9][0-9\s\-\(\)]{0,15}$')

NAME_MAX_LENGTH = 50
REQUIREMENT_MAX_LENGTH = 500

NAME_REQUIRED = 'Name is required'
NAME_TOO_LONG = f'Name cannot exceed {NAME_MAX_LENGTH} characters'
CONTACT_REQUIRED = 'Either email or phone number must be provided'
REQUIREMENT_TOO_LONG = f'Requirement description cannot exceed {REQUIREMENT_MAX_LENGTH} characters'
INVALID_EMAIL = 'Please provide a valid email address'
INVALID_PHONE = 'Please provide a valid phone number'

CONTACT_FIELDS = ('name', 'email', 'phone', 'requirement')


def text_length(value):
    """Length in UTF-16 code units, the way browsers count characters"""
    return len(value.encode('utf-16-le', 'surrogatepass')) // 2


def is_valid_email(email):
    return bool(EMAIL_PATTERN.match(email))


def is_valid_phone(phone):
    return bool(PHONE_PATTERN.match(phone))


def clean_field(payload, field):
    """
    Read a string field from the payload and trim it

    Returns:
        str or None: Trimmed value, or None when absent or blank

    Raises:
        MalformedInputError: If the value is not a string
    """
    value = payload.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedInputError.for_field(field)
    value = value.strip()
    return value or None


def validate_contact_payload(payload):
    """
    Validate a contact form submission

    Checks run in a fixed order and the first failure is raised.

    Args:
        payload (dict): Raw submission {name, email?, phone?, requirement?, submittedAt?}

    Returns:
        dict: Normalized fields ready for persistence

    Raises:
        ValidationError: On a field-level rule violation
        MalformedInputError: On a value of the wrong type or format
    """
    if not isinstance(payload, dict):
        raise MalformedInputError(errors={'body': 'Expected a JSON object'})

    name, email, phone, requirement = (clean_field(payload, f) for f in CONTACT_FIELDS)

    if not name:
        raise ValidationError.for_field('name', NAME_REQUIRED)

    if not email and not phone:
        raise ValidationError(CONTACT_REQUIRED, {
            'email': CONTACT_REQUIRED,
            'phone': CONTACT_REQUIRED
        })

    if text_length(name) > NAME_MAX_LENGTH:
        raise ValidationError.for_field('name', NAME_TOO_LONG)

    if requirement and text_length(requirement) > REQUIREMENT_MAX_LENGTH:
        raise ValidationError.for_field('requirement', REQUIREMENT_TOO_LONG)

    if email and not is_valid_email(email):
        raise ValidationError.for_field('email', INVALID_EMAIL)

    if phone and not is_valid_phone(phone):
        raise ValidationError.for_field('phone', INVALID_PHONE)

    submitted_at = payload.get('submittedAt')
    if submitted_at in (None, ''):
        submitted_at = datetime.utcnow()
    else:
        submitted_at = parse_timestamp(submitted_at)
        if submitted_at is None:
            raise MalformedInputError.for_field('submittedAt')

    return {
        'name': name,
        'email': email.lower() if email else None,
        'phone': phone,
        'requirement': requirement,
        'submitted_at': submitted_at,
    }
