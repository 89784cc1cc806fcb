from datetime import datetime

import pytest

from utils.errors import MalformedInputError, ValidationError
from utils.helpers import parse_timestamp, to_iso
from utils.validation import is_valid_email, is_valid_phone, text_length, validate_contact_payload


def test_valid_payload_is_normalized():
    fields = validate_contact_payload({
        'name': ' Jane Doe ',
        'email': ' JANE@example.com',
        'phone': '',
        'requirement': ' Landing page ',
    })

    assert fields['name'] == 'Jane Doe'
    assert fields['email'] == 'jane@example.com'
    assert fields['phone'] is None
    assert fields['requirement'] == 'Landing page'
    assert isinstance(fields['submitted_at'], datetime)


def test_first_failing_rule_wins():
    # Name is checked before the contact method
    with pytest.raises(ValidationError) as exc:
        validate_contact_payload({'name': '   '})
    assert exc.value.errors == {'name': 'Name is required'}


def test_missing_name_key():
    with pytest.raises(ValidationError) as exc:
        validate_contact_payload({'email': 'a@b.com'})
    assert exc.value.errors == {'name': 'Name is required'}


def test_contact_method_checked_before_name_length():
    with pytest.raises(ValidationError) as exc:
        validate_contact_payload({'name': 'x' * 60})
    assert set(exc.value.errors) == {'email', 'phone'}


def test_non_dict_payload():
    with pytest.raises(MalformedInputError):
        validate_contact_payload(['name'])


def test_submitted_at_epoch_millis():
    fields = validate_contact_payload({'name': 'Jane', 'phone': '5551234567', 'submittedAt': 1709288100000})
    assert fields['submitted_at'] == datetime(2024, 3, 1, 10, 15)


@pytest.mark.parametrize('email', ['jane@example.com', 'a.b+c@sub.example.co.uk', 'x@y.z'])
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize('email', ['plain', 'jane@example', 'jane @example.com', '@example.com', 'a@b@c.com'])
def test_invalid_emails(email):
    assert not is_valid_email(email)


@pytest.mark.parametrize('phone', ['5551234567', '+44 20 7946 0958', '555 (123) 4567', '+1-555-123-4567'])
def test_valid_phones(phone):
    assert is_valid_phone(phone)


@pytest.mark.parametrize('phone', ['not-a-phone', '0123456789', '+', '12345678901234567', '555.123.4567', '(555) 123-4567',
                                   '5٥٥٥٥٥', '٥٥٥1234567'])
def test_invalid_phones(phone):
    assert not is_valid_phone(phone)


@pytest.mark.parametrize('value, expected', [
    ('2024-03-01T10:15:00Z', datetime(2024, 3, 1, 10, 15)),
    ('2024-03-01T10:15:00.000Z', datetime(2024, 3, 1, 10, 15)),
    ('2024-03-01T12:15:00+02:00', datetime(2024, 3, 1, 10, 15)),
    ('2024-03-01T10:15:00', datetime(2024, 3, 1, 10, 15)),
    (1709288100000, datetime(2024, 3, 1, 10, 15)),
])
def test_parse_timestamp(value, expected):
    assert parse_timestamp(value) == expected


@pytest.mark.parametrize('value', ['yesterday', '', True, {'at': 1}, 10 ** 20])
def test_parse_timestamp_rejects_garbage(value):
    assert parse_timestamp(value) is None


def test_to_iso():
    assert to_iso(datetime(2024, 3, 1, 10, 15, 0, 123456)) == '2024-03-01T10:15:00.123Z'
    assert to_iso(None) is None


def test_non_ascii_digit_phone_is_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_contact_payload({'name': 'Bob', 'phone': '5٥٥٥٥٥'})
    assert exc.value.errors == {'phone': 'Please provide a valid phone number'}


def test_lengths_count_utf16_units():
    # Characters outside the BMP count twice
    assert text_length('\U0001F600' * 25) == 50
    validate_contact_payload({'name': '\U0001F600' * 25, 'phone': '5551234567'})

    with pytest.raises(ValidationError) as exc:
        validate_contact_payload({'name': 'x' + '\U0001F600' * 25, 'phone': '5551234567'})
    assert exc.value.errors == {'name': 'Name cannot exceed 50 characters'}


@pytest.mark.parametrize('value', ['0001-01-01T00:00:00+05:00', '9999-12-31T23:00:00-05:00'])
def test_parse_timestamp_rejects_out_of_range_offsets(value):
    assert parse_timestamp(value) is None
