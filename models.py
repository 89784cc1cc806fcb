from extensions import db
from datetime import datetime
from sqlalchemy import event
from sqlalchemy.orm import validates
from utils.errors import ValidationError
from utils.helpers import to_iso
from utils.validation import (
    NAME_MAX_LENGTH, REQUIREMENT_MAX_LENGTH,
    NAME_REQUIRED, NAME_TOO_LONG, REQUIREMENT_TOO_LONG,
    INVALID_EMAIL, INVALID_PHONE, CONTACT_REQUIRED,
    is_valid_email, is_valid_phone, text_length
)
import uuid

ENQUIRY_STATUSES = ('new', 'contacted', 'in_progress', 'resolved', 'closed')


class Enquiry(db.Model):
    """Contact form submission from a website visitor"""
    __tablename__ = 'enquiries'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(NAME_MAX_LENGTH), nullable=False)
    email = db.Column(db.String(255), index=True)
    phone = db.Column(db.String(20))
    requirement = db.Column(db.Text)
    submitted_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    ip_address = db.Column(db.String(45))  # For analytics/security
    user_agent = db.Column(db.String(255))
    status = db.Column(db.String(20), default='new', nullable=False, index=True)  # see ENQUIRY_STATUSES
    notes = db.Column(db.Text)  # Internal follow-up notes
    follow_up_date = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @validates('name')
    def validate_name(self, key, name):
        name = (name or '').strip()
        if not name:
            raise ValidationError.for_field('name', NAME_REQUIRED)
        if text_length(name) > NAME_MAX_LENGTH:
            raise ValidationError.for_field('name', NAME_TOO_LONG)
        return name

    @validates('email')
    def validate_email(self, key, email):
        email = (email or '').strip().lower() or None
        if email and not is_valid_email(email):
            raise ValidationError.for_field('email', INVALID_EMAIL)
        return email

    @validates('phone')
    def validate_phone(self, key, phone):
        phone = (phone or '').strip() or None
        if phone and not is_valid_phone(phone):
            raise ValidationError.for_field('phone', INVALID_PHONE)
        return phone

    @validates('requirement')
    def validate_requirement(self, key, requirement):
        requirement = (requirement or '').strip() or None
        if requirement and text_length(requirement) > REQUIREMENT_MAX_LENGTH:
            raise ValidationError.for_field('requirement', REQUIREMENT_TOO_LONG)
        return requirement

    @validates('status')
    def validate_status(self, key, status):
        if status not in ENQUIRY_STATUSES:
            raise ValidationError.for_field('status', f"'{status}' is not a valid enquiry status")
        return status

    @property
    def days_since_submission(self):
        diff = abs(datetime.utcnow() - self.submitted_at)
        return diff.days + (1 if diff.seconds or diff.microseconds else 0)

    @property
    def formatted_submission_date(self):
        return self.submitted_at.strftime('%B %d, %Y %H:%M')

    def mark_as_contacted(self):
        """Move the enquiry to 'contacted' and persist"""
        self.status = 'contacted'
        db.session.commit()
        return self

    @classmethod
    def get_recent(cls, limit=10):
        return cls.query.order_by(cls.submitted_at.desc()).limit(limit).all()

    @classmethod
    def get_by_status(cls, status):
        return cls.query.filter_by(status=status).order_by(cls.submitted_at.desc()).all()

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'requirement': self.requirement,
            'submittedAt': to_iso(self.submitted_at),
            'ipAddress': self.ip_address,
            'userAgent': self.user_agent,
            'status': self.status,
            'notes': self.notes,
            'followUpDate': to_iso(self.follow_up_date),
            'createdAt': to_iso(self.created_at),
            'updatedAt': to_iso(self.updated_at)
        }


# Either email or phone must be present on every stored enquiry
@event.listens_for(Enquiry, 'before_insert')
@event.listens_for(Enquiry, 'before_update')
def require_contact_method(mapper, connection, target):
    if not target.email and not target.phone:
        raise ValidationError(CONTACT_REQUIRED, {
            'email': CONTACT_REQUIRED,
            'phone': CONTACT_REQUIRED
        })
