"""
Contact Routes - Contact form submission and enquiry statistics
"""

from flask import jsonify, request, current_app
from store import get_store
from utils.decorators import api_wrapper
from utils.errors import MalformedInputError, StoreUnavailableError
from utils.helpers import build_enquiry_stats, to_iso
from utils.notifications import get_notifier
from utils.security import get_client_ip, get_user_agent
from utils.tasks import run_best_effort
from utils.validation import validate_contact_payload
from . import contact_bp

SUCCESS_MESSAGE = 'Thank you for your message! We have received your enquiry and will get back to you soon.'


def get_submission_payload():
    """Read the submission from a JSON or form-encoded body"""
    if request.is_json:
        payload = request.get_json()
        if not isinstance(payload, dict):
            raise MalformedInputError(errors={'body': 'Expected a JSON object'})
        return payload
    return request.form.to_dict()


@contact_bp.route('/contact', methods=['POST'])
@api_wrapper
def submit_contact():
    """Save a contact form submission and notify the site owner"""
    payload = get_submission_payload()

    requirement = payload.get('requirement')
    current_app.logger.info(
        f"📝 Received contact form submission: name={payload.get('name')!r}, "
        f"email={'provided' if payload.get('email') else '[not provided]'}, "
        f"phone={'provided' if payload.get('phone') else '[not provided]'}, "
        f"requirement_length={len(requirement) if isinstance(requirement, str) else 0}"
    )

    fields = validate_contact_payload(payload)

    store = get_store()
    if not store.is_available():
        raise StoreUnavailableError()

    enquiry = store.create(
        **fields,
        ip_address=get_client_ip(),
        user_agent=get_user_agent(),
        status='new'
    )
    current_app.logger.info(f"✅ Enquiry saved successfully, enquiry_id: {enquiry.id}")

    run_best_effort(get_notifier(), enquiry.to_dict(), name='enquiry-notification')

    return jsonify({
        'success': True,
        'message': SUCCESS_MESSAGE,
        'enquiryId': enquiry.id,
        'submittedAt': to_iso(enquiry.submitted_at)
    }), 201


@contact_bp.route('/contact/stats', methods=['GET'])
@api_wrapper
def contact_stats():
    """Basic statistics about enquiries (for admin/dashboard purposes)"""
    store = get_store()
    if not store.is_available():
        raise StoreUnavailableError()

    return jsonify({
        'success': True,
        'data': build_enquiry_stats(store)
    })
