"""
Errors Module - API error taxonomy and response normalization
"""

import traceback
from flask import current_app, jsonify, request
from sqlalchemy.exc import DataError, IntegrityError, OperationalError
from werkzeug.exceptions import BadRequest, HTTPException
from .security import get_client_ip

GENERIC_ERROR_MESSAGE = 'There was an error processing your request. Please try again later.'


class ApiError(Exception):
    """Base class for errors that map onto a JSON error response"""

    status_code = 500
    default_message = GENERIC_ERROR_MESSAGE

    def __init__(self, message=None, errors=None):
        self.message = message or self.default_message
        self.errors = errors or {}
        super().__init__(self.message)


class ValidationError(ApiError):
    """User-correctable field errors"""
    status_code = 400
    default_message = 'Please check your form data'

    @classmethod
    def for_field(cls, field, message):
        return cls(message, {field: message})


class MalformedInputError(ApiError):
    """Payload or field could not be interpreted"""
    status_code = 400
    default_message = 'Invalid data format'

    @classmethod
    def for_field(cls, field):
        return cls(errors={field: 'Invalid format for this field'})


class DuplicateEntryError(ApiError):
    status_code = 400
    default_message = 'Duplicate entry detected'

    def __init__(self, message=None, errors=None):
        super().__init__(message, errors or {'general': 'This entry appears to be a duplicate'})


class StoreUnavailableError(ApiError):
    status_code = 503
    default_message = 'Database not available'


def classify_error(error):
    """
    Map any exception onto an ApiError

    Args:
        error (Exception): The caught exception

    Returns:
        ApiError: The error to report to the client
    """
    if isinstance(error, ApiError):
        return error
    if isinstance(error, IntegrityError):
        return DuplicateEntryError()
    if isinstance(error, DataError):
        return MalformedInputError()
    if isinstance(error, OperationalError):
        return StoreUnavailableError()
    if isinstance(error, BadRequest):
        return MalformedInputError(errors={'body': 'Request body could not be parsed'})
    if isinstance(error, HTTPException):
        api_error = ApiError(error.description)
        api_error.status_code = error.code or 500
        return api_error
    return ApiError()


def get_request_context():
    """Request details attached to error logs and error emails"""
    return {
        'url': request.url,
        'method': request.method,
        'path': request.path,
        'ip': get_client_ip(),
        'user_agent': request.headers.get('User-Agent', 'Unknown'),
    }


def handle_error(error):
    """
    Log a caught error and build the uniform JSON response for it

    Returns:
        tuple: (response, status_code)
    """
    api_error = classify_error(error)
    status_code = api_error.status_code
    context = get_request_context()

    if status_code >= 500:
        current_app.logger.error(
            f"API error on {context['method']} {context['path']} from {context['ip']}: {error!r}",
            exc_info=error,
            extra={'request_context': context}
        )
        notify_server_error(error, context)
    else:
        current_app.logger.warning(
            f"API error on {context['method']} {context['path']} from {context['ip']} "
            f"({status_code}): {api_error.message} {api_error.errors or ''}".rstrip(),
            extra={'request_context': context}
        )

    body = {'success': False, 'message': api_error.message}
    if api_error.errors:
        body['errors'] = api_error.errors
    if status_code == 500 and current_app.config.get('EXPOSE_ERROR_DETAILS'):
        body['error'] = str(error)
    return jsonify(body), status_code


def notify_server_error(error, context):
    """Email the error report in the background when enabled"""
    if not current_app.config.get('SEND_ERROR_EMAILS'):
        return
    from .notifications import send_error_notification
    from .tasks import run_best_effort

    error_info = {
        'type': type(error).__name__,
        'message': str(error),
        'stack': ''.join(traceback.format_exception(type(error), error, error.__traceback__)),
    }
    run_best_effort(send_error_notification, error_info, context, name='error-notification')
