"""
Decorators Module - API error handling wrapper
"""

from functools import wraps
from .errors import handle_error


def api_wrapper(f):
    """
    Decorator that turns any failure in an API view into a JSON error

    Exceptions are classified and logged by handle_error(); nothing
    escapes the view.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except Exception as e:
            return handle_error(e)
    return decorated_function
