"""
Contact Blueprint - Contact form API
Handles: Enquiry submission, Enquiry statistics
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__, url_prefix='/api')

from . import routes
