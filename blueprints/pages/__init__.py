"""
Pages Blueprint - Public front-end
Handles: Static files, SPA fallback, Health check
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
