"""
Pages Routes - Static front-end and health check
"""

from flask import current_app, send_from_directory
from werkzeug.exceptions import NotFound
from store import get_store
from . import pages_bp

ROOT_DOCUMENT = 'index.html'


@pages_bp.route('/health')
def health_check():
    """Liveness probe with database status"""
    return {'status': 'ok', 'database': get_store().connection_status()}, 200


@pages_bp.route('/', defaults={'path': ''})
@pages_bp.route('/<path:path>')
def serve_frontend(path):
    """Serve a static file, or the root document for any unmatched path"""
    static_root = current_app.config['STATIC_ROOT']
    if path:
        try:
            return send_from_directory(static_root, path)
        except NotFound:
            pass
    return send_from_directory(static_root, ROOT_DOCUMENT)
