"""
Portfolio - Main Application Entry Point
Application Factory Pattern for the portfolio site and its contact API

This module initializes the Flask application with all necessary extensions,
configurations, and middleware. All actual route handling is delegated to blueprints.

Run with gunicorn as: gunicorn "app:create_app()"
"""

import os
from flask import Flask
from config import get_config
from extensions import db, cors
from store import EnquiryStore
from utils.errors import handle_error
from utils.logging_config import configure_logging, register_request_logging
from utils.notifications import send_enquiry_notification
from utils.security import apply_security_headers

# Import all blueprints
from blueprints.contact import contact_bp
from blueprints.pages import pages_bp


def create_app(config_name=None, store=None, notifier=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        store (EnquiryStore): Persistence client to use instead of the default (optional)
        notifier (callable): Receives each stored enquiry as a dict (optional)

    Returns:
        Flask: Configured Flask application instance
    """
    # Static files are served by the pages blueprint from STATIC_ROOT
    app = Flask(__name__, static_folder=None)

    # Load configuration
    app.config.from_object(get_config(config_name))

    configure_logging(app)

    # Initialize extensions with app
    initialize_extensions(app, store)
    app.extensions['enquiry_notifier'] = notifier or send_enquiry_notification

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    return app


def initialize_extensions(app, store=None):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    cors.init_app(app)

    store = store or EnquiryStore(db)
    store.init_app(app)


def register_blueprints(app):
    """Register all application blueprints"""
    # API routes first so the front-end catch-all never shadows them
    app.register_blueprint(contact_bp)
    app.register_blueprint(pages_bp)


def register_error_handlers(app):
    """Answer every uncaught error with the uniform JSON error body"""

    @app.errorhandler(Exception)
    def handle_uncaught(e):
        return handle_error(e)


def register_hooks(app):
    """Register request/response hooks"""
    register_request_logging(app)

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        return apply_security_headers(response)


def main():
    env = os.environ.get('FLASK_ENV', 'development')
    app = create_app(env)
    port = app.config['PORT']

    app.logger.info(f"🚀 Portfolio server running on http://localhost:{port}")
    app.logger.info(f"🚀 Serving static files from: {app.config['STATIC_ROOT']}")
    app.logger.info(f"🚀 Environment: {env}")
    app.logger.info("All systems operational - ready to handle requests")

    app.run(
        host='0.0.0.0',
        port=port,
        debug=(env == 'development')
    )


if __name__ == '__main__':
    main()
