"""
Store Module - Persistence client for enquiries

The store is constructed once by the application factory (or injected by
the caller) and registered on the app. Handlers reach it through
get_store() rather than a module-level connection.
"""

import logging
from flask import current_app
from sqlalchemy import func, text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from extensions import db
from models import Enquiry
from utils.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'enquiry_store'


class EnquiryStore:
    """SQLAlchemy-backed access to the enquiries table"""

    def __init__(self, database=None):
        self.db = database or db

    def init_app(self, app):
        """Register the store and create tables if they don't exist"""
        app.extensions[EXTENSION_KEY] = self
        with app.app_context():
            try:
                self.db.create_all()
                # Verify connection
                self.db.session.execute(text('SELECT 1'))
                app.logger.info("✓ Database initialized successfully")
            except SQLAlchemyError as e:
                app.logger.error(f"✗ Database initialization failed: {str(e)}")

    def is_available(self):
        """Check whether the database answers a trivial query"""
        try:
            self.db.session.execute(text('SELECT 1'))
            return True
        except OperationalError as e:
            logger.warning(f"Database not available: {str(e)}")
            self.db.session.rollback()
            return False

    def connection_status(self):
        return 'connected' if self.is_available() else 'disconnected'

    def create(self, **fields):
        """
        Insert a new enquiry

        Args:
            **fields: Enquiry column values

        Returns:
            Enquiry: The committed record

        Raises:
            ValidationError: If the model rejects the data
            StoreUnavailableError: If the database cannot be reached
        """
        enquiry = Enquiry(**fields)
        self.db.session.add(enquiry)
        try:
            self.db.session.commit()
        except OperationalError as e:
            self.db.session.rollback()
            raise StoreUnavailableError() from e
        except Exception:
            self.db.session.rollback()
            raise
        logger.info(f"Enquiry saved: id={enquiry.id}")
        return enquiry

    def get(self, enquiry_id):
        return self.db.session.get(Enquiry, enquiry_id)

    def count(self, status=None):
        query = self.db.session.query(func.count(Enquiry.id))
        if status:
            query = query.filter(Enquiry.status == status)
        return query.scalar()

    def recent(self, limit=10):
        return Enquiry.get_recent(limit)


def get_store():
    """Store registered on the current app"""
    return current_app.extensions[EXTENSION_KEY]
