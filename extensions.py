"""
Extensions Module - Centralized initialization of Flask extensions
Decouples extensions from app.py to avoid circular imports
and enable better testing.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS

# Initialize extensions without binding to app
db = SQLAlchemy()
cors = CORS()

__all__ = ['db', 'cors']
