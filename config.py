import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PORT = int(os.environ.get('PORT', 3000))

    # Database Settings
    _database_url = os.environ.get('DATABASE_URL')
    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///portfolio.db'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': 10,
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Request Settings
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # 10MB
    STATIC_ROOT = os.environ.get('STATIC_ROOT', os.path.join(BASE_DIR, 'public'))

    # Logging Settings
    LOG_DIR = os.environ.get('LOG_DIR', os.path.join(BASE_DIR, 'logs'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL')
    LOG_TO_FILE = True
    LOG_TO_CONSOLE = True
    LOG_RETENTION_DAYS = 30

    # Error Reporting
    EXPOSE_ERROR_DETAILS = False
    SEND_ERROR_EMAILS = True

    # Mail Settings
    SMTP_HOST = os.environ.get('SMTP_HOST', 'smtp.gmail.com')
    SMTP_PORT = os.environ.get('SMTP_PORT', '587')
    SMTP_USER = os.environ.get('SMTP_USER')
    SMTP_PASSWORD = os.environ.get('SMTP_PASS')
    EMAIL_FROM = os.environ.get('EMAIL_FROM', 'Portfolio <noreply@portfolio.com>')
    ENQUIRY_EMAIL_TO = os.environ.get('ENQUIRY_EMAIL_TO')
    ERROR_EMAIL_TO = os.environ.get('ERROR_EMAIL_TO')

    # Admin Notification Settings
    ADMIN_TELEGRAM_BOT_TOKEN = os.environ.get('ADMIN_TELEGRAM_BOT_TOKEN')
    ADMIN_TELEGRAM_CHAT_ID = os.environ.get('ADMIN_TELEGRAM_CHAT_ID')

    # Notifications run on detached threads unless disabled
    BACKGROUND_TASKS_ASYNC = True


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    EXPOSE_ERROR_DETAILS = True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    LOG_TO_CONSOLE = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # For in-memory SQLite during tests, keep engine options empty to avoid
    # passing invalid pool settings like pool_size to SQLite's StaticPool.
    SQLALCHEMY_ENGINE_OPTIONS = {}
    LOG_TO_FILE = False
    SEND_ERROR_EMAILS = False
    BACKGROUND_TASKS_ASYNC = False
    SMTP_USER = None
    SMTP_PASSWORD = None
    ADMIN_TELEGRAM_BOT_TOKEN = None
    ADMIN_TELEGRAM_CHAT_ID = None


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
