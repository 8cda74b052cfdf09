import os
from dotenv import load_dotenv

load_dotenv(override=True)

IS_PRODUCTION = (
    os.getenv('ENVIRONMENT') == 'production' or
    os.getenv('FLASK_ENV') == 'production' or
    os.getenv('PRODUCTION') == '1'
)


class Config:
    """
    Base configuration for Showcase.
    Apps can override any of these through app.config before init_app().
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY')
    IS_PRODUCTION = IS_PRODUCTION

    # Session token signing
    JWT_SECRET = os.getenv('JWT_SECRET')
    ADMIN_COOKIE_NAME = os.getenv('ADMIN_COOKIE_NAME', 'admin-token')
    SESSION_TTL_HOURS = int(os.getenv('SESSION_TTL_HOURS', '24'))

    # Get DB_DIR from environment, or use a default if not set
    DB_DIR = os.getenv('DB_DIR', os.path.join(os.getcwd(), 'databases'))
    SHOWCASE_DB = os.getenv('SHOWCASE_DB', os.path.join(DB_DIR, 'showcase.db'))

    # Table names
    ADMINS_TABLE = 'admins'
    PROJECTS_TABLE = 'projects'
    LOGS_TABLE = 'app_logs'

    # Comma separated list of origins allowed to call the JSON API with cookies
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '')

    # app_logs retention: entries older than this many days are pruned at
    # startup, and the table never holds more than LOG_MAX_ROWS entries
    LOG_RETENTION_DAYS = int(os.getenv('LOG_RETENTION_DAYS', '30'))
    LOG_MAX_ROWS = int(os.getenv('LOG_MAX_ROWS', '10000'))


def get_setting(name, default=None):
    """Resolve a setting from the Flask app config, falling back to Config"""
    try:
        from flask import current_app
        val = current_app.config.get(name)
        if val is not None:
            return val
    except RuntimeError:
        pass
    return getattr(Config, name, default)
