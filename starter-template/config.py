import os
from dotenv import load_dotenv

load_dotenv()

IS_PRODUCTION = (
    os.getenv('ENVIRONMENT') == 'production' or
    os.getenv('FLASK_ENV') == 'production' or
    os.getenv('PRODUCTION') == '1'
)

DB_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'databases')


class Config:
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY', 'dev-secret-key-change-in-production')
    IS_PRODUCTION = IS_PRODUCTION

    # Session tokens - must be set, Showcase refuses to start without it
    JWT_SECRET = os.getenv('JWT_SECRET')

    # Database
    DB_DIR = DB_DIR
    SHOWCASE_DB = os.getenv('SHOWCASE_DB', os.path.join(DB_DIR, 'showcase.db'))

    # Frontend origins allowed to call the API with cookies (comma separated)
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', 'http://localhost:3000')
