"""
Showcase Flask extension
========================

Wires the store handle, repositories, session manager and blueprints into
a Flask app:

    app = Flask(__name__)
    app.config['JWT_SECRET'] = '...'
    showcase = Showcase(app)
    ...
    showcase.close()  # on shutdown
"""

import logging
import os

from flask_cors import CORS

from .core.config import Config
from .core.database import Database
from .core.errors import ConfigurationError, register_error_handlers
from .core.logging_service import LoggingService
from .modules.auth import auth_bp, AdminDatabase, SessionManager
from .modules.health import health_bp
from .modules.projects import projects_bp, ProjectDatabase

logger = logging.getLogger(__name__)

# Settings copied from Config into app.config when the app doesn't set them
_DEFAULT_SETTINGS = (
    'SECRET_KEY', 'IS_PRODUCTION', 'JWT_SECRET', 'ADMIN_COOKIE_NAME',
    'SESSION_TTL_HOURS', 'DB_DIR', 'CORS_ORIGINS',
    'LOG_RETENTION_DAYS', 'LOG_MAX_ROWS',
)


class Showcase:
    """Flask extension holding the Showcase services for one app"""

    def __init__(self, app=None, config=None):
        self._config = config or {}
        self.db = None
        self.admins = None
        self.projects = None
        self.sessions = None
        if app is not None:
            self.init_app(app)

    def _load_config(self, app):
        app.config.update(self._config)
        for name in _DEFAULT_SETTINGS:
            if app.config.get(name) is None:
                app.config[name] = getattr(Config, name)

        # Without an explicit path the database lives in DB_DIR
        if not app.config.get('SHOWCASE_DB'):
            env_db = os.getenv('SHOWCASE_DB')
            if env_db:
                app.config['SHOWCASE_DB'] = env_db
            elif app.config.get('DB_DIR'):
                app.config['SHOWCASE_DB'] = os.path.join(app.config['DB_DIR'], 'showcase.db')

        missing = [name for name in ('JWT_SECRET', 'SHOWCASE_DB') if not app.config.get(name)]
        if missing:
            raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")

    def init_app(self, app):
        self._load_config(app)

        self.db = Database(app.config['SHOWCASE_DB'])
        self.db.init_schema()
        LoggingService.cleanup_old_logs(
            int(app.config['LOG_RETENTION_DAYS']),
            max_rows=int(app.config['LOG_MAX_ROWS']),
            db=self.db,
        )

        self.admins = AdminDatabase(self.db)
        self.projects = ProjectDatabase(self.db)
        self.sessions = SessionManager(
            self.admins,
            app.config['JWT_SECRET'],
            ttl_hours=int(app.config['SESSION_TTL_HOURS']),
        )

        app.register_blueprint(auth_bp)
        app.register_blueprint(projects_bp)
        app.register_blueprint(health_bp)
        register_error_handlers(app)

        origins = [o.strip() for o in (app.config.get('CORS_ORIGINS') or '').split(',') if o.strip()]
        if origins:
            CORS(app, resources={r'/auth/*': {'origins': origins}, r'/projects.*': {'origins': origins}},
                 supports_credentials=True)

        @app.teardown_appcontext
        def release_connection(exception=None):
            if not self.db.closed:
                self.db.release()

        app.extensions['showcase'] = self
        logger.info("Showcase initialised (database: %s)", self.db.path)

    def close(self):
        """Shut down the store handle"""
        if self.db is not None:
            self.db.close()
