import os
import sqlite3
import threading
import logging
from contextlib import contextmanager

from .config import Config
from .errors import StoreError

logger = logging.getLogger(__name__)


class Database:
    """
    Store handle for the Showcase SQLite database.

    Constructed explicitly and injected into the repositories. Each thread
    gets its own connection, created lazily and kept open until close().
    """

    def __init__(self, path):
        if not path:
            raise ValueError("Database path is required")
        self.path = path
        self._local = threading.local()
        # Add threading lock for bookkeeping of open connections
        self._lock = threading.Lock()
        self._connections = []
        self._closed = False

    def _connect(self):
        conn = getattr(self._local, 'conn', None)
        if conn is not None:
            return conn

        with self._lock:
            if self._closed:
                raise StoreError("Database handle is closed")
            db_dir = os.path.dirname(self.path)
            if db_dir:
                os.makedirs(db_dir, exist_ok=True)
            try:
                conn = sqlite3.connect(self.path, check_same_thread=False)
            except sqlite3.Error as e:
                raise StoreError(f"Could not open database: {e}") from e
            conn.row_factory = sqlite3.Row
            self._connections.append(conn)

        self._local.conn = conn
        return conn

    @contextmanager
    def connection(self):
        """
        Yield a connection, committing on success and rolling back on error.
        sqlite3 errors are re-raised as StoreError.
        """
        conn = self._connect()
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(str(e)) from e
        except Exception:
            conn.rollback()
            raise

    def init_schema(self):
        """Create tables and indexes if they don't exist"""
        with self.connection() as conn:
            cursor = conn.cursor()

            cursor.execute(f'''
                CREATE TABLE IF NOT EXISTS {Config.ADMINS_TABLE} (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    username TEXT NOT NULL UNIQUE,
                    password_hash TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    last_login TEXT
                )
            ''')

            cursor.execute(f'''
                CREATE TABLE IF NOT EXISTS {Config.PROJECTS_TABLE} (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    description TEXT NOT NULL,
                    image TEXT NOT NULL,
                    link TEXT NOT NULL DEFAULT '',
                    tech TEXT NOT NULL DEFAULT '[]',
                    featured BOOLEAN NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            ''')

            cursor.execute(f'''
                CREATE TABLE IF NOT EXISTS {Config.LOGS_TABLE} (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    timestamp TEXT NOT NULL,
                    level TEXT NOT NULL,
                    source TEXT NOT NULL,
                    message TEXT NOT NULL,
                    details TEXT,
                    ip_address TEXT,
                    user_agent TEXT,
                    request_path TEXT,
                    user_id TEXT
                )
            ''')

            cursor.execute(f'CREATE INDEX IF NOT EXISTS idx_projects_created_at ON {Config.PROJECTS_TABLE}(created_at)')
            cursor.execute(f'CREATE INDEX IF NOT EXISTS idx_projects_featured ON {Config.PROJECTS_TABLE}(featured)')
            cursor.execute(f'CREATE INDEX IF NOT EXISTS idx_logs_timestamp ON {Config.LOGS_TABLE}(timestamp DESC)')
            cursor.execute(f'CREATE INDEX IF NOT EXISTS idx_logs_level ON {Config.LOGS_TABLE}(level)')

        logger.info("Showcase database initialized at %s", self.path)

    def ping(self):
        """Return True if the store answers a trivial query"""
        try:
            with self.connection() as conn:
                conn.execute('SELECT 1').fetchone()
            return True
        except StoreError:
            return False

    def release(self):
        """Close the calling thread's connection, if any. Called on app context teardown."""
        conn = getattr(self._local, 'conn', None)
        if conn is None:
            return
        self._local.conn = None
        with self._lock:
            if conn in self._connections:
                self._connections.remove(conn)
        try:
            conn.close()
        except sqlite3.Error as e:
            logger.warning("Error closing database connection: %s", e)

    def close(self):
        """Close every connection opened through this handle"""
        with self._lock:
            self._closed = True
            connections, self._connections = self._connections, []
        for conn in connections:
            try:
                conn.close()
            except sqlite3.Error as e:
                logger.warning("Error closing database connection: %s", e)
        self._local = threading.local()

    @property
    def closed(self):
        return self._closed
