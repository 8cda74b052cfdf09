import sqlite3
from datetime import datetime, timezone

from werkzeug.security import generate_password_hash, check_password_hash

from showcase.core.config import Config
from showcase.core.errors import StoreError, ValidationError


class AdminDatabase:
    """Credential store for admin accounts"""

    def __init__(self, db):
        self.db = db

    @staticmethod
    def _hash_password(password):
        """Hash password with a per-record random salt"""
        return generate_password_hash(password)

    @staticmethod
    def verify_password(admin, password):
        """Verify password against the stored salted hash (constant-time)"""
        if not admin or not admin.get('password_hash'):
            return False
        return check_password_hash(admin['password_hash'], password)

    def get_admin_by_username(self, username):
        """Get admin by username"""
        with self.db.connection() as conn:
            row = conn.execute(f"""
                SELECT * FROM {Config.ADMINS_TABLE} WHERE username = ?
            """, (username,)).fetchone()
            return dict(row) if row else None

    def create_admin(self, username, password):
        """Create a new admin. Provisioning helper, not exposed over HTTP."""
        username = (username or '').strip()
        if not username or not password:
            raise ValidationError('Username and password are required')

        try:
            with self.db.connection() as conn:
                cursor = conn.execute(f"""
                    INSERT INTO {Config.ADMINS_TABLE} (username, password_hash, created_at)
                    VALUES (?, ?, ?)
                """, (username, self._hash_password(password), datetime.now(timezone.utc).isoformat(timespec='microseconds')))
                return cursor.lastrowid
        except StoreError as e:
            if isinstance(e.__cause__, sqlite3.IntegrityError):
                raise ValidationError('Admin already exists') from e
            raise

    def update_last_login(self, admin_id):
        """Stamp last_login with the current time"""
        with self.db.connection() as conn:
            cursor = conn.execute(f"""
                UPDATE {Config.ADMINS_TABLE} SET last_login = ? WHERE id = ?
            """, (datetime.now(timezone.utc).isoformat(timespec='microseconds'), admin_id))
            return cursor.rowcount > 0
