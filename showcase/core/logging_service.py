"""
Centralized logging service for Showcase.
Provides structured logging with database storage and easy integration.
"""

import json
import logging
import traceback
from datetime import datetime, timedelta, timezone
from flask import current_app, has_app_context, request, has_request_context
from .config import Config, get_setting
from .errors import StoreError

fallback_logger = logging.getLogger('showcase')


class LoggingService:
    """Centralized logging service for application-wide logging"""

    @staticmethod
    def _get_database():
        """Return the store handle of the running Showcase extension, if any"""
        if not has_app_context():
            return None
        ext = current_app.extensions.get('showcase')
        return ext.db if ext is not None else None

    @staticmethod
    def _get_request_context():
        """Extract request context information"""
        if not has_request_context():
            return None, None, None

        ip_address = request.headers.get('X-Forwarded-For', request.remote_addr)
        if ip_address and ',' in ip_address:
            ip_address = ip_address.split(',')[0].strip()

        user_agent = request.headers.get('User-Agent', '')
        request_path = request.path

        return ip_address, user_agent, request_path

    @staticmethod
    def log(level, source, message, details=None, user_id=None):
        """
        Log a message to the database

        Args:
            level (str): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            source (str): Source component (auth, projects, store, etc.)
            message (str): Main log message
            details (str/dict): Additional details (will be JSON-encoded if dict)
            user_id (str): Optional user identifier
        """
        level = level.upper()
        fallback_logger.log(getattr(logging, level, logging.INFO), "[%s] %s", source, message)

        if isinstance(details, dict):
            details = json.dumps(details, indent=2, default=str)

        db = LoggingService._get_database()
        if db is None or db.closed:
            if details:
                fallback_logger.debug("Details: %s", details)
            return

        ip_address, user_agent, request_path = LoggingService._get_request_context()
        timestamp = datetime.now(timezone.utc).isoformat(timespec='microseconds')

        try:
            with db.connection() as conn:
                conn.execute(f"""
                    INSERT INTO {Config.LOGS_TABLE}
                    (timestamp, level, source, message, details, ip_address, user_agent, request_path, user_id)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """, (
                    timestamp, level, source, message, details,
                    ip_address, user_agent, request_path,
                    str(user_id) if user_id is not None else None
                ))
                LoggingService._trim_to_max_rows(conn, get_setting('LOG_MAX_ROWS'))
        except StoreError as e:
            # Fallback to console logging if database fails
            fallback_logger.warning("Logging service error: %s", e)
            if details:
                fallback_logger.warning("Details: %s", details)

    @staticmethod
    def info(source, message, details=None, user_id=None):
        """Log info message"""
        LoggingService.log('INFO', source, message, details, user_id)

    @staticmethod
    def warning(source, message, details=None, user_id=None):
        """Log warning message"""
        LoggingService.log('WARNING', source, message, details, user_id)

    @staticmethod
    def error(source, message, details=None, user_id=None):
        """Log error message"""
        LoggingService.log('ERROR', source, message, details, user_id)

    @staticmethod
    def log_user_action(source, action, user_id=None, details=None):
        """Log user actions (login, project edits, etc.)"""
        LoggingService.info(source, f"User action: {action}", details, user_id)

    @staticmethod
    def log_error_with_traceback(source, error, details=None):
        """Log error with full traceback"""
        error_details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': ''.join(traceback.format_exception(type(error), error, error.__traceback__))
        }
        if details:
            error_details['additional_details'] = details

        LoggingService.error(source, f"Exception occurred: {type(error).__name__}", error_details)

    @staticmethod
    def log_security_event(message, details=None):
        """Log security-related events"""
        LoggingService.warning('security', message, details)

    @staticmethod
    def get_recent_logs(limit=100, level=None):
        """Return the newest log entries as dicts"""
        db = LoggingService._get_database()
        if db is None:
            return []

        query = f"SELECT * FROM {Config.LOGS_TABLE}"
        params = []
        if level:
            query += " WHERE level = ?"
            params.append(level.upper())
        query += " ORDER BY timestamp DESC, id DESC LIMIT ?"
        params.append(limit)

        with db.connection() as conn:
            return [dict(row) for row in conn.execute(query, params).fetchall()]

    @staticmethod
    def _trim_to_max_rows(conn, max_rows):
        """Drop the oldest entries so at most max_rows remain"""
        if not max_rows:
            return 0
        cursor = conn.execute(f"""
            DELETE FROM {Config.LOGS_TABLE}
            WHERE id <= (SELECT MAX(id) FROM {Config.LOGS_TABLE}) - ?
        """, (int(max_rows),))
        return cursor.rowcount

    @staticmethod
    def cleanup_old_logs(days_to_keep=30, max_rows=None, db=None):
        """
        Clean up old log entries

        Removes entries older than days_to_keep and, when max_rows is given,
        everything but the newest max_rows entries. Returns the number of
        rows deleted.
        """
        if db is None:
            db = LoggingService._get_database()
        if db is None or db.closed:
            return 0

        cutoff_iso = (datetime.now(timezone.utc) - timedelta(days=days_to_keep)).isoformat(timespec='microseconds')

        try:
            with db.connection() as conn:
                cursor = conn.execute(f"""
                    DELETE FROM {Config.LOGS_TABLE}
                    WHERE timestamp < ?
                """, (cutoff_iso,))
                deleted_count = cursor.rowcount
                deleted_count += LoggingService._trim_to_max_rows(conn, max_rows)
        except StoreError as e:
            fallback_logger.error("Failed to cleanup old logs: %s", e)
            return 0

        if deleted_count:
            fallback_logger.info("Cleaned up %d old log entries", deleted_count)
        return deleted_count
