"""
Admin session tokens
====================

Stateless HS256 JWTs binding {adminId, username} to an absolute expiry.
Nothing is stored server side, so validity is signature + expiry only.
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from showcase.core.errors import InvalidCredentials, StoreError, ValidationError
from showcase.core.logging_service import LoggingService

logger = logging.getLogger(__name__)

ALGORITHM = 'HS256'


class SessionManager:
    """Issues and verifies admin session tokens"""

    def __init__(self, admins, secret, ttl_hours=24):
        if not secret:
            raise ValueError("A signing secret is required")
        self.admins = admins
        self.secret = secret
        self.ttl = timedelta(hours=ttl_hours)

    @property
    def max_age(self):
        """Token lifetime in seconds, used for the cookie max-age"""
        return int(self.ttl.total_seconds())

    def issue(self, username, password):
        """
        Check username/password and return a signed token.

        Unknown usernames and wrong passwords raise the same
        InvalidCredentials error.
        """
        if not username or not password:
            raise ValidationError('Username and password are required')

        admin = self.admins.get_admin_by_username(username)
        if not admin or not self.admins.verify_password(admin, password):
            LoggingService.log_security_event('Failed admin login', {'username': username})
            raise InvalidCredentials()

        try:
            self.admins.update_last_login(admin['id'])
        except StoreError as e:
            # Login still succeeds; last_login is informational
            logger.warning("Could not update last login for admin %s: %s", admin['id'], e)

        LoggingService.log_user_action('auth', 'login', user_id=admin['id'])
        return self.encode(admin['id'], admin['username'])

    def encode(self, admin_id, username, now=None):
        """Sign a token for the given identity"""
        now = now or datetime.now(timezone.utc)
        payload = {
            'adminId': str(admin_id),
            'username': username,
            'iat': now,
            'exp': now + self.ttl,
        }
        return jwt.encode(payload, self.secret, algorithm=ALGORITHM)

    def verify(self, token):
        """
        Return {'adminId', 'username'} for a valid token, otherwise None.
        Expired, forged and malformed tokens are not distinguished.
        """
        if not token:
            return None
        try:
            payload = jwt.decode(
                token, self.secret, algorithms=[ALGORITHM],
                options={'require': ['exp']}
            )
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected session token: %s", type(e).__name__)
            return None

        admin_id = payload.get('adminId')
        username = payload.get('username')
        if not admin_id or not username:
            return None
        return {'adminId': admin_id, 'username': username}
