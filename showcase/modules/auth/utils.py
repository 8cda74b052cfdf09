from functools import wraps

from flask import current_app, g, request

from showcase.core.config import get_setting
from showcase.core.errors import Unauthenticated


def get_session_manager():
    """Return the SessionManager of the running Showcase extension"""
    return current_app.extensions['showcase'].sessions


def get_token_from_request():
    """Token from the session cookie, else from an Authorization: Bearer header"""
    token = request.cookies.get(get_setting('ADMIN_COOKIE_NAME'))
    if token:
        return token

    auth_header = request.headers.get('Authorization', '')
    if auth_header.startswith('Bearer '):
        return auth_header[len('Bearer '):].strip() or None

    return None


def current_admin():
    """Verified {adminId, username} for this request, or None"""
    token = get_token_from_request()
    if not token:
        return None
    return get_session_manager().verify(token)


def admin_required(f):
    """Decorator to require a valid admin session"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        admin = current_admin()
        if admin is None:
            raise Unauthenticated()
        g.admin = admin
        return f(*args, **kwargs)
    return decorated_function


def set_session_cookie(response, token):
    """Attach the session token as an HTTP-only, same-site strict cookie"""
    response.set_cookie(
        get_setting('ADMIN_COOKIE_NAME'),
        token,
        max_age=get_session_manager().max_age,
        httponly=True,
        secure=bool(get_setting('IS_PRODUCTION')),
        samesite='Strict',
        path='/',
    )
    return response


def clear_session_cookie(response):
    """Expire the session cookie on the client"""
    response.delete_cookie(
        get_setting('ADMIN_COOKIE_NAME'),
        path='/',
        httponly=True,
        secure=bool(get_setting('IS_PRODUCTION')),
        samesite='Strict',
    )
    return response
