"""
Auth Routes
===========

- POST /auth/login  -- exchange username/password for a session cookie
- POST /auth/logout -- clear the session cookie
- GET  /auth/verify -- 200 if the cookie or Bearer token is a valid session
"""

from flask import jsonify, request

from showcase.core.errors import Unauthenticated, ValidationError
from . import auth_bp
from .utils import (
    clear_session_cookie, current_admin, get_session_manager, set_session_cookie,
)


@auth_bp.route('/login', methods=['POST'])
def login():
    """Handle admin username/password sign-in"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Username and password are required')

    username = data.get('username')
    password = data.get('password')

    if not isinstance(username, str) or not isinstance(password, str) or not username or not password:
        raise ValidationError('Username and password are required')

    sessions = get_session_manager()
    token = sessions.issue(username, password)

    response = jsonify({
        'message': 'Login successful',
        'username': username
    })
    return set_session_cookie(response, token)


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Sign out - the session only lives in the client's cookie"""
    response = jsonify({'message': 'Logout successful'})
    return clear_session_cookie(response)


@auth_bp.route('/verify', methods=['GET'])
def verify():
    """Report whether the request carries a valid session"""
    admin = current_admin()
    if admin is None:
        raise Unauthenticated('Not authenticated')

    return jsonify({
        'message': 'Authenticated',
        'username': admin['username']
    })
