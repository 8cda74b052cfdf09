"""
Showcase Auth Module

Provides admin authentication for the projects API:
- Username/password login issuing a signed session token
- Token delivery as an HTTP-only cookie (or Bearer header)
- Session verification and logout
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')

from . import routes
from .database import AdminDatabase
from .tokens import SessionManager
from .utils import admin_required, current_admin

__all__ = ['auth_bp', 'AdminDatabase', 'SessionManager', 'admin_required', 'current_admin']
