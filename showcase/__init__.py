"""
Showcase - Portfolio projects API
=================================

A small Flask backend for a personal portfolio:
- Public JSON listing of showcased projects
- Admin login issuing signed, time-limited session cookies
- Admin-only create/update/delete of projects

Usage:
    from showcase import create_app

    app = create_app({'JWT_SECRET': '...', 'SHOWCASE_DB': 'databases/showcase.db'})
"""

__version__ = '0.1.0'

from flask import Flask

from .extension import Showcase


def create_app(config=None):
    """Application factory"""
    app = Flask(__name__)
    Showcase(app, config)
    return app


__all__ = ['Showcase', 'create_app']
