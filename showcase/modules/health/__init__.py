"""
Health Module
=============

Public GET /health endpoint reporting store reachability.
"""

from flask import Blueprint

health_bp = Blueprint('health', __name__)

from . import routes

__all__ = ['health_bp']
