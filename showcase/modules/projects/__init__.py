"""
Projects Module
===============

JSON API for the showcased project list.

Provides:
- Public listing (optionally featured only) and single-project lookup
- Admin-only create, partial update and delete
"""

from flask import Blueprint

projects_bp = Blueprint('projects', __name__, url_prefix='/projects')

from . import routes
from .database import ProjectDatabase
from .models import ProjectInput, ProjectUpdate, parse_project_id

__all__ = ['projects_bp', 'ProjectDatabase', 'ProjectInput', 'ProjectUpdate', 'parse_project_id']
