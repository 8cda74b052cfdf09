"""
Projects Routes
===============

- GET    /projects         -- all projects, newest first (?featured=true to filter)
- GET    /projects/<id>    -- single project
- POST   /projects         -- create (admin)
- PUT    /projects/<id>    -- partial update (admin)
- DELETE /projects/<id>    -- delete (admin)
"""

from flask import current_app, g, jsonify, request

from showcase.core.logging_service import LoggingService
from showcase.modules.auth.utils import admin_required
from . import projects_bp
from .models import ProjectInput, ProjectUpdate, parse_project_id


def get_projects_db():
    """Return the ProjectDatabase of the running Showcase extension"""
    return current_app.extensions['showcase'].projects


@projects_bp.route('', methods=['GET'])
def list_projects():
    """Get all projects"""
    featured_only = request.args.get('featured') == 'true'
    projects = get_projects_db().list_projects(featured_only=featured_only)
    return jsonify({'projects': projects})


@projects_bp.route('/<project_id>', methods=['GET'])
def get_project(project_id):
    """Get single project"""
    project = get_projects_db().get_project(parse_project_id(project_id))
    return jsonify({'project': project})


@projects_bp.route('', methods=['POST'])
@admin_required
def create_project():
    """Create new project"""
    project = ProjectInput.from_json(request.get_json(silent=True))
    project_id = get_projects_db().create_project(project)

    LoggingService.log_user_action(
        'projects', f"created project {project_id}",
        user_id=g.admin['adminId'], details={'title': project.title}
    )
    return jsonify({
        'message': 'Project created successfully',
        'id': project_id
    }), 201


@projects_bp.route('/<project_id>', methods=['PUT'])
@admin_required
def update_project(project_id):
    """Update project"""
    project_id = parse_project_id(project_id)
    update = ProjectUpdate.from_json(request.get_json(silent=True))
    get_projects_db().update_project(project_id, update)

    LoggingService.log_user_action(
        'projects', f"updated project {project_id}",
        user_id=g.admin['adminId'], details={'fields': sorted(update.fields_to_set())}
    )
    return jsonify({'message': 'Project updated successfully'})


@projects_bp.route('/<project_id>', methods=['DELETE'])
@admin_required
def delete_project(project_id):
    """Delete project"""
    project_id = parse_project_id(project_id)
    get_projects_db().delete_project(project_id)

    LoggingService.log_user_action('projects', f"deleted project {project_id}", user_id=g.admin['adminId'])
    return jsonify({'message': 'Project deleted successfully'})
