from datetime import datetime, timezone

from flask import current_app, jsonify

from showcase.core.errors import StoreError
from . import health_bp


def _build_health_response():
    """Build the health check response dict."""
    ext = current_app.extensions['showcase']
    database = {'ok': ext.db.ping(), 'path': ext.db.path}

    if database['ok']:
        try:
            database['projects'] = ext.projects.count_projects()
            database['featured'] = ext.projects.count_projects(featured_only=True)
        except StoreError as e:
            database['ok'] = False
            database['error'] = e.__class__.__name__

    return {
        'status': 'ok' if database['ok'] else 'critical',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'checks': {
            'database': database,
        },
    }


@health_bp.route('/health')
def health():
    """Public health check. 200 when the store answers, 503 otherwise."""
    result = _build_health_response()
    return jsonify(result), (200 if result['status'] == 'ok' else 503)
