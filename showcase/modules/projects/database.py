import json
from datetime import datetime, timezone

from showcase.core.config import Config
from showcase.core.errors import NotFound

_SELECT_COLS = 'id, title, description, image, link, tech, featured, created_at, updated_at'

# Field name -> column name for partial updates
_COLUMNS = {
    'title': 'title',
    'description': 'description',
    'image': 'image',
    'link': 'link',
    'tech': 'tech',
    'featured': 'featured',
}


def _now():
    return datetime.now(timezone.utc).isoformat(timespec='microseconds')


def _row_to_dict(row):
    """Convert a DB row to a project dict"""
    return {
        'id': row['id'],
        'title': row['title'],
        'description': row['description'],
        'image': row['image'],
        'link': row['link'],
        'tech': json.loads(row['tech']) if row['tech'] else [],
        'featured': bool(row['featured']),
        'createdAt': row['created_at'],
        'updatedAt': row['updated_at'],
    }


def _to_column_value(name, value):
    if name == 'tech':
        return json.dumps(value)
    if name == 'featured':
        return 1 if value else 0
    return value


class ProjectDatabase:
    """Repository for showcased projects"""

    def __init__(self, db):
        self.db = db

    def list_projects(self, featured_only=False):
        """All projects, newest first. featured_only restricts to featured=1."""
        where = ' WHERE featured = 1' if featured_only else ''
        with self.db.connection() as conn:
            rows = conn.execute(f'''
                SELECT {_SELECT_COLS}
                FROM {Config.PROJECTS_TABLE}{where}
                ORDER BY created_at DESC, id DESC
            ''').fetchall()
            return [_row_to_dict(row) for row in rows]

    def count_projects(self, featured_only=False):
        where = ' WHERE featured = 1' if featured_only else ''
        with self.db.connection() as conn:
            return conn.execute(f'SELECT COUNT(*) FROM {Config.PROJECTS_TABLE}{where}').fetchone()[0]

    def get_project(self, project_id):
        """Get single project by ID"""
        with self.db.connection() as conn:
            row = conn.execute(f'''
                SELECT {_SELECT_COLS} FROM {Config.PROJECTS_TABLE} WHERE id = ?
            ''', (project_id,)).fetchone()
        if not row:
            raise NotFound()
        return _row_to_dict(row)

    def create_project(self, project):
        """Insert a ProjectInput and return the new id"""
        now = _now()
        with self.db.connection() as conn:
            cursor = conn.execute(f'''
                INSERT INTO {Config.PROJECTS_TABLE}
                    (title, description, image, link, tech, featured, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            ''', (project.title, project.description, project.image, project.link,
                  json.dumps(project.tech), 1 if project.featured else 0, now, now))
            return cursor.lastrowid

    def update_project(self, project_id, update):
        """Apply a ProjectUpdate. updated_at is refreshed even when no fields are sent."""
        assignments = []
        params = []
        for name, value in update.fields_to_set().items():
            assignments.append(f'{_COLUMNS[name]} = ?')
            params.append(_to_column_value(name, value))

        assignments.append('updated_at = ?')
        params.append(_now())
        params.append(project_id)

        with self.db.connection() as conn:
            cursor = conn.execute(f'''
                UPDATE {Config.PROJECTS_TABLE}
                SET {", ".join(assignments)}
                WHERE id = ?
            ''', params)
            if cursor.rowcount == 0:
                raise NotFound()

    def delete_project(self, project_id):
        """Delete project from database"""
        with self.db.connection() as conn:
            cursor = conn.execute(f'DELETE FROM {Config.PROJECTS_TABLE} WHERE id = ?', (project_id,))
            if cursor.rowcount == 0:
                raise NotFound()
