"""
Projects Models
===============

Request payload parsing for the projects API. Create payloads become a
ProjectInput; partial updates become a ProjectUpdate holding only the
fields the client actually sent.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from showcase.core.errors import InvalidArgument, ValidationError

PROJECT_ID_RE = re.compile(r'^[1-9][0-9]{0,17}$')

REQUIRED_TEXT_FIELDS = ('title', 'description', 'image')
UPDATABLE_FIELDS = ('title', 'description', 'image', 'link', 'tech', 'featured')


def parse_project_id(raw):
    """Return the integer id for a URL segment, or raise InvalidArgument"""
    if not isinstance(raw, str) or not PROJECT_ID_RE.match(raw):
        raise InvalidArgument()
    return int(raw)


def _require_text(data, name):
    value = data.get(name)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError('Missing required fields')
    return value


def _clean_tech(value):
    """Validate tech tags, keeping their order (duplicates allowed)"""
    if not isinstance(value, list) or not value:
        raise ValidationError('Missing required fields')
    for tag in value:
        if not isinstance(tag, str) or not tag.strip():
            raise ValidationError('Tech entries must be non-empty strings')
    return list(value)


def _clean_link(value):
    if value is None:
        return ''
    if not isinstance(value, str):
        raise ValidationError('Link must be a string')
    return value


def _clean_featured(value):
    if not isinstance(value, bool):
        raise ValidationError('Featured must be a boolean')
    return value


def _require_object(data):
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


@dataclass
class ProjectInput:
    title: str
    description: str
    image: str
    tech: List[str]
    link: str = ''
    featured: bool = False

    @classmethod
    def from_json(cls, data):
        data = _require_object(data)
        featured = data.get('featured')
        return cls(
            title=_require_text(data, 'title'),
            description=_require_text(data, 'description'),
            image=_require_text(data, 'image'),
            tech=_clean_tech(data.get('tech')),
            link=_clean_link(data.get('link')),
            featured=_clean_featured(featured) if featured is not None else False,
        )


@dataclass
class ProjectUpdate:
    """Explicit set of fields to overwrite. Unset fields stay None."""
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    link: Optional[str] = None
    tech: Optional[List[str]] = None
    featured: Optional[bool] = None
    _present: tuple = field(default=(), repr=False)

    @classmethod
    def from_json(cls, data):
        data = _require_object(data)
        values = {}
        for name in UPDATABLE_FIELDS:
            if name not in data:
                continue
            if name in REQUIRED_TEXT_FIELDS:
                values[name] = _require_text(data, name)
            elif name == 'tech':
                values[name] = _clean_tech(data[name])
            elif name == 'link':
                values[name] = _clean_link(data[name])
            elif name == 'featured':
                values[name] = _clean_featured(data[name])
        return cls(_present=tuple(values), **values)

    def fields_to_set(self) -> Dict[str, Any]:
        """Mapping of field name to new value for every field the client sent"""
        return {name: getattr(self, name) for name in self._present}

    def is_empty(self):
        return not self._present
