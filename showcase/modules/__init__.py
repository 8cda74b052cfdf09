"""
Showcase Modules
================

Flask blueprint modules for the portfolio API.
"""

__all__ = ['auth', 'projects', 'health']
