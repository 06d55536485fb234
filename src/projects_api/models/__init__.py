"""Model exports.

Import from here: `from src.projects_api.models import TestProject`
"""

from src.projects_api.models.test_project import TestProject

__all__ = ["TestProject"]
