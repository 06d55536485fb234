"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import TestProjectFactory
"""

from tests.factories.base import BaseFactory
from tests.factories.project import TestProjectFactory

__all__ = [
    "BaseFactory",
    "TestProjectFactory",
]
