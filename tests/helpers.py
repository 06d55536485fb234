"""Test doubles for the storage layer."""

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError

from src.projects_api.models import TestProject


class FakeSession:
    """Stands in for AsyncSession in HTTP-level tests; only counts commits."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1


class InMemoryTestProjectRepository:
    """Dict-backed stand-in for TestProjectRepository.

    Mirrors the table's behaviour: ids are assigned in increasing order and a
    NULL name violates the NOT NULL constraint.
    """

    def __init__(self) -> None:
        self.rows: dict[int, TestProject] = {}
        self._next_id = 1

    def add(self, name: str) -> TestProject:
        project = TestProject(id=self._next_id, name=name)
        self.rows[self._next_id] = project
        self._next_id += 1
        return project

    async def list_all(self) -> Sequence[TestProject]:
        return [self.rows[id] for id in sorted(self.rows)]

    async def get_by_id(self, id: int) -> TestProject | None:
        return self.rows.get(id)

    @staticmethod
    def _check_not_null(statement: str, name: str | None) -> None:
        if name is None:
            raise IntegrityError(
                statement,
                (name,),
                Exception('null value in column "Name" violates not-null constraint'),
            )

    async def create(self, name: str | None) -> TestProject:
        self._check_not_null('INSERT INTO "TestProjects" ("Name") VALUES ($1)', name)
        return self.add(name)

    async def update(self, id: int, name: str | None) -> TestProject | None:
        project = self.rows.get(id)
        if project is None:
            return None
        self._check_not_null('UPDATE "TestProjects" SET "Name" = $1', name)
        project.name = name
        return project

    async def delete(self, id: int) -> bool:
        return self.rows.pop(id, None) is not None


def seed(repository: InMemoryTestProjectRepository, *names: str) -> list[TestProject]:
    """Insert one project per name, in order."""
    return [repository.add(name) for name in names]
