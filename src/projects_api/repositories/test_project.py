"""Repository for the TestProject entity."""

from collections.abc import Sequence

from sqlalchemy import delete, insert, text, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from src.projects_api.models import TestProject

# The service's database role may come with a restricted default search_path
SET_SEARCH_PATH = text('SET search_path = public, "$user"')


class TestProjectRepository:
    """Data access for the ``TestProjects`` table.

    Storage errors are never caught here: they propagate to the caller unchanged.
    Transaction control belongs to the session owner.
    """

    __test__ = False

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _set_search_path(self) -> None:
        await self.session.execute(SET_SEARCH_PATH)

    async def list_all(self) -> Sequence[TestProject]:
        """All projects ordered by ascending id. Empty when the table is empty."""
        await self._set_search_path()
        result = await self.session.execute(select(TestProject).order_by(TestProject.id))
        return result.scalars().all()

    async def get_by_id(self, id: int) -> TestProject | None:
        """Get a project by id, or None if it does not exist."""
        await self._set_search_path()
        result = await self.session.execute(select(TestProject).where(TestProject.id == id))
        return result.scalar_one_or_none()

    async def create(self, name: str | None) -> TestProject:
        """Insert a project and return it with its generated id.

        ``name`` is forwarded as given; a NULL name is rejected by the table's
        NOT NULL constraint, not by this method.
        """
        await self._set_search_path()
        result = await self.session.execute(
            insert(TestProject).values({TestProject.name: name}).returning(TestProject)
        )
        return result.scalar_one()

    async def update(self, id: int, name: str | None) -> TestProject | None:
        """Replace the name of an existing project. Never inserts."""
        await self._set_search_path()
        result = await self.session.execute(
            update(TestProject)
            .where(TestProject.id == id)
            .values({TestProject.name: name})
            .returning(TestProject)
        )
        return result.scalar_one_or_none()

    async def delete(self, id: int) -> bool:
        """Delete a project. Returns False if no row had this id."""
        await self._set_search_path()
        result = await self.session.execute(delete(TestProject).where(TestProject.id == id))
        return result.rowcount > 0  # type: ignore[attr-defined]
