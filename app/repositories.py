"""
Data-access layer for the blog service.

The repositories wrap an ``AsyncSession`` and expose only the handful of
operations the service needs.  Search filters arrive as a sequence of
``FilterClause`` values and are turned into SQLAlchemy expressions here,
so the service never builds SQL itself.

Like the services, repositories flush but never commit.
"""
import logging
from dataclasses import dataclass
from typing import Any, Literal, Sequence

from sqlalchemy import String, cast, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, load_only

from app.database import json_serializer
from app.models import Blog, User

logger = logging.getLogger(__name__)

FilterOp = Literal["contains", "gte", "eq"]


@dataclass(frozen=True)
class FilterClause:
    """One ``field <op> value`` predicate of a blog query."""

    field: str
    op: FilterOp
    value: Any


# Fields a clause may target.  ``author.*`` fields require a join on users.
_FILTER_COLUMNS = {
    "title": Blog.title,
    "content": Blog.content,
    # The tag list is matched as one serialised value, not per tag.
    "tags": cast(Blog.tags, String),
    "created_at": Blog.created_at,
    "author.first_name": User.first_name,
    "author.last_name": User.last_name,
}


def _to_expression(clause: FilterClause):
    try:
        column = _FILTER_COLUMNS[clause.field]
    except KeyError:
        raise ValueError(f"Unsupported filter field: {clause.field!r}") from None

    if clause.op == "contains":
        value = clause.value
        if clause.field == "tags":
            # Match the stored JSON text, where quotes and backslashes are escaped.
            value = json_serializer(value)[1:-1]
        return column.contains(value, autoescape=True)
    if clause.op == "gte":
        return column >= clause.value
    if clause.op == "eq":
        return column == clause.value
    raise ValueError(f"Unsupported filter operator: {clause.op!r}")


class BlogRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_by_id(self, blog_id: str, with_author: bool = False) -> Blog | None:
        q = select(Blog).where(Blog.id == blog_id)
        if with_author:
            q = q.options(joinedload(Blog.author))
        result = await self.db.execute(q)
        return result.unique().scalar_one_or_none()

    def create(self, **fields) -> Blog:
        """Return a new, unsaved Blog."""
        return Blog(**fields)

    async def save(self, blog: Blog) -> Blog:
        """Persist *blog*; ids and timestamps are assigned on first save."""
        self.db.add(blog)
        await self.db.flush()
        return blog

    async def remove(self, blog: Blog) -> None:
        await self.db.delete(blog)
        await self.db.flush()

    async def find_page(
        self,
        skip: int,
        limit: int,
        clauses: Sequence[FilterClause] = (),
        with_author: bool = True,
    ) -> tuple[list[Blog], int]:
        """
        Return one page of blogs matching every clause, plus the total
        number of matching rows.

        Rows are ordered by creation date (oldest first) and id so that
        consecutive pages never overlap.
        """
        conditions = [_to_expression(c) for c in clauses]
        needs_author_join = any(c.field.startswith("author.") for c in clauses)

        count_q = select(func.count()).select_from(Blog)
        if needs_author_join:
            count_q = count_q.join(User, Blog.author_id == User.id)
        count_q = count_q.where(*conditions)
        total: int = (await self.db.execute(count_q)).scalar_one()

        rows_q = select(Blog)
        if needs_author_join:
            rows_q = rows_q.join(User, Blog.author_id == User.id)
        if with_author:
            rows_q = rows_q.options(joinedload(Blog.author))
        rows_q = (
            rows_q.where(*conditions)
            .order_by(Blog.created_at.asc(), Blog.id.asc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(rows_q)
        rows = list(result.unique().scalars().all())

        logger.debug(
            "Blog page skip=%d limit=%d clauses=%d -> %d row(s) of %d",
            skip, limit, len(conditions), len(rows), total,
        )
        return rows, total


class UserRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_by_id(self, user_id: str, fields: Sequence[str] | None = None) -> User | None:
        """
        Return the user with *user_id*, or None.

        When *fields* is given only those columns (plus the primary key)
        are loaded.
        """
        q = select(User).where(User.id == user_id)
        if fields:
            q = q.options(load_only(*(getattr(User, name) for name in fields)))
        result = await self.db.execute(q)
        return result.scalar_one_or_none()

    async def save(self, user: User) -> User:
        self.db.add(user)
        await self.db.flush()
        return user
