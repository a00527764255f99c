"""
Blog service — CRUD and search for the Blog aggregate.

Design notes
------------
- The service composes two stores, ``BlogRepository`` and
  ``UserRepository``, and never touches the session directly.  The
  transaction boundary is owned by the ``get_db`` dependency.
- Every response carries the author's display name.  Bulk reads (list
  and search) degrade a missing author to ``"Unknown"`` and report the
  problem through the injected ``ErrorReporter``.  Single-record paths
  never show a stored author that can be absent: updates reassign it
  and single fetches name the requesting user, whose absence is a
  ``NotFoundError``.
- Search filters are collected as ``FilterClause`` values and handed to
  the blog store unchanged.
- ``get_single_blog`` shows the *requesting* user's name, not the name
  of the blog's author, and ``delete_blog_post`` performs no ownership
  check.  Both are kept as-is pending product clarification.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from app import messages
from app.exceptions import (
    ErrorReporter,
    NotFoundError,
    ValidationError,
    log_reported_error,
)
from app.models import Blog, User
from app.repositories import BlogRepository, FilterClause, UserRepository
from app.schemas import (
    BlogCreate,
    BlogPage,
    BlogResponse,
    BlogSearchQuery,
    BlogUpdate,
    RequestingUser,
    SingleBlogData,
    SingleBlogEnvelope,
)

logger = logging.getLogger(__name__)

_NAME_FIELDS = ("first_name", "last_name")
_SEARCH_FILTERS = ("author", "title", "content", "tags", "created_date")


# ---------------------------------------------------------------------------
# Author resolution
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AuthorName:
    """Display name of a blog's author, or the placeholder when it is gone."""

    display: str
    placeholder: bool = False


def full_name(user: User) -> str:
    return f"{user.first_name} {user.last_name}"


def resolve_author(blog: Blog) -> AuthorName:
    if blog.author is None:
        return AuthorName(messages.UNKNOWN_AUTHOR, placeholder=True)
    return AuthorName(full_name(blog.author))


def _to_response(blog: Blog, author: str) -> BlogResponse:
    return BlogResponse(
        blog_id=blog.id,
        title=blog.title,
        content=blog.content,
        tags=blog.tags,
        image_urls=blog.image_urls,
        author=author,
        created_at=blog.created_at,
    )


# ---------------------------------------------------------------------------
# Search helpers
# ---------------------------------------------------------------------------

def _label(field: str) -> str:
    return field[:1].upper() + field[1:]


def validate_search_filters(query: BlogSearchQuery) -> None:
    """Reject any provided filter that is blank once trimmed."""
    for field in _SEARCH_FILTERS:
        value = getattr(query, field)
        if value is not None and not value.strip():
            raise ValidationError(f"{_label(field)} value is empty")


def parse_created_date(value: str) -> datetime:
    """
    Parse an ISO date or datetime into an aware lower bound.

    A bare date means midnight; naive values are taken as UTC and aware
    values are converted to UTC, the zone timestamps are stored in.
    """
    try:
        bound = datetime.fromisoformat(value.strip())
    except ValueError:
        raise ValidationError(f"{_label('created_date')} value is invalid") from None
    if bound.tzinfo is None:
        bound = bound.replace(tzinfo=timezone.utc)
    return bound.astimezone(timezone.utc)


def build_search_clauses(query: BlogSearchQuery) -> list[FilterClause]:
    clauses: list[FilterClause] = []
    if query.author is not None:
        # Both name fields must contain the text; this is not an OR.
        clauses.append(FilterClause("author.first_name", "contains", query.author))
        clauses.append(FilterClause("author.last_name", "contains", query.author))
    if query.title is not None:
        clauses.append(FilterClause("title", "contains", query.title))
    if query.content is not None:
        clauses.append(FilterClause("content", "contains", query.content))
    if query.tags is not None:
        clauses.append(FilterClause("tags", "contains", query.tags))
    if query.created_date is not None:
        clauses.append(FilterClause("created_at", "gte", parse_created_date(query.created_date)))
    return clauses


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class BlogService:
    def __init__(
        self,
        blogs: BlogRepository,
        users: UserRepository,
        reporter: ErrorReporter = log_reported_error,
    ) -> None:
        self.blogs = blogs
        self.users = users
        self.reporter = reporter

    async def _fetch_user_by_id(self, user_id: str) -> User:
        user = await self.users.find_by_id(user_id, fields=_NAME_FIELDS)
        if user is None:
            raise NotFoundError(messages.USER_NOT_FOUND)
        return user

    def _map_blog_results(self, rows: list[Blog]) -> list[BlogResponse]:
        data = []
        for blog in rows:
            author = resolve_author(blog)
            if author.placeholder:
                self.reporter(messages.AUTHOR_NOT_FOUND, 500)
            data.append(_to_response(blog, author.display))
        return data

    async def create_blog(self, data: BlogCreate, user: RequestingUser) -> BlogResponse:
        """Create a blog owned by the requesting user."""
        author = await self._fetch_user_by_id(user.id)

        blog = self.blogs.create(**data.model_dump(), author=author)
        saved = await self.blogs.save(blog)

        logger.info("Blog %s created by user %s", saved.id, author.id)
        return _to_response(saved, full_name(author))

    async def get_single_blog(self, blog_id: str, user: RequestingUser) -> SingleBlogEnvelope:
        """
        Return one blog wrapped in a status/message/data envelope.

        The ``author`` shown is the requesting user's name.
        """
        blog = await self.blogs.find_by_id(blog_id)
        if blog is None:
            raise NotFoundError(messages.BLOG_NOT_FOUND)

        viewer = await self._fetch_user_by_id(user.id)

        return SingleBlogEnvelope(
            status=200,
            message=messages.BLOG_FETCHED_SUCCESSFUL,
            data=SingleBlogData(
                blog_id=blog.id,
                title=blog.title,
                content=blog.content,
                tags=blog.tags,
                image_urls=blog.image_urls,
                author=full_name(viewer),
                published_date=blog.created_at,
            ),
        )

    async def update_blog(
        self, blog_id: str, data: BlogUpdate, user: RequestingUser
    ) -> BlogResponse:
        """
        Overwrite the fields present in *data* and hand the blog to the
        requesting user.

        Authorship always moves to whoever performs the update.
        """
        blog = await self.blogs.find_by_id(blog_id, with_author=True)
        if blog is None:
            raise NotFoundError(messages.BLOG_UPDATE_NOT_FOUND)

        author = await self._fetch_user_by_id(user.id)

        for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(blog, field, value)
        blog.author = author

        updated = await self.blogs.save(blog)

        logger.info("Blog %s updated by user %s", updated.id, author.id)
        return _to_response(updated, full_name(updated.author))

    async def delete_blog_post(self, blog_id: str) -> None:
        blog = await self.blogs.find_by_id(blog_id)
        if blog is None:
            raise NotFoundError(messages.BLOG_DELETE_NOT_FOUND)

        await self.blogs.remove(blog)
        logger.info("Blog %s deleted", blog_id)

    async def get_all_blogs(self, page: int, page_size: int) -> BlogPage:
        skip = (page - 1) * page_size
        rows, total = await self.blogs.find_page(skip, page_size, with_author=True)
        return BlogPage(data=self._map_blog_results(rows), total=total)

    async def search_blogs(self, query: BlogSearchQuery) -> BlogPage:
        """
        Return one page of blogs matching every provided filter.

        Blank filters fail the whole search.  An empty result is reported
        through the reporter before the empty page is returned.
        """
        validate_search_filters(query)
        clauses = build_search_clauses(query)

        skip = (query.page - 1) * query.page_size
        rows, total = await self.blogs.find_page(
            skip, query.page_size, clauses=clauses, with_author=True
        )

        if not rows:
            self.reporter(messages.NO_SEARCH_RESULTS, 404)
            return BlogPage(data=[], total=0)

        return BlogPage(data=self._map_blog_results(rows), total=total)
