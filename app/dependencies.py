from fastapi import Depends, Header, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app import messages
from app.config import settings
from app.database import get_db
from app.repositories import BlogRepository, UserRepository
from app.schemas import RequestingUser
from app.services.blog_service import BlogService


class PaginationParams:
    """
    Reusable FastAPI dependency that parses the pagination query
    parameters.

    Attributes
    ----------
    page:
        1-based page number (minimum 1).
    page_size:
        Number of items per page, between 1 and ``settings.MAX_PAGE_SIZE``.
    """

    def __init__(
        self,
        page: int = Query(
            1,
            ge=1,
            description="Page number (1-based).",
        ),
        page_size: int = Query(
            settings.DEFAULT_PAGE_SIZE,
            ge=1,
            le=settings.MAX_PAGE_SIZE,
            description="Number of items returned per page.",
        ),
    ) -> None:
        self.page = page
        self.page_size = page_size


async def get_requesting_user(
    x_user_id: str | None = Header(None, description="Id of the authenticated caller."),
) -> RequestingUser:
    """
    Resolve the caller's identity.

    Authentication proper happens upstream; by the time a request gets
    here the gateway has put the verified user id in ``X-User-Id``.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail=messages.MISSING_REQUESTING_USER)
    return RequestingUser(id=x_user_id.strip())


def get_blog_service(db: AsyncSession = Depends(get_db)) -> BlogService:
    return BlogService(BlogRepository(db), UserRepository(db))
