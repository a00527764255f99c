from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

from app.config import settings


# --- User ---

class UserBase(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255)


class UserCreate(UserBase):
    pass


class UserResponse(UserBase):
    id: str
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class RequestingUser(BaseModel):
    """Identity of the caller, as resolved by the authentication layer."""
    id: str


# --- Blog ---

class BlogCreate(BaseModel):
    title: str = Field(max_length=300)
    content: str
    tags: list[str] = []
    image_urls: list[str] = []


class BlogUpdate(BaseModel):
    title: str | None = Field(None, max_length=300)
    content: str | None = None
    tags: list[str] | None = None
    image_urls: list[str] | None = None


class BlogResponse(BaseModel):
    blog_id: str
    title: str
    content: str
    tags: list[str] = []
    image_urls: list[str] = []
    author: str
    created_at: datetime


class SingleBlogData(BaseModel):
    blog_id: str
    title: str
    content: str
    tags: list[str] = []
    image_urls: list[str] = []
    author: str
    published_date: datetime


class SingleBlogEnvelope(BaseModel):
    status: int = 200
    message: str
    data: SingleBlogData


class BlogSearchQuery(BaseModel):
    # Filters stay raw strings so that blank values can be rejected by name
    # before any parsing happens.
    author: str | None = None
    title: str | None = None
    content: str | None = None
    tags: str | None = None
    created_date: str | None = None
    page: int = Field(1, ge=1)
    page_size: int = Field(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)


# --- Pagination ---

class BlogPage(BaseModel):
    data: list[BlogResponse]
    total: int
