"""
User service — create and fetch the users that author blogs.

The blog service only ever reads a user's name; everything else about
users lives here.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import User
from app.repositories import UserRepository
from app.schemas import UserCreate, UserResponse


async def get_user(db: AsyncSession, user_id: str) -> UserResponse | None:
    """Return the user with *user_id*, or None when it does not exist."""
    user = await UserRepository(db).find_by_id(user_id)
    if user is None:
        return None
    return UserResponse.model_validate(user)


async def create_user(db: AsyncSession, data: UserCreate) -> UserResponse:
    """
    Create a new user.

    Email uniqueness is enforced by the database; the router translates
    the resulting integrity error into a 409 response.
    """
    user = User(
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
    )
    await UserRepository(db).save(user)
    return UserResponse.model_validate(user)
