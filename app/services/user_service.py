"""
User Service

Create and update Users and their Profile, enforcing the uniqueness rules
the GraphQL layer promises before the database would reject them.
"""

import logging

from app.exceptions import DuplicateResourceError, UniqueConstraintError, UserNotFoundError, ValidationError
from app.models.profile import Profile
from app.models.user import User
from app.schemas.user import ProfileCreate, ProfileUpdate, UserCreate, UserUpdate
from app.services.repository import Repository, SessionFactory

logger = logging.getLogger(__name__)


async def _ensure_unique(users: Repository[User], field: str, value: str | None, exclude_id: str | None = None) -> None:
    if value is None:
        return
    matches = await users.find_many(**{field: value})
    if any(user.id != exclude_id for user in matches):
        raise DuplicateResourceError("User", field, value)


async def get_user_by_email(session_factory: SessionFactory, email: str | None) -> User | None:
    if not email:
        raise ValidationError("userByEmail: email is required", field="email")
    matches = await Repository(session_factory, User).find_many(email=email)
    return matches[0] if matches else None


async def get_user_by_username(session_factory: SessionFactory, username: str | None) -> User | None:
    if not username:
        raise ValidationError("userByUsername: username is required", field="username")
    matches = await Repository(session_factory, User).find_many(username=username)
    return matches[0] if matches else None


async def create_user(session_factory: SessionFactory, user_data: UserCreate) -> User:
    users = Repository(session_factory, User)
    await _ensure_unique(users, "email", user_data.email)
    await _ensure_unique(users, "username", user_data.username)

    try:
        user = await users.create(**user_data.model_dump())
    except UniqueConstraintError:
        # A concurrent request committed the same value after the checks above
        await _ensure_unique(users, "email", user_data.email)
        await _ensure_unique(users, "username", user_data.username)
        raise
    logger.info(f"User created: id={user.id}")
    return user


async def update_user(session_factory: SessionFactory, user_id: str, user_update: UserUpdate) -> User:
    users = Repository(session_factory, User)
    changes = user_update.model_dump(exclude_unset=True)
    await _ensure_unique(users, "email", changes.get("email"), exclude_id=user_id)
    await _ensure_unique(users, "username", changes.get("username"), exclude_id=user_id)

    try:
        user = await users.update(user_id, **changes)
    except UniqueConstraintError:
        await _ensure_unique(users, "email", changes.get("email"), exclude_id=user_id)
        await _ensure_unique(users, "username", changes.get("username"), exclude_id=user_id)
        raise
    logger.info(f"User updated: id={user.id}, fields={sorted(changes)}")
    return user


async def create_profile(session_factory: SessionFactory, profile_data: ProfileCreate) -> Profile:
    if await Repository(session_factory, User).get_by_id(profile_data.user_id) is None:
        raise UserNotFoundError(profile_data.user_id)

    profiles = Repository(session_factory, Profile)
    if await profiles.find_many(user_id=profile_data.user_id):
        raise DuplicateResourceError("Profile", "userId", profile_data.user_id)

    try:
        profile = await profiles.create(**profile_data.model_dump())
    except UniqueConstraintError as e:
        raise DuplicateResourceError("Profile", "userId", profile_data.user_id) from e
    logger.info(f"Profile created: id={profile.id}, user={profile.user_id}")
    return profile


async def update_profile(session_factory: SessionFactory, profile_id: str, profile_update: ProfileUpdate) -> Profile:
    changes = profile_update.model_dump(exclude_unset=True)
    profile = await Repository(session_factory, Profile).update(profile_id, **changes)
    logger.info(f"Profile updated: id={profile.id}")
    return profile
