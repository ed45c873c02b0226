from .user import UserCreate, UserUpdate, ProfileCreate, ProfileUpdate
from .blog import (
    BlogCreate,
    BlogUpdate,
    BlogPostCreate,
    BlogPostUpdate,
    BlogCommentCreate,
    BlogCommentUpdate,
)

# Define the public API of this module
__all__ = [
    "UserCreate",
    "UserUpdate",
    "ProfileCreate",
    "ProfileUpdate",
    "BlogCreate",
    "BlogUpdate",
    "BlogPostCreate",
    "BlogPostUpdate",
    "BlogCommentCreate",
    "BlogCommentUpdate",
]
