from .user import User
from .profile import Profile
from .blog import Blog
from .blog_post import BlogPost
from .blog_comment import BlogComment
from .relations import Cardinality, Relation, RELATIONS, get_relation

__all__ = [
    "User",
    "Profile",
    "Blog",
    "BlogPost",
    "BlogComment",
    "Cardinality",
    "Relation",
    "RELATIONS",
    "get_relation",
]
