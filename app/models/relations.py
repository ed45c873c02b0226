"""
Relation Registry

Declares every relational field exposed on the GraphQL object types: the
entity it lives on, the entity it points at, its cardinality and the
foreign key it is resolved through. Resolvers read this table instead of
hard-coding lookups, so each relation is described exactly once.
"""

import enum
from dataclasses import dataclass

from app.database import Base
from app.models.blog import Blog
from app.models.blog_comment import BlogComment
from app.models.blog_post import BlogPost
from app.models.profile import Profile
from app.models.user import User


class Cardinality(str, enum.Enum):
    ONE_NULLABLE = "one_nullable"
    ONE_REQUIRED = "one_required"
    MANY = "many"


@dataclass(frozen=True)
class Relation:
    """
    A relational field on ``source``.

    Exactly one of ``local_key`` (a foreign-key attribute on the source row)
    or ``remote_key`` (a foreign-key column on the target rows pointing back
    at the source id) is set.
    """

    source: type[Base]
    name: str
    target: type[Base]
    cardinality: Cardinality
    local_key: str | None = None
    remote_key: str | None = None

    def __post_init__(self) -> None:
        if (self.local_key is None) == (self.remote_key is None):
            raise ValueError(f"{self.source.__name__}.{self.name} needs exactly one of local_key/remote_key")
        if self.local_key is not None and self.cardinality is Cardinality.MANY:
            raise ValueError(f"{self.source.__name__}.{self.name}: a local key can only resolve a single row")

    @property
    def many(self) -> bool:
        return self.cardinality is Cardinality.MANY


_RELATIONS = [
    # User
    Relation(User, "profile", Profile, Cardinality.ONE_NULLABLE, remote_key="user_id"),
    Relation(User, "blogs", Blog, Cardinality.MANY, remote_key="author_id"),
    Relation(User, "blog_posts", BlogPost, Cardinality.MANY, remote_key="author_id"),
    Relation(User, "blog_comments", BlogComment, Cardinality.MANY, remote_key="author_id"),
    # Profile
    Relation(Profile, "user", User, Cardinality.ONE_REQUIRED, local_key="user_id"),
    # Blog
    Relation(Blog, "author", User, Cardinality.ONE_REQUIRED, local_key="author_id"),
    Relation(Blog, "blog_posts", BlogPost, Cardinality.MANY, remote_key="blog_id"),
    # BlogPost
    Relation(BlogPost, "author", User, Cardinality.ONE_REQUIRED, local_key="author_id"),
    Relation(BlogPost, "blog", Blog, Cardinality.ONE_REQUIRED, local_key="blog_id"),
    Relation(BlogPost, "blog_comments", BlogComment, Cardinality.MANY, remote_key="blog_post_id"),
    # BlogComment
    Relation(BlogComment, "author", User, Cardinality.ONE_REQUIRED, local_key="author_id"),
    Relation(BlogComment, "blog_post", BlogPost, Cardinality.ONE_REQUIRED, local_key="blog_post_id"),
    Relation(BlogComment, "parent", BlogComment, Cardinality.ONE_NULLABLE, local_key="parent_id"),
    Relation(BlogComment, "blog_comments", BlogComment, Cardinality.MANY, remote_key="parent_id"),
]

RELATIONS: dict[type[Base], dict[str, Relation]] = {}
for _relation in _RELATIONS:
    RELATIONS.setdefault(_relation.source, {})[_relation.name] = _relation


def get_relation(source: type[Base], name: str) -> Relation:
    try:
        return RELATIONS[source][name]
    except KeyError:
        raise KeyError(f"No relation '{name}' declared on {source.__name__}") from None
