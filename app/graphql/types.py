"""Strawberry GraphQL types mapped from the blog SQLAlchemy models."""

from __future__ import annotations

from datetime import datetime

import strawberry
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.graphql.resolvers import resolve_relation
from app.models.blog import Blog
from app.models.blog_comment import BlogComment
from app.models.blog_post import BlogPost
from app.models.profile import Profile
from app.models.user import User


@strawberry.type(name="User", description="Represents a unique User of the App.")
class UserType:
    id: str = strawberry.field(description="Unique PK and ID of the User")
    created_at: datetime
    updated_at: datetime
    username: str | None = strawberry.field(description="Unique human readable username. Null until chosen.")
    email: str = strawberry.field(description="Unique email address of the User")

    @strawberry.field(description="The Profile of the User, if one was created.")
    async def profile(self, info: Info[GraphQLContext, None]) -> ProfileType | None:
        return profile_to_type(await resolve_relation(info.context, User, "profile", self))

    @strawberry.field(description="All Blogs created by the User.")
    async def blogs(self, info: Info[GraphQLContext, None]) -> list[BlogType] | None:
        rows = await resolve_relation(info.context, User, "blogs", self)
        return [blog_to_type(b) for b in rows]

    @strawberry.field(description="All BlogPosts written by the User.")
    async def blog_posts(self, info: Info[GraphQLContext, None]) -> list[BlogPostType] | None:
        rows = await resolve_relation(info.context, User, "blog_posts", self)
        return [blog_post_to_type(p) for p in rows]

    @strawberry.field(description="All BlogComments written by the User.")
    async def blog_comments(self, info: Info[GraphQLContext, None]) -> list[BlogCommentType] | None:
        rows = await resolve_relation(info.context, User, "blog_comments", self)
        return [blog_comment_to_type(c) for c in rows]


@strawberry.type(name="Profile", description="Public profile information of a User.")
class ProfileType:
    id: str
    created_at: datetime
    updated_at: datetime
    bio: str
    user_id: str = strawberry.field(description="The Id of the User the Profile belongs to")

    @strawberry.field(description="The User the Profile belongs to.")
    async def user(self, info: Info[GraphQLContext, None]) -> UserType | None:
        return user_to_type(await resolve_relation(info.context, Profile, "user", self))


@strawberry.type(name="Blog", description="A Blog owned by a User, grouping BlogPosts.")
class BlogType:
    id: str
    created_at: datetime
    updated_at: datetime
    name: str
    description: str
    author_id: str = strawberry.field(description="The Id of the User that owns the Blog")

    @strawberry.field(description="The User that owns the Blog.")
    async def author(self, info: Info[GraphQLContext, None]) -> UserType | None:
        return user_to_type(await resolve_relation(info.context, Blog, "author", self))

    @strawberry.field(description="All BlogPosts published in the Blog.")
    async def blog_posts(self, info: Info[GraphQLContext, None]) -> list[BlogPostType] | None:
        rows = await resolve_relation(info.context, Blog, "blog_posts", self)
        return [blog_post_to_type(p) for p in rows]


@strawberry.type(name="BlogPost", description="A post written by a User in one of the Blogs.")
class BlogPostType:
    id: str
    created_at: datetime
    updated_at: datetime
    title: str
    content: str
    published: bool = strawberry.field(description="Whether the BlogPost is shown publicly")
    author_id: str
    blog_id: str

    @strawberry.field(description="The User that wrote the BlogPost.")
    async def author(self, info: Info[GraphQLContext, None]) -> UserType | None:
        return user_to_type(await resolve_relation(info.context, BlogPost, "author", self))

    @strawberry.field(description="The Blog the BlogPost belongs to.")
    async def blog(self, info: Info[GraphQLContext, None]) -> BlogType | None:
        return blog_to_type(await resolve_relation(info.context, BlogPost, "blog", self))

    @strawberry.field(description="All BlogComments on the BlogPost, replies included.")
    async def blog_comments(self, info: Info[GraphQLContext, None]) -> list[BlogCommentType] | None:
        rows = await resolve_relation(info.context, BlogPost, "blog_comments", self)
        return [blog_comment_to_type(c) for c in rows]


@strawberry.type(name="BlogComment", description="A comment on a BlogPost, optionally replying to another comment.")
class BlogCommentType:
    id: str
    created_at: datetime
    updated_at: datetime
    content: str
    author_id: str
    blog_post_id: str
    parent_id: str | None = strawberry.field(description="The Id of the parent BlogComment. Null for direct replies to the BlogPost.")

    @strawberry.field(description="The User that wrote the BlogComment.")
    async def author(self, info: Info[GraphQLContext, None]) -> UserType | None:
        return user_to_type(await resolve_relation(info.context, BlogComment, "author", self))

    @strawberry.field(description="The BlogPost the BlogComment belongs to.")
    async def blog_post(self, info: Info[GraphQLContext, None]) -> BlogPostType | None:
        return blog_post_to_type(await resolve_relation(info.context, BlogComment, "blog_post", self))

    @strawberry.field(description="The BlogComment this one replies to, or null.")
    async def parent(self, info: Info[GraphQLContext, None]) -> BlogCommentType | None:
        return blog_comment_to_type(await resolve_relation(info.context, BlogComment, "parent", self))

    @strawberry.field(description="Direct replies to this BlogComment.")
    async def blog_comments(self, info: Info[GraphQLContext, None]) -> list[BlogCommentType] | None:
        rows = await resolve_relation(info.context, BlogComment, "blog_comments", self)
        return [blog_comment_to_type(c) for c in rows]


# ============================================================================
# Helper conversion functions
# ============================================================================


def user_to_type(user: User | None) -> UserType | None:
    if user is None:
        return None
    return UserType(
        id=user.id,
        created_at=user.created_at,
        updated_at=user.updated_at,
        username=user.username,
        email=user.email,
    )


def profile_to_type(profile: Profile | None) -> ProfileType | None:
    if profile is None:
        return None
    return ProfileType(
        id=profile.id,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
        bio=profile.bio,
        user_id=profile.user_id,
    )


def blog_to_type(blog: Blog | None) -> BlogType | None:
    if blog is None:
        return None
    return BlogType(
        id=blog.id,
        created_at=blog.created_at,
        updated_at=blog.updated_at,
        name=blog.name,
        description=blog.description,
        author_id=blog.author_id,
    )


def blog_post_to_type(post: BlogPost | None) -> BlogPostType | None:
    if post is None:
        return None
    return BlogPostType(
        id=post.id,
        created_at=post.created_at,
        updated_at=post.updated_at,
        title=post.title,
        content=post.content,
        published=post.published,
        author_id=post.author_id,
        blog_id=post.blog_id,
    )


def blog_comment_to_type(comment: BlogComment | None) -> BlogCommentType | None:
    if comment is None:
        return None
    return BlogCommentType(
        id=comment.id,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
        content=comment.content,
        author_id=comment.author_id,
        blog_post_id=comment.blog_post_id,
        parent_id=comment.parent_id,
    )
