"""GraphQL Query resolvers."""

import strawberry
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.graphql.inputs import (
    BlogByIdInput,
    BlogCommentByIdInput,
    BlogCommentsByParentCommentIdInput,
    BlogCommentsByPostIdInput,
    BlogCommentsByUserIdInput,
    BlogPostByIdInput,
    BlogPostsByBlogIdInput,
    BlogPostsByUserIdInput,
    BlogsByUserIdInput,
    ProfileByIdInput,
    ProfileByUserIdInput,
    UserByEmailInput,
    UserByIdInput,
    UserByUsernameInput,
)
from app.graphql.resolvers import resolve_relation_for_id
from app.graphql.types import (
    BlogCommentType,
    BlogPostType,
    BlogType,
    ProfileType,
    UserType,
    blog_comment_to_type,
    blog_post_to_type,
    blog_to_type,
    profile_to_type,
    user_to_type,
)
from app.models.blog import Blog
from app.models.blog_comment import BlogComment
from app.models.blog_post import BlogPost
from app.models.profile import Profile
from app.models.user import User
from app.services import user_service
from app.utils.validation import require_identifier


@strawberry.type
class Query:
    """Root GraphQL query type."""

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    @strawberry.field(description="Query all Users.")
    async def all_users(self, info: Info[GraphQLContext, None]) -> list[UserType]:
        users = await info.context.repository(User).find_many()
        return [user_to_type(u) for u in users]

    @strawberry.field(description="Query for a single User by Id.")
    async def user_by_id(self, info: Info[GraphQLContext, None], data: UserByIdInput) -> UserType | None:
        user_id = require_identifier(data.id)
        return user_to_type(await info.context.repository(User).get_by_id(user_id))

    @strawberry.field(description="Query for a single User by Email. The email is required.")
    async def user_by_email(self, info: Info[GraphQLContext, None], data: UserByEmailInput | None = None) -> UserType | None:
        email = data.email if data else None
        return user_to_type(await user_service.get_user_by_email(info.context.session_factory, email))

    @strawberry.field(description="Query for a single User by Username. The username is required.")
    async def user_by_username(
        self, info: Info[GraphQLContext, None], data: UserByUsernameInput | None = None
    ) -> UserType | None:
        username = data.username if data else None
        return user_to_type(await user_service.get_user_by_username(info.context.session_factory, username))

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------

    @strawberry.field(description="Query all Profiles.")
    async def all_profiles(self, info: Info[GraphQLContext, None]) -> list[ProfileType]:
        profiles = await info.context.repository(Profile).find_many()
        return [profile_to_type(p) for p in profiles]

    @strawberry.field(description="Query for a single Profile by Id.")
    async def profile_by_id(self, info: Info[GraphQLContext, None], data: ProfileByIdInput) -> ProfileType | None:
        profile_id = require_identifier(data.id)
        return profile_to_type(await info.context.repository(Profile).get_by_id(profile_id))

    @strawberry.field(description="Query for the Profile of a specific User.")
    async def profile_by_user_id(
        self, info: Info[GraphQLContext, None], data: ProfileByUserIdInput
    ) -> ProfileType | None:
        user_id = require_identifier(data.id)
        # Same lookup as User.profile, so several matches fail the same way
        return profile_to_type(await resolve_relation_for_id(info.context, User, "profile", user_id))

    # ------------------------------------------------------------------
    # Blogs
    # ------------------------------------------------------------------

    @strawberry.field(description="Query all Blogs.")
    async def all_blogs(self, info: Info[GraphQLContext, None]) -> list[BlogType]:
        blogs = await info.context.repository(Blog).find_many()
        return [blog_to_type(b) for b in blogs]

    @strawberry.field(description="Query for a single Blog by Id.")
    async def blog_by_id(self, info: Info[GraphQLContext, None], data: BlogByIdInput) -> BlogType | None:
        blog_id = require_identifier(data.id)
        return blog_to_type(await info.context.repository(Blog).get_by_id(blog_id))

    @strawberry.field(description="Query for all Blogs that belong to a specific User.")
    async def blogs_by_user_id(self, info: Info[GraphQLContext, None], data: BlogsByUserIdInput) -> list[BlogType]:
        user_id = require_identifier(data.id)
        blogs = await info.context.repository(Blog).find_many(author_id=user_id)
        return [blog_to_type(b) for b in blogs]

    # ------------------------------------------------------------------
    # BlogPosts
    # ------------------------------------------------------------------

    @strawberry.field(description="Query all BlogPosts.")
    async def all_blog_posts(self, info: Info[GraphQLContext, None]) -> list[BlogPostType]:
        posts = await info.context.repository(BlogPost).find_many()
        return [blog_post_to_type(p) for p in posts]

    @strawberry.field(description="Query for a single BlogPost by Id.")
    async def blog_post_by_id(self, info: Info[GraphQLContext, None], data: BlogPostByIdInput) -> BlogPostType | None:
        post_id = require_identifier(data.id)
        return blog_post_to_type(await info.context.repository(BlogPost).get_by_id(post_id))

    @strawberry.field(description="Query for all BlogPosts written by a specific User.")
    async def blog_posts_by_user_id(
        self, info: Info[GraphQLContext, None], data: BlogPostsByUserIdInput
    ) -> list[BlogPostType]:
        user_id = require_identifier(data.id)
        posts = await info.context.repository(BlogPost).find_many(author_id=user_id)
        return [blog_post_to_type(p) for p in posts]

    @strawberry.field(description="Query for all BlogPosts that belong to a specific Blog.")
    async def blog_posts_by_blog_id(
        self, info: Info[GraphQLContext, None], data: BlogPostsByBlogIdInput
    ) -> list[BlogPostType]:
        blog_id = require_identifier(data.id)
        posts = await info.context.repository(BlogPost).find_many(blog_id=blog_id)
        return [blog_post_to_type(p) for p in posts]

    # ------------------------------------------------------------------
    # BlogComments
    # ------------------------------------------------------------------

    @strawberry.field(description="Query all BlogComments.")
    async def all_blog_comments(self, info: Info[GraphQLContext, None]) -> list[BlogCommentType]:
        comments = await info.context.repository(BlogComment).find_many()
        return [blog_comment_to_type(c) for c in comments]

    @strawberry.field(description="Query for a single BlogComment by Id.")
    async def blog_comment_by_id(
        self, info: Info[GraphQLContext, None], data: BlogCommentByIdInput
    ) -> BlogCommentType | None:
        comment_id = require_identifier(data.id)
        return blog_comment_to_type(await info.context.repository(BlogComment).get_by_id(comment_id))

    @strawberry.field(description="Query for all BlogComments written by a specific User.")
    async def blog_comments_by_user_id(
        self, info: Info[GraphQLContext, None], data: BlogCommentsByUserIdInput
    ) -> list[BlogCommentType]:
        user_id = require_identifier(data.id)
        comments = await info.context.repository(BlogComment).find_many(author_id=user_id)
        return [blog_comment_to_type(c) for c in comments]

    @strawberry.field(description="Query for all BlogComments that belong to a specific BlogPost.")
    async def blog_comments_by_post_id(
        self, info: Info[GraphQLContext, None], data: BlogCommentsByPostIdInput
    ) -> list[BlogCommentType]:
        post_id = require_identifier(data.id)
        comments = await info.context.repository(BlogComment).find_many(blog_post_id=post_id)
        return [blog_comment_to_type(c) for c in comments]

    @strawberry.field(description="Query for all BlogComments replying to a specific parent BlogComment.")
    async def blog_comments_by_parent_comment_id(
        self, info: Info[GraphQLContext, None], data: BlogCommentsByParentCommentIdInput
    ) -> list[BlogCommentType]:
        parent_id = require_identifier(data.id)
        comments = await info.context.repository(BlogComment).find_many(parent_id=parent_id)
        return [blog_comment_to_type(c) for c in comments]
