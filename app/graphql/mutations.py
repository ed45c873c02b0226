"""GraphQL Mutation resolvers."""

import strawberry
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.graphql.inputs import (
    CreateBlogCommentInput,
    CreateBlogInput,
    CreateBlogPostInput,
    CreateProfileInput,
    CreateUserInput,
    UpdateBlogCommentInput,
    UpdateBlogInput,
    UpdateBlogPostInput,
    UpdateProfileInput,
    UpdateUserInput,
    supplied_fields,
)
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
from app.schemas.blog import (
    BlogCommentCreate,
    BlogCommentUpdate,
    BlogCreate,
    BlogPostCreate,
    BlogPostUpdate,
    BlogUpdate,
)
from app.schemas.user import ProfileCreate, ProfileUpdate, UserCreate, UserUpdate
from app.services import blog_service, user_service
from app.utils.validation import require_identifier, validate_input


@strawberry.type
class Mutation:
    """
    Root GraphQL mutation type.

    Inputs are validated before any database call. Updates only touch the
    fields present in the input; an unknown id is a RESOURCE_NOT_FOUND error.
    """

    @strawberry.mutation(description="Create a new User.")
    async def create_user(self, info: Info[GraphQLContext, None], data: CreateUserInput) -> UserType:
        user_data = validate_input(UserCreate, supplied_fields(data))
        return user_to_type(await user_service.create_user(info.context.session_factory, user_data))

    @strawberry.mutation(description="Update an existing User.")
    async def update_user(self, info: Info[GraphQLContext, None], data: UpdateUserInput) -> UserType | None:
        user_id = require_identifier(data.id)
        user_update = validate_input(UserUpdate, supplied_fields(data))
        return user_to_type(await user_service.update_user(info.context.session_factory, user_id, user_update))

    @strawberry.mutation(description="Create the Profile of a User. A User has at most one Profile.")
    async def create_profile(self, info: Info[GraphQLContext, None], data: CreateProfileInput) -> ProfileType:
        profile_data = validate_input(ProfileCreate, supplied_fields(data))
        return profile_to_type(await user_service.create_profile(info.context.session_factory, profile_data))

    @strawberry.mutation(description="Update an existing Profile.")
    async def update_profile(self, info: Info[GraphQLContext, None], data: UpdateProfileInput) -> ProfileType | None:
        profile_id = require_identifier(data.id)
        profile_update = validate_input(ProfileUpdate, supplied_fields(data))
        profile = await user_service.update_profile(info.context.session_factory, profile_id, profile_update)
        return profile_to_type(profile)

    @strawberry.mutation(description="Create a new Blog as a User.")
    async def create_blog(self, info: Info[GraphQLContext, None], data: CreateBlogInput) -> BlogType:
        blog_data = validate_input(BlogCreate, supplied_fields(data))
        return blog_to_type(await blog_service.create_blog(info.context.session_factory, blog_data))

    @strawberry.mutation(description="Update an existing Blog.")
    async def update_blog(self, info: Info[GraphQLContext, None], data: UpdateBlogInput) -> BlogType | None:
        blog_id = require_identifier(data.id)
        blog_update = validate_input(BlogUpdate, supplied_fields(data))
        return blog_to_type(await blog_service.update_blog(info.context.session_factory, blog_id, blog_update))

    @strawberry.mutation(description="Create a new BlogPost in a Blog.")
    async def create_blog_post(self, info: Info[GraphQLContext, None], data: CreateBlogPostInput) -> BlogPostType:
        post_data = validate_input(BlogPostCreate, supplied_fields(data))
        return blog_post_to_type(await blog_service.create_blog_post(info.context.session_factory, post_data))

    @strawberry.mutation(description="Update an existing BlogPost.")
    async def update_blog_post(
        self, info: Info[GraphQLContext, None], data: UpdateBlogPostInput
    ) -> BlogPostType | None:
        post_id = require_identifier(data.id)
        post_update = validate_input(BlogPostUpdate, supplied_fields(data))
        post = await blog_service.update_blog_post(info.context.session_factory, post_id, post_update)
        return blog_post_to_type(post)

    @strawberry.mutation(description="Comment on a BlogPost, or reply to a BlogComment on the same BlogPost.")
    async def create_blog_comment(
        self, info: Info[GraphQLContext, None], data: CreateBlogCommentInput
    ) -> BlogCommentType:
        comment_data = validate_input(BlogCommentCreate, supplied_fields(data))
        comment = await blog_service.create_blog_comment(info.context.session_factory, comment_data)
        return blog_comment_to_type(comment)

    @strawberry.mutation(description="Update an existing BlogComment.")
    async def update_blog_comment(
        self, info: Info[GraphQLContext, None], data: UpdateBlogCommentInput
    ) -> BlogCommentType | None:
        comment_id = require_identifier(data.id)
        comment_update = validate_input(BlogCommentUpdate, supplied_fields(data))
        comment = await blog_service.update_blog_comment(info.context.session_factory, comment_id, comment_update)
        return blog_comment_to_type(comment)
