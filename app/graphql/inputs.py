"""Strawberry input types for the blog queries and mutations."""

import strawberry


# ============================================================================
# Query inputs
# ============================================================================


@strawberry.input(description="Input arguments for querying Users by Id")
class UserByIdInput:
    id: str


@strawberry.input(description="Input arguments for querying Users by Email")
class UserByEmailInput:
    email: str | None = None


@strawberry.input(description="Input arguments for querying Users by Username")
class UserByUsernameInput:
    username: str | None = None


@strawberry.input(description="Input arguments for querying Profiles by Id")
class ProfileByIdInput:
    id: str


@strawberry.input(description="Input arguments for querying the Profile of a User")
class ProfileByUserIdInput:
    id: str = strawberry.field(description="The Id of the User that the Profile belongs to")


@strawberry.input(description="Input arguments for querying Blogs by Id")
class BlogByIdInput:
    id: str


@strawberry.input(description="Input arguments for querying Blogs by User Id")
class BlogsByUserIdInput:
    id: str = strawberry.field(description="The Id of the User that the Blogs belong to")


@strawberry.input(description="Input arguments for querying BlogPosts by Id")
class BlogPostByIdInput:
    id: str


@strawberry.input(description="Input arguments for querying BlogPosts by User Id")
class BlogPostsByUserIdInput:
    id: str = strawberry.field(description="The Id of the User that wrote the BlogPosts")


@strawberry.input(description="Input arguments for querying all BlogPosts of a given Blog")
class BlogPostsByBlogIdInput:
    id: str = strawberry.field(description="The Id of the Blog that the BlogPosts belong to")


@strawberry.input(description="Input arguments for querying BlogComments by Id")
class BlogCommentByIdInput:
    id: str


@strawberry.input(description="Input arguments for querying BlogComments by User Id")
class BlogCommentsByUserIdInput:
    id: str = strawberry.field(description="The Id of the User that wrote the BlogComments")


@strawberry.input(description="Input arguments for querying the BlogComments of a specific BlogPost")
class BlogCommentsByPostIdInput:
    id: str = strawberry.field(description="The Id of the BlogPost that the BlogComments belong to")


@strawberry.input(description="Input arguments for querying the replies to a specific BlogComment")
class BlogCommentsByParentCommentIdInput:
    id: str = strawberry.field(description="The Id of the parent BlogComment")


# ============================================================================
# Mutation inputs
# ============================================================================


@strawberry.input(description="Create a new User")
class CreateUserInput:
    email: str
    username: str | None = None


@strawberry.input(description="Update an existing User. Omitted fields are left unchanged.")
class UpdateUserInput:
    id: str
    email: str | None = strawberry.UNSET
    username: str | None = strawberry.UNSET


@strawberry.input(description="Create the Profile of a User")
class CreateProfileInput:
    user_id: str
    bio: str


@strawberry.input(description="Update an existing Profile. Omitted fields are left unchanged.")
class UpdateProfileInput:
    id: str
    bio: str | None = strawberry.UNSET


@strawberry.input(description="Create a new Blog as a User")
class CreateBlogInput:
    author_id: str = strawberry.field(description="The Id of the User to create the Blog as")
    name: str
    description: str


@strawberry.input(description="Update an existing Blog's information. Omitted fields are left unchanged.")
class UpdateBlogInput:
    id: str = strawberry.field(description="The Id of the Blog to update")
    name: str | None = strawberry.UNSET
    description: str | None = strawberry.UNSET


@strawberry.input(description="Create a new BlogPost in a Blog")
class CreateBlogPostInput:
    author_id: str
    blog_id: str
    title: str
    content: str
    published: bool = False


@strawberry.input(description="Update an existing BlogPost. Omitted fields are left unchanged.")
class UpdateBlogPostInput:
    id: str
    title: str | None = strawberry.UNSET
    content: str | None = strawberry.UNSET
    published: bool | None = strawberry.UNSET


@strawberry.input(description="Comment on a BlogPost, optionally replying to another BlogComment")
class CreateBlogCommentInput:
    author_id: str
    blog_post_id: str
    content: str
    parent_id: str | None = None


@strawberry.input(description="Update an existing BlogComment. Omitted fields are left unchanged.")
class UpdateBlogCommentInput:
    id: str
    content: str | None = strawberry.UNSET


def supplied_fields(data: object, exclude: tuple[str, ...] = ("id",)) -> dict:
    """Fields explicitly supplied on an input; UNSET ones are dropped."""
    return {
        name: value
        for name, value in vars(data).items()
        if value is not strawberry.UNSET and name not in exclude
    }
