"""
Tests for the root queries: list-all, by-id and by-related-id lookups.
"""

import pytest

from app.models import BlogComment, BlogPost
from conftest import at


class TestUserQueries:
    @pytest.mark.asyncio
    async def test_all_users(self, execute, test_user, other_user):
        result = await execute("{ allUsers { id email } }")
        assert result.errors is None
        assert [u["id"] for u in result.data["allUsers"]] == ["u1", "u2"]

    @pytest.mark.asyncio
    async def test_user_by_id(self, execute, test_user):
        result = await execute('{ userById(data: {id: "u1"}) { id username email } }')
        assert result.errors is None
        assert result.data["userById"] == {"id": "u1", "username": "alice", "email": "alice@example.com"}

    @pytest.mark.asyncio
    async def test_user_by_id_miss_returns_null(self, execute, test_user):
        result = await execute('{ userById(data: {id: "nobody"}) { id } }')
        assert result.errors is None
        assert result.data["userById"] is None

    @pytest.mark.asyncio
    async def test_user_by_email(self, execute, test_user):
        result = await execute('{ userByEmail(data: {email: "alice@example.com"}) { id } }')
        assert result.errors is None
        assert result.data["userByEmail"] == {"id": "u1"}

    @pytest.mark.asyncio
    async def test_user_by_email_unknown_returns_null(self, execute, test_user):
        result = await execute('{ userByEmail(data: {email: "ghost@example.com"}) { id } }')
        assert result.errors is None
        assert result.data["userByEmail"] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "query",
        [
            "{ userByEmail { id } }",
            "{ userByEmail(data: {}) { id } }",
            "{ userByEmail(data: {email: null}) { id } }",
            "{ userByUsername(data: {username: null}) { id } }",
        ],
    )
    async def test_missing_optional_filter_is_validation_error(self, execute, test_user, query):
        result = await execute(query)
        assert result.errors is not None
        assert result.errors[0].extensions["code"] == "VALIDATION_FAILED"

    @pytest.mark.asyncio
    async def test_user_by_username(self, execute, test_user):
        result = await execute('{ userByUsername(data: {username: "alice"}) { email } }')
        assert result.data["userByUsername"] == {"email": "alice@example.com"}

    @pytest.mark.asyncio
    async def test_blank_identifier_is_rejected(self, execute, test_user):
        result = await execute('{ userById(data: {id: "  "}) { id } }')
        assert result.errors is not None
        assert result.errors[0].extensions["code"] == "VALIDATION_FAILED"


class TestProfileQueries:
    @pytest.mark.asyncio
    async def test_profile_by_user_id(self, execute, test_profile):
        result = await execute('{ profileByUserId(data: {id: "u1"}) { id bio } }')
        assert result.errors is None
        assert result.data["profileByUserId"] == {"id": "pr1", "bio": "Writes about databases"}

    @pytest.mark.asyncio
    async def test_profile_by_user_id_without_profile(self, execute, other_user):
        result = await execute('{ profileByUserId(data: {id: "u2"}) { id } }')
        assert result.errors is None
        assert result.data["profileByUserId"] is None

    @pytest.mark.asyncio
    async def test_all_profiles_and_by_id(self, execute, test_profile):
        result = await execute('{ allProfiles { id } profileById(data: {id: "pr1"}) { userId } }')
        assert result.errors is None
        assert result.data["allProfiles"] == [{"id": "pr1"}]
        assert result.data["profileById"] == {"userId": "u1"}


class TestBlogQueries:
    @pytest.mark.asyncio
    async def test_blogs_by_user_id_includes_blog(self, execute, test_blog, other_user):
        result = await execute('{ blogsByUserId(data: {id: "u1"}) { id authorId } }')
        assert result.errors is None
        assert result.data["blogsByUserId"] == [{"id": "b1", "authorId": "u1"}]

    @pytest.mark.asyncio
    async def test_blogs_by_user_id_no_match_is_empty_list(self, execute, test_blog, other_user):
        result = await execute('{ blogsByUserId(data: {id: "u2"}) { id } }')
        assert result.errors is None
        assert result.data["blogsByUserId"] == []

    @pytest.mark.asyncio
    async def test_blog_by_id_nonexistent(self, execute, test_blog):
        result = await execute('{ blogById(data: {id: "nonexistent"}) { id } }')
        assert result.errors is None
        assert result.data["blogById"] is None

    @pytest.mark.asyncio
    async def test_all_blogs(self, execute, test_blog):
        result = await execute("{ allBlogs { name description } }")
        assert result.data["allBlogs"] == [{"name": "Tech", "description": "stuff"}]


class TestBlogPostQueries:
    @pytest.mark.asyncio
    async def test_blog_posts_by_blog_id_filters_on_blog(self, execute, add, test_post, other_user):
        # Same author, different blog: must not show up under b1
        from app.models import Blog

        await add(Blog(id="b2", author_id="u1", name="Other", description="", created_at=at(10)))
        await add(
            BlogPost(id="p2", author_id="u1", blog_id="b2", title="Elsewhere", content="", created_at=at(11))
        )

        result = await execute('{ blogPostsByBlogId(data: {id: "b1"}) { id } }')
        assert result.errors is None
        assert result.data["blogPostsByBlogId"] == [{"id": "p1"}]

        result = await execute('{ blogPostsByUserId(data: {id: "u1"}) { id } }')
        assert [p["id"] for p in result.data["blogPostsByUserId"]] == ["p1", "p2"]

    @pytest.mark.asyncio
    async def test_blog_post_by_id(self, execute, test_post):
        result = await execute('{ blogPostById(data: {id: "p1"}) { title content published blogId } }')
        assert result.data["blogPostById"] == {
            "title": "First post",
            "content": "Hello world",
            "published": True,
            "blogId": "b1",
        }

    @pytest.mark.asyncio
    async def test_all_blog_posts_empty(self, execute):
        result = await execute("{ allBlogPosts { id } }")
        assert result.errors is None
        assert result.data["allBlogPosts"] == []


class TestBlogCommentQueries:
    @pytest.mark.asyncio
    async def test_comments_by_post_user_and_parent(self, execute, add, root_comment):
        await add(
            BlogComment(
                id="c2", author_id="u1", blog_post_id="p1", content="Thanks!", parent_id="c1", created_at=at(6)
            )
        )

        result = await execute('{ blogCommentsByPostId(data: {id: "p1"}) { id } }')
        assert [c["id"] for c in result.data["blogCommentsByPostId"]] == ["c1", "c2"]

        result = await execute('{ blogCommentsByUserId(data: {id: "u1"}) { id } }')
        assert result.data["blogCommentsByUserId"] == [{"id": "c2"}]

        result = await execute('{ blogCommentsByParentCommentId(data: {id: "c1"}) { id parentId } }')
        assert result.data["blogCommentsByParentCommentId"] == [{"id": "c2", "parentId": "c1"}]

    @pytest.mark.asyncio
    async def test_blog_comment_by_id_and_all(self, execute, root_comment):
        result = await execute('{ blogCommentById(data: {id: "c1"}) { content parentId } allBlogComments { id } }')
        assert result.errors is None
        assert result.data["blogCommentById"] == {"content": "Nice post", "parentId": None}
        assert result.data["allBlogComments"] == [{"id": "c1"}]
