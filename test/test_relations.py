"""
Tests for the relation registry and relational field resolution.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.exceptions import DatabaseError, InvariantViolationError
from app.graphql.context import GraphQLContext
from app.graphql.resolvers import resolve_relation, resolve_relation_for_id
from app.models import Blog, BlogComment, BlogPost, Profile, User
from app.models.relations import RELATIONS, Cardinality, Relation, get_relation
from app.services.repository import Repository
from conftest import at


def mock_context(get_by_id=None, find_many=None):
    repository = MagicMock()
    repository.get_by_id = AsyncMock(return_value=get_by_id)
    repository.find_many = AsyncMock(return_value=find_many if find_many is not None else [])
    context = MagicMock()
    context.repository.return_value = repository
    return context, repository


# ============================================================================
# Registry
# ============================================================================


class TestRelationRegistry:
    def test_every_entity_has_relations(self):
        assert set(RELATIONS) == {User, Profile, Blog, BlogPost, BlogComment}

    def test_comment_relations(self):
        assert set(RELATIONS[BlogComment]) == {"author", "blog_post", "parent", "blog_comments"}
        assert get_relation(BlogComment, "parent").local_key == "parent_id"
        assert get_relation(BlogComment, "blog_comments").remote_key == "parent_id"

    def test_user_profile_is_inverse_one(self):
        relation = get_relation(User, "profile")
        assert relation.cardinality is Cardinality.ONE_NULLABLE
        assert relation.remote_key == "user_id"
        assert not relation.many

    def test_unknown_relation(self):
        with pytest.raises(KeyError):
            get_relation(Blog, "comments")

    def test_relation_needs_exactly_one_key(self):
        with pytest.raises(ValueError):
            Relation(Blog, "broken", User, Cardinality.ONE_REQUIRED)
        with pytest.raises(ValueError):
            Relation(Blog, "broken", User, Cardinality.ONE_REQUIRED, local_key="author_id", remote_key="id")

    def test_local_key_cannot_be_many(self):
        with pytest.raises(ValueError):
            Relation(Blog, "broken", User, Cardinality.MANY, local_key="author_id")


# ============================================================================
# resolve_relation with a mocked repository
# ============================================================================


class TestResolveRelation:
    @pytest.mark.asyncio
    async def test_null_parent_id_skips_lookup(self):
        context, _ = mock_context()
        comment = SimpleNamespace(id="c1", parent_id=None)

        assert await resolve_relation(context, BlogComment, "parent", comment) is None
        context.repository.assert_not_called()

    @pytest.mark.asyncio
    async def test_local_key_uses_get_by_id(self):
        author = SimpleNamespace(id="u1")
        context, repository = mock_context(get_by_id=author)
        post = SimpleNamespace(id="p1", author_id="u1", blog_id="b1")

        assert await resolve_relation(context, BlogPost, "author", post) is author
        context.repository.assert_called_once_with(User)
        repository.get_by_id.assert_awaited_once_with("u1")

    @pytest.mark.asyncio
    async def test_local_key_to_deleted_row_is_none(self):
        context, repository = mock_context(get_by_id=None)
        post = SimpleNamespace(id="p1", author_id="gone", blog_id="b1")

        assert await resolve_relation(context, BlogPost, "author", post) is None
        repository.get_by_id.assert_awaited_once_with("gone")

    @pytest.mark.asyncio
    async def test_parent_id_to_missing_comment_is_none(self):
        context, repository = mock_context(get_by_id=None)
        comment = SimpleNamespace(id="c2", parent_id="c-missing")

        assert await resolve_relation(context, BlogComment, "parent", comment) is None
        context.repository.assert_called_once_with(BlogComment)
        repository.get_by_id.assert_awaited_once_with("c-missing")

    @pytest.mark.asyncio
    async def test_many_returns_rows(self):
        rows = [SimpleNamespace(id="c2"), SimpleNamespace(id="c3")]
        context, repository = mock_context(find_many=rows)

        result = await resolve_relation(context, BlogComment, "blog_comments", SimpleNamespace(id="c1"))
        assert result == rows
        repository.find_many.assert_awaited_once_with(parent_id="c1")

    @pytest.mark.asyncio
    async def test_many_without_rows_is_empty_list(self):
        context, _ = mock_context(find_many=[])
        assert await resolve_relation(context, User, "blogs", SimpleNamespace(id="u1")) == []

    @pytest.mark.asyncio
    async def test_inverse_one_without_rows_is_none(self):
        context, _ = mock_context(find_many=[])
        assert await resolve_relation(context, User, "profile", SimpleNamespace(id="u1")) is None

    @pytest.mark.asyncio
    async def test_inverse_one_with_several_rows_fails(self):
        rows = [SimpleNamespace(id="pr1"), SimpleNamespace(id="pr2")]
        context, _ = mock_context(find_many=rows)

        with pytest.raises(InvariantViolationError) as exc_info:
            await resolve_relation(context, User, "profile", SimpleNamespace(id="u1"))
        assert exc_info.value.details["ids"] == ["pr1", "pr2"]

    @pytest.mark.asyncio
    async def test_resolve_for_id_rejects_local_key(self):
        context, _ = mock_context()
        with pytest.raises(ValueError):
            await resolve_relation_for_id(context, Blog, "author", "b1")


# ============================================================================
# Nested resolution against the database
# ============================================================================


class TestNestedResolution:
    @pytest.mark.asyncio
    async def test_post_blog_author(self, execute, test_post):
        result = await execute('{ blogPostById(data: {id: "p1"}) { blog { name author { email } } } }')
        assert result.errors is None
        assert result.data["blogPostById"]["blog"] == {"name": "Tech", "author": {"email": "alice@example.com"}}

    @pytest.mark.asyncio
    async def test_user_relations(self, execute, test_profile, root_comment):
        result = await execute(
            """
            {
              userById(data: {id: "u1"}) {
                profile { bio }
                blogs { id }
                blogPosts { id }
                blogComments { id }
              }
            }
            """
        )
        assert result.errors is None
        assert result.data["userById"] == {
            "profile": {"bio": "Writes about databases"},
            "blogs": [{"id": "b1"}],
            "blogPosts": [{"id": "p1"}],
            "blogComments": [],
        }

    @pytest.mark.asyncio
    async def test_profile_user(self, execute, test_profile):
        result = await execute('{ profileById(data: {id: "pr1"}) { user { username } } }')
        assert result.data["profileById"]["user"] == {"username": "alice"}

    @pytest.mark.asyncio
    async def test_comment_thread(self, execute, add, root_comment):
        await add(
            BlogComment(id="c2", author_id="u1", blog_post_id="p1", content="Thanks!", parent_id="c1", created_at=at(6))
        )

        result = await execute(
            """
            {
              blogCommentById(data: {id: "c2"}) {
                parent { id parent { id } blogComments { id } }
                blogPost { title blogComments { id } }
                author { username }
              }
            }
            """
        )
        assert result.errors is None
        comment = result.data["blogCommentById"]
        assert comment["parent"] == {"id": "c1", "parent": None, "blogComments": [{"id": "c2"}]}
        assert comment["blogPost"] == {"title": "First post", "blogComments": [{"id": "c1"}, {"id": "c2"}]}
        assert comment["author"] == {"username": "alice"}

    @pytest.mark.asyncio
    async def test_blog_posts_of_blog(self, execute, test_post):
        result = await execute('{ blogById(data: {id: "b1"}) { blogPosts { title } } }')
        assert result.data["blogById"]["blogPosts"] == [{"title": "First post"}]


# ============================================================================
# A failing lookup only nulls its own field
# ============================================================================


class FailingBlogRepository(Repository):
    async def get_by_id(self, id):
        raise DatabaseError("connection reset", operation="Blog.get_by_id")


class FailingBlogContext(GraphQLContext):
    def repository(self, model):
        if model is Blog:
            return FailingBlogRepository(self.session_factory, model)
        return super().repository(model)


class TestFieldFailureIsolation:
    @pytest.mark.asyncio
    async def test_sibling_fields_still_resolve(self, execute, session_factory, test_post):
        result = await execute(
            '{ blogPostById(data: {id: "p1"}) { title blog { name } author { email } } }',
            context_value=FailingBlogContext(session_factory=session_factory),
        )

        post = result.data["blogPostById"]
        assert post["title"] == "First post"
        assert post["blog"] is None
        assert post["author"] == {"email": "alice@example.com"}

        assert len(result.errors) == 1
        assert result.errors[0].path == ["blogPostById", "blog"]
        assert result.errors[0].extensions["code"] == "DATABASE_ERROR"
