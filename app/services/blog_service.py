"""
Blog Service

Create and update Blogs, BlogPosts and BlogComments. Update payloads are
exactly the fields the caller supplied, merged onto the stored row.
"""

import logging

from app.exceptions import ValidationError
from app.models.blog import Blog
from app.models.blog_comment import BlogComment
from app.models.blog_post import BlogPost
from app.schemas.blog import (
    BlogCommentCreate,
    BlogCommentUpdate,
    BlogCreate,
    BlogPostCreate,
    BlogPostUpdate,
    BlogUpdate,
)
from app.services.repository import Repository, SessionFactory

logger = logging.getLogger(__name__)


async def create_blog(session_factory: SessionFactory, blog_data: BlogCreate) -> Blog:
    blog = await Repository(session_factory, Blog).create(**blog_data.model_dump())
    logger.info(f"Blog created: id={blog.id}, author={blog.author_id}")
    return blog


async def update_blog(session_factory: SessionFactory, blog_id: str, blog_update: BlogUpdate) -> Blog:
    changes = blog_update.model_dump(exclude_unset=True)
    blog = await Repository(session_factory, Blog).update(blog_id, **changes)
    logger.info(f"Blog updated: id={blog.id}, fields={sorted(changes)}")
    return blog


async def create_blog_post(session_factory: SessionFactory, post_data: BlogPostCreate) -> BlogPost:
    post = await Repository(session_factory, BlogPost).create(**post_data.model_dump())
    logger.info(f"BlogPost created: id={post.id}, blog={post.blog_id}, author={post.author_id}")
    return post


async def update_blog_post(session_factory: SessionFactory, post_id: str, post_update: BlogPostUpdate) -> BlogPost:
    changes = post_update.model_dump(exclude_unset=True)
    post = await Repository(session_factory, BlogPost).update(post_id, **changes)
    logger.info(f"BlogPost updated: id={post.id}, fields={sorted(changes)}")
    return post


async def create_blog_comment(session_factory: SessionFactory, comment_data: BlogCommentCreate) -> BlogComment:
    """
    Create a comment on a post, optionally as a reply.

    A reply's parent must exist and belong to the same BlogPost.
    """
    comments = Repository(session_factory, BlogComment)

    if comment_data.parent_id is not None:
        parent = await comments.get_by_id(comment_data.parent_id)
        if parent is None:
            raise ValidationError(
                f"Parent comment with id '{comment_data.parent_id}' not found", field="parentId"
            )
        if parent.blog_post_id != comment_data.blog_post_id:
            raise ValidationError("Parent comment belongs to a different blog post", field="parentId")

    comment = await comments.create(**comment_data.model_dump())
    logger.info(f"BlogComment created: id={comment.id}, post={comment.blog_post_id}, parent={comment.parent_id}")
    return comment


async def update_blog_comment(
    session_factory: SessionFactory, comment_id: str, comment_update: BlogCommentUpdate
) -> BlogComment:
    changes = comment_update.model_dump(exclude_unset=True)
    comment = await Repository(session_factory, BlogComment).update(comment_id, **changes)
    logger.info(f"BlogComment updated: id={comment.id}")
    return comment
