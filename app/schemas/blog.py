from pydantic import BaseModel, Field, field_validator
from typing import Optional


class BlogCreate(BaseModel):
    author_id: str = Field(..., min_length=1, description="The Id of the User to create the Blog as.")
    name: str = Field(..., min_length=1, max_length=200, description="The name of the new Blog.")
    description: str = Field(..., description="The description of the new Blog.")


class BlogUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200, description="The new name of the Blog.")
    description: Optional[str] = Field(None, description="The new description of the Blog.")

    @field_validator("name", "description")
    @classmethod
    def not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class BlogPostCreate(BaseModel):
    author_id: str = Field(..., min_length=1, description="The Id of the User writing the BlogPost.")
    blog_id: str = Field(..., min_length=1, description="The Id of the Blog the BlogPost belongs to.")
    title: str = Field(..., min_length=1, max_length=300, description="The title of the BlogPost.")
    content: str = Field(..., description="The body of the BlogPost.")
    published: bool = Field(False, description="Whether the BlogPost is shown publicly.")


class BlogPostUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=300, description="The new title of the BlogPost.")
    content: Optional[str] = Field(None, description="The new body of the BlogPost.")
    published: Optional[bool] = Field(None, description="The new visibility of the BlogPost.")

    @field_validator("title", "content", "published")
    @classmethod
    def not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class BlogCommentCreate(BaseModel):
    author_id: str = Field(..., min_length=1, description="The Id of the User writing the BlogComment.")
    blog_post_id: str = Field(..., min_length=1, description="The Id of the BlogPost being commented on.")
    content: str = Field(..., min_length=1, description="The text of the BlogComment.")
    parent_id: Optional[str] = Field(None, min_length=1, description="The Id of the BlogComment being replied to.")


class BlogCommentUpdate(BaseModel):
    content: Optional[str] = Field(None, min_length=1, description="The new text of the BlogComment.")

    @field_validator("content")
    @classmethod
    def content_not_null(cls, value):
        if value is None:
            raise ValueError("content cannot be null")
        return value
