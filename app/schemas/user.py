from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional


class UserCreate(BaseModel):
    email: EmailStr = Field(..., description="A valid email address.")
    username: Optional[str] = Field(None, min_length=3, max_length=50, description="Username must be between 3 and 50 characters.")


class UserUpdate(BaseModel):
    email: Optional[EmailStr] = Field(None, description="A valid email address.")
    username: Optional[str] = Field(None, min_length=3, max_length=50, description="Username must be between 3 and 50 characters.")

    @field_validator("email")
    @classmethod
    def email_not_null(cls, value):
        # Explicit null would clear a required column
        if value is None:
            raise ValueError("email cannot be null")
        return value


class ProfileCreate(BaseModel):
    user_id: str = Field(..., min_length=1, description="The Id of the User the Profile belongs to.")
    bio: str = Field(..., max_length=2000, description="Human readable bio of the User.")


class ProfileUpdate(BaseModel):
    bio: Optional[str] = Field(None, max_length=2000, description="The new bio of the User.")

    @field_validator("bio")
    @classmethod
    def bio_not_null(cls, value):
        if value is None:
            raise ValueError("bio cannot be null")
        return value
