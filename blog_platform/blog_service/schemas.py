from pydantic import BaseModel, ConfigDict, Field

from datetime import datetime
from typing import List, Optional


# Bodies are permissive on purpose: missing fields are reported as 400 by the routes
class UserRegister(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None
    password: Optional[str] = None
    verified_password: Optional[str] = Field(default=None, alias="verifiedPassword")
    username: Optional[str] = None


class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class RegistrationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    user_id: int = Field(alias="userId")


class MessageResponse(BaseModel):
    message: str


class UserOut(BaseModel):
    id: int
    email: str
    username: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AuthorOut(BaseModel):
    id: int
    email: str
    username: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


# Posts
class PostCreate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


class PostOut(BaseModel):
    id: int
    title: Optional[str] = None
    content: Optional[str] = None
    user_id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# Comments
class CommentCreate(BaseModel):
    content: Optional[str] = None


class CommentOut(BaseModel):
    id: int
    content: Optional[str] = None
    user_id: int
    post_id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommentWithAuthor(CommentOut):
    author: Optional[AuthorOut] = None


class PostDetail(PostOut):
    author: Optional[AuthorOut] = None
    comments: List[CommentWithAuthor] = []
