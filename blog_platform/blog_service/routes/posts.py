"""
Posts router - create, list and delete posts.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session, selectinload

from ..db import get_db
from ..dependencies import get_current_user, get_current_user_id
from ..models import Comment, Post, User
from ..schemas import MessageResponse, PostCreate, PostDetail, PostOut
from ..utils.event_logger import log_activity

router = APIRouter(tags=["posts"])
logger = logging.getLogger(__name__)


def _with_author_and_comments(query):
    return query.options(
        selectinload(Post.author),
        selectinload(Post.comments).selectinload(Comment.author),
    )


@router.post("/post", response_model=PostOut)
def create_post(
    payload: PostCreate,
    request: Request,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    user_id = current_user.id
    try:
        post = Post(title=payload.title, content=payload.content, user_id=user_id)
        db.add(post)
        db.commit()
        db.refresh(post)
    except Exception as e:
        db.rollback()
        logger.exception("Failed to create post for user_id=%s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post"
        ) from e

    log_activity("post_created", request, user_id=user_id, metadata={"post_id": post.id})
    return post


@router.get("/posts", response_model=List[PostDetail])
def list_posts(db: Session = Depends(get_db)):
    try:
        return _with_author_and_comments(db.query(Post)).order_by(Post.id).all()
    except Exception as e:
        logger.exception("Failed to list posts")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch posts"
        ) from e


@router.get("/users/{user_id}/posts", response_model=List[PostDetail])
def list_user_posts(user_id: int, db: Session = Depends(get_db)):
    try:
        user = db.get(User, user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return _with_author_and_comments(db.query(Post)).filter(Post.user_id == user_id).order_by(Post.id).all()
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to list posts for user_id=%s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch the user's posts"
        ) from e


@router.delete("/posts/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: int,
    request: Request,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        post = db.get(Post, post_id)
        if not post:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")

        if post.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden action")

        db.delete(post)
        db.commit()
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Failed to delete post_id=%s", post_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete post"
        ) from e

    log_activity("post_deleted", request, user_id=user_id, metadata={"post_id": post_id})
    return MessageResponse(message="Post deleted successfully")
