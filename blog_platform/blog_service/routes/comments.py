"""
Comments router - comment on a post and delete your own comments.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from ..db import get_db
from ..dependencies import get_current_user, get_current_user_id
from ..models import Comment, Post, User
from ..schemas import CommentCreate, CommentOut, MessageResponse
from ..utils.event_logger import log_activity

router = APIRouter(tags=["comments"])
logger = logging.getLogger(__name__)


@router.post("/posts/{post_id}/comments", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
def create_comment(
    post_id: int,
    payload: CommentCreate,
    request: Request,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    user_id = current_user.id
    try:
        if not db.get(Post, post_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")

        comment = Comment(content=payload.content, post_id=post_id, user_id=user_id)
        db.add(comment)
        db.commit()
        db.refresh(comment)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Failed to create comment on post_id=%s", post_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment"
        ) from e

    log_activity("comment_created", request, user_id=user_id, metadata={"post_id": post_id, "comment_id": comment.id})
    return comment


@router.delete("/comments/{comment_id}", response_model=MessageResponse)
def delete_comment(
    comment_id: int,
    request: Request,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        comment = db.get(Comment, comment_id)
        if not comment:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found")

        if comment.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden action")

        db.delete(comment)
        db.commit()
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Failed to delete comment_id=%s", comment_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment"
        ) from e

    log_activity("comment_deleted", request, user_id=user_id, metadata={"comment_id": comment_id})
    return MessageResponse(message="Comment deleted successfully")
