# server/api/post.py

from typing import Optional
from pydantic import BaseModel
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session
from api.auth import get_current_user, get_current_user_id
from api.deps import get_media_store
from core import engagement, posts
from core.exceptions import ValidationError
from core.media import POST_FOLDER, MediaStore
from core.projections import comment_public, post_public
from database import get_db
from models.user import User


router = APIRouter(prefix="/post", tags=["post"])


class CommentRequest(BaseModel):
    text: Optional[str] = None


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_post(
    title: Optional[str] = Form(None),
    post_image: Optional[UploadFile] = File(None, alias="postImage"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    media: MediaStore = Depends(get_media_store),
):
    if not (title or "").strip() or post_image is None or not post_image.filename:
        raise ValidationError("Title and image are required.")

    image_ref = media.save(post_image, POST_FOLDER)
    post = posts.create_post(db, current_user.id, title, image_ref)
    return {"success": True, "message": "Post created successfully.", "data": post_public(post)}


@router.put("/update/{post_id}")
def update_post(
    post_id: str,
    title: Optional[str] = Form(None),
    post_image: Optional[UploadFile] = File(None, alias="postImage"),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    media: MediaStore = Depends(get_media_store),
):
    posts.get_owned_post(db, post_id, user_id)
    image_ref = media.save_optional(post_image, POST_FOLDER)
    post = posts.update_post(db, post_id, user_id, title=title, image_ref=image_ref)
    return {"success": True, "message": "Post updated successfully.", "data": post_public(post)}


@router.delete("/delete/{post_id}")
def delete_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    posts.delete_post(db, post_id, user_id)
    return {"success": True, "message": "Post deleted successfully."}


@router.post("/comment/{post_id}", status_code=status.HTTP_201_CREATED)
def comment_post(
    post_id: str,
    payload: CommentRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    comment = engagement.add_comment(db, post_id, current_user.id, payload.text)
    return {"success": True, "message": "Comment added successfully.", "comment": comment_public(comment)}


@router.put("/like/{post_id}")
def like_post(
    post_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    post, liked = engagement.toggle_like(db, post_id, current_user.id)
    message = "Post liked successfully." if liked else "Post unliked successfully."
    return {"success": True, "message": message, "liked": liked, "data": post_public(post)}


@router.get("/all", dependencies=[Depends(get_current_user_id)])
def get_all_posts(db: Session = Depends(get_db)):
    data = [post_public(post) for post in posts.list_posts(db)]
    return {"success": True, "count": len(data), "data": data}
