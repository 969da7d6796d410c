# server/api/user.py

from typing import Optional
from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from sqlalchemy.orm import Session
from api.auth import clear_session_cookie, get_current_user, get_current_user_id
from api.deps import get_app_settings, get_media_store
from config import Settings
from core import accounts, engagement, graph
from core.media import USER_FOLDER, MediaStore
from core.projections import UserPublic, user_public
from database import get_db
from models.user import User


router = APIRouter(prefix="/user", tags=["user"])


# -------------------------------
# Profile Endpoints
# -------------------------------

@router.get("/getUser", response_model=UserPublic)
def get_user(current_user: User = Depends(get_current_user)):
    return user_public(current_user)


@router.get("/getAllUser", response_model=list[UserPublic])
def get_all_users(db: Session = Depends(get_db)):
    return [user_public(user) for user in accounts.list_users(db)]


@router.api_route("/update", methods=["POST", "PUT"])
def update_user(
    bio: Optional[str] = Form(None),
    work_at: Optional[str] = Form(None, alias="workAt"),
    address: Optional[str] = Form(None),
    relationship_status: Optional[str] = Form(None, alias="relationshipStatus"),
    profile_image: Optional[UploadFile] = File(None, alias="profileImage"),
    cover_image: Optional[UploadFile] = File(None, alias="coverImage"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    media: MediaStore = Depends(get_media_store),
):
    """
    Updates profile fields and, when uploaded, the profile and cover images.
    Fields that are not sent keep their current value.
    """
    accounts.validate_profile(bio, relationship_status)
    media.check(profile_image)
    media.check(cover_image)

    user = accounts.update_profile(
        db,
        current_user,
        bio=bio,
        work_at=work_at,
        address=address,
        relationship_status=relationship_status,
        profile_image=media.save_optional(profile_image, USER_FOLDER),
        cover_image=media.save_optional(cover_image, USER_FOLDER),
    )
    return {"message": "User updated successfully.", "data": user_public(user)}


@router.delete("/delete")
def delete_user(
    response: Response,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    accounts.delete_user(db, current_user)
    clear_session_cookie(response, settings)
    return {"message": "User deleted successfully."}


# -------------------------------
# Social Endpoints
# -------------------------------

@router.post("/following/{target_id}")
def toggle_following(
    target_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    following = graph.toggle_follow(db, user_id, target_id)
    message = "User followed successfully." if following else "User unfollowed successfully."
    return {"message": message, "following": following}


@router.post("/likePost/{post_id}")
def like_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    user = engagement.like_as_user_record(db, post_id, user_id)
    return {"message": "Post added to your liked posts.", "data": user_public(user)}
