# server/api/deps.py

from fastapi import Request
from config import Settings
from core.media import MediaStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_media_store(request: Request) -> MediaStore:
    return request.app.state.media_store
