"""
Picture URL resolution.

Stored pictures are served from the thumbnails location under a name derived
from the picture id and the requested size. Missing pictures resolve to the
default image of the requested kind.
"""

from __future__ import annotations

import enum
import posixpath

from storefront.core.config import Settings


class PictureType(str, enum.Enum):
    """Kind of default picture to fall back to"""
    ENTITY = "entity"
    AVATAR = "avatar"


class PictureService:
    """Builds thumbnail URLs for picture ids."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def _thumb_url(self, file_name: str) -> str:
        return f"{self._settings.PICTURE_THUMBS_URL.rstrip('/')}/{file_name}"

    def get_default_picture_url(
        self,
        target_size: int = 0,
        default_picture_type: PictureType = PictureType.ENTITY,
    ) -> str:
        if default_picture_type == PictureType.AVATAR:
            file_name = self._settings.DEFAULT_AVATAR_FILE_NAME
        else:
            file_name = self._settings.DEFAULT_IMAGE_FILE_NAME

        if target_size > 0:
            stem, extension = posixpath.splitext(file_name)
            file_name = f"{stem}_{target_size}{extension}"
        return self._thumb_url(file_name)

    def get_picture_url(
        self,
        picture_id: int,
        target_size: int = 0,
        show_default_picture: bool = True,
        default_picture_type: PictureType = PictureType.ENTITY,
    ) -> str:
        """Return the URL of a picture, or of the default picture when ``picture_id`` is not set."""
        if not picture_id:
            if show_default_picture:
                return self.get_default_picture_url(target_size, default_picture_type)
            return ""

        if target_size > 0:
            return self._thumb_url(f"{picture_id:07d}_{target_size}.jpeg")
        return self._thumb_url(f"{picture_id:07d}.jpeg")
