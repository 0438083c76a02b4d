from fastapi import APIRouter

from rethinking_econ.api.crud import build_crud_router
from rethinking_econ.schemas.media import (
    MediaAppearanceCreate,
    MediaAppearanceRead,
    MediaAppearanceUpdate,
    PressReleaseCreate,
    PressReleaseRead,
    PressReleaseUpdate,
)
from rethinking_econ.services import media as media_service

router = APIRouter()

router.include_router(
    build_crud_router(
        media_service.press_releases,
        read_schema=PressReleaseRead,
        create_schema=PressReleaseCreate,
        update_schema=PressReleaseUpdate,
        label="Press release",
    ),
    prefix="/press-releases",
)
router.include_router(
    build_crud_router(
        media_service.appearances,
        read_schema=MediaAppearanceRead,
        create_schema=MediaAppearanceCreate,
        update_schema=MediaAppearanceUpdate,
        label="Media appearance",
    ),
    prefix="/appearances",
)
