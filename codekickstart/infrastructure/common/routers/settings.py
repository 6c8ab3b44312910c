from fastapi import APIRouter

from codekickstart.feature_flags import get_feature_flags
from codekickstart.infrastructure.common.schemas import AppSettingsResponse

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
async def get_app_settings() -> AppSettingsResponse:
    """
    Get public application settings.

    Lets clients hide the tutor or the sign-up form when they are switched off.
    No authentication required.
    """
    return AppSettingsResponse(feature_flags=get_feature_flags())
