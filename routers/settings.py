# routers/settings.py
from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from schemas.settings import SettingsOut, SettingsUpdate
from settings_store import apply_update, load_configuration

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=SettingsOut)
def get_settings():
    return SettingsOut.from_configuration(load_configuration())


@router.put("", response_model=SettingsOut)
def update_settings(req: SettingsUpdate):
    try:
        config = apply_update(req.model_dump(exclude_unset=True))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=f"invalid settings: {e.error_count()} error(s)")
    return SettingsOut.from_configuration(config)
