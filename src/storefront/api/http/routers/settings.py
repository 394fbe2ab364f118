"""Storefront settings router."""

import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile

from src.storefront.api.http.deps import (
    get_logo_upload_policy,
    get_settings_registry,
    read_upload,
    require_admin,
)
from src.storefront.core.exceptions import ValidationError
from src.storefront.core.services import IncomingFile, SettingsRegistry, UploadPolicy
from src.storefront.entities.user import AdminIdentity

router = APIRouter(prefix="/settings", tags=["settings"])

LOGO_FIELD = "logo"


def _as_setting_value(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value)


async def _read_settings_body(
    request: Request, logo_policy: UploadPolicy
) -> tuple[dict[str, str | None], IncomingFile | None]:
    """Accept either a JSON object or a (multipart) form with an optional logo."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except json.JSONDecodeError as e:
            raise ValidationError("Request body is not valid JSON") from e
        if not isinstance(payload, dict):
            raise ValidationError("Settings must be a JSON object")
        return {str(k): _as_setting_value(v) for k, v in payload.items()}, None

    values: dict[str, str | None] = {}
    logo: IncomingFile | None = None
    form = await request.form()
    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            if key == LOGO_FIELD and value.filename:
                logo = await read_upload(value, logo_policy)
            continue
        values[key] = value
    return values, logo


@router.get("")
def get_settings(
    registry: SettingsRegistry = Depends(get_settings_registry),
) -> dict[str, str | None]:
    """All settings as a flat object."""
    return registry.get_all()


@router.get("/{key}")
def get_setting(
    key: str,
    registry: SettingsRegistry = Depends(get_settings_registry),
) -> dict[str, str | None]:
    return {"key": key, "value": registry.get(key)}


@router.put("")
async def update_settings(
    request: Request,
    _: AdminIdentity = Depends(require_admin),
    logo_policy: UploadPolicy = Depends(get_logo_upload_policy),
    registry: SettingsRegistry = Depends(get_settings_registry),
) -> dict[str, str]:
    values, logo = await _read_settings_body(request, logo_policy)
    await registry.upsert(values, logo)
    return {"message": "Settings updated successfully"}
