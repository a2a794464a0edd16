"""``/v2/respondents`` routes.

Every route sits behind its own feature flag and answers 405 while the flag
is off.  Requests that pass validation get 501: respondent storage is not
part of this service yet.
"""
from __future__ import annotations

import uuid
from typing import Any

from fastapi import APIRouter, Request

from ras_party.adapters.fastapi import require_feature
from ras_party.api.models import ErrorBody
from ras_party.kernel.errors import NotImplementedYetError, ValidationError

GET_RESPONDENTS = "party.api.get.respondents"
POST_RESPONDENTS = "party.api.post.respondents"
GET_RESPONDENT_BY_ID = "party.api.get.respondents.id"
PATCH_RESPONDENT_BY_ID = "party.api.patch.respondents.id"
DELETE_RESPONDENT_BY_ID = "party.api.delete.respondents.id"

SEARCH_PARAMS = frozenset(
    {
        "firstName",
        "lastName",
        "emailAddress",
        "telephone",
        "status",
        "businessId",
        "surveyId",
        "offset",
        "limit",
    }
)
REQUIRED_ATTRIBUTES = ("emailAddress", "firstName", "lastName", "telephone")

_ERRORS: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorBody, "description": "Validation error"},
    405: {"description": "Feature disabled"},
    501: {"model": ErrorBody, "description": "Not implemented"},
}

router = APIRouter(prefix="/v2/respondents", tags=["respondents"], responses=_ERRORS)


@router.get("", dependencies=[require_feature(GET_RESPONDENTS)])
def get_respondents(request: Request) -> None:
    params = request.query_params
    if not params:
        raise ValidationError("No query parameters provided for search")
    for key in params.keys():
        if key not in SEARCH_PARAMS:
            raise ValidationError(f"Invalid query parameter {key}")
    raise NotImplementedYetError("Respondent search is not implemented")


@router.post("", dependencies=[require_feature(POST_RESPONDENTS)])
async def post_respondents(request: Request) -> None:
    body = await _json_body(request)
    data = body.get("data") if isinstance(body.get("data"), dict) else {}
    attributes = data.get("attributes") if isinstance(data.get("attributes"), dict) else {}

    missing = [name for name in REQUIRED_ATTRIBUTES if not attributes.get(name)]
    if not body.get("enrolmentCodes"):
        missing.append("enrolmentCodes")
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            errors=[{"field": name, "message": "required"} for name in missing],
        )
    raise NotImplementedYetError("Respondent creation is not implemented")


@router.get("/{respondent_id}", dependencies=[require_feature(GET_RESPONDENT_BY_ID)])
def get_respondent_by_id(respondent_id: str) -> None:
    _parse_id(respondent_id)
    raise NotImplementedYetError("Respondent lookup is not implemented")


@router.patch("/{respondent_id}", dependencies=[require_feature(PATCH_RESPONDENT_BY_ID)])
async def patch_respondent_by_id(respondent_id: str, request: Request) -> None:
    parsed = _parse_id(respondent_id)
    body = await _json_body(request)
    data = body.get("data") if isinstance(body.get("data"), dict) else {}
    attributes = data.get("attributes") if isinstance(data.get("attributes"), dict) else {}
    if attributes.get("id") and attributes["id"] != str(parsed):
        raise ValidationError("ID must not be changed")
    raise NotImplementedYetError("Respondent update is not implemented")


@router.delete("/{respondent_id}", dependencies=[require_feature(DELETE_RESPONDENT_BY_ID)])
def delete_respondent_by_id(respondent_id: str) -> None:
    _parse_id(respondent_id)
    raise NotImplementedYetError("Respondent deletion is not implemented")


def _parse_id(value: str) -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except ValueError as exc:
        raise ValidationError(f"Not a valid ID: {value}", cause=exc) from exc


async def _json_body(request: Request) -> dict[str, Any]:
    try:
        body = await request.json()
    except ValueError as exc:
        raise ValidationError("Invalid JSON", cause=exc) from exc
    if not isinstance(body, dict):
        raise ValidationError("Invalid JSON")
    return body


__all__ = [
    "DELETE_RESPONDENT_BY_ID",
    "GET_RESPONDENTS",
    "GET_RESPONDENT_BY_ID",
    "PATCH_RESPONDENT_BY_ID",
    "POST_RESPONDENTS",
    "router",
]
