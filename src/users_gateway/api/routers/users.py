"""Users CRUD endpoints backed by the table store."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from users_gateway.api.dependencies import get_user_service, read_user_payload
from users_gateway.api.models import ErrorResponse, UserPayload, UserResponse
from users_gateway.api.services import UserNotFoundError, UserService
from users_gateway.store import StoreResponse

router = APIRouter(prefix="/users", tags=["users"])

ServiceDep = Annotated[UserService, Depends(get_user_service)]
PayloadDep = Annotated[UserPayload, Depends(read_user_payload)]

_PAYLOAD_BODY: dict[str, Any] = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": UserPayload.model_json_schema()}
        },
    }
}
_NOT_FOUND: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}
}
_MALFORMED: dict[int | str, dict[str, Any]] = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}
}


def _relay(result: StoreResponse) -> JSONResponse:
    return JSONResponse(content=result.data, status_code=result.status)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_MALFORMED,
    openapi_extra=_PAYLOAD_BODY,
)
async def create_user(payload: PayloadDep, service: ServiceDep) -> JSONResponse:
    """Create a user; the backend assigns the id."""

    return _relay(await service.create(payload))


@router.get("", response_model=list[UserResponse])
async def list_users(service: ServiceDep) -> JSONResponse:
    """Return all users."""

    return _relay(await service.list_all())


@router.get("/{user_id}", response_model=UserResponse, responses=_NOT_FOUND)
async def get_user(user_id: str, service: ServiceDep) -> JSONResponse:
    """Return a single user by id."""

    try:
        result = await service.get(user_id)
    except UserNotFoundError as exc:
        raise _not_found() from exc
    return _relay(result)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_NOT_FOUND, **_MALFORMED},
    openapi_extra=_PAYLOAD_BODY,
)
async def update_user(
    user_id: str, payload: PayloadDep, service: ServiceDep
) -> JSONResponse:
    """Overwrite the supplied fields of a user."""

    try:
        result = await service.update(user_id, payload)
    except UserNotFoundError as exc:
        raise _not_found() from exc
    return _relay(result)


@router.delete("/{user_id}", response_model=UserResponse, responses=_NOT_FOUND)
async def delete_user(user_id: str, service: ServiceDep) -> JSONResponse:
    """Delete a user and return the removed row."""

    try:
        result = await service.delete(user_id)
    except UserNotFoundError as exc:
        raise _not_found() from exc
    return _relay(result)
