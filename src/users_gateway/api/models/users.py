"""Pydantic models for the users endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UserPayload(BaseModel):
    """Fields accepted when creating or updating a user.

    Only fields present in the request are forwarded to the backend, so an
    update overwrites exactly what the caller supplied.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    phone: str | None = None

    def to_row(self) -> dict[str, Any]:
        """Return the supplied fields as a backend row."""

        return self.model_dump(exclude_unset=True)


class UserResponse(BaseModel):
    """A user row as stored by the backend."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id_: Any = Field(alias="id")
    name: str | None = None
    email: str | None = None
    phone: str | None = None
