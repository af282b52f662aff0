"""Users operations proxied to the backend table store."""

from __future__ import annotations

from users_gateway.api.models import UserPayload
from users_gateway.store import SELECT_ALL, StoreResponse, TableStoreClient, eq


class UserNotFoundError(Exception):
    """Raised when a point operation matches no row."""


def _single_row(result: StoreResponse) -> StoreResponse:
    """Narrow a filtered result to its only row or raise if there is none."""

    if not isinstance(result.data, list) or not result.data:
        raise UserNotFoundError
    return StoreResponse(status=result.status, data=result.data[0])


class UserService:
    """Maps each users operation onto exactly one backend call."""

    def __init__(self, client: TableStoreClient, table: str = "users") -> None:
        self._client = client
        self._table = table

    def _by_id(self, user_id: str) -> dict[str, str]:
        return {"id": eq(user_id)}

    async def create(self, payload: UserPayload) -> StoreResponse:
        """Insert one row; the backend assigns its id."""

        result = await self._client.request("POST", self._table, body=[payload.to_row()])
        if isinstance(result.data, list) and result.data:
            return StoreResponse(status=result.status, data=result.data[0])
        return result

    async def list_all(self) -> StoreResponse:
        """Return every row and the backend status unchanged."""

        return await self._client.request("GET", self._table, params=SELECT_ALL)

    async def get(self, user_id: str) -> StoreResponse:
        """Return the row with ``user_id``."""

        result = await self._client.request("GET", self._table, params=self._by_id(user_id))
        return _single_row(result)

    async def update(self, user_id: str, payload: UserPayload) -> StoreResponse:
        """Overwrite the supplied fields and return the updated row."""

        result = await self._client.request(
            "PATCH", self._table, params=self._by_id(user_id), body=payload.to_row()
        )
        return _single_row(result)

    async def delete(self, user_id: str) -> StoreResponse:
        """Remove the row and return its prior representation."""

        result = await self._client.request(
            "DELETE", self._table, params=self._by_id(user_id)
        )
        return _single_row(result)
