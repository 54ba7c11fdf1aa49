"""HTTP user directory: looks users up in the user service."""

import httpx
import pydantic
import structlog
from pydantic import BaseModel, ConfigDict, Field

from ordering.errors import UserDirectoryUnavailable
from ordering.users.port import UserDirectory, UserRecord

logger = structlog.get_logger(__name__)


class _UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_id: int = Field(alias="userId")
    username: str | None = None
    email: str | None = None


class HttpUserDirectory(UserDirectory):
    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def find_by_id(self, user_id: int) -> UserRecord | None:
        try:
            response = self._client.get(f"/api/v1/users/{user_id}")
            if response.status_code == 404:
                return None
            response.raise_for_status()
            body = _UserResponse.model_validate_json(response.content)
        except httpx.HTTPError as exc:
            logger.error("User lookup failed", user_id=user_id, error=str(exc))
            raise UserDirectoryUnavailable(user_id, str(exc)) from exc
        except pydantic.ValidationError as exc:
            logger.error("User service returned a malformed user", user_id=user_id)
            raise UserDirectoryUnavailable(user_id, "malformed response") from exc

        return UserRecord(user_id=body.user_id, username=body.username, email=body.email)

    def close(self):
        self._client.close()
