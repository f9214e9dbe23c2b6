"""HTTP update service implementation.

Sends partial updates as PATCH requests using httpx.
"""

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from recordpatch.core.exceptions import UpdateServiceError
from recordpatch.core.logging import get_logger
from recordpatch.domain.entities.change_set import UpdateRequest
from recordpatch.infrastructure.services.update.schemas import UpdatePayload
from recordpatch.infrastructure.services.update.update_service import UpdateService

logger = get_logger(__name__)


class HttpUpdateSettings(BaseModel):
    """Configuration settings for the HTTP update service."""

    model_config = ConfigDict(from_attributes=True)

    base_url: str
    api_key: str | None = None
    api_key_header: str = "X-API-Key"
    timeout_seconds: float = 30.0


class HttpUpdateService(UpdateService):
    """Update service sending ``PATCH {base_url}/{logical_name}/{id}``.

    Non-2xx responses raise :class:`UpdateServiceError`. Transport errors
    raised by httpx propagate unchanged.
    """

    def __init__(self, settings: HttpUpdateSettings, client: httpx.Client | None = None) -> None:
        """Initialize the HTTP update service.

        Args:
            settings: HTTP update configuration settings.
            client: Optional preconfigured httpx client. Its base URL is used
                instead of ``settings.base_url``.
        """
        self.settings = settings
        self._client = client or httpx.Client(
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
        )

    def update(self, request: UpdateRequest) -> None:
        """Send a partial update.

        Args:
            request: The update request.

        Raises:
            UpdateServiceError: If the request has no record id or the
                server answers with a non-2xx status.
        """
        if request.id is None:
            raise UpdateServiceError(
                f"Cannot update {request.logical_name}: record has no id"
            )

        payload = UpdatePayload.from_request(request)
        headers = {"Accept": "application/json"}
        if self.settings.api_key:
            headers[self.settings.api_key_header] = self.settings.api_key

        path = f"/{request.logical_name}/{request.id}"
        response = self._client.patch(
            path,
            json=payload.model_dump(mode="json"),
            headers=headers,
        )

        if not response.is_success:
            error_msg = f"HTTP {response.status_code}"
            try:
                error_data = response.json()
                if isinstance(error_data, dict):
                    error_msg = error_data.get("detail", error_data.get("error", error_msg))
            except ValueError:
                pass
            logger.error(
                "Update rejected by server",
                path=path,
                status_code=response.status_code,
                error=error_msg,
            )
            raise UpdateServiceError(
                f"Failed to update {request.logical_name} {request.id}: {error_msg}",
                status_code=response.status_code,
            )

        logger.info(
            "Update sent",
            path=path,
            status_code=response.status_code,
            attribute_count=len(payload.attributes),
        )

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> "HttpUpdateService":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
