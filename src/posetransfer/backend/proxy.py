"""Pass-through proxy backend - the ``/api/generate-pose`` JSON contract."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import TYPE_CHECKING, Any

import httpx

from posetransfer.backend.base import GenerationError, GenerationRequest, GenerationResult

if TYPE_CHECKING:
    from posetransfer.backend.base import ProgressCallback
    from posetransfer.config import ProxySettings

logger = logging.getLogger(__name__)


class ProxyBackend:
    """Forward requests to a stateless proxy that holds the model credentials.

    The proxy builds the instruction itself, so only the two images and the
    optional dimension hint travel over the wire.
    """

    def __init__(
        self,
        settings: ProxySettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def connect(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self.settings.base_url,
            timeout=httpx.Timeout(self.settings.timeout, connect=10.0),
            transport=self._transport,
        )

    async def disconnect(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def is_available(self) -> bool:
        client = self._ensure_client()
        try:
            resp = await client.get("/api/health")
        except (httpx.HTTPError, OSError):
            return False
        if resp.status_code != 200:
            return False
        try:
            return resp.json().get("status") == "ok"
        except ValueError:
            return False

    async def generate(
        self,
        request: GenerationRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> GenerationResult:
        client = self._ensure_client()
        if progress_callback:
            progress_callback(1, 2, f"Submitting to {self.settings.base_url}")

        try:
            resp = await client.post("/api/generate-pose", json=self._build_payload(request))
            resp.raise_for_status()
            body = resp.json()
        except httpx.HTTPStatusError as exc:
            logger.error("Proxy returned HTTP %d", exc.response.status_code)
            msg = f"HTTP error! status: {exc.response.status_code}"
            raise GenerationError(msg) from exc
        except httpx.HTTPError as exc:
            logger.error("Proxy request failed: %s", exc)
            msg = f"Failed to reach the generation proxy at {self.settings.base_url}"
            raise GenerationError(msg) from exc
        except ValueError as exc:
            msg = "Generation proxy returned a malformed response"
            raise GenerationError(msg) from exc

        if progress_callback:
            progress_callback(2, 2, "Complete")

        if not isinstance(body, dict) or not body.get("success"):
            error = body.get("error") if isinstance(body, dict) else None
            raise GenerationError(error or "Failed to generate image")

        image_data = body.get("imageData")
        if not image_data:
            return GenerationResult(image=None, metadata={"backend": "proxy"})
        try:
            image = base64.b64decode(image_data, validate=True)
        except (binascii.Error, TypeError) as exc:
            msg = "Generation proxy returned invalid image data"
            raise GenerationError(msg) from exc
        return GenerationResult(
            image=image,
            mime_type=body.get("mimeType", "image/png"),
            metadata={"backend": "proxy"},
        )

    async def get_models(self) -> list[str]:
        return [f"{self.settings.base_url}/api/generate-pose"]

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "Not connected. Call connect() first."
            raise RuntimeError(msg)
        return self._client

    def _build_payload(self, request: GenerationRequest) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "originalImage": {
                "base64": request.subject.base64,
                "mimeType": request.subject.mime_type,
            },
            "poseImage": {
                "base64": request.pose.base64,
                "mimeType": request.pose.mime_type,
            },
        }
        if request.dimensions is not None:
            payload["dimensions"] = request.dimensions.model_dump()
        return payload
