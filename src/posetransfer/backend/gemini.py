"""Gemini image model backend over the Generative Language REST API."""

from __future__ import annotations

import base64
import binascii
import logging
import os
from typing import TYPE_CHECKING, Any

import httpx

from posetransfer.backend.base import GenerationError, GenerationRequest, GenerationResult

if TYPE_CHECKING:
    from posetransfer.backend.base import ProgressCallback
    from posetransfer.config import GeminiSettings
    from posetransfer.models.upload import UploadedImage

logger = logging.getLogger(__name__)


class GeminiBackend:
    """Send the subject photo, the pose cue and the instruction to Gemini.

    The model answers with a mix of text and inline image parts; the first
    ``image/*`` part is the result.
    """

    def __init__(
        self,
        settings: GeminiSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._api_key: str = ""
        self._client: httpx.AsyncClient | None = None

    async def connect(self) -> None:
        """Resolve the API key and open the HTTP client."""
        self._api_key = self._settings.api_key or os.environ.get("GEMINI_API_KEY", "")
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.timeout, connect=10.0),
            transport=self._transport,
        )

    async def disconnect(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def is_available(self) -> bool:
        """Check the API key is set and the configured model is reachable."""
        if not self._api_key:
            logger.warning("Gemini API key not configured (set GEMINI_API_KEY or config.gemini.api_key)")
            return False
        client = self._ensure_client()
        url = f"{self._settings.base_url.rstrip('/')}/models/{self._settings.model}"
        try:
            resp = await client.get(url, headers=self._headers())
        except (httpx.HTTPError, OSError):
            return False
        return resp.status_code == 200

    async def generate(
        self,
        request: GenerationRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> GenerationResult:
        client = self._ensure_client()
        if not self._api_key:
            msg = "Gemini API key is not configured"
            raise GenerationError(msg)

        if progress_callback:
            progress_callback(1, 3, f"Submitting to {self._settings.model}")

        try:
            resp = await client.post(
                self._settings.generate_url,
                headers=self._headers(),
                json=self._build_payload(request),
            )
        except httpx.HTTPError as exc:
            logger.error("Gemini request failed: %s", exc)
            msg = "Network connection failed. Please check your internet connection and API key."
            raise GenerationError(msg) from exc

        if resp.status_code != 200:
            msg = f"Gemini returned HTTP {resp.status_code}: {_error_message(resp)}"
            raise GenerationError(msg)

        if progress_callback:
            progress_callback(2, 3, "Reading response")

        try:
            result = self._parse_response(resp.json())
        except (ValueError, KeyError, IndexError, TypeError, binascii.Error) as exc:
            msg = f"Gemini returned a malformed response: {exc}"
            raise GenerationError(msg) from exc

        if result.image is None:
            logger.warning("Gemini returned no image")
        if progress_callback:
            progress_callback(3, 3, "Complete")
        return result

    async def get_models(self) -> list[str]:
        return [self._settings.model]

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "Not connected. Call connect() first."
            raise RuntimeError(msg)
        return self._client

    def _headers(self) -> dict[str, str]:
        return {"x-goog-api-key": self._api_key}

    def _build_payload(self, request: GenerationRequest) -> dict[str, Any]:
        """Map a GenerationRequest to a generateContent body."""
        return {
            "contents": [
                {
                    "parts": [
                        _inline_part(request.subject),
                        _inline_part(request.pose),
                        {"text": request.instruction},
                    ],
                },
            ],
            "generationConfig": {"responseModalities": ["IMAGE", "TEXT"]},
        }

    def _parse_response(self, data: dict[str, Any]) -> GenerationResult:
        parts = data["candidates"][0]["content"]["parts"]
        texts: list[str] = []
        for part in parts:
            inline = part.get("inlineData") or part.get("inline_data")
            if inline:
                mime = inline.get("mimeType") or inline.get("mime_type") or ""
                if mime.startswith("image/"):
                    return GenerationResult(
                        image=base64.b64decode(inline["data"]),
                        mime_type=mime,
                        text="\n".join(texts),
                        metadata={"backend": "gemini", "model": self._settings.model},
                    )
            if "text" in part:
                texts.append(part["text"])
        return GenerationResult(
            image=None,
            text="\n".join(texts),
            metadata={"backend": "gemini", "model": self._settings.model},
        )


def _inline_part(image: UploadedImage) -> dict[str, Any]:
    return {"inline_data": {"mime_type": image.mime_type, "data": image.base64}}


def _error_message(resp: httpx.Response) -> str:
    """Pull the human-readable message out of an API error body."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return resp.reason_phrase
