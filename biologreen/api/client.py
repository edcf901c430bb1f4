"""Synchronous client for the BioLogreen facial authentication API."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx
from pydantic import BaseModel, ValidationError

from biologreen.api.models import FaceAuthResponse, LoginRequest, SignupRequest
from biologreen.config.settings import (
    CONNECT_TIMEOUT,
    READ_TIMEOUT,
    ClientSettings,
    build_settings,
    get_settings,
)
from biologreen.exceptions import (
    ApiError,
    RequestTimeoutError,
    ResponseDecodeError,
    TransportError,
)
from biologreen.face.encode import ImageSource, encode_image_file
from biologreen.monitoring.metrics import request_duration_seconds, requests_total

logger = logging.getLogger(__name__)

SIGNUP_ENDPOINT = "/auth/signup-face"
LOGIN_ENDPOINT = "/auth/login-face"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
UNKNOWN_API_ERROR = "An unknown API error occurred."


class BioLogreenClient:
    """Signs users up and logs them in by face.

    The client keeps no per-call state, so one instance may be shared between
    threads. Call :meth:`close` (or use it as a context manager) to release
    the underlying connection pool.
    """

    def __init__(
        self,
        settings: ClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._client = httpx.Client(
            base_url=settings.base_url,
            timeout=httpx.Timeout(READ_TIMEOUT, connect=CONNECT_TIMEOUT),
            headers={"X-API-KEY": settings.api_key},
            transport=transport,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._settings.base_url!r})"

    def __enter__(self) -> BioLogreenClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    def close(self) -> None:
        """Close the underlying HTTP client."""

        self._client.close()

    def signup_with_face(
        self,
        image: ImageSource,
        custom_fields: Mapping[str, Any] | None = None,
    ) -> FaceAuthResponse:
        """Register a new user by their face.

        Raises ``ImageReadError`` before any network activity when the image
        cannot be read, ``ApiError`` when the API rejects the request and
        ``TransportError`` when no usable response arrives.
        """

        payload = SignupRequest(
            image_base64=encode_image_file(image),
            custom_fields=dict(custom_fields or {}),
        )
        return self._post("signup", SIGNUP_ENDPOINT, payload)

    def login_with_face(self, image: ImageSource) -> FaceAuthResponse:
        """Authenticate an existing user by their face."""

        payload = LoginRequest(image_base64=encode_image_file(image))
        return self._post("login", LOGIN_ENDPOINT, payload)

    def _post(self, operation: str, endpoint: str, payload: BaseModel) -> FaceAuthResponse:
        body = payload.model_dump_json().encode("utf-8")
        logger.debug("POST %s%s (%d bytes)", self._settings.base_url, endpoint, len(body))

        try:
            with request_duration_seconds.labels(operation).time():
                response = self._client.post(
                    endpoint,
                    content=body,
                    headers={"Content-Type": JSON_CONTENT_TYPE},
                )
        except httpx.TimeoutException as exc:
            requests_total.labels(operation, "transport_error").inc()
            logger.warning("BioLogreen %s request timed out: %s", operation, exc)
            raise RequestTimeoutError(f"Request to {endpoint} timed out.") from exc
        except httpx.TransportError as exc:
            requests_total.labels(operation, "transport_error").inc()
            logger.warning("BioLogreen %s request failed: %s", operation, exc)
            raise TransportError(f"Network error while calling {endpoint}: {exc}") from exc

        try:
            result = parse_response(response.status_code, response.text)
        except ApiError as exc:
            requests_total.labels(operation, "api_error").inc()
            logger.warning(
                "BioLogreen %s failed with status %s: %s", operation, exc.status_code, exc.message
            )
            raise
        except ResponseDecodeError:
            requests_total.labels(operation, "decode_error").inc()
            logger.warning("BioLogreen %s returned an unreadable success body", operation)
            raise
        except TransportError:
            requests_total.labels(operation, "transport_error").inc()
            logger.warning("BioLogreen %s returned an empty success body", operation)
            raise

        requests_total.labels(operation, "success").inc()
        return result


def parse_response(status_code: int, text: str) -> FaceAuthResponse:
    """Classify a raw response into a result or a raised error."""

    if not 200 <= status_code < 300:
        raise api_error_from_body(status_code, text)

    if not text.strip():
        raise TransportError(f"Empty response body with status {status_code}.")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResponseDecodeError(
            f"Response body is not valid JSON: {exc}", status_code, text
        ) from exc

    if not isinstance(data, dict):
        raise ResponseDecodeError("Response body is not a JSON object.", status_code, text)

    try:
        return FaceAuthResponse.model_validate(data)
    except ValidationError as exc:
        raise ResponseDecodeError(
            f"Response body does not match the expected schema: {exc}", status_code, text
        ) from exc


def api_error_from_body(status_code: int, text: str) -> ApiError:
    """Build an :class:`ApiError` from an error response body.

    A JSON object yields its ``detail`` entry; anything else keeps the raw
    text so gateway and proxy pages still produce a usable message. An empty
    body carries no text worth surfacing and yields the unknown-error message;
    number and bool details are rendered as their JSON text.
    """

    if not text.strip():
        return ApiError(UNKNOWN_API_ERROR, status_code)

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return ApiError(text, status_code)

    if not isinstance(data, dict):
        return ApiError(text, status_code)

    detail = data.get("detail")
    if detail is None:
        return ApiError(UNKNOWN_API_ERROR, status_code)
    if isinstance(detail, str):
        return ApiError(detail, status_code)
    if isinstance(detail, (bool, int, float)):
        return ApiError(json.dumps(detail), status_code)
    # structured detail (e.g. validation error lists)
    return ApiError(text, status_code)


def create_client(api_key: str | None, base_url: str | None = None) -> BioLogreenClient:
    """Return a client for ``api_key``, pointed at ``base_url`` or production.

    Raises ``ConfigurationError`` when the key is missing or blank.
    """

    return BioLogreenClient(build_settings(api_key, base_url))


def create_client_from_env() -> BioLogreenClient:
    """Return a client configured from ``BIOLOGREEN_*`` environment variables."""

    return BioLogreenClient(get_settings())
