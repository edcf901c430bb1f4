"""Python client for the BioLogreen facial authentication API."""

from .api import (
    BioLogreenClient,
    FaceAuthResponse,
    LoginRequest,
    SignupRequest,
    create_client,
    create_client_from_env,
)
from .config import DEFAULT_BASE_URL, ClientSettings
from .exceptions import (
    ApiError,
    BioLogreenError,
    ConfigurationError,
    ImageReadError,
    RequestTimeoutError,
    ResponseDecodeError,
    TransportError,
)
from .face import encode_image_bytes, encode_image_file

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BASE_URL",
    "ApiError",
    "BioLogreenClient",
    "BioLogreenError",
    "ClientSettings",
    "ConfigurationError",
    "FaceAuthResponse",
    "ImageReadError",
    "LoginRequest",
    "RequestTimeoutError",
    "ResponseDecodeError",
    "SignupRequest",
    "TransportError",
    "create_client",
    "create_client_from_env",
    "encode_image_bytes",
    "encode_image_file",
]
