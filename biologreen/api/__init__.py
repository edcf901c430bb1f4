"""HTTP client and payload models for the BioLogreen API."""

from .client import (
    BioLogreenClient,
    api_error_from_body,
    create_client,
    create_client_from_env,
    parse_response,
)
from .models import FaceAuthResponse, LoginRequest, SignupRequest

__all__ = [
    "BioLogreenClient",
    "FaceAuthResponse",
    "LoginRequest",
    "SignupRequest",
    "api_error_from_body",
    "create_client",
    "create_client_from_env",
    "parse_response",
]
