"""Image encoding helpers."""

from __future__ import annotations

import base64
import logging
import os
from typing import BinaryIO, Union

from biologreen.exceptions import ImageReadError

logger = logging.getLogger(__name__)

ImageSource = Union[str, os.PathLike, BinaryIO]


def encode_image_bytes(data: bytes) -> str:
    """Return padded standard base64 for ``data`` without line breaks."""

    return base64.b64encode(data).decode("ascii")


def encode_image_file(source: ImageSource) -> str:
    """Read the whole image and return its base64 text.

    ``source`` may be a filesystem path or an open binary file object. Files
    opened here are always closed; caller-provided handles are left open.
    """

    try:
        if hasattr(source, "read"):
            data = source.read()
        else:
            with open(source, "rb") as image_file:
                data = image_file.read()
    except (OSError, ValueError) as exc:
        raise ImageReadError(f"Failed to read image {_describe(source)}: {exc}") from exc

    if not isinstance(data, bytes):
        raise ImageReadError(f"Image source {_describe(source)} is not opened in binary mode.")

    logger.debug("Encoded image %s (%d bytes)", _describe(source), len(data))
    return encode_image_bytes(data)


def _describe(source: ImageSource) -> str:
    if hasattr(source, "read"):
        return repr(getattr(source, "name", "<stream>"))
    return repr(os.fspath(source))
