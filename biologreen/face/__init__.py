"""Face image helpers."""

from .encode import ImageSource, encode_image_bytes, encode_image_file

__all__ = ["ImageSource", "encode_image_bytes", "encode_image_file"]
