"""Utility functions for Smart Schedule."""

from smart_schedule.utils.data_uri import encode_image_bytes, encode_image_file, split_data_uri
from smart_schedule.utils.timestamps import (
    format_compact_utc,
    format_iso_utc,
    from_compact_utc,
    is_valid_utc_timestamp,
    parse_utc_timestamp,
    to_compact_utc,
)

__all__ = [
    "encode_image_bytes",
    "encode_image_file",
    "format_compact_utc",
    "format_iso_utc",
    "from_compact_utc",
    "is_valid_utc_timestamp",
    "parse_utc_timestamp",
    "split_data_uri",
    "to_compact_utc",
]
