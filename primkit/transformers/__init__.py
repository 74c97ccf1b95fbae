"""
Value transformers: number/date/file-size prettifying, string case
conversion and guarded JSON encoding.
"""

from .consts import DATE_TEMPLATES, FILE_SIZE_UNITS
from .numbers import (
    NumberFormatConfig,
    build_number_format_config,
    prettify_number,
    prettify_file_size,
    prettify_badge_count,
)
from .dates import prettify_date
from .strings import capitalize_first, to_title_case, to_slug, truncate_text, mask_middle
from .json_io import stringify_json, stringify_json_deterministically, parse_json, create_deep_clone

__all__ = [
    "DATE_TEMPLATES",
    "FILE_SIZE_UNITS",
    "NumberFormatConfig",
    "build_number_format_config",
    "prettify_number",
    "prettify_date",
    "prettify_file_size",
    "prettify_badge_count",
    "capitalize_first",
    "to_title_case",
    "to_slug",
    "truncate_text",
    "mask_middle",
    "stringify_json",
    "stringify_json_deterministically",
    "parse_json",
    "create_deep_clone",
]
