# topmark:header:start
#
#   project      : YarsFormat
#   file         : constants.py
#   file_relpath : src/yars_format/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""yars-format constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    YARS_FORMAT_VERSION: str = get_version("yars-format")
except PackageNotFoundError:  # running from a source checkout
    YARS_FORMAT_VERSION = "0.0.0"

#: Name of the console script (also used for shell completion).
PROG_NAME: Final[str] = "yars-format"

#: Environment variable Click uses to drive shell completion callbacks.
COMPLETE_VAR: Final[str] = "_YARS_FORMAT_COMPLETE"

#: Emitter width for `format_yaml_string` (effectively unlimited).
STRING_EMIT_WIDTH: Final[int] = 4096

#: Emitter width for `format_yaml_dict`.
DICT_EMIT_WIDTH: Final[int] = 72

#: Indentation step for nested mappings.
MAP_INDENT: Final[int] = 2

#: Indentation step for sequences; the hyphen sits `SEQ_DASH_OFFSET` columns in.
SEQ_INDENT: Final[int] = 4
SEQ_DASH_OFFSET: Final[int] = 2

TOP_LEVEL_LIST_MESSAGE: Final[str] = (
    "Top-level lists are not supported by the YAML formatter. "
    "UMF files should always have a dictionary at the root level with "
    "'column:' and 'validations:' keys. If you're seeing this error, your YAML "
    "file may be structured incorrectly."
)
