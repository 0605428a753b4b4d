# topmark:header:start
#
#   project      : YarsFormat
#   file         : __init__.py
#   file_relpath : src/yars_format/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""yars-format package.

yars-format is a deterministic YAML formatter. It parses YAML, orders mapping
keys, picks one canonical encoding per string and writes the result with a
fixed layout, so formatting is idempotent. It exposes both a CLI and a small
typed API.
"""

from __future__ import annotations
