# topmark:header:start
#
#   project      : YarsFormat
#   file         : __init__.py
#   file_relpath : src/yars_format/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""yars-format CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    yars-format = "yars_format.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
