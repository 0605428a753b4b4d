# topmark:header:start
#
#   project      : YarsFormat
#   file         : __main__.py
#   file_relpath : src/yars_format/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running yars-format via ``python -m yars_format``.

It delegates to [`yars_format.cli.main.cli`][yars_format.cli.main.cli], the same
entry point as the ``yars-format`` console script.

Examples:
    Check a file without rewriting it::

        python -m yars_format --check config.yaml
"""

from __future__ import annotations

from yars_format.cli.main import cli
from yars_format.constants import PROG_NAME

if __name__ == "__main__":
    cli(prog_name=PROG_NAME)
