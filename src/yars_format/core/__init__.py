# topmark:header:start
#
#   project      : YarsFormat
#   file         : __init__.py
#   file_relpath : src/yars_format/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core types shared by the pipeline and the API: the document tree and errors."""
