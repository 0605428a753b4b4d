# topmark:header:start
#
#   project      : YarsFormat
#   file         : __init__.py
#   file_relpath : src/yars_format/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YarsFormat formatting pipeline package.

This package contains the pure, I/O-free stages that turn YAML text into
canonical YAML text:

- [`yars_format.pipeline.loader`][yars_format.pipeline.loader]: parse and validate
- [`yars_format.pipeline.normalizer`][yars_format.pipeline.normalizer]: order mapping keys
- [`yars_format.pipeline.classifier`][yars_format.pipeline.classifier]: pick string encodings
- [`yars_format.pipeline.emitter`][yars_format.pipeline.emitter]: write canonical text

The stages are composed by [`yars_format.pipeline.runner`][yars_format.pipeline.runner].
"""
