# topmark:header:start
#
#   project      : YarsFormat
#   file         : colored_enum.py
#   file_relpath : src/yars_format/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enums that carry a display color.

`ColoredStrEnum` members are plain strings (their ``.value`` is the label
text) with a colorizer attached on the side, typically a yachalk style:

```python
from yachalk import chalk


class Status(ColoredStrEnum):
    OK = ("ok", chalk.green)
    FAILED = ("failed", chalk.red_bright)


Status.OK.value  # 'ok'
Status.OK.styled()  # green 'ok'
```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Join ``args`` with ``sep`` and decorate the result."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a label string, with an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a member from its ``(label, colorizer)`` definition."""
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the label text."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer for this member."""
        return self._color

    def styled(self, text: str | None = None) -> str:
        """Return ``text`` (default: the label) decorated with the member's color."""
        return self._color(self._value_ if text is None else text)
