from typing import Any

from .types.format_type import ColorFormat, format_labels


class ColorParseError(ValueError):
    """Raised by the ``Color.from_*`` factories when the input does not parse."""

    def __init__(self, fmt: ColorFormat, value: Any) -> None:
        self.format = fmt
        self.value = value
        super().__init__(f"Unable to parse {format_labels[fmt]} '{value}'")
