from typing import Any, Optional


class ItemValidationError(ValueError):
    """Raised when an item field is set to an unacceptable value."""


class TextValidator:
    """Basic field checks used by the item setters and the CLI."""

    @staticmethod
    def validate_name(text: Optional[str]) -> bool:
        if text is None:
            return False
        return bool(text.strip())

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        return TextValidator.validate_name(title)

    @staticmethod
    def validate_length(length: Any) -> bool:
        # bool is an int subclass; True is not a length
        if isinstance(length, bool) or not isinstance(length, int):
            return False
        return length > 0
