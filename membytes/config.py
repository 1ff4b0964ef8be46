"""
Display configuration.

Controls how byte sequences are rendered on the console. Settings can be
modified programmatically:

Example:
    >>> from membytes import config
    >>> config.trailing_space = False
    >>> config.separator = ", "
"""

from .exceptions import ValidationError


class _DisplayConfig:
    """
    Singleton configuration for console rendering.

    This is a singleton - import and modify `config` directly:

        from membytes import config
        config.trailing_space = False

    Attributes
    ----------
        separator: String placed between byte values. Default " ".
        trailing_space: When True (default), the separator also follows the
            last byte, matching the walkthrough transcript.
    """

    __slots__ = ("_separator", "_trailing_space")

    def __init__(self) -> None:
        self._separator = " "
        self._trailing_space = True

    @property
    def separator(self) -> str:
        """String placed between byte values."""
        return self._separator

    @separator.setter
    def separator(self, value: str) -> None:
        if not isinstance(value, str):
            raise ValidationError(
                f"separator must be str, got {type(value).__name__}",
                code="INVALID_ARGUMENT",
                details={"param": "separator", "type": type(value).__name__},
            )
        self._separator = value

    @property
    def trailing_space(self) -> bool:
        """Whether the separator also follows the last byte."""
        return self._trailing_space

    @trailing_space.setter
    def trailing_space(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise ValidationError(
                f"trailing_space must be bool, got {type(value).__name__}",
                code="INVALID_ARGUMENT",
                details={"param": "trailing_space", "type": type(value).__name__},
            )
        self._trailing_space = value

    def reset(self) -> None:
        """Restore the defaults."""
        self._separator = " "
        self._trailing_space = True

    def __repr__(self) -> str:
        return (
            f"DisplayConfig(separator={self._separator!r}, "
            f"trailing_space={self._trailing_space})"
        )


# Module-level singleton
config = _DisplayConfig()
