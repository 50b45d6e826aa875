"""manroff exception hierarchy.

Rendering well-typed content cannot fail. These exceptions cover the
places where Python callers can hand in something that is not content,
or a page description that does not parse.

Usage:
    from manroff.exceptions import NotRenderableError, RoffError

    try:
        text = render(content)
    except NotRenderableError as e:
        print(f"Cannot render {e.value!r}")
    except RoffError as e:
        print(f"manroff error: {e}")
"""

from typing import Any


class RoffError(Exception):
    """Base exception for all manroff errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotRenderableError(RoffError):
    """Value is neither text, a Troffable, nor an iterable of those.

    Raised by render() when it reaches a leaf it cannot turn into text,
    such as an int, None or bytes.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Cannot render value of type {type(value).__name__}: {value!r}")


class ConfigurationError(RoffError):
    """Page configuration could not be parsed.

    Raised when YAML page source is malformed or does not match
    the PageConfig schema.
    """

    pass
