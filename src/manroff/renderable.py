"""Renderable content contract.

Anything that can appear in a man page body goes through render():
plain strings, objects with their own render() method, and iterables
of either (concatenated in order, no separator).
"""

from collections.abc import Iterable
from typing import Protocol, Union, runtime_checkable

from manroff.exceptions import NotRenderableError


@runtime_checkable
class Troffable(Protocol):
    """Protocol for content that renders itself to roff source."""

    def render(self) -> str:
        """Return the roff text for this content."""
        ...


Content = Union[str, Troffable, Iterable["Content"]]


def render(content: Content) -> str:
    """Render content to roff text.

    Args:
        content: A string, a Troffable, or an iterable of content

    Returns:
        The rendered text; an empty iterable renders as ""

    Raises:
        NotRenderableError: If a leaf value is not text or Troffable
    """
    if isinstance(content, str):
        return content
    if isinstance(content, Troffable):
        return content.render()
    # bytes iterate as ints, so reject them before the generic branch
    if isinstance(content, (bytes, bytearray)) or not isinstance(content, Iterable):
        raise NotRenderableError(content)
    return "".join(render(item) for item in content)
