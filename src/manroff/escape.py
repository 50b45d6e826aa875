"""Roff escaping utilities."""


def escape(text: str) -> str:
    """Escape hyphens so troff prints them as literal minus signs."""
    return text.replace("-", "\\-")
