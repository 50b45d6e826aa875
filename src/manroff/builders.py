"""Inline and block roff builders.

Each block builder renders its content and wraps it in a fixed
man(7) fragment. Output is byte-exact; callers compose fragments
by passing them as content to other builders or to ManPage.add_section.

Example:
    body = [
        p(["Print a friendly greeting."]),
        list_([bold("-n"), " ", italic("NAME")], ["Greet NAME instead."]),
        nf(4, ["hello -n world"]),
    ]
"""

from __future__ import annotations

from manroff.renderable import Content, render


def bold(text: str) -> str:
    """Wrap text in a bold font switch."""
    return f"\\fB{text}\\fP"


def italic(text: str) -> str:
    """Wrap text in an italic font switch."""
    return f"\\fI{text}\\fP"


def list_(header: Content, content: Content) -> str:
    """Build a tagged paragraph: header line, then indented body.

    Named with a trailing underscore to avoid shadowing the builtin.
    """
    return f".TP\n{render(header)}\n{render(content)}"


def lf(content: Content) -> str:
    """Reset the font and force a line break after content."""
    return f"\n{render(content)}\\fR\n.\n.br"


def p(content: Content) -> str:
    """Build a paragraph."""
    return f"\n{render(content)}\n.P"


def s(content: Content) -> str:
    """Build a plain block terminated by an empty request."""
    return f"\n{render(content)}\n."


def ul(content: Content) -> str:
    """Wrap li() items in an unordered list, resetting the indent afterwards."""
    return f'\n{render(content)}\n.IP "" 0\n.'


def li(indent: int, content: Content) -> str:
    """Build one bullet item indented by `indent` ens."""
    return f'\n.IP "\\(bu" {indent}\n{render(content)}\n.'


def nf(indent: int, content: Content) -> str:
    """Build an indented no-fill block for preformatted text.

    Args:
        indent: Indent width, emitted as-is
        content: Lines to keep verbatim; embed newlines yourself

    Returns:
        The block, ending with an indent reset and a trailing newline
    """
    return f'\n.IP "" {indent}\n.\n.nf\n{render(content)}\n.\n.fi\n.\n.IP "" 0\n.\n'
