"""Template rendering for man pages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape

from manroff.escape import escape

if TYPE_CHECKING:
    from manroff.models import ManPage

logger = logging.getLogger(__name__)

# Template directory
TEMPLATES_DIR = Path(__file__).parent / "templates"


def get_jinja_env() -> Environment:
    """Get configured Jinja2 environment with the roff_escape filter."""
    env = Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(default=False),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["roff_escape"] = escape
    return env


def render_page(page: ManPage) -> str:
    """Render a man page using the manpage template.

    Args:
        page: ManPage with header fields and sections

    Returns:
        Roff source: the .TH line, then each section escaped and
        newline-terminated
    """
    logger.debug("Rendering %s(%s) with %d sections", page.title, page.section, len(page.content))
    env = get_jinja_env()
    template = env.get_template("manpage.roff.j2")
    result: str = template.render(page=page)
    return result
