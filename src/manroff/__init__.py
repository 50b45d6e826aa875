"""manroff - compose man pages from Python.

Build a ManPage with add_section() calls, using the inline and block
builders for markup, then call render() to get roff source.
"""

from manroff.builders import (
    bold,
    italic,
    lf,
    li,
    list_,
    nf,
    p,
    s,
    ul,
)
from manroff.config import (
    PageConfig,
    SectionConfig,
    parse_page_config,
)
from manroff.escape import escape
from manroff.exceptions import (
    ConfigurationError,
    NotRenderableError,
    RoffError,
)
from manroff.models import ManPage, Section
from manroff.renderable import Troffable, render
from manroff.template_render import render_page

__version__ = "0.1.0"

__all__ = [
    # Models
    "ManPage",
    "Section",
    # Rendering
    "Troffable",
    "render",
    "render_page",
    "escape",
    # Builders
    "bold",
    "italic",
    "list_",
    "lf",
    "p",
    "s",
    "ul",
    "li",
    "nf",
    # Config
    "PageConfig",
    "SectionConfig",
    "parse_page_config",
    # Exceptions
    "RoffError",
    "NotRenderableError",
    "ConfigurationError",
]
