"""Pydantic models for man page structure."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from manroff.template_render import render_page
from manroff.renderable import Content, render

if TYPE_CHECKING:
    from manroff.config import PageConfig

logger = logging.getLogger(__name__)


class Section(BaseModel):
    """A titled block of already-rendered roff text.

    Frozen because the body is rendered once, when the section is
    added to a page.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    content: str

    def render(self) -> str:
        """Render the .SH heading followed by the body."""
        return f".SH {self.title.upper()}\n{self.content}"


class ManPage(BaseModel):
    """A complete man page.

    Frozen: add_section() returns a new page rather than mutating this one,
    so a page handed to one builder chain cannot change under another.

    Example:
        page = (
            ManPage(title="mytool", section=1, footer="v1", current="2024", header="User Commands")
            .add_section("name", ["mytool - do things"])
            .add_section("synopsis", [bold("mytool"), " ", italic("FILE")])
        )
        text = page.render()
    """

    model_config = ConfigDict(frozen=True)

    title: str
    section: int = Field(ge=-128, le=127, description="Manual section number")
    footer: str
    current: str
    header: str
    content: tuple[Section, ...] = ()

    def add_section(self, title: str, content: Content) -> ManPage:
        """Render content now and append it as a section.

        Args:
            title: Section title, stored uppercased
            content: Anything render() accepts

        Returns:
            A new ManPage with the section appended
        """
        new_section = Section(title=title.upper(), content=render(content))
        logger.debug("Adding section %s to %s(%s)", new_section.title, self.title, self.section)
        return self.model_copy(update={"content": (*self.content, new_section)})

    def render(self) -> str:
        """Render the .TH header and every section, escaped, in order."""
        return render_page(self)

    @classmethod
    def from_config(cls, config: PageConfig) -> ManPage:
        """Build a page from a parsed PageConfig."""
        page = cls(
            title=config.title,
            section=config.section,
            footer=config.footer,
            current=config.current,
            header=config.header,
        )
        for section in config.sections:
            page = page.add_section(section.title, section.content)
        return page
