"""Template strategies: render caption and list pieces in one markup syntax."""

from __future__ import annotations

from typing import Protocol

from measurereport.common.constants import (
    HTML_BEGIN_LIST,
    HTML_CAPTION,
    HTML_END_LIST,
    HTML_ITEM,
    MARKDOWN_BEGIN_LIST,
    MARKDOWN_CAPTION,
    MARKDOWN_END_LIST,
    MARKDOWN_ITEM,
)


class TemplateMaker(Protocol):
    def make_caption(self, caption: str) -> str: ...

    def begin_list(self) -> str: ...

    def make_item(self, value_type: str, entry: str) -> str: ...

    def end_list(self) -> str: ...


class HtmlTemplateMaker:
    """HTML fragment: ``<h1>`` caption and an unordered list."""

    def make_caption(self, caption: str) -> str:
        return HTML_CAPTION.format(caption=caption)

    def begin_list(self) -> str:
        return HTML_BEGIN_LIST

    def make_item(self, value_type: str, entry: str) -> str:
        return HTML_ITEM.format(label=value_type, value=entry)

    def end_list(self) -> str:
        return HTML_END_LIST


class MarkdownTemplateMaker:
    """Markdown fragment: level-2 heading and a bulleted list."""

    def make_caption(self, caption: str) -> str:
        return MARKDOWN_CAPTION.format(caption=caption)

    def begin_list(self) -> str:
        return MARKDOWN_BEGIN_LIST

    def make_item(self, value_type: str, entry: str) -> str:
        return MARKDOWN_ITEM.format(label=value_type, value=entry)

    def end_list(self) -> str:
        return MARKDOWN_END_LIST
