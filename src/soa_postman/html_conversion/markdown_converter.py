"""HTML to Markdown conversion service."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

_HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
_STRONG_TAGS = frozenset({"strong", "b"})
_EMPHASIS_TAGS = frozenset({"em", "i", "u"})
_LIST_TAGS = frozenset({"ul", "ol"})

_WHITESPACE_RUN = re.compile(r"\s+")
_TRAILING_SPACES = re.compile(r"[ \t]+\n")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_RESIDUAL_TAG = re.compile(r"<[^>]+>")
_CODE_FENCE = "```"


@dataclass
class _MarkdownBuilder:
    """Output buffer plus the nesting state of one conversion."""

    parts: list[str] = field(default_factory=list)
    link_targets: list[str] = field(default_factory=list)
    code_modes: list[bool] = field(default_factory=list)
    list_depth: int = 0
    _tail: str = ""

    def append(self, text: str) -> None:
        if not text:
            return
        self.parts.append(text)
        self._tail = (self._tail + text)[-2:]

    def ensure_newline(self) -> None:
        if self._tail and not self._tail.endswith("\n"):
            self.append("\n")

    def ensure_blank_line(self) -> None:
        if not self._tail or self._tail == "\n\n":
            return
        if not self._tail.endswith("\n"):
            self.append("\n")
        self.append("\n")

    @property
    def in_code(self) -> bool:
        return bool(self.code_modes) and self.code_modes[-1]

    def text(self) -> str:
        return "".join(self.parts)


def html_to_markdown(html: str | None) -> str:
    """Convert an HTML fragment into lightly normalised Markdown."""
    if html is None or not html.strip():
        return ""
    soup = BeautifulSoup(html, "html.parser")
    builder = _MarkdownBuilder()
    for element, entering in _walk(soup):
        if isinstance(element, Tag):
            if entering:
                _enter_tag(element, builder)
            else:
                _leave_tag(element, builder)
        elif entering:
            _append_text(element, builder)
    return _normalize(builder.text())


def _walk(root: Tag):
    """Yield ``(node, entering)`` pairs in pre-order and post-order without recursion."""
    stack: list[tuple[PageElement, bool]] = [(child, True) for child in reversed(root.contents)]
    while stack:
        node, entering = stack.pop()
        yield node, entering
        if entering and isinstance(node, Tag):
            stack.append((node, False))
            stack.extend((child, True) for child in reversed(node.contents))


def _enter_tag(tag: Tag, builder: _MarkdownBuilder) -> None:
    name = tag.name.lower()
    if name in _HEADING_TAGS:
        builder.ensure_blank_line()
        builder.append("#" * int(name[1]) + " ")
    elif name == "p":
        builder.ensure_blank_line()
    elif name == "br":
        builder.append("\n")
    elif name in _LIST_TAGS:
        builder.list_depth += 1
        builder.ensure_newline()
    elif name == "li":
        builder.ensure_newline()
        builder.append("  " * max(0, builder.list_depth - 1) + "- ")
    elif name in _STRONG_TAGS:
        builder.append("**")
    elif name in _EMPHASIS_TAGS:
        builder.append("_")
    elif name == "code":
        builder.append("`")
        builder.code_modes.append(True)
    elif name == "pre":
        builder.ensure_newline()
        builder.append(_CODE_FENCE + "\n")
        builder.code_modes.append(True)
    elif name == "a":
        builder.link_targets.append(_attribute(tag, "href"))
        builder.append("[")
    elif name == "font" and _is_monospace_font(tag):
        builder.append("`")
        builder.code_modes.append(True)


def _leave_tag(tag: Tag, builder: _MarkdownBuilder) -> None:
    name = tag.name.lower()
    if name in _HEADING_TAGS or name == "p":
        builder.append("\n\n")
    elif name in _LIST_TAGS:
        builder.list_depth = max(0, builder.list_depth - 1)
        builder.append("\n")
    elif name == "li":
        builder.append("\n")
    elif name in _STRONG_TAGS:
        builder.append("**")
    elif name in _EMPHASIS_TAGS:
        builder.append("_")
    elif name == "code":
        builder.append("`")
        _pop(builder.code_modes)
    elif name == "pre":
        builder.ensure_newline()
        builder.append(_CODE_FENCE + "\n\n")
        _pop(builder.code_modes)
    elif name == "a":
        target = builder.link_targets.pop() if builder.link_targets else ""
        builder.append("]")
        if target.strip():
            builder.append(f"({target})")
    elif name == "font" and _is_monospace_font(tag):
        _pop(builder.code_modes)
        builder.append("`")


def _append_text(node: PageElement, builder: _MarkdownBuilder) -> None:
    # comments, doctypes and CDATA sections are not rendered
    if not isinstance(node, NavigableString) or isinstance(node, PreformattedString):
        return
    text = str(node)
    if text.startswith("\n") and _opens_preformatted_block(node):
        text = text[1:]
    if not builder.in_code:
        text = _WHITESPACE_RUN.sub(" ", text.replace("\xa0", " "))
    builder.append(text)


def _normalize(text: str) -> str:
    text = _TRAILING_SPACES.sub("\n", text)
    text = _EXCESS_NEWLINES.sub("\n\n", text)
    text = text.strip()
    return _RESIDUAL_TAG.sub("", text)


def _attribute(tag: Tag, name: str) -> str:
    value = tag.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def _is_monospace_font(tag: Tag) -> bool:
    return "courier" in _attribute(tag, "face").lower()


def _pop(stack: list[bool]) -> None:
    if stack:
        stack.pop()


def _opens_preformatted_block(node: PageElement) -> bool:
    # a newline directly after <pre> is not content
    parent = node.parent
    return parent is not None and parent.name == "pre" and node.previous_sibling is None
