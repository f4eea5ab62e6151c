"""Markup stripping for text sent to DeepL."""

from typing import Iterable

from bs4 import BeautifulSoup
from bs4.element import Comment, Declaration, Doctype, ProcessingInstruction
from bs4.formatter import HTMLFormatter

from ..config import DEFAULT_ALLOWED_TAGS

# Non-text nodes dropped entirely, content included
_DROPPED_NODES = (Comment, Declaration, Doctype, ProcessingInstruction)

# html.parser doesn't unescape references inside these
_RAW_TEXT_TAGS = ("script", "style")

# Writes text and void tags back exactly as parsed: no escaping, <br> not <br/>
_FORMATTER = HTMLFormatter(entity_substitution=None, void_element_close_prefix=None)


def strip_tags(text: str, allowed_tags: Iterable[str] = DEFAULT_ALLOWED_TAGS) -> str:
    """Remove markup from text except for an allow-list of tags.

    Disallowed tags are unwrapped: the tag goes away but its text content
    stays, so ``<script>alert(1)</script>`` becomes ``alert(1)``. Allowed
    tags are kept with their attributes. Comments, doctypes and processing
    instructions are removed.

    Text between tags is passed through as written. Every ``&`` is escaped
    before parsing, so the parser's unescaping gives back the original
    characters: ``&nbsp;`` and ``&lt;p&gt;`` stay entity text and never
    become markup, and a bare ``&`` or ``<`` isn't escaped.

    Args:
        text: Text that may contain HTML.
        allowed_tags: Tag names to keep (case-insensitive).

    Returns:
        The stripped text. Text without any markup is returned unchanged.
    """
    if "<" not in text:
        return text

    allowed = {tag.lower() for tag in allowed_tags}
    soup = BeautifulSoup(text.replace("&", "&amp;"), "html.parser")

    for node in soup.find_all(string=lambda s: isinstance(s, _DROPPED_NODES)):
        node.extract()

    for node in soup.find_all(string=True):
        if node.parent is not None and node.parent.name in _RAW_TEXT_TAGS:
            node.replace_with(node.replace("&amp;", "&"))

    for tag in soup.find_all(True):
        if tag.name.lower() not in allowed:
            tag.unwrap()

    return soup.decode(formatter=_FORMATTER)
