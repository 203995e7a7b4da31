"""Turns captured reply markup into plain text."""

import logging
import re
import warnings
from enum import Enum
from typing import Optional

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, NavigableString

from config import CITATION_SELECTOR

logger = logging.getLogger("ResponseCleaner")

BLOCK_TAGS = [
    "p", "div", "li", "pre", "blockquote", "tr", "table", "ul", "ol",
    "h1", "h2", "h3", "h4", "h5", "h6",
]
VERBATIM_TAGS = ["pre", "code"]

# [3], [1, 2], 【4†source】; a bracket glued to a name is a subscript
INLINE_CITATION_PATTERN = re.compile(
    r"\s?(?:(?<![\w\]\)])\[\d+(?:,\s*\d+)*\]|【[^】]*】)"
)
EXCESS_BLANK_LINES = re.compile(r"\n{3,}")


class CitationPolicy(str, Enum):
    STRIP = "strip"
    KEEP = "keep"


def _strip_inline_citations(soup: BeautifulSoup) -> None:
    for node in soup.find_all(string=INLINE_CITATION_PATTERN):
        # Comments and other NavigableString subclasses never reach get_text
        if type(node) is not NavigableString or node.find_parent(VERBATIM_TAGS):
            continue
        node.replace_with(INLINE_CITATION_PATTERN.sub("", str(node)))


def _list_start(ol) -> int:
    try:
        return int(ol.get("start", 1))
    except ValueError:
        return 1


def _mark_list_items(soup: BeautifulSoup) -> None:
    for ol in soup.find_all("ol"):
        for number, li in enumerate(ol.find_all("li", recursive=False), _list_start(ol)):
            li.insert(0, f"{number}. ")
    for li in soup.find_all("li"):
        if li.parent is None or li.parent.name != "ol":
            li.insert(0, "- ")


def _html_to_text(raw: str, citation_policy: CitationPolicy) -> str:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        soup = BeautifulSoup(raw, "html.parser")

    if citation_policy is CitationPolicy.STRIP:
        for citation in soup.select(CITATION_SELECTOR):
            citation.decompose()
        _strip_inline_citations(soup)

    for br in soup.find_all("br"):
        br.replace_with("\n")
    _mark_list_items(soup)
    for block in soup.find_all(BLOCK_TAGS):
        block.append("\n")

    return soup.get_text()


def clean_response(
    raw: Optional[str], citation_policy: CitationPolicy = CitationPolicy.STRIP
) -> Optional[str]:
    """Convert a captured reply into plain text.

    None passes through. A conversion that leaves no text is logged and
    returns None instead of raising. Code inside ``pre``/``code`` is kept
    verbatim under either citation policy.
    """
    if raw is None:
        return None

    text = _html_to_text(raw, citation_policy)

    lines = [line.rstrip() for line in text.splitlines()]
    text = EXCESS_BLANK_LINES.sub("\n\n", "\n".join(lines)).strip()

    if not text:
        logger.error("⚠️ Failed to extract text content from the captured response.")
        return None

    logger.debug(f"🎯 Cleaned response ({len(text)} chars)")
    return text
