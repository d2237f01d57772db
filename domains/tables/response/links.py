"""Link extraction for table cells.

Collects markdown links and bare URLs so renderers can list them next to the
table, where they stay clickable. The list is deduplicated on a normalised URL
key: case-folded, scheme and leading "www." removed, trailing slashes removed.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional
from urllib.parse import urlsplit


MARKDOWN_LINK = re.compile(r'\[([^\]]+)\]\(([^)]*)\)')
BARE_URL = re.compile(r'https?://[^\s<>]+')
URL_TRAILING_PUNCT = '.,;:!?\'"'

LINK_MARKER = '🔗'


@dataclass(frozen=True)
class LinkEntry:
    label: str
    url: str


def normalize_url(url: str) -> str:
    """Key used to decide whether two URLs point to the same place."""
    key = url.strip().lower()
    key = re.sub(r'^https?://', '', key)
    if key.startswith('www.'):
        key = key[4:]
    return key.rstrip('/')


def url_label(url: str) -> str:
    """Hostname without www. for bare URLs, or the URL itself."""
    try:
        host = urlsplit(url).hostname
    except ValueError:
        host = None
    if not host:
        return url
    return host[4:] if host.startswith('www.') else host


def _is_listable(url: str) -> bool:
    url = url.strip()
    return bool(url) and not url.startswith('#')


def resolve_markdown_links(text: str) -> str:
    """Replace [label](url) with just its label."""
    if not text or '](' not in text:
        return text
    return MARKDOWN_LINK.sub(lambda m: m.group(1), text)


def find_bare_urls(text: str) -> list[str]:
    """Bare http(s) URLs, with sentence punctuation trimmed off the end."""
    urls = []
    for match in BARE_URL.finditer(text or ''):
        url = match.group(0).rstrip(URL_TRAILING_PUNCT)
        if url:
            urls.append(url)
    return urls


class LinkCollector:
    """Ordered, deduplicated link list built up across many cells.

    First label seen for a URL wins.
    """

    def __init__(self):
        self._links: list[LinkEntry] = []
        self._keys: set[str] = set()

    def add(self, label: str, url: str) -> bool:
        key = normalize_url(url)
        if not key or key in self._keys:
            return False
        self._keys.add(key)
        self._links.append(LinkEntry(label=label, url=url.strip()))
        return True

    def collect(self, text: str) -> str:
        """Record the links in text and return it with markdown links resolved.

        Bare URLs are left in place; only their target is recorded.
        """
        if not text:
            return text or ''

        for match in MARKDOWN_LINK.finditer(text):
            label, url = match.group(1), match.group(2)
            if _is_listable(url):
                self.add(label, url)

        resolved = resolve_markdown_links(text)
        for url in find_bare_urls(resolved):
            self.add(url_label(url), url)
        return resolved

    @property
    def links(self) -> list[LinkEntry]:
        return list(self._links)

    def __len__(self) -> int:
        return len(self._links)


def extract_links(texts: Iterable[Optional[str]]) -> list[LinkEntry]:
    """Deduplicated links from a sequence of cell strings, in first-seen order."""
    collector = LinkCollector()
    for text in texts:
        collector.collect(text or '')
    return collector.links


def format_link_lines(links: Iterable[LinkEntry], marker: str = LINK_MARKER) -> list[str]:
    """One markdown link per line, prefixed with the link marker."""
    return [f"{marker} [{link.label}]({link.url})" for link in links]
