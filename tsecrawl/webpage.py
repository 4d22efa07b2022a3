"""A web page: its URL, crawl depth and html, with word and link extraction."""

import re
import time
import urllib.request
from dataclasses import dataclass
from typing import Iterator, Optional

from .urls import resolve_relative

USER_AGENT = "libcurl-agent/1.0"
MAX_TRIES = 3
RETRY_DELAY = 1.0
_TIMEOUT = 30.0

_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")
_WORD_OR_TAG = re.compile(r"<[^>]*>?|[A-Za-z]+")
_LINK_START = re.compile(r"<a", re.IGNORECASE | re.ASCII)
_HREF = re.compile(r"href=", re.IGNORECASE | re.ASCII)
_URL_DELIMITER = re.compile(r"[:/?#]")


class FetchError(Exception):
    """Raised when a page cannot be downloaded."""


def _download(request: urllib.request.Request) -> str:
    with urllib.request.urlopen(request, timeout=_TIMEOUT) as response:
        body = response.read()
        charset = response.headers.get_content_charset() or "utf-8"
    try:
        return body.decode(charset, errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


@dataclass
class WebPage:
    """A page to crawl: its URL, its depth in the crawl, and its html once known."""

    url: str
    depth: int = 0
    html: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.url, str):
            raise TypeError("url must be a string")
        if self.depth < 0:
            raise ValueError("depth must not be negative")

    def _require_html(self) -> str:
        if self.html is None:
            raise ValueError("page has no html")
        return self.html

    def fetch(self) -> str:
        """Download the page's html, trying a few times, and return it.

        Pauses between attempts to lighten the load on the server.
        Raises FetchError if every attempt fails.
        """
        request = urllib.request.Request(self.url, headers={"User-Agent": USER_AGENT})
        last_error: Optional[Exception] = None
        for _ in range(MAX_TRIES):
            try:
                html: Optional[str] = _download(request)
            except (OSError, ValueError) as error:
                last_error = error
                html = None
            time.sleep(RETRY_DELAY)
            if html is not None:
                self.html = html
                return html
        raise FetchError(f"could not fetch {self.url}: {last_error}") from last_error

    def words(self) -> Iterator[str]:
        """Yield the alphabetic words of the html, skipping anything inside <...>.

        Stops at an unclosed tag or at a tag that ends the document.
        """
        html = self._require_html()
        for match in _WORD_OR_TAG.finditer(html):
            token = match.group()
            if token.startswith("<"):
                if not token.endswith(">") or match.end() == len(html):
                    return
            else:
                yield token

    def urls(self) -> Iterator[str]:
        """Yield the http(s) links of the html as absolute URLs, fragments removed.

        Whitespace is removed from the html before parsing; relative links are
        resolved against the page URL. Raises ValueError if the page URL is
        needed and cannot be parsed.
        """
        html = _WHITESPACE.sub("", self._require_html())
        pos = 0
        while True:
            link = _LINK_START.search(html, pos)
            if link is None:
                return
            href = _HREF.search(html, link.start())
            if href is None:
                return
            pos = link.start() + 1

            tag_end = html.find(">", link.start())
            if 0 <= tag_end < href.start():
                continue

            start = href.end()
            if start < len(html) and html[start] in "'\"":
                end = html.find(html[start], start + 1)
                start += 1
            else:
                end = html.find(">", start)
            if end < 0:
                continue

            hash_at = html.find("#", start, end)
            if hash_at >= 0:
                end = hash_at
            if html.startswith("#", start):
                continue

            target = html[start:end]
            delimiter = _URL_DELIMITER.search(html, start)
            if delimiter is None or delimiter.group() != ":":
                url = resolve_relative(self.url, target)
            elif html[start:start + 4].lower() == "http":
                url = target
            else:
                continue
            pos = end
            yield url