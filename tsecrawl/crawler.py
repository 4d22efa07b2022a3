"""Fetch a seed page, save it, and collect the unseen internal pages it links to."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .hashtable import HashTable
from .queue import Queue
from .urls import INTERNAL_URL_PREFIX, normalize_url
from .webpage import FetchError, WebPage

SEED_URL = "https://thayer.github.io/engs50/"
PAGES_DIR = "../pages"
VISITED_TABLE_SIZE = 107

_log = logging.getLogger(__name__)


def page_save(page: WebPage, page_id: int, dirname: Union[str, Path]) -> Path:
    """Write page to dirname/page_id as url, depth, html length and html lines.

    Returns the path written; raises OSError if the file cannot be written.
    """
    path = Path(dirname) / str(page_id)
    html = page.html or ""
    with path.open("w", encoding="utf-8") as out:
        out.write(f"{page.url}\n{page.depth}\n{len(html)}\n{html}\n")
    return path


def _same_url(page: WebPage, url: str) -> bool:
    return page.url == url


def crawl(seed: str = SEED_URL, pages_dir: Union[str, Path] = PAGES_DIR) -> List[WebPage]:
    """Fetch seed, save it as page 1, and return its unseen internal links as pages.

    Links are normalized; each distinct one appears once, in the order found.
    Raises FetchError if the seed cannot be fetched.
    """
    page = WebPage(seed, 0)
    page.fetch()
    try:
        page_save(page, 1, pages_dir)
    except OSError as error:
        _log.warning("could not save %s: %s", seed, error)

    visited = HashTable(VISITED_TABLE_SIZE)
    visited.put(page, seed)
    queue = Queue()
    depth = page.depth + 1
    for url in page.urls():
        try:
            normalized = normalize_url(url)
        except ValueError:
            continue
        if not normalized.startswith(INTERNAL_URL_PREFIX):
            continue
        if visited.search(_same_url, normalized) is None:
            child = WebPage(normalized, depth)
            queue.put(child)
            visited.put(child, normalized)

    children = []
    while (child := queue.get()) is not None:
        children.append(child)
    return children


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Crawl one level from the seed and print the pages found."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", default=SEED_URL, help="URL to start from")
    parser.add_argument("--pages-dir", default=PAGES_DIR, help="directory for saved pages")
    args = parser.parse_args(argv)
    try:
        children = crawl(args.seed, args.pages_dir)
    except FetchError:
        print("Failed to fetch webpage")
        return 1
    for child in children:
        print(f"URL: {child.url}, Depth: {child.depth}")
    return 0


if __name__ == "__main__":
    sys.exit(main())