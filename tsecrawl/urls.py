"""URL parsing, dot-segment removal, relative resolution and normalization."""

from dataclasses import dataclass
from typing import Optional

INTERNAL_URL_PREFIX = "https://thayer.github.io/engs50"

# Extensions a page must carry, if it has one, to be considered html.
VALID_EXTENSIONS = ("html", "jsp", "php")

_SCHEME_DELIMITERS = ":/?#"


@dataclass(frozen=True)
class ParsedURL:
    """The parts of an absolute URL; each part keeps its own delimiters."""

    scheme: str
    host: str
    path: str
    user: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None

    def __str__(self) -> str:
        return "".join(
            part
            for part in (self.scheme, self.user, self.host, self.path, self.query, self.fragment)
            if part
        )


def _first_of(text: str, chars: str, start: int = 0) -> int:
    """Index of the first character of text[start:] found in chars, or -1."""
    return next((i for i in range(start, len(text)) if text[i] in chars), -1)


def parse_url(url: str) -> ParsedURL:
    """Split an absolute URL into its parts, lowercasing scheme and host.

    Raises ValueError if the URL is not absolute or cannot be split.
    """
    scheme_end = _first_of(url, _SCHEME_DELIMITERS)
    if scheme_end < 0 or url[scheme_end] != ":":
        raise ValueError(f"not an absolute url: {url!r}")
    scheme_end += 1
    if url.startswith("//", scheme_end):
        scheme_end += 2
    scheme = url[:scheme_end].lower()

    user: Optional[str] = None
    user_end = _first_of(url, "@/", scheme_end)
    if user_end >= 0 and url[user_end] == "@":
        user_end += 1
        user = url[scheme_end:user_end]
        host_begin = user_end
    else:
        host_begin = scheme_end

    slash = url.find("/", scheme_end)
    host_end = slash if slash >= 0 else len(url)
    if host_end < host_begin:
        raise ValueError(f"cannot locate host in url: {url!r}")
    host = url[host_begin:host_end].lower()

    path_end = _first_of(url, "?#", scheme_end)
    if path_end < 0:
        path_end = len(url)
    if path_end < host_end:
        raise ValueError(f"query or fragment precedes the path in url: {url!r}")
    path = url[host_end:path_end]

    fragment: Optional[str] = None
    fragment_begin = url.find("#", scheme_end)
    if fragment_begin >= 0:
        fragment = url[fragment_begin:]

    query: Optional[str] = None
    query_begin = url.find("?", scheme_end)
    if query_begin >= 0:
        if fragment_begin < 0:
            query = url[query_begin:]
        elif query_begin < fragment_begin:
            query = url[query_begin:fragment_begin]

    return ParsedURL(scheme=scheme, host=host, path=path, user=user, query=query, fragment=fragment)


def _drop_last_segment(output: str) -> str:
    return output[: max(output.rfind("/"), 0)]


def remove_dot_segments(path: str) -> str:
    """Remove '.' and '..' segments from a path as RFC 3986 section 5.2.4 describes."""
    remaining = path
    output = ""
    while remaining:
        if remaining.startswith("./"):
            remaining = remaining[2:]
        elif remaining.startswith("../"):
            remaining = remaining[3:]
        elif remaining.startswith("/./"):
            remaining = remaining[2:]
        elif remaining == "/.":
            remaining = "/"
        elif remaining.startswith("/../"):
            remaining = remaining[3:]
            output = _drop_last_segment(output)
        elif remaining == "/..":
            remaining = "/"
            output = _drop_last_segment(output)
        elif remaining in (".", ".."):
            remaining = ""
        else:
            cut = remaining.find("/", 1)
            if cut < 0:
                cut = len(remaining)
            output += remaining[:cut]
            remaining = remaining[cut:]
    return output


def _base_directory(path: str) -> str:
    """The path up to, not including, its right-most '/', unless that is its first character."""
    slash = path.rfind("/")
    return path[:slash] if slash > 0 else ""


def resolve_relative(base: str, rel: Optional[str]) -> str:
    """Resolve rel against the absolute URL base; the base query and fragment are dropped.

    Raises ValueError if base cannot be parsed.
    """
    parsed = parse_url(base)
    prefix = parsed.scheme + (parsed.user or "") + parsed.host
    if rel is None:
        return prefix + _base_directory(parsed.path)
    if rel.startswith("/"):
        return prefix + rel
    return prefix + _base_directory(parsed.path) + "/" + rel


def _has_valid_extension(path: str) -> bool:
    dot = path.rfind(".")
    slash = path.rfind("/")
    if dot < 0 or slash < 0 or dot < slash:
        return True
    extension = path[dot + 1 :].lower()
    if not extension:
        return True
    return any(extension.startswith(valid) for valid in VALID_EXTENSIONS)


def normalize_url(url: str) -> str:
    """Return url with scheme and host lowercased and dot segments removed.

    Raises ValueError if url cannot be parsed or names a file unlikely to hold html.
    """
    parsed = parse_url(url)
    if parsed.path and not _has_valid_extension(parsed.path):
        raise ValueError(f"url does not refer to an html page: {url!r}")
    return str(
        ParsedURL(
            scheme=parsed.scheme,
            user=parsed.user,
            host=parsed.host,
            path=remove_dot_segments(parsed.path),
            query=parsed.query,
            fragment=parsed.fragment,
        )
    )


def is_internal_url(url: str) -> bool:
    """True if url normalizes and then begins with the internal prefix."""
    try:
        normalized = normalize_url(url)
    except ValueError:
        return False
    return normalized.startswith(INTERNAL_URL_PREFIX)