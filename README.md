# tsecrawl

The building blocks of a tiny search-engine crawler, plus a small
trapezoidal-integration exercise and a list of cars. Everything is pure
Python with no third-party dependencies.

## What is inside

- `tsecrawl.queue.Queue`: a first-in, first-out queue. `put`, `get`
  (returns `None` when empty), `apply`, `search` and `remove` by a
  predicate `searchfn(element, key)`, and `concat`, which moves every
  element of another queue onto this one and leaves the other empty
  (concatenating a queue with itself raises `ValueError`). Queues support
  `len()` and iteration, and may be built from an iterable.
- `tsecrawl.hashtable`: `super_fast_hash(data, tablesize)` (Paul Hsieh's
  SuperFastHash of a `str` or `bytes`, reduced modulo the table size) and
  `HashTable(size)`, a fixed-size table whose buckets are queues. `put`
  stores an element under a key; `search` and `remove` look only in the
  key's bucket, with a predicate; `apply` and iteration visit every
  element. An empty key finds nothing; a size below 1 raises `ValueError`.
- `tsecrawl.cars`: `Car(plate, price, year)` (a plate longer than 9
  characters raises `ValueError`) and `CarList`, a last-in, first-out list
  with `put`, `get`, `apply`, `remove(plate)`, `len()` and iteration.
- `tsecrawl.integrate`: trapezoidal integration. `integrate_n(f, a, b, n)`
  uses `n` strips; `integrate_p(f, a, b, p)` doubles the strips, starting
  from one, until the result is within `p` of the exact integral of
  `polynomial` (2x² + 9x + 4), and returns an `Integral(value, strips)`.
  Because the target is that exact integral, `integrate_p` is only
  meaningful for `polynomial`. Bounds with `b < a` raise `ValueError`.
- `tsecrawl.urls`: `parse_url` (into a `ParsedURL`), `remove_dot_segments`,
  `resolve_relative`, `normalize_url`, `is_internal_url` and the
  `INTERNAL_URL_PREFIX` constant.
- `tsecrawl.webpage`: `WebPage(url, depth, html)` with `fetch()`, `words()`
  and `urls()`, and the `FetchError` exception.
- `tsecrawl.crawler`: `page_save(page, page_id, dirname)`,
  `crawl(seed, pages_dir)` and the `main` behind `tsecrawl-crawl`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### tsecrawl-crawl

Fetches the seed page, saves it as file `1` in the pages directory
(a failure to save is logged as a warning, not fatal), then collects every
link on the page that normalises to a URL beginning with
`INTERNAL_URL_PREFIX`, each distinct URL once, in the order found, and
prints each as `URL: <url>, Depth: 1`.

```
tsecrawl-crawl
tsecrawl-crawl --seed https://thayer.github.io/engs50/ --pages-dir ./pages
```

Options:

- `--seed`: the URL to start from (default `https://thayer.github.io/engs50/`).
- `--pages-dir`: where the seed page is saved (default `../pages`).

If the seed cannot be fetched it prints `Failed to fetch webpage` and
exits with status 1.

A saved page file holds four lines: the URL, the depth, the length of the
html, and the html itself.

### tsecrawl-integrate

Integrates `2x² + 9x + 4` over an interval with the trapezoid rule. The
bounds come first, then either `-n` and a number of strips (1 to 2³² − 1),
or `-p` and a precision greater than 0 and at most 1:

```
tsecrawl-integrate 0 1 -n 100
tsecrawl-integrate 0 1 -p 0.001
```

Each prints a line of the form `interval: [a-b], n: strips, result=value`.
Wrong arguments print a usage message to standard error and exit with
status 1.

## Using the library

A queue:

```python
from tsecrawl.queue import Queue

q = Queue()
for n in (10, 20, 30):
    q.put(n)

q.search(lambda element, key: element == key, 20)   # 20
q.remove(lambda element, key: element == key, 20)   # 20, now gone
q.get()                                              # 10
```

A hash table keyed by strings:

```python
from tsecrawl.hashtable import HashTable

visited = HashTable(107)
visited.put("https://example.com/a.html", "https://example.com/a.html")
visited.search(lambda element, key: element == key, "https://example.com/a.html")
```

A list of cars:

```python
from tsecrawl.cars import Car, CarList

cars = CarList()
cars.put(Car("TEST001", 10000.0, 2005))
cars.put(Car("TEST002", 20000.0, 2010))
cars.get()              # Car(plate='TEST002', ...)
cars.remove("TEST001")  # Car(plate='TEST001', ...)
```

Integration:

```python
from tsecrawl.integrate import integrate_n, integrate_p, polynomial

integrate_n(polynomial, 0.0, 1.0, 100)
result = integrate_p(polynomial, 0.0, 1.0, 0.001)
result.value, result.strips
```

URL handling:

```python
from tsecrawl.urls import normalize_url, remove_dot_segments, resolve_relative

remove_dot_segments("/path/.././file.html")   # "/file.html"
normalize_url("HTTP://www.EXAMPLE.com/path/.././file.html?name=val#top")
# "http://www.example.com/file.html?name=val#top"
resolve_relative("http://example.com/dir/page.html", "other.html")
# "http://example.com/dir/other.html"
```

Normalisation lower-cases the scheme and host and removes `.` and `..`
segments. It raises `ValueError` for a URL that is not absolute, or whose
last path segment has an extension not beginning with `html`, `jsp` or
`php`. `is_internal_url` returns `False` instead of raising.

Pages:

```python
from tsecrawl.webpage import WebPage

page = WebPage("http://example.com/", 0, '<p>Hello <a href="b.html">world</a></p>')
list(page.words())   # ["Hello", "world"]
list(page.urls())    # ["http://example.com/b.html"]
```

`words()` yields alphabetic runs outside `<...>` tags. `urls()` strips
whitespace from the html, then yields the targets of `<a ... href=...>`
tags: fragments are dropped, in-page `#` links and absolute links that are
not http(s) are skipped, and relative links are resolved against the page
URL. Both raise `ValueError` when the page has no html.

`fetch()` downloads the page with `urllib`, making up to three attempts
and pausing one second after each; it stores and returns the html, or
raises `FetchError` if every attempt fails.

## What it does not do

The crawler goes one level deep only: it fetches and saves the seed page
and lists the internal pages it links to, but it does not fetch, save or
follow those pages. There is no indexer and no query interface; saved
pages are plain files and nothing in the package reads them back.