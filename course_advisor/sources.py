import logging
import os

import requests

from course_advisor.diagnostics import SourceUnreadable

log = logging.getLogger(__name__)

HEADERS = {"User-Agent": "Mozilla/5.0"}
DEFAULT_TIMEOUT = 10
DEFAULT_ENCODING = "utf-8"


def is_url(source):
    return isinstance(source, str) and source.strip().lower().startswith(("http://", "https://"))


def fetch_lines(url, timeout=DEFAULT_TIMEOUT, encoding=DEFAULT_ENCODING):
    try:
        resp = requests.get(url, headers=HEADERS, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        log.debug("could not fetch %s: %s", url, e)
        raise SourceUnreadable(url, e) from e

    # requests falls back to ISO-8859-1 for text/* without a charset
    if "charset" not in resp.headers.get("Content-Type", "").lower():
        resp.encoding = encoding
    return resp.text.splitlines()


def read_file_lines(path, encoding=DEFAULT_ENCODING):
    try:
        with open(path, encoding=encoding) as f:
            return f.readlines()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        log.debug("could not read %s: %s", path, e)
        raise SourceUnreadable(path, e) from e


def read_lines(source, timeout=DEFAULT_TIMEOUT, encoding=DEFAULT_ENCODING):
    """Read every line of a path or http(s) URL. Raises SourceUnreadable."""
    if is_url(source):
        return fetch_lines(source.strip(), timeout=timeout, encoding=encoding)
    return read_file_lines(source, encoding=encoding)


def line_reader(source, timeout=DEFAULT_TIMEOUT, encoding=DEFAULT_ENCODING):
    """Return a callable giving the source's lines from the start on every call.

    Paths and URLs are re-read on each call. Any other iterable of lines is
    taken as in-memory content and materialized once.
    """
    if isinstance(source, (str, os.PathLike)):
        return lambda: read_lines(source, timeout=timeout, encoding=encoding)
    if isinstance(source, bytes):
        raise TypeError("byte strings are not a line source; decode first")
    lines = list(source)
    return lambda: lines
