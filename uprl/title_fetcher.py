#===============================================================================
#  UpRL | title_fetcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Fetches a web page and returns the text of its <html><head><title>.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup

from .errors import FetchFailure

# NOTE:
# - One GET per call: no retries, default redirects, no timeout unless the caller sets one.
# - Every failure comes out as FetchFailure; callers don't need the sub-cause.

log = logging.getLogger(__name__)

TITLE_SELECTOR = "html > head > title"


def _is_html(content_type: str) -> bool:
    # Missing header: let the parser decide
    if not content_type:
        return True
    return "html" in content_type.lower()


def parse_title(markup) -> str:
    """Extract the <html><head><title> text from an HTML document.

    Whitespace runs are collapsed and the result is stripped. Raises
    FetchFailure when the element is absent.
    """
    soup = BeautifulSoup(markup, "html.parser")
    node = soup.select_one(TITLE_SELECTOR)
    if node is None:
        raise FetchFailure("No <title> element under <html><head>")
    return " ".join(node.get_text().split())


def fetch_title(url: str, session=None, timeout: Optional[float] = None) -> str:
    """GET `url` and return its HTML title."""
    http = session or requests
    try:
        r = http.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.exceptions.HTTPError as e:
        raise FetchFailure(f"HTTP error: {e}") from e
    except requests.exceptions.RequestException as e:
        raise FetchFailure(f"Network error: {e}") from e
    except ValueError as e:
        # urllib3 raises LocationParseError (a ValueError) for hosts like "a..b.com"
        raise FetchFailure(f"Invalid URL: {e}") from e

    content_type = r.headers.get("Content-Type", "")
    if not _is_html(content_type):
        raise FetchFailure(f"Not an HTML page ({content_type})")

    title = parse_title(r.content)
    log.debug("Fetched title %r from %s", title, url)
    return title
