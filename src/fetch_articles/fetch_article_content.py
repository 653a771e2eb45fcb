import logging
import re
from typing import Iterable, Optional

import requests
from lxml import etree
from lxml import html as lxml_html

from common.config import DEFAULT_CONTENT_SELECTORS, DEFAULT_USER_AGENT
from fetch_articles.models import NO_TITLE, ArticleContent, FetchError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10
DEFAULT_MAX_LENGTH = 4000

_WHITESPACE = re.compile(r"\s+")


def fetch_article_content(
    url: str,
    max_length: int = DEFAULT_MAX_LENGTH,
    timeout: int = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
    selectors: Iterable[str] = DEFAULT_CONTENT_SELECTORS,
) -> Optional[ArticleContent]:
    """
    Fetch an article page and extract its title and body text.

    Never raises. Network errors, timeouts, non-2xx responses and parse
    failures are logged with their cause and reported as None.
    """
    try:
        page = download_page(url, timeout=timeout, user_agent=user_agent)
        return extract_article(url, page, max_length=max_length, selectors=selectors)
    except FetchError as e:
        logger.warning("Error fetching %s: %s", url, e.reason)
    except Exception as e:
        logger.warning("Error fetching %s: unexpected %s: %s", url, type(e).__name__, e)
    return None


def download_page(url: str, timeout: int = DEFAULT_TIMEOUT, user_agent: str = DEFAULT_USER_AGENT) -> bytes:
    """GET the page body, raising FetchError on any transport or HTTP failure."""
    try:
        response = requests.get(
            url,
            timeout=timeout,
            headers={"User-Agent": user_agent},
        )
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise FetchError(url, f"timed out after {timeout}s") from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "unknown"
        raise FetchError(url, f"HTTP {status}") from e
    except requests.exceptions.RequestException as e:
        raise FetchError(url, f"network error: {e}") from e
    return response.content


def extract_article(
    url: str,
    page: bytes | str,
    max_length: int = DEFAULT_MAX_LENGTH,
    selectors: Iterable[str] = DEFAULT_CONTENT_SELECTORS,
) -> ArticleContent:
    """Parse HTML and build an ArticleContent, raising FetchError if it cannot be parsed."""
    try:
        tree = lxml_html.document_fromstring(page)
    except (etree.LxmlError, ValueError) as e:
        raise FetchError(url, f"parse error: {e}") from e

    for element in tree.xpath("//script | //style"):
        element.drop_tree()

    title = extract_title(tree)
    content = clean_content(extract_body_text(tree, selectors), max_length)
    return ArticleContent(url=url, title=title, content=content)


def extract_title(tree: lxml_html.HtmlElement) -> str:
    """First <h1>, then <title>, then the NO_TITLE sentinel."""
    for selector in ("h1", "title"):
        matches = tree.cssselect(selector)
        if matches:
            text = matches[0].text_content().strip()
            if text:
                return text
    return NO_TITLE


def extract_body_text(tree: lxml_html.HtmlElement, selectors: Iterable[str] = DEFAULT_CONTENT_SELECTORS) -> str:
    """
    Text of the first selector that matches anything, else the <body> text.

    Selectors are evaluated lazily and the first one with a non-empty match
    set wins, even if a later selector would match more text.
    """
    text = ""
    for selector in selectors:
        matches = tree.cssselect(selector)
        if matches:
            text = " ".join(m.text_content() for m in matches).strip()
            break

    if not text:
        bodies = tree.cssselect("body")
        root = bodies[0] if bodies else tree
        text = root.text_content().strip()

    return text


def clean_content(text: str, max_length: int) -> str:
    """Collapse whitespace and hard-cut to max_length characters."""
    text = _WHITESPACE.sub(" ", text).strip()
    return text[:max_length]
