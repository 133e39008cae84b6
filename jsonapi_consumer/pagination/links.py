"""Rewrite upstream JSON:API pagination links into application-local links.

The upstream ``links`` object points at API endpoints that need an
``Authorization`` header a browser cannot send, so a consuming application
keeps only the page number from each link and rebuilds the URL against its
own routes.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Mapping, Optional
from urllib.parse import parse_qs, urlsplit

from jsonapi_consumer.core.errors import MalformedPageLink

logger = logging.getLogger(__name__)

PageLinkSet = Mapping[str, Optional[str]]
UrlBuilder = Callable[[int], str]

DEFAULT_PAGE_PARAM = "page[number]"

# "prev" is the spelling used by the JSON:API format itself.
PAGER_RELATIONS: tuple[str, ...] = ("first", "previous", "prev", "next", "last")

_DIGITS = re.compile(r"[0-9]+")


def extract_page_number(url: str, param: str = DEFAULT_PAGE_PARAM) -> int:
    """Return the positive page number held by ``param`` in ``url``'s query."""
    query = parse_qs(urlsplit(url).query, keep_blank_values=True)
    values = query.get(param)
    if not values:
        raise MalformedPageLink(url, param)
    value = values[0].strip()
    if not _DIGITS.fullmatch(value):
        raise MalformedPageLink(url, param)
    try:
        number = int(value)
    except ValueError:
        # int() refuses digit strings past sys.get_int_max_str_digits().
        raise MalformedPageLink(url, param) from None
    if number < 1:
        raise MalformedPageLink(url, param)
    return number


class PaginationLinkTranslator:
    """Translate first/previous/next/last upstream links into local links."""

    def __init__(self, page_param: str = DEFAULT_PAGE_PARAM) -> None:
        self.page_param = page_param

    def translate(self, page_links: PageLinkSet, url_builder: UrlBuilder) -> dict[str, str]:
        """Return relation -> local URL for every pager relation present.

        Relations come back in first/previous/next/last order. Keys that are
        not pager relations (``self``, ``related``) and relations whose link
        is ``None`` are skipped.
        """
        pager: dict[str, str] = {}
        for relation in PAGER_RELATIONS:
            url = page_links.get(relation)
            if url is None:
                continue
            try:
                page_number = extract_page_number(url, self.page_param)
            except MalformedPageLink:
                logger.warning("Malformed %s page link: %s", relation, url)
                raise MalformedPageLink(url, self.page_param, relation=relation) from None
            pager[relation] = url_builder(page_number)
        return pager

    def __call__(self, page_links: PageLinkSet, url_builder: UrlBuilder) -> dict[str, str]:
        return self.translate(page_links, url_builder)
