"""Collects menu items from the restaurant's online menu page."""

from __future__ import annotations

import math
import re
from typing import Iterator, Optional

import httpx
from bs4 import BeautifulSoup, Tag

from hamburguer.domain import Item

MENU_URL = "https://potatosburger.menudino.com"

CATEGORY_SELECTOR = "#cardapio > section.cardapio-body > div > div.categories > div"
CARD_SELECTOR = ":scope div:nth-child(2) > div > div"
NAME_SELECTOR = ":scope a > div > div.media-body > div.name > span"
PRICE_SELECTOR = ":scope a > div > div.media-body > div.priceDescription > div"

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_price(text: str) -> float:
    """Turn a price such as 'R$ 25,90' into a number; 0.0 when it is not one."""
    cleaned = text.replace("R$ ", "").replace(",", ".")
    if not _NUMBER.fullmatch(cleaned):
        return 0.0
    value = float(cleaned)
    return value if math.isfinite(value) else 0.0


def _text_of(element: Tag, selector: str) -> str:
    matches = element.select(selector)
    if len(matches) != 1:
        raise ValueError(
            f"expected one element matching {selector!r}, found {len(matches)}"
        )
    return matches[0].get_text()


def _iter_items(soup: BeautifulSoup) -> Iterator[Item]:
    for category in soup.select(CATEGORY_SELECTOR):
        for card in category.select(CARD_SELECTOR):
            name = _text_of(card, NAME_SELECTOR)
            price = parse_price(_text_of(card, PRICE_SELECTOR))
            yield Item(name=name, price=price)


def parse_items(html: str) -> list[Item]:
    """Extract every menu item, in page order, from the menu page's HTML."""
    return list(_iter_items(BeautifulSoup(html, "html.parser")))


class ItemScraper:
    """Fetches the menu page and reads its items."""

    def __init__(
        self,
        url: str = MENU_URL,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = 30.0,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._client = client

    def scrape_items(self) -> list[Item]:
        if self._client is not None:
            response = self._client.get(self.url)
        else:
            with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
                response = client.get(self.url)
        response.raise_for_status()
        return parse_items(response.text)