"""Scrape the latest headlines from a news listing page."""

from __future__ import annotations

import random
import sys
import time
import urllib.request
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

DEFAULT_URL = "https://noticias.uol.com.br/ultimas/index.htm"


@dataclass
class News:
    """One headline of the listing."""

    description: str = ""
    image_url: str = ""
    source: str = ""
    time: str = ""
    title: str = ""
    url: str = ""


def _text(anchor: Tag, selector: str) -> str:
    return "".join(element.get_text() for element in anchor.select(selector))


def _attr(value: object) -> str:
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def parse_news(html: str | bytes) -> list[News]:
    """Extract every linked headline inside ``.thumbnail-standard-wrapper`` blocks."""
    soup = BeautifulSoup(html, "html.parser")
    items: list[News] = []
    for anchor in soup.select(".thumbnail-standard-wrapper a"):
        news = News()
        if anchor.has_attr("href"):
            news.url = _attr(anchor["href"])
        image = anchor.select_one(".thumb-layer img")
        if image is not None and image.has_attr("src"):
            news.image_url = _attr(image["src"])
        news.source = _text(anchor, ".thumb-caption .thumb-kicker")
        news.title = _text(anchor, ".thumb-caption .thumb-title")
        news.description = _text(anchor, ".thumb-caption .thumb-description")
        news.time = _text(anchor, ".thumb-caption .thumb-time")
        items.append(news)
    return items


def fetch_latest(url: str = DEFAULT_URL) -> list[News]:
    """Download the listing page, after a short random pause, and parse it."""
    time.sleep(random.randrange(5))
    with urllib.request.urlopen(url, timeout=30) as response:
        if response.status != 200:
            raise RuntimeError(f"status code error: {response.status} {response.reason}")
        return parse_news(response.read())


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    url = args[0] if args else DEFAULT_URL
    try:
        latest = fetch_latest(url)
    except (OSError, RuntimeError) as error:
        print(error, file=sys.stderr)
        return 1
    for index, news in enumerate(latest, start=1):
        print(f"Notícia {index}\n {news}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())