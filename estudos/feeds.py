"""Parse RSS feeds into dataclasses."""

from __future__ import annotations

import sys
import urllib.request
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

DEFAULT_FEED_URL = "http://pizzadedados.com/feed.xml"
SEPARATOR = "-=-=-=-=-=-=-=-=-=-=-=-=-=-=-"


@dataclass
class Item:
    """One post of a feed."""

    title: str = ""
    link: str = ""
    description: str = ""
    content: str = ""
    pub_date: str = ""
    comments: str = ""


@dataclass
class Feed:
    """The channel of an RSS document and its items."""

    version: str = ""
    title: str = ""
    link: str = ""
    description: str = ""
    pub_date: str = ""
    items: list[Item] = field(default_factory=list)


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _text(element: ET.Element) -> str:
    return (element.text or "") + "".join(child.tail or "" for child in element)


def _child_text(parent: ET.Element, name: str) -> str:
    for child in parent:
        if _local(child.tag) == name:
            return _text(child)
    return ""


def _parse_item(element: ET.Element) -> Item:
    return Item(
        title=_child_text(element, "title"),
        link=_child_text(element, "link"),
        description=_child_text(element, "description"),
        content=_child_text(element, "encoded"),
        pub_date=_child_text(element, "pubDate"),
        comments=_child_text(element, "comments"),
    )


def parse_rss(data: bytes | str) -> Feed:
    """Parse an RSS document; raises ValueError if it is not well-formed RSS."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as error:
        raise ValueError(f"invalid XML: {error}") from None
    if _local(root.tag) != "rss":
        raise ValueError(f"expected element type <rss> but have <{_local(root.tag)}>")

    feed = Feed(version=root.get("version", ""))
    channels = [child for child in root if _local(child.tag) == "channel"]
    for name, attribute in (
        ("title", "title"),
        ("link", "link"),
        ("description", "description"),
        ("pubDate", "pub_date"),
    ):
        for channel in channels:
            if any(_local(child.tag) == name for child in channel):
                setattr(feed, attribute, _child_text(channel, name))
                break
    for channel in channels:
        feed.items.extend(_parse_item(child) for child in channel if _local(child.tag) == "item")
    return feed


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    url = args[0] if args else DEFAULT_FEED_URL
    try:
        with urllib.request.urlopen(url, timeout=30) as response:
            body = response.read()
    except OSError as error:
        print(error)
        return 1
    print(body.decode("utf-8", errors="replace"))
    print(SEPARATOR)
    try:
        feed = parse_rss(body)
    except ValueError as error:
        print(error)
        return 1
    for index, item in enumerate(feed.items):
        print(index, item.title)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())