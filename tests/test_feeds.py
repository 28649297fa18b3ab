import pytest

from estudos import feeds

SAMPLE = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:content="http://example.com/content/">
<channel>
<title>Pizza</title>
<link>https://example.com/</link>
<description>Um podcast</description>
<pubDate>Mon, 01 Jan 2018 10:00:00 GMT</pubDate>
<item>
<title>Episodio 1</title>
<link>https://example.com/1</link>
<description>primeiro</description>
<content:encoded><![CDATA[<p>completo</p>]]></content:encoded>
<pubDate>Tue, 02 Jan 2018 10:00:00 GMT</pubDate>
<comments>https://example.com/1#comments</comments>
</item>
<item>
<title>Episodio 2</title>
</item>
</channel>
</rss>"""


def test_parse_channel_fields():
    feed = feeds.parse_rss(SAMPLE)
    assert feed.version == "2.0"
    assert feed.title == "Pizza"
    assert feed.link == "https://example.com/"
    assert feed.description == "Um podcast"
    assert feed.pub_date == "Mon, 01 Jan 2018 10:00:00 GMT"


def test_parse_items():
    feed = feeds.parse_rss(SAMPLE)
    assert [item.title for item in feed.items] == ["Episodio 1", "Episodio 2"]
    first = feed.items[0]
    assert first.link == "https://example.com/1"
    assert first.description == "primeiro"
    assert first.content == "<p>completo</p>"
    assert first.pub_date == "Tue, 02 Jan 2018 10:00:00 GMT"
    assert first.comments == "https://example.com/1#comments"


def test_missing_item_fields_are_empty():
    second = feeds.parse_rss(SAMPLE).items[1]
    assert second == feeds.Item(title="Episodio 2")


def test_parse_from_text():
    feed = feeds.parse_rss('<rss version="0.91"><channel><title>T</title></channel></rss>')
    assert feed.version == "0.91"
    assert feed.title == "T"
    assert feed.items == []


def test_wrong_root_element():
    with pytest.raises(ValueError, match="rss"):
        feeds.parse_rss(b"<feed><title>x</title></feed>")


def test_malformed_xml():
    with pytest.raises(ValueError):
        feeds.parse_rss(b"<rss><channel>")


def test_empty_document():
    with pytest.raises(ValueError):
        feeds.parse_rss(b"")