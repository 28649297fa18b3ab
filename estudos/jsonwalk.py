"""Recursive walks over decoded JSON: limit checks and word counting."""

from __future__ import annotations

import argparse
import json
import sys
import urllib.parse
import urllib.request
from collections.abc import Iterable, Mapping
from typing import Any

WIKIPEDIA_URL = "https://pt.wikipedia.org/w/api.php?action=opensearch&format=json&search="
DEFAULT_SEARCH = "Go_(linguagem_de_programação)"
DEFAULT_PAYLOAD = "../payload.json"


def check_map(payload: Mapping[str, Any]) -> bool:
    """True if this object or any nested one has ``Value`` below its ``Limit``."""
    if "Limit" in payload and "Value" in payload:
        if payload["Value"] < payload["Limit"]:
            return True
    for value in payload.values():
        if isinstance(value, list) and check_list(value):
            return True
        if isinstance(value, dict) and check_map(value):
            return True
    return False


def check_list(items: Iterable[Any]) -> bool:
    """True if any object nested in ``items`` has ``Value`` below its ``Limit``."""
    for value in items:
        if isinstance(value, list) and check_list(value):
            return True
        if isinstance(value, dict) and check_map(value):
            return True
    return False


def count_words(items: Iterable[Any], counts: dict[str, int] | None = None) -> dict[str, int]:
    """Count space-separated words in every string nested in ``items``.

    Values that are neither strings nor lists are printed with their type.
    """
    if counts is None:
        counts = {}
    for value in items:
        if isinstance(value, str):
            for word in value.split(" "):
                counts[word] = counts.get(word, 0) + 1
        elif isinstance(value, list):
            count_words(value, counts)
        else:
            print(value, type(value).__name__)
    return counts


def _check_payload(path: str) -> int:
    with open(path, encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError("payload must be a JSON object")
    if check_map(payload):
        print("Um ou mais itens abaixo do limite")
    print("fim")
    return 0


def _wikipedia(search: str) -> int:
    url = WIKIPEDIA_URL + urllib.parse.quote(search)
    with urllib.request.urlopen(url, timeout=30) as response:
        data = json.loads(response.read())
    if not isinstance(data, list):
        raise ValueError("unexpected response: expected a JSON array")
    for word, count in count_words(data).items():
        print(word, count)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Walk JSON documents recursively.")
    sub = parser.add_subparsers(dest="command", required=True)
    p_limit = sub.add_parser("limite", help="check Value/Limit pairs in a payload file")
    p_limit.add_argument("path", nargs="?", default=DEFAULT_PAYLOAD)
    p_wiki = sub.add_parser("wikipedia", help="count words in a search result")
    p_wiki.add_argument("search", nargs="?", default=DEFAULT_SEARCH)
    args = parser.parse_args(argv)
    try:
        if args.command == "limite":
            return _check_payload(args.path)
        return _wikipedia(args.search)
    except (OSError, ValueError, TypeError) as error:
        print(error)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())