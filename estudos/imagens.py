"""Extract image sources from HTML with a regular expression."""

from __future__ import annotations

import re
import sys

_IMG_SRC = re.compile(r"""<img[^>]+\bsrc=["']([^"']+)["']""")

SAMPLE_HTML = """<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<title>Titulo</title>
</head>

<body>
<img src='imagem1.jpg'>
<img src="imagem2.jpg">
</body>

</html>"""


def find_images(html: str) -> list[str]:
    """Return the ``src`` of every ``img`` tag, in document order."""
    return _IMG_SRC.findall(html)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        with open(args[0], encoding="utf-8") as handle:
            html = handle.read()
    else:
        html = SAMPLE_HTML
    for index, source in enumerate(find_images(html)):
        print(index, source)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())