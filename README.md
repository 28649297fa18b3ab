# estudos

A collection of small, self-contained study programs. Each module does one
job, can be imported as a library, and most come with a command-line entry
point.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Purpose | Command |
| --- | --- | --- |
| `estudos.bits` | nibble formatting, GSM 7-bit packing, bitwise operator table, UTF-8 byte view | `estudos-bits` |
| `estudos.imagens` | finds `img` sources in HTML | `estudos-imagens` |
| `estudos.checksum` | CRC-32 (IEEE) and CRC-64 (ECMA) | `estudos-checksum` |
| `estudos.derivacao` | HKDF-SHA256, PBKDF2-SHA256, HMAC-SHA256 and SHA-256 | `estudos-derivacao` |
| `estudos.utilidades` | closing a resource and printing, not raising, a failure | |
| `estudos.compactar` | writing and extracting zip archives | |
| `estudos.kvstore` | bucketed key-value store in an SQLite file | `estudos-kvstore` |
| `estudos.jsonwalk` | recursive walks over decoded JSON | `estudos-jsonwalk` |
| `estudos.feeds` | RSS feed parsing | `estudos-feeds` |
| `estudos.noticias` | scrapes headlines from a news listing page | `estudos-noticias` |
| `estudos.helper` | line-based ping/pong helper process | `estudos-helper` |
| `estudos.launcher` | starts a helper executable and replaces it with newer published versions | `estudos-launcher` |
| `estudos.aleatorio` | random integer in a half-open range | `estudos-aleatorio` |
| `estudos.fatorial` | recursive and memoised 64-bit factorials | `estudos-fatorial` |

## Commands

Bit demos (`ascii7` is the default; `binarios` shows the operator table for
60 and 13; `utf8` lists the bytes of a text):

```
estudos-bits ascii7 "teste de string"
estudos-bits binarios
estudos-bits utf8 "isto é um teste!"
```

Image sources in an HTML file (a built-in sample when no file is given):

```
estudos-imagens page.html
```

Checksums of a text (default `Isto é um teste`); the CRC-32 is compared with
`0xCF20B55`:

```
estudos-checksum
```

Key derivation and hashing:

```
estudos-derivacao hkdf --key secret --salt salt --info info
estudos-derivacao pbkdf2 --key password --salt salt --iter 1000
echo -n data | estudos-derivacao hmac --key 0011223344
echo -n data | estudos-derivacao sha256
```

Store and read back a value (database file defaults to `teste.db`):

```
estudos-kvstore teste.db
```

JSON walks: report whether any object in a payload file has `Value` below its
`Limit`, or count the words in a Wikipedia search result:

```
estudos-jsonwalk limite payload.json
estudos-jsonwalk wikipedia "Go_(linguagem_de_programação)"
```

Print an RSS feed and the titles of its items, or the headlines of a news page:

```
estudos-feeds https://example.com/feed.xml
estudos-noticias https://example.com/news
```

A random number with `10 <= n < 20` (no arguments: `0 <= n < 32767`; one
argument: the upper bound):

```
estudos-aleatorio 10 20
```

Factorial of 30 (or of the given number) by both strategies, with timings;
the memoised one accepts only numbers below 41:

```
estudos-fatorial 30
```

### Helper and launcher

`estudos-helper` prints `ready`, then `ping` every second; it answers `ping`
with `pong`, and `quit` with `bye` before exiting.

`estudos-launcher` runs the executable named `helper` (`helper.exe` on
Windows) found in the directory given by `-path` (default: the current
directory), answers its `ready` with `ok` and its `ping` with `pong`, and logs
its output. Every ten seconds it fetches `version.json` from `-url`; when the
published `helper_version` is newer than the one in `config.json`, it downloads
the helper archive, unpacks it, asks the running helper to quit, swaps in the
new executable, records the new version in `config.json` and starts it again.
With `-quit-after SECONDS` it instead runs the helper once and sends `quit`
after that many seconds.

```
estudos-launcher -path /opt/helper -url https://example.com/autoupdate
estudos-launcher -path . -quit-after 5
```

Only Linux and Windows helper names are known; on other platforms the
launcher exits with an error.

## As a library

```python
from estudos.checksum import crc32_ieee, crc64_ecma
from estudos.imagens import find_images
from estudos.bits import to_ascii7, format_bin

crc32_ieee("Isto é um teste")                             # 0xCF20B55
find_images("<img src='a.jpg'><img src=\"b.jpg\">")      # ['a.jpg', 'b.jpg']
format_bin(60)                                           # '0011-1100'
```

Zip archives:

```python
from estudos.compactar import MemoryArchive, FileArchive, compress_files, extract_all

archive = MemoryArchive()
archive.add("arquivo1.txt", b"conteudo arquivo 1")
archive.save("arquivos.zip")            # written with mode 0600

with FileArchive("direto.zip") as archive:
    archive.add("arquivo2.txt", b"conteudo arquivo 2")

compress_files("arquivo.zip", ["teste1.txt", "teste2.txt"])   # [(name, size), ...]
extract_all("arquivos.zip", "saida")   # entries leaving "saida" raise ValueError
```

Key-value store:

```python
from estudos.kvstore import KeyValueStore, BucketNotFoundError

with KeyValueStore("teste.db") as store:
    store.update("jobs", "testKey", b"test 123")
    store.view("jobs", "testKey")    # b"test 123"
    store.view("jobs", "missing")    # None
```

Only the `jobs` bucket exists; using any other bucket raises
`BucketNotFoundError`.

Feeds, news and JSON:

```python
from estudos.feeds import parse_rss
from estudos.noticias import parse_news
from estudos.jsonwalk import check_map, count_words

feed = parse_rss(xml_bytes)          # Feed with a list of Item; ValueError if not RSS
news = parse_news(html_text)         # list of News
check_map({"a": [{"Limit": 10, "Value": 3}]})   # True
count_words(["a b", ["a"]])                     # {'a': 2, 'b': 1}
```

## What this package does not do

It has no encryption ciphers (only key derivation, MACs and hashes), no HTTP
server or middleware, no login sessions, no socket echo servers or clients,
no spelling-alphabet tables, no exchange-rate or dictionary lookups and no
static-site generator. Storage is limited to the single-file SQLite key-value
store above.