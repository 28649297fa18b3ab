"""Zip archives: built in memory, written straight to disk, and extracted."""

from __future__ import annotations

import io
import os
import shutil
import zipfile
from collections.abc import Iterable
from pathlib import Path
from types import TracebackType


def _write_private(path: str | os.PathLike[str], data: bytes) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)


class MemoryArchive:
    """Builds a deflated zip archive entirely in memory."""

    def __init__(self) -> None:
        self._buffer = io.BytesIO()
        self._zip = zipfile.ZipFile(self._buffer, "w", compression=zipfile.ZIP_DEFLATED)

    def add(self, file_name: str, content: bytes) -> None:
        """Add a file with the given content."""
        self._zip.writestr(file_name, content)

    def save(self, zip_file: str | os.PathLike[str]) -> None:
        """Finish the archive and write it to ``zip_file`` (mode 0600)."""
        self._zip.close()
        _write_private(zip_file, self._buffer.getvalue())


class FileArchive:
    """Writes a deflated zip archive directly to a file as entries are added."""

    def __init__(self, file_name: str | os.PathLike[str]) -> None:
        self._file = open(file_name, "wb")
        self._zip = zipfile.ZipFile(self._file, "w", compression=zipfile.ZIP_DEFLATED)

    def add(self, file_name: str, content: bytes) -> None:
        """Add a file with the given content."""
        self._zip.writestr(file_name, content)

    def close(self) -> None:
        """Finish the archive and close the file."""
        try:
            self._zip.close()
        finally:
            self._file.close()

    def __enter__(self) -> FileArchive:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def compress_files(
    zip_path: str | os.PathLike[str], files: Iterable[str | os.PathLike[str]]
) -> list[tuple[str, int]]:
    """Deflate ``files`` into a new archive under their base names.

    Returns ``(name, original size)`` for each file, in order.
    """
    entries: list[tuple[str, int]] = []
    with zipfile.ZipFile(zip_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for file in files:
            path = Path(file)
            size = path.stat().st_size
            archive.write(path, arcname=path.name)
            entries.append((path.name, size))
    return entries


def extract_all(
    zip_path: str | os.PathLike[str], dest: str | os.PathLike[str] = "."
) -> list[Path]:
    """Extract every entry of the archive under ``dest``, keeping file modes."""
    dest_path = Path(dest)
    root = dest_path.resolve()
    extracted: list[Path] = []
    with zipfile.ZipFile(zip_path) as archive:
        for info in archive.infolist():
            target = dest_path / info.filename
            resolved = target.resolve()
            if resolved != root and root not in resolved.parents:
                raise ValueError(f"{info.filename}: illegal file path")
            if info.is_dir():
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            with archive.open(info) as source, open(target, "wb") as output:
                shutil.copyfileobj(source, output)
            mode = (info.external_attr >> 16) & 0o777
            if mode:
                os.chmod(target, mode)
            extracted.append(target)
    return extracted