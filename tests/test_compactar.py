import io
import zipfile

import pytest

from estudos.compactar import FileArchive, MemoryArchive, compress_files, extract_all

CONTENTS = {
    "arquivo1.txt": b"conteudo arquivo 1",
    "arquivo2.txt": b"conteudo arquivo 2",
    "arquivo3.txt": b"conteudo arquivo 3",
}


def _read_back(path):
    with zipfile.ZipFile(path) as archive:
        return {info.filename: archive.read(info) for info in archive.infolist()}, [
            info.compress_type for info in archive.infolist()
        ]


def test_memory_archive_round_trip(tmp_path):
    archive = MemoryArchive()
    for name, content in CONTENTS.items():
        archive.add(name, content)
    target = tmp_path / "arquivos.zip"
    archive.save(target)
    files, methods = _read_back(target)
    assert files == CONTENTS
    assert methods == [zipfile.ZIP_DEFLATED] * 3


def test_memory_archive_add_after_save_fails(tmp_path):
    archive = MemoryArchive()
    archive.add("a.txt", b"a")
    archive.save(tmp_path / "a.zip")
    with pytest.raises(ValueError):
        archive.add("b.txt", b"b")


def test_file_archive_round_trip(tmp_path):
    target = tmp_path / "arquivos.zip"
    archive = FileArchive(target)
    for name, content in CONTENTS.items():
        archive.add(name, content)
    archive.close()
    files, methods = _read_back(target)
    assert files == CONTENTS
    assert methods == [zipfile.ZIP_DEFLATED] * 3


def test_file_archive_context_manager(tmp_path):
    target = tmp_path / "ctx.zip"
    with FileArchive(target) as archive:
        archive.add("x.txt", b"xyz")
    files, _ = _read_back(target)
    assert files == {"x.txt": b"xyz"}


def test_file_archive_bad_path(tmp_path):
    with pytest.raises(OSError):
        FileArchive(tmp_path / "missing" / "a.zip")


def test_compress_and_extract_round_trip(tmp_path):
    source = tmp_path / "src"
    source.mkdir()
    paths = []
    for name, content in CONTENTS.items():
        path = source / name
        path.write_bytes(content)
        paths.append(path)
    zip_path = tmp_path / "arquivo.zip"
    entries = compress_files(zip_path, paths)
    assert entries == [(name, len(content)) for name, content in CONTENTS.items()]

    out = tmp_path / "out"
    extracted = extract_all(zip_path, out)
    assert [p.name for p in extracted] == list(CONTENTS)
    for path in extracted:
        assert path.read_bytes() == CONTENTS[path.name]


def test_compress_missing_file(tmp_path):
    with pytest.raises(OSError):
        compress_files(tmp_path / "a.zip", [tmp_path / "nope.txt"])


def test_extract_rejects_escaping_paths(tmp_path):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr("../evil.txt", b"x")
    zip_path = tmp_path / "evil.zip"
    zip_path.write_bytes(buffer.getvalue())
    dest = tmp_path / "dest"
    dest.mkdir()
    with pytest.raises(ValueError):
        extract_all(zip_path, dest)
    assert not (tmp_path / "evil.txt").exists()