import json
import sys
import threading
import zipfile
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from estudos import helper as helper_module
from estudos import launcher


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        body = self.server.routes.get(self.path)
        if body is None:
            self.send_error(404)
            return
        self.send_response(200)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    httpd.routes = {}
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    try:
        yield httpd, f"http://127.0.0.1:{httpd.server_address[1]}"
    finally:
        httpd.shutdown()
        httpd.server_close()


def test_parse_version_zero():
    assert launcher.parse_version("0.0.0") == 0


def test_parse_version_orders_versions():
    assert launcher.parse_version("1.2.3") < launcher.parse_version("1.10.0")
    assert launcher.parse_version("1.9.9999") < launcher.parse_version("2.0.0")
    assert launcher.parse_version("0.0.2") > launcher.parse_version("0.0.1")


@pytest.mark.parametrize("version", ["1.2", "1.2.3.4", "a.b.c", "", "1..3"])
def test_parse_version_rejects_bad_format(version):
    with pytest.raises(ValueError):
        launcher.parse_version(version)


def test_helper_names():
    assert launcher.helper_names("win32") == ("helper.exe", "helper_windows.zip")
    assert launcher.helper_names("linux") == ("helper", "helper_linux.zip")
    with pytest.raises(ValueError):
        launcher.helper_names("plan9")


def test_load_config_missing_file_is_empty(tmp_path):
    assert launcher.load_config(tmp_path) == {}


def test_load_config_reads_object(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"helper_version": "1.0.0"}))
    assert launcher.load_config(tmp_path) == {"helper_version": "1.0.0"}


def test_load_config_rejects_invalid_json(tmp_path):
    (tmp_path / "config.json").write_text("{not json")
    with pytest.raises(ValueError):
        launcher.load_config(tmp_path)


def test_local_helper_version():
    assert launcher.local_helper_version({}) == launcher.parse_version("0.0.0")
    assert launcher.local_helper_version({"helper_version": "1.2.3"}) == launcher.parse_version(
        "1.2.3"
    )
    with pytest.raises(ValueError):
        launcher.local_helper_version({"helper_version": 3})


def test_server_helper_version(server):
    httpd, url = server
    httpd.routes["/version.json"] = json.dumps({"helper_version": "2.0.1"}).encode()
    assert launcher.server_helper_version(url) == (launcher.parse_version("2.0.1"), "2.0.1")


def test_server_helper_version_without_field(server):
    httpd, url = server
    httpd.routes["/version.json"] = b"{}"
    with pytest.raises(ValueError):
        launcher.server_helper_version(url)


def test_download_new_version(server, tmp_path):
    httpd, url = server
    httpd.routes["/helper_linux.zip"] = b"archive bytes"
    path = launcher.download_new_version(url, tmp_path, "helper_linux.zip")
    assert path == tmp_path / "helper_linux.zip"
    assert path.read_bytes() == b"archive bytes"


def test_download_new_version_missing(server, tmp_path):
    _, url = server
    with pytest.raises(OSError):
        launcher.download_new_version(url, tmp_path, "helper_linux.zip")


def test_unzip_round_trip(tmp_path):
    archive = tmp_path / "helper.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("helper", b"new helper")
        zf.writestr("sub/data.txt", b"data")
    dest = tmp_path / "tmp_helper"
    launcher.unzip(archive, dest)
    assert (dest / "helper").read_bytes() == b"new helper"
    assert (dest / "sub" / "data.txt").read_bytes() == b"data"


def test_unzip_rejects_escaping_paths(tmp_path):
    archive = tmp_path / "evil.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("../evil.txt", b"x")
    with pytest.raises(ValueError):
        launcher.unzip(archive, tmp_path / "out")
    assert not (tmp_path / "evil.txt").exists()


def test_move_new_version(tmp_path):
    (tmp_path / "helper").write_text("old")
    (tmp_path / "tmp_helper").mkdir()
    (tmp_path / "tmp_helper" / "helper").write_text("new")
    result = launcher.move_new_version(tmp_path, "helper")
    assert result == tmp_path / "helper"
    assert result.read_text() == "new"
    assert not (tmp_path / "tmp_helper" / "helper").exists()


@pytest.mark.parametrize(
    ("line", "expected"),
    [("ready", "ok\n"), ("ping", "pong\n"), ("bye", None), ("pong", None)],
)
def test_reply_for(line, expected):
    assert launcher.reply_for(line) == expected


def test_helper_process_write_before_start():
    process = launcher.HelperProcess([sys.executable, helper_module.__file__])
    with pytest.raises(RuntimeError):
        process.write("quit\n")


def test_helper_process_talks_to_helper():
    process = launcher.HelperProcess([sys.executable, helper_module.__file__])
    process.start()
    process.write("quit\n")
    assert process.wait() == 0
    assert process.received[0] == "ready"
    assert "bye" in process.received


def test_helper_process_start_failure(tmp_path):
    process = launcher.HelperProcess([tmp_path / "missing-helper"])
    with pytest.raises(OSError):
        process.start()


def test_helper_process_cannot_start_twice():
    process = launcher.HelperProcess([sys.executable, helper_module.__file__])
    process.start()
    try:
        with pytest.raises(RuntimeError):
            process.start()
    finally:
        process.write("quit\n")
        assert process.wait() == 0