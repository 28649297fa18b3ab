"""Run a helper process, answer it, and replace it when a newer version is published."""

from __future__ import annotations

import argparse
import contextlib
import json
import logging
import os
import shutil
import subprocess
import sys
import threading
import time
import urllib.request
import zipfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TextIO

from .compactar import extract_all

DOWNLOAD_URL = "https://example.com/autoupdate"
CONFIG_FILE = "config.json"
TMP_DIR = "tmp_helper"
UPDATE_INTERVAL = 10.0
REQUEST_TIMEOUT = 5.0

log = logging.getLogger(__name__)

_REPLIES = {
    "ready": "ok\n",
    "ping": "pong\n",
}


def parse_version(version: str) -> int:
    """Turn ``major.minor.revision`` into one comparable integer."""
    parts = version.split(".")
    if len(parts) != 3:
        raise ValueError("helper_version format error")
    major, minor, revision = (int(part) for part in parts)
    return int(f"{major:03d}{minor:03d}{revision:04d}")


def helper_names(platform: str) -> tuple[str, str]:
    """Return the (executable, zip archive) names of the helper for ``platform``."""
    if platform.startswith(("win", "cygwin")):
        return "helper.exe", "helper_windows.zip"
    if platform.startswith("linux"):
        return "helper", "helper_linux.zip"
    raise ValueError(f"unsupported platform: {platform}")


def load_config(path: str | os.PathLike[str]) -> dict[str, Any]:
    """Read ``config.json`` from directory ``path``; an unreadable file gives ``{}``."""
    try:
        text = Path(path, CONFIG_FILE).read_text(encoding="utf-8")
    except OSError:
        return {}
    log.info("config.json: %s", text)
    config = json.loads(text)
    if not isinstance(config, dict):
        raise ValueError("config.json must hold a JSON object")
    return config


def _save_config(path: str | os.PathLike[str], config: dict[str, Any]) -> None:
    text = json.dumps(config, indent="\t", sort_keys=True)
    log.info("%s", text)
    Path(path, CONFIG_FILE).write_text(text, encoding="utf-8")


def local_helper_version(config: dict[str, Any]) -> int:
    """Return the installed helper version recorded in the configuration."""
    version = config.get("helper_version", "0.0.0")
    if not isinstance(version, str):
        raise ValueError("helper_version format error")
    return parse_version(version)


def server_helper_version(base_url: str) -> tuple[int, str]:
    """Fetch ``version.json`` and return the published version as (number, text)."""
    with urllib.request.urlopen(f"{base_url}/version.json", timeout=REQUEST_TIMEOUT) as response:
        document = json.loads(response.read())
    if not isinstance(document, dict):
        raise ValueError("version.json must hold a JSON object")
    version = document.get("helper_version", "")
    if not isinstance(version, str):
        raise ValueError("helper_version format error")
    return parse_version(version), version


def download_new_version(base_url: str, directory: str | os.PathLike[str], zip_name: str) -> Path:
    """Download ``zip_name`` from ``base_url`` into ``directory`` and return its path."""
    target = Path(directory, zip_name)
    url = f"{base_url}/{zip_name}"
    log.info("download new version from: %s", url)
    with urllib.request.urlopen(url, timeout=REQUEST_TIMEOUT) as response:
        if response.status != 200:
            raise RuntimeError(f"bad status: {response.status} {response.reason}")
        with open(target, "wb") as output:
            shutil.copyfileobj(response, output)
    return target


def unzip(src: str | os.PathLike[str], dest: str | os.PathLike[str]) -> list[Path]:
    """Extract the archive ``src`` under ``dest``, refusing paths that leave it."""
    return extract_all(src, dest)


def move_new_version(directory: str | os.PathLike[str], helper_name: str) -> Path:
    """Replace the installed helper by the one unpacked in the temporary folder."""
    installed = Path(directory, helper_name)
    unpacked = Path(directory, TMP_DIR, helper_name)
    log.info("move %s %s", unpacked, installed)
    with contextlib.suppress(OSError):
        installed.unlink()
    with contextlib.suppress(OSError):
        os.replace(unpacked, installed)
    return installed


def reply_for(line: str) -> str | None:
    """Return what the launcher answers to a line from the helper, if anything."""
    return _REPLIES.get(line)


class HelperProcess:
    """A running helper whose output is logged and answered line by line."""

    def __init__(self, command: Sequence[str | os.PathLike[str]], cwd: str | None = None) -> None:
        self.command = [os.fspath(part) for part in command]
        self.cwd = cwd
        self.received: list[str] = []
        self._process: subprocess.Popen[str] | None = None
        self._lock = threading.Lock()
        self._readers: list[threading.Thread] = []

    def _require(self) -> subprocess.Popen[str]:
        if self._process is None:
            raise RuntimeError("helper has not been started")
        return self._process

    def start(self) -> None:
        """Start the helper and the threads that read its output."""
        if self._process is not None:
            raise RuntimeError("helper already started")
        log.info("starting helper")
        try:
            self._process = subprocess.Popen(
                self.command,
                cwd=self.cwd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            )
        except OSError as error:
            raise OSError(f"error starting program: {self.command[0]}, {error}") from error
        assert self._process.stdout is not None and self._process.stderr is not None
        self._readers = [
            threading.Thread(target=self._read_stdout, args=(self._process.stdout,), daemon=True),
            threading.Thread(target=self._read_stderr, args=(self._process.stderr,), daemon=True),
        ]
        for reader in self._readers:
            reader.start()

    def _read_stdout(self, stream: TextIO) -> None:
        for raw in stream:
            line = raw.rstrip("\r\n")
            log.info("helper stdout: %s", line)
            self.received.append(line)
            reply = reply_for(line)
            if reply is not None:
                self.write(reply)

    def _read_stderr(self, stream: TextIO) -> None:
        for raw in stream:
            log.info("helper stderr: %s", raw.rstrip("\r\n"))

    def write(self, message: str) -> None:
        """Send ``message`` to the helper's standard input."""
        process = self._require()
        with self._lock:
            try:
                assert process.stdin is not None
                process.stdin.write(message)
                process.stdin.flush()
            except (OSError, ValueError) as error:
                log.warning("write error: %s", error)

    def wait(self) -> int:
        """Wait for the helper to exit and return its exit status."""
        process = self._require()
        code = process.wait()
        for reader in self._readers:
            reader.join()
        with self._lock, contextlib.suppress(OSError, ValueError):
            if process.stdin is not None:
                process.stdin.close()
        log.info("helper exited")
        return code


class _Launcher:
    def __init__(
        self,
        path: str,
        base_url: str,
        helper_name: str,
        zip_name: str,
        config: dict[str, Any],
        interval: float = UPDATE_INTERVAL,
    ) -> None:
        self.path = path
        self.base_url = base_url
        self.helper_name = helper_name
        self.zip_name = zip_name
        self.config = config
        self.interval = interval
        self._helper: HelperProcess | None = None
        self._lock = threading.Lock()

    def start_helper(self) -> None:
        helper = HelperProcess([os.path.join(self.path, self.helper_name), "-path", self.path])
        try:
            helper.start()
        except OSError as error:
            log.error("error starting helper %s", error)
            return
        with self._lock:
            self._helper = helper
        threading.Thread(target=helper.wait, daemon=True).start()

    def stop_helper(self) -> None:
        with self._lock:
            helper, self._helper = self._helper, None
        if helper is None:
            return
        helper.write("quit\n")
        log.info("wait for helper to quit")
        helper.wait()

    def check_update(self) -> bool:
        local = local_helper_version(self.config)
        remote, remote_text = server_helper_version(self.base_url)
        if remote <= local:
            return False
        log.info("new version available")
        zip_path = download_new_version(self.base_url, self.path, self.zip_name)
        tmp = os.path.join(self.path, TMP_DIR)
        unzip(zip_path, tmp)
        os.remove(zip_path)
        log.info("A new version is available for upgrade.")
        self.stop_helper()
        move_new_version(self.path, self.helper_name)
        try:
            os.rmdir(tmp)
        except OSError as error:
            log.warning("error removing %s: %s", TMP_DIR, error)
        log.info("updating config.json")
        self.config["helper_version"] = remote_text
        _save_config(self.path, self.config)
        log.info("config.json updated")
        self.start_helper()
        print("upgrade successfully.")
        return True

    def update_loop(self) -> None:
        first = True
        while True:
            if not first:
                time.sleep(self.interval)
            first = False
            try:
                self.check_update()
            except (OSError, ValueError, RuntimeError, zipfile.BadZipFile) as error:
                log.error("error checking for a new helper: %s", error)


def _run_once(path: str, helper_name: str, quit_after: float) -> int:
    helper = HelperProcess([os.path.join(path, helper_name)])
    try:
        helper.start()
    except OSError as error:
        log.error("%s", error)
        return 1
    timer = threading.Timer(quit_after, helper.write, args=("quit\n",))
    timer.daemon = True
    timer.start()
    try:
        return helper.wait()
    finally:
        timer.cancel()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the helper and keep it up to date.")
    parser.add_argument("-path", default=os.getcwd(), help="path to config.json")
    parser.add_argument("-url", default=DOWNLOAD_URL, help="where new versions are published")
    parser.add_argument(
        "-quit-after",
        dest="quit_after",
        type=float,
        default=None,
        help="run the helper once and ask it to quit after this many seconds",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        helper_name, zip_name = helper_names(sys.platform)
    except ValueError as error:
        log.error("%s", error)
        return 1
    if args.quit_after is not None:
        return _run_once(args.path, helper_name, args.quit_after)

    log.info("using path: %s", args.path)
    try:
        config = load_config(args.path)
    except ValueError as error:
        log.error("error load config %s", error)
        return 1

    launcher = _Launcher(args.path, args.url, helper_name, zip_name, config)
    threading.Thread(target=launcher.update_loop, daemon=True).start()
    launcher.start_helper()
    try:
        while True:
            time.sleep(3600)
    except KeyboardInterrupt:
        print("\r\nfreeing up resources...\r")
        launcher.stop_helper()
        print("have a nice day!\r")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())