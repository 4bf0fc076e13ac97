import zipfile

import pytest


def _session_files(count, width=3, status=200, length=None):
    """Request/response file map for `count` well-formed sessions."""
    files = {}
    for n in range(1, count + 1):
        number = f"{n:0{width}d}"
        files[f"raw/{number}_c.txt"] = f"GET /page/{n} HTTP/1.1\r\nHost: example.com\r\n\r\n"
        response = f"HTTP/1.1 {status} OK\r\nContent-Type: text/html\r\n"
        if length is not None:
            response += f"Content-Length: {length}\r\n"
        files[f"raw/{number}_s.txt"] = response + "\r\n"
    return files


@pytest.fixture
def session_files():
    return _session_files


@pytest.fixture
def make_saz(tmp_path):
    """Write a synthetic SAZ archive and return its path."""
    def _make(files, folder="raw/", name="capture.saz"):
        path = tmp_path / name
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            if folder:
                zf.writestr(folder, b"")
            for entry_name, contents in files.items():
                if isinstance(contents, str):
                    contents = contents.encode("utf-8")
                zf.writestr(entry_name, contents)
        return str(path)
    return _make


@pytest.fixture
def empty_saz(tmp_path):
    path = tmp_path / "empty.saz"
    with zipfile.ZipFile(path, "w"):
        pass
    return str(path)
