"""Reading ``.node-version`` marker files."""

from __future__ import annotations

from pathlib import PurePath


def read_marker_file(path: PurePath) -> str:
    """Return the marker file's contents untouched.

    ``FileNotFoundError`` is left to the caller, which treats it as absent.
    Content that is not UTF-8 is reported as an I/O failure.
    """
    with open(path, "rb") as f:
        raw = f.read()
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise OSError(f"{path} is not valid UTF-8 ({e.reason})") from e
