"""Small helpers to manipulate files and directories."""

from __future__ import annotations

import os
import re
import shutil

__all__ = [
    "make_directory",
    "directory_exists",
    "directory_or_file_exists",
    "read_file",
    "write_file",
    "substitute",
    "copy_bin",
    "copy_text",
]

_DIRECTORY_MODE = 0o733


def make_directory(dir_name: str | os.PathLike) -> None:
    """Create a directory; raise OSError if it cannot be created."""
    try:
        os.mkdir(dir_name, _DIRECTORY_MODE)
    except OSError as exc:
        raise OSError(f"can not create directory: {os.fspath(dir_name)}") from exc


def directory_exists(dir_name: str | os.PathLike) -> bool:
    """True if the path exists and is a directory."""
    return os.path.isdir(dir_name)


def directory_or_file_exists(dir_name: str | os.PathLike) -> bool:
    """True if the path can be reached, whatever it is."""
    return os.path.exists(dir_name)


def read_file(file_name: str | os.PathLike) -> str:
    """Return the whole content of a text file."""
    try:
        with open(file_name, encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise OSError(f"can not open file: {os.fspath(file_name)}") from exc


def write_file(data: str, file_name: str | os.PathLike) -> None:
    """Write text to a file, replacing any previous content."""
    try:
        with open(file_name, "w", encoding="utf-8", newline="") as handle:
            handle.write(data)
    except OSError as exc:
        raise OSError(f"can not create file: {os.fspath(file_name)}") from exc


def _expand_format(match: re.Match, fmt: str) -> str:
    """Expand a '$'-style replacement format ($&, $n, $$, $`, $')."""
    pieces: list[str] = []
    groups = match.re.groups
    position = 0
    length = len(fmt)
    while position < length:
        char = fmt[position]
        if char != "$" or position + 1 >= length:
            pieces.append(char)
            position += 1
            continue
        nxt = fmt[position + 1]
        if nxt == "$":
            pieces.append("$")
            position += 2
        elif nxt == "&":
            pieces.append(match.group(0))
            position += 2
        elif nxt == "`":
            pieces.append(match.string[: match.start()])
            position += 2
        elif nxt == "'":
            pieces.append(match.string[match.end():])
            position += 2
        elif nxt.isdigit():
            number = int(nxt)
            position += 2
            if position < length and fmt[position].isdigit():
                two_digits = number * 10 + int(fmt[position])
                if two_digits <= groups:
                    number = two_digits
                    position += 1
            if number <= groups:
                pieces.append(match.group(number) or "")
        else:
            pieces.append(char)
            position += 1
    return "".join(pieces)


def substitute(data: str, pattern: str, replace_by: str) -> str:
    """Replace every match of a regular expression.

    The replacement uses '$' references: '$&' for the whole match, '$1'
    and following for groups, and '$$' for a literal dollar sign.
    """
    regex = re.compile(pattern)
    return regex.sub(lambda match: _expand_format(match, replace_by), data)


def copy_bin(src: str | os.PathLike, dest: str | os.PathLike) -> None:
    """Copy a file byte for byte."""
    shutil.copyfile(src, dest)


def copy_text(src: str | os.PathLike, dest: str | os.PathLike) -> None:
    """Copy a text file."""
    write_file(read_file(src), dest)