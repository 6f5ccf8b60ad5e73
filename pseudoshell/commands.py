"""File and directory commands understood by the shell."""

from __future__ import annotations

import os
from typing import TextIO

__all__ = [
    "CommandError",
    "list_dir",
    "show_current_dir",
    "make_dir",
    "change_dir",
    "copy_file",
    "move_file",
    "delete_file",
    "display_file",
]

_CHUNK_SIZE = 64 * 1024 * 1024
_DIR_MODE = 0o777
_COPY_MODE = 0o774


class CommandError(Exception):
    """A command could not do its work."""


def list_dir(out: TextIO) -> None:
    """Write the entries of the working directory to ``out`` (``ls``).

    ``.`` and ``..`` come first, each followed by a space; hidden entries
    are left out and the others are separated by single spaces. The
    listing ends with a newline.
    """
    try:
        names = os.listdir(os.getcwd())
    except OSError as exc:
        out.write("\n")
        raise CommandError(f"directory could not be opened: {exc}") from exc

    visible = []
    for name in names:
        if name == "...":
            break
        if not name.startswith("."):
            visible.append(name)
    out.write(". .. " + " ".join(visible) + "\n")


def show_current_dir(out: TextIO) -> None:
    """Write the working directory and a newline to ``out`` (``pwd``)."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        raise CommandError(f"getcwd failed: {exc}") from exc
    out.write(cwd + "\n")


def make_dir(name: str) -> None:
    """Create directory ``name`` inside the working directory (``mkdir``)."""
    try:
        os.mkdir(os.path.join(os.getcwd(), name), _DIR_MODE)
    except OSError as exc:
        raise CommandError(f"mkdir failed: {exc}") from exc


def change_dir(name: str) -> None:
    """Make ``name`` the working directory (``cd``)."""
    try:
        os.chdir(name)
    except OSError as exc:
        raise CommandError(f"chdir failed: {exc}") from exc


def _base_name(path: str) -> str:
    stripped = path.rstrip("/")
    return os.path.basename(stripped) if stripped else "/"


def copy_file(source: str, destination: str) -> None:
    """Copy ``source`` to ``destination`` (``cp``).

    When ``destination`` is a directory the copy keeps the source's base
    name inside it. The target is opened without truncation, so bytes
    past the copied length of an existing longer file are left in place.
    """
    try:
        src = open(source, "rb")
    except OSError as exc:
        raise CommandError(f"Couldn't open input file: {exc}") from exc

    with src:
        target = destination
        if os.path.isdir(destination):
            if not target.endswith("/"):
                target += "/"
            target += _base_name(source)

        try:
            fd = os.open(target, os.O_CREAT | os.O_WRONLY, _COPY_MODE)
        except OSError as exc:
            raise CommandError(f"Couldn't open file: {exc}") from exc

        with os.fdopen(fd, "wb") as dst:
            try:
                while chunk := src.read(_CHUNK_SIZE):
                    dst.write(chunk)
            except OSError as exc:
                raise CommandError(f"copy failed: {exc}") from exc


def move_file(source: str, destination: str) -> None:
    """Copy ``source`` to ``destination`` and then remove ``source`` (``mv``).

    The source is removed even when the copy fails; the copy's error is
    raised afterwards.
    """
    try:
        copy_file(source, destination)
    finally:
        delete_file(source)


def delete_file(filename: str) -> None:
    """Remove the file ``filename`` (``rm``)."""
    try:
        os.unlink(filename)
    except OSError as exc:
        raise CommandError(f"Delete failed: {exc}") from exc


def display_file(filename: str, out: TextIO) -> None:
    """Write the contents of ``filename`` to ``out`` (``cat``).

    A file that cannot be opened writes nothing.
    """
    try:
        with open(filename, "rb") as handle:
            data = handle.read()
    except OSError:
        return
    try:
        out.write(data.decode("utf-8", errors="replace"))
    except OSError as exc:
        raise CommandError(f"CAT failed: {exc}") from exc