import io
import os

import pytest

from pseudoshell.commands import (
    CommandError,
    change_dir,
    copy_file,
    delete_file,
    display_file,
    list_dir,
    make_dir,
    move_file,
    show_current_dir,
)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _listing():
    out = io.StringIO()
    list_dir(out)
    return out.getvalue()


def _contents(path):
    out = io.StringIO()
    display_file(path, out)
    return out.getvalue()


def test_list_dir_shows_dot_entries_and_visible_files(workdir):
    (workdir / "alpha").write_text("a")
    (workdir / "beta").write_text("b")
    (workdir / ".hidden").write_text("h")
    out = io.StringIO()
    list_dir(out)
    text = out.getvalue()
    assert text.startswith(". .. ")
    assert text.endswith("\n")
    names = text[len(". .. "):-1].split(" ")
    assert sorted(names) == ["alpha", "beta"]


def test_list_dir_empty_directory(workdir):
    out = io.StringIO()
    list_dir(out)
    assert out.getvalue() == ". .. \n"


def test_show_current_dir(workdir):
    out = io.StringIO()
    show_current_dir(out)
    assert out.getvalue() == os.getcwd() + "\n"


def test_make_dir_creates_directory(workdir):
    make_dir("newdir")
    assert _listing() == ". .. newdir\n"
    assert (workdir / "newdir").is_dir()


def test_make_dir_existing_raises(workdir):
    make_dir("dup")
    with pytest.raises(CommandError):
        make_dir("dup")


def test_change_dir_moves_working_directory(workdir):
    (workdir / "sub").mkdir()
    change_dir("sub")
    out = io.StringIO()
    show_current_dir(out)
    assert out.getvalue() == str((workdir / "sub").resolve()) + "\n"
    assert os.getcwd() == str((workdir / "sub").resolve())


def test_change_dir_missing_raises(workdir):
    with pytest.raises(CommandError):
        change_dir("nowhere")


def test_copy_file_to_new_path(workdir):
    (workdir / "src.txt").write_bytes(b"hello world")
    copy_file("src.txt", "dst.txt")
    assert _contents("dst.txt") == "hello world"
    assert (workdir / "dst.txt").read_bytes() == b"hello world"
    assert (workdir / "src.txt").exists()


def test_copy_file_into_directory_keeps_base_name(workdir):
    (workdir / "out").mkdir()
    (workdir / "data.bin").write_bytes(b"\x00\x01\x02")
    copy_file(str(workdir / "data.bin"), "out")
    assert (workdir / "out" / "data.bin").read_bytes() == b"\x00\x01\x02"


def test_copy_file_into_directory_with_trailing_slash(workdir):
    (workdir / "out").mkdir()
    (workdir / "f.txt").write_text("content")
    copy_file("f.txt", "out/")
    assert _contents("out/f.txt") == "content"
    assert (workdir / "out" / "f.txt").read_text() == "content"


def test_copy_file_does_not_truncate_existing_target(workdir):
    (workdir / "short.txt").write_bytes(b"ab")
    (workdir / "long.txt").write_bytes(b"xyz123")
    copy_file("short.txt", "long.txt")
    assert _contents("long.txt") == "abz123"
    data = (workdir / "long.txt").read_bytes()
    assert data[:2] == b"ab"
    assert data[2:] == b"xyz123"[2:]


def test_copy_file_missing_source_raises(workdir):
    with pytest.raises(CommandError):
        copy_file("missing.txt", "dst.txt")
    assert not (workdir / "dst.txt").exists()


def test_move_file_copies_and_removes_source(workdir):
    (workdir / "a.txt").write_text("moved")
    move_file("a.txt", "b.txt")
    assert _listing() == ". .. b.txt\n"
    assert _contents("b.txt") == "moved"
    assert not (workdir / "a.txt").exists()
    assert (workdir / "b.txt").read_text() == "moved"


def test_move_file_missing_source_raises(workdir):
    with pytest.raises(CommandError):
        move_file("ghost.txt", "b.txt")


def test_delete_file_removes(workdir):
    (workdir / "gone.txt").write_text("x")
    delete_file("gone.txt")
    assert _listing() == ". .. \n"
    assert not (workdir / "gone.txt").exists()


def test_delete_file_missing_raises(workdir):
    with pytest.raises(CommandError):
        delete_file("gone.txt")


def test_display_file_writes_contents(workdir):
    (workdir / "show.txt").write_text("line one\nline two\n")
    out = io.StringIO()
    display_file("show.txt", out)
    assert out.getvalue() == "line one\nline two\n"


def test_display_file_missing_writes_nothing(workdir):
    out = io.StringIO()
    display_file("absent.txt", out)
    assert out.getvalue() == ""


def test_copy_then_display_round_trip(workdir):
    (workdir / "orig.txt").write_text("round trip text")
    copy_file("orig.txt", "copy.txt")
    out = io.StringIO()
    display_file("copy.txt", out)
    assert out.getvalue() == (workdir / "orig.txt").read_text()