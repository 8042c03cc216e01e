"""
Tests for the command-line entry
"""
import os

import pytest

from filename_randomizer.cli import main, interactive_mode
from filename_randomizer.core import check_writable, validate_directory, NotADirectory


@pytest.fixture
def two_files(make_tree):
    return make_tree({"file1.txt": "content1", "file2.jpg": "content2"})


def test_dry_run_prints_plan_and_keeps_files(two_files, capsys):
    assert main([str(two_files), "--dry-run"]) == 0

    out = capsys.readouterr().out
    assert "Would perform 2 rename operations" in out
    assert "file1.txt" in out
    assert "[Preview mode]" in out
    assert sorted(p.name for p in two_files.iterdir()) == ["file1.txt", "file2.jpg"]


def test_yes_renames_without_prompt(two_files, capsys, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda *_: pytest.fail("prompted"))

    assert main([str(two_files), "--yes", "--length", "4"]) == 0

    names = sorted(p.name for p in two_files.iterdir())
    assert "file1.txt" not in names and "file2.jpg" not in names
    assert sorted(len(n) for n in names) == [12, 12]
    assert "Renamed 2 files" in capsys.readouterr().out


def test_declined_confirmation_cancels(two_files, capsys, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda *_: "n")

    assert main([str(two_files)]) == 0

    assert "Cancelled" in capsys.readouterr().out
    assert sorted(p.name for p in two_files.iterdir()) == ["file1.txt", "file2.jpg"]


def test_recursive_and_no_extensions(make_tree):
    root = make_tree({"a.txt": "a", "sub/b.txt": "b"})

    assert main([str(root), "-r", "-y", "--no-preserve-extensions"]) == 0

    top = [p for p in root.iterdir() if p.is_file()]
    nested = list((root / "sub").iterdir())
    assert len(top) == 1 and len(nested) == 1
    assert top[0].suffix == "" and nested[0].suffix == ""


def test_missing_directory_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing"), "-d"]) == 1
    assert "Directory does not exist" in capsys.readouterr().out


def test_invalid_length_fails(two_files, capsys):
    assert main([str(two_files), "-d", "--length", "0"]) == 1
    assert "Name length" in capsys.readouterr().out


def test_empty_directory(tmp_path, capsys):
    assert main([str(tmp_path), "-y"]) == 0
    assert "No files found" in capsys.readouterr().out


def test_check_writable(tmp_path):
    assert check_writable(tmp_path) == (True, None)


def test_validate_directory_rejects_file(tmp_path):
    path = tmp_path / "f"
    path.write_text("x")
    with pytest.raises(NotADirectory):
        validate_directory(path)


def test_preview_is_printed_before_confirmation(two_files, capsys, monkeypatch):
    shown_at_prompt = []

    def fake_input(prompt=""):
        shown_at_prompt.append(capsys.readouterr().out)
        return "n"

    monkeypatch.setattr("builtins.input", fake_input)

    assert main([str(two_files)]) == 0

    assert len(shown_at_prompt) == 1
    before = shown_at_prompt[0]
    assert "Will perform 2 rename operations" in before
    assert "file1.txt" in before and "file2.jpg" in before
    assert sorted(p.name for p in two_files.iterdir()) == ["file1.txt", "file2.jpg"]


def test_unreadable_subdirectory_fails(make_tree, capsys, monkeypatch):
    root = make_tree({"a.txt": "a", "sub/b.txt": "b"})
    real_scandir = os.scandir

    def guarded_scandir(path="."):
        if os.fspath(path) == os.fspath(root / "sub"):
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", guarded_scandir)

    assert main([str(root), "-r", "-y"]) == 1
    assert "Cannot read directory" in capsys.readouterr().out
    assert (root / "a.txt").exists()


def scripted_input(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda *_: next(it))


def test_interactive_preview_keeps_files(two_files, capsys, monkeypatch):
    # menu, directory, recursive, preserve, length, hidden, then quit
    scripted_input(monkeypatch, ["1", str(two_files), "", "", "", "", "q"])

    assert interactive_mode() == 0

    out = capsys.readouterr().out
    assert "Would rename 2 files" in out
    assert "file1.txt" in out
    assert sorted(p.name for p in two_files.iterdir()) == ["file1.txt", "file2.jpg"]


def test_interactive_randomize_after_confirmation(two_files, capsys, monkeypatch):
    scripted_input(monkeypatch, ["2", str(two_files), "", "", "4", "", "y", "q"])

    assert interactive_mode() == 0

    out = capsys.readouterr().out
    assert out.index("Would rename 2 files") < out.index("Renamed 2 files")
    names = sorted(p.name for p in two_files.iterdir())
    assert "file1.txt" not in names and "file2.jpg" not in names
    assert sorted(len(n) for n in names) == [12, 12]


def test_interactive_rejects_bad_length(two_files, capsys, monkeypatch):
    scripted_input(monkeypatch, ["1", str(two_files), "", "", "0", "2", "", "q"])

    assert interactive_mode() == 0

    out = capsys.readouterr().out
    assert "at least 1" in out
    assert "Would rename 2 files" in out
