"""
Tests for RandomizeOptions and RenameRecord
"""
import dataclasses
from pathlib import Path

import pytest

from filename_randomizer.core import RandomizeOptions, RenameRecord


class TestRandomizeOptions:

    def test_defaults(self):
        options = RandomizeOptions()
        assert options.recursive is False
        assert options.dry_run is False
        assert options.preserve_extensions is True
        assert options.length == 8
        assert options.include_hidden is False
        assert options.hex_length == 16

    def test_from_mapping_overrides_only_given_keys(self):
        options = RandomizeOptions.from_mapping({"recursive": True, "length": 4})
        assert options.recursive is True
        assert options.length == 4
        assert options.dry_run is False
        assert options.preserve_extensions is True

    def test_keyword_overrides_win_over_mapping(self):
        options = RandomizeOptions.from_mapping({"dry_run": False}, dry_run=True)
        assert options.dry_run is True

    def test_name_length_alias(self):
        options = RandomizeOptions.from_mapping({"name_length": 12})
        assert options.length == 12
        assert options.name_length == 12

    def test_unknown_key_rejected(self):
        with pytest.raises(TypeError):
            RandomizeOptions.from_mapping({"recursve": True})

    @pytest.mark.parametrize("length", [0, -1, 2.5, "8", True])
    def test_invalid_length_rejected(self, length):
        with pytest.raises(ValueError):
            RandomizeOptions(length=length)

    def test_immutable(self):
        options = RandomizeOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.dry_run = True


class TestRenameRecord:

    def test_aliases(self):
        record = RenameRecord(Path("/a/x.txt"), Path("/a/ff.txt"))
        assert record.old == Path("/a/x.txt")
        assert record.new == Path("/a/ff.txt")

    def test_relative_to(self):
        record = RenameRecord(Path("/a/sub/x.txt"), Path("/a/sub/ff.txt"))
        assert record.relative_to(Path("/a")) == str(Path("sub/x.txt"))
        assert record.relative_to(Path("/elsewhere")) == str(Path("/a/sub/x.txt"))

    def test_immutable(self):
        record = RenameRecord(Path("/a/x"), Path("/a/y"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.new_path = Path("/a/z")
