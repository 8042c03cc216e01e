"""
Tests for random name generation
"""
import re

import pytest

from filename_randomizer.core import extract_extension, generate_random_name

HEX = re.compile(r"^[0-9a-f]+$")


@pytest.mark.parametrize("name, expected", [
    ("test.txt", ".txt"),
    ("archive.tar.gz", ".gz"),
    ("README", ""),
    (".bashrc", ""),
    ("dir/photo.JPG", ".JPG"),
])
def test_extract_extension(name, expected):
    assert extract_extension(name) == expected


def test_preserves_extension():
    new_name = generate_random_name("test.txt", preserve_extensions=True, length=8)
    assert new_name.endswith(".txt")
    assert len(new_name) == 20
    assert HEX.match(new_name[:-4])


def test_strips_extension():
    new_name = generate_random_name("test.txt", preserve_extensions=False, length=8)
    assert "." not in new_name
    assert len(new_name) == 16
    assert HEX.match(new_name)


def test_no_extension_gives_bare_hex():
    new_name = generate_random_name("Makefile", preserve_extensions=True, length=4)
    assert len(new_name) == 8
    assert HEX.match(new_name)


def test_uses_injected_token_factory(scripted_tokens):
    factory = scripted_tokens(["abcd"])
    assert generate_random_name("a.png", length=2, token_factory=factory) == "abcd.png"
    assert factory.calls == [2]


def test_draws_differ():
    names = {generate_random_name("a.txt") for _ in range(50)}
    assert len(names) == 50
