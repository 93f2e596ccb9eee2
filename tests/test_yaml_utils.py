"""Tests for YAML helper functions."""

import pytest
import yaml  # type: ignore[import-untyped]

from zennbook.yaml_utils import parse_yaml, split_front_matter


def test_parse_yaml_returns_mapping() -> None:
    """Mappings are returned with string keys."""

    assert parse_yaml("title: T\n1: one\n") == {"title": "T", "1": "one"}


@pytest.mark.parametrize("text", ["", "# only a comment\n", "- a\n- b\n"])
def test_parse_yaml_non_mapping_is_empty(text: str) -> None:
    """Empty documents and lists parse to an empty mapping."""

    assert parse_yaml(text) == {}


def test_parse_yaml_raises_on_invalid_text() -> None:
    """Syntax errors surface as ``yaml.YAMLError``."""

    with pytest.raises(yaml.YAMLError):
        parse_yaml("title: [oops\n")


def test_split_front_matter() -> None:
    """The block between the leading ``---`` lines is separated."""

    front, body = split_front_matter("---\ntitle: T\n---\n# Body\n")

    assert front == "title: T\n"
    assert body == "# Body\n"


def test_split_front_matter_without_block() -> None:
    """Text without a leading block is returned unchanged."""

    text = "# Title\n---\nnot front matter\n---\n"

    assert split_front_matter(text) == (None, text)
