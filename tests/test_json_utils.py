"""Tests for JSON utility functions."""

import datetime
import json
from pathlib import PurePosixPath

import pytest
from pytest import MonkeyPatch

from zennbook import json_utils
from zennbook.content import ContentError, ErrorKind


def test_json_dumps_without_orjson(monkeypatch: MonkeyPatch) -> None:
    """Serialize using standard json when orjson is absent."""

    monkeypatch.setattr(json_utils, "orjson", None)
    data = {"a": 1, "title": "本"}
    assert json_utils.json_dumps(data) == json.dumps(data, ensure_ascii=False)


def test_json_dumps_with_orjson(monkeypatch: MonkeyPatch) -> None:
    """Serialize using orjson when available."""

    class Fake:
        OPT_NON_STR_KEYS = 1
        OPT_INDENT_2 = 2

        def __init__(self) -> None:
            self.options: list[int] = []

        def dumps(
            self, obj: object, default: object = None, option: int = 0
        ) -> bytes:  # pragma: no cover - simple stub
            self.options.append(option)
            return b"{}"

    fake = Fake()
    monkeypatch.setattr(json_utils, "orjson", fake)
    assert json_utils.json_dumps({}) == "{}"
    assert json_utils.json_dumps({}, indent=True) == "{}"
    assert fake.options == [1, 3]


def test_json_dumps_converts_paths_dates_and_enums(
    monkeypatch: MonkeyPatch,
) -> None:
    """Paths, enums and dates are converted."""

    monkeypatch.setattr(json_utils, "orjson", None)
    data = {
        "path": PurePosixPath("/books/a"),
        "kind": ErrorKind.MISSING_CONFIG,
        "when": datetime.date(2024, 1, 2),
    }

    assert json.loads(json_utils.json_dumps(data)) == {
        "path": "/books/a",
        "kind": "missing_config",
        "when": "2024-01-02",
    }


def test_to_jsonable_rejects_unknown_objects() -> None:
    """Objects without a known representation raise ``TypeError``."""

    with pytest.raises(TypeError):
        json_utils.to_jsonable(object())


def test_content_error_serializes_through_to_dict() -> None:
    """Errors provide their own JSON friendly mapping."""

    error = ContentError("broken", PurePosixPath("/books/a"))

    assert json_utils.json_loads(json_utils.json_dumps(error.to_dict())) == {
        "type": "error",
        "message": "broken",
        "path": "/books/a",
        "kind": "read_failure",
    }


def test_json_loads_without_orjson(monkeypatch: MonkeyPatch) -> None:
    """Deserialize JSON using standard json when orjson is absent."""

    monkeypatch.setattr(json_utils, "orjson", None)
    data = {"a": 1}
    text = json.dumps(data)
    assert json_utils.json_loads(text) == data
    assert json_utils.json_loads(text.encode()) == data


def test_json_loads_with_orjson(monkeypatch: MonkeyPatch) -> None:
    """Deserialize JSON using orjson when available."""

    class Fake:
        def loads(self, data: bytes) -> dict:  # pragma: no cover - simple stub
            return {"b": 2}

    monkeypatch.setattr(json_utils, "orjson", Fake())
    assert json_utils.json_loads(b"{}") == {"b": 2}
