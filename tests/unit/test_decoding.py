"""Body decoding tests: type tokens map to the expected decode strategy."""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from pydantic import BaseModel
import pytest

from http_result.decoding import decode_body
from http_result.errors import ResponseDecodeError

pytestmark = pytest.mark.unit

_REQUEST = httpx.Request("GET", "https://example.test/items/1")


class Item(BaseModel):
    id: int
    name: str


@dataclass
class Point:
    x: int
    y: int


def _response(status_code: int = 200, **kwargs: object) -> httpx.Response:
    return httpx.Response(status_code, request=_REQUEST, **kwargs)  # type: ignore[arg-type]


def test_str_returns_text() -> None:
    assert decode_body(_response(text="hello"), str) == "hello"


def test_default_type_is_str() -> None:
    assert decode_body(_response(text="plain")) == "plain"


def test_bytes_returns_raw_content() -> None:
    assert decode_body(_response(content=b"\x00\x01"), bytes) == b"\x00\x01"


def test_response_type_returns_response_itself() -> None:
    response = _response(text="x")
    assert decode_body(response, httpx.Response) is response


@pytest.mark.parametrize("none_type", [None, type(None)])
def test_none_ignores_body(none_type: object) -> None:
    assert decode_body(_response(text="not json at all"), none_type) is None


def test_pydantic_model_from_json() -> None:
    item = decode_body(_response(json={"id": 1, "name": "widget"}), Item)
    assert item == Item(id=1, name="widget")


def test_generic_container_from_json() -> None:
    body = [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}]
    items = decode_body(_response(json=body), list[Item])
    assert [i.name for i in items] == ["a", "b"]


def test_dataclass_and_dict_from_json() -> None:
    assert decode_body(_response(json={"x": 1, "y": 2}), Point) == Point(1, 2)
    assert decode_body(_response(json={"k": [1]}), dict[str, list[int]]) == {"k": [1]}


def test_invalid_body_raises_decode_error_with_context() -> None:
    response = _response(status_code=200, json={"id": "not-an-int"})

    with pytest.raises(ResponseDecodeError) as exc_info:
        decode_body(response, Item)

    err = exc_info.value
    assert err.status_code == 200
    assert err.url == "https://example.test/items/1"
    assert err.response_type is Item
    assert err.hint is not None
    assert err.__cause__ is not None


def test_malformed_json_raises_decode_error() -> None:
    with pytest.raises(ResponseDecodeError):
        decode_body(_response(text="{not json"), dict)
