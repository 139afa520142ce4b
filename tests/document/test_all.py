# type: ignore

import dataclasses
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal

import pytest
from pydantic import BaseModel

from cloudsearch.core import HTTPMethod, RequestType
from cloudsearch.document import BadRequestError, add, remove


class Band(BaseModel):
    id: int
    name: str
    tags: list[str] = []


@dataclasses.dataclass
class Album:
    id: str
    title: str


@dataclasses.dataclass
class Track:
    title: str


class Song:
    def __init__(self, isrc: str, title: str):
        self.isrc = isrc
        self.title = title

    def __document_id__(self):
        return self.isrc

    def __document_fields__(self):
        return {"title": self.title}


def test_add_operation():
    operation = add({"id": 3, "name": "Grimes", "tags": []})
    assert operation.request_type == RequestType.DOCUMENT
    assert operation.http_method == HTTPMethod.POST
    assert operation.path == "/documents/batch"
    assert operation.data == [
        {"type": "add", "id": "3", "fields": {"name": "Grimes"}}
    ]


@pytest.mark.parametrize(
    "documents",
    [
        {"id": 3, "name": "Grimes"},
        Band(id=3, name="Grimes"),
        (3, {"name": "Grimes"}),
        {3: {"name": "Grimes"}},
        [{"id": 3, "name": "Grimes", "genre": ""}],
    ],
)
def test_add_shapes(documents):
    operation = add(documents)
    assert operation.data == [
        {"type": "add", "id": "3", "fields": {"name": "Grimes"}}
    ]


def test_add_many():
    operation = add(
        [
            Album(id="a1", title="Visions"),
            Song("s1", "Oblivion"),
            {"b1": {"name": "Grimes"}, "b2": {"name": "Lorde"}},
        ]
    )
    assert [d["id"] for d in operation.data] == ["a1", "s1", "b1", "b2"]
    assert operation.data[1]["fields"] == {"title": "Oblivion"}


def test_add_field_values():
    operation = add(
        {
            "id": 1,
            "released": date(2012, 1, 31),
            "updated": datetime(2024, 5, 1, 10, 30),
            "recorded": datetime(
                2011, 6, 1, 12, 0, tzinfo=timezone(timedelta(hours=2))
            ),
            "genres": ("synthpop", "dream pop"),
            "rating": 4.5,
            "plays": [1, 2],
            "label": None,
        }
    )
    assert operation.data[0]["fields"] == {
        "released": "2012-01-31T00:00:00Z",
        "updated": "2024-05-01T10:30:00Z",
        "recorded": "2011-06-01T10:00:00Z",
        "genres": ["synthpop", "dream pop"],
        "rating": 4.5,
        "plays": [1, 2],
    }


def test_add_keeps_decimal_values():
    operation = add(
        {"id": 1, "price": Decimal("1.5"), "stock": Decimal("3")}
    )
    assert operation.data[0]["fields"] == {
        "price": Decimal("1.5"),
        "stock": Decimal("3"),
    }
    assert isinstance(operation.data[0]["fields"]["price"], Decimal)


@pytest.mark.parametrize(
    "documents",
    [
        {"id": 3},
        {"id": 3, "tags": [], "name": ""},
        [],
        None,
        {"name": "Grimes"},
        Track(title="Oblivion"),
        {"id": "", "name": "Grimes"},
        (3, "Grimes"),
        (3, {"name": "Grimes"}, "extra"),
        {"id": 3, "at": time(10, 30)},
        42,
    ],
)
def test_add_invalid(documents):
    with pytest.raises(BadRequestError):
        add(documents)


def test_remove_operation():
    operation = remove([3, {"id": 4}, Band(id=5, name="Lorde")])
    assert operation.request_type == RequestType.DOCUMENT
    assert operation.path == "/documents/batch"
    assert operation.data == [
        {"type": "delete", "id": "3"},
        {"type": "delete", "id": "4"},
        {"type": "delete", "id": "5"},
    ]

    operation = remove(Song("s1", "Oblivion"))
    assert operation.data == [{"type": "delete", "id": "s1"}]


@pytest.mark.parametrize(
    "documents",
    [
        [],
        None,
        {"name": "Grimes"},
        Track(title="Oblivion"),
    ],
)
def test_remove_invalid(documents):
    with pytest.raises(BadRequestError):
        remove(documents)
