import dataclasses
from dataclasses import dataclass

import pytest

from fixedwidth.encoding.position import fixed_field, parse_position


@pytest.mark.parametrize(
    "tag,expected",
    [
        ("1,5", (1, 5, True)),
        ("10,12", (10, 12, True)),
        ("7,7", (7, 7, True)),
        ("5,2", (5, 2, True)),
        ("+1,-3", (1, -3, True)),
    ],
)
def test_parse_valid_positions(tag, expected):
    assert parse_position(tag) == expected


@pytest.mark.parametrize(
    "tag",
    [None, "", "1", "1,2,3", "a,b", "1-5", " 1,5", "1, 5", "1,5 ", ",5", "1,"],
)
def test_parse_malformed_positions_are_excluded(tag):
    assert parse_position(tag)[2] is False


def test_fixed_field_sets_metadata_and_default():
    @dataclass
    class Row:
        name: str = fixed_field("1,10", default="")
        other: int = fixed_field("11,12", default=0, metadata={"x": 1})

    fields = {f.name: f for f in dataclasses.fields(Row)}
    assert fields["name"].metadata["fixed"] == "1,10"
    assert fields["other"].metadata == {"x": 1, "fixed": "11,12"}
    assert Row().name == ""


def test_fixed_field_custom_tag_key():
    @dataclass
    class Row:
        name: str = fixed_field("1,3", tag_key="cols", default="")

    (f,) = dataclasses.fields(Row)
    assert f.metadata == {"cols": "1,3"}
