"""Integration tests decoding realistic payloads end to end."""

from jsontyped import (
    Err,
    Ok,
    alt,
    decode_json,
    error_paths,
    field,
    fmap,
    format_error,
    from_model,
    integer,
    list_of,
    optional_field,
    record,
    string,
)
from tests.structstest import Contact, Person, Team, decode_team

ROSTER = """
{
    "title": "Analytical Engines",
    "members": [
        {"name": "Ada", "age": 36, "nickname": "Enchantress of Numbers"},
        {"name": "Charles", "age": 79}
    ]
}
"""

BROKEN_ROSTER = """
{
    "members": [
        {"name": "Ada", "age": "thirty-six"},
        {"age": 79.5, "nickname": null}
    ]
}
"""


def test_decode_roster():
    result = decode_json(decode_team, ROSTER)
    assert result == Ok(
        Team(
            "Analytical Engines",
            [
                Person("Ada", 36, "Enchantress of Numbers"),
                Person("Charles", 79),
            ],
        )
    )


def test_broken_roster_reports_everything():
    result = decode_json(decode_team, BROKEN_ROSTER)
    assert isinstance(result, Err)
    assert error_paths(result.error) == [
        (("members", 0, "age"), 'expected number, got "thirty-six"'),
        (("members", 1, "name"), "missing field"),
        (("members", 1, "age"), "expected integer, got 79.5"),
    ]
    assert format_error(result.error).splitlines()[1] == (
        "field 'members'[1]['name']: missing field"
    )


def test_versioned_payloads():
    """Older payloads carry ``id`` as a string, newer ones as an int."""
    ident = field("id", alt(integer, fmap(int, string)))
    decoder = record(dict, id=ident, tags=optional_field("tags", list_of(string)))
    assert decode_json(decoder, '{"id": "12"}') == Ok({"id": 12, "tags": None})
    assert decode_json(decoder, '{"id": 12, "tags": ["a"]}') == Ok(
        {"id": 12, "tags": ["a"]}
    )


def test_model_from_json_text():
    text = """
    {
        "name": "Grace",
        "address": {"street": "1 Main St", "city": "Arlington", "zip_code": "22201"},
        "phones": []
    }
    """
    result = decode_json(from_model(Contact), text)
    assert isinstance(result, Ok)
    assert result.value.address.zip_code == "22201"
    assert result.value.location == (0.0, 0.0)
