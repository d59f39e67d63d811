import copy

import pytest

from tvdb_helper.core.errors import RemoteError, UnexpectedShapeError
from tvdb_helper.core.normalizers import (
    EntityKind,
    collapse_empty,
    detect_error,
    normalize_single,
    prepare_output,
    split_pipe,
    split_pipe_each,
    unwrap_envelope,
)
from tvdb_helper.core.xml_decoder import decode


# ---------- collapse_empty ----------

TREE = {
    "Series": {"id": "1", "Overview": {}, "Network": None},
    "Episode": [{"id": "10", "Writer": {}}, {}, {"nested": {"deeper": {}}}],
    "time": "123",
}


def test_collapse_empty_replaces_markers_at_any_depth():
    out = collapse_empty(TREE)
    assert out == {
        "Series": {"id": "1", "Overview": "", "Network": ""},
        "Episode": [{"id": "10", "Writer": ""}, "", {"nested": {"deeper": ""}}],
        "time": "123",
    }


def test_collapse_empty_is_idempotent():
    once = collapse_empty(TREE)
    assert collapse_empty(once) == once


def test_collapse_empty_does_not_touch_input():
    before = copy.deepcopy(TREE)
    collapse_empty(TREE)
    assert TREE == before


def test_collapse_empty_preserves_key_order_and_scalars():
    out = collapse_empty({"b": "2", "a": {}, "c": ["x", {}]})
    assert list(out) == ["b", "a", "c"]
    assert out["c"] == ["x", ""]
    assert collapse_empty("plain") == "plain"
    assert collapse_empty({}) == ""


# ---------- split_pipe / split_pipe_each ----------

def test_split_pipe_drops_empty_tokens_keeps_order():
    assert split_pipe("|Apes||Oranges|Man|") == ["Apes", "Oranges", "Man"]
    assert split_pipe("Drama") == ["Drama"]
    assert split_pipe("||") == []


@pytest.mark.parametrize("value", ["", None, {}, {"a": "b"}, ["a|b"], 3])
def test_split_pipe_non_string_or_empty_gives_empty_list(value):
    assert split_pipe(value) == []


def test_split_pipe_each_single_record():
    rec = {"id": "1", "Genre": "|Drama|Crime|", "Actors": "|A|"}
    out = split_pipe_each(rec, ["Actors", "Genre"])
    assert out == {"id": "1", "Genre": ["Drama", "Crime"], "Actors": ["A"]}
    assert rec["Genre"] == "|Drama|Crime|"


def test_split_pipe_each_list_and_single_selector():
    recs = [{"Colors": "|1,2,3|"}, {"Colors": ""}, "", {"id": "9"}]
    out = split_pipe_each(recs, "Colors")
    assert out == [{"Colors": ["1,2,3"]}, {"Colors": []}, "", {"id": "9"}]


# ---------- envelope / error ----------

def test_unwrap_envelope_data_and_items():
    assert unwrap_envelope({"Data": {"Series": {"id": "1"}}}) == {"Series": {"id": "1"}}
    assert unwrap_envelope({"Items": {"Mirror": "m"}}) == {"Mirror": "m"}


def test_unwrap_envelope_passes_through_unknown_roots():
    assert unwrap_envelope({"Foo": {"x": "1"}}) == {"Foo": {"x": "1"}}
    two = {"Data": {"a": "1"}, "Other": "2"}
    assert unwrap_envelope(two) is two
    assert unwrap_envelope("text") == "text"


def test_detect_error_wins_over_other_keys():
    with pytest.raises(RemoteError) as exc:
        detect_error({"Error": "Not found", "Data": {"Series": {}}})
    assert exc.value.message == "Not found"


def test_detect_error_empty_marker():
    with pytest.raises(RemoteError) as exc:
        detect_error({"Error": None})
    assert str(exc.value) == "unknown error"


def test_detect_error_passthrough():
    tree = {"Data": {"Series": {"id": "1"}}}
    assert detect_error(tree) is tree


def test_normalize_single_error_short_circuits():
    with pytest.raises(RemoteError):
        normalize_single({"Error": "Not found"}, EntityKind.SERIES)


# ---------- entity branches ----------

def test_actors_envelope_collapsed():
    out = prepare_output({"Actors": {"Actor": [{"Name": "A"}, {"Name": "B"}]}})
    assert out == {"Actors": [{"Name": "A"}, {"Name": "B"}]}


def test_actors_envelope_missing_actor_field():
    with pytest.raises(UnexpectedShapeError) as exc:
        prepare_output({"Actors": {"Person": {"Name": "A"}}}, EntityKind.ACTOR)
    assert exc.value.field == "Actor"


def test_actors_envelope_empty_means_no_actors():
    assert prepare_output({"Actors": None}, EntityKind.ACTOR) == {"Actors": ""}
    assert prepare_output({"Actors": {}}, EntityKind.ACTOR) == {"Actors": ""}


def test_banners_envelope_and_colors():
    data = {"Banners": {"Banner": [
        {"BannerPath": "fanart/original/1.jpg", "Colors": "|1,2,3|4,5,6|"},
        {"BannerPath": "posters/1.jpg", "Colors": None},
    ]}}
    out = prepare_output(data, EntityKind.BANNER)
    assert out == {"Banners": [
        {"BannerPath": "fanart/original/1.jpg", "Colors": ["1,2,3", "4,5,6"]},
        {"BannerPath": "posters/1.jpg", "Colors": []},
    ]}


def test_banners_envelope_malformed():
    with pytest.raises(UnexpectedShapeError):
        prepare_output({"Banners": "broken"}, EntityKind.BANNER)


def test_languages_envelope():
    data = {"Languages": {"Language": [{"abbreviation": "en", "id": "7", "name": "English"}]}}
    assert prepare_output(data, EntityKind.LANGUAGE) == {
        "Languages": [{"abbreviation": "en", "id": "7", "name": "English"}]
    }


def test_series_fields_split():
    out = prepare_output({"Series": {"Genre": "Drama|Crime|", "Actors": "|Dominic West|"}}, EntityKind.SERIES)
    assert out["Series"]["Genre"] == ["Drama", "Crime"]
    assert out["Series"]["Actors"] == ["Dominic West"]


def test_episode_fields_split_on_list():
    data = {"Episode": [
        {"GuestStars": "|A|B|", "Director": "Ed", "Writer": "|W1||W2|"},
        {"GuestStars": None, "Director": {}, "Writer": ""},
    ]}
    out = prepare_output(data, EntityKind.EPISODE)
    assert out["Episode"] == [
        {"GuestStars": ["A", "B"], "Director": ["Ed"], "Writer": ["W1", "W2"]},
        {"GuestStars": [], "Director": [], "Writer": []},
    ]


def test_hint_restricts_branches():
    data = {"Series": {"Genre": "|Drama|"}, "Episode": {"Writer": "|W|"}}
    out = prepare_output(data, EntityKind.EPISODE)
    assert out["Series"]["Genre"] == "|Drama|"
    assert out["Episode"]["Writer"] == ["W"]


def test_no_hint_runs_every_present_branch():
    data = {"Series": {"Genre": "|Drama|"}, "Episode": [{"Writer": "|W|"}]}
    out = prepare_output(data)
    assert out == {"Series": {"Genre": ["Drama"]}, "Episode": [{"Writer": ["W"]}]}


def test_prepare_output_does_not_mutate_input():
    data = {"Actors": {"Actor": [{"Name": "A"}]}}
    before = copy.deepcopy(data)
    prepare_output(data)
    assert data == before


# ---------- end to end from XML ----------

def test_series_document_end_to_end():
    xml = b"""<?xml version="1.0" encoding="UTF-8" ?>
    <Data>
      <Series>
        <id>79126</id>
        <Actors>|Dominic West|Lance Reddick|</Actors>
        <Genre>|Crime|Drama|</Genre>
        <Overview/>
        <Network>HBO</Network>
      </Series>
    </Data>"""
    out = normalize_single(decode(xml), EntityKind.SERIES)
    assert out == {"Series": {
        "id": "79126",
        "Actors": ["Dominic West", "Lance Reddick"],
        "Genre": ["Crime", "Drama"],
        "Overview": "",
        "Network": "HBO",
    }}


def test_empty_elements_inside_episode_list_surface_as_empty_strings():
    xml = b"""<Data>
      <Episode><id>1</id><Overview/><filename/><Director>|D|</Director></Episode>
      <Episode><id>2</id><Overview>Text</Overview><filename/><Director/></Episode>
    </Data>"""
    out = normalize_single(decode(xml, ("Episode",)), EntityKind.EPISODE)
    assert out["Episode"] == [
        {"id": "1", "Overview": "", "filename": "", "Director": ["D"]},
        {"id": "2", "Overview": "Text", "filename": "", "Director": []},
    ]


def test_detect_error_keeps_marker_text():
    with pytest.raises(RemoteError) as exc:
        detect_error({"Error": "  Invalid API key\n"})
    assert exc.value.message == "  Invalid API key\n"
