"""Normalization of decoded catalog responses.

The catalog's XML is loosely typed: list fields arrive as pipe-delimited
strings, blank fields arrive as empty elements, and every payload sits
inside a `Data` or `Items` root. The functions here turn a decoded tree
into the stable Series / Episode / Actor / Banner / Language shapes.

Pipeline for one document:
    decode -> detect_error -> unwrap_envelope -> prepare_output

prepare_output runs the per-entity reshaping first and collapse_empty
last, over the whole result. None of the functions mutate their input.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .errors import RemoteError, UnexpectedShapeError
from .xml_decoder import decode

log = logging.getLogger(__name__)

ENVELOPE_KEYS = ("Data", "Items")
SERIES_PIPE_FIELDS = ("Actors", "Genre")
EPISODE_PIPE_FIELDS = ("GuestStars", "Director", "Writer")
BANNER_PIPE_FIELDS = ("Colors",)
MAX_ARCHIVE_WORKERS = 4


class EntityKind(str, Enum):
    """Primary entity of a response, fixed by the endpoint that was called."""

    SERIES = "Series"
    EPISODE = "Episode"
    ACTOR = "Actor"
    BANNER = "Banner"
    LANGUAGE = "Language"
    UNKNOWN = "Unknown"


def _is_empty_marker(value: Any) -> bool:
    # xmltodict gives None for <Tag/>, other decoders give {}
    return value is None or (isinstance(value, dict) and not value)


def unwrap_envelope(tree: Any) -> Any:
    """Strip a single `Data` or `Items` root; anything else passes through."""
    if isinstance(tree, dict) and len(tree) == 1:
        (key, value), = tree.items()
        if key in ENVELOPE_KEYS:
            return value
    return tree


def detect_error(tree: Any) -> Any:
    """Raise RemoteError if the raw decoded tree carries an `Error` marker."""
    if isinstance(tree, dict) and "Error" in tree:
        marker = tree["Error"]
        if _is_empty_marker(marker) or marker == "":
            message = "unknown error"
        elif isinstance(marker, str):
            message = marker
        else:
            message = str(marker)
        raise RemoteError(message)
    return tree


def collapse_empty(thing: Any) -> Any:
    """Replace every empty element (None or {}) with "" at any depth.

    Returns a new tree; idempotent.
    """
    if thing is None:
        return ""
    if isinstance(thing, dict):
        if not thing:
            return ""
        return {k: collapse_empty(v) for k, v in thing.items()}
    if isinstance(thing, list):
        return [collapse_empty(v) for v in thing]
    return thing


def split_pipe(value: Any) -> List[str]:
    """'|Apes||Oranges|Man|' -> ['Apes', 'Oranges', 'Man']; non-strings give []."""
    if not isinstance(value, str):
        return []
    return [token for token in value.split("|") if token]


def split_pipe_each(data: Any, selectors: Union[str, Sequence[str]]) -> Any:
    """Split the named pipe fields on one record or on every record of a list.

    Fields a record does not carry stay absent.
    """
    if isinstance(selectors, str):
        selectors = [selectors]

    def _split(record):
        if not isinstance(record, dict):
            return record
        out = dict(record)
        for field in selectors:
            if field in record:
                out[field] = split_pipe(record[field])
        return out

    if isinstance(data, list):
        return [_split(item) for item in data]
    return _split(data)


def _envelope_field(value: Any, parent: str, child: str) -> Any:
    """Return value[child] for an `<Actors><Actor/>...</Actors>` style envelope."""
    if _is_empty_marker(value) or value == "":
        return ""
    if isinstance(value, dict) and child in value:
        return value[child]
    raise UnexpectedShapeError(child, f"{parent} envelope has no {child} field")


def _shape_actors(value: Any) -> Any:
    return _envelope_field(value, "Actors", "Actor")


def _shape_banners(value: Any) -> Any:
    return split_pipe_each(_envelope_field(value, "Banners", "Banner"), BANNER_PIPE_FIELDS)


def _shape_episodes(value: Any) -> Any:
    return split_pipe_each(value, EPISODE_PIPE_FIELDS)


def _shape_series(value: Any) -> Any:
    return split_pipe_each(value, SERIES_PIPE_FIELDS)


def _shape_languages(value: Any) -> Any:
    return _envelope_field(value, "Languages", "Language")


# kind -> (top-level key, reshaping)
_BRANCHES = {
    EntityKind.ACTOR: ("Actors", _shape_actors),
    EntityKind.BANNER: ("Banners", _shape_banners),
    EntityKind.EPISODE: ("Episode", _shape_episodes),
    EntityKind.SERIES: ("Series", _shape_series),
    EntityKind.LANGUAGE: ("Languages", _shape_languages),
}


def prepare_output(data: Any, kind: Optional[EntityKind] = None) -> Any:
    """Reshape an unwrapped, error-free payload, then collapse empty elements.

    With a `kind` only that entity's branch runs. Without one (or with
    UNKNOWN) every branch whose key is present runs, which is what a
    merged archive needs.
    """
    if isinstance(data, dict):
        if kind is None or kind is EntityKind.UNKNOWN:
            branches = list(_BRANCHES.values())
        else:
            branches = [_BRANCHES[kind]]
        data = dict(data)
        for key, shape in branches:
            if key in data:
                data[key] = shape(data[key])
    return collapse_empty(data)


def normalize_single(decoded: Any, kind: Optional[EntityKind] = None) -> Any:
    """Full pipeline for one decoded document."""
    return prepare_output(unwrap_envelope(detect_error(decoded)), kind)


def _decode_entry(entry: Tuple[str, bytes], force_list: Tuple[str, ...]) -> Tuple[str, Any]:
    name, raw = entry
    tree = collapse_empty(unwrap_envelope(detect_error(decode(raw, force_list))))
    return name, tree


def normalize_archive(
    entries: Iterable[Tuple[str, bytes]],
    force_list: Iterable[str] = (),
    max_workers: Optional[int] = None,
) -> Dict[str, Any]:
    """Decode every archive entry and merge their top-level keys.

    Entries are decoded independently (possibly in parallel) and merged in
    archive order once all of them are done; on a key collision the later
    entry wins. An error in any entry aborts the whole merge.
    """
    entries = list(entries)
    force_list = tuple(force_list)
    workers = max_workers or min(len(entries), MAX_ARCHIVE_WORKERS)

    if workers <= 1:
        decoded = [_decode_entry(entry, force_list) for entry in entries]
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            decoded = list(pool.map(lambda entry: _decode_entry(entry, force_list), entries))

    merged: Dict[str, Any] = {}
    for name, tree in decoded:
        if not isinstance(tree, dict):
            log.debug("archive entry %s has no keyed payload", name)
            continue
        for key, value in tree.items():
            if key in merged:
                log.debug("archive entry %s overrides key %s", name, key)
            merged[key] = value
    if not merged:
        return {}
    return prepare_output(merged)
