"""Generic XML -> tree decoding on top of xmltodict.

The decoder knows nothing about the catalog schema. It yields plain dicts,
lists and strings; an empty element such as `<Director/>` decodes to None.
"""

from typing import Any, Iterable, Union
from xml.parsers.expat import ExpatError

import xmltodict

from .errors import DecodeError


def _root_children(tags: Iterable[str]):
    tags = frozenset(tags)
    if not tags:
        return None
    # path holds the ancestors of `key`; length 1 means a direct child of the root
    return lambda path, key, value: len(path) == 1 and key in tags


def decode(xml: Union[bytes, str], force_list: Iterable[str] = ()) -> Any:
    """Decode one XML document.

    `force_list` names the tags that are always decoded as lists when they
    sit directly under the root element, so a single <Episode> comes back as
    a one-element list instead of a dict. Deeper tags of the same name (the
    <Series> id inside an update-feed <Episode>) keep their own shape.
    Attributes are decoded without a prefix: `<Data time="1">` gives
    {"Data": {"time": "1"}}.
    """
    try:
        return xmltodict.parse(
            xml,
            attr_prefix="",
            force_list=_root_children(force_list),
            dict_constructor=dict,
        )
    except ExpatError as e:
        raise DecodeError(f"malformed XML: {e}") from e
