"""ZIP archive extraction for bundled catalog responses."""

import io
import logging
import zipfile
from typing import Iterator, Tuple

from .errors import DecodeError

log = logging.getLogger(__name__)


def iter_xml_entries(data: bytes) -> Iterator[Tuple[str, bytes]]:
    """Yield (name, raw bytes) for every XML file in the archive, in directory order."""
    try:
        zf = zipfile.ZipFile(io.BytesIO(data))
    except zipfile.BadZipFile as e:
        raise DecodeError(f"corrupt archive: {e}") from e
    with zf:
        for info in zf.infolist():
            if info.is_dir() or not info.filename.lower().endswith(".xml"):
                log.debug("skipping archive entry %s", info.filename)
                continue
            try:
                raw = zf.read(info)
            except (zipfile.BadZipFile, zipfile.LargeZipFile) as e:
                raise DecodeError(f"corrupt archive entry {info.filename}: {e}") from e
            log.debug("archive entry %s (%d bytes)", info.filename, len(raw))
            yield info.filename, raw
