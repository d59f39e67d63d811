"""TheTVDB XML API client.

Each call builds its endpoint URL from the bound config, fetches the raw
document (or ZIP archive), runs it through the normalization pipeline and
returns the entity the endpoint is about.
"""

import logging
import urllib.parse
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ..models.types import Actor, Banner, Episode, Language, Series, Updates
from ..utils.helpers import as_list, update_timeframe
from .archive import iter_xml_entries
from .config import TvdbConfig
from .errors import UnexpectedShapeError
from .http_client import download_to, fetch_bytes
from .normalizers import EntityKind, normalize_archive, normalize_single
from .xml_decoder import decode

log = logging.getLogger(__name__)


class TvdbClient:
    """Client bound to one immutable TvdbConfig.

    `language` arguments override the configured language for one call.
    All failures surface as TvdbError subclasses.
    """

    def __init__(self, config: Optional[TvdbConfig] = None, max_workers: Optional[int] = None):
        self.config = config if config is not None else TvdbConfig.from_env()
        self.max_workers = max_workers

    # ---------- plumbing ----------

    def _api(self, *parts: Any) -> str:
        """<mirror>/api/<apikey>/<parts...>"""
        key = self.config.require_api_key()
        return "/".join([self.config.mirror, "api", key, *(str(p) for p in parts)])

    def _lang(self, language: Optional[str]) -> str:
        return self.config.with_language(language).language

    def _get_xml(self, url: str, kind: EntityKind, force_list: Iterable[str] = ()) -> Any:
        raw = fetch_bytes(url, timeout=self.config.timeout)
        return normalize_single(decode(raw, force_list), kind)

    def _get_zip(self, url: str, force_list: Iterable[str] = ()) -> Dict[str, Any]:
        raw = fetch_bytes(url, timeout=self.config.timeout)
        return normalize_archive(iter_xml_entries(raw), force_list, max_workers=self.max_workers)

    @staticmethod
    def _record(payload: Any, key: str) -> Dict[str, Any]:
        value = payload.get(key) if isinstance(payload, dict) else None
        if not isinstance(value, dict):
            raise UnexpectedShapeError(key, f"response has no {key} record")
        return value

    @staticmethod
    def _records(payload: Any, key: str) -> List[Any]:
        # "<Data/>" (nothing found) collapses to ""
        if not isinstance(payload, dict):
            return []
        return as_list(payload.get(key))

    # ---------- languages / updates ----------

    def get_languages(self) -> List[Language]:
        url = self._api("languages.xml")
        return self._records(self._get_xml(url, EntityKind.LANGUAGE, ("Language",)), "Languages")

    def get_updates(self, timeframe: str = "day") -> Updates:
        """Updated series, episodes and banners for day, week, month or all."""
        tf = update_timeframe(timeframe)
        merged = self._get_zip(self._api("updates", f"updates_{tf}.zip"), ("Series", "Episode", "Banner"))
        return {
            "time": merged.get("time", ""),
            "Series": as_list(merged.get("Series")),
            "Episode": as_list(merged.get("Episode")),
            "Banner": as_list(merged.get("Banner")),
        }

    # ---------- series ----------

    def get_series(self, name: str, language: Optional[str] = None) -> List[Series]:
        """Search series by name."""
        params = {"seriesname": name, "language": self._lang(language)}
        url = f"{self.config.mirror}/api/GetSeries.php?" + urllib.parse.urlencode(params)
        return self._records(self._get_xml(url, EntityKind.SERIES, ("Series",)), "Series")

    def get_series_by_id(self, series_id: Union[int, str], language: Optional[str] = None) -> Series:
        url = self._api("series", series_id, f"{self._lang(language)}.xml")
        return self._record(self._get_xml(url, EntityKind.SERIES), "Series")

    def get_series_all_by_id(self, series_id: Union[int, str], language: Optional[str] = None) -> Series:
        """Series record with its Actors, Banners and Episodes attached."""
        url = self._api("series", series_id, "all", f"{self._lang(language)}.zip")
        merged = self._get_zip(url, ("Episode", "Actor", "Banner"))
        series = dict(self._record(merged, "Series"))
        series["Actors"] = as_list(merged.get("Actors"))
        series["Banners"] = as_list(merged.get("Banners"))
        series["Episodes"] = as_list(merged.get("Episode"))
        return series

    # ---------- episodes ----------

    def get_episode_by_id(self, episode_id: Union[int, str], language: Optional[str] = None) -> Episode:
        url = self._api("episodes", episode_id, f"{self._lang(language)}.xml")
        return self._record(self._get_xml(url, EntityKind.EPISODE), "Episode")

    def _episode_by_order(self, series_id, order: str, *numbers, language: Optional[str] = None) -> Episode:
        url = self._api("series", series_id, order, *numbers, f"{self._lang(language)}.xml")
        return self._record(self._get_xml(url, EntityKind.EPISODE), "Episode")

    def get_episode_by_default_order(self, series_id, season: int, episode: int,
                                     language: Optional[str] = None) -> Episode:
        return self._episode_by_order(series_id, "default", season, episode, language=language)

    def get_episode_by_dvd_order(self, series_id, season: int, episode: int,
                                 language: Optional[str] = None) -> Episode:
        return self._episode_by_order(series_id, "dvd", season, episode, language=language)

    def get_episode_by_absolute(self, series_id, absolute: int, language: Optional[str] = None) -> Episode:
        return self._episode_by_order(series_id, "absolute", absolute, language=language)

    # ---------- actors / banners ----------

    def get_actors(self, series_id: Union[int, str]) -> List[Actor]:
        url = self._api("series", series_id, "actors.xml")
        return self._records(self._get_xml(url, EntityKind.ACTOR, ("Actor",)), "Actors")

    def get_banners(self, series_id: Union[int, str]) -> List[Banner]:
        url = self._api("series", series_id, "banners.xml")
        return self._records(self._get_xml(url, EntityKind.BANNER, ("Banner",)), "Banners")

    def banner_url(self, banner_path: str) -> str:
        return f"{self.config.mirror}/banners/{banner_path.lstrip('/')}"

    def download_banner(self, banner_path: str, filename: Union[str, Path]) -> Path:
        """Save the image at <mirror>/banners/<banner_path> to `filename`."""
        path = download_to(self.banner_url(banner_path), filename, timeout=self.config.timeout)
        log.info("saved banner %s to %s", banner_path, path)
        return path
