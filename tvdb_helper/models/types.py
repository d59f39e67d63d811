"""Type definitions for tvdb-helper.

Field names follow the catalog's XML tags. Every scalar stays a string
(ids included); blank fields are "".
"""

from typing import TypedDict, List, Union


class Actor(TypedDict, total=False):
    id: str
    Image: str
    Name: str
    Role: str
    SortOrder: str


class Banner(TypedDict, total=False):
    id: str
    BannerPath: str
    BannerType: str        # poster/fanart/series/season
    BannerType2: str       # 680x1000, graphical, season...
    Colors: List[str]      # "|r,g,b|r,g,b|" in the XML
    Language: str
    Rating: str
    RatingCount: str
    SeriesName: str
    ThumbnailPath: str
    VignettePath: str
    Season: str


class Episode(TypedDict, total=False):
    id: str
    seriesid: str
    seasonid: str
    SeasonNumber: str
    EpisodeNumber: str
    EpisodeName: str
    FirstAired: str
    GuestStars: List[str]
    Director: List[str]
    Writer: List[str]
    Overview: str
    ProductionCode: str
    DVD_season: str
    DVD_episodenumber: str
    absolute_number: str
    filename: str
    IMDB_ID: str
    Language: str
    Rating: str
    lastupdated: str


class Series(TypedDict, total=False):
    id: str
    SeriesName: str
    Language: str
    Overview: str
    FirstAired: str
    Network: str
    IMDB_ID: str
    zap2it_id: str
    Genre: List[str]
    # pipe-split names, or the full Actor records on the "all data" call
    Actors: Union[List[str], List[Actor]]
    ContentRating: str
    Rating: str
    Runtime: str
    Status: str
    Airs_DayOfWeek: str
    Airs_Time: str
    banner: str
    fanart: str
    poster: str
    lastupdated: str
    Banners: List[Banner]
    Episodes: List[Episode]


class Language(TypedDict, total=False):
    id: str
    name: str
    abbreviation: str


class UpdateEntry(TypedDict, total=False):
    id: str
    Series: str
    time: str
    path: str
    type: str
    format: str
    language: str


class Updates(TypedDict):
    time: str
    Series: List[UpdateEntry]
    Episode: List[UpdateEntry]
    Banner: List[UpdateEntry]
