from dataclasses import dataclass, field

from pulumi import Output


@dataclass
class VideoLibrary:
    name: str
    """Name of the video library"""

    replication_regions: list[str] = field(default_factory=list)
    """Regions the videos are replicated to (UK SE NY LA SG SY BR JH), can not be changed after creation"""

    options: dict = field(default_factory=dict)
    """Any further video library attribute, e.g. ``{"enable_drm": true, "bitrate_1080p": 6000}``"""

    protect: bool = True
    """Protect the library against deletion, deleting it deletes its videos"""


@dataclass
class VideoArgs:
    video_libraries: list[VideoLibrary]
    """List of video libraries"""


@dataclass
class VideoLibraryExports:
    name: str
    id: Output[str]
    pull_zone_id: Output[int]
    storage_zone_id: Output[int]
    api_key: Output[str]


@dataclass
class VideoExports:
    video_libraries: list[VideoLibraryExports]
