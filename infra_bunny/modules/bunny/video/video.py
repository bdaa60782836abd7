from infra_bunny.lib.bunny.base import BunnyModule
from infra_bunny.lib.bunny.videolibrary import VideoLibrary
from .config import VideoArgs, VideoExports, VideoLibraryExports
from .config import VideoLibrary as VideoLibraryConfig


class Video(BunnyModule):
    def build(self, config: VideoArgs) -> VideoExports:
        return VideoExports(video_libraries=[self._create_video_library(library) for library in config.video_libraries])

    def _create_video_library(self, library: VideoLibraryConfig) -> VideoLibraryExports:
        video_library = VideoLibrary(
            library.name,
            {
                **library.options,
                "name": library.name,
                "replication_regions": library.replication_regions,
            },
            self.settings,
            opts=self.child_opts(protect=library.protect),
        )

        return VideoLibraryExports(
            name=library.name,
            id=video_library.id,
            pull_zone_id=video_library.pull_zone_id,
            storage_zone_id=video_library.storage_zone_id,
            api_key=video_library.api_key,
        )
