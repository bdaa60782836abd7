from .videolibrary import VideoLibrary, VideoLibraryProvider, check_video_library_immutable, video_library_schema
