from .video import Video
