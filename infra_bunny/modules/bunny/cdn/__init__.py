from .cdn import Cdn
