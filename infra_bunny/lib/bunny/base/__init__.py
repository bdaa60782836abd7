from .bunny_module import BunnyModule
