from typing import TypeVar

ConfigType = TypeVar("ConfigType")
"""The stack configuration dataclass of a module"""

ExportsType = TypeVar("ExportsType")
"""The exports dataclass of a module"""
