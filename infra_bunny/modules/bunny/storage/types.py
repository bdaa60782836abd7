from enum import Enum


class Region(Enum):
    DE = "DE"
    NY = "NY"
    LA = "LA"
    SG = "SG"
    SYD = "SYD"
