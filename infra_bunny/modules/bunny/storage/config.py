from dataclasses import dataclass, field
from typing import Optional

from pulumi import Output

from .types import Region


@dataclass
class StorageZone:
    name: str
    """Name of the storage zone, can not be changed after creation"""

    region: Region = Region.DE
    """The main region, can not be changed after creation"""

    replication_regions: list[Region] = field(default_factory=list)
    """Regions the files are replicated to, regions can be added but not removed"""

    origin_url: Optional[str] = None
    """Origin that is pulled from when a file is not found"""

    custom_404_file_path: Optional[str] = None
    """File returned for files that are not found"""

    rewrite_404_to_200: Optional[bool] = None
    """Rewrite 404 status codes to 200 for URLs without extension"""

    protect: bool = True
    """Protect the zone against deletion, deleting it deletes its files"""


@dataclass
class StorageArgs:
    storage_zones: list[StorageZone]
    """List of storage zones"""


@dataclass
class StorageZoneExports:
    name: str
    id: Output[str]
    password: Output[str]
    read_only_password: Output[str]


@dataclass
class StorageExports:
    storage_zones: list[StorageZoneExports]
