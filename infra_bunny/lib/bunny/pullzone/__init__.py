from .get_pullzone import get_pullzone, find_pullzone_by_name, pull_zone_to_shared
from .pullzone import PullZone, PullZoneProvider, pull_zone_schema, pull_zone_from_resource, pull_zone_to_resource
