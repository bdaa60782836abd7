from .storagezone import StorageZone, StorageZoneProvider, check_storage_zone_immutable, storage_zone_schema, validate_regions
