from infra_bunny.lib.bunny.base import BunnyModule
from infra_bunny.lib.bunny.storagezone import StorageZone
from .config import StorageArgs, StorageExports, StorageZoneExports
from .config import StorageZone as StorageZoneConfig


class Storage(BunnyModule):
    def build(self, config: StorageArgs) -> StorageExports:
        return StorageExports(storage_zones=[self._create_storage_zone(zone) for zone in config.storage_zones])

    def _create_storage_zone(self, zone: StorageZoneConfig) -> StorageZoneExports:
        storage_zone = StorageZone(
            zone.name,
            {
                "name": zone.name,
                "region": zone.region.value,
                "replication_regions": [region.value for region in zone.replication_regions],
                "origin_url": zone.origin_url,
                "custom_404_file_path": zone.custom_404_file_path,
                "rewrite_404_to_200": zone.rewrite_404_to_200,
            },
            self.settings,
            opts=self.child_opts(protect=zone.protect),
        )

        return StorageZoneExports(
            name=zone.name,
            id=storage_zone.id,
            password=storage_zone.password,
            read_only_password=storage_zone.read_only_password,
        )
