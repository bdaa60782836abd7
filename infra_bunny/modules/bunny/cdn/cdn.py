from typing import Optional

from pulumi import Output, ResourceOptions

from infra_bunny.lib.bunny.base import BunnyModule
from infra_bunny.lib.bunny.edgerule import EdgeRule
from infra_bunny.lib.bunny.hostname import Hostname
from infra_bunny.lib.bunny.pullzone import PullZone, get_pullzone
from infra_bunny.lib.bunny.pullzone.get_pullzone import SENSITIVE_FIELDS
from .config import (
    CdnArgs,
    CdnExports,
    EdgeRuleExports,
    HostnameExports,
    PullZoneExports,
)
from .config import EdgeRule as EdgeRuleConfig
from .config import Hostname as HostnameConfig
from .config import PullZone as PullZoneConfig
from .types import PRICING_TYPE_VALUES


class Cdn(BunnyModule):
    def build(self, config: CdnArgs) -> CdnExports:
        return CdnExports(
            pull_zones=[self._create_pull_zone(pull_zone) for pull_zone in config.pull_zones],
            lookups=[self._lookup_pull_zone(pull_zone_id) for pull_zone_id in config.lookup_pull_zones],
        )

    def _create_pull_zone(self, pull_zone: PullZoneConfig) -> PullZoneExports:
        zone = PullZone(
            pull_zone.name,
            {
                **pull_zone.options,
                "name": pull_zone.name,
                "origin_url": pull_zone.origin_url,
                "storage_zone_id": pull_zone.storage_zone_id,
                "type": PRICING_TYPE_VALUES[pull_zone.type],
            },
            self.settings,
            opts=self.child_opts(),
        )
        pull_zone_id = zone.id.apply(int)

        hostnames = [
            self._create_hostname(hostname, pull_zone_id, pull_zone.name, zone)
            for hostname in pull_zone.hostnames
        ]
        edge_rules = [
            self._create_edge_rule(edge_rule, pull_zone_id, pull_zone.name, zone)
            for edge_rule in pull_zone.edge_rules
        ]

        return PullZoneExports(
            name=pull_zone.name,
            id=zone.id,
            cname_domain=zone.cname_domain,
            hostnames=hostnames,
            edge_rules=edge_rules,
        )

    def _create_hostname(
        self, hostname: HostnameConfig, pull_zone_id: Output[int], zone_name: str, zone: PullZone
    ) -> HostnameExports:
        certificate: Optional[list[dict]] = None
        if hostname.certificate:
            certificate = [
                {
                    "certificate_data": hostname.certificate.certificate_data,
                    "private_key_data": Output.secret(hostname.certificate.private_key_data),
                }
            ]

        resource = Hostname(
            f"{zone_name}-{hostname.hostname}",
            {
                "pull_zone_id": pull_zone_id,
                "hostname": hostname.hostname,
                "force_ssl": hostname.force_ssl,
                "load_free_certificate": hostname.load_free_certificate,
                "certificate": certificate,
            },
            self.settings,
            opts=ResourceOptions(parent=zone),
        )

        return HostnameExports(hostname=hostname.hostname, id=resource.id, has_certificate=resource.has_certificate)

    def _create_edge_rule(
        self, edge_rule: EdgeRuleConfig, pull_zone_id: Output[int], zone_name: str, zone: PullZone
    ) -> EdgeRuleExports:
        resource = EdgeRule(
            f"{zone_name}-{edge_rule.name}",
            {
                "pull_zone_id": pull_zone_id,
                "action_type": edge_rule.action_type.value,
                "action_parameter_1": edge_rule.action_parameter_1,
                "action_parameter_2": edge_rule.action_parameter_2,
                "trigger": [
                    {
                        "type": trigger.type.value,
                        "pattern_matches": trigger.pattern_matches,
                        "pattern_matching_type": trigger.pattern_matching_type.value,
                        "parameter_1": trigger.parameter_1,
                    }
                    for trigger in edge_rule.triggers
                ],
                "trigger_matching_type": edge_rule.trigger_matching_type.value,
                "enabled": edge_rule.enabled,
            },
            self.settings,
            opts=ResourceOptions(parent=zone),
        )

        return EdgeRuleExports(name=edge_rule.name, guid=resource.id)

    def _lookup_pull_zone(self, pull_zone_id: int) -> dict:
        shared = get_pullzone(self.settings.client(), pull_zone_id)

        return {key: Output.secret(value) if key in SENSITIVE_FIELDS else value for key, value in shared.items()}
