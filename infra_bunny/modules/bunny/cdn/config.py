from dataclasses import dataclass, field
from typing import Optional

from pulumi import Output

from .types import Action, Matching, PricingType, Trigger


@dataclass
class EdgeRuleTrigger:
    type: Trigger
    """One of: url request_header response_header url_extension country_code remote_ip url_query_string random_chance"""

    pattern_matches: list[str] = field(default_factory=list)
    """Patterns matched against the value the type selects"""

    pattern_matching_type: Matching = Matching.any
    """Whether any, all or none of the patterns must match"""

    parameter_1: Optional[str] = None
    """Depends on the type, e.g. the header name for request_header"""


@dataclass
class EdgeRule:
    name: str
    """Name of the edge rule resource, unique within the pull zone"""

    action_type: Action
    """The action to take, e.g. redirect, set_response_header or block_request"""

    triggers: list[EdgeRuleTrigger]
    """Up to 5 conditions"""

    action_parameter_1: Optional[str] = None
    """Depends on the action, e.g. the redirect URL"""

    action_parameter_2: Optional[str] = None
    """Depends on the action, e.g. the header value"""

    trigger_matching_type: Matching = Matching.all
    """Whether any, all or none of the triggers must match"""

    enabled: bool = True
    """Disabled rules are kept but not applied"""


@dataclass
class Certificate:
    certificate_data: str
    """The PEM encoded certificate"""

    private_key_data: str
    """The PEM encoded private key"""


@dataclass
class Hostname:
    hostname: str
    """The custom hostname, its CNAME record must point to the pull zone's CNAME domain"""

    force_ssl: Optional[bool] = None
    """Redirect plain HTTP requests to HTTPS"""

    load_free_certificate: bool = False
    """Load a free certificate once the CNAME record points to the pull zone"""

    certificate: Optional[Certificate] = None
    """A custom certificate, can not be combined with load_free_certificate"""


@dataclass
class PullZone:
    name: str
    """Globally unique name of the pull zone, it's part of the CNAME domain"""

    origin_url: Optional[str] = None
    """The origin to pull files from"""

    storage_zone_id: Optional[int] = None
    """A storage zone to pull files from instead of an origin URL"""

    type: PricingType = PricingType.standard
    """The pricing type, standard or volume"""

    options: dict = field(default_factory=dict)
    """Any further pull zone attribute, e.g. ``{"enable_logging": true, "safehop": [{"enable": true}]}``"""

    hostnames: list[Hostname] = field(default_factory=list)
    """Custom hostnames of the pull zone"""

    edge_rules: list[EdgeRule] = field(default_factory=list)
    """Edge rules of the pull zone"""


@dataclass
class CdnArgs:
    pull_zones: list[PullZone]
    """List of pull zones"""

    lookup_pull_zones: list[int] = field(default_factory=list)
    """IDs of pull zones managed elsewhere whose shared attributes are exported"""


@dataclass
class HostnameExports:
    hostname: str
    id: Output[str]
    has_certificate: Output[bool]


@dataclass
class EdgeRuleExports:
    name: str
    guid: Output[str]


@dataclass
class PullZoneExports:
    name: str
    id: Output[str]
    cname_domain: Output[str]
    hostnames: list[HostnameExports]
    edge_rules: list[EdgeRuleExports]


@dataclass
class CdnExports:
    pull_zones: list[PullZoneExports]
    lookups: list[dict]
