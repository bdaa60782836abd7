import logging
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

from pulumi import ResourceOptions

from infra_bunny.lib.client import API_ERRORS, Client, models
from infra_bunny.lib.provider import (
    BunnyResource,
    BunnyResourceProvider,
    Diagnostics,
    Field,
    ProviderSettings,
    ResourceData,
    Schema,
    errors_from,
    get_int,
    get_ok_str,
)
from infra_bunny.lib.provider.structure import expand_block
from infra_bunny.lib.provider.validation import one_of
from .types import ActionType, MatchingType, TriggerType, decode, encode, names

logger = logging.getLogger(__name__)

DESCRIPTION_PREFIX = "infra-bunny id: "

MAX_TRIGGERS = 5


@dataclass
class Trigger:
    type: Optional[str] = None
    pattern_matches: Optional[list[str]] = None
    pattern_matching_type: Optional[str] = None
    parameter_1: Optional[str] = None


trigger_schema = Schema(
    type=Field(
        str,
        "The type of the Trigger. Valid values: " + ", ".join(names(TriggerType)),
        required=True,
        validate=one_of(names(TriggerType)),
    ),
    pattern_matches=Field(
        set,
        "The list of pattern matches that will trigger the edge rule.",
        elem=str,
        optional=True,
    ),
    pattern_matching_type=Field(
        str,
        "The type of pattern matching. Valid values: " + ", ".join(names(MatchingType)),
        required=True,
        validate=one_of(names(MatchingType)),
    ),
    parameter_1=Field(str, "The trigger parameter 1. The value depends on the type of trigger.", optional=True),
)

edge_rule_schema = Schema(
    pull_zone_id=Field(int, "The ID of the Pull Zone to that Edge Rule belongs.", required=True, force_new=True),
    action_type=Field(
        str,
        "The action type of the Edge Rule. Valid values: " + ", ".join(names(ActionType)),
        required=True,
        validate=one_of(names(ActionType)),
    ),
    action_parameter_1=Field(
        str,
        "The Action parameter 1. The value depends on other parameters of the edge rule.",
        optional=True,
    ),
    action_parameter_2=Field(
        str,
        "The Action parameter 2. The value depends on other parameters of the edge rule.",
        optional=True,
    ),
    # the API rejects rules with more than 5 conditions
    trigger=Field(list, "The conditions of the Edge Rule.", elem=trigger_schema, required=True, max_items=MAX_TRIGGERS),
    trigger_matching_type=Field(
        str,
        "The trigger matching type. Valid values: " + ", ".join(names(MatchingType)),
        optional=True,
        default=MatchingType.all.name,
        validate=one_of(names(MatchingType)),
    ),
    description=Field(
        str,
        "The description of the Edge Rule. It holds the identifier used to find the rule after its creation.",
        computed=True,
    ),
    enabled=Field(bool, "Determines if the edge rule is currently enabled or not.", optional=True, default=True),
)


def find_edge_rule_guid_in(edge_rules: Optional[list[models.EdgeRule]], description: str) -> str:
    """Return the GUID of the edge rule whose description equals ``description``

    :raises LookupError: No rule has the description, or the matching rule has no GUID
    """
    for edge_rule in edge_rules or []:
        if edge_rule.description == description:
            if not edge_rule.guid:
                raise LookupError("found edge rule with matching description but guid is empty")
            return edge_rule.guid

    raise LookupError("pull zone has no edge rule with the internal identifier in its description")


def find_edge_rule_guid(client: Client, pull_zone_id: int, description: str) -> str:
    """Recover the GUID of a created edge rule, the API does not return it"""
    try:
        pz = client.pull_zone.get(pull_zone_id)
    except API_ERRORS as e:
        raise LookupError(f"retrieving pull zone failed: {e}")

    return find_edge_rule_guid_in(pz.edge_rules, description)


def _triggers_from_resource(d: ResourceData) -> list[models.EdgeRuleTrigger]:
    triggers = []
    for raw in d.get("trigger") or []:
        trigger = expand_block(Trigger, raw)
        triggers.append(
            models.EdgeRuleTrigger(
                type=encode(TriggerType, trigger.type),
                pattern_matches=list(trigger.pattern_matches or []),
                pattern_matching_type=encode(MatchingType, trigger.pattern_matching_type),
                parameter_1=trigger.parameter_1,
            )
        )
    return triggers


def edge_rule_from_resource(d: ResourceData) -> models.AddOrUpdateEdgeRuleOptions:
    """Build the add-or-update request, it updates the existing rule if ``d`` has an id

    :raises ValueError: An enumeration field holds an unknown name
    """
    try:
        triggers = _triggers_from_resource(d)
    except ValueError as e:
        raise ValueError(f"converting edge rule triggers failed: {e}")

    return models.AddOrUpdateEdgeRuleOptions(
        guid=d.id or None,
        enabled=d.get("enabled"),
        action_type=encode(ActionType, d.get("action_type")),
        action_parameter_1=d.get("action_parameter_1"),
        action_parameter_2=d.get("action_parameter_2"),
        triggers=triggers,
        trigger_matching_type=encode(MatchingType, d.get("trigger_matching_type")),
        description=get_ok_str(d, "description"),
    )


def edge_rule_to_resource(edge_rule: models.EdgeRule, d: ResourceData) -> None:
    """
    :raises ValueError: The rule has no GUID
    :raises EnumDecodeError: The rule has an unknown action, trigger or matching type
    """
    if not edge_rule.guid:
        raise ValueError("guid is empty")

    d.set_id(edge_rule.guid)
    d.set("action_type", decode(ActionType, edge_rule.action_type).name)
    d.set("action_parameter_1", edge_rule.action_parameter_1)
    d.set("action_parameter_2", edge_rule.action_parameter_2)
    d.set(
        "trigger",
        [
            {
                "type": decode(TriggerType, trigger.type).name,
                "pattern_matches": trigger.pattern_matches or [],
                "pattern_matching_type": decode(MatchingType, trigger.pattern_matching_type).name,
                "parameter_1": trigger.parameter_1,
            }
            for trigger in edge_rule.triggers or []
        ],
    )
    d.set("trigger_matching_type", decode(MatchingType, edge_rule.trigger_matching_type).name)
    d.set("description", edge_rule.description)
    d.set("enabled", edge_rule.enabled)


def create_edge_rule(client: Client, d: ResourceData) -> Diagnostics:
    description = f"{DESCRIPTION_PREFIX}{uuid4()}"
    d.set("description", description)

    try:
        opts = edge_rule_from_resource(d)
    except ValueError as e:
        return errors_from("converting resource to API type failed", e)

    pull_zone_id = get_int(d, "pull_zone_id")

    try:
        client.pull_zone.add_or_update_edge_rule(pull_zone_id, opts)
    except API_ERRORS as e:
        return errors_from("creating edge rule failed", e)

    try:
        guid = find_edge_rule_guid(client, pull_zone_id, description)
    except LookupError as e:
        return errors_from(f"edge rule (description: {description!r}) created successfully, looking up its guid failed", e)

    logger.debug("edge rule %r of pull zone %s has guid %s", description, pull_zone_id, guid)
    d.set_id(guid)

    return Diagnostics()


def update_edge_rule(client: Client, d: ResourceData) -> Diagnostics:
    try:
        opts = edge_rule_from_resource(d)
    except ValueError as e:
        return errors_from("converting resource to API type failed", e)

    try:
        client.pull_zone.add_or_update_edge_rule(get_int(d, "pull_zone_id"), opts)
    except API_ERRORS as e:
        return errors_from("updating edge rule failed", e)

    return Diagnostics()


def read_edge_rule(client: Client, d: ResourceData) -> Diagnostics:
    guid = d.id
    pull_zone_id = get_int(d, "pull_zone_id")

    try:
        pz = client.pull_zone.get(pull_zone_id)
    except API_ERRORS as e:
        return errors_from("retrieving pull zone failed", e)

    if not pz.edge_rules:
        return Diagnostics().error("pull zone has no edge rules")

    edge_rule = next((er for er in pz.edge_rules if er.guid == guid), None)
    if edge_rule is None:
        return Diagnostics().error(
            "edge rule not found",
            f"pull zone with id {pull_zone_id}, has no edge rule with guid: {guid!r}",
        )

    try:
        edge_rule_to_resource(edge_rule, d)
    except ValueError as e:
        return errors_from("converting edge rule api type to resource data failed", e)

    return Diagnostics()


def delete_edge_rule(client: Client, d: ResourceData) -> Diagnostics:
    try:
        client.pull_zone.delete_edge_rule(get_int(d, "pull_zone_id"), d.id)
    except API_ERRORS as e:
        return errors_from("could not delete edge rule", e)

    d.set_id("")

    return Diagnostics()


class EdgeRuleProvider(BunnyResourceProvider):
    """Dynamic provider of `bunny_edgerule` resources"""

    schema = edge_rule_schema
    entity = "edge rule"

    def create_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return create_edge_rule(client, d)

    def read_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return read_edge_rule(client, d)

    def update_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return update_edge_rule(client, d)

    def delete_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return delete_edge_rule(client, d)


class EdgeRule(BunnyResource):
    def __init__(
        self,
        resource_name: str,
        props: dict,
        settings: ProviderSettings,
        opts: Optional[ResourceOptions] = None,
    ):
        super().__init__(EdgeRuleProvider(settings), resource_name, props, opts)
