from .edgerule import EdgeRule, EdgeRuleProvider, edge_rule_schema, find_edge_rule_guid, find_edge_rule_guid_in
from .types import ActionType, MatchingType, TriggerType
