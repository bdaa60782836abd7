from enum import Enum

from infra_bunny.lib.bunny.edgerule import ActionType, MatchingType, TriggerType
from infra_bunny.lib.bunny.edgerule.types import names


def _by_name(enum: type[Enum]) -> type[Enum]:
    """An enum whose values are the member names of ``enum``, as they are written in stack config"""
    return Enum(f"{enum.__name__}Name", {name: name for name in names(enum)})


Action = _by_name(ActionType)

Trigger = _by_name(TriggerType)

Matching = _by_name(MatchingType)


class PricingType(Enum):
    standard = "standard"
    volume = "volume"


PRICING_TYPE_VALUES = {PricingType.standard: 0, PricingType.volume: 1}
