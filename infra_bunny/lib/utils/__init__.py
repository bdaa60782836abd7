from .kebab_from_snake import kebab_from_snake
from .last_updated import last_updated
from .outputs_from_exports import outputs_from_exports
from .run_once import run_once
