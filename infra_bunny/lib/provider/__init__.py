from .diagnostics import Diagnostic, Diagnostics, Severity, errors_from, warnings_from
from .dynamic import BunnyResource, BunnyResourceProvider
from .errors import EnumDecodeError, ImmutableFieldError, ProviderError
from .getters import get_bool, get_float, get_id_as_int, get_int, get_ok_str, get_str, get_str_set_as_list
from .resource_data import ResourceData
from .schema import Field, Schema, is_unknown, suppress_equivalent_str_list, suppress_int_unset, suppress_missing_optional_block
from .sets import normalize_str_list, normalize_str_set, set_str_set
from .settings import ProviderSettings, CredentialsNotConfiguredError, resolve_api_key
from .state_change import StateChangeConf, StateChangeTimeoutError, StateChangeCancelledError
from .structure import block_from_resource, flatten_block
