from .errors import (
    CfgError,
    CfgNotPrepared,
    IllegalStateTransition,
    InvalidConfigSource,
    InvalidPlatformAttribute,
    InvalidPlatformAttributeValue,
    NoConfigSourcesProvided,
    NoPlatformBound,
    OperationNotSupported,
    SubstitutionError,
    UnknownPlatform,
    UnresolvedSubstitution,
)
from .models import CfgState, OptionResult, OptionStatus, PlatformArgs, Response
from .options import (
    Option,
    with_config_command_map,
    with_config_session_prefix,
    with_config_sources,
    with_dedicated_connection,
    with_filesystem,
    with_ignore_version,
    with_on_prepare,
    with_platform,
    with_version_pattern,
)
from .applier import apply_options
from .injector import register_attr_setter, set_platform_attr
from .facade import Cfg
from .factory import new_cfg

__all__ = [
    "Cfg",
    "CfgError",
    "CfgNotPrepared",
    "CfgState",
    "IllegalStateTransition",
    "InvalidConfigSource",
    "InvalidPlatformAttribute",
    "InvalidPlatformAttributeValue",
    "NoConfigSourcesProvided",
    "NoPlatformBound",
    "OperationNotSupported",
    "Option",
    "OptionResult",
    "OptionStatus",
    "PlatformArgs",
    "Response",
    "SubstitutionError",
    "UnknownPlatform",
    "UnresolvedSubstitution",
    "apply_options",
    "new_cfg",
    "register_attr_setter",
    "set_platform_attr",
    "with_config_command_map",
    "with_config_session_prefix",
    "with_config_sources",
    "with_dedicated_connection",
    "with_filesystem",
    "with_ignore_version",
    "with_on_prepare",
    "with_platform",
    "with_version_pattern",
]
