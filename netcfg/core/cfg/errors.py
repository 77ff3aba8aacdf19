from __future__ import annotations

from typing import Iterable, List, Optional


class CfgError(Exception):
    pass


class NoConfigSourcesProvided(CfgError):
    def __init__(self, message: str = "no configuration sources provided, cannot continue"):
        super().__init__(message)


class InvalidPlatformAttribute(CfgError):
    def __init__(self, *, attr_name: str, target_type: str):
        self.attr_name = attr_name
        self.target_type = target_type
        super().__init__(f"invalid platform attribute '{attr_name}' for platform type {target_type}")


class InvalidPlatformAttributeValue(CfgError):
    def __init__(self, *, attr_name: str, target_type: str, expected: str, actual: str):
        self.attr_name = attr_name
        self.target_type = target_type
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"invalid value for platform attribute '{attr_name}' on {target_type}: "
            f"expected {expected}, got {actual}"
        )


class NoPlatformBound(CfgError):
    def __init__(self, message: str = "no platform bound to cfg, use with_platform() or new_cfg()"):
        super().__init__(message)


class InvalidConfigSource(CfgError):
    def __init__(self, *, source: str, config_sources: Iterable[str]):
        self.source = source
        self.config_sources = list(config_sources)
        super().__init__(
            f"invalid config source '{source}', expected one of: {', '.join(self.config_sources)}"
        )


class CfgNotPrepared(CfgError):
    def __init__(self, *, operation: str, state: str):
        self.operation = operation
        self.state = state
        super().__init__(f"cannot run {operation}() while cfg is {state}")


class IllegalStateTransition(CfgError):
    def __init__(self, *, src: str, dst: str):
        self.src = src
        self.dst = dst
        super().__init__(f"Illegal transition: {src} -> {dst}")


class SubstitutionError(CfgError):
    pass


class UnresolvedSubstitution(SubstitutionError):
    def __init__(self, *, names: Iterable[str]):
        self.names: List[str] = sorted(set(names))
        super().__init__(f"unresolved substitutions: {', '.join(self.names)}")


class OperationNotSupported(CfgError, NotImplementedError):
    def __init__(self, *, platform: str, operation: str):
        self.platform = platform
        self.operation = operation
        super().__init__(f"{operation}() is not supported by platform '{platform}'")


class UnknownPlatform(CfgError):
    def __init__(self, *, name: str, available: Optional[Iterable[str]] = None):
        self.name = name
        self.available = sorted(available or [])
        super().__init__(f"unknown platform '{name}', available: {', '.join(self.available)}")
