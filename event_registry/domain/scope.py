"""Tenant scope and feature-flag visibility.

Every registry operation receives a TenantScope explicitly; nothing reads the
tenant or the caller's feature flags from ambient state.
"""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class AllFeatureFlags:
    """Caller may see event types behind any feature flag."""

    def permits(self, feature_flag: str | None) -> bool:
        return True


@dataclass(frozen=True)
class SomeFeatureFlags:
    """Caller may see unflagged event types and those whose flag is in ``flags``."""

    flags: frozenset[str]

    @classmethod
    def of(cls, flags: Iterable[str]) -> "SomeFeatureFlags":
        return cls(frozenset(flags))

    def permits(self, feature_flag: str | None) -> bool:
        return feature_flag is None or feature_flag in self.flags


type AllowedFeatureFlags = AllFeatureFlags | SomeFeatureFlags


@dataclass(frozen=True)
class TenantScope:
    """Resolved caller scope: owning tenant plus the feature flags it may see."""

    tenant_id: str
    feature_flags: AllowedFeatureFlags = AllFeatureFlags()


def is_visible(feature_flag: str | None, allowed: AllowedFeatureFlags) -> bool:
    """Return whether a record tagged with feature_flag is visible under allowed."""
    return allowed.permits(feature_flag)
