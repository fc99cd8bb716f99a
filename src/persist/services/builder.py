"""Immutable builder for :class:`~persist.services.coordinator.Persist`."""

from __future__ import annotations

from dataclasses import dataclass, replace

from persist.core.constants import DEFAULT_BACKEND
from persist.core.domain.config import PersistConfig, check_backend_name
from persist.services.coordinator import Persist


@dataclass(frozen=True, slots=True)
class PersistBuilder:
    """Accumulates coordinator settings through value-returning steps.

    Each ``with_*`` call returns a new builder and leaves the receiver
    untouched, so partially configured builders can be shared freely:

        base = Persist.builder("demo").with_organization("Example")
        persist = base.with_qualifier("com").compact().build()
    """

    application: str
    qualifier: str = ""
    organization: str = ""
    pretty: bool = True
    backend: str = DEFAULT_BACKEND

    @classmethod
    def from_config(cls, config: PersistConfig) -> PersistBuilder:
        identity = config.identity
        return cls(
            application=identity.application,
            qualifier=identity.qualifier,
            organization=identity.organization,
            pretty=config.pretty,
            backend=config.backend,
        )

    def with_qualifier(self, qualifier: str) -> PersistBuilder:
        return replace(self, qualifier=qualifier)

    def with_organization(self, organization: str) -> PersistBuilder:
        return replace(self, organization=organization)

    def compact(self) -> PersistBuilder:
        """Switch to compact (unindented) output."""
        return replace(self, pretty=False)

    def with_backend(self, backend: str) -> PersistBuilder:
        """Select a registered serialization backend.

        Raises:
            ValueError: If *backend* is not registered
        """
        return replace(self, backend=check_backend_name(backend))

    def to_config(self) -> PersistConfig:
        return PersistConfig.model_validate(
            {
                "identity": {
                    "qualifier": self.qualifier,
                    "organization": self.organization,
                    "application": self.application,
                },
                "pretty": self.pretty,
                "backend": self.backend,
            }
        )

    def build(self) -> Persist:
        """Finalize into a coordinator."""
        return Persist.from_config(self.to_config())
