"""Identity and configuration models for a persistence coordinator."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from persist.backends import list_backends
from persist.core.constants import DEFAULT_BACKEND


def check_backend_name(name: str) -> str:
    """Return *name* if it is a registered backend.

    Raises:
        ValueError: If no backend is registered under *name*
    """
    available = list_backends()
    if name not in available:
        msg = f"Unknown backend {name!r}; expected one of {sorted(available)}"
        raise ValueError(msg)
    return name


class Identity(BaseModel):
    """Identifying triple used to derive the storage directory.

    Mirrors the usual application-directory convention:

        qualifier = "com"
        organization = "Example Corp"
        application = "demo"

    Only the application name is required. The triple is immutable once a
    coordinator has been built.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    qualifier: str = Field(default="", description="Reverse-domain qualifier (e.g. 'com').")
    organization: str = Field(default="", description="Organization or vendor name.")
    application: str = Field(description="Application name.")

    def as_tuple(self) -> tuple[str, str, str]:
        """Return ``(qualifier, organization, application)``."""
        return (self.qualifier, self.organization, self.application)


class PersistConfig(BaseModel):
    """Complete, validated configuration of a coordinator."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    identity: Identity
    pretty: bool = Field(
        default=True,
        description="Write indented output; compact output when false.",
    )
    backend: str = Field(
        default=DEFAULT_BACKEND,
        description="Name of the serialization backend.",
    )

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        """Ensure the backend is registered."""
        return check_backend_name(v)


__all__ = ["Identity", "PersistConfig", "check_backend_name"]
