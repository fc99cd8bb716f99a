"""Resolution of the per-user configuration directory for an identity."""

from __future__ import annotations

import sys
from pathlib import Path

from platformdirs import user_config_path

from persist.core.domain.config import Identity
from persist.core.shared.exceptions import AppDataError


def bundle_name(identity: Identity) -> str:
    """Return the reverse-domain bundle id used on macOS.

    Empty components are dropped and spaces become dashes, so
    ``("com", "Example Corp", "demo")`` gives ``com.Example-Corp.demo``.
    """
    parts = (identity.qualifier, identity.organization, identity.application)
    return ".".join(part.strip().replace(" ", "-") for part in parts if part.strip())


def resolve_config_dir(identity: Identity) -> Path:
    """Map an identity to its platform configuration directory.

    Nothing is cached and nothing is created on disk.

    Raises:
        AppDataError: If the application name is blank or the platform
            layer cannot produce a directory.
    """
    if not identity.application.strip():
        raise AppDataError(*identity.as_tuple(), reason="application name is empty")

    if sys.platform == "darwin":
        appname = bundle_name(identity)
        appauthor: str | bool = False
    else:
        appname = identity.application.strip()
        appauthor = identity.organization.strip() or False

    try:
        return Path(user_config_path(appname=appname, appauthor=appauthor, roaming=True))
    except (OSError, RuntimeError, KeyError) as exc:
        raise AppDataError(*identity.as_tuple(), reason=str(exc)) from exc


__all__ = ["bundle_name", "resolve_config_dir"]
