"""Tests for configuration directory resolution."""

import sys

import pytest

from persist.core.domain.config import Identity
from persist.core.shared.exceptions import AppDataError
from persist.io.locations import bundle_name, resolve_config_dir


class TestBundleName:
    """Tests for the macOS bundle identifier."""

    def test_full_triple(self):
        """All parts should be joined with dots, spaces dashed."""
        identity = Identity(qualifier="com", organization="Example Corp", application="My App")
        assert bundle_name(identity) == "com.Example-Corp.My-App"

    def test_empty_parts_dropped(self):
        """Empty qualifier and organization should be skipped."""
        assert bundle_name(Identity(application="demo")) == "demo"


class TestResolveConfigDir:
    """Tests for platform directory lookup."""

    def test_blank_application_fails(self, config_root, platform_calls):
        """A blank application name cannot produce a directory."""
        identity = Identity(qualifier="com", organization="Example", application="  ")
        with pytest.raises(AppDataError) as excinfo:
            resolve_config_dir(identity)

        error = excinfo.value
        assert (error.qualifier, error.organization, error.application) == ("com", "Example", "  ")
        assert "Example" in str(error)
        assert platform_calls == []

    def test_linux_uses_application_name(self, config_root, platform_calls, monkeypatch):
        """Non-macOS platforms get the plain application name."""
        monkeypatch.setattr(sys, "platform", "linux")
        identity = Identity(qualifier="com", organization="Example", application="demo")

        path = resolve_config_dir(identity)

        assert path == config_root / "demo"
        assert platform_calls == [{"appname": "demo", "appauthor": "Example", "roaming": True}]

    def test_missing_organization_means_no_author(self, config_root, platform_calls, monkeypatch):
        """Without an organization no author directory is requested."""
        monkeypatch.setattr(sys, "platform", "win32")
        resolve_config_dir(Identity(application="demo"))
        assert platform_calls[0]["appauthor"] is False

    def test_macos_uses_bundle_name(self, config_root, platform_calls, monkeypatch):
        """macOS directories are named after the reverse-domain bundle id."""
        monkeypatch.setattr(sys, "platform", "darwin")
        identity = Identity(qualifier="com", organization="Example", application="demo")

        path = resolve_config_dir(identity)

        assert path == config_root / "com.Example.demo"

    def test_platform_failure_becomes_app_data_error(self, monkeypatch):
        """Errors from the platform layer should be reported as AppDataError."""
        from persist.io import locations

        def broken(**kwargs):
            raise RuntimeError("no home directory")

        monkeypatch.setattr(locations, "user_config_path", broken)
        with pytest.raises(AppDataError, match="no home directory"):
            resolve_config_dir(Identity(application="demo"))

    def test_resolution_is_repeatable(self, config_root):
        """The same identity always maps to the same directory."""
        identity = Identity(organization="Example", application="demo")
        assert resolve_config_dir(identity) == resolve_config_dir(identity)

    def test_resolution_does_not_touch_disk(self, config_root):
        """Resolving must not create the directory."""
        path = resolve_config_dir(Identity(application="demo"))
        assert not path.exists()
