"""Tests for the timestamped state envelope."""

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from persist.core.domain.envelope import Envelope


class TestEnvelope:
    """Tests for envelope construction and extraction."""

    def test_new_stamps_current_utc_time(self):
        """Should stamp the envelope with an aware UTC timestamp."""
        before = datetime.now(UTC)
        envelope = Envelope.new({"a": 1})
        after = datetime.now(UTC)

        assert envelope.timestamp.tzinfo is not None
        assert envelope.timestamp.utcoffset() == timedelta(0)
        assert before <= envelope.timestamp <= after

    def test_into_state_returns_payload(self):
        """Should hand back the wrapped payload unchanged."""
        payload = ["x", "y"]
        envelope = Envelope.new(payload)
        assert envelope.into_state() == ["x", "y"]

    def test_parameterized_envelope_validates_state(self):
        """Parameterized envelopes should validate the state type."""
        stamp = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
        envelope = Envelope[int].model_validate({"timestamp": stamp, "state": 3})
        assert envelope.state == 3

        with pytest.raises(ValidationError):
            Envelope[int].model_validate({"timestamp": stamp, "state": "three"})

    def test_missing_timestamp_is_rejected(self):
        """An envelope without a timestamp is invalid."""
        with pytest.raises(ValidationError):
            Envelope[int].model_validate({"state": 1})
