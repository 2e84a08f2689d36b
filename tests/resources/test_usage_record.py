"""Tests for usage records."""

import pytest

from payapi.params import now_timestamp
from payapi.resources.usage_record import (
    UsageRecord,
    UsageRecordAction,
    UsageRecordParams,
    usage_records_path,
)

FROZEN_NOW = 1522160130


@pytest.fixture
def frozen_now(monkeypatch):
    monkeypatch.setattr("payapi.resources.usage_record.now_timestamp", lambda: FROZEN_NOW)
    return FROZEN_NOW


@pytest.mark.unit
def test_usage_records_path():
    assert (
        usage_records_path("si_CZEpm3mX2kH1nB")
        == "/subscription_items/si_CZEpm3mX2kH1nB/usage_records"
    )


@pytest.mark.unit
class TestUsageRecordParams:
    """Test building usage record parameters."""

    def test_create_defaults_to_increment(self, frozen_now):
        params = UsageRecordParams.create(100)

        assert params.timestamp == frozen_now
        assert params.quantity == 100
        assert params.action == UsageRecordAction.INCREMENT

    def test_create_with_set(self, frozen_now):
        params = UsageRecordParams.create(7, UsageRecordAction.SET)

        assert params.action == UsageRecordAction.SET

    def test_create_stamps_current_time(self):
        before = now_timestamp()
        params = UsageRecordParams.create(1)
        after = now_timestamp()

        assert before <= params.timestamp <= after

    def test_action_omitted_when_unset(self):
        params = UsageRecordParams(timestamp=FROZEN_NOW, quantity=1)

        assert params.model_dump(exclude_none=True) == {"timestamp": FROZEN_NOW, "quantity": 1}

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValueError):
            UsageRecordParams(timestamp=FROZEN_NOW, quantity=-5)


@pytest.mark.unit
class TestUsageRecord:
    """Test decoding and creating usage records."""

    def test_deserialize(self, usage_record_json):
        record = UsageRecord.model_validate(usage_record_json)

        assert record.id == "mbur_1CCtqQ2eZvKYlo2C"
        assert record.object == "usage_record"
        assert record.livemode is False
        assert record.quantity == 100
        assert record.subscription_item == "si_CZEpm3mX2kH1nB"
        assert record.timestamp == 1522160130

    def test_create(self, make_client, usage_record_json):
        client, handler = make_client(body=usage_record_json)
        params = UsageRecordParams(
            timestamp=FROZEN_NOW, quantity=100, action=UsageRecordAction.SET
        )

        record = UsageRecord.create(client, "si_CZEpm3mX2kH1nB", params)

        request = handler.last
        assert request.method == "POST"
        assert str(request.url) == (
            "https://api.example.com/v1/subscription_items/si_CZEpm3mX2kH1nB/usage_records"
        )
        assert handler.form() == {
            "timestamp": str(FROZEN_NOW),
            "quantity": "100",
            "action": "set",
        }
        assert record.quantity == 100

    def test_record_uses_current_time_and_increment(self, make_client, usage_record_json, frozen_now):
        client, handler = make_client(body=usage_record_json)

        UsageRecord.record(client, "si_CZEpm3mX2kH1nB", 100)

        assert handler.form() == {
            "timestamp": str(frozen_now),
            "quantity": "100",
            "action": "increment",
        }
