"""
Usage records for metered subscription items.

Endpoint:
    POST /subscription_items/{id}/usage_records
"""

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from payapi.logging import get_logger
from payapi.params import Timestamp, now_timestamp

if TYPE_CHECKING:  # pragma: no cover - typings only
    from payapi.client import Client

logger = get_logger(__name__)


class UsageRecordAction(str, Enum):
    """How the reported quantity combines with usage already recorded."""

    INCREMENT = "increment"
    SET = "set"


def usage_records_path(subscription_item_id: str) -> str:
    """Path of the usage records collection of a subscription item."""
    return f"/subscription_items/{subscription_item_id}/usage_records"


class UsageRecordParams(BaseModel):
    """The parameters to create a usage record."""

    timestamp: Timestamp
    quantity: int = Field(..., ge=0)
    action: UsageRecordAction | None = None

    @classmethod
    def create(
        cls, quantity: int, action: UsageRecordAction | None = None
    ) -> "UsageRecordParams":
        """Build parameters stamped with the current time.

        The action defaults to ``increment``.
        """
        return cls(
            timestamp=now_timestamp(),
            quantity=quantity,
            action=action or UsageRecordAction.INCREMENT,
        )


class UsageRecord(BaseModel):
    """The resource representing a usage record."""

    model_config = ConfigDict(extra="ignore")

    id: str
    object: str = "usage_record"
    livemode: bool
    quantity: int
    subscription_item: str
    timestamp: Timestamp

    @classmethod
    def create(
        cls, client: "Client", subscription_item_id: str, params: UsageRecordParams
    ) -> "UsageRecord":
        """Creates a usage record for a subscription item."""
        record = client.post(usage_records_path(subscription_item_id), params, cls)
        logger.info(
            "Created usage record",
            subscription_item=subscription_item_id,
            usage_record_id=record.id,
            quantity=record.quantity,
        )
        return record

    @classmethod
    def record(
        cls,
        client: "Client",
        subscription_item_id: str,
        quantity: int,
        action: UsageRecordAction | None = None,
    ) -> "UsageRecord":
        """Reports ``quantity`` for a subscription item as of now."""
        return cls.create(client, subscription_item_id, UsageRecordParams.create(quantity, action))
