"""
payapi - typed bindings for a payment API's subscription endpoints.

Resources are pydantic models with classmethod operations that take a
shared ``Client``::

    from payapi import Client, Subscription, CancelParams

    with Client(api_key="sk_test_...") as client:
        sub = Subscription.retrieve(client, "sub_123")
        Subscription.cancel(client, sub.id, CancelParams(at_period_end=True))
"""

from payapi.client import Client
from payapi.exceptions import ErrorKind, PaymentAPIError
from payapi.logging import get_logger, setup_logging
from payapi.params import ApiList, Metadata, Timestamp, now_timestamp
from payapi.resources import (
    CancelParams,
    Coupon,
    Discount,
    ItemParams,
    Plan,
    Subscription,
    SubscriptionItem,
    SubscriptionParams,
    SubscriptionStatus,
    TrialEnd,
    UsageRecord,
    UsageRecordAction,
    UsageRecordParams,
)
from payapi.settings import Settings, get_settings, reset_settings

__version__ = "1.0.0"

__all__ = [
    "ApiList",
    "CancelParams",
    "Client",
    "Coupon",
    "Discount",
    "ErrorKind",
    "ItemParams",
    "Metadata",
    "PaymentAPIError",
    "Plan",
    "Settings",
    "Subscription",
    "SubscriptionItem",
    "SubscriptionParams",
    "SubscriptionStatus",
    "Timestamp",
    "TrialEnd",
    "UsageRecord",
    "UsageRecordAction",
    "UsageRecordParams",
    "get_logger",
    "get_settings",
    "now_timestamp",
    "reset_settings",
    "setup_logging",
]
