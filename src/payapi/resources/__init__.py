"""
Resource models and their operations.
"""

from payapi.resources.discount import Coupon, Discount
from payapi.resources.plan import Plan
from payapi.resources.subscription import (
    CancelParams,
    ItemParams,
    Subscription,
    SubscriptionItem,
    SubscriptionParams,
    SubscriptionStatus,
    TrialEnd,
)
from payapi.resources.usage_record import UsageRecord, UsageRecordAction, UsageRecordParams

__all__ = [
    "CancelParams",
    "Coupon",
    "Discount",
    "ItemParams",
    "Plan",
    "Subscription",
    "SubscriptionItem",
    "SubscriptionParams",
    "SubscriptionStatus",
    "TrialEnd",
    "UsageRecord",
    "UsageRecordAction",
    "UsageRecordParams",
]
