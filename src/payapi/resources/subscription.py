"""
Subscription resource and its operations.

Endpoints:
    POST   /subscriptions
    GET    /subscriptions/{id}
    POST   /subscriptions/{id}
    DELETE /subscriptions/{id}?{params}
"""

from enum import Enum
from typing import TYPE_CHECKING, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from payapi.encoding import to_query_string
from payapi.logging import get_logger
from payapi.params import ApiList, Metadata, Timestamp
from payapi.resources.discount import Discount
from payapi.resources.plan import Plan

if TYPE_CHECKING:  # pragma: no cover - typings only
    from payapi.client import Client

logger = get_logger(__name__)

SUBSCRIPTIONS_PATH = "/subscriptions"

# A Unix timestamp, or "now" to end the trial immediately
TrialEnd: TypeAlias = Timestamp | Literal["now"]


class SubscriptionStatus(str, Enum):
    """Lifecycle labels the remote service is known to report.

    ``Subscription.status`` stays a plain string; compare against these values.
    """

    TRIALING = "trialing"
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELED = "canceled"
    UNPAID = "unpaid"


def subscription_path(subscription_id: str) -> str:
    """Path of a single subscription."""
    return f"{SUBSCRIPTIONS_PATH}/{subscription_id}"


def cancel_path(subscription_id: str, params: "CancelParams | None" = None) -> str:
    """Path of a cancel request, with the parameters as its query string.

    Raises:
        PaymentAPIError: If the parameters cannot be encoded.
    """
    query = to_query_string(params)
    path = subscription_path(subscription_id)
    return f"{path}?{query}" if query else path


class CancelParams(BaseModel):
    """Parameters for cancelling a subscription."""

    at_period_end: bool | None = Field(
        None, description="Cancel at the end of the current period instead of immediately"
    )


class ItemParams(BaseModel):
    """One plan line of a subscription being created or updated."""

    plan: str = Field(..., description="Plan identifier")
    quantity: int | None = Field(None, ge=0, description="Quantity of the plan")


class SubscriptionParams(BaseModel):
    """
    The set of parameters that can be used when creating or updating a subscription.

    Every field is optional; only the ones set are sent.
    """

    customer: str | None = None
    application_fee_percent: float | None = None
    coupon: str | None = None
    items: list[ItemParams] | None = None
    metadata: Metadata | None = None
    plan: str | None = None
    prorate: bool | None = None
    proration_date: Timestamp | None = None
    quantity: int | None = Field(None, ge=0)
    source: str | None = None
    tax_percent: float | None = None
    trial_end: TrialEnd | None = None
    trial_period_days: int | None = Field(None, ge=0)


class SubscriptionItem(BaseModel):
    """A plan line within a subscription."""

    model_config = ConfigDict(extra="ignore")

    id: str
    created: Timestamp
    plan: Plan
    quantity: int | None = None


class Subscription(BaseModel):
    """The resource representing a subscription."""

    model_config = ConfigDict(extra="ignore")

    id: str
    application_fee_percent: float | None = None
    cancel_at_period_end: bool
    canceled_at: Timestamp | None = None
    created: Timestamp | None = None
    current_period_start: Timestamp
    current_period_end: Timestamp
    customer: str
    discount: Discount | None = None
    ended_at: Timestamp | None = None
    items: ApiList[SubscriptionItem]
    livemode: bool
    metadata: Metadata
    plan: Plan
    quantity: int | None = None
    start: Timestamp
    status: str
    tax_percent: float | None = None
    trial_start: Timestamp | None = None
    trial_end: Timestamp | None = None

    @classmethod
    def create(cls, client: "Client", params: SubscriptionParams) -> "Subscription":
        """Creates a new subscription for a customer."""
        subscription = client.post(SUBSCRIPTIONS_PATH, params, cls)
        logger.info(
            "Created subscription",
            subscription_id=subscription.id,
            customer=subscription.customer,
            status=subscription.status,
        )
        return subscription

    @classmethod
    def retrieve(cls, client: "Client", subscription_id: str) -> "Subscription":
        """Retrieves the details of a subscription."""
        return client.get(subscription_path(subscription_id), cls)

    @classmethod
    def update(
        cls, client: "Client", subscription_id: str, params: SubscriptionParams
    ) -> "Subscription":
        """Updates a subscription's properties.

        Fields left unset in ``params`` are not sent and keep their remote value.
        """
        subscription = client.post(subscription_path(subscription_id), params, cls)
        logger.info("Updated subscription", subscription_id=subscription_id)
        return subscription

    @classmethod
    def cancel(
        cls,
        client: "Client",
        subscription_id: str,
        params: CancelParams | None = None,
    ) -> "Subscription":
        """Cancels a subscription."""
        # Encoding errors surface here, before any request is sent
        path = cancel_path(subscription_id, params or CancelParams())
        subscription = client.delete(path, cls)
        logger.info(
            "Canceled subscription",
            subscription_id=subscription_id,
            status=subscription.status,
            cancel_at_period_end=subscription.cancel_at_period_end,
        )
        return subscription
