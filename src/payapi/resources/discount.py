"""
Discount and coupon resources.
"""

from pydantic import BaseModel, ConfigDict, Field

from payapi.params import Metadata, Timestamp


class Coupon(BaseModel):
    """A coupon, either a fixed amount or a percentage off."""

    model_config = ConfigDict(extra="ignore")

    id: str
    object: str = "coupon"
    amount_off: int | None = Field(None, description="Amount in minor units taken off")
    created: Timestamp | None = None
    currency: str | None = Field(None, description="Currency of amount_off")
    duration: str = Field(..., description="forever, once or repeating")
    duration_in_months: int | None = Field(None, description="Months a repeating coupon applies")
    livemode: bool = False
    max_redemptions: int | None = None
    metadata: Metadata = Field(default_factory=dict)
    percent_off: float | None = Field(None, description="Percentage taken off")
    redeem_by: Timestamp | None = None
    times_redeemed: int = 0
    valid: bool = True


class Discount(BaseModel):
    """A coupon applied to a customer or subscription."""

    model_config = ConfigDict(extra="ignore")

    object: str = "discount"
    coupon: Coupon
    customer: str | None = None
    start: Timestamp
    end: Timestamp | None = Field(None, description="End of a repeating discount")
    subscription: str | None = None
