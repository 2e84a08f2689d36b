"""
Plan resource.
"""

from pydantic import BaseModel, ConfigDict, Field

from payapi.params import Metadata, Timestamp


class Plan(BaseModel):
    """A pricing plan a subscription or subscription item is billed on."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="Plan identifier")
    object: str = Field("plan", description="Always 'plan'")
    active: bool = Field(True, description="Whether the plan can be used for new purchases")
    amount: int | None = Field(None, description="Amount in minor units charged per interval")
    billing_scheme: str | None = Field(None, description="per_unit or tiered")
    created: Timestamp | None = Field(None, description="Creation time")
    currency: str = Field(..., description="ISO 4217 currency code, lowercase")
    interval: str = Field(..., description="day, week, month or year")
    interval_count: int = Field(1, description="Number of intervals between billings")
    livemode: bool = Field(False, description="Live or test mode object")
    metadata: Metadata = Field(default_factory=dict)
    nickname: str | None = Field(None, description="Display name")
    product: str | None = Field(None, description="Product identifier")
    trial_period_days: int | None = Field(None, description="Default trial length")
    usage_type: str | None = Field(None, description="licensed or metered")
