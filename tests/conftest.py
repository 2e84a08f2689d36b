"""
Global pytest configuration and fixtures for payapi tests.
"""

import json
import os
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from payapi.client import Client
from payapi.settings import reset_settings


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "unit: Unit test")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from PAYAPI_* variables and cached settings."""
    for key in list(os.environ):
        if key.upper().startswith("PAYAPI_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(os.path.dirname(__file__))
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def plan_json() -> dict[str, Any]:
    return {
        "id": "gold",
        "object": "plan",
        "active": True,
        "amount": 2000,
        "billing_scheme": "per_unit",
        "created": 1386247539,
        "currency": "usd",
        "interval": "month",
        "interval_count": 1,
        "livemode": False,
        "metadata": {},
        "nickname": "Gold",
        "product": "prod_BTcfj5EqyqxDVn",
        "trial_period_days": None,
        "usage_type": "licensed",
    }


@pytest.fixture
def subscription_json(plan_json) -> dict[str, Any]:
    return {
        "id": "sub_CZEpS1Zt9QLxdo",
        "object": "subscription",
        "application_fee_percent": None,
        "cancel_at_period_end": False,
        "canceled_at": None,
        "created": 1521132200,
        "current_period_end": 1523810600,
        "current_period_start": 1521132200,
        "customer": "cus_CZEpSZzlVdqLxH",
        "discount": {
            "object": "discount",
            "coupon": {
                "id": "25OFF",
                "object": "coupon",
                "amount_off": None,
                "created": 1521132000,
                "currency": None,
                "duration": "repeating",
                "duration_in_months": 3,
                "livemode": False,
                "max_redemptions": None,
                "metadata": {},
                "percent_off": 25,
                "redeem_by": None,
                "times_redeemed": 1,
                "valid": True,
            },
            "customer": "cus_CZEpSZzlVdqLxH",
            "end": 1529081000,
            "start": 1521132200,
            "subscription": "sub_CZEpS1Zt9QLxdo",
        },
        "ended_at": None,
        "items": {
            "object": "list",
            "data": [
                {
                    "id": "si_CZEpm3mX2kH1nB",
                    "object": "subscription_item",
                    "created": 1521132201,
                    "metadata": {},
                    "plan": plan_json,
                    "quantity": 1,
                    "subscription": "sub_CZEpS1Zt9QLxdo",
                }
            ],
            "has_more": False,
            "total_count": 1,
            "url": "/v1/subscription_items?subscription=sub_CZEpS1Zt9QLxdo",
        },
        "livemode": False,
        "metadata": {"order_id": "6735"},
        "plan": plan_json,
        "quantity": 1,
        "start": 1521132200,
        "status": "active",
        "tax_percent": None,
        "trial_end": None,
        "trial_start": None,
    }


@pytest.fixture
def usage_record_json() -> dict[str, Any]:
    return {
        "id": "mbur_1CCtqQ2eZvKYlo2C",
        "object": "usage_record",
        "livemode": False,
        "quantity": 100,
        "subscription_item": "si_CZEpm3mX2kH1nB",
        "timestamp": 1522160130,
    }


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, body: Any = None, raw: bytes | None = None):
        self.status_code = status_code
        self.body = body
        self.raw = raw
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def form(self) -> dict[str, str]:
        return dict(httpx.QueryParams(self.last.content.decode()))

    def json_body(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def make_client() -> Iterator[Callable[..., tuple[Client, RecordingHandler]]]:
    """Build a Client wired to a RecordingHandler."""
    clients: list[Client] = []

    def _make(
        status_code: int = 200,
        body: Any = None,
        raw: bytes | None = None,
        **client_kwargs: Any,
    ) -> tuple[Client, RecordingHandler]:
        handler = RecordingHandler(status_code, body, raw)
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        client_kwargs.setdefault("api_key", "sk_test_123")
        client_kwargs.setdefault("base_url", "https://api.example.com/v1")
        client = Client(http_client=http_client, **client_kwargs)
        clients.append(client)
        return client, handler

    yield _make

    for client in clients:
        client.close()
        if client._client is not None:
            client._client.close()
