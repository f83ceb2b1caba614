"""Pydantic request/response schemas for the storefront API.

These are the external contracts; Protean commands stay internal. The
cart is accepted as any JSON value: ``storefront.ordering.cart`` owns its
validation and reports problems as a domain error (400).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

# --- Request Schemas ---


class CredentialsRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "jane.doe@example.com", "password": "s3cret-pass"}]}}

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=255)


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "cart": [
                        {"id": "9f0c6c1e-2f4e-4a57-9a51-0f8a3c2d7e11", "price": 25.99, "quantity": 2},
                        {"id": "2b1d8e44-7a3f-4c9e-8f0a-5d6e7c8b9a00", "price": 79.99, "quantity": 1},
                    ]
                }
            ]
        }
    }

    cart: Any = None


# --- Response Schemas ---


class UserResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890", "email": "jane.doe@example.com"}]
        }
    }

    id: str
    email: str


class MessageResponse(BaseModel):
    message: str


class ProductResponse(BaseModel):
    id: str
    name: str
    price: float
    image: str | None = None


class PlacedOrderResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "5e6f7a8b-9c0d-1e2f-3a4b-5c6d7e8f9a0b",
                    "user_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "total": 131.97,
                    "created_at": "2026-10-19T12:00:00Z",
                }
            ]
        }
    }

    id: str
    user_id: str
    total: float
    created_at: datetime


class OrderProductResponse(BaseModel):
    id: str
    name: str
    image: str | None = None


class OrderItemResponse(BaseModel):
    id: str
    product_id: str
    quantity: int
    price: float
    product: OrderProductResponse | None = None


class OrderResponse(BaseModel):
    id: str
    user_id: str
    total: float
    created_at: datetime
    items: list[OrderItemResponse]
