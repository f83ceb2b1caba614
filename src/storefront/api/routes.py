"""FastAPI endpoints: authentication, catalog and orders."""

from fastapi import APIRouter, Depends, Request
from protean.utils.globals import current_domain

from storefront.api.deps import current_user, sign_in, sign_out
from storefront.api.schemas import (
    CredentialsRequest,
    MessageResponse,
    OrderItemResponse,
    OrderProductResponse,
    OrderResponse,
    PlacedOrderResponse,
    PlaceOrderRequest,
    ProductResponse,
    UserResponse,
)
from storefront.catalogue.product import Product
from storefront.identity.authentication import authenticate
from storefront.identity.registration import RegisterUser
from storefront.identity.user import User
from storefront.ordering.history import list_orders
from storefront.ordering.placement import place_order

# ---------------------------------------------------------------------------
# Auth Router
# ---------------------------------------------------------------------------
auth_router = APIRouter(prefix="/api/auth", tags=["auth"])


@auth_router.post("/register", status_code=201, response_model=UserResponse)
async def register(body: CredentialsRequest, request: Request) -> UserResponse:
    command = RegisterUser(email=body.email, password=body.password)
    user_id = current_domain.process(command, asynchronous=False)
    user = current_domain.repository_for(User).get(user_id)
    sign_in(request, user)
    return UserResponse(id=str(user.id), email=user.email)


@auth_router.post("/login", response_model=UserResponse)
async def login(body: CredentialsRequest, request: Request) -> UserResponse:
    user = authenticate(body.email, body.password)
    sign_in(request, user)
    return UserResponse(id=str(user.id), email=user.email)


@auth_router.post("/logout", response_model=MessageResponse)
async def logout(request: Request) -> MessageResponse:
    sign_out(request)
    return MessageResponse(message="Logged out successfully.")


@auth_router.get("/status", response_model=UserResponse)
async def status(user: User = Depends(current_user)) -> UserResponse:
    return UserResponse(id=str(user.id), email=user.email)


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/api/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    products = current_domain.repository_for(Product).listing()
    return [
        ProductResponse(id=str(product.id), name=product.name, price=product.price, image=product.image)
        for product in products
    ]


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/api/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=PlacedOrderResponse)
async def create_order(body: PlaceOrderRequest, user: User = Depends(current_user)) -> PlacedOrderResponse:
    order = place_order(user.id, body.cart)
    return PlacedOrderResponse(
        id=str(order.id),
        user_id=str(order.user_id),
        total=order.total,
        created_at=order.created_at,
    )


@order_router.get("", response_model=list[OrderResponse])
async def get_orders(user: User = Depends(current_user)) -> list[OrderResponse]:
    return [
        OrderResponse(
            id=view.id,
            user_id=view.user_id,
            total=view.total,
            created_at=view.created_at,
            items=[
                OrderItemResponse(
                    id=line.id,
                    product_id=line.product_id,
                    quantity=line.quantity,
                    price=line.price,
                    product=OrderProductResponse(id=line.product.id, name=line.product.name, image=line.product.image)
                    if line.product
                    else None,
                )
                for line in view.items
            ],
        )
        for view in list_orders(user.id)
    ]
