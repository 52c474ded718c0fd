"""Storefront routes: catalog, view projection and user actions."""
from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.encoders import jsonable_encoder
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field
from artvault.app import ShopApplication
from artvault.data.product_schema import Product
from artvault.utils.filtering import criteria_from_controls
from artvault.views.projection import StorefrontView, project_view

router = APIRouter(prefix="/shop", tags=["shop"])


def get_shop(request: Request) -> ShopApplication:
    """Session storefront held in app state."""
    return request.app.state.shop


def drain_events(shop: ShopApplication) -> List[Dict[str, Any]]:
    """UI effects recorded since the last response, if the presenter records them."""
    drain = getattr(shop.presenter, "drain", None)
    return drain() if callable(drain) else []


class ActionResponse(BaseModel):
    """Response model for dispatched actions."""
    ignored: bool = Field(..., description="True when the action was unknown or malformed")
    action: Optional[str] = Field(None, description="Normalized action tag")
    success: bool = Field(False, description="Whether the action changed or showed anything")
    message: str = Field("", description="Outcome message")
    details: Dict[str, Any] = Field(default_factory=dict, description="Action-specific data")
    view: StorefrontView = Field(..., description="Recomputed storefront view")
    events: List[Dict[str, Any]] = Field(default_factory=list, description="UI effects to replay")


class WidgetResponse(BaseModel):
    """Response model for contact, call and newsletter widgets."""
    result: Dict[str, Any]
    events: List[Dict[str, Any]] = Field(default_factory=list)


class ContactRequest(BaseModel):
    name: str = ""
    email: str = ""
    message: str = ""


class NewsletterRequest(BaseModel):
    email: str = ""


@router.get("/products", response_model=List[Product])
async def list_products(shop: ShopApplication = Depends(get_shop)):
    """List the catalog in catalog order."""
    return list(shop.catalog.products)


@router.get("/view", response_model=StorefrontView)
async def get_view(
    category: Optional[str] = Query(None, description="Category filter ('all' for every category)"),
    sort: Optional[str] = Query(None, description="default, priceAsc/low or priceDesc/high"),
    search: Optional[str] = Query(None, description="Title/category search text"),
    shop: ShopApplication = Depends(get_shop)
):
    """
    Get the storefront view.

    Without filter parameters this is the current view; with them, a
    preview projection that leaves the stored criteria untouched.
    """
    if category is None and sort is None and search is None:
        return shop.dispatcher.view()
    criteria = criteria_from_controls(category=category, sort=sort, search=search)
    return project_view(shop.catalog, shop.cart, criteria)


@router.post("/actions", response_model=ActionResponse)
async def dispatch_action(
    payload: Dict[str, Any] = Body(..., description="Action tag with id/idx/filter fields"),
    shop: ShopApplication = Depends(get_shop)
):
    """
    Dispatch one user action.

    Unknown or malformed actions are reported as ignored together with the
    unchanged view; they never produce an error response.
    """
    result = shop.dispatcher.dispatch(payload)
    if result is None:
        return ActionResponse(
            ignored=True,
            view=shop.dispatcher.last_view,
            events=drain_events(shop)
        )

    return ActionResponse(
        ignored=False,
        action=result.action,
        success=result.success,
        message=result.message,
        details=jsonable_encoder(result.details),
        view=result.view,
        events=drain_events(shop)
    )


@router.post("/cart/open", response_model=WidgetResponse)
async def open_cart(shop: ShopApplication = Depends(get_shop)):
    """Open the cart dialog."""
    shown = shop.dispatcher.open_cart()
    return WidgetResponse(result={"success": shown}, events=drain_events(shop))


@router.post("/contact", response_model=WidgetResponse)
async def submit_contact(request: ContactRequest, shop: ShopApplication = Depends(get_shop)):
    """Submit the contact form; delivery is acknowledged after a fixed delay."""
    result = shop.contact_form.submit(request.model_dump())
    result["submit_disabled"] = shop.contact_form.submit_disabled
    result["submit_label"] = shop.contact_form.submit_label
    return WidgetResponse(result=result, events=drain_events(shop))


@router.post("/call", response_model=WidgetResponse)
async def open_call_picker(shop: ShopApplication = Depends(get_shop)):
    """Open the call picker (or navigate straight to the phone number)."""
    return WidgetResponse(result=shop.call_picker.open(), events=drain_events(shop))


@router.post("/call/phone", response_model=WidgetResponse)
async def call_phone(shop: ShopApplication = Depends(get_shop)):
    return WidgetResponse(result=shop.call_picker.call_phone(), events=drain_events(shop))


@router.post("/call/whatsapp", response_model=WidgetResponse)
async def call_whatsapp(shop: ShopApplication = Depends(get_shop)):
    return WidgetResponse(result=shop.call_picker.call_whatsapp(), events=drain_events(shop))


@router.post("/newsletter", response_model=WidgetResponse)
async def subscribe_newsletter(request: NewsletterRequest, shop: ShopApplication = Depends(get_shop)):
    """Sign up for the newsletter."""
    return WidgetResponse(result=shop.newsletter.subscribe(request.email), events=drain_events(shop))
