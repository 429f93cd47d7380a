"""Restaurant and session endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from restaurant_directory.api.models import (
    AppStatePayload,
    CreateResult,
    DraftPayload,
    DraftState,
    RestaurantPayload,
    SessionPayload,
    SignInPayload,
)

if TYPE_CHECKING:
    from restaurant_directory.containers import AppContainer

router = APIRouter(tags=["restaurants"])


def snapshot(container: AppContainer) -> AppStatePayload:
    """Build the state payload from the container's gate and controller."""
    session = container.session_gate.session
    return AppStatePayload(
        authenticated=container.session_gate.is_authenticated(),
        session=SessionPayload.from_session(session) if session else None,
        restaurants=[
            RestaurantPayload.from_record(record)
            for record in container.record_sync.records
        ],
        draft=DraftState.from_draft(container.record_sync.draft),
    )


@router.get("/state")
async def get_state(request: Request) -> AppStatePayload:
    """Return the session, records and draft."""
    return snapshot(request.app.state.container)


@router.get("/restaurants")
async def list_restaurants(request: Request) -> dict[str, object]:
    """Return the locally cached restaurants."""
    container: AppContainer = request.app.state.container
    return {
        "restaurants": [
            record.to_payload() for record in container.record_sync.records
        ]
    }


@router.put("/draft")
async def update_draft(payload: DraftPayload, request: Request) -> DraftState:
    """Apply a field change to the create form."""
    container: AppContainer = request.app.state.container
    draft = container.record_sync.update_draft(
        name=payload.name, description=payload.description
    )
    return DraftState.from_draft(draft)


@router.post("/restaurants")
async def create_restaurant(
    request: Request, payload: DraftPayload | None = None
) -> CreateResult:
    """Submit the create form."""
    container: AppContainer = request.app.state.container
    if payload is not None:
        container.record_sync.update_draft(
            name=payload.name, description=payload.description
        )
    created = await container.record_sync.create(
        container.record_sync.draft, container.session_gate.session
    )
    return CreateResult(
        created=RestaurantPayload.from_record(created) if created else None,
        state=snapshot(container),
    )


@router.delete("/restaurants/{record_id}")
async def delete_restaurant(record_id: str, request: Request) -> AppStatePayload:
    """Remove a restaurant."""
    container: AppContainer = request.app.state.container
    await container.record_sync.remove(record_id)
    return snapshot(container)


@router.post("/session/sign-in")
async def sign_in(payload: SignInPayload, request: Request) -> AppStatePayload:
    """Sign in and re-resolve the session."""
    container: AppContainer = request.app.state.container
    await container.session_gate.sign_in(payload.email, payload.password)
    return snapshot(container)


@router.post("/session/sign-out")
async def sign_out(request: Request) -> AppStatePayload:
    """End the current session."""
    container: AppContainer = request.app.state.container
    await container.session_gate.sign_out()
    return snapshot(container)
