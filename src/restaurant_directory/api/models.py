"""Pydantic models for the HTTP surface."""

from pydantic import BaseModel

from restaurant_directory.domain.records import DraftInput, RestaurantRecord
from restaurant_directory.domain.sessions import Session


class DraftPayload(BaseModel):
    """Partial update of the create form."""

    name: str | None = None
    description: str | None = None


class SignInPayload(BaseModel):
    """E-mail and password credentials."""

    email: str
    password: str


class RestaurantPayload(BaseModel):
    """Restaurant record payload."""

    id: str
    name: str
    description: str
    owner: str | None = None

    @classmethod
    def from_record(cls, record: RestaurantRecord) -> "RestaurantPayload":
        return cls(**record.to_payload())


class SessionPayload(BaseModel):
    """Signed-in caller payload."""

    identity: str
    display_label: str

    @classmethod
    def from_session(cls, session: Session) -> "SessionPayload":
        return cls(identity=session.identity, display_label=session.display_label)


class DraftState(BaseModel):
    """Current create form contents."""

    name: str
    description: str

    @classmethod
    def from_draft(cls, draft: DraftInput) -> "DraftState":
        return cls(name=draft.name, description=draft.description)


class AppStatePayload(BaseModel):
    """Snapshot of the client state."""

    authenticated: bool
    session: SessionPayload | None = None
    restaurants: list[RestaurantPayload]
    draft: DraftState


class CreateResult(BaseModel):
    """Outcome of a create submission."""

    created: RestaurantPayload | None = None
    state: AppStatePayload
