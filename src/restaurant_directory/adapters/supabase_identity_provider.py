"""Supabase Auth implementation of the identity provider."""

from dataclasses import dataclass

from supabase import Client

from restaurant_directory.domain.sessions import Session
from restaurant_directory.errors import SessionResolutionError
from restaurant_directory.services.sessions import IdentityProvider


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Identity provider backed by Supabase Auth."""

    client: Client

    async def get_current_session(self) -> Session:
        """Return the signed-in user as a session."""
        response = self.client.auth.get_user()
        user = getattr(response, "user", None)
        if user is None:
            raise SessionResolutionError("No authenticated user")
        metadata = user.user_metadata or {}
        identity = str(metadata.get("username") or user.id or "")
        if not identity:
            raise SessionResolutionError("Authenticated user has no identity")
        return Session.from_identity(identity, display_label=user.email)

    async def sign_in(self, email: str, password: str) -> None:
        """Sign in to Supabase Auth with an e-mail and password."""
        self.client.auth.sign_in_with_password(
            {"email": email, "password": password}
        )

    async def sign_out(self) -> None:
        """End the Supabase Auth session."""
        self.client.auth.sign_out()

    def access_token(self) -> str | None:
        """Return the current access token, if a session is stored."""
        session = self.client.auth.get_session()
        if session is None:
            return None
        return session.access_token
