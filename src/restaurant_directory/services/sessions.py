"""Session gate for the authenticated caller."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from restaurant_directory.domain.sessions import Session

_logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    """Interface for the managed authentication service."""

    async def get_current_session(self) -> Session:
        """Return the current session or raise SessionResolutionError."""

    async def sign_in(self, email: str, password: str) -> None:
        """Establish a session with the provider using credentials."""

    async def sign_out(self) -> None:
        """Terminate the current session with the provider."""


@dataclass
class SessionGate:
    """Resolves and caches the caller's identity.

    The session is resolved once at startup. Resolution failures never
    propagate: the gate degrades to an absent session and the caller is
    treated as signed out. Signing out clears the cached session right away,
    so a stale identity can never stamp a later create.
    """

    identity_provider: IdentityProvider
    _session: Session | None = field(default=None, init=False)

    @property
    def session(self) -> Session | None:
        """Return the most recently resolved session, if any."""
        return self._session

    async def resolve_session(self) -> Session | None:
        """Resolve the current session, returning None on any failure."""
        try:
            self._session = await self.identity_provider.get_current_session()
        except Exception:
            _logger.exception("Failed to resolve current session")
            self._session = None
        return self._session

    def is_authenticated(self) -> bool:
        """Return True when a session is currently resolved."""
        return self._session is not None

    async def sign_in(self, email: str, password: str) -> Session | None:
        """Sign in with the provider and re-resolve the cached session."""
        try:
            await self.identity_provider.sign_in(email, password)
        except Exception:
            _logger.exception("Failed to sign in")
            self._session = None
            return None
        return await self.resolve_session()

    async def sign_out(self) -> None:
        """Ask the provider to end the session and drop the cached identity."""
        try:
            await self.identity_provider.sign_out()
        except Exception:
            _logger.exception("Failed to sign out")
        finally:
            self._session = None
