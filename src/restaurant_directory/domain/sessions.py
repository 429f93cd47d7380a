"""Domain models for the authenticated caller."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """Represents the resolved identity of the current caller."""

    identity: str
    display_label: str

    @classmethod
    def from_identity(
        cls, identity: str, display_label: str | None = None
    ) -> "Session":
        """Build a session, falling back to the identity for the label."""
        return cls(identity=identity, display_label=display_label or identity)
