"""Domain models for restaurant records and local client state."""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class RestaurantRecord:
    """Represents a restaurant entry held by the remote store."""

    id: str
    name: str
    description: str
    owner: str | None

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-friendly representation of the record."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "owner": self.owner,
        }


@dataclass(frozen=True)
class DraftInput:
    """Transient create-form buffer."""

    name: str = ""
    description: str = ""

    def is_complete(self) -> bool:
        """Return True when both fields are non-empty."""
        return bool(self.name) and bool(self.description)

    def with_changes(
        self, name: str | None = None, description: str | None = None
    ) -> "DraftInput":
        """Return a copy with the given fields replaced."""
        return replace(
            self,
            name=self.name if name is None else name,
            description=self.description if description is None else description,
        )


@dataclass
class AppState:
    """Local client state owned by the record sync controller."""

    records: list[RestaurantRecord] = field(default_factory=list)
    draft: DraftInput = field(default_factory=DraftInput)


def parse_record(row: dict[str, object]) -> RestaurantRecord:
    """Parse a remote record row into a domain model."""
    owner = row.get("owner")
    return RestaurantRecord(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        description=str(row.get("description") or ""),
        owner=str(owner) if owner is not None else None,
    )
