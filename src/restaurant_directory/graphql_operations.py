"""Named GraphQL operations understood by the record store."""

from dataclasses import dataclass
from enum import Enum

_RECORD_FIELDS = """
      id
      name
      description
      owner
      createdAt
      updatedAt
"""


@dataclass(frozen=True)
class GraphQLOperation:
    """Declarative GraphQL operation definition."""

    name: str
    result_field: str
    document: str


class RecordOperation(Enum):
    """Enum of remote record operations (single source of truth)."""

    LIST_RECORDS = GraphQLOperation(
        "ListRestaurants",
        "listRestaurants",
        f"""
  query ListRestaurants(
    $filter: ModelRestaurantFilterInput
    $limit: Int
    $nextToken: String
  ) {{
    listRestaurants(filter: $filter, limit: $limit, nextToken: $nextToken) {{
      items {{{_RECORD_FIELDS}      }}
      nextToken
    }}
  }}
""",
    )
    CREATE_RECORD = GraphQLOperation(
        "CreateRestaurant",
        "createRestaurant",
        f"""
  mutation CreateRestaurant(
    $input: CreateRestaurantInput!
    $condition: ModelRestaurantConditionInput
  ) {{
    createRestaurant(input: $input, condition: $condition) {{{_RECORD_FIELDS}    }}
  }}
""",
    )
    DELETE_RECORD = GraphQLOperation(
        "DeleteRestaurant",
        "deleteRestaurant",
        f"""
  mutation DeleteRestaurant(
    $input: DeleteRestaurantInput!
    $condition: ModelRestaurantConditionInput
  ) {{
    deleteRestaurant(input: $input, condition: $condition) {{{_RECORD_FIELDS}    }}
  }}
""",
    )

    @property
    def operation_name(self) -> str:
        """Return the GraphQL operation name."""
        return self.value.name

    @property
    def result_field(self) -> str:
        """Return the top-level field holding the operation result."""
        return self.value.result_field

    @property
    def document(self) -> str:
        """Return the GraphQL document text."""
        return self.value.document
