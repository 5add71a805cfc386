"""Base class for kneeboard plan contracts.

Unit conventions (all contracts):
- **Speeds**: knots — true air speed and wind speed
- **Distances**: nautical miles
- **Angles**: whole degrees; wind angles are the direction the wind blows
  *from*, variation is added to true values to obtain magnetic ones
- **Altitudes**: free text as written on the log (e.g. ``"1.8"`` for 1800 ft)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class KneeboardModel(BaseModel):
    """Immutable model with plain-dict (YAML/JSON friendly) serialization.

    - Enums serialize as string values.
    - ``to_dict()`` produces a JSON-safe dict using field aliases.
    - ``from_dict()`` validates a decoded document.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        frozen=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Dump to a JSON/YAML-compatible dict."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "KneeboardModel":
        """Create model instance from a decoded document dict."""
        return cls.model_validate(data)
