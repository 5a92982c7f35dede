from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .constants import ApiKeyField
from .exceptions import MalformedTokenError
from .value_objects import ApiKeyRef, JsonObject


@dataclass(slots=True)
class SearchKeyScope:
    """
    What a signed search key grants: the API key it was derived from and the
    search options the service enforces for every query made with it.
    """
    api_key: ApiKeyRef
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def api_key_name(self) -> str | None:
        return self.api_key.value if self.api_key.field is ApiKeyField.NAME else None

    @property
    def api_key_id(self) -> str | None:
        return self.api_key.value if self.api_key.field is ApiKeyField.ID else None

    def to_payload(self) -> Dict[str, Any]:
        """
        Options first, then the API key field. Options named like either API
        key field are dropped, so the payload always carries exactly one.
        """
        key, value = self.api_key.as_item()
        reserved = {f.value for f in ApiKeyField}
        payload = {k: v for k, v in self.options.items() if k not in reserved}
        payload[key] = value
        return payload

    @classmethod
    def from_payload(cls, payload: JsonObject) -> "SearchKeyScope":
        present = [f for f in ApiKeyField if f.value in payload]
        if len(present) != 1:
            raise MalformedTokenError(
                "Payload must carry exactly one of: "
                + ", ".join(f.value for f in ApiKeyField)
            )

        key_field = present[0]
        try:
            api_key = ApiKeyRef(key_field, payload[key_field.value])
        except ValueError as exc:
            raise MalformedTokenError(str(exc)) from exc

        options = {k: v for k, v in payload.items() if k != key_field.value}
        return cls(api_key=api_key, options=options)
