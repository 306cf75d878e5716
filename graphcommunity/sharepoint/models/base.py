"""Shared pydantic base for SharePoint entities."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_pascal


def unwrap_results(value: Any) -> Any:
    """Unwrap a verbose ``{"results": [...]}`` collection into its list."""
    if isinstance(value, dict) and "results" in value:
        return value["results"]
    if isinstance(value, dict) and "__deferred" in value:
        return []
    return value


class SharePointEntity(BaseModel):
    """Base entity: PascalCase wire names, immutable instances."""

    odata_type: str | None = Field(default=None, exclude=True)
    odata_etag: str | None = Field(default=None, exclude=True)

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_pascal,
    )

    @model_validator(mode="before")
    @classmethod
    def _extract_metadata(cls, data: Any) -> Any:
        # Verbose payloads carry the type name under __metadata
        if isinstance(data, dict) and "__metadata" in data:
            data = dict(data)
            metadata = data.pop("__metadata") or {}
            data.setdefault("odata_type", metadata.get("type"))
            data.setdefault("odata_etag", metadata.get("etag"))
        return data
