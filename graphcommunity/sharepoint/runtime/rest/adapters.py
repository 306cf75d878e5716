"""Response adapters turning OData payloads into models.

Two payload shapes are accepted:
    - verbose:      ``{"d": {...}}`` / ``{"d": {"results": [...], "__next": url}}``
    - minimal/v4:   ``{...}`` / ``{"value": [...], "odata.nextLink": url}``
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ...config import NEXT_LINK_KEYS
from ...core.exceptions import SerializationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Page(Generic[ModelT]):
    """One batch of a paged collection."""

    items: tuple[ModelT, ...]
    next_link: str | None = None


class ResponseAdapter:
    def parse(self, response: Any) -> Any:
        return response


def _unwrap(response: Any) -> dict[str, Any]:
    if not isinstance(response, dict):
        raise SerializationError(f"Expected a JSON object, got {type(response).__name__}")
    inner = response.get("d")
    if isinstance(inner, dict):
        return inner
    return response


class EntityAdapter(ResponseAdapter, Generic[ModelT]):
    """Adapter for a single entity payload."""

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    def parse(self, response: Any) -> ModelT:
        try:
            return self.model.model_validate(_unwrap(response))
        except PydanticValidationError as e:
            raise SerializationError(f"Invalid {self.model.__name__} payload: {e}") from e


class CollectionAdapter(ResponseAdapter, Generic[ModelT]):
    """Adapter for a collection payload, yielding a ``Page``."""

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    def parse(self, response: Any) -> Page[ModelT]:
        body = _unwrap(response)
        if "results" in body:
            rows = body["results"]
        elif "value" in body:
            rows = body["value"]
        else:
            raise SerializationError(
                f"Collection payload for {self.model.__name__} has no results"
            )
        if not isinstance(rows, list):
            raise SerializationError(
                f"Collection payload for {self.model.__name__} is not a list"
            )

        next_link = None
        for key in NEXT_LINK_KEYS:
            if body.get(key):
                next_link = str(body[key])
                break

        try:
            items = tuple(self.model.model_validate(row) for row in rows)
        except PydanticValidationError as e:
            raise SerializationError(f"Invalid {self.model.__name__} payload: {e}") from e
        return Page(items=items, next_link=next_link)


class NoContentAdapter(ResponseAdapter):
    """Adapter for writes that answer with an empty body."""

    def parse(self, response: Any) -> None:
        return None
