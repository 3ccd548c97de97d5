"""JSON-API document schemas and resource serializers."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from blogapi.services.datetime_service import format_iso

JSONAPI_VERSION = "1.0"


class JsonApiInfo(BaseModel):
    version: str = JSONAPI_VERSION


class ResourceObject(BaseModel):
    """A single JSON-API resource."""

    type: str
    id: str
    attributes: dict[str, Any] = Field(default_factory=dict)


class MetaCounts(BaseModel):
    """Counts returned by the meta-only posts query."""

    model_config = ConfigDict(populate_by_name=True)

    posts_count: int = Field(ge=0, alias="postsCount")
    tags_count: int = Field(ge=0, alias="tagsCount")


class Document(BaseModel):
    """Top-level JSON-API document."""

    data: ResourceObject | list[ResourceObject]
    meta: MetaCounts | None = None
    jsonapi: JsonApiInfo = Field(default_factory=JsonApiInfo)


def _dasherize(name: str) -> str:
    return name.replace("_", "-")


def _attribute_value(value: object) -> object:
    if isinstance(value, datetime):
        return format_iso(value)
    return value


class ResourceSerializer:
    """Serialize entities of one resource type into JSON-API documents.

    Only the listed attributes are emitted, with dasherized keys; attributes
    that are ``None`` on the entity are left out.
    """

    def __init__(self, resource_type: str, attributes: Sequence[str]) -> None:
        self.resource_type = resource_type
        self.attributes = tuple(attributes)

    def resource(self, entity: Any) -> ResourceObject:
        attributes: dict[str, Any] = {}
        for name in self.attributes:
            value = getattr(entity, name, None)
            if value is not None:
                attributes[_dasherize(name)] = _attribute_value(value)
        return ResourceObject(type=self.resource_type, id=str(entity.id), attributes=attributes)

    def serialize(self, entity_or_list: Any) -> Document:
        if isinstance(entity_or_list, (list, tuple)):
            return Document(data=[self.resource(entity) for entity in entity_or_list])
        return Document(data=self.resource(entity_or_list))


def meta_document(posts_count: int, tags_count: int) -> Document:
    """Meta-only document: counts and an empty data array."""
    return Document(data=[], meta=MetaCounts(posts_count=posts_count, tags_count=tags_count))


posts_serializer = ResourceSerializer(
    "posts", ("title", "slug", "lang", "summary", "created_at")
)
post_serializer = ResourceSerializer(
    "posts", ("title", "slug", "lang", "summary", "body", "created_at")
)
tag_serializer = ResourceSerializer("tags", ("name", "slug", "lang", "post_count"))
