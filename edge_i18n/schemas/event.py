"""
Request / result envelopes exchanged with the hosting routing layer.

``InternalEvent`` is the transport-neutral view of an incoming request and
``InternalResult`` is what the routing layer sends back when it answers a
request itself (a locale redirect). The result is serialised with camelCase
keys because adapters downstream read those keys as-is.
"""

from __future__ import annotations

import io
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from edge_i18n.utils.stream import empty_readable_stream


class InternalEvent(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    raw_path: str = Field(..., pattern=r"^/", description="Request path, without query string.")
    url: str = Field(..., description="Full request URL (absolute or relative).")
    headers: dict[str, str] = Field(default_factory=dict, description="Header names are lower-cased.")
    cookies: dict[str, str] = Field(default_factory=dict)

    @property
    def host(self) -> str | None:
        return self.headers.get("host")

    @property
    def accept_language(self) -> str | None:
        return self.headers.get("accept-language")


class InternalResult(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    type: Literal["core"] = "core"
    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)
    body: io.BytesIO = Field(default_factory=empty_readable_stream)
    is_base64_encoded: bool = False

    @classmethod
    def redirect(cls, location: str, status_code: int = 307) -> InternalResult:
        """Build a redirect answer with an empty body."""
        return cls(status_code=status_code, headers={"Location": location})

    @property
    def location(self) -> str | None:
        return self.headers.get("Location")

    def to_wire(self) -> dict[str, Any]:
        """Serialise with the camelCase keys expected by transport adapters."""
        return {
            "type": self.type,
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
            "isBase64Encoded": self.is_base64_encoded,
        }
