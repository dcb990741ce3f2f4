
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..exceptions import InvalidArgumentError

__all__ = ["FetchOptions"]

@dataclass
class FetchOptions:
    """Everything needed to fetch one dataset"""

    url: str

    # Explicit override, beats every inferred content type
    content_type: Optional[str] = None

    # ContentTypeLookup or plain callable(url, metadata)
    content_type_lookup: Optional[Any] = None

    # Passed through to the acquirer
    headers: Dict[str, str] = field(default_factory=dict)
    timeout: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FetchOptions":
        """
        Build options from the dict shape
        {url, contentType?, options?: {contentTypeLookup?, headers?, timeout?}}.
        Snake-case and kebab-case spellings are accepted too.
        """

        if isinstance(data, FetchOptions):
            return data

        if not isinstance(data, Mapping):
            raise InvalidArgumentError(
                f"Fetch options must be a mapping, got {type(data).__name__}"
            )

        if not data.get("url"):
            raise InvalidArgumentError("Fetch options require a url")

        nested = data.get("options") or {}

        if not isinstance(nested, Mapping):
            raise InvalidArgumentError(
                f"Nested fetch options must be a mapping, "
                f"got {type(nested).__name__}"
            )

        return cls(
            url=data["url"],
            content_type=(
                data.get("content_type") or data.get("contentType")
                or data.get("content-type")
            ),
            content_type_lookup=(
                nested.get("content_type_lookup")
                or nested.get("contentTypeLookup")
                or data.get("content_type_lookup")
            ),
            headers=dict(nested.get("headers") or data.get("headers") or {}),
            timeout=nested.get("timeout", data.get("timeout")),
        )

