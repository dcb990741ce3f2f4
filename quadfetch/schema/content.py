
from dataclasses import dataclass, field
from typing import Dict, Optional

__all__ = ["ContentMetadata", "AcquiredContent"]

############################################################################

# What the transport told us about the payload

@dataclass
class ContentMetadata:
    url: str
    content_type: Optional[str] = None
    status: Optional[int] = None
    headers: Dict[str, str] = field(default_factory=dict)

    # Local path, file URLs only
    path: Optional[str] = None

############################################################################

# Raw payload plus metadata, as returned by the acquirer

@dataclass
class AcquiredContent:
    data: bytes
    metadata: ContentMetadata

############################################################################

