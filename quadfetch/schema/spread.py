
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

__all__ = ["SpreadOptions", "SpreadResult", "CacheState"]

@dataclass(frozen=True)
class SpreadOptions:

    # Every output quad goes to this graph; takes precedence over split
    resource: Optional[str] = None

    # One graph per distinct subject
    split: bool = False

@dataclass
class SpreadResult:

    # Distinct input graph IRIs in first-occurrence order
    resources: List[str] = field(default_factory=list)

@dataclass
class CacheState:
    cache: bool = False

    # Set by the caller after a successful fetch
    fetched: Optional[datetime] = None

