
from dataclasses import dataclass, field
from typing import List

from .fetch import FetchOptions
from .spread import CacheState, SpreadOptions

__all__ = ["DataSource"]

@dataclass
class DataSource:
    """A dataset the loader keeps in sync: where from, where to, and when"""

    fetch: FetchOptions
    spread: SpreadOptions = field(default_factory=SpreadOptions)
    state: CacheState = field(default_factory=CacheState)

    # Graphs seen on the last successful load
    resources: List[str] = field(default_factory=list)

