
from collections.abc import Mapping

from .. exceptions import InvalidArgumentError

def is_cached(state):
    """
    True when caching is enabled for a resource and it has already been
    fetched once, i.e. the caller may skip fetching it again.  Accepts a
    CacheState, a mapping or any object with cache / fetched attributes.
    """

    if state is None or isinstance(state, (str, bytes, int, float)):
        raise InvalidArgumentError(
            f"Cache state must be a record, got {type(state).__name__}"
        )

    if isinstance(state, Mapping):
        cache = state.get("cache", False)
        fetched = state.get("fetched")
    else:
        cache = getattr(state, "cache", False)
        fetched = getattr(state, "fetched", None)

    return bool(cache) and fetched is not None

