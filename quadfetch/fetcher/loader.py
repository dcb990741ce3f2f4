
"""
Dataset loader, keeps a shared rdflib Dataset filled from a set of sources.
Sources with caching enabled are fetched once; every load spreads the
fetched quads into the shared dataset and stamps the source as fetched.
"""

import logging
from datetime import datetime, timezone

from .. schema import DataSource, FetchOptions
from .cache import is_cached
from .fetcher import Fetcher
from .spread import spread_dataset

# Module logger
logger = logging.getLogger(__name__)

class DatasetLoader:

    def __init__(self, fetcher=None, **params):

        self.fetcher = fetcher or Fetcher(**params)

    # ---> caller > [DatasetLoader.load] > Fetcher.fetch_dataset + spread_dataset
    async def load(self, dataset, source):

        if isinstance(source, FetchOptions):
            source = DataSource(fetch=source)

        if is_cached(source.state):
            logger.debug(
                "Skipping %s, cached since %s",
                source.fetch.url, source.state.fetched,
            )
            return None

        fetched = await self.fetcher.fetch_dataset(source.fetch)

        result = spread_dataset(fetched, dataset, source.spread)

        source.state.fetched = datetime.now(timezone.utc)
        source.resources = result.resources

        logger.debug(
            "Loaded %s into %d graph(s)", source.fetch.url, len(result.resources)
        )

        return result

    async def load_all(self, dataset, sources):

        results = []

        for source in sources:
            results.append(await self.load(dataset, source))

        return results

