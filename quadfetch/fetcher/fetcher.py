
"""
Dataset fetcher, acquires content for a URL, resolves its content type,
decodes it with the matching parser and returns the assembled rdflib
Dataset.  Any failure aborts the fetch, partial datasets never escape.
"""

import asyncio
import logging
import time

from prometheus_client import Counter, Histogram
from rdflib import Dataset

from .. acquire import ContentAcquirer
from .. acquire.acquirer import default_timeout
from .. decoding import FormatResolver, default_registry, DEFAULT_RESOLUTION_ORDER
from .. decoding.resolver import as_lookup
from .. exceptions import FetchError
from .. schema import FetchOptions

# Module logger
logger = logging.getLogger(__name__)

class Fetcher:

    def __init__(self, **params):

        timeout = params.get("timeout", default_timeout)
        headers = params.get("headers", {})

        self.acquirer = params.get("acquirer") or ContentAcquirer(
            timeout = timeout,
            headers = headers,
        )

        self.resolver = params.get("resolver") or FormatResolver(
            params.get("resolution_order", DEFAULT_RESOLUTION_ORDER)
        )

        self.registry = params.get("registry") or default_registry

        if not hasattr(__class__, "quads_metric"):
            __class__.quads_metric = Histogram(
                'quadfetch_dataset_quads', 'Quads per fetched dataset',
                ["content_type"],
                buckets=[0, 10, 100, 1000, 10000, 100000, 1000000]
            )

        if not hasattr(__class__, "failure_metric"):
            __class__.failure_metric = Counter(
                'quadfetch_fetch_failures', 'Failed dataset fetches',
                ["error"],
            )

    # ---> DatasetLoader.load | CLI > [Fetcher.fetch_dataset] > acquire -> resolve -> decode
    async def fetch_dataset(self, options):

        options = FetchOptions.from_dict(options)

        try:
            return await self._fetch(options)
        except FetchError as e:
            __class__.failure_metric.labels(error=type(e).__name__).inc()
            raise

    async def _fetch(self, options):

        start = time.time()

        lookup = as_lookup(options.content_type_lookup)

        content = await self.acquirer.acquire(
            options.url,
            headers = options.headers,
            timeout = options.timeout,
        )

        content_type = self.resolver.resolve(
            options.content_type, lookup, options.url, content.metadata,
            data = content.data,
        )

        decoder = self.registry.get(content_type)

        logger.debug(f"Decoding {options.url} as {content_type}...")

        dataset, count = await asyncio.get_event_loop().run_in_executor(
            None, self._assemble, decoder, content.data, options.url
        )

        __class__.quads_metric.labels(content_type=content_type).observe(count)

        logger.info(
            "Fetched %d quads from %s as %s in %.3fs",
            count, options.url, content_type, time.time() - start,
        )

        return dataset

    @staticmethod
    def _assemble(decoder, data, base):

        # rdflib decoders fill the returned dataset directly
        parse_into = getattr(decoder, "parse_into", None)

        if parse_into is not None:
            dataset = parse_into(Dataset(), data, base)
            count = sum(1 for _ in dataset.quads((None, None, None, None)))
            return dataset, count

        dataset = Dataset()
        count = 0

        for quad in decoder(data, base):
            dataset.add(quad)
            count += 1

        return dataset, count

    @staticmethod
    def add_args(parser):

        ContentAcquirer.add_args(parser)
        FormatResolver.add_args(parser)

async def fetch_dataset(options, **params):
    """Fetch one dataset with a throwaway Fetcher built from params"""
    return await Fetcher(**params).fetch_dataset(options)

