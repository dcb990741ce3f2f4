
"""
Content-type resolution.  Picks the content type used to select a decoder
from, in a configurable order, the caller's explicit override, a lookup
strategy, the transport metadata and (opt-in) a sniff of the payload.
"""

import logging
from typing import Callable, Optional, Sequence

from .. exceptions import InvalidArgumentError, UnresolvedFormatError
from .. schema import ContentMetadata
from .content_type_detection import (
    EXTENSION_TO_CONTENT_TYPE,
    guess_content_type,
    guess_content_type_from_url,
    normalize_content_type,
)

# Module logger
logger = logging.getLogger(__name__)

EXPLICIT = "explicit"
LOOKUP = "lookup"
METADATA = "metadata"
SNIFF = "sniff"

RESOLUTION_STEPS = (EXPLICIT, LOOKUP, METADATA, SNIFF)

DEFAULT_RESOLUTION_ORDER = (EXPLICIT, LOOKUP, METADATA)

class ContentTypeLookup:
    """Strategy that infers a content type from a URL and its metadata"""

    def resolve_content_type(
            self, url: str, metadata: Optional[ContentMetadata],
    ) -> Optional[str]:
        raise NotImplementedError()

class NoLookup(ContentTypeLookup):
    """No strategy was supplied"""

    def resolve_content_type(self, url, metadata):
        return None

    def __repr__(self):
        return "NoLookup()"

class CallableLookup(ContentTypeLookup):

    def __init__(self, fn: Callable[[str, Optional[ContentMetadata]], Optional[str]]):
        self.fn = fn

    def resolve_content_type(self, url, metadata):
        return self.fn(url, metadata)

    def __repr__(self):
        return f"CallableLookup({self.fn!r})"

class ExtensionLookup(ContentTypeLookup):
    """Content type from the file extension of the URL path"""

    def __init__(self, mapping=None):
        self.mapping = dict(
            EXTENSION_TO_CONTENT_TYPE if mapping is None else mapping
        )

    def resolve_content_type(self, url, metadata):
        return guess_content_type_from_url(url, self.mapping)

    def __repr__(self):
        return "ExtensionLookup()"

def as_lookup(value) -> ContentTypeLookup:

    if value is None:
        return NoLookup()

    if isinstance(value, ContentTypeLookup):
        return value

    if callable(value):
        return CallableLookup(value)

    raise InvalidArgumentError(
        f"Content type lookup must be callable, got {type(value).__name__}"
    )

class FormatResolver:

    def __init__(self, order: Sequence[str] = DEFAULT_RESOLUTION_ORDER):

        order = tuple(order)

        unknown = [step for step in order if step not in RESOLUTION_STEPS]
        if unknown:
            raise InvalidArgumentError(
                "Unknown resolution step(s): " + ", ".join(unknown)
                + ". Valid steps: " + ", ".join(RESOLUTION_STEPS)
            )

        if not order:
            raise InvalidArgumentError("Resolution order must not be empty")

        self.order = order

    # ---> Fetcher.fetch_dataset > [FormatResolver.resolve] > first usable content type
    def resolve(
            self,
            explicit_content_type: Optional[str],
            lookup,
            url: str,
            metadata: Optional[ContentMetadata],
            data: Optional[bytes] = None,
    ) -> str:

        lookup = as_lookup(lookup)

        for step in self.order:

            if step == EXPLICIT:
                candidate = explicit_content_type
            elif step == LOOKUP:
                candidate = lookup.resolve_content_type(url, metadata)
            elif step == METADATA:
                candidate = metadata.content_type if metadata else None
            else:
                candidate = guess_content_type(data) if data else None

            content_type = normalize_content_type(candidate)

            if content_type:
                logger.debug(f"Resolved {url} as {content_type} ({step})")
                return content_type

        logger.warning(
            "No content type for %s after steps %s", url, ", ".join(self.order)
        )

        raise UnresolvedFormatError(url)

    @staticmethod
    def add_args(parser):

        parser.add_argument(
            '--resolution-order',
            default=",".join(DEFAULT_RESOLUTION_ORDER),
            help=(
                'Comma separated content type resolution steps, any of '
                + ", ".join(RESOLUTION_STEPS)
                + f' (default: {",".join(DEFAULT_RESOLUTION_ORDER)})'
            ),
        )

