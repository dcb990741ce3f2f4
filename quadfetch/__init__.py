
from . exceptions import (
    FetchError, InvalidArgumentError, UnsupportedSchemeError,
    AcquisitionError, UnresolvedFormatError, UnsupportedFormatError,
    DecodeError,
)
from . schema import (
    FetchOptions, ContentMetadata, AcquiredContent,
    SpreadOptions, SpreadResult, CacheState, DataSource,
)
from . decoding import (
    ContentTypeLookup, NoLookup, CallableLookup, ExtensionLookup,
    FormatResolver, FormatRegistry, default_registry,
)
from . acquire import ContentAcquirer
from . fetcher import (
    Fetcher, DatasetLoader, fetch_dataset, is_cached, spread_dataset,
    to_canonical,
)

