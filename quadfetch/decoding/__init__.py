
from . content_type_detection import (
    EXTENSION_TO_CONTENT_TYPE,
    guess_content_type,
    guess_content_type_from_url,
    normalize_content_type,
)
from . resolver import (
    ContentTypeLookup, NoLookup, CallableLookup, ExtensionLookup,
    FormatResolver, as_lookup,
    DEFAULT_RESOLUTION_ORDER, RESOLUTION_STEPS,
)
from . registry import (
    FormatRegistry, RdflibDecoder, create_default_registry, default_registry,
)

