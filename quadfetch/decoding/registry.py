
"""
Format registry, maps content types to decoders.  The default decoders
delegate parsing to rdflib's parser plugins.
"""

import logging
from typing import Callable, Dict, Iterator

from rdflib import Dataset

from .. import rdf
from .. exceptions import DecodeError, InvalidArgumentError, UnsupportedFormatError
from .content_type_detection import normalize_content_type

# Module logger
logger = logging.getLogger(__name__)

class RdflibDecoder:
    """
    Decodes a payload with one rdflib parser.  Calling the decoder returns a
    lazy single-use iterator; parsing happens on the first next().
    """

    def __init__(self, format, content_type, quads=True):
        self.format = format
        self.content_type = content_type
        self.quads = quads

    def __call__(self, data: bytes, base: str) -> Iterator[tuple]:

        dataset = self.parse_into(Dataset(), data, base)

        for s, p, o, g in dataset.quads((None, None, None, None)):
            yield s, p, o, graph_identifier(g)

    def parse_into(self, dataset, data, base):
        """
        Parse straight into an existing Dataset.  Triple formats land in its
        default graph.
        """

        logger.debug(
            "Parsing %d bytes of %s as %s", len(data), base, self.format
        )

        if self.quads:
            target = dataset
        else:
            target = dataset.default_context

        try:
            target.parse(data=data, format=self.format, publicID=base)
        except Exception as e:
            logger.warning(f"Parsing {base} as {self.format} failed: {e}")
            raise DecodeError(self.content_type, str(e)) from e

        return dataset

    def __repr__(self):
        return f"RdflibDecoder({self.format!r})"

def graph_identifier(g):
    """Graph label of a quad, None and the default context become DEFAULT_GRAPH"""

    if g is None:
        return rdf.DEFAULT_GRAPH

    # ConjunctiveGraph.quads hands back the context graph itself
    identifier = getattr(g, "identifier", g)

    return identifier

class FormatRegistry:

    def __init__(self):
        self.decoders: Dict[str, Callable] = {}

    def register(self, content_type, decoder):

        key = normalize_content_type(content_type)

        if not key:
            raise InvalidArgumentError(
                f"Invalid content type: {content_type!r}"
            )

        if not callable(decoder):
            raise InvalidArgumentError(
                f"Decoder for {key} must be callable"
            )

        self.decoders[key] = decoder

    def get(self, content_type):

        key = normalize_content_type(content_type)

        if key not in self.decoders:
            logger.warning(f"No decoder for content type {content_type}")
            raise UnsupportedFormatError(content_type, self.decoders.keys())

        return self.decoders[key]

    def content_types(self):
        return sorted(self.decoders.keys())

    def __contains__(self, content_type):
        return normalize_content_type(content_type) in self.decoders

# content type -> rdflib parser plugin
RDFLIB_FORMATS = {
    rdf.N_QUADS: "nquads",
    rdf.TRIG: "trig",
    rdf.TRIX: "trix",
    rdf.JSON_LD: "json-ld",
    rdf.N_TRIPLES: "nt",
    rdf.TURTLE: "turtle",
    rdf.N3: "n3",
    rdf.RDF_XML: "xml",
}

def create_default_registry():

    registry = FormatRegistry()

    for content_type, format in RDFLIB_FORMATS.items():
        registry.register(
            content_type,
            RdflibDecoder(
                format, content_type,
                quads=content_type in rdf.QUAD_CONTENT_TYPES,
            ),
        )

    return registry

default_registry = create_default_registry()

