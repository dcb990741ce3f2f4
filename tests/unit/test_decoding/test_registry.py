"""
Unit tests for the format registry and rdflib decoders.
"""

import pytest
from rdflib import Dataset, Literal, URIRef

from quadfetch import rdf
from quadfetch.decoding import FormatRegistry, default_registry
from quadfetch.exceptions import (
    DecodeError, InvalidArgumentError, UnsupportedFormatError,
)

BASE = "http://example.org/base/dataset"

NQUADS = (
    b'<http://example.org/s> <http://example.org/p> "o" <http://example.org/g1> .\n'
    b'<http://example.org/s> <http://example.org/p> <http://example.org/o> <http://example.org/g2> .\n'
)

TURTLE = (
    b"@prefix ex: <http://example.org/> .\n"
    b"<thing> ex:p \"o\" .\n"
)


class TestFormatRegistry:

    def test_default_content_types(self):
        for content_type in (
                rdf.N_QUADS, rdf.N_TRIPLES, rdf.TURTLE, rdf.TRIG,
                rdf.JSON_LD, rdf.RDF_XML, rdf.N3, rdf.TRIX,
        ):
            assert content_type in default_registry

    def test_lookup_is_normalized(self):
        assert default_registry.get("Application/N-Quads; charset=utf-8") \
            is default_registry.get(rdf.N_QUADS)

    def test_unknown_content_type(self):
        with pytest.raises(UnsupportedFormatError) as ctx:
            default_registry.get("text/html")

        assert ctx.value.content_type == "text/html"
        assert rdf.N_QUADS in str(ctx.value)

    def test_register_custom_decoder(self):
        registry = FormatRegistry()

        def decoder(data, base):
            yield URIRef(base), URIRef("http://example.org/size"), Literal(len(data)), rdf.DEFAULT_GRAPH

        registry.register("Application/X-Custom", decoder)

        assert registry.content_types() == ["application/x-custom"]
        quads = list(registry.get("application/x-custom")(b"abc", BASE))
        assert quads[0][2] == Literal(3)

    def test_register_rejects_bad_input(self):
        registry = FormatRegistry()

        with pytest.raises(InvalidArgumentError):
            registry.register("", lambda data, base: iter(()))

        with pytest.raises(InvalidArgumentError):
            registry.register(rdf.N_QUADS, "nquads")


class TestRdflibDecoder:

    def test_nquads_keep_graphs(self):
        quads = list(default_registry.get(rdf.N_QUADS)(NQUADS, BASE))

        assert len(quads) == 2
        assert {q[3] for q in quads} == {
            URIRef("http://example.org/g1"), URIRef("http://example.org/g2"),
        }

    def test_turtle_resolves_against_base(self):
        quads = list(default_registry.get(rdf.TURTLE)(TURTLE, BASE))

        assert quads == [(
            URIRef("http://example.org/base/thing"),
            URIRef("http://example.org/p"),
            Literal("o"),
            rdf.DEFAULT_GRAPH,
        )]

    def test_decode_is_lazy(self):
        quads = default_registry.get(rdf.N_QUADS)(b"not n-quads at all", BASE)

        with pytest.raises(DecodeError) as ctx:
            next(quads)

        assert ctx.value.content_type == rdf.N_QUADS
        assert ctx.value.diagnostic

    def test_malformed_turtle(self):
        data = b"@prefix ex: <http://example.org/> .\nex:s ex:p .\n"

        with pytest.raises(DecodeError):
            list(default_registry.get(rdf.TURTLE)(data, BASE))

    def test_decode_is_single_use(self):
        quads = default_registry.get(rdf.N_QUADS)(NQUADS, BASE)

        assert len(list(quads)) == 2
        assert list(quads) == []

    def test_parse_into_fills_given_dataset(self):
        dataset = Dataset()

        result = default_registry.get(rdf.N_QUADS).parse_into(dataset, NQUADS, BASE)

        assert result is dataset
        assert len(list(dataset.quads((None, None, None, None)))) == 2

    def test_parse_into_puts_triples_in_default_graph(self):
        dataset = Dataset()

        default_registry.get(rdf.TURTLE).parse_into(dataset, TURTLE, BASE)

        (s, p, o), = list(dataset.default_context)
        assert s == URIRef("http://example.org/base/thing")
        assert len(list(dataset.quads((None, None, None, None)))) == 1
