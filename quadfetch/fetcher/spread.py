
"""
Graph spreading, copies the quads of one dataset into another while
reassigning their graph label: unchanged, all into one resource graph, or
one graph per subject.
"""

import logging
from collections.abc import Mapping

from rdflib import BNode, ConjunctiveGraph, Graph, URIRef

from .. import rdf
from .. decoding.registry import graph_identifier
from .. exceptions import InvalidArgumentError
from .. schema import SpreadOptions, SpreadResult

# Module logger
logger = logging.getLogger(__name__)

def as_spread_options(options):

    if options is None:
        return SpreadOptions()

    if isinstance(options, SpreadOptions):
        return options

    if isinstance(options, Mapping):
        return SpreadOptions(
            resource = options.get("resource") or None,
            split = bool(options.get("split", False)),
        )

    raise InvalidArgumentError(
        f"Spread options must be SpreadOptions or a mapping, "
        f"got {type(options).__name__}"
    )

def graph_order(context):
    """Default graph first, then named graphs by IRI"""

    identifier = graph_identifier(context)

    return identifier != rdf.DEFAULT_GRAPH, str(identifier)

def iter_quads(source):
    """
    Quads of a Dataset, a plain Graph or an iterable of 3/4-tuples.  The
    store of a Dataset has no insertion order, so its graphs are walked
    default graph first and then by IRI; iterables keep their own order.
    """

    # Dataset is a ConjunctiveGraph
    if isinstance(source, ConjunctiveGraph):
        for context in sorted(source.contexts(), key=graph_order):
            g = graph_identifier(context)
            for s, p, o in context:
                yield s, p, o, g
        return

    if isinstance(source, Graph):
        for s, p, o in source:
            yield s, p, o, rdf.DEFAULT_GRAPH
        return

    for statement in source:
        if len(statement) == 3:
            s, p, o = statement
            yield s, p, o, rdf.DEFAULT_GRAPH
        else:
            s, p, o, g = statement
            yield s, p, o, graph_identifier(g)

def subject_graph(subject):
    """Graph IRI derived from a subject, blank nodes get their skolem IRI"""

    if isinstance(subject, URIRef):
        return subject

    if isinstance(subject, BNode):
        return subject.skolemize()

    return URIRef(str(subject))

def resource_name(graph):
    """Reported name of an input graph, the default graph has no name"""

    if graph == rdf.DEFAULT_GRAPH:
        return ""

    return str(graph)

# ---> DatasetLoader.load | CLI > [spread_dataset] > output.add per quad
def spread_dataset(input, output, options=None):

    options = as_spread_options(options)

    if output is input:
        raise InvalidArgumentError("Output must be a different dataset from input")

    if not hasattr(output, "add"):
        raise InvalidArgumentError(
            f"Output must support add(), got {type(output).__name__}"
        )

    if options.resource:
        target = URIRef(options.resource)
        logger.debug(f"Spreading into graph {target}")
    else:
        target = None
        if options.split:
            logger.debug("Spreading one graph per subject")

    resources = []
    seen = set()

    for s, p, o, g in iter_quads(input):

        if g not in seen:
            seen.add(g)
            resources.append(resource_name(g))

        if target is not None:
            graph = target
        elif options.split:
            graph = subject_graph(s)
        else:
            graph = g

        output.add((s, p, o, graph))

    return SpreadResult(resources=resources)

def to_canonical(source):
    """Sorted N-Quads lines, for comparing datasets"""

    lines = set()

    for s, p, o, g in iter_quads(source):
        terms = [s.n3(), p.n3(), o.n3()]
        if g != rdf.DEFAULT_GRAPH:
            terms.append(g.n3())
        lines.add(" ".join(terms) + " .")

    return "\n".join(sorted(lines))

