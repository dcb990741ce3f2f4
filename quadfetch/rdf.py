
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID

# Graph label used for statements outside any named graph
DEFAULT_GRAPH = DATASET_DEFAULT_GRAPH_ID

# RDF serialization content types
N_QUADS = "application/n-quads"
N_TRIPLES = "application/n-triples"
TURTLE = "text/turtle"
TRIG = "application/trig"
TRIX = "application/trix"
JSON_LD = "application/ld+json"
RDF_XML = "application/rdf+xml"
N3 = "text/n3"

# Formats that can carry named graphs
QUAD_CONTENT_TYPES = {N_QUADS, TRIG, TRIX, JSON_LD}

