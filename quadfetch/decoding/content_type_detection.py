
"""
Helpers for normalizing content types and guessing RDF serializations from
file extensions or raw blobs.
"""

from __future__ import annotations

import mimetypes
import re
from pathlib import PurePosixPath
from typing import Optional
from urllib.parse import unquote, urlsplit

from .. import rdf

# // ---> ExtensionLookup.resolve_content_type > [EXTENSION_TO_CONTENT_TYPE] > suffix to MIME
EXTENSION_TO_CONTENT_TYPE = {
    ".nq": rdf.N_QUADS,
    ".nquads": rdf.N_QUADS,
    ".nt": rdf.N_TRIPLES,
    ".ntriples": rdf.N_TRIPLES,
    ".ttl": rdf.TURTLE,
    ".turtle": rdf.TURTLE,
    ".trig": rdf.TRIG,
    ".trix": rdf.TRIX,
    ".jsonld": rdf.JSON_LD,
    ".json-ld": rdf.JSON_LD,
    ".rdf": rdf.RDF_XML,
    ".owl": rdf.RDF_XML,
    ".n3": rdf.N3,
}

# Older or informal spellings seen in the wild
CONTENT_TYPE_ALIASES = {
    "text/x-nquads": rdf.N_QUADS,
    "application/x-trig": rdf.TRIG,
    "application/x-turtle": rdf.TURTLE,
    "text/rdf+n3": rdf.N3,
    "application/json+ld": rdf.JSON_LD,
}

# One N-Triples / N-Quads term: IRI, blank node or literal
_TERM = r'(?:<[^>\s]*>|_:\S+|"(?:[^"\\]|\\.)*"(?:@[A-Za-z0-9-]+|\^\^<[^>\s]*>)?)'
_STATEMENT = re.compile(rf"^\s*((?:{_TERM}\s*){{3,4}})\.\s*(?:#.*)?$")
_TERMS = re.compile(_TERM)

_TURTLE_DIRECTIVE = re.compile(r"^\s*(@prefix|@base|prefix|base)\b", re.I | re.M)
# Opening line of a TriG graph block, e.g. "<g> {" or "GRAPH ex:g {"
_TRIG_GRAPH = re.compile(r"^\s*(graph\s+)?\S*\s*\{\s*$", re.I | re.M)


# // ---> FormatResolver.resolve > [normalize_content_type] > strip parameters, lower-case
def normalize_content_type(value: Optional[str]) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.split(";", 1)[0].strip().lower()
    if not value:
        return None
    return CONTENT_TYPE_ALIASES.get(value, value)


# // ---> ExtensionLookup > [guess_content_type_from_url] > suffix of the URL path
def guess_content_type_from_url(url: str, mapping=None) -> Optional[str]:
    mapping = EXTENSION_TO_CONTENT_TYPE if mapping is None else mapping

    path = unquote(urlsplit(url).path)
    suffix = PurePosixPath(path).suffix.lower()
    if not suffix:
        return None

    if suffix in mapping:
        return mapping[suffix]

    guessed, _ = mimetypes.guess_type(path)
    return guessed


# // ---> guess_content_type > [safe_text_sample] > provide sample for textual guess
def safe_text_sample(blob: bytes, limit: int = 4096) -> Optional[str]:
    snippet = blob[:limit]
    try:
        return snippet.decode("utf-8-sig")
    except UnicodeDecodeError:
        # The cut may have split a multi-byte sequence
        return snippet.decode("utf-8", errors="ignore") or None


# // ---> guess_content_type > [_guess_line_based] > N-Triples vs N-Quads
def _guess_line_based(sample: str) -> Optional[str]:

    seen = None

    # Last line may be truncated by the sample limit
    for line in sample.splitlines()[:-1] or sample.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        match = _STATEMENT.match(stripped)
        if not match:
            return None
        count = len(_TERMS.findall(match.group(1)))
        if count == 4:
            return rdf.N_QUADS
        seen = rdf.N_TRIPLES

    return seen


# // ---> FormatResolver.resolve('sniff') > [guess_content_type] > detect RDF syntax from blob
def guess_content_type(blob: bytes) -> Optional[str]:

    sample = safe_text_sample(blob)
    if not sample:
        return None

    stripped = sample.lstrip()
    lowered = stripped.lower()

    if lowered.startswith("{") or lowered.startswith("["):
        return rdf.JSON_LD

    if lowered.startswith("<?xml") or lowered.startswith("<rdf:rdf") \
       or lowered.startswith("<trix"):
        if "<trix" in lowered:
            return rdf.TRIX
        return rdf.RDF_XML

    line_based = _guess_line_based(stripped)
    if line_based:
        return line_based

    if _TURTLE_DIRECTIVE.search(stripped) or stripped.startswith("<"):
        if _TRIG_GRAPH.search(stripped):
            return rdf.TRIG
        return rdf.TURTLE

    return None

