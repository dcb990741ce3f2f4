"""
Fetches an RDF dataset from a file or HTTP(S) URL and writes it to stdout,
optionally moving every quad into one graph or one graph per subject.
"""

import argparse
import asyncio
import logging
import os
import sys

from rdflib import Dataset

from quadfetch.decoding import ExtensionLookup
from quadfetch.exceptions import FetchError
from quadfetch.fetcher import Fetcher, spread_dataset
from quadfetch.schema import FetchOptions, SpreadOptions

default_timeout = float(os.getenv("QUADFETCH_TIMEOUT", "30"))

OUTPUT_FORMATS = ("nquads", "trig")

def parse_headers(values):

    headers = {}

    for value in values:
        name, sep, content = value.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"Invalid header {value!r}, expected NAME:VALUE")
        headers[name.strip()] = content.strip()

    return headers

class DatasetCommand:

    def __init__(self, timeout, headers, resolution_order):

        self.fetcher = Fetcher(
            timeout = timeout,
            headers = headers,
            resolution_order = resolution_order,
        )

    async def run(self, url, content_type, lookup, spread):

        options = FetchOptions(
            url = url,
            content_type = content_type,
            content_type_lookup = lookup,
        )

        fetched = await self.fetcher.fetch_dataset(options)

        output = Dataset()
        result = spread_dataset(fetched, output, spread)

        return output, result

def to_url(value):
    """Plain paths are accepted and turned into file:// URLs"""

    if "://" in value:
        return value

    return "file://" + os.path.abspath(value)

def main(argv=None):

    parser = argparse.ArgumentParser(
        prog='qf-fetch-dataset',
        description=__doc__,
    )

    parser.add_argument(
        'url',
        help='file://, http:// or https:// URL, or a local path',
    )

    parser.add_argument(
        '-t', '--content-type',
        default=None,
        help='Content type to parse with, overrides everything else',
    )

    parser.add_argument(
        '--lookup-extension',
        action='store_true',
        help='Infer the content type from the URL file extension',
    )

    group = parser.add_mutually_exclusive_group()

    group.add_argument(
        '-r', '--resource',
        default=None,
        help='Put every quad into this named graph',
    )

    group.add_argument(
        '-s', '--split',
        action='store_true',
        help='Put every quad into a graph named after its subject',
    )

    Fetcher.add_args(parser)
    parser.set_defaults(timeout=default_timeout)

    parser.add_argument(
        '-f', '--format',
        choices=OUTPUT_FORMATS,
        default='nquads',
        help='Output serialization (default: nquads)',
    )

    parser.add_argument(
        '--resources',
        action='store_true',
        help='Print the graph IRIs found in the input instead of the data',
    )

    parser.add_argument(
        '-l', '--log-level',
        default='WARNING',
        help='Log level (default: WARNING)',
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s %(name)s %(levelname)s %(message)s',
    )

    url = to_url(args.url)

    try:

        command = DatasetCommand(
            timeout = args.timeout,
            headers = parse_headers(args.header),
            resolution_order = [
                step.strip() for step in args.resolution_order.split(",")
                if step.strip()
            ],
        )

        output, result = asyncio.run(
            command.run(
                url = url,
                content_type = args.content_type,
                lookup = ExtensionLookup() if args.lookup_extension else None,
                spread = SpreadOptions(
                    resource = args.resource,
                    split = args.split,
                ),
            )
        )

    except (FetchError, ValueError) as e:
        print(f"{url}: Failed: {str(e)}", file=sys.stderr, flush=True)
        return 1

    if args.resources:
        for resource in result.resources:
            print(resource)
    else:
        sys.stdout.write(output.serialize(format=args.format))

    return 0

if __name__ == "__main__":
    sys.exit(main())

