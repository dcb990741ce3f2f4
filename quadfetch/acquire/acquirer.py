
"""
Content acquirer, turns a file:// or http(s):// URL into the raw payload
plus whatever metadata the transport reports.  Blocking reads are pushed
onto the default executor so the event loop keeps running.
"""

import asyncio
import logging
from pathlib import Path
from urllib.parse import urlsplit
from urllib.request import url2pathname

import requests

from .. exceptions import AcquisitionError, UnsupportedSchemeError
from .. schema import AcquiredContent, ContentMetadata

# Module logger
logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = {"file", "http", "https"}

default_timeout = 30

class ContentAcquirer:

    def __init__(self, **params):

        self.timeout = params.get("timeout", default_timeout)
        self.headers = dict(params.get("headers") or {})

    # ---> Fetcher.fetch_dataset > [ContentAcquirer.acquire] > _read_file | _http_get
    async def acquire(self, url, headers=None, timeout=None):

        scheme = urlsplit(url).scheme.lower()

        if scheme not in SUPPORTED_SCHEMES:
            logger.warning("Refusing %s, unsupported scheme %r", url, scheme)
            raise UnsupportedSchemeError(url, scheme)

        logger.debug(f"Acquiring {url}...")

        loop = asyncio.get_event_loop()

        if scheme == "file":
            content = await loop.run_in_executor(
                None, self._read_file, url
            )
        else:
            merged = self.headers | dict(headers or {})
            content = await loop.run_in_executor(
                None, self._http_get, url, merged,
                timeout if timeout is not None else self.timeout,
            )

        logger.debug(
            "Acquired %d bytes from %s (declared type: %s)",
            len(content.data), url, content.metadata.content_type,
        )

        return content

    def _read_file(self, url):

        parts = urlsplit(url)

        # file://localhost/path and file:///path name the same file
        if parts.netloc not in ("", "localhost"):
            path = Path(url2pathname(f"//{parts.netloc}{parts.path}"))
        else:
            path = Path(url2pathname(parts.path))

        try:
            data = path.read_bytes()
        except OSError as e:
            logger.error(f"Reading {path} failed: {e}")
            raise AcquisitionError(url, cause=e) from e

        return AcquiredContent(
            data=data,
            metadata=ContentMetadata(url=url, path=str(path)),
        )

    def _http_get(self, url, headers, timeout):

        try:
            resp = requests.get(url, headers=headers, timeout=timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"HTTP GET {url} failed: {type(e).__name__}: {e}")
            raise AcquisitionError(url, cause=e) from e

        logger.debug(f"HTTP GET {url} returned {resp.status_code}")

        if not 200 <= resp.status_code < 300:
            logger.error(f"HTTP GET {url} returned {resp.status_code}")
            raise AcquisitionError(url, status=resp.status_code)

        return AcquiredContent(
            data=resp.content,
            metadata=ContentMetadata(
                url=resp.url or url,
                content_type=resp.headers.get("content-type"),
                status=resp.status_code,
                headers=dict(resp.headers),
            ),
        )

    @staticmethod
    def add_args(parser):

        parser.add_argument(
            '--timeout',
            type=float,
            default=default_timeout,
            help=f'HTTP timeout in seconds (default: {default_timeout})',
        )

        parser.add_argument(
            '--header',
            action='append',
            default=[],
            metavar='NAME:VALUE',
            help='Extra HTTP request header, may be repeated',
        )

