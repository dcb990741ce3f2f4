"""
Unit tests for the content acquirer.
"""

import os
import tempfile
from pathlib import Path
from unittest import IsolatedAsyncioTestCase
from unittest.mock import MagicMock, patch

import requests
from requests.structures import CaseInsensitiveDict

from quadfetch.acquire import ContentAcquirer
from quadfetch.exceptions import AcquisitionError, UnsupportedSchemeError


def http_response(status=200, content=b"", headers=None, url="http://example.org/dataset"):
    resp = MagicMock()
    resp.status_code = status
    resp.content = content
    resp.headers = CaseInsensitiveDict(headers or {})
    resp.url = url
    return resp


class TestFileAcquisition(IsolatedAsyncioTestCase):
    """Reading file:// URLs"""

    async def test_reads_file_url(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "data.nq"
            path.write_bytes(b"payload")

            content = await ContentAcquirer().acquire(path.as_uri())

        assert content.data == b"payload"
        assert content.metadata.path == str(path)
        assert content.metadata.content_type is None
        assert content.metadata.status is None

    async def test_localhost_authority_is_local(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "data.ttl"
            path.write_bytes(b"local")

            url = "file://localhost" + path.as_uri()[len("file://"):]
            content = await ContentAcquirer().acquire(url)

        assert content.data == b"local"

    async def test_missing_file_carries_cause(self):
        with tempfile.TemporaryDirectory() as tmp:
            url = (Path(tmp) / "missing.nq").as_uri()

            with self.assertRaises(AcquisitionError) as ctx:
                await ContentAcquirer().acquire(url)

        assert isinstance(ctx.exception.cause, FileNotFoundError)
        assert ctx.exception.status is None
        assert ctx.exception.url == url

    async def test_unsupported_scheme(self):
        with self.assertRaises(UnsupportedSchemeError) as ctx:
            await ContentAcquirer().acquire("ftp://example.org/data.nq")

        assert ctx.exception.scheme == "ftp"

    async def test_relative_path_is_not_a_url(self):
        with self.assertRaises(UnsupportedSchemeError):
            await ContentAcquirer().acquire(os.path.join("data", "people.nq"))


class TestHttpAcquisition(IsolatedAsyncioTestCase):
    """GET requests for http(s):// URLs"""

    @patch("quadfetch.acquire.acquirer.requests.get")
    async def test_returns_body_and_metadata(self, mock_get):
        mock_get.return_value = http_response(
            content=b"<a> <b> <c> .",
            headers={"Content-Type": "application/n-quads; charset=utf-8"},
        )

        content = await ContentAcquirer().acquire("http://example.org/dataset")

        assert content.data == b"<a> <b> <c> ."
        assert content.metadata.content_type == "application/n-quads; charset=utf-8"
        assert content.metadata.status == 200
        assert content.metadata.url == "http://example.org/dataset"

    @patch("quadfetch.acquire.acquirer.requests.get")
    async def test_merges_headers_and_uses_timeout(self, mock_get):
        mock_get.return_value = http_response()

        acquirer = ContentAcquirer(
            timeout=5, headers={"User-Agent": "quadfetch", "X-Default": "1"}
        )

        await acquirer.acquire(
            "https://example.org/dataset", headers={"X-Default": "2"}
        )

        args, kwargs = mock_get.call_args
        assert args == ("https://example.org/dataset",)
        assert kwargs["headers"] == {"User-Agent": "quadfetch", "X-Default": "2"}
        assert kwargs["timeout"] == 5

    @patch("quadfetch.acquire.acquirer.requests.get")
    async def test_per_call_timeout_wins(self, mock_get):
        mock_get.return_value = http_response()

        await ContentAcquirer(timeout=5).acquire(
            "http://example.org/dataset", timeout=1.5
        )

        assert mock_get.call_args.kwargs["timeout"] == 1.5

    @patch("quadfetch.acquire.acquirer.requests.get")
    async def test_non_2xx_status_fails(self, mock_get):
        mock_get.return_value = http_response(status=404)

        with self.assertRaises(AcquisitionError) as ctx:
            await ContentAcquirer().acquire("http://example.org/missing")

        assert ctx.exception.status == 404
        assert ctx.exception.cause is None

    @patch("quadfetch.acquire.acquirer.requests.get")
    async def test_transport_error_carries_cause(self, mock_get):
        error = requests.exceptions.ConnectionError("refused")
        mock_get.side_effect = error

        with self.assertRaises(AcquisitionError) as ctx:
            await ContentAcquirer().acquire("http://example.org/dataset")

        assert ctx.exception.cause is error
        assert ctx.exception.__cause__ is error
