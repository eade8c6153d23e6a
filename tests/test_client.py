"""
Unit tests for the Reddit thread client, using httpx's mock transport.
"""

import unittest

import httpx

from threadexport.client import RedditThreadClient, thread_json_url
from threadexport.exceptions import FetchError, MissingURLError


THREAD_URL = "https://www.reddit.com/r/test/comments/xyz/test_post/"

PAYLOAD = [
    {"kind": "Listing", "data": {"children": [{"kind": "t3", "data": {"title": "Test post", "author": "op"}}]}},
    {"kind": "Listing", "data": {"children": [
        {"kind": "t1", "data": {"body": "hello", "author": "a", "ups": 1, "downs": 0, "replies": ""}},
        {"kind": "more", "data": {"count": 2, "children": ["b", "c"]}},
    ]}},
]


def make_client(handler):
    return RedditThreadClient(client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestThreadJsonUrl(unittest.TestCase):
    """Test URL handling."""

    def test_appends_json(self):
        self.assertEqual(thread_json_url(THREAD_URL), THREAD_URL + ".json")

    def test_strips_whitespace(self):
        self.assertEqual(thread_json_url("  https://x/y  "), "https://x/y.json")

    def test_empty_url(self):
        with self.assertRaises(MissingURLError):
            thread_json_url("   ")
        with self.assertRaises(MissingURLError):
            thread_json_url(None)


class TestRedditThreadClient(unittest.TestCase):
    """Test fetching and the response gate."""

    def test_fetch_thread(self):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json=PAYLOAD)

        with make_client(handler) as client:
            importer = client.fetch_thread(THREAD_URL)

        self.assertEqual(seen, [THREAD_URL + ".json"])
        self.assertEqual(importer.get_post().title, "Test post")
        self.assertEqual(len(importer.get_comments()), 2)

    def test_error_payload(self):
        def handler(request):
            return httpx.Response(200, json={"error": 404, "message": "Not Found"})

        with make_client(handler) as client:
            with self.assertRaises(FetchError):
                client.fetch_json(THREAD_URL)

    def test_http_error_status(self):
        def handler(request):
            return httpx.Response(500, text="oops")

        with make_client(handler) as client:
            with self.assertRaises(FetchError):
                client.fetch_json(THREAD_URL)

    def test_non_json_body(self):
        def handler(request):
            return httpx.Response(200, text="<html>blocked</html>")

        with make_client(handler) as client:
            with self.assertRaises(FetchError):
                client.fetch_json(THREAD_URL)

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with make_client(handler) as client:
            with self.assertRaises(FetchError):
                client.fetch_json(THREAD_URL)

    def test_missing_url_never_requests(self):
        def handler(request):
            raise AssertionError("no request expected")

        with make_client(handler) as client:
            with self.assertRaises(MissingURLError):
                client.fetch_json("")


if __name__ == '__main__':
    unittest.main()
