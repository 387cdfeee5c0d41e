"""
Bootstrap Loader

Supplies the raw JSON payloads the seeder writes into the store, one
payload per entity family (`<family>.json`). Payloads are read fresh on
every call so an updated file is picked up after a store reset.
"""

import json
import logging
import os
import time
from urllib.parse import urljoin, urlparse

import requests

from errors import BootstrapLoadError

logger = logging.getLogger(__name__)


def payload_filename(family):
    return f"{family}.json"


class DirectoryBootstrapLoader:
    """Reads bootstrap payloads from a local directory."""

    def __init__(self, directory):
        self.directory = directory

    def load(self, family):
        path = os.path.join(self.directory, payload_filename(family))
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except OSError as e:
            raise BootstrapLoadError(f"Failed to load {payload_filename(family)}: {e}") from e
        except json.JSONDecodeError as e:
            raise BootstrapLoadError(f"Invalid JSON in {payload_filename(family)}: {e}") from e


class HttpBootstrapLoader:
    """
    Fetches bootstrap payloads over HTTP(S).

    Every request bypasses intermediate caches: no-cache headers plus a
    timestamp query parameter.

    Args:
        base_url: URL of the directory holding the payload files
        timeout: Request timeout in seconds (None waits indefinitely)
        max_size: Maximum payload size in bytes (default 10MB)
    """

    def __init__(self, base_url, timeout=None, max_size=10 * 1024 * 1024):
        self.base_url = base_url if base_url.endswith('/') else base_url + '/'
        self.timeout = timeout
        self.max_size = max_size

    def load(self, family):
        filename = payload_filename(family)
        url = urljoin(self.base_url, filename)
        headers = {'Cache-Control': 'no-cache', 'Pragma': 'no-cache'}
        params = {'_': int(time.time() * 1000)}

        try:
            response = requests.get(url, headers=headers, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise BootstrapLoadError(f"Failed to load {filename}: {e}") from e

        # Check content-length header if available
        content_length = response.headers.get('content-length')
        if content_length:
            try:
                size = int(content_length)
            except ValueError:
                raise BootstrapLoadError(f"{filename} has invalid content-length: {content_length!r}")
            if size > self.max_size:
                raise BootstrapLoadError(
                    f"{filename} too large: {content_length} bytes (max {self.max_size})"
                )

        try:
            return response.json()
        except ValueError as e:
            raise BootstrapLoadError(f"Invalid JSON in {filename}: {e}") from e


def make_loader(source, timeout=None):
    """Pick the HTTP loader for http(s) URLs, the directory loader otherwise."""
    if urlparse(source).scheme in ('http', 'https'):
        logger.info("Bootstrap payloads from %s", source)
        return HttpBootstrapLoader(source, timeout=timeout)
    logger.info("Bootstrap payloads from directory %s", source)
    return DirectoryBootstrapLoader(source)
