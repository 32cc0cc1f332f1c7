"""Installer package download service."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

logger = logging.getLogger(__name__)


class Downloader:
    """Downloads installer packages into the scratch directory."""

    def __init__(self, timeout: float | None = None, chunk_size: int = 8192):
        self.timeout = timeout
        self.chunk_size = chunk_size

    def download_file(self, url: str, dest: Path) -> Path:
        """Stream a URL to disk.

        The file is written next to ``dest`` under a temporary name and moved
        into place only once the transfer completes, so an interrupted
        download never looks like a finished package.
        """
        dest.parent.mkdir(parents=True, exist_ok=True)
        temp_path = dest.with_suffix(dest.suffix + ".part")

        logger.info("Downloading %s to %s", url, dest)
        try:
            with requests.get(url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                with temp_path.open("wb") as f:
                    for chunk in response.iter_content(chunk_size=self.chunk_size):
                        if chunk:  # filter out keep-alive new chunks
                            f.write(chunk)
        except requests.RequestException:
            temp_path.unlink(missing_ok=True)
            raise

        temp_path.replace(dest)
        return dest
