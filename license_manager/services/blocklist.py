"""Enforcement of blocked licenses."""

from pathlib import Path
from typing import Iterable, List, Optional

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from license_manager.exceptions import BlockedLicenseError, DecodeError, FetchError
from license_manager.models import License

logger = logger.bind(name=__name__)

CACHE_FILENAME = "invalid-licenses-cache.json"

_string_list = TypeAdapter(List[str])


def decode_block_list(text: str, source: str) -> List[str]:
    """Decode a JSON array of strings.

    Raises:
        DecodeError: If the text is not a JSON array of strings
    """
    try:
        return _string_list.validate_json(text)
    except ValidationError as e:
        raise DecodeError(source, str(e))


class BlocklistChecker:
    """Checks licenses against local and remote blocklists.

    The remote list is downloaded once and cached in ``working_dir``; while
    the cache file exists no request is made. Remote entries add to the
    local ones.
    """

    def __init__(
        self,
        local_list: Iterable[str] = (),
        remote_url: Optional[str] = None,
        working_dir: Optional[Path] = None,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize the checker.

        Args:
            local_list: Blocked license name substrings from the configuration
            remote_url: URL of a JSON array of blocked license name substrings
            working_dir: Directory holding the cached remote list
            client: HTTP client used for the download
        """
        self.local_list = list(local_list)
        self.remote_url = remote_url if remote_url and remote_url.strip() else None
        self.working_dir = Path(working_dir) if working_dir is not None else Path("build/invalid-licenses")
        self.client = client

    @property
    def cache_file(self) -> Path:
        return self.working_dir / CACHE_FILENAME

    def load_remote_list(self) -> List[str]:
        """Return the remote blocklist, from the cache when present.

        Raises:
            FetchError: If the download fails or returns a non-success status
            DecodeError: If the cache is unreadable or a body is malformed
        """
        if self.remote_url is None:
            return []

        if self.cache_file.exists():
            logger.debug(f"Reading invalid licenses from cache {self.cache_file}")
            try:
                text = self.cache_file.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise DecodeError(str(self.cache_file), str(e))
            return decode_block_list(text, str(self.cache_file))

        logger.info(f"Downloading invalid licenses from {self.remote_url}")
        body = self._download(self.remote_url)
        block_list = decode_block_list(body, self.remote_url)

        self.working_dir.mkdir(parents=True, exist_ok=True)
        self.cache_file.write_text(body, encoding="utf-8")
        return block_list

    def _download(self, url: str) -> str:
        client = self.client or httpx.Client()
        try:
            response = client.get(url, follow_redirects=True)
        except httpx.HTTPError as e:
            raise FetchError(url, str(e))
        finally:
            if self.client is None:
                client.close()

        if not response.is_success:
            raise FetchError(url, f"HTTP {response.status_code}")
        return response.text

    def block_list(self) -> List[str]:
        """Combined blocklist, remote entries first."""
        return self.load_remote_list() + self.local_list

    def check(self, licenses: Iterable[License], report_path: Optional[Path] = None) -> None:
        """Fail on the first license whose name contains a blocklist entry.

        Args:
            licenses: Distinct licenses to check
            report_path: Summary report mentioned in the error

        Raises:
            BlockedLicenseError: If a license is blocked
        """
        block_list = self.block_list()
        if not block_list:
            return

        for license in licenses:
            name = license.name or ""
            for entry in block_list:
                if entry in name:
                    logger.error(f"License [{license.name}] matches blocked entry '{entry}'")
                    raise BlockedLicenseError(license.name, entry, report_path)

        logger.info("No blocked licenses found")
