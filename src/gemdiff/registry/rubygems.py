import httpx
from typing import List, Optional
from urllib.parse import quote

from ..domain.errors import RegistryError
from ..domain.models import RegistrySource, sort_versions
from .client import RegistryClient

DEFAULT_TIMEOUT = 30.0


class RubyGemsRegistry(RegistryClient):
    """client for the rubygems.org compatible json api of a gem source."""

    def __init__(self, source: RegistrySource, transport: Optional[httpx.BaseTransport] = None):
        self.source = source
        self.client = httpx.Client(auth=source.auth, timeout=DEFAULT_TIMEOUT, transport=transport)

    def list_versions(self, package_name: str) -> List[str]:
        url = f"{self.source.base_url}/api/v1/versions/{quote(package_name, safe='')}.json"
        try:
            response = self.client.get(url)
            response.raise_for_status()
            records = response.json()
            # each record is {"number": "1.2.3", "platform": ..., ...}
            numbers = {record["number"] for record in records}
            return sort_versions(numbers, descending=True)
        except httpx.HTTPStatusError as e:
            raise RegistryError(package_name, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise RegistryError(package_name, str(e)) from e
        except (ValueError, KeyError, TypeError) as e:
            raise RegistryError(package_name, f"unexpected response: {e}") from e

    def close(self):
        self.client.close()
