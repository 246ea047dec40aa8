from abc import ABC, abstractmethod
from typing import List


class RegistryClient(ABC):
    @abstractmethod
    def list_versions(self, package_name: str) -> List[str]:
        """Get published versions of a package, newest first."""
        pass

    def close(self):
        """Release any connections held by the client."""
        pass
