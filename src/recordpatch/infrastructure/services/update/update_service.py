"""Abstract base class for update services.

Defines the interface that all update service backends must implement.
"""

from abc import ABC, abstractmethod

from recordpatch.domain.entities.change_set import UpdateRequest


class UpdateService(ABC):
    """Abstract base class for update services.

    All backends (HTTP, SQL, etc.) must implement this interface.
    """

    @abstractmethod
    def update(self, request: UpdateRequest) -> None:
        """Apply a partial update to a remote record.

        Args:
            request: The record identity and the changed attributes.

        Raises:
            UpdateServiceError: If the backend rejects the update.
        """
        pass
