"""Directory user search protocol contract."""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

RawAttributeSet = Mapping[str, Any]
"""Sparse attribute name -> value mapping as returned by the directory."""


@runtime_checkable
class UserSearchProtocol(Protocol):
    """Protocol for the directory search collaborator.

    Defines ONLY the contract for looking up a single directory entry.
    Implementations own the connection, credentials and timeouts.
    """

    def search_for_user(self, username: str) -> Optional[RawAttributeSet]:
        """Search the directory for a user entry.

        Args:
            username: Username to search for, used verbatim

        Returns:
            Attributes of the matching entry, or None when nothing matches

        Raises:
            Exception: Any transport or operational failure of the directory
        """
        ...
