"""Directory failure exception."""

from typing import Optional

from .base import NeoUserInfoError


class DirectoryFailure(NeoUserInfoError):
    """Raised when the directory search collaborator fails during a load.

    Distinct from a clean "no match": a failure is never cached, so the next
    lookup for the same username goes back to the directory.
    """

    def __init__(
        self,
        message: str = "Directory search failed",
        *,
        username: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            message,
            error_code="DIRECTORY_FAILURE",
            details={
                "username": username,
                "cause": repr(cause) if cause is not None else None,
            },
        )
        self.username = username
        self.cause = cause

    @classmethod
    def search_failed(cls, username: str, cause: BaseException) -> "DirectoryFailure":
        """Create exception for a search that raised instead of returning."""
        return cls(
            message=f"Directory search for '{username}' failed: {cause}",
            username=username,
            cause=cause,
        )

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.cause is not None:
            return f"{base_msg} (cause={type(self.cause).__name__})"
        return base_msg
