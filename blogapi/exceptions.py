"""Application-level exception types.

Convention:
- ``InternalServerError``: for errors whose details must never reach clients
  (unreadable content directory, configuration problems).  The global handler
  logs the full message at ERROR and returns a generic "Internal server error"
  (500) to the client.
- ``ValueError``: for content problems that are safe to report.  During
  ingestion they cause the offending file to be skipped; at request time the
  global ``ValueError`` handler returns ``str(exc)`` as the 422 detail.
"""

from __future__ import annotations


class InternalServerError(Exception):
    """Raised for internal errors whose details must not be exposed to clients."""


class ContentDirectoryError(InternalServerError):
    """Raised when the content directory cannot be listed.

    Fatal at startup: the service has nothing to serve without it.
    """


class MalformedFilenameError(ValueError):
    """Raised when a content file name is not ``YYYY-MM-DD-<slug>.md``."""

    def __init__(self, file_name: str, reason: str = "expected YYYY-MM-DD-<slug>.md") -> None:
        self.file_name = file_name
        super().__init__(f"Malformed post filename {file_name!r}: {reason}")
