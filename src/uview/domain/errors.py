from __future__ import annotations

"""
Domain Exceptions.

Failures raised at the archive I/O boundary. The in-memory catalog and
tree builder never raise for malformed entries; only reading and writing
package files do.
"""


class UViewError(Exception):
    """Base class for all application-level failures."""


class PackageReadError(UViewError):
    """The source file is missing or is not a readable package archive."""


class PackageWriteError(UViewError):
    """The package could not be persisted to its destination."""
