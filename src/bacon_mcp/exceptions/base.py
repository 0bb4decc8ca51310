from __future__ import annotations


class BaconError(Exception):
    """Root of every error bacon-mcp raises on purpose.

    Tool handlers catch it at the protocol boundary and turn it into an
    error-flagged response, so it never reaches the transport.

    Attributes:
        message: Text shown to the caller after "Error: ".
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
