"""Typed domain models shared across runtime layers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageRenderingContext:
    """Values interpolated into the index page for one request.

    Attributes:
        message: Configured display message.
        environment: Runtime environment label.
        version: Service version label.
        hostname: Host identity resolved at startup.
        timestamp: Wall-clock time of assembly, already formatted for display.
    """

    message: str
    environment: str
    version: str
    hostname: str
    timestamp: str
