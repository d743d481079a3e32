"""Shared error types for the provider layer."""


class ProviderError(Exception):
    """Base error for all provider failures."""


class FlightLookupError(ProviderError):
    """A flight search failed (network, HTTP status or payload decoding)."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Flight lookup failed" + (f": {detail}" if detail else ""))
