"""Mini README: In-process API surface for the transaction ledger.

Exports the request gateway and its response envelope. Real transports
(HTTP handlers, message consumers) can wrap ``RequestGateway.handle``.
"""

from .router import RequestGateway, ResponseEnvelope, format_timestamp

__all__ = ["RequestGateway", "ResponseEnvelope", "format_timestamp"]
