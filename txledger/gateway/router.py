"""Mini README: Request gateway modelling the ledger's REST surface in-process.

Structure:
    * ResponseEnvelope - uniform result wrapper returned for every request.
    * Route - one (method, path pattern, handler) entry.
    * RequestGateway - routes ``(method, endpoint, payload)`` to the store,
      analytics and query helpers and translates failures into envelopes.

Endpoints (a configured prefix such as ``/api`` is optional on input):

    POST   /transactions            -> created transaction (201)
    GET    /transactions            -> list, optional {"type", "search"} payload
    GET    /transactions/analytics  -> aggregate figures
    GET    /transactions/{id}       -> one transaction
    PUT    /transactions/{id}       -> updated transaction
    DELETE /transactions/{id}       -> {"id": id, "deleted": true}

``ValidationError`` becomes 400 and ``NotFoundError`` becomes 404. Unknown
paths answer 404 and known paths with the wrong verb answer 405. Dispatch is
serialised with a lock so the store's running-maximum id assignment cannot
race when a threaded host shares one gateway.
"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Pattern, Tuple

from ..ledger import (
    AnalyticsEngine,
    NotFoundError,
    TransactionStore,
    ValidationError,
    filter_and_search,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

SUPPORTED_METHODS = ("POST", "GET", "PUT", "DELETE")
HTTP_OK = 200
HTTP_CREATED = 201
HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404
HTTP_METHOD_NOT_ALLOWED = 405

Handler = Callable[[Dict[str, str], Any], Any]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render a sortable ISO-8601 UTC timestamp such as ``2026-01-16T09:30:00.000Z``."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    """Uniform wrapper around the outcome of one gateway request."""

    method: str
    endpoint: str
    timestamp: str
    data: Any
    status: int
    message: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def as_dict(self) -> Dict[str, object]:
        return {
            "method": self.method,
            "endpoint": self.endpoint,
            "timestamp": self.timestamp,
            "data": self.data,
            "status": self.status,
            "message": self.message,
        }


@dataclass(frozen=True, slots=True)
class Route:
    """Bind an HTTP verb and path pattern to a handler."""

    method: str
    pattern: Pattern[str]
    handler: Handler
    success_status: int = HTTP_OK


class RequestGateway:
    """Translate logical API requests into ledger operations."""

    def __init__(
        self,
        store: TransactionStore,
        analytics: Optional[AnalyticsEngine] = None,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        api_prefix: str = "/api",
    ) -> None:
        self._store = store
        self._analytics = analytics or AnalyticsEngine()
        self._clock = clock or _utc_now
        self._api_prefix = api_prefix.rstrip("/")
        self._lock = threading.Lock()
        self._routes: List[Route] = [
            Route("POST", re.compile(r"^/transactions$"), self._create, HTTP_CREATED),
            Route("GET", re.compile(r"^/transactions$"), self._list),
            Route("GET", re.compile(r"^/transactions/analytics$"), self._get_analytics),
            Route("GET", re.compile(r"^/transactions/(?P<id>[0-9]+)$"), self._get_one),
            Route("PUT", re.compile(r"^/transactions/(?P<id>[0-9]+)$"), self._update),
            Route("DELETE", re.compile(r"^/transactions/(?P<id>[0-9]+)$"), self._delete),
        ]

    @property
    def store(self) -> TransactionStore:
        return self._store

    def handle(self, method: str, endpoint: str, payload: Any = None) -> ResponseEnvelope:
        """Dispatch one request and wrap the result or failure in an envelope."""

        verb = (method or "").strip().upper()
        path = self._strip_prefix(endpoint)
        with self._lock:
            try:
                route, params = self._resolve(verb, path)
                data = route.handler(params, payload)
            except ValidationError as error:
                return self._failure(verb, endpoint, HTTP_BAD_REQUEST, str(error))
            except NotFoundError as error:
                return self._failure(verb, endpoint, HTTP_NOT_FOUND, str(error))
            except _RoutingError as error:
                return self._failure(verb, endpoint, error.status, str(error))
        LOGGER.debug("%s %s -> %s", verb, endpoint, route.success_status)
        message = "Created" if route.success_status == HTTP_CREATED else "Success"
        return self._envelope(verb, endpoint, data, route.success_status, message)

    def _strip_prefix(self, endpoint: str) -> str:
        path = "/" + (endpoint or "").strip().strip("/")
        if self._api_prefix and (path == self._api_prefix or path.startswith(self._api_prefix + "/")):
            path = path[len(self._api_prefix):] or "/"
        return path

    def _resolve(self, verb: str, path: str) -> Tuple[Route, Dict[str, str]]:
        path_matched = False
        for route in self._routes:
            match = route.pattern.match(path)
            if not match:
                continue
            path_matched = True
            if route.method == verb:
                return route, match.groupdict()
        if path_matched:
            raise _RoutingError(HTTP_METHOD_NOT_ALLOWED, f"Method {verb or '<empty>'} not allowed for {path}")
        raise _RoutingError(HTTP_NOT_FOUND, f"No route for {verb or '<empty>'} {path}")

    def _envelope(self, verb: str, endpoint: str, data: Any, status: int, message: str) -> ResponseEnvelope:
        return ResponseEnvelope(
            method=verb,
            endpoint=endpoint,
            timestamp=format_timestamp(self._clock()),
            data=data,
            status=status,
            message=message,
        )

    def _failure(self, verb: str, endpoint: str, status: int, message: str) -> ResponseEnvelope:
        LOGGER.warning("%s %s failed with %s: %s", verb, endpoint, status, message)
        return self._envelope(verb, endpoint, None, status, message)

    # Handlers

    def _create(self, params: Dict[str, str], payload: Any) -> Dict[str, object]:
        return self._store.create(payload).as_dict()

    def _list(self, params: Dict[str, str], payload: Any) -> List[Dict[str, object]]:
        query: Mapping[str, Any] = payload or {}
        if not isinstance(query, Mapping):
            raise ValidationError("List filters must be a mapping with optional 'type' and 'search' keys.")
        matches = filter_and_search(
            self._store.get_all(),
            type_filter=query.get("type", "all"),
            search_term=query.get("search", ""),
        )
        return [transaction.as_dict() for transaction in matches]

    def _get_analytics(self, params: Dict[str, str], payload: Any) -> Dict[str, object]:
        return self._analytics.compute(self._store.get_all()).as_dict()

    def _get_one(self, params: Dict[str, str], payload: Any) -> Dict[str, object]:
        return self._store.get_by_id(int(params["id"])).as_dict()

    def _update(self, params: Dict[str, str], payload: Any) -> Dict[str, object]:
        return self._store.update(int(params["id"]), payload).as_dict()

    def _delete(self, params: Dict[str, str], payload: Any) -> Dict[str, object]:
        removed = self._store.delete(int(params["id"]))
        return {"id": removed.transaction_id, "deleted": True}


class _RoutingError(Exception):
    """Internal signal for unmatched paths or verbs."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
