from __future__ import annotations

"""Declarative first-match route dispatcher.

A route table is an ordered sequence of RouteDescriptor records. Dispatch scans
it linearly: the first descriptor whose method equals the request method and
whose pattern matches the whole path is selected. Declaration order is part of
the contract, so the table is never re-sorted or indexed.

Failures are returned as DispatchOutcome members rather than raised.
"""
import enum
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Union

logger = logging.getLogger("app.routing")


@dataclass(frozen=True)
class RateParams:
    from_currency: str
    to_currency: str
    value: float = 0.0


# capture returns None to reject a structurally matching path (fail closed)
Capture = Callable[[re.Match], Optional[RateParams]]
Authenticate = Callable[[Any], bool]
Handler = Callable[[Any, RateParams], Any]


class DispatchOutcome(enum.Enum):
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"


@dataclass(frozen=True)
class RouteDescriptor:
    method: str
    pattern: re.Pattern
    capture: Capture
    authenticate: Authenticate
    handle: Handler


def allow_all(_request: Any) -> bool:
    return True


class Router:
    def __init__(self, routes: Sequence[RouteDescriptor]):
        self._routes = tuple(routes)

    @property
    def routes(self) -> tuple[RouteDescriptor, ...]:
        return self._routes

    def dispatch(
        self, method: str, path: str, raw_request: Any
    ) -> Union[DispatchOutcome, Any]:
        for index, route in enumerate(self._routes):
            if route.method != method:
                continue
            match = route.pattern.fullmatch(path)
            if match is None:
                continue
            if not route.authenticate(raw_request):
                logger.warning(
                    "authorization refused",
                    extra={
                        "method": method,
                        "path": path,
                        "route": index,
                        "outcome": DispatchOutcome.UNAUTHORIZED.value,
                    },
                )
                return DispatchOutcome.UNAUTHORIZED
            params = route.capture(match)
            if params is None:
                logger.debug("route %d rejected captured params for %s", index, path)
                continue
            logger.debug(
                "route selected",
                extra={"method": method, "path": path, "route": index},
            )
            return route.handle(raw_request, params)
        logger.debug(
            "no route matched",
            extra={
                "method": method,
                "path": path,
                "outcome": DispatchOutcome.NOT_FOUND.value,
            },
        )
        return DispatchOutcome.NOT_FOUND
