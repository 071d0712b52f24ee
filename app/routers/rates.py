from __future__ import annotations

import math
import re
from typing import List

from fastapi import APIRouter, Request

from app.core.responses import (
    JSONUtf8Response,
    not_found_response,
    unauthorized_response,
)
from app.models.constants import CONVERSION_PATH, RATE_PATH, RATE_VALUE_PATH
from app.models.rates import ConversionOut, RateDeletedOut, RateOut, RateSetOut
from app.services.rates.store import RateStore
from app.services.routing import (
    Authenticate,
    DispatchOutcome,
    RateParams,
    RouteDescriptor,
    Router,
    allow_all,
)

"""Rates API.

Endpoints (declaration order matters, first match wins):
    - GET    /rate/{from}/{to}              -> forward rate or 404
    - PUT    /rate/{from}/{to}/{value}      -> set rate and its inverse (auth)
    - DELETE /rate/{from}/{to}              -> remove both directions (auth)
    - GET    /conversion/{from}/{to}/{value} -> amount * rate or 404

FastAPI only sees a single catch-all route; matching, authorization and
parameter capture happen in the table-driven Router built by build_routes().
"""

router = APIRouter(tags=["rates"])

DISPATCH_METHODS = ["GET", "PUT", "DELETE", "POST", "PATCH"]


def _compile(path: str) -> re.Pattern:
    return re.compile(path, re.IGNORECASE | re.ASCII)


def capture_pair(match: re.Match) -> RateParams:
    return RateParams(
        from_currency=match.group(1).upper(),
        to_currency=match.group(2).upper(),
        value=0.0,
    )


def capture_amount(match: re.Match) -> RateParams | None:
    value = float(match.group(3))
    if not math.isfinite(value):
        return None
    return RateParams(
        from_currency=match.group(1).upper(),
        to_currency=match.group(2).upper(),
        value=value,
    )


def capture_new_rate(match: re.Match) -> RateParams | None:
    params = capture_amount(match)
    if params is None or params.value <= 0:
        return None
    # subnormal rates have no representable inverse
    if not math.isfinite(1.0 / params.value):
        return None
    if params.from_currency == params.to_currency:
        return None
    return params


class RateHandlers:
    """Request handlers bound to one RateStore; the only callers of its mutators."""

    def __init__(self, store: RateStore):
        self._store = store

    def get_rate(self, request: Request, params: RateParams):
        rate = self._store.get_rate(params.from_currency, params.to_currency)
        if rate is None:
            return not_found_response()
        out = RateOut(
            from_currency=params.from_currency,
            to_currency=params.to_currency,
            rate=rate,
        )
        return JSONUtf8Response(out.to_payload())

    def put_rate(self, request: Request, params: RateParams):
        self._store.set_rate(params.from_currency, params.to_currency, params.value)
        out = RateSetOut(
            from_currency=params.from_currency,
            to_currency=params.to_currency,
            rate=params.value,
            inverse_rate=1.0 / params.value,
        )
        return JSONUtf8Response(out.to_payload())

    def delete_rate(self, request: Request, params: RateParams):
        self._store.remove_rate(params.from_currency, params.to_currency)
        out = RateDeletedOut(
            from_currency=params.from_currency, to_currency=params.to_currency
        )
        return JSONUtf8Response(out.to_payload())

    def get_conversion(self, request: Request, params: RateParams):
        converted = self._store.convert(
            params.from_currency, params.to_currency, params.value
        )
        if converted is None or not math.isfinite(converted):
            return not_found_response()
        out = ConversionOut(
            from_currency=params.from_currency,
            to_currency=params.to_currency,
            amount=params.value,
            converted=converted,
        )
        return JSONUtf8Response(out.to_payload())


def build_routes(
    store: RateStore, authenticate: Authenticate
) -> List[RouteDescriptor]:
    handlers = RateHandlers(store)
    return [
        RouteDescriptor(
            method="GET",
            pattern=_compile(RATE_PATH),
            capture=capture_pair,
            authenticate=allow_all,
            handle=handlers.get_rate,
        ),
        RouteDescriptor(
            method="PUT",
            pattern=_compile(RATE_VALUE_PATH),
            capture=capture_new_rate,
            authenticate=authenticate,
            handle=handlers.put_rate,
        ),
        RouteDescriptor(
            method="DELETE",
            pattern=_compile(RATE_PATH),
            capture=capture_pair,
            authenticate=authenticate,
            handle=handlers.delete_rate,
        ),
        RouteDescriptor(
            method="GET",
            pattern=_compile(CONVERSION_PATH),
            capture=capture_amount,
            authenticate=allow_all,
            handle=handlers.get_conversion,
        ),
    ]


@router.api_route("/{path:path}", methods=DISPATCH_METHODS, include_in_schema=False)
async def dispatch_request(request: Request, path: str):
    dispatcher: Router = request.app.state.dispatcher
    result = dispatcher.dispatch(request.method, f"/{path}", request)
    if result is DispatchOutcome.NOT_FOUND:
        return not_found_response()
    if result is DispatchOutcome.UNAUTHORIZED:
        return unauthorized_response()
    return result
