"""Bearer-token predicate for write routes.

The predicate only reads the request headers; it never touches the rate store.
"""

from __future__ import annotations

import secrets
from typing import Callable, Optional

from fastapi import Request
from fastapi.security.utils import get_authorization_scheme_param


def make_authenticator(api_token: Optional[str]) -> Callable[[Request], bool]:
    def authenticate(request: Request) -> bool:
        if not api_token:
            return False
        scheme, credentials = get_authorization_scheme_param(
            request.headers.get("authorization")
        )
        if scheme.lower() != "bearer" or not credentials:
            return False
        return secrets.compare_digest(credentials.encode(), api_token.encode())

    return authenticate
