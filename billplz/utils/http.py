from typing import Optional

import httpx


def basic_auth(api_key: str) -> httpx.BasicAuth:
    # Billplz: API secret key as username, empty password
    return httpx.BasicAuth(api_key, "")


def client(
    base_url: str,
    api_key: str,
    timeout_sec: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url,
        auth=basic_auth(api_key),
        timeout=timeout_sec,
        transport=transport,
    )
