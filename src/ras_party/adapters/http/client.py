"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any, Collection

import httpx

from ras_party.kernel.errors import ExternalServiceError, TimeoutError as AppTimeoutError


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    Any response outside 2xx raises :class:`ExternalServiceError` unless its
    status is listed in ``allow_status`` for that call.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, headers=headers, **kwargs
        )

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        allow_status: Collection[int] = (),
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
            if response.status_code not in allow_status:
                response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise AppTimeoutError(f"HTTP request timed out: {method} {url}", cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                service=url,
                message=f"HTTP {exc.response.status_code} from {method} {url}",
                status_code=exc.response.status_code,
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(service=url, message=str(exc) or repr(exc), cause=exc) from exc


HttpClient = HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient"]
