"""HTTP adapter – HttpEventForwarder."""
from __future__ import annotations

from typing import Any

import structlog

from levellog.kernel.errors import ExternalServiceError
from levellog.observability.events import Event


def _require_httpx() -> Any:
    try:
        import httpx  # type: ignore[import-untyped]
        return httpx
    except ImportError as exc:
        raise ImportError("Install 'levellog[http]' to use the HTTP forwarder") from exc


class HttpEventForwarder:
    """Forwarding client that POSTs each event as JSON to a collector URL.

    Delivery is fire-and-forget from the logger's point of view: transport
    and HTTP status failures are reported through structlog and counted in
    :attr:`failures`, never raised into the logging call.

    Parameters
    ----------
    url:
        Collector endpoint receiving ``{"service", "state", "description"}``.
    timeout:
        Per-request timeout in seconds.
    client:
        Optional pre-built ``httpx.Client``; it is not closed by
        :meth:`close`.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 5.0,
        client: Any = None,
        **kwargs: Any,
    ) -> None:
        httpx = _require_httpx()
        self._url = url
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout, **kwargs)
        self._log = structlog.get_logger(__name__)
        self.failures = 0

    def __enter__(self) -> "HttpEventForwarder":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def submit(self, event: Event) -> None:
        try:
            self._post(event)
        except ExternalServiceError as exc:
            self.failures += 1
            self._log.warning(
                "levellog.forward_failed",
                collector=self._url,
                service=event.service,
                state=event.state,
                error_code=exc.code,
                status_code=exc.status_code,
                error=exc.message,
            )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _post(self, event: Event) -> None:
        httpx = _require_httpx()
        try:
            response = self._client.post(self._url, json=event.to_dict())
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                service=self._url,
                message=f"HTTP {exc.response.status_code} from collector {self._url}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(service=self._url, message=str(exc)) from exc


__all__ = ["HttpEventForwarder"]
