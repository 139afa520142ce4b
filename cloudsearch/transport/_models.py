from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from cloudsearch.core import Config, DataModel


class TransportResponse(DataModel):
    """Raw HTTP response returned by a transport.

    Attributes:
        status_code: HTTP status code.
        body: Response body text.
        headers: Response headers.
    """

    status_code: int = 200
    body: str = ""
    headers: dict[str, str] = dict()


@runtime_checkable
class Transport(Protocol):
    def request(
        self,
        method: str,
        url: str,
        body: str | None,
        headers: list[tuple[str, str]],
        config: Config,
    ) -> TransportResponse:
        """Send a request.

        Args:
            method:
                HTTP method, upper case.
            url:
                Full request URL, query string included.
            body:
                Encoded request body.
            headers:
                Request headers.
            config:
                Client configuration.

        Returns:
            Transport response.
        """
        ...


@runtime_checkable
class AsyncTransport(Protocol):
    async def arequest(
        self,
        method: str,
        url: str,
        body: str | None,
        headers: list[tuple[str, str]],
        config: Config,
    ) -> TransportResponse: ...


def to_native(response: TransportResponse) -> dict[str, Any]:
    return {"status_code": response.status_code, "headers": response.headers}
