"""
Default transport on httpx, with AWS SigV4 signing through botocore.
"""

from __future__ import annotations

__all__ = ["HTTPXTransport"]

from typing import Any

import boto3
import httpx
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials

from cloudsearch.core import Config, get_logger, warn
from cloudsearch.core.exceptions import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    NotSupportedError,
    ThrottlingError,
    UnauthorizedError,
)

from ._models import TransportResponse

logger = get_logger(__name__)

SERVICE_NAME = "cloudsearch"


class HTTPXTransport:
    timeout: float | None
    sign: bool
    nparams: dict[str, Any]

    _credentials: Credentials | None
    _init: bool

    def __init__(
        self,
        timeout: float | None = 60,
        sign: bool = True,
        nparams: dict[str, Any] = dict(),
    ):
        """Initialize.

        Args:
            timeout:
                HTTP timeout. Defaults to 60 seconds.
            sign:
                Sign requests with AWS SigV4.
            nparams:
                Native params to httpx client.
        """
        self.timeout = timeout
        self.sign = sign
        self.nparams = nparams
        self._credentials = None
        self._init = False

    def request(
        self,
        method: str,
        url: str,
        body: str | None,
        headers: list[tuple[str, str]],
        config: Config,
    ) -> TransportResponse:
        signed = self._sign(method, url, body, headers, config)
        with httpx.Client(timeout=self.timeout, **self.nparams) as client:
            response = client.request(
                method, url, content=body, headers=signed
            )
            return self._convert_response(response)

    async def arequest(
        self,
        method: str,
        url: str,
        body: str | None,
        headers: list[tuple[str, str]],
        config: Config,
    ) -> TransportResponse:
        signed = self._sign(method, url, body, headers, config)
        async with httpx.AsyncClient(
            timeout=self.timeout, **self.nparams
        ) as client:
            response = await client.request(
                method, url, content=body, headers=signed
            )
            return self._convert_response(response)

    def _setup(self, config: Config) -> None:
        if self._init:
            return
        if config.profile_name is not None:
            session = boto3.session.Session(
                profile_name=config.profile_name,
            )
        elif (
            config.aws_access_key_id is not None
            and config.aws_secret_access_key is not None
        ):
            session = boto3.session.Session(
                aws_access_key_id=config.aws_access_key_id,
                aws_secret_access_key=config.aws_secret_access_key,
                aws_session_token=config.aws_session_token,
            )
        else:
            session = boto3.session.Session()
        self._credentials = session.get_credentials()
        self._init = True

    def _sign(
        self,
        method: str,
        url: str,
        body: str | None,
        headers: list[tuple[str, str]],
        config: Config,
    ) -> list[tuple[str, str]]:
        if not self.sign:
            return headers
        self._setup(config)
        if self._credentials is None:
            warn("No AWS credentials found, sending unsigned request", url=url)
            return headers
        request = AWSRequest(
            method=method, url=url, data=body, headers=dict(headers)
        )
        SigV4Auth(
            self._credentials.get_frozen_credentials(),
            SERVICE_NAME,
            config.region,
        ).add_auth(request)
        return list(request.headers.items())

    def _convert_response(self, response: httpx.Response) -> TransportResponse:
        logger.debug(
            "CloudSearch response",
            status_code=response.status_code,
            url=str(response.request.url),
        )
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._handle_http_error(e.response)
        return TransportResponse(
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )

    def _handle_http_error(self, response: httpx.Response) -> Exception:
        if response.status_code == 400:
            return BadRequestError(response.text)
        elif response.status_code == 401:
            return UnauthorizedError(response.text)
        elif response.status_code == 403:
            return ForbiddenError(response.text)
        elif response.status_code == 404:
            return NotFoundError(response.text)
        elif response.status_code == 409:
            return ConflictError(response.text)
        elif response.status_code == 415:
            return NotSupportedError(response.text)
        elif response.status_code == 429:
            return ThrottlingError(response.text)
        elif response.status_code == 500:
            return InternalError(response.text)
        return InternalError(f"{response.status_code}: {response.text}")
