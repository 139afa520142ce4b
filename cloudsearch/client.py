"""
CloudSearch client dispatching operations to the service.
"""

from __future__ import annotations

__all__ = ["CloudSearch", "PreparedRequest"]

from enum import Enum
from typing import Any
from urllib.parse import quote, urlencode

from .core import (
    API_VERSION,
    Config,
    DataModel,
    HTTPMethod,
    JSONParam,
    Operation,
    OperationParser,
    RequestType,
    Response,
    get_logger,
)
from .core._async_helper import run_async
from .core.exceptions import ConfigError, DecodeError
from .search import QueryParser
from .transport import (
    AsyncTransport,
    HTTPXTransport,
    Transport,
    TransportResponse,
)
from .transport._models import to_native

logger = get_logger(__name__)

SUPPORTED_API_VERSIONS = (API_VERSION,)
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class PreparedRequest(DataModel):
    """Request ready to be sent by a transport.

    Attributes:
        method: HTTP method, upper case.
        url: Full URL, query string included.
        body: Encoded body, None when the request has none.
        headers: Request headers.
        request_type: API surface of the originating operation.
    """

    method: str
    url: str
    body: str | None = None
    headers: list[tuple[str, str]] = []
    request_type: RequestType


class CloudSearch:
    """Dispatches CloudSearch operations.

    Operations are created by the builders in cloudsearch.search,
    cloudsearch.document and cloudsearch.domain_config. The client
    resolves their host, encodes their payload, sends them through
    the transport and decodes the response.
    """

    config: Config
    transport: Transport

    def __init__(
        self,
        config: Config | dict[str, Any] | None = None,
        transport: Transport | None = None,
    ):
        """Initialize.

        Args:
            config:
                Client configuration. Read from the environment
                when None.
            transport:
                Transport sending the requests. Defaults to
                HTTPXTransport.
        """
        if config is None:
            config = Config.from_env()
        elif isinstance(config, dict):
            config = Config.from_dict(config)
        self.config = config
        self.transport = transport or HTTPXTransport()

    def request(self, operation: Operation) -> Response[dict[str, Any]]:
        """Send an operation and decode its response.

        Args:
            operation:
                Operation to send.

        Returns:
            Response with the decoded body as result.

        Raises:
            ConfigError:
                Unsupported API version or missing configuration.
            DecodeError:
                The response body is not valid JSON.
        """
        prepared = self.prepare(operation)
        response = self.transport.request(
            prepared.method,
            prepared.url,
            prepared.body,
            prepared.headers,
            self.config,
        )
        return self._convert_response(response)

    async def arequest(
        self, operation: Operation
    ) -> Response[dict[str, Any]]:
        prepared = self.prepare(operation)
        args = (
            prepared.method,
            prepared.url,
            prepared.body,
            prepared.headers,
            self.config,
        )
        if isinstance(self.transport, AsyncTransport):
            response = await self.transport.arequest(*args)
        else:
            response = await run_async(self.transport.request, *args)
        return self._convert_response(response)

    def prepare(self, operation: Operation) -> PreparedRequest:
        """Resolve the host and encode the payload of an operation.

        Args:
            operation:
                Operation to prepare. It is not modified.

        Returns:
            Prepared request.

        Raises:
            ConfigError:
                Unsupported API version or missing configuration.
            NotSupportedError:
                The search query type has no registered adapter.
        """
        operation = operation.model_copy(deep=True)
        if operation.before_request is not None:
            operation = operation.before_request(operation, self.config)
        op_parser = OperationParser(operation)
        host, path = self._get_host_path(op_parser)
        if op_parser.type_equals(RequestType.SEARCH):
            self._parse_search_query(op_parser)
        url = f"{self.config.scheme}://{host}"
        if self.config.port is not None:
            url = f"{url}:{self.config.port}"
        url = f"{url}{path}"
        headers = [("accept", JSON_CONTENT_TYPE)]
        body = None
        if op_parser.type_equals(RequestType.DOCUMENT):
            headers.append(("content-type", JSON_CONTENT_TYPE))
            body = self.config.json_codec.encode(op_parser.get_data())
        elif op_parser.method_equals(HTTPMethod.POST):
            headers.append(("content-type", FORM_CONTENT_TYPE))
            body = urlencode(self._encode_params(op_parser.get_params()))
        elif op_parser.get_params():
            query = urlencode(
                self._encode_params(op_parser.get_params()),
                quote_via=quote,
            )
            url = f"{url}?{query}"
        headers.extend(op_parser.get_headers())
        prepared = PreparedRequest(
            method=operation.http_method.value.upper(),
            url=url,
            body=body,
            headers=headers,
            request_type=operation.request_type,
        )
        logger.debug(
            "Prepared CloudSearch request",
            method=prepared.method,
            host=host,
            request_type=operation.request_type.value,
        )
        return prepared

    def _get_host_path(self, op_parser: OperationParser) -> tuple[str, str]:
        version = op_parser.get_api_version()
        if version not in SUPPORTED_API_VERSIONS:
            raise ConfigError(
                f"Unsupported CloudSearch API version {version}."
            )
        region = self.config.region
        if region is None:
            raise ConfigError("CloudSearch region is not configured.")
        service_domain = self.config.service_domain
        if op_parser.type_equals(RequestType.CONFIG):
            host = f"cloudsearch.{region}.{service_domain}"
            return host, op_parser.get_path()
        domain = self.config.search_domain
        if domain is None:
            raise ConfigError("CloudSearch search domain is not configured.")
        request_type = op_parser.operation.request_type.value
        host = f"{request_type}-{domain}.{region}.cloudsearch"
        host = f"{host}.{service_domain}"
        path = f"/{version}/{op_parser.get_path().lstrip('/')}"
        return host, path

    def _parse_search_query(self, op_parser: OperationParser) -> None:
        query, mode = QueryParser.parse(op_parser.get_param("q"))
        fq, _ = QueryParser.parse(op_parser.get_param("fq"))
        if mode is not None:
            op_parser.put_param("q.parser", mode.value)
        op_parser.put_param("fq", fq)
        op_parser.put_param("q", query)

    def _encode_params(self, params: dict[str, Any]) -> list[tuple[str, Any]]:
        return [(k, self._encode_value(v)) for k, v in params.items()]

    def _encode_value(self, value: Any) -> Any:
        if isinstance(value, JSONParam):
            return self.config.json_codec.encode(value.value)
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Enum):
            return value.value
        return value

    def _convert_response(
        self, response: TransportResponse
    ) -> Response[dict[str, Any]]:
        native = to_native(response)
        if not response.body:
            return Response(result=dict(), native=native)
        try:
            result = self.config.json_codec.decode(response.body)
        except ValueError as e:
            raise DecodeError(
                f"Invalid CloudSearch response body: {e}"
            ) from e
        return Response(result=result, native=native)
