# type: ignore

import boto3
import httpx
import pytest

from cloudsearch import CloudSearch, Config, search
from cloudsearch.core.exceptions import (
    BadRequestError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    ThrottlingError,
)
from cloudsearch.domain_config import list_domain_names
from cloudsearch.transport import HTTPXTransport

config = Config(
    region="us-east-1",
    search_domain="movies",
    aws_access_key_id="AKIDEXAMPLE",
    aws_secret_access_key="wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY",
)


class Recorder:
    def __init__(self, status_code: int = 200, body: str = "{}"):
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)


def get_client(recorder: Recorder, **kwargs) -> CloudSearch:
    transport = HTTPXTransport(
        nparams={"transport": httpx.MockTransport(recorder)}, **kwargs
    )
    return CloudSearch(config=config, transport=transport)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "async_call",
    [False, True],
)
async def test_signed_request(async_call: bool):
    recorder = Recorder(body='{"hits":{"found":2}}')
    client = get_client(recorder)
    operation = search.search("star", {"size": 2})
    if async_call:
        response = await client.arequest(operation)
    else:
        response = client.request(operation)
    assert response.result == {"hits": {"found": 2}}
    assert response.native["status_code"] == 200

    request = recorder.requests[0]
    assert request.method == "POST"
    assert request.url.host == (
        "search-movies.us-east-1.cloudsearch.amazonaws.com"
    )
    assert request.url.path == "/2013-01-01/search"
    assert request.content == b"q=star&size=2"
    assert request.headers["content-type"] == (
        "application/x-www-form-urlencoded"
    )
    assert request.headers["accept"] == "application/json"
    authorization = request.headers["authorization"]
    assert authorization.startswith("AWS4-HMAC-SHA256 Credential=AKIDEXAMPLE/")
    assert "/us-east-1/cloudsearch/aws4_request" in authorization
    assert "x-amz-date" in request.headers


def test_unsigned_request():
    recorder = Recorder(body="")
    client = get_client(recorder, sign=False)
    response = client.request(list_domain_names())
    assert response.result == {}

    request = recorder.requests[0]
    assert request.method == "GET"
    assert request.url.host == "cloudsearch.us-east-1.amazonaws.com"
    assert request.url.params["Action"] == "ListDomainNames"
    assert "authorization" not in request.headers


def test_missing_credentials(monkeypatch):
    monkeypatch.setattr(
        boto3.session.Session, "get_credentials", lambda self: None
    )
    recorder = Recorder()
    transport = HTTPXTransport(
        nparams={"transport": httpx.MockTransport(recorder)}
    )
    client = CloudSearch(
        config=Config(region="us-east-1", search_domain="movies"),
        transport=transport,
    )
    client.request(search.search("star"))
    assert "authorization" not in recorder.requests[0].headers


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status_code, error",
    [
        (400, BadRequestError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (429, ThrottlingError),
        (500, InternalError),
        (503, InternalError),
    ],
)
@pytest.mark.parametrize(
    "async_call",
    [False, True],
)
async def test_http_errors(status_code: int, error: type, async_call: bool):
    recorder = Recorder(status_code=status_code, body="failed")
    client = get_client(recorder)
    operation = search.search("star")
    with pytest.raises(error) as e:
        if async_call:
            await client.arequest(operation)
        else:
            client.request(operation)
    assert "failed" in str(e.value)
