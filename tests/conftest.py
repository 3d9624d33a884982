import httpx
import pytest


@pytest.fixture
def make_client():
    """Build httpx clients whose requests are answered by ``handler``."""
    clients: list[httpx.Client] = []

    def factory(handler) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def recorder():
    """Request handler that remembers every request and answers with a canned response."""

    class Recorder:
        def __init__(self) -> None:
            self.requests: list[httpx.Request] = []
            self.response = httpx.Response(200, json={"object": "list", "data": []})

        def __call__(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return self.response

    return Recorder()


@pytest.fixture
def failing_stream():
    class FailingStream(httpx.SyncByteStream):
        def __iter__(self):
            yield b'{"data": ['
            raise httpx.ReadError("connection reset while reading")

    return FailingStream()
