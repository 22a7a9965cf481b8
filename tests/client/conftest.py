import httpx
import pytest

from client.api_gateway import ApiGateway
from client.session import SessionStore
from client.storage import LocalStorage


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / 'storage.json')


@pytest.fixture
def session(storage):
    return SessionStore(storage)


def envelope(data=None, message=None, success=True):
    return {'success': success, 'data': data, 'message': message}


def offline_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError('connection refused', request=request)


@pytest.fixture
def make_gateway(session):
    def _make_gateway(handler, **kwargs):
        return ApiGateway(
            session,
            base_url='http://api.test/api',
            transport=httpx.MockTransport(handler),
            **kwargs,
        )

    return _make_gateway


@pytest.fixture
def offline_gateway(make_gateway):
    return make_gateway(offline_handler)


@pytest.fixture(name='envelope')
def envelope_fixture():
    return envelope
