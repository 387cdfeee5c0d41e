import pytest
import requests

from errors import BootstrapLoadError
from services import DirectoryBootstrapLoader, HttpBootstrapLoader, make_loader
from services import bootstrap


class FakeResponse:
    def __init__(self, payload=None, status_code=200, headers=None, body_error=None):
        self.payload = payload
        self.status_code = status_code
        self.headers = headers or {}
        self.body_error = body_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.body_error:
            raise self.body_error
        return self.payload


@pytest.fixture
def captured_get(monkeypatch):
    calls = []
    responses = []

    def fake_get(url, **kwargs):
        calls.append((url, kwargs))
        response = responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(bootstrap.requests, 'get', fake_get)
    return calls, responses


def test_directory_loader_reads_payload(tmp_path):
    (tmp_path / 'ingredient.json').write_text('[{"id": 1, "description": "Chicken"}]')
    loader = DirectoryBootstrapLoader(str(tmp_path))
    assert loader.load('ingredient') == [{'id': 1, 'description': 'Chicken'}]


def test_directory_loader_reads_fresh_copy_every_time(tmp_path):
    path = tmp_path / 'schedule.json'
    path.write_text('[]')
    loader = DirectoryBootstrapLoader(str(tmp_path))
    assert loader.load('schedule') == []
    path.write_text('[{"day": "Monday", "easyId": 1, "lessEasyId": 2}]')
    assert len(loader.load('schedule')) == 1


def test_directory_loader_missing_file(tmp_path):
    with pytest.raises(BootstrapLoadError, match='collection.json'):
        DirectoryBootstrapLoader(str(tmp_path)).load('collection')


def test_directory_loader_invalid_json(tmp_path):
    (tmp_path / 'quantity.json').write_text('[{"collectionId": ')
    with pytest.raises(BootstrapLoadError, match='Invalid JSON'):
        DirectoryBootstrapLoader(str(tmp_path)).load('quantity')


def test_http_loader_bypasses_caches(captured_get):
    calls, responses = captured_get
    responses.append(FakeResponse([{'id': 1}]))

    loader = HttpBootstrapLoader('https://example.test/data')
    assert loader.load('collection') == [{'id': 1}]

    url, kwargs = calls[0]
    assert url == 'https://example.test/data/collection.json'
    assert kwargs['headers']['Cache-Control'] == 'no-cache'
    assert '_' in kwargs['params']
    assert kwargs['timeout'] is None


@pytest.mark.parametrize(
    "response",
    (
        FakeResponse(status_code=404),
        requests.ConnectionError('connection refused'),
        FakeResponse(body_error=ValueError('Expecting value')),
        FakeResponse([], headers={'content-length': str(20 * 1024 * 1024)}),
        FakeResponse([], headers={'content-length': 'abc'}),
    ),
)
def test_http_loader_failures(captured_get, response):
    _, responses = captured_get
    responses.append(response)
    with pytest.raises(BootstrapLoadError, match='ingredient.json'):
        HttpBootstrapLoader('http://example.test/', timeout=5).load('ingredient')


def test_make_loader_picks_by_source(tmp_path):
    assert isinstance(make_loader('https://example.test/data/'), HttpBootstrapLoader)
    assert isinstance(make_loader(str(tmp_path)), DirectoryBootstrapLoader)
    assert make_loader('http://example.test/', timeout=3).timeout == 3
