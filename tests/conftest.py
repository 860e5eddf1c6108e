import httpx
import pytest

from random_news.client import RandomArticleClient
from random_news.config import Config

from .helpers import FakeNavigator, RecordingSleep, StubEndpoint


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def endpoint():
    return StubEndpoint()


@pytest.fixture
def client(config, endpoint):
    return RandomArticleClient(config, transport=httpx.MockTransport(endpoint))


@pytest.fixture
def navigator():
    return FakeNavigator()


@pytest.fixture
def sleep():
    return RecordingSleep()
