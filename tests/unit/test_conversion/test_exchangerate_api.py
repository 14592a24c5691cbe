import httpx
import pytest

from src.config import Config
from src.conversion import ExchangeRateApiClient, get_service
from src.utils.errors import (
    ConfigurationError,
    DecodeError,
    ServiceError,
    TransportError,
    ValidationError,
)


SUCCESS_PAYLOAD = {
    "result": "success",
    "documentation": "https://www.exchangerate-api.com/docs",
    "terms_of_use": "https://www.exchangerate-api.com/terms",
    "time_last_update_utc": "Fri, 27 Mar 2020 00:00:00 +0000",
    "time_next_update_utc": "Sat, 28 Mar 2020 01:00:00 +0000",
    "base_code": "RON",
    "target_code": "GBP",
    "conversion_rate": 0.1729,
    "conversion_result": 17.29,
}


class DummyResponse:
    def __init__(self, data=None, status_code: int = 200, invalid_json: bool = False):
        self._data = data
        self.status_code = status_code
        self._invalid_json = invalid_json

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._data


class DummyClient:
    """Stands in for httpx.Client; records requested URLs."""

    urls = []

    def __init__(self, timeout=None, response=None, should_raise: bool = False):
        self.timeout = timeout
        self._response = response or DummyResponse(SUCCESS_PAYLOAD)
        self._should_raise = should_raise

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def get(self, url, params=None):
        DummyClient.urls.append(url)
        if self._should_raise:
            raise httpx.ConnectError("network error")
        return self._response


@pytest.fixture
def config(temp_config_file, monkeypatch):
    monkeypatch.setenv("TEST_EXCHANGE_RATE_API_KEY", "test-key")
    DummyClient.urls = []
    return Config(temp_config_file)


def patch_client(monkeypatch, **kwargs):
    monkeypatch.setattr(httpx, "Client", lambda timeout=None: DummyClient(timeout=timeout, **kwargs))


def test_convert_success(monkeypatch, config):
    patch_client(monkeypatch)
    client = ExchangeRateApiClient(config=config)

    assert client.convert(100, "RON", "GBP") == pytest.approx(17.29)
    assert DummyClient.urls == ["https://example.test/v6/test-key/pair/RON/GBP/100.00"]


def test_get_pair_decodes_fields(monkeypatch, config):
    patch_client(monkeypatch)
    pair = ExchangeRateApiClient(config=config).get_pair(100, "RON", "GBP")

    assert pair.base_code == "RON"
    assert pair.target_code == "GBP"
    assert pair.conversion_rate == pytest.approx(0.1729)
    assert pair.time_last_update.startswith("Fri")


def test_amount_sent_with_two_decimals(monkeypatch, config):
    patch_client(monkeypatch)
    ExchangeRateApiClient(config=config).convert(12.5, "EUR", "RON")
    assert DummyClient.urls[-1].endswith("/pair/EUR/RON/12.50")


def test_transport_failure(monkeypatch, config):
    patch_client(monkeypatch, should_raise=True)
    with pytest.raises(TransportError):
        ExchangeRateApiClient(config=config).convert(100, "RON", "GBP")


def test_service_failure(monkeypatch, config):
    response = DummyResponse({"result": "error", "error-type": "invalid-key"}, status_code=403)
    patch_client(monkeypatch, response=response)
    with pytest.raises(ServiceError) as exc_info:
        ExchangeRateApiClient(config=config).convert(100, "RON", "GBP")
    assert exc_info.value.error_type == "invalid-key"


def test_decode_failure_on_invalid_json(monkeypatch, config):
    patch_client(monkeypatch, response=DummyResponse(invalid_json=True, status_code=502))
    with pytest.raises(DecodeError):
        ExchangeRateApiClient(config=config).convert(100, "RON", "GBP")


@pytest.mark.parametrize(
    "payload",
    [
        {"result": "success"},
        {"result": "success", "conversion_result": "n/a"},
        {"result": "success", "conversion_result": -3},
        ["not", "an", "object"],
    ],
)
def test_decode_failure_on_bad_payload(monkeypatch, config, payload):
    patch_client(monkeypatch, response=DummyResponse(payload))
    with pytest.raises(DecodeError):
        ExchangeRateApiClient(config=config).convert(100, "RON", "GBP")


def test_invalid_currency(config):
    client = ExchangeRateApiClient(config=config)
    with pytest.raises(ValidationError):
        client.convert(100, "ron", "GBP")  # lowercase should fail


def test_missing_api_key(temp_config_file, monkeypatch):
    monkeypatch.delenv("TEST_EXCHANGE_RATE_API_KEY", raising=False)
    with pytest.raises(ConfigurationError):
        ExchangeRateApiClient(config=Config(temp_config_file))


def test_get_service_factory(config):
    assert isinstance(get_service("exchangerate_api", config=config), ExchangeRateApiClient)
    with pytest.raises(ValueError):
        get_service("nope", config=config)


def test_invalid_url_is_transport_failure(monkeypatch, config):
    class InvalidUrlClient(DummyClient):
        def get(self, url, params=None):
            raise httpx.InvalidURL("Invalid non-printable ASCII character in URL")

    monkeypatch.setattr(httpx, "Client", lambda timeout=None: InvalidUrlClient(timeout=timeout))
    with pytest.raises(TransportError):
        ExchangeRateApiClient(config=config).convert(100, "RON", "GBP")
