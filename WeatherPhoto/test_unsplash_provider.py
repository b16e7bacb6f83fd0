"""Tests for Unsplash photo provider."""
import pytest
import requests
from unittest.mock import Mock, patch
from unsplash_provider import PHOTO_SEARCH_TERMS, UnsplashPhotoProvider
from weather_data import CONDITIONS, PhotoResult
from weather_provider import PhotoServiceError, RemoteServiceError


@pytest.fixture
def sample_unsplash_response():
    """Trimmed Unsplash /photos/random response."""
    return {
        "id": "Dwu85P9SOIk",
        "width": 6000,
        "height": 4000,
        "description": "Golden Gate Bridge in the fog",
        "alt_description": "red bridge under white clouds",
        "urls": {
            "raw": "https://images.unsplash.com/photo-1?ixid=raw",
            "full": "https://images.unsplash.com/photo-1?ixid=full",
            "regular": "https://images.unsplash.com/photo-1?ixid=regular&w=1080",
            "small": "https://images.unsplash.com/photo-1?ixid=small&w=400"
        },
        "user": {
            "id": "QPxL2MGqfrw",
            "username": "janedoe",
            "name": "Jane Doe",
            "links": {
                "self": "https://api.unsplash.com/users/janedoe",
                "html": "https://unsplash.com/@janedoe"
            }
        }
    }


@pytest.fixture
def provider():
    return UnsplashPhotoProvider(access_key="test_access_key")


def _response(status_code=200, payload=None):
    mock_response = Mock()
    mock_response.ok = 200 <= status_code < 300
    mock_response.status_code = status_code
    mock_response.json.return_value = payload
    mock_response.text = ""
    return mock_response


def test_unsplash_provider_success(provider, sample_unsplash_response):
    with patch('unsplash_provider.requests.get') as mock_get:
        mock_get.return_value = _response(payload=sample_unsplash_response)

        photo = provider.get_photo("foggy")

        assert isinstance(photo, PhotoResult)
        assert photo.url == "https://images.unsplash.com/photo-1?ixid=regular&w=1080"
        assert photo.photographer == "Jane Doe"
        assert photo.photographer_url == "https://unsplash.com/@janedoe"
        assert photo.description == "Golden Gate Bridge in the fog"


def test_unsplash_provider_request(provider, sample_unsplash_response):
    with patch('unsplash_provider.requests.get') as mock_get:
        mock_get.return_value = _response(payload=sample_unsplash_response)

        provider.get_photo("rainy")

        args, kwargs = mock_get.call_args
        assert args[0] == "https://api.unsplash.com/photos/random"
        assert kwargs["params"]["query"] == f"San Francisco {PHOTO_SEARCH_TERMS['rainy']}"
        assert kwargs["params"]["orientation"] == "landscape"
        assert kwargs["headers"]["Authorization"] == "Client-ID test_access_key"


def test_unsplash_provider_alt_description_fallback(provider, sample_unsplash_response):
    sample_unsplash_response["description"] = None

    with patch('unsplash_provider.requests.get') as mock_get:
        mock_get.return_value = _response(payload=sample_unsplash_response)

        photo = provider.get_photo("cloudy")

        assert photo.description == "red bridge under white clouds"


def test_unsplash_provider_list_response(provider, sample_unsplash_response):
    with patch('unsplash_provider.requests.get') as mock_get:
        mock_get.return_value = _response(payload=[sample_unsplash_response])

        photo = provider.get_photo("sunny")

        assert photo.photographer == "Jane Doe"


def test_unsplash_provider_empty_list(provider):
    with patch('unsplash_provider.requests.get') as mock_get:
        mock_get.return_value = _response(payload=[])

        with pytest.raises(PhotoServiceError) as exc_info:
            provider.get_photo("sunny")

        assert "No photos found" in str(exc_info.value)


def test_unsplash_provider_no_results(provider):
    with patch('unsplash_provider.requests.get') as mock_get:
        mock_get.return_value = _response(404, {"errors": ["No photos found."]})

        with pytest.raises(PhotoServiceError) as exc_info:
            provider.get_photo("windy")

        assert exc_info.value.status == 404


def test_unsplash_provider_http_error(provider):
    with patch('unsplash_provider.requests.get') as mock_get:
        mock_get.return_value = _response(403, {"errors": ["Rate Limit Exceeded"]})

        with pytest.raises(PhotoServiceError) as exc_info:
            provider.get_photo("windy")

        assert exc_info.value.status == 403


def test_unsplash_provider_network_error(provider):
    with patch('unsplash_provider.requests.get') as mock_get:
        mock_get.side_effect = requests.exceptions.Timeout("timed out")

        with pytest.raises(PhotoServiceError) as exc_info:
            provider.get_photo("foggy")

        assert "Network error" in str(exc_info.value)


def test_unsplash_provider_malformed_response(provider):
    with patch('unsplash_provider.requests.get') as mock_get:
        mock_get.return_value = _response(payload={"id": "abc"})

        with pytest.raises(PhotoServiceError) as exc_info:
            provider.get_photo("foggy")

        assert "Failed to parse response" in str(exc_info.value)


def test_unsplash_provider_missing_key_skips_request():
    provider = UnsplashPhotoProvider(access_key=None)

    with patch('unsplash_provider.requests.get') as mock_get:
        with pytest.raises(PhotoServiceError):
            provider.get_photo("sunny")

        mock_get.assert_not_called()


def test_photo_error_is_remote_service_error():
    assert issubclass(PhotoServiceError, RemoteServiceError)


def test_every_condition_has_search_term(provider):
    for condition in CONDITIONS:
        assert provider.build_query(condition).startswith("San Francisco ")


def test_unknown_condition(provider):
    with pytest.raises(PhotoServiceError):
        provider.build_query("snowy")
