"""
Pytest configuration and fixtures for semanticlink tests
"""
import logging
from unittest.mock import Mock

import pytest
import requests

from semanticlink import LinkedRepresentation


@pytest.fixture
def tags_representation():
    """Representation where 'tags' returns multiple links of different media types"""
    return LinkedRepresentation.model_validate({
        "links": [
            {"rel": "tags", "href": "http://example.com/tag/1", "type": "application/json"},
            {"rel": "tags", "href": "http://example.com/tag/2", "type": "text/uri-list"},
            {"rel": "tags", "href": "http://example.com/tag/3", "type": "application/json"},
            {"rel": "tags", "href": "http://example.com/tag/4"},
            {"rel": "edit-form", "href": "http://example.com/tag/edit/form", "type": "text/uri-list"},
            {"rel": "edit-form", "href": "http://example.com/tag/edit/form", "type": "application/json-path+json"},
            {"rel": "self", "href": "http://example.com/1", "type": "application/json"},
        ]
    })


@pytest.fixture
def titled_representation():
    """Representation with duplicate 'self' links told apart by title"""
    return {
        "links": [
            {"rel": "self", "href": "http://example.com/1", "title": "One"},
            {"rel": "self", "href": "http://example.com/2", "title": "Two"},
            {"rel": "first", "href": "http://example.com/2"},
            {"rel": "empty", "href": ""},
        ]
    }


@pytest.fixture
def mock_http_response():
    """Factory fixture to create mock HTTP responses.

    Usage:
        def test_example(mock_http_response):
            response = mock_http_response({"links": []})
            # response.json() == {"links": []}
            # response.raise_for_status() does nothing
    """

    def _create_response(data=None, status_code: int = 200) -> Mock:
        response = Mock(spec=requests.Response)
        response.status_code = status_code
        response.json = Mock(return_value=data)
        response.raise_for_status = Mock()
        return response

    return _create_response


@pytest.fixture
def mock_session(mock_http_response):
    """A requests.Session double whose request() returns an empty 200 response"""
    session = Mock(spec=requests.Session)
    session.request.return_value = mock_http_response({})
    return session


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers/levels installed by setup_logging (e.g. through the CLI)"""
    base_logger = logging.getLogger("semanticlink")
    handlers, level = list(base_logger.handlers), base_logger.level
    yield
    base_logger.handlers = handlers
    base_logger.setLevel(level)
