"""Tests for the FastAPI helpers."""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from neo_pagination import (
    ConfigurationError,
    PageRequest,
    PageResult,
    PaginationSettings,
    SequenceSource,
    paginate_request,
)
from neo_pagination.api import PageResponse, get_page_request, register_exception_handlers
from neo_pagination.config.settings import get_pagination_settings

ITEMS = [f"item-{i}" for i in range(1, 26)]


@pytest.fixture
def app():
    """Application with one paginated endpoint."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/items", response_model=PageResponse[str])
    def list_items(page: PageRequest = Depends(get_page_request)):
        result = paginate_request(SequenceSource(ITEMS), page)
        return PageResponse[str].from_page_result(result)

    class NegativeCountSource(SequenceSource):
        def count(self):
            return -1

    @app.get("/broken")
    def broken(page: PageRequest = Depends(get_page_request)):
        return paginate_request(NegativeCountSource(ITEMS), page).to_dict()

    @app.get("/misconfigured")
    def misconfigured():
        raise ConfigurationError("bad settings")

    app.dependency_overrides[get_pagination_settings] = lambda: PaginationSettings(
        default_page_size=5, max_page_size=20
    )
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


class TestPaginatedEndpoint:
    """End-to-end behaviour through a FastAPI route."""

    def test_default_page_size_from_settings(self, client):
        response = client.get("/items")
        assert response.status_code == 200
        assert response.json() == {
            "items": ITEMS[:5],
            "total_count": 25,
            "page_number": 1,
            "page_size": 5,
            "total_pages": 5,
        }

    def test_last_partial_page(self, client):
        response = client.get("/items", params={"page_number": 3, "page_size": 10})
        body = response.json()
        assert response.status_code == 200
        assert body["items"] == ITEMS[20:]
        assert body["total_pages"] == 3

    def test_beyond_range_returns_empty_page(self, client):
        response = client.get("/items", params={"page_number": 9, "page_size": 10})
        assert response.status_code == 200
        assert response.json()["items"] == []
        assert response.json()["total_count"] == 25

    def test_page_size_above_maximum_is_bad_request(self, client):
        response = client.get("/items", params={"page_size": 21})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "InvalidArgumentError"
        assert error["type"] == "InvalidArgumentError"
        assert error["details"] == {"field": "page_size", "value": 21, "maximum": 20}

    @pytest.mark.parametrize(
        "params,field",
        [
            ({"page_number": 0}, "page_number"),
            ({"page_number": -2}, "page_number"),
            ({"page_size": 0}, "page_size"),
        ],
    )
    def test_out_of_range_query_parameters_are_bad_request(self, client, params, field):
        response = client.get("/items", params=params)
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "InvalidArgumentError"
        assert error["details"]["field"] == field
        assert error["details"]["minimum"] == 1

    def test_broken_count_is_server_error(self, client):
        response = client.get("/broken")
        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "SourceContractError"
        assert error["details"]["total_count"] == "-1"

    def test_server_side_errors_map_to_500(self, client):
        response = client.get("/misconfigured")
        assert response.status_code == 500
        assert response.json()["error"]["code"] == "ConfigurationError"


class TestPageResponse:
    """Pydantic response model."""

    def test_from_page_result_with_mapper(self):
        result = PageResult(items=[1, 2], total_count=4, page_number=1, page_size=2)
        response = PageResponse[str].from_page_result(result, item_mapper=lambda n: f"#{n}")
        assert response.model_dump() == {
            "items": ["#1", "#2"],
            "total_count": 4,
            "page_number": 1,
            "page_size": 2,
            "total_pages": 2,
        }

    def test_matches_page_result_wire_format(self):
        result = PageResult(items=["a"], total_count=1, page_number=1, page_size=10)
        assert PageResponse.from_page_result(result).model_dump() == result.to_dict()
