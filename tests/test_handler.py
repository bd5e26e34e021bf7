"""
Tests for the cast query handler.
"""

import json

from cast_query.entities import QueryPlan, QueryShape
from cast_query.handlers import CastHandler
from cast_query.services import CastQueryService

from conftest import (
    FailingStore,
    InMemoryCastStore,
    InMemoryMovieStore,
    MOVIE_RECORD,
    UNENCODABLE_RECORD,
)

JSON = {"content-type": "application/json"}


async def test_missing_movie_id(handler, cast_store):
    response = await handler.handle({})
    assert response.status_code == 400
    assert response.body == {"message": "Missing movieId parameter"}
    assert response.headers == JSON
    assert cast_store.plans == []


async def test_no_params_at_all(handler):
    response = await handler.handle(None)
    assert response.status_code == 400
    assert response.body == {"message": "Missing movieId parameter"}


async def test_invalid_movie_id(handler, cast_store):
    response = await handler.handle({"movieId": "abc"})
    assert response.status_code == 400
    assert response.body == {"message": "Invalid movieId parameter"}
    assert response.headers == JSON
    assert cast_store.plans == []


async def test_query_by_movie_only(handler, cast_store, movie_store):
    response = await handler.handle({"movieId": "42"})

    assert response.status_code == 200
    assert response.headers == JSON
    assert cast_store.plans == [QueryPlan(movie_id=42)]
    assert "movie" not in response.body
    assert [r["actorName"] for r in response.body["data"]] == [
        "Alice Broggs",
        "Joe Bloggs",
        "Joe Cloggs",
    ]
    assert movie_store.lookups == []


async def test_query_by_role_prefix_ignores_actor_name(handler, cast_store):
    response = await handler.handle({"movieId": "42", "roleName": "Lead", "actorName": "Joe"})

    assert response.status_code == 200
    assert cast_store.plans == [QueryPlan(movie_id=42, shape=QueryShape.ROLE_PREFIX, prefix="Lead")]
    assert [r["roleName"] for r in response.body["data"]] == ["Lead", "Lead Villain"]


async def test_query_by_actor_prefix(handler, cast_store):
    response = await handler.handle({"movieId": "42", "actorName": "Joe"})

    assert response.status_code == 200
    assert cast_store.plans == [QueryPlan(movie_id=42, shape=QueryShape.ACTOR_PREFIX, prefix="Joe")]
    assert [r["actorName"] for r in response.body["data"]] == ["Joe Bloggs", "Joe Cloggs"]


async def test_data_is_returned_as_the_store_ordered_it(movie_store):
    records = [
        {"movieId": 1, "actorName": "Zed", "roleName": "B"},
        {"movieId": 1, "actorName": "Amy", "roleName": "A"},
    ]

    class UnsortedStore(InMemoryCastStore):
        def query_cast(self, plan):
            self.plans.append(plan)
            return [dict(r) for r in self.records]

    handler = CastHandler(CastQueryService.create(UnsortedStore(records), movie_store))
    response = await handler.handle({"movieId": "1"})

    assert response.body["data"] == records


async def test_empty_result(handler):
    response = await handler.handle({"movieId": "999"})
    assert response.status_code == 200
    assert response.body == {"data": []}


async def test_movie_enrichment(handler, movie_store):
    response = await handler.handle({"movieId": "42", "movie": "true"})

    assert response.status_code == 200
    assert response.body["movie"] == MOVIE_RECORD
    assert len(response.body["data"]) == 3
    assert movie_store.lookups == [42]


async def test_movie_enrichment_placeholder(handler):
    response = await handler.handle({"movieId": "7", "movie": "true"})

    assert response.status_code == 200
    assert response.body["movie"] == {
        "title": "Unknown Title",
        "genreIds": [],
        "overview": "No overview available",
    }


async def test_placeholder_is_not_shared(handler):
    first = await handler.handle({"movieId": "7", "movie": "true"})
    first.body["movie"]["genreIds"].append(99)

    second = await handler.handle({"movieId": "7", "movie": "true"})
    assert second.body["movie"]["genreIds"] == []


async def test_movie_flag_other_than_true_is_ignored(handler, movie_store):
    response = await handler.handle({"movieId": "42", "movie": "yes"})
    assert "movie" not in response.body
    assert movie_store.lookups == []


async def test_cast_store_error(movie_store):
    failing = FailingStore(RuntimeError("Requested resource not found"))
    handler = CastHandler(CastQueryService.create(failing, movie_store))

    response = await handler.handle({"movieId": "42"})

    assert response.status_code == 500
    assert response.body == {"error": "Requested resource not found"}
    assert response.headers == JSON


async def test_error_without_message(movie_store):
    handler = CastHandler(CastQueryService.create(FailingStore(RuntimeError()), movie_store))

    response = await handler.handle({"movieId": "42"})

    assert response.status_code == 500
    assert response.body == {"error": "Internal Server Error"}


async def test_movie_store_error_discards_cast_data(cast_store):
    failing = FailingStore(ConnectionError("movie table unreachable"))
    handler = CastHandler(CastQueryService.create(cast_store, failing))

    response = await handler.handle({"movieId": "42", "movie": "true"})

    assert response.status_code == 500
    assert response.body == {"error": "movie table unreachable"}
    assert len(cast_store.plans) == 1


async def test_unencodable_record_is_a_server_error(movie_store):
    handler = CastHandler(CastQueryService.create(InMemoryCastStore([UNENCODABLE_RECORD]), movie_store))

    response = await handler.handle({"movieId": "42"})

    assert response.status_code == 500
    assert set(response.body) == {"error"}
    assert response.headers == JSON
    assert json.loads(response.body_json) == response.body


async def test_movie_store_not_called_when_flag_missing(cast_store):
    failing = FailingStore(ConnectionError("should not be called"))
    handler = CastHandler(CastQueryService.create(cast_store, failing))

    response = await handler.handle({"movieId": "42"})

    assert response.status_code == 200


async def test_repeated_requests_are_identical(handler):
    params = {"movieId": "42", "roleName": "Lead", "movie": "true"}

    first = await handler.handle(params)
    second = await handler.handle(params)

    assert first.body_json == second.body_json


async def test_health_check(handler, cast_store, movie_store):
    assert await handler.health_check() == {
        "status": "healthy",
        "cast_store_healthy": True,
        "movie_store_healthy": True,
    }

    movie_store.healthy = False
    report = await handler.health_check()
    assert report["status"] == "unhealthy"
    assert report["movie_store_healthy"] is False


async def test_stores_satisfy_protocols(cast_store, movie_store):
    from cast_query.protocols import CastStore, MovieStore

    assert isinstance(cast_store, CastStore)
    assert isinstance(movie_store, MovieStore)
