"""Shared fixtures: in-memory stores standing in for DynamoDB/Redis."""

import pytest

from cast_query.entities import QueryPlan, QueryShape
from cast_query.handlers import CastHandler
from cast_query.services import CastQueryService

CAST_RECORDS = [
    {"movieId": 42, "actorName": "Joe Bloggs", "roleName": "Lead", "roleDescription": "hero"},
    {"movieId": 42, "actorName": "Alice Broggs", "roleName": "Lead Villain", "roleDescription": "villain"},
    {"movieId": 42, "actorName": "Joe Cloggs", "roleName": "Sidekick", "roleDescription": "comic relief"},
    {"movieId": 7, "actorName": "Joe Other", "roleName": "Lead", "roleDescription": "elsewhere"},
]

MOVIE_RECORD = {
    "movieId": 42,
    "title": "The Answer",
    "genreIds": [18, 878],
    "overview": "Seven and a half million years in the making.",
}


class InMemoryCastStore:
    """CastStore fake that orders results the way the table indexes do."""

    def __init__(self, records=None, healthy=True):
        self.records = list(records if records is not None else CAST_RECORDS)
        self.plans: list[QueryPlan] = []
        self.healthy = healthy

    def query_cast(self, plan):
        self.plans.append(plan)
        rows = [r for r in self.records if r["movieId"] == plan.movie_id]

        if plan.shape is QueryShape.ROLE_PREFIX:
            rows = [r for r in rows if r.get("roleName", "").startswith(plan.prefix)]
            rows.sort(key=lambda r: (r["roleName"], r["actorName"]))
        else:
            if plan.shape is QueryShape.ACTOR_PREFIX:
                rows = [r for r in rows if r["actorName"].startswith(plan.prefix)]
            rows.sort(key=lambda r: r["actorName"])

        return [dict(r) for r in rows]

    def health_check(self):
        return self.healthy


class InMemoryMovieStore:
    def __init__(self, records=None, healthy=True):
        self.records = list(records if records is not None else [MOVIE_RECORD])
        self.lookups: list[int] = []
        self.healthy = healthy

    def get_movie(self, movie_id):
        self.lookups.append(movie_id)
        for record in self.records:
            if record["movieId"] == movie_id:
                return dict(record)
        return None

    def health_check(self):
        return self.healthy


class FailingStore:
    """Store whose every call raises."""

    def __init__(self, error: Exception):
        self.error = error

    def query_cast(self, plan):
        raise self.error

    def get_movie(self, movie_id):
        raise self.error

    def health_check(self):
        return False


@pytest.fixture
def cast_store():
    return InMemoryCastStore()


@pytest.fixture
def movie_store():
    return InMemoryMovieStore()


@pytest.fixture
def cast_service(cast_store, movie_store):
    return CastQueryService.create(cast_store=cast_store, movie_store=movie_store)


@pytest.fixture
def handler(cast_service):
    return CastHandler(cast_service=cast_service)

# A record holding raw bytes, which json.dumps cannot encode
UNENCODABLE_RECORD = {"movieId": 42, "actorName": "Joe Bloggs", "portrait": b"\x89PNG"}
