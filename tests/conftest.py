"""Shared fixtures: a fake catalog backend that stands in for requests.Session."""

import json
from dataclasses import dataclass, field
from typing import Any

import pytest
import requests

RESOURCE_URL = "http://catalog.test/products"


def make_response(payload: Any = None, status: int = 200, url: str = RESOURCE_URL) -> requests.Response:
    res = requests.Response()
    res.status_code = status
    res.url = url
    res.encoding = "utf-8"
    res._content = b"" if payload is None else json.dumps(payload).encode("utf-8")
    return res


@dataclass
class FakeCatalog:
    """In-memory collection answering the same calls as the real backend.

    - records every call as (method, url, json_body)
    - `fail_reads` makes GET raise a connection error
    - `mutation_status` forces the status code of POST/DELETE answers
    - `fail_mutations` makes POST/DELETE raise a connection error
    - `garbled_mutations` answers POST/DELETE with a non-JSON body
    """

    products: list = field(default_factory=list)
    calls: list = field(default_factory=list)
    fail_reads: bool = False
    mutation_status: int = 200
    fail_mutations: bool = False
    garbled_mutations: bool = False

    def _next_id(self) -> int:
        return max((p["id"] for p in self.products), default=0) + 1

    def _broken_mutation(self, url):
        if self.fail_mutations:
            raise requests.ConnectionError("connection reset")
        if self.garbled_mutations:
            res = make_response(url=url)
            res._content = b"<html>"
            return res
        return None

    def get(self, url, **kwargs):
        self.calls.append(("GET", url, None))
        if self.fail_reads:
            raise requests.ConnectionError("connection refused")
        return make_response([dict(p) for p in self.products], url=url)

    def post(self, url, json=None, **kwargs):
        self.calls.append(("POST", url, json))
        broken = self._broken_mutation(url)
        if broken is not None:
            return broken
        if self.mutation_status >= 400:
            return make_response({"detail": "boom"}, status=self.mutation_status, url=url)
        product = {"id": self._next_id(), **json}
        self.products.append(product)
        return make_response(product, status=201, url=url)

    def delete(self, url, **kwargs):
        self.calls.append(("DELETE", url, None))
        broken = self._broken_mutation(url)
        if broken is not None:
            return broken
        if self.mutation_status >= 400:
            return make_response({"detail": "boom"}, status=self.mutation_status, url=url)
        product_id = int(url.rsplit("/", 1)[-1])
        self.products = [p for p in self.products if p["id"] != product_id]
        return make_response({}, url=url)

    def methods(self) -> list:
        return [method for method, _, _ in self.calls]


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog(products=[{"id": 1, "name": "Pen", "price": 2.5}])


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
