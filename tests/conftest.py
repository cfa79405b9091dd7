import json
import pathlib

import httpx
import pytest

from octopusenergyapi import OctopusClient

TESTDATA = pathlib.Path(__file__).parent / 'testdata'


def load_fixture(name):
    return (TESTDATA / name).read_bytes()


@pytest.fixture
def make_client():
    """Build an OctopusClient whose HTTP traffic goes to ``handler`` instead of the network."""
    clients = []

    def factory(handler, **kwargs):
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(http_client)
        return OctopusClient('fakeapikey', http_client, **kwargs)

    yield factory
    for c in clients:
        c.close()


@pytest.fixture
def serve_fixture():
    """Handler that answers every request with the named testdata file."""
    def factory(name, status_code=200):
        body = load_fixture(name)

        def handler(request):
            return httpx.Response(status_code, content=body, headers={'Content-Type': 'application/json'})
        return handler
    return factory


def failing_handler(request):
    raise httpx.ConnectError("connection refused", request=request)


def status_handler(status_code):
    def handler(request):
        return httpx.Response(status_code, json={'detail': 'Authentication credentials were not provided.'})
    return handler


def paginated_products(count, page_size, base='https://api.octopus.energy/v1/products/'):
    """Handler serving ``count`` products split into pages of ``page_size``."""
    products = [{'code': f'PRODUCT-{i:03d}', 'full_name': f'Product {i}', 'is_green': i % 2 == 0} for i in range(count)]

    def handler(request):
        page = int(request.url.params.get('page', '1'))
        start = (page - 1) * page_size
        batch = products[start:start + page_size]
        has_next = start + page_size < count
        body = {
            'count': count,
            'next': f'{base}?page={page + 1}' if has_next else None,
            'previous': f'{base}?page={page - 1}' if page > 1 else None,
            'results': batch,
        }
        return httpx.Response(200, content=json.dumps(body).encode())
    return handler
