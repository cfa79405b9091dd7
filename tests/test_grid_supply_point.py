import pytest

from conftest import failing_handler, status_handler
from octopusenergyapi import GRID_SUPPLY_POINTS
from octopusenergyapi.errors import (
    GridSupplyPointError,
    HTTPStatusError,
    InvalidPostcodeError,
    TransportError,
)


def test_get_grid_supply_point(make_client, serve_fixture):
    requests = []
    inner = serve_fixture('getgridsupplypoint.json')

    def handler(request):
        requests.append(request)
        return inner(request)

    client = make_client(handler)
    gsp = client.get_grid_supply_point("SW1A 1AA")

    assert gsp == GRID_SUPPLY_POINTS[0]  # GRID_SUPPLY_POINTS[0] is "_A"
    assert requests[0].url.path == '/v1/industry/grid-supply-points/'
    assert requests[0].url.params['postcode'] == 'SW1A1AA'


def test_many_gsp_error(make_client, serve_fixture):
    client = make_client(serve_fixture('getgridsupplypoint_err.json'))
    with pytest.raises(GridSupplyPointError, match="more than one"):
        client.get_grid_supply_point("SW1A 1AA")


def test_unknown_gsp_error(make_client, serve_fixture):
    client = make_client(serve_fixture('getgridsupplypoint_nogsp.json'))
    with pytest.raises(GridSupplyPointError, match="unknown grid supply point"):
        client.get_grid_supply_point("SW1A 1AA")


def test_empty_gsp_result_error(make_client, serve_fixture):
    client = make_client(serve_fixture('getgridsupplypoint_empty.json'))
    with pytest.raises(GridSupplyPointError, match="no supply point"):
        client.get_grid_supply_point("E20 2ST")


def test_postcode_error_sends_no_request(make_client):
    calls = []

    def handler(request):
        calls.append(request)
        return status_handler(403)(request)

    client = make_client(handler)
    with pytest.raises(InvalidPostcodeError, match="invalid postcode"):
        client.get_grid_supply_point("invalid_postcode")
    assert calls == []


def test_get_grid_supply_point_fail(make_client):
    client = make_client(failing_handler)
    with pytest.raises(TransportError, match="error retrieving"):
        client.get_grid_supply_point("SW1A 1AA")


def test_get_grid_supply_point_http_error(make_client):
    client = make_client(status_handler(401))
    with pytest.raises(HTTPStatusError, match="error retrieving grid supply point: http error - code 401"):
        client.get_grid_supply_point("e20 2st")


def test_trailing_newline_postcode_sends_no_request(make_client, serve_fixture):
    calls = []
    inner = serve_fixture('getgridsupplypoint.json')

    def handler(request):
        calls.append(request)
        return inner(request)

    client = make_client(handler)
    with pytest.raises(InvalidPostcodeError, match="invalid postcode"):
        client.get_grid_supply_point("SW1A 1AA\n")
    assert calls == []
