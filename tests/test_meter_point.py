import httpx
import pytest

from conftest import failing_handler
from octopusenergyapi import GRID_SUPPLY_POINTS
from octopusenergyapi.errors import DecodeError, GridSupplyPointError, TransportError


def test_get_meter_point(make_client, serve_fixture):
    paths = []
    inner = serve_fixture('getmeterpoint.json')

    def handler(request):
        paths.append(request.url.path)
        return inner(request)

    client = make_client(handler)
    mp = client.get_meter_point("0123456789")

    assert paths == ['/v1/electricity-meter-points/0123456789/']
    assert mp.mpan == "0123456789"
    assert mp.profile_class == 1
    assert mp.gsp == GRID_SUPPLY_POINTS[0]
    assert mp.gsp.group_id == "_A"
    assert mp.profile_class_description == "Domestic unrestricted"


def test_get_meter_point_fail(make_client):
    client = make_client(failing_handler)
    with pytest.raises(TransportError, match="error retrieving meterpoint"):
        client.get_meter_point("")


@pytest.mark.parametrize('fixture', ['getmeterpoint_nogsp.json', 'getmeterpoint_absentgsp.json'])
def test_get_meter_point_no_gsp(make_client, serve_fixture, fixture):
    client = make_client(serve_fixture(fixture))
    with pytest.raises(GridSupplyPointError, match="no grid supply point found"):
        client.get_meter_point("1234567890")


def test_get_meter_point_bad_profile_class(make_client):
    client = make_client(lambda request: httpx.Response(
        200, json={"gsp": "_A", "mpan": "1", "profile_class": "not a number"}))
    with pytest.raises(DecodeError, match="error retrieving meterpoint"):
        client.get_meter_point("1")


def test_unknown_profile_class_has_no_description(make_client):
    client = make_client(lambda request: httpx.Response(
        200, json={"gsp": "_M", "mpan": "1", "profile_class": 42}))
    mp = client.get_meter_point("1")
    assert mp.gsp.name == "Yorkshire"
    assert mp.profile_class_description is None


@pytest.mark.parametrize('body', [
    {"gsp": "_A", "mpan": None, "profile_class": 1},
    {"gsp": "_A", "mpan": "1", "profile_class": None},
])
def test_get_meter_point_null_required_field(make_client, body):
    client = make_client(lambda request: httpx.Response(200, json=body))
    with pytest.raises(DecodeError, match="error retrieving meterpoint"):
        client.get_meter_point("1")
