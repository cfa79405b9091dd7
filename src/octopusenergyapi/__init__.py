"""
Octopus Energy API client for meter points, consumption and tariff products.
Provides Python interface to Octopus Energy REST API endpoints.
"""

__all__ = [
    'OctopusClient', 'ClientSettings', 'ConsumptionQuery', 'BASE_URL',
    'MeterPoint', 'Consumption', 'Product', 'Tariff', 'Link',
    'GridSupplyPoint', 'GRID_SUPPLY_POINTS', 'PROFILE_CLASSES', 'find_grid_supply_point',
    'is_valid_postcode',
    'OctopusError', 'ConfigurationError', 'TransportError', 'HTTPStatusError', 'DecodeError',
    'PaginationError', 'GridSupplyPointError', 'InvalidPostcodeError',
]

from .client import OctopusClient
from .config import BASE_URL, ClientSettings, ConsumptionQuery
from .errors import (
    ConfigurationError,
    DecodeError,
    GridSupplyPointError,
    HTTPStatusError,
    InvalidPostcodeError,
    OctopusError,
    PaginationError,
    TransportError,
)
from .models import Consumption, Link, MeterPoint, Product, Tariff
from .postcode import is_valid_postcode
from .reference import GRID_SUPPLY_POINTS, PROFILE_CLASSES, GridSupplyPoint, find_grid_supply_point
