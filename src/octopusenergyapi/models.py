from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .reference import GridSupplyPoint, PROFILE_CLASSES


def _parse_ts(value: Optional[str]) -> Optional[dt.datetime]:
    """Parse an API timestamp ('Z' or numeric offset) into an aware datetime."""
    if value is None:
        return None
    ts = dt.datetime.fromisoformat(value.replace('Z', '+00:00'))
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=dt.timezone.utc)
    return ts


def require_field(data: Dict[str, Any], key: str) -> Any:
    """Return ``data[key]``, treating an explicit null like a missing key."""
    value = data[key]
    if value is None:
        raise KeyError(f"{key} is null")
    return value


def _money(data: Dict[str, Any], key: str) -> float:
    value = data.get(key)
    return 0.0 if value is None else float(value)


@dataclass(frozen=True)
class MeterPoint:
    mpan: str
    profile_class: int
    gsp: GridSupplyPoint

    @property
    def profile_class_description(self) -> Optional[str]:
        return PROFILE_CLASSES.get(self.profile_class)


@dataclass(frozen=True)
class Consumption:
    # Unit depends on the meter: kWh for electricity and SMETS1 gas, m^3 for SMETS2 gas.
    value: float
    interval_start: dt.datetime
    interval_end: dt.datetime

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Consumption':
        return cls(
            value=float(require_field(data, 'consumption')),
            interval_start=_parse_ts(require_field(data, 'interval_start')),
            interval_end=_parse_ts(require_field(data, 'interval_end')),
        )


@dataclass(frozen=True)
class Link:
    href: str
    method: str
    rel: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Link':
        return cls(href=data['href'], method=data.get('method', 'GET'), rel=data.get('rel', ''))


def _links(data: Dict[str, Any]) -> List[Link]:
    return [Link.from_dict(link) for link in data.get('links') or []]


@dataclass(frozen=True)
class Tariff:
    code: str
    standing_charge_exc_vat: float = 0.0
    standing_charge_inc_vat: float = 0.0
    online_discount_exc_vat: float = 0.0
    online_discount_inc_vat: float = 0.0
    dual_fuel_discount_exc_vat: float = 0.0
    dual_fuel_discount_inc_vat: float = 0.0
    exit_fees_exc_vat: float = 0.0
    exit_fees_inc_vat: float = 0.0
    standard_unit_rate_exc_vat: float = 0.0
    standard_unit_rate_inc_vat: float = 0.0
    links: List[Link] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Tariff':
        return cls(
            code=data['code'],
            standing_charge_exc_vat=_money(data, 'standing_charge_exc_vat'),
            standing_charge_inc_vat=_money(data, 'standing_charge_inc_vat'),
            online_discount_exc_vat=_money(data, 'online_discount_exc_vat'),
            online_discount_inc_vat=_money(data, 'online_discount_inc_vat'),
            dual_fuel_discount_exc_vat=_money(data, 'dual_fuel_discount_exc_vat'),
            dual_fuel_discount_inc_vat=_money(data, 'dual_fuel_discount_inc_vat'),
            exit_fees_exc_vat=_money(data, 'exit_fees_exc_vat'),
            exit_fees_inc_vat=_money(data, 'exit_fees_inc_vat'),
            standard_unit_rate_exc_vat=_money(data, 'standard_unit_rate_exc_vat'),
            standard_unit_rate_inc_vat=_money(data, 'standard_unit_rate_inc_vat'),
            links=_links(data),
        )


TariffTable = Dict[str, Dict[str, Tariff]]


def _tariff_table(data: Optional[Dict[str, Dict[str, Any]]]) -> TariffTable:
    """Decode a two-level tariff map (region, then payment method) without flattening it."""
    return {
        outer: {inner: Tariff.from_dict(t) for inner, t in tariffs.items()}
        for outer, tariffs in (data or {}).items()
    }


@dataclass(frozen=True)
class Product:
    """An Octopus Energy product as returned by /products/ and /products/{code}/.

    The listing endpoint omits the tariff tables, so they default to empty.
    """
    code: str
    direction: str = ''
    full_name: str = ''
    display_name: str = ''
    description: str = ''
    is_variable: bool = False
    is_green: bool = False
    is_tracker: bool = False
    is_prepay: bool = False
    is_business: bool = False
    is_restricted: bool = False
    term: Optional[int] = None
    available_from: Optional[dt.datetime] = None
    available_to: Optional[dt.datetime] = None
    links: List[Link] = field(default_factory=list)
    single_register_electricity_tariffs: TariffTable = field(default_factory=dict)
    dual_register_electricity_tariffs: TariffTable = field(default_factory=dict)
    single_register_gas_tariffs: TariffTable = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Product':
        return cls(
            code=data['code'],
            direction=data.get('direction') or '',
            full_name=data.get('full_name') or '',
            display_name=data.get('display_name') or '',
            description=data.get('description') or '',
            is_variable=bool(data.get('is_variable', False)),
            is_green=bool(data.get('is_green', False)),
            is_tracker=bool(data.get('is_tracker', False)),
            is_prepay=bool(data.get('is_prepay', False)),
            is_business=bool(data.get('is_business', False)),
            is_restricted=bool(data.get('is_restricted', False)),
            term=data.get('term'),
            available_from=_parse_ts(data.get('available_from')),
            available_to=_parse_ts(data.get('available_to')),
            links=_links(data),
            single_register_electricity_tariffs=_tariff_table(data.get('single_register_electricity_tariffs')),
            dual_register_electricity_tariffs=_tariff_table(data.get('dual_register_electricity_tariffs')),
            single_register_gas_tariffs=_tariff_table(data.get('single_register_gas_tariffs')),
        )
