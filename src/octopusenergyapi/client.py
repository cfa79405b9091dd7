from __future__ import annotations
import datetime as dt
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar
from urllib.parse import quote, urljoin, urlsplit, urlunsplit
import logging
import httpx

from .config import BASE_URL, DEFAULT_MAX_PAGES, DEFAULT_TIMEOUT, ClientSettings, ConsumptionQuery
from .errors import (
    ConfigurationError,
    DecodeError,
    GridSupplyPointError,
    HTTPStatusError,
    InvalidPostcodeError,
    OctopusError,
    PaginationError,
    TransportError,
    rewrap,
)
from .models import Consumption, MeterPoint, Product, require_field
from .postcode import is_valid_postcode, normalise_postcode
from .reference import GridSupplyPoint, find_grid_supply_point

T = TypeVar('T')

FUELS = ('electricity', 'gas')


def _embed_credential(url: str, username: str) -> str:
    """Return ``url`` with ``username`` as its userinfo and an empty password.

    >>> _embed_credential('http://www.google.com/', 'user')
    'http://user:@www.google.com/'
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise ConfigurationError(f"error parsing url: {e}") from e
    if not parts.scheme or not parts.netloc:
        raise ConfigurationError(f"error parsing url: {url!r} has no scheme or host")
    host = parts.netloc.rpartition('@')[2]
    netloc = f"{quote(username, safe='')}:@{host}"
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))


def _redact(url: str) -> str:
    """Drop userinfo so the API key never reaches the logs."""
    parts = urlsplit(url)
    host = parts.netloc.rpartition('@')[2]
    return urlunsplit((parts.scheme, host, parts.path, parts.query, parts.fragment))


def _origin(url: str) -> str:
    """Scheme and host[:port] of ``url``, without userinfo, lower-cased."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return ''
    host = parts.netloc.rpartition('@')[2]
    return f"{parts.scheme}://{host}".lower()


class OctopusClient:
    """Client for the Octopus Energy REST API.

    The API key is sent as the HTTP Basic username by embedding it in the
    base URL; httpx derives the Authorization header from the URL userinfo.
    """

    def __init__(
        self,
        api_key: str,
        http_client: Optional[httpx.Client] = None,
        base_url: str = BASE_URL,
        max_pages: int = DEFAULT_MAX_PAGES,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        api_key = (api_key or '').strip()
        if not api_key:
            raise ConfigurationError("API key should not be empty")
        try:
            url = _embed_credential(base_url, api_key)
        except ConfigurationError as e:
            raise ConfigurationError(f"unable to add username to url: {e}") from e

        self._api_key = api_key
        self.url = url.rstrip('/')
        self.max_pages = max_pages
        self._owns_client = http_client is None
        # follow_redirects handles any 301/302 from API (some endpoints may redirect)
        self._client = http_client if http_client is not None else httpx.Client(timeout=timeout, follow_redirects=True)
        self._log = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: ClientSettings, http_client: Optional[httpx.Client] = None) -> 'OctopusClient':
        return cls(
            settings.api_key,
            http_client=http_client,
            base_url=settings.base_url,
            max_pages=settings.max_pages,
            timeout=settings.timeout,
        )

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> 'OctopusClient':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ---------------- Internal Helpers -----------------
    @staticmethod
    def _fmt(ts: dt.datetime) -> str:
        """Format datetime as the API's UTC timestamp with millisecond precision and +0000 offset."""
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=dt.timezone.utc)
        else:
            ts = ts.astimezone(dt.timezone.utc)
        return f"{ts.strftime('%Y-%m-%dT%H:%M:%S')}.{ts.microsecond // 1000:03d}+0000"

    def _get(self, url: str, decode: Callable[[Any], T], params: Dict[str, Any] | None = None) -> T:
        """Perform one GET and decode the JSON body with ``decode``."""
        self._log.debug("GET %s params=%s", _redact(url), params)
        try:
            resp = self._client.get(url, params=params)
        except httpx.HTTPError as e:
            raise TransportError(f"http get error: {e}") from e
        if resp.status_code != httpx.codes.OK:
            raise HTTPStatusError(f"http error - code {resp.status_code} received", status_code=resp.status_code)
        try:
            payload = resp.json()
        except ValueError as e:  # JSON decode error
            raise DecodeError(f"unable to decode json: {e}") from e
        try:
            return decode(payload)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DecodeError(f"unable to decode json: unexpected shape ({e!r})") from e

    def _next_url(self, current: str, next_link: Optional[str]) -> Optional[str]:
        if not next_link:
            return None
        resolved = urljoin(current, next_link)
        # The API key is only ever sent to the configured origin
        if _origin(resolved) != _origin(self.url):
            raise PaginationError(f"next link {_redact(resolved)} leaves {_origin(self.url)}")
        try:
            return _embed_credential(resolved, self._api_key)
        except ConfigurationError as e:
            raise DecodeError(f"unusable next link {next_link!r}: {e}") from e

    def _paginate(self, url: str, decode: Callable[[Dict[str, Any]], T]) -> List[T]:
        """Follow ``next`` links from ``url``, collecting decoded results in service order."""
        def decode_page(data: Dict[str, Any]) -> Tuple[List[T], Optional[str]]:
            return [decode(obj) for obj in data['results']], data.get('next')

        results: List[T] = []
        visited = set()
        page = 0
        next_url: Optional[str] = url
        while next_url:
            if next_url in visited:
                raise PaginationError(f"pagination cycle detected at {_redact(next_url)}")
            if page >= self.max_pages:
                raise PaginationError(f"more than {self.max_pages} pages, giving up")
            visited.add(next_url)
            page += 1
            objs, next_link = self._get(next_url, decode_page)
            results.extend(objs)
            if page == 1 or page % 25 == 0:
                self._log.debug("Fetched page %s (%s cumulative records) for %s", page, len(results), _redact(url))
            next_url = self._next_url(next_url, next_link)
        return results

    def _consumption_params(self, query: ConsumptionQuery) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if query.page_size:
            params['page_size'] = query.page_size
        if query.order_by:
            params['order_by'] = query.order_by
        if query.group_by:
            params['group_by'] = query.group_by
        if query.page:
            params['page'] = query.page
        if query.period_from is not None:
            params['period_from'] = self._fmt(query.period_from)
        if query.period_to is not None:
            params['period_to'] = self._fmt(query.period_to)
        return params

    # ---------------- Meter Points -----------------
    def get_meter_point(self, mpan: str) -> MeterPoint:
        """Retrieve an electricity meter point and resolve its grid supply point."""
        def decode(data: Dict[str, Any]) -> Tuple[Optional[str], str, int]:
            return data.get('gsp'), str(require_field(data, 'mpan')), int(require_field(data, 'profile_class'))

        try:
            gsp_id, mpan_out, profile_class = self._get(
                f"{self.url}/electricity-meter-points/{quote(mpan, safe='')}/", decode
            )
        except OctopusError as e:
            raise rewrap(e, "error retrieving meterpoint") from e

        gsp = find_grid_supply_point(gsp_id)
        if gsp is None:
            raise GridSupplyPointError(f"no grid supply point found for group id {gsp_id!r}")
        return MeterPoint(mpan=mpan_out, profile_class=profile_class, gsp=gsp)

    def get_grid_supply_point(self, postcode: str) -> GridSupplyPoint:
        """Resolve a UK postcode to its grid supply point."""
        if not is_valid_postcode(postcode):
            raise InvalidPostcodeError(f"invalid postcode {postcode}")

        def decode(data: Dict[str, Any]) -> List[Optional[str]]:
            return [r.get('group_id') for r in data['results']]

        try:
            group_ids = self._get(
                f"{self.url}/industry/grid-supply-points/", decode,
                params={'postcode': normalise_postcode(postcode)},
            )
        except OctopusError as e:
            raise rewrap(e, "error retrieving grid supply point") from e

        # Only a single, unambiguous result is usable
        if not group_ids:
            raise GridSupplyPointError(f"no supply point received for {postcode}")
        if len(group_ids) > 1:
            raise GridSupplyPointError(f"more than one supply point received for {postcode}")
        gsp = find_grid_supply_point(group_ids[0])
        if gsp is None:
            raise GridSupplyPointError(f"unknown grid supply point {group_ids[0]!r}")
        return gsp

    # ---------------- Consumption -----------------
    def get_meter_consumption(
        self,
        mpan: str,
        serial_number: str,
        query: Optional[ConsumptionQuery] = None,
        fuel: str = 'electricity',
    ) -> List[Consumption]:
        """Return one page of consumption readings for a meter.

        Not paginated automatically: use ``query.page`` / ``query.page_size`` to
        walk further pages. For gas meters ``mpan`` is the MPRN.
        """
        if fuel not in FUELS:
            raise ValueError(f"fuel must be one of {FUELS}, got {fuel!r}")
        url = (
            f"{self.url}/{fuel}-meter-points/{quote(mpan, safe='')}"
            f"/meters/{quote(serial_number, safe='')}/consumption/"
        )
        params = self._consumption_params(query) if query is not None else None

        def decode(data: Dict[str, Any]) -> List[Consumption]:
            return [Consumption.from_dict(r) for r in data['results']]

        try:
            return self._get(url, decode, params=params or None)
        except OctopusError as e:
            raise rewrap(e, "error retrieving consumption") from e

    # ---------------- Products -----------------
    def list_products(self) -> List[Product]:
        """Return every product, following the listing's pagination."""
        try:
            return self._paginate(f"{self.url}/products/", Product.from_dict)
        except OctopusError as e:
            raise rewrap(e, "error retrieving products page") from e

    def get_product(self, product_code: str) -> Product:
        try:
            return self._get(f"{self.url}/products/{quote(product_code, safe='')}/", Product.from_dict)
        except OctopusError as e:
            raise rewrap(e, "error retrieving product") from e
