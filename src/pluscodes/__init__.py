"""
pluscodes: Plus Code (Open Location Code) encoding and decoding.

This package converts WGS84 (lat, lon) coordinates into short alphanumeric
codes naming a rectangular area, decodes codes back into that area, and
shortens and recovers codes relative to a nearby reference location. It
also provides a DuckDB-backed store of addresses searchable by code.
"""

__version__ = "0.1.0"

from .codearea import CodeArea, LatLng
from .validate import is_valid, is_short, is_full, code_length
from .encode import encode
from .decode import decode
from .shorten import shorten, recover_nearest
from .geolocation import Geolocation, NOT_VALID
from .address_store import Address, AddressStore, StoreConfig, open_address_store

__all__ = [
    "CodeArea",
    "LatLng",
    "is_valid",
    "is_short",
    "is_full",
    "code_length",
    "encode",
    "decode",
    "shorten",
    "recover_nearest",
    "Geolocation",
    "NOT_VALID",
    "Address",
    "AddressStore",
    "StoreConfig",
    "open_address_store",
]
