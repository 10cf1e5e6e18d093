"""
DuckDB-backed address store indexed by Plus Code.

Each address row keeps its coordinates and the plus code computed for them.
Area queries decode a code and select the addresses whose coordinates fall
inside the decoded rectangle.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import uuid

import duckdb

from .alphabet import MAX_DIGIT_COUNT, MIN_DIGIT_COUNT, PAIR_CODE_LENGTH
from .decode import decode
from .geolocation import Geolocation
from .shorten import recover_nearest


# Keyword accepted by update() -> column name
_UPDATABLE_FIELDS = {
    "name": "address_name",
    "number": "address_number",
    "latitude": "latitude",
    "longitude": "longitude",
    "entities": "entities",
}

_COLUMNS = (
    "address_id, address_name, address_number, latitude, longitude, plus_code, entities"
)


@dataclass
class StoreConfig:
    """Configuration for an address store."""

    database: str = ":memory:"
    """DuckDB database path, or ":memory:"."""

    table_name: str = "address"
    """Name of the address table."""

    code_length: int = PAIR_CODE_LENGTH
    """Number of digits in the plus codes computed for new addresses."""

    read_only: bool = False
    """Open the database read only. The table must already exist."""

    def __post_init__(self):
        if not self.table_name.isidentifier():
            raise ValueError(f"table_name must be an identifier, got {self.table_name!r}")
        if not MIN_DIGIT_COUNT <= self.code_length <= MAX_DIGIT_COUNT:
            raise ValueError(
                f"code_length must be between {MIN_DIGIT_COUNT} and {MAX_DIGIT_COUNT}"
            )
        if self.read_only and self.database == ":memory:":
            raise ValueError("an in-memory database cannot be opened read only")


@dataclass(frozen=True)
class Address:
    """A stored address."""
    address_id: str
    name: str
    number: int
    latitude: float
    longitude: float
    plus_code: str
    entities: List[str] = field(default_factory=list)


class AddressStore:
    """
    Address table in a DuckDB database.

    Use as a context manager, or call close() when done.
    """

    def __init__(self, config: Optional[StoreConfig] = None):
        """
        Open the database and create the address table if needed.

        Args:
            config: Store configuration (defaults to an in-memory database)
        """
        self.config = config or StoreConfig()
        self._table = self.config.table_name
        self._con = duckdb.connect(self.config.database, read_only=self.config.read_only)

        if not self.config.read_only:
            self._create_table()

    def _create_table(self) -> None:
        """Create the address table."""
        self._con.execute(f"""
            CREATE TABLE IF NOT EXISTS {self._table} (
                address_id VARCHAR NOT NULL,
                address_name VARCHAR(100),
                address_number INTEGER,
                latitude DOUBLE,
                longitude DOUBLE,
                plus_code VARCHAR,
                entities VARCHAR[]
            )
        """)

    @staticmethod
    def _row_to_address(row: tuple) -> Address:
        address_id, name, number, latitude, longitude, plus_code, entities = row
        return Address(
            address_id=address_id,
            name=name,
            number=number,
            latitude=latitude,
            longitude=longitude,
            plus_code=plus_code,
            entities=list(entities or []),
        )

    def add(
        self,
        name: str,
        number: int,
        latitude: float,
        longitude: float,
        entities: Optional[List[str]] = None,
    ) -> Address:
        """
        Insert a new address.

        Args:
            name: Address name
            number: House number
            latitude: Latitude in degrees
            longitude: Longitude in degrees
            entities: Names of entities at the address

        Returns:
            The stored address, with its generated id and plus code
        """
        location = Geolocation(latitude, longitude, self.config.code_length)
        address = Address(
            address_id=str(uuid.uuid4()),
            name=name,
            number=number,
            latitude=latitude,
            longitude=longitude,
            plus_code=location.plus_code,
            entities=list(entities or []),
        )

        self._con.execute(f"""
            INSERT INTO {self._table} ({_COLUMNS})
            VALUES (?, ?, ?, ?, ?, ?, CAST(? AS VARCHAR[]))
        """, [
            address.address_id,
            address.name,
            address.number,
            address.latitude,
            address.longitude,
            address.plus_code,
            address.entities,
        ])
        return address

    def get(self, address_id: str) -> Optional[Address]:
        """
        Fetch an address by id.

        Returns:
            The address, or None if there is no address with that id
        """
        row = self._con.execute(f"""
            SELECT {_COLUMNS} FROM {self._table} WHERE address_id = ?
        """, [address_id]).fetchone()

        if row is None:
            return None
        return self._row_to_address(row)

    def update(self, address_id: str, **fields: Any) -> Address:
        """
        Update columns of an address.

        Changing latitude or longitude recomputes the plus code.

        Args:
            address_id: Id of the address to update
            **fields: New values for name, number, latitude, longitude or entities

        Returns:
            The updated address

        Raises:
            ValueError: If no fields are given or a field is unknown
            KeyError: If there is no address with that id
        """
        if not fields:
            raise ValueError("no fields to update")
        unknown = sorted(set(fields) - set(_UPDATABLE_FIELDS))
        if unknown:
            raise ValueError(f"unknown address fields: {', '.join(unknown)}")

        current = self.get(address_id)
        if current is None:
            raise KeyError(address_id)

        values: Dict[str, Any] = {
            _UPDATABLE_FIELDS[name]: value for name, value in fields.items()
        }
        if "latitude" in fields or "longitude" in fields:
            location = Geolocation(
                fields.get("latitude", current.latitude),
                fields.get("longitude", current.longitude),
                self.config.code_length,
            )
            values["plus_code"] = location.plus_code

        assignments = ", ".join(
            f"{column} = CAST(? AS VARCHAR[])" if column == "entities" else f"{column} = ?"
            for column in values
        )
        params = [
            list(value or []) if column == "entities" else value
            for column, value in values.items()
        ]
        self._con.execute(
            f"UPDATE {self._table} SET {assignments} WHERE address_id = ?",
            params + [address_id],
        )

        return self.get(address_id)

    def delete(self, address_id: str) -> bool:
        """
        Delete an address.

        Returns:
            True if an address was deleted
        """
        if self.get(address_id) is None:
            return False
        self._con.execute(
            f"DELETE FROM {self._table} WHERE address_id = ?", [address_id]
        )
        return True

    def all(self) -> List[Address]:
        """All addresses, ordered by name and number."""
        rows = self._con.execute(f"""
            SELECT {_COLUMNS} FROM {self._table}
            ORDER BY address_name, address_number
        """).fetchall()
        return [self._row_to_address(row) for row in rows]

    def count(self) -> int:
        """Number of stored addresses."""
        return self._con.execute(f"SELECT COUNT(*) FROM {self._table}").fetchone()[0]

    def find_in_area(self, code: str) -> List[Address]:
        """
        Find the addresses inside the area of a full code.

        Args:
            code: A full code

        Returns:
            Matching addresses, ordered by name and number

        Raises:
            ValueError: If the code is not a valid full code
        """
        area = decode(code)
        rows = self._con.execute(f"""
            SELECT {_COLUMNS} FROM {self._table}
            WHERE latitude >= ? AND latitude < ?
              AND longitude >= ? AND longitude < ?
            ORDER BY address_name, address_number
        """, [
            area.latitude_lo,
            area.latitude_hi,
            area.longitude_lo,
            area.longitude_hi,
        ]).fetchall()
        return [self._row_to_address(row) for row in rows]

    def find_near(self, short_code: str, latitude: float, longitude: float) -> List[Address]:
        """
        Find the addresses inside a short code's area near a reference location.

        Args:
            short_code: A short (or full) code
            latitude: Reference latitude in degrees
            longitude: Reference longitude in degrees

        Returns:
            Matching addresses, ordered by name and number
        """
        return self.find_in_area(recover_nearest(short_code, latitude, longitude))

    def close(self) -> None:
        """Close the database connection."""
        if self._con:
            self._con.close()
            self._con = None

    def __del__(self):
        """Cleanup on garbage collection."""
        if getattr(self, "_con", None) is not None:
            self.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


def open_address_store(
    database: Union[str, Path],
    table_name: str = "address",
    code_length: int = PAIR_CODE_LENGTH,
    read_only: bool = False,
) -> AddressStore:
    """
    Convenience function to open a file-backed address store.

    Args:
        database: Path of the DuckDB database file
        table_name: Name of the address table
        code_length: Number of digits in plus codes of new addresses
        read_only: Open without write access

    Returns:
        Configured AddressStore instance

    Raises:
        FileNotFoundError: If a read-only store is requested for a missing file
        ValueError: If the table name or code length is invalid
    """
    path = Path(database)
    if read_only and not path.exists():
        raise FileNotFoundError(f"Could not find address database {path}")

    config = StoreConfig(
        database=str(path),
        table_name=table_name,
        code_length=code_length,
        read_only=read_only,
    )
    return AddressStore(config)
