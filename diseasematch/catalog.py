"""
Disease catalog access.

The scoring engine only sees DiseaseRecord values. How the store encodes list fields
(JSON text columns in the SQL catalog) stays in this module.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

from sqlalchemy.exc import SQLAlchemyError

from diseasematch.database import Disease
from diseasematch.errors import CatalogUnavailable, MalformedCatalogEntry

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "General"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def from_label(cls, label) -> "Severity":
        """Convert a stored label ("High", " critical ") into the enum."""
        if isinstance(label, cls):
            return label
        if not isinstance(label, str):
            raise ValueError(f"Unknown severity label: {label!r}")
        key = label.strip().lower()
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown severity label: {label!r}")

    @property
    def boosted(self) -> bool:
        return self in (Severity.HIGH, Severity.CRITICAL)


@dataclass(frozen=True)
class DiseaseRecord:
    """
    Immutable catalog entry.

    Attributes:
        id: Opaque identifier of the record in its store.
        name: Unique display name.
        symptoms: Ordered catalog symptom phrases.
        severity: One of low / medium / high / critical.
        category: Grouping label, "General" when the store has none.
    """

    id: object
    name: str
    symptoms: Tuple[str, ...]
    severity: Severity
    description: str = ""
    causes: Tuple[str, ...] = field(default_factory=tuple)
    precautions: Tuple[str, ...] = field(default_factory=tuple)
    medicines: Tuple[str, ...] = field(default_factory=tuple)
    category: str = DEFAULT_CATEGORY


class Catalog(Protocol):
    def fetch_all(self) -> Sequence[DiseaseRecord]:
        ...


def _string_list(name, label, value) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise MalformedCatalogEntry(name, f"{label} is not a list of strings")
    if not all(isinstance(item, str) for item in value):
        raise MalformedCatalogEntry(name, f"{label} contains non-string entries")
    return tuple(value)


def _decode_list(name, label, raw) -> Tuple[str, ...]:
    if raw is None or raw == "":
        return ()
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        raise MalformedCatalogEntry(name, f"{label} is not valid JSON")
    return _string_list(name, label, value)


def _severity(name, label) -> Severity:
    try:
        return Severity.from_label(label)
    except ValueError as exc:
        raise MalformedCatalogEntry(name, str(exc))


def record_from_mapping(data) -> DiseaseRecord:
    """Build a record from a plain mapping whose list fields are Python lists."""
    name = data.get("name")
    if not name:
        raise MalformedCatalogEntry(name, "missing name")
    return DiseaseRecord(
        id=data.get("id", name),
        name=name,
        description=data.get("description") or "",
        symptoms=_string_list(name, "symptoms", data.get("symptoms")),
        causes=_string_list(name, "causes", data.get("causes")),
        precautions=_string_list(name, "precautions", data.get("precautions")),
        medicines=_string_list(name, "medicines", data.get("medicines")),
        severity=_severity(name, data.get("severity", "medium")),
        category=data.get("category") or DEFAULT_CATEGORY,
    )


def record_from_row(row: Disease) -> DiseaseRecord:
    name = row.name
    return DiseaseRecord(
        id=row.id,
        name=name,
        description=row.description or "",
        symptoms=_decode_list(name, "symptoms", row.symptoms),
        causes=_decode_list(name, "causes", row.causes),
        precautions=_decode_list(name, "precautions", row.precautions),
        medicines=_decode_list(name, "medicines", row.medicines),
        severity=_severity(name, row.severity),
        category=row.category or DEFAULT_CATEGORY,
    )


class SqlCatalog:
    """Loads the full catalog from the relational store, one query per call."""

    def __init__(self, db):
        self.db = db

    def fetch_all(self) -> List[DiseaseRecord]:
        try:
            rows = self.db.query(Disease).order_by(Disease.id).all()
        except SQLAlchemyError as exc:
            logger.error("Disease catalog unreachable: %s", exc)
            raise CatalogUnavailable("disease catalog is unavailable") from exc

        records = []
        for row in rows:
            try:
                records.append(record_from_row(row))
            except MalformedCatalogEntry as exc:
                logger.warning("Skipping malformed catalog entry %s", exc)
        return records


class InMemoryCatalog:
    def __init__(self, records: Optional[Iterable[DiseaseRecord]] = None):
        self._records = tuple(records or ())

    @classmethod
    def from_mappings(cls, items) -> "InMemoryCatalog":
        return cls(record_from_mapping(item) for item in items)

    def fetch_all(self) -> List[DiseaseRecord]:
        return list(self._records)


def record_to_dict(record: DiseaseRecord) -> dict:
    return {
        "id": record.id,
        "name": record.name,
        "description": record.description,
        "symptoms": list(record.symptoms),
        "causes": list(record.causes),
        "precautions": list(record.precautions),
        "medicines": list(record.medicines),
        "severity": record.severity.value,
        "category": record.category,
    }
