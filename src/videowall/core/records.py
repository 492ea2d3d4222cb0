"""Persisted records: saved wall selections and quote requests.

Records are stored as JSON. The on-disk keys are camelCase
(`cabinetType`, `widthMM`, ...) so files stay compatible with
other tools that read the same store.
"""

import math
import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from videowall.core.catalog import CabinetType
from videowall.core.solver import Combo, Config, Param
from videowall.core.units import Unit


def now_ms() -> int:
    """Current UTC time as epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def new_id() -> str:
    return str(uuid.uuid4())


def _mapping(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be an object, got {type(value).__name__}")
    return value


def _timestamp(value: Any, name: str) -> int:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite timestamp")
    return int(value)


@dataclass(frozen=True)
class InputParams:
    """The locked inputs a selection was calculated from."""

    combo: Combo
    values: dict[Param, float] = field(default_factory=dict)
    unit: Unit = Unit.INCHES

    def to_dict(self) -> dict[str, Any]:
        return {
            "combo": self.combo.value,
            "values": {p.value: v for p, v in self.values.items()},
            "unit": self.unit.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InputParams":
        data = _mapping(data, "inputParams")
        values = _mapping(data.get("values", {}), "inputParams.values")
        return cls(
            combo=Combo(data["combo"]),
            values={Param(k): float(v) for k, v in values.items()},
            unit=Unit(data.get("unit", Unit.INCHES.value)),
        )


@dataclass(frozen=True)
class SavedSelection:
    """A confirmed wall configuration kept in history."""

    id: str
    cabinet_type: CabinetType
    rows: int
    cols: int
    width_mm: float
    height_mm: float
    diagonal_mm: float
    aspect_ratio: float
    total_cabinets: int
    input_params: InputParams
    saved_at: int

    @classmethod
    def from_config(
        cls,
        config: Config,
        input_params: InputParams,
        selection_id: str | None = None,
        saved_at: int | None = None,
    ) -> "SavedSelection":
        return cls(
            id=selection_id or new_id(),
            cabinet_type=config.cabinet_type,
            rows=config.rows,
            cols=config.cols,
            width_mm=config.width_mm,
            height_mm=config.height_mm,
            diagonal_mm=config.diagonal_mm,
            aspect_ratio=config.aspect_ratio,
            total_cabinets=config.total_cabinets,
            input_params=input_params,
            saved_at=now_ms() if saved_at is None else saved_at,
        )

    def same_wall(self, other: "SavedSelection") -> bool:
        """True if both describe the same physical grid."""
        return (
            self.rows == other.rows
            and self.cols == other.cols
            and self.cabinet_type == other.cabinet_type
            and self.width_mm == other.width_mm
            and self.height_mm == other.height_mm
        )

    def to_config(self) -> Config:
        return Config.from_grid(self.rows, self.cols, self.cabinet_type)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "cabinetType": self.cabinet_type.value,
            "rows": self.rows,
            "cols": self.cols,
            "widthMM": self.width_mm,
            "heightMM": self.height_mm,
            "diagonalMM": self.diagonal_mm,
            "aspectRatio": self.aspect_ratio,
            "totalCabinets": self.total_cabinets,
            "inputParams": self.input_params.to_dict(),
            "savedAt": self.saved_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SavedSelection":
        data = _mapping(data, "selection")
        return cls(
            id=str(data["id"]),
            cabinet_type=CabinetType(data["cabinetType"]),
            rows=int(data["rows"]),
            cols=int(data["cols"]),
            width_mm=float(data["widthMM"]),
            height_mm=float(data["heightMM"]),
            diagonal_mm=float(data["diagonalMM"]),
            aspect_ratio=float(data["aspectRatio"]),
            total_cabinets=int(data["totalCabinets"]),
            input_params=InputParams.from_dict(data["inputParams"]),
            saved_at=_timestamp(data["savedAt"], "savedAt"),
        )


# ---------------------------------------------------------------------------
# Quote requests
# ---------------------------------------------------------------------------

CONTACT_METHODS = ("email", "phone")

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_RE = re.compile(r"^[0-9+\-\s()]+$")
_PHONE_MIN_LENGTH = 7


def validate_contact(name: str, contact_method: str, contact_value: str) -> dict[str, str]:
    """Validate quote contact details.

    Returns a mapping of field ("name" / "contact") to error message.
    An empty mapping means the details are valid.
    """
    errors: dict[str, str] = {}
    if not name.strip():
        errors["name"] = "Name is required"

    if contact_method == "email":
        if not _EMAIL_RE.match(contact_value):
            errors["contact"] = "Enter a valid email address"
    elif contact_method == "phone":
        if not _PHONE_RE.match(contact_value) or len(contact_value.strip()) < _PHONE_MIN_LENGTH:
            errors["contact"] = "Enter a valid phone number"
    else:
        errors["contact"] = f"Unknown contact method: {contact_method}"
    return errors


@dataclass(frozen=True)
class QuoteRequest:
    """A local request to be contacted about a configuration."""

    id: str
    selection_id: str | None
    name: str
    contact_method: str
    contact_value: str
    submitted_at: int

    @classmethod
    def create(
        cls,
        name: str,
        contact_method: str,
        contact_value: str,
        selection_id: str | None = None,
    ) -> "QuoteRequest":
        """Validate and build a new request. Raises ValueError if invalid."""
        errors = validate_contact(name, contact_method, contact_value)
        if errors:
            raise ValueError("; ".join(errors.values()))
        return cls(
            id=new_id(),
            selection_id=selection_id,
            name=name.strip(),
            contact_method=contact_method,
            contact_value=contact_value.strip(),
            submitted_at=now_ms(),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "selectionId": self.selection_id,
            "name": self.name,
            "contactMethod": self.contact_method,
            "contactValue": self.contact_value,
            "submittedAt": self.submitted_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuoteRequest":
        data = _mapping(data, "quote")
        if data["contactMethod"] not in CONTACT_METHODS:
            raise ValueError(f"Unknown contact method: {data['contactMethod']}")
        return cls(
            id=str(data["id"]),
            selection_id=data.get("selectionId"),
            name=str(data["name"]),
            contact_method=data["contactMethod"],
            contact_value=str(data["contactValue"]),
            submitted_at=_timestamp(data["submittedAt"], "submittedAt"),
        )
