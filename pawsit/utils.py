# pawsit/utils.py
from typing import Any, Dict, Optional
from decimal import Decimal, ROUND_HALF_UP
from bson import ObjectId
from bson.decimal128 import Decimal128
from datetime import datetime, timezone

CENTS = Decimal("0.01")


def to_id(doc: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Convierte _id -> id (str), los ObjectIds a strings y los Decimal128 a Decimal.
    Si doc es None, devuelve {}.
    """
    if doc is None:
        return {}
    d = dict(doc)

    if "_id" in d:
        d["id"] = str(d.pop("_id"))

    for key, value in d.items():
        d[key] = _plain(value)

    return d


def _plain(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, Decimal128):
        return value.to_decimal()
    if isinstance(value, dict):
        return to_id(value)
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


# ==================== IDs ====================

def maybe_object_id(value: Any) -> Optional[ObjectId]:
    """
    ObjectId si el valor es válido, None si no.
    Un id mal formado se trata igual que un registro inexistente.
    """
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


# ==================== Dinero ====================

def to_decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, Decimal128):
        return value.to_decimal()
    if isinstance(value, Decimal):
        return value
    # float -> str para no arrastrar el binario (12.1 -> "12.1")
    return Decimal(str(value))


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def to_decimal128(value: Any) -> Optional[Decimal128]:
    dec = to_decimal(value)
    return Decimal128(dec) if dec is not None else None


# ==================== Tiempo ====================

def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Normaliza a UTC con zona; un datetime naive se interpreta como UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
