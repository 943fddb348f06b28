"""
Motor de precios de reservas.

Convierte (tipo de servicio, rango de fechas, tarifas del anuncio) en la
duración facturada y el precio total. Exactamente uno de ``hours``/``days``
queda relleno según la rama que se aplique.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Any, Dict
import math

from ..errors import InvalidDateRange, InvalidServiceType
from ..schemas.listing import ServiceType
from ..utils import as_utc, to_decimal

SECONDS_PER_HOUR = Decimal(3600)
PET_SITTING_HOURLY_LIMIT = Decimal(24)


@dataclass(frozen=True)
class RateCard:
    price_per_hour: Decimal
    price_per_day: Optional[Decimal] = None
    price_per_night: Optional[Decimal] = None

    @classmethod
    def from_listing(cls, listing: Dict[str, Any]) -> "RateCard":
        return cls(
            price_per_hour=to_decimal(listing["price_per_hour"]),
            price_per_day=to_decimal(listing.get("price_per_day")),
            price_per_night=to_decimal(listing.get("price_per_night")),
        )


@dataclass(frozen=True)
class Pricing:
    hours: Optional[Decimal]
    days: Optional[int]
    price: Decimal


def hours_between(start: datetime, end: datetime) -> Decimal:
    delta = as_utc(end) - as_utc(start)
    # segundos enteros + microsegundos, sin pasar por float
    seconds = Decimal(delta.days * 86400 + delta.seconds) + Decimal(delta.microseconds) / Decimal(1_000_000)
    return seconds / SECONDS_PER_HOUR


def _hourly(total_hours: Decimal, rates: RateCard) -> Pricing:
    return Pricing(hours=total_hours, days=None, price=total_hours * rates.price_per_hour)


def _daily(total_days: int, rate: Decimal) -> Pricing:
    return Pricing(hours=None, days=total_days, price=total_days * rate)


def compute_pricing(service_type: Any, start: datetime, end: datetime, rates: RateCard) -> Pricing:
    try:
        service = ServiceType(service_type)
    except ValueError:
        raise InvalidServiceType(f"Tipo de servicio inválido: {service_type!r}")

    total_hours = hours_between(start, end)
    if total_hours <= 0:
        raise InvalidDateRange()
    total_days = math.ceil(total_hours / 24)

    if service in (ServiceType.dog_walking, ServiceType.grooming):
        return _hourly(total_hours, rates)

    if service == ServiceType.daycare:
        if rates.price_per_day:
            return _daily(total_days, rates.price_per_day)
        return _hourly(total_hours, rates)

    if service == ServiceType.pet_sitting:
        if total_hours <= PET_SITTING_HOURLY_LIMIT:
            return _hourly(total_hours, rates)
        if rates.price_per_day:
            return _daily(total_days, rates.price_per_day)
        return _hourly(total_hours, rates)

    if service == ServiceType.overnight_care:
        # noche > día > hora
        if rates.price_per_night:
            return _daily(total_days, rates.price_per_night)
        if rates.price_per_day:
            return _daily(total_days, rates.price_per_day)
        return _hourly(total_hours, rates)

    raise InvalidServiceType(f"Tipo de servicio inválido: {service.value!r}")
