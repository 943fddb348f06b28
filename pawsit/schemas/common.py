from decimal import Decimal
from typing import Annotated, Any
from pydantic import PlainSerializer

# Decimal en memoria, número en el JSON de salida
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def reject_null(v: Any) -> Any:
    """En un PATCH se puede omitir un campo obligatorio, pero no enviarlo a null."""
    if v is None:
        raise ValueError("Este campo no admite null")
    return v
