"""
Maquina de estados de la seleccion
==================================
Guarda los tres campos pendientes (periodo, medicina, region) y genera la
solicitud de forecast al enviar. No valida combinaciones: una seleccion
parcial o vacia se envia tal cual y el servicio decide si la acepta.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Union


class Period(Enum):
    """Granularidad del forecast"""
    MONTHLY = "monthly"
    WEEKLY = "weekly"
    DAILY = "daily"
    UNSELECTED = ""

    @classmethod
    def from_value(cls, valor: Union["Period", str, None]) -> "Period":
        """Convierte el valor de un dropdown; valores desconocidos quedan sin seleccionar"""
        if isinstance(valor, Period):
            return valor
        try:
            return cls(valor or "")
        except ValueError:
            return cls.UNSELECTED


@dataclass(frozen=True)
class SelectionRequest:
    """Solicitud enviada al servicio para calcular un forecast"""
    period: Period = Period.UNSELECTED
    medicine: str = ""
    region: str = ""

    def to_payload(self) -> Dict[str, str]:
        """Cuerpo del POST /selection"""
        return {
            "time": self.period.value,
            "medicine": self.medicine,
            "state": self.region,
        }


@dataclass(frozen=True)
class SelectionState:
    """Campos pendientes de la seleccion; cada transicion devuelve un estado nuevo"""
    period: Period = Period.UNSELECTED
    medicine: str = ""
    region: str = ""

    def set_period(self, periodo: Union[Period, str, None]) -> "SelectionState":
        return replace(self, period=Period.from_value(periodo))

    def set_medicine(self, medicina: str) -> "SelectionState":
        return replace(self, medicine=medicina or "")

    def set_region(self, region: str) -> "SelectionState":
        return replace(self, region=region or "")

    def submit(self) -> SelectionRequest:
        return SelectionRequest(
            period=self.period,
            medicine=self.medicine,
            region=self.region,
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "period": self.period.value,
            "medicine": self.medicine,
            "region": self.region,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "SelectionState":
        data = data or {}
        return cls(
            period=Period.from_value(data.get("period")),
            medicine=data.get("medicine") or "",
            region=data.get("region") or "",
        )
