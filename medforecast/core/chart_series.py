"""
Serie del grafico
=================
Convierte la serie fecha -> valor del servicio en etiquetas y valores para
el grafico de barras, en el mismo orden en que llegan las claves.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from medforecast.core.date_normalizer import normalize, strip_time_suffix


@dataclass(frozen=True)
class ChartSeries:
    """Datos listos para el grafico"""
    labels: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return len(self.labels) == 0

    def to_dict(self) -> Dict[str, List[Any]]:
        return {"labels": list(self.labels), "values": list(self.values)}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, List[Any]]]) -> Optional["ChartSeries"]:
        if data is None:
            return None
        return cls(labels=list(data.get("labels", [])), values=list(data.get("values", [])))


def build(series: Mapping[str, Any]) -> ChartSeries:
    """
    Construye la serie del grafico.

    Las claves pueden traer texto extra despues de un espacio (ej. la hora),
    que se descarta antes de normalizar. Los valores no se modifican.
    """
    labels = [normalize(strip_time_suffix(fecha)) for fecha in series.keys()]
    values = list(series.values())
    return ChartSeries(labels=labels, values=values)
