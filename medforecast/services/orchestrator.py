"""
Orquestador del Dashboard de Forecast
=====================================

Compone repositorio, seleccion, tabla paginada y grafico.

Todo el estado de la pantalla vive en un DashboardState inmutable: cada
handler recibe el estado actual y devuelve uno nuevo, sin tocar globales.
Los estados intermedios (por ejemplo, con el flag de carga activo) se
publican a un listener opcional.

Cada clase de peticion (medicines, regions, catalog, stock, chart) lleva un
id creciente emitido por el controlador (compartido por todos los callbacks
del proceso); una respuesta solo se aplica si su id sigue siendo el ultimo
emitido para esa clase.
"""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional, Tuple

from loguru import logger

from medforecast.core.chart_series import ChartSeries, build
from medforecast.core.pagination import (
    TablePage,
    derive,
    page_count,
    clamp_page,
    first_page,
    prev_page,
    next_page,
    last_page,
)
from medforecast.core.selection import SelectionState
from medforecast.services.forecast_repository import RepositoryResult
from medforecast.utils.constants import ITEMS_PER_PAGE

OP_MEDICINAS = "medicines"
OP_REGIONES = "regions"
OP_CATALOGO = "catalog"
OP_STOCK = "stock"
OP_GRAFICO = "chart"


@dataclass(frozen=True)
class DashboardState:
    """Estado completo de la pantalla"""
    medicines: Tuple[str, ...] = ()
    regions: Tuple[str, ...] = ()
    catalog: Dict[str, Dict[str, float]] = field(default_factory=dict)
    stock_warnings: Dict[str, str] = field(default_factory=dict)
    chart: Optional[ChartSeries] = None
    selection: SelectionState = field(default_factory=SelectionState)
    table_medicine: str = ""
    current_page: int = 1
    is_loading: bool = False
    is_refreshing: bool = False
    last_message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serializa el estado para un dcc.Store"""
        return {
            'medicines': list(self.medicines),
            'regions': list(self.regions),
            'catalog': self.catalog,
            'stock_warnings': self.stock_warnings,
            'chart': self.chart.to_dict() if self.chart is not None else None,
            'selection': self.selection.to_dict(),
            'table_medicine': self.table_medicine,
            'current_page': self.current_page,
            'is_loading': self.is_loading,
            'is_refreshing': self.is_refreshing,
            'last_message': self.last_message,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "DashboardState":
        if not data:
            return cls()
        return cls(
            medicines=tuple(data.get('medicines') or ()),
            regions=tuple(data.get('regions') or ()),
            catalog=dict(data.get('catalog') or {}),
            stock_warnings=dict(data.get('stock_warnings') or {}),
            chart=ChartSeries.from_dict(data.get('chart')),
            selection=SelectionState.from_dict(data.get('selection')),
            table_medicine=data.get('table_medicine') or "",
            current_page=int(data.get('current_page') or 1),
            is_loading=bool(data.get('is_loading', False)),
            is_refreshing=bool(data.get('is_refreshing', False)),
            last_message=data.get('last_message') or "",
        )


def state_changes(anterior: DashboardState, nuevo: DashboardState) -> Dict[str, Any]:
    """Claves serializadas que difieren entre dos estados"""
    previo = anterior.to_dict()
    return {clave: valor for clave, valor in nuevo.to_dict().items() if previo.get(clave) != valor}


@dataclass
class ViewModel:
    """Datos derivados listos para renderizar (no se almacenan)"""
    chart: Optional[ChartSeries]
    table: Optional[TablePage]
    table_medicines: List[str]
    table_medicine: str
    stock_warnings: List[Tuple[str, str]]
    medicines: List[str]
    regions: List[str]
    message: str = ""

    @property
    def has_table(self) -> bool:
        return self.table is not None

    @property
    def has_stock_warnings(self) -> bool:
        return len(self.stock_warnings) > 0


class OrchestratorController:
    """
    Controlador del dashboard.

    Ejemplo de uso:
        controller = OrchestratorController(ForecastRepository())

        state = controller.on_mount(DashboardState())
        state = controller.set_medicine(state, "Paracetamol")
        state = controller.on_submit(state)

        vista = controller.view_model(state)
    """

    def __init__(
        self,
        repository,
        items_per_page: int = ITEMS_PER_PAGE,
        on_state_change: Optional[Callable[[DashboardState], None]] = None,
        max_workers: int = 4
    ):
        """
        Args:
            repository: ForecastRepository (o cualquier objeto con sus operaciones)
            items_per_page: Filas por pagina de la tabla
            on_state_change: Listener de estados intermedios
            max_workers: Hilos para las peticiones concurrentes
        """
        self.repository = repository
        self.items_per_page = items_per_page
        self.on_state_change = on_state_change
        self.max_workers = max_workers
        self._request_ids: Dict[str, int] = {}
        self._lock = threading.Lock()

    def _emit(self, state: DashboardState) -> DashboardState:
        if self.on_state_change is not None:
            self.on_state_change(state)
        return state

    # ------------------------------------------------------------------
    # Ids de peticion
    # ------------------------------------------------------------------

    def begin_request(self, operacion: str) -> int:
        """Emite un nuevo id para la clase de peticion"""
        with self._lock:
            self._request_ids[operacion] = self._request_ids.get(operacion, 0) + 1
            return self._request_ids[operacion]

    def is_latest(self, operacion: str, request_id: int) -> bool:
        with self._lock:
            return self._request_ids.get(operacion, 0) == request_id

    def _vigente(self, operacion: str, request_id: int) -> bool:
        if self.is_latest(operacion, request_id):
            return True
        logger.debug(f"Respuesta obsoleta descartada: {operacion} #{request_id}")
        return False

    # ------------------------------------------------------------------
    # Aplicacion de respuestas
    # ------------------------------------------------------------------

    def apply_medicines(self, state, request_id: int, resultado: RepositoryResult) -> DashboardState:
        if not self._vigente(OP_MEDICINAS, request_id) or not resultado.exito:
            return state
        return replace(state, medicines=tuple(resultado.datos))

    def apply_regions(self, state, request_id: int, resultado: RepositoryResult) -> DashboardState:
        if not self._vigente(OP_REGIONES, request_id) or not resultado.exito:
            return state
        return replace(state, regions=tuple(resultado.datos))

    def apply_catalog(self, state, request_id: int, resultado: RepositoryResult) -> DashboardState:
        """
        Reemplaza el catalogo completo.

        La tabla pasa a mostrar la primera medicina (ninguna si el catalogo
        llega vacio); si eso cambia la medicina, la pagina vuelve a 1. Un
        fallo conserva el catalogo anterior.
        """
        if not self._vigente(OP_CATALOGO, request_id) or not resultado.exito:
            return state

        catalogo = dict(resultado.datos)
        medicina = resultado.default_medicine

        if medicina != state.table_medicine:
            pagina = 1
        else:
            serie = catalogo.get(medicina, {})
            pagina = clamp_page(state.current_page, page_count(len(serie), self.items_per_page))

        return replace(state, catalog=catalogo, table_medicine=medicina, current_page=pagina)

    def apply_stock_warnings(self, state, request_id: int, resultado: RepositoryResult) -> DashboardState:
        if not self._vigente(OP_STOCK, request_id) or not resultado.exito:
            return state
        return replace(state, stock_warnings=dict(resultado.datos))

    def apply_chart(self, state, request_id: int, resultado: RepositoryResult) -> DashboardState:
        """Un fallo conserva el grafico anterior (o ninguno)"""
        if not self._vigente(OP_GRAFICO, request_id) or not resultado.exito:
            return state
        return replace(state, chart=build(resultado.datos))

    # ------------------------------------------------------------------
    # Peticiones concurrentes
    # ------------------------------------------------------------------

    def _fetch_concurrently(
        self,
        state: DashboardState,
        operaciones: Dict[str, Callable[[], RepositoryResult]]
    ) -> DashboardState:
        """
        Lanza las peticiones en paralelo y aplica cada respuesta al terminar.

        Las respuestas se aplican en este hilo, en orden de llegada. El flag
        de carga acompaña solo al catalogo.
        """
        aplicar = {
            OP_MEDICINAS: self.apply_medicines,
            OP_REGIONES: self.apply_regions,
            OP_CATALOGO: self.apply_catalog,
            OP_STOCK: self.apply_stock_warnings,
        }

        ids = {}
        for operacion in operaciones:
            ids[operacion] = self.begin_request(operacion)

        if OP_CATALOGO in operaciones:
            state = self._emit(replace(state, is_loading=True))

        try:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                futures = {executor.submit(fn): op for op, fn in operaciones.items()}

                for future in as_completed(futures):
                    operacion = futures[future]
                    try:
                        resultado = future.result()
                    except Exception as e:
                        logger.error(f"Error en peticion {operacion}: {e}")
                        resultado = RepositoryResult.fallo(operacion, e)

                    state = aplicar[operacion](state, ids[operacion], resultado)
                    if operacion == OP_CATALOGO:
                        state = replace(state, is_loading=False)
                    self._emit(state)
        finally:
            if OP_CATALOGO in operaciones and state.is_loading:
                state = self._emit(replace(state, is_loading=False))

        return state

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def on_mount(self, state: DashboardState) -> DashboardState:
        """Carga inicial: medicinas, regiones, catalogo y advertencias en paralelo"""
        logger.info("Cargando datos iniciales del dashboard")
        return self._fetch_concurrently(state, {
            OP_MEDICINAS: self.repository.list_medicines,
            OP_REGIONES: self.repository.list_regions,
            OP_CATALOGO: self.repository.fetch_catalog,
            OP_STOCK: self.repository.fetch_stock_warnings,
        })

    def on_submit(self, state: DashboardState) -> DashboardState:
        """Envia la seleccion actual y carga la serie del grafico"""
        solicitud = state.selection.submit()
        request_id = self.begin_request(OP_GRAFICO)
        state = self._emit(replace(state, is_loading=True))

        try:
            ack = self.repository.submit_selection(solicitud)
            if ack.exito:
                state = replace(state, last_message=ack.mensaje)
                resultado = self.repository.fetch_series_for_current_selection()
                state = self.apply_chart(state, request_id, resultado)
            else:
                logger.warning(f"Seleccion rechazada o no enviada: {ack.mensaje}")
        finally:
            state = replace(state, is_loading=False)
            self._emit(state)

        return state

    def on_refresh_requested(self, state: DashboardState) -> DashboardState:
        """Pide el recalculo al servidor y vuelve a cargar catalogo y advertencias"""
        state = self._emit(replace(state, is_refreshing=True))

        try:
            ack = self.repository.trigger_server_recompute()
            if ack.exito:
                state = self._fetch_concurrently(state, {
                    OP_CATALOGO: self.repository.fetch_catalog,
                    OP_STOCK: self.repository.fetch_stock_warnings,
                })
            else:
                logger.warning(f"No se pudo recalcular el forecast: {ack.mensaje}")
        finally:
            state = replace(state, is_refreshing=False)
            self._emit(state)

        return state

    def on_table_medicine_changed(self, state: DashboardState, medicina: str) -> DashboardState:
        medicina = medicina or ""
        if medicina == state.table_medicine:
            return state
        return replace(state, table_medicine=medicina, current_page=1)

    def total_pages(self, state: DashboardState) -> int:
        serie = state.catalog.get(state.table_medicine) or {}
        return page_count(len(serie), self.items_per_page)

    def on_page_changed(self, state: DashboardState, pagina: int) -> DashboardState:
        return replace(state, current_page=clamp_page(pagina, self.total_pages(state)))

    def _navegar(self, state: DashboardState, destino) -> DashboardState:
        return replace(state, current_page=destino(state.current_page, self.total_pages(state)))

    def on_first_page(self, state: DashboardState) -> DashboardState:
        return self._navegar(state, first_page)

    def on_prev_page(self, state: DashboardState) -> DashboardState:
        return self._navegar(state, prev_page)

    def on_next_page(self, state: DashboardState) -> DashboardState:
        return self._navegar(state, next_page)

    def on_last_page(self, state: DashboardState) -> DashboardState:
        return self._navegar(state, last_page)

    # Seleccion

    def set_period(self, state: DashboardState, periodo) -> DashboardState:
        return replace(state, selection=state.selection.set_period(periodo))

    def set_medicine(self, state: DashboardState, medicina: str) -> DashboardState:
        return replace(state, selection=state.selection.set_medicine(medicina))

    def set_region(self, state: DashboardState, region: str) -> DashboardState:
        return replace(state, selection=state.selection.set_region(region))

    # ------------------------------------------------------------------
    # Vista
    # ------------------------------------------------------------------

    def view_model(self, state: DashboardState) -> ViewModel:
        serie = state.catalog.get(state.table_medicine) if state.table_medicine else None
        tabla = derive(serie, state.current_page, self.items_per_page) if serie is not None else None

        return ViewModel(
            chart=state.chart,
            table=tabla,
            table_medicines=list(state.catalog.keys()),
            table_medicine=state.table_medicine,
            stock_warnings=list(state.stock_warnings.items()),
            medicines=list(state.medicines),
            regions=list(state.regions),
            message=state.last_message,
        )
