# tests/test_forecast_repository.py
# Cliente HTTP del servicio de forecast contra una sesion en memoria.

from conftest import FakeResponse, FakeSession
from medforecast.core.selection import SelectionState
from medforecast.services.forecast_repository import ForecastRepository


def _repo(settings, rutas):
    sesion = FakeSession(rutas)
    return ForecastRepository(settings, session=sesion), sesion


def test_list_medicines(settings, url):
    repo, sesion = _repo(settings, {
        ("GET", url("/medicines")): FakeResponse(["Paracetamol", "Ibuprofen"]),
    })

    resultado = repo.list_medicines()

    assert resultado.exito
    assert resultado.datos == ["Paracetamol", "Ibuprofen"]
    assert sesion.llamadas[0]["url"] == "http://forecast.test/api/medicines"
    assert sesion.llamadas[0]["timeout"] == 5.0


def test_list_regions(settings, url):
    repo, _ = _repo(settings, {("GET", url("/states")): FakeResponse(["Lagos"])})
    resultado = repo.list_regions()
    assert resultado.exito
    assert resultado.datos == ["Lagos"]


def test_list_medicines_rejects_non_list(settings, url):
    repo, _ = _repo(settings, {("GET", url("/medicines")): FakeResponse({"a": 1})})
    resultado = repo.list_medicines()
    assert not resultado.exito
    assert resultado.error_tipo == "ShapeMismatchError"


def test_fetch_catalog_uses_first_element(settings, url, paracetamol_catalog):
    repo, _ = _repo(settings, {
        ("GET", url("/all_forecasts")): FakeResponse([
            {"forecasts": paracetamol_catalog},
            {"forecasts": {"Ignored": {}}},
        ]),
    })

    resultado = repo.fetch_catalog()

    assert resultado.exito
    assert resultado.datos == paracetamol_catalog
    assert resultado.default_medicine == "Paracetamol"


def test_fetch_catalog_empty_array(settings, url):
    repo, _ = _repo(settings, {("GET", url("/all_forecasts")): FakeResponse([])})

    resultado = repo.fetch_catalog()

    assert not resultado.exito
    assert resultado.error_tipo == "ShapeMismatchError"
    assert resultado.default_medicine == ""


def test_fetch_catalog_without_forecasts_key(settings, url):
    repo, _ = _repo(settings, {("GET", url("/all_forecasts")): FakeResponse([{"data": {}}])})
    assert repo.fetch_catalog().error_tipo == "ShapeMismatchError"


def test_fetch_catalog_rejects_non_numeric_values(settings, url):
    repo, _ = _repo(settings, {
        ("GET", url("/all_forecasts")): FakeResponse([{"forecasts": {"X": {"2024-01-01": "n/a"}}}]),
    })
    assert repo.fetch_catalog().error_tipo == "ShapeMismatchError"


def test_fetch_stock_warnings(settings, url):
    repo, _ = _repo(settings, {
        ("GET", url("/stock")): FakeResponse({"Paracetamol": "Stock below 20 units"}),
    })
    resultado = repo.fetch_stock_warnings()
    assert resultado.exito
    assert resultado.datos == {"Paracetamol": "Stock below 20 units"}


def test_fetch_series_for_current_selection(settings, url):
    repo, _ = _repo(settings, {
        ("GET", url("/forecast")): FakeResponse({"2024-01-01 00:00:00": 12, "2024-02-01 00:00:00": 8.5}),
    })
    resultado = repo.fetch_series_for_current_selection()
    assert resultado.exito
    assert list(resultado.datos) == ["2024-01-01 00:00:00", "2024-02-01 00:00:00"]


def test_non_2xx_is_network_failure(settings, url):
    repo, _ = _repo(settings, {("GET", url("/stock")): FakeResponse(status_code=500)})

    resultado = repo.fetch_stock_warnings()

    assert not resultado.exito
    assert resultado.error_tipo == "NetworkFailureError"
    assert "500" in resultado.mensaje


def test_connection_error_is_network_failure(settings, url, connection_error):
    repo, _ = _repo(settings, {("GET", url("/medicines")): connection_error})

    resultado = repo.list_medicines()

    assert not resultado.exito
    assert resultado.error_tipo == "NetworkFailureError"


def test_invalid_json_is_shape_mismatch(settings, url):
    repo, _ = _repo(settings, {("GET", url("/forecast")): FakeResponse(text="<html>")})
    assert repo.fetch_series_for_current_selection().error_tipo == "ShapeMismatchError"


def test_submit_selection_posts_payload(settings, url):
    repo, sesion = _repo(settings, {
        ("POST", url("/selection")): FakeResponse({"message": "Selection saved"}),
    })
    solicitud = SelectionState().set_period("monthly").set_medicine("Paracetamol").submit()

    resultado = repo.submit_selection(solicitud)

    assert resultado.exito
    assert resultado.mensaje == "Selection saved"
    assert sesion.llamadas[0]["method"] == "POST"
    assert sesion.llamadas[0]["json"] == {"time": "monthly", "medicine": "Paracetamol", "state": ""}


def test_submit_empty_selection_is_still_sent(settings, url):
    repo, sesion = _repo(settings, {("POST", url("/selection")): FakeResponse({"message": "ok"})})

    repo.submit_selection(SelectionState().submit())

    assert sesion.llamadas[0]["json"] == {"time": "", "medicine": "", "state": ""}


def test_recompute_accepts_non_json_body(settings, url):
    repo, _ = _repo(settings, {
        ("GET", url("/all_forecast_post")): FakeResponse(text="Forecasts updated"),
    })
    resultado = repo.trigger_server_recompute()
    assert resultado.exito
    assert resultado.datos == "Forecasts updated"
