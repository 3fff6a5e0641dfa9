# tests/test_pagination.py
# Pagina visible de la tabla de forecast.

import pytest

from medforecast.core.pagination import (
    derive,
    page_count,
    clamp_page,
    first_page,
    prev_page,
    next_page,
    last_page,
)


@pytest.mark.parametrize("n_items, esperado", [
    (0, 1),
    (1, 1),
    (10, 1),
    (11, 2),
    (25, 3),
])
def test_page_count(n_items, esperado):
    assert page_count(n_items, 10) == esperado


def test_page_count_rejects_non_positive_size():
    with pytest.raises(ValueError):
        page_count(5, 0)


def test_clamp_page():
    assert clamp_page(0, 3) == 1
    assert clamp_page(-4, 3) == 1
    assert clamp_page(7, 3) == 3
    assert clamp_page(2, 3) == 2
    assert clamp_page(5, 0) == 1


def test_navigation_is_noop_at_edges():
    assert prev_page(1, 3) == 1
    assert next_page(3, 3) == 3
    assert first_page(2, 3) == 1
    assert last_page(1, 3) == 3
    assert next_page(1, 1) == 1


def test_paracetamol_single_page(paracetamol_catalog):
    tabla = derive(paracetamol_catalog["Paracetamol"], 1, 10)

    assert tabla.page == 1
    assert tabla.page_count == 1
    assert tabla.rows == [
        {"date": "January 1, 2024", "value": "10.50"},
        {"date": "February 1, 2024", "value": "20.25"},
    ]
    assert not tabla.has_prev
    assert not tabla.has_next


def test_rows_keep_service_order():
    serie = {"2024-03-01": 3, "2024-01-01": 1, "2024-02-01": 2}
    fechas = [fila["date"] for fila in derive(serie, 1, 10).rows]
    assert fechas == ["March 1, 2024", "January 1, 2024", "February 1, 2024"]


def test_middle_and_last_page(large_catalog):
    serie = large_catalog["Amoxicillin"]

    segunda = derive(serie, 2, 10)
    assert len(segunda.rows) == 10
    assert segunda.rows[0]["value"] == "11.00"
    assert segunda.has_prev and segunda.has_next

    ultima = derive(serie, 3, 10)
    assert len(ultima.rows) == 5
    assert ultima.has_prev and not ultima.has_next


def test_out_of_range_page_is_clamped(large_catalog):
    tabla = derive(large_catalog["Amoxicillin"], 99, 10)
    assert tabla.page == 3


def test_empty_series_has_one_empty_page():
    tabla = derive({}, 1, 10)
    assert tabla.rows == []
    assert tabla.page_count == 1
