import math

import pytest

from inventario.data.models import ProductDraft
from inventario.utils.exceptions import DataValidationError, FileValidationError
from inventario.utils.validators import (
    sanitize_string,
    validate_file_extension,
    validate_integer,
    validate_numeric,
    validate_product_draft,
    validate_product_update,
)


def test_product_draft_is_normalized():
    draft = validate_product_draft(ProductDraft(
        name="  Mouse\x00 ", price="25.5", stock=3.0, category="", description=" inalambrico "
    ))
    assert draft.name == "Mouse"
    assert draft.price == 25.5
    assert draft.stock == 3
    assert draft.category == "general"
    assert draft.description == "inalambrico"


def test_product_draft_error_reports_field():
    with pytest.raises(DataValidationError) as exc:
        validate_product_draft(ProductDraft(name="Mouse", price=-1))
    assert exc.value.field == "price"


@pytest.mark.parametrize("valor", [True, None, "abc", math.nan, math.inf])
def test_validate_numeric_rejects_non_numbers(valor):
    with pytest.raises(DataValidationError):
        validate_numeric(valor, "campo")


def test_validate_numeric_bounds():
    assert validate_numeric("3", "campo", min_value=0, max_value=5) == 3.0
    with pytest.raises(DataValidationError):
        validate_numeric(6, "campo", max_value=5)


def test_validate_integer():
    assert validate_integer(4.0, "stock") == 4
    with pytest.raises(DataValidationError):
        validate_integer(4.2, "stock")


def test_product_update_keeps_current_id(product_factory):
    actual = product_factory(pid=1)
    editado = validate_product_update(product_factory(pid=1, name=" Nuevo ", price=0), actual)
    assert editado.id == 1
    assert editado.name == "Nuevo"
    assert editado.price == 0


def test_product_update_rejects_negative_sales(product_factory):
    actual = product_factory(pid=1)
    with pytest.raises(DataValidationError):
        validate_product_update(product_factory(pid=1, sales=(1, 2, 3, 4, 5, -6)), actual)


def test_sanitize_string():
    assert sanitize_string(None) == ""
    assert sanitize_string("  a\tb  ") == "ab"
    assert sanitize_string("x" * 300) == "x" * 255


def test_validate_file_extension():
    assert validate_file_extension("Catalogo.XLSX") == "xlsx"
    assert validate_file_extension("catalogo.csv") == "csv"
    for nombre in ("catalogo.txt", "catalogo.xls", "catalogo", ""):
        with pytest.raises(FileValidationError):
            validate_file_extension(nombre)
