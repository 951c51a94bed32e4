import base64
import io

import pandas as pd
import pytest

from inventario.data.catalog_loader import (
    cargar_catalogo_desde_upload,
    dataframe_a_productos,
    load_seed_catalog,
    parsear_ventana,
)


def _upload(texto: str, mime: str = "text/csv") -> str:
    return f"data:{mime};base64," + base64.b64encode(texto.encode("utf-8")).decode("ascii")


CSV_VALIDO = (
    "id,name,price,stock,category,sales_data\n"
    "1,Laptop,1299.99,45,electronics,12;15;18;22;25;28\n"
    "2,Mouse,25,10,,1;2;3;4;5;6\n"
)


def test_seed_catalog(now):
    catalogo = load_seed_catalog(now=now)
    assert [p.id for p in catalogo] == [1, 2, 3, 4, 5]
    assert catalogo[0].name == "Premium Laptop"
    assert catalogo[0].sales_data == (12, 15, 18, 22, 25, 28)
    assert catalogo[2].category == "clothing"
    assert all(p.last_updated == now for p in catalogo)
    assert all(len(p.sales_data) == 6 for p in catalogo)


def test_upload_csv():
    resultado = cargar_catalogo_desde_upload(_upload(CSV_VALIDO), "catalogo.csv")

    assert resultado["success"] is True
    assert resultado["errores"] == []
    laptop, mouse = resultado["productos"]
    assert laptop.sales_data == (12, 15, 18, 22, 25, 28)
    assert laptop.price == pytest.approx(1299.99)
    assert mouse.category == "general"
    assert mouse.stock == 10


def test_upload_excel():
    df = pd.DataFrame([
        {"ID": 7, "Name": "Yoga Mat", "Price": 49.99, "Stock": 200,
         "Category": "sports", "sales_data": "15;20;25;30;35;40"},
    ])
    buffer = io.BytesIO()
    df.to_excel(buffer, index=False)
    contenido = "data:application/vnd.ms-excel;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")

    resultado = cargar_catalogo_desde_upload(contenido, "catalogo.xlsx")

    assert resultado["success"] is True
    [producto] = resultado["productos"]
    assert producto.id == 7
    assert producto.sales_data == (15, 20, 25, 30, 35, 40)


def test_upload_reports_invalid_rows():
    csv = (
        "id,name,price,stock,sales_data\n"
        "1,Laptop,10,5,1;2;3;4;5;6\n"
        "1,Duplicado,10,5,1;2;3;4;5;6\n"
        "2,Corto,10,5,1;2;3\n"
        "3,Negativo,10,-5,1;2;3;4;5;6\n"
        "4,,10,5,1;2;3;4;5;6\n"
        "5.7,Fraccion,10,5,1;2;3;4;5;6\n"
        "6,Mouse,10,2.9,1;2;3;4;5;6\n"
    )
    resultado = cargar_catalogo_desde_upload(_upload(csv), "catalogo.csv")

    assert resultado["success"] is False
    assert len(resultado["productos"]) == 1
    errores = resultado["errores"]
    assert len(errores) == 6
    assert errores[0].startswith("Fila 3:")
    assert errores[1].startswith("Fila 4:")
    assert "6 periodos" in errores[1]
    assert errores[4] == "Fila 7: id debe ser entero"
    assert errores[5] == "Fila 8: stock debe ser entero"


def test_upload_missing_columns():
    resultado = cargar_catalogo_desde_upload(_upload("id,name\n1,Laptop\n"), "catalogo.csv")
    assert resultado["success"] is False
    assert resultado["errores"]


def test_upload_without_rows():
    resultado = cargar_catalogo_desde_upload(_upload("id,name,price,stock,sales_data\n"), "catalogo.csv")
    assert resultado["success"] is False
    assert resultado["errores"] == ["El archivo no contiene productos"]


def test_upload_rejects_extension():
    resultado = cargar_catalogo_desde_upload(_upload(CSV_VALIDO), "catalogo.txt")
    assert resultado["success"] is False
    assert resultado["productos"] == []


def test_upload_rejects_undecodable_content():
    resultado = cargar_catalogo_desde_upload("sin-separador", "catalogo.csv")
    assert resultado["success"] is False
    assert resultado["errores"] == ["No se pudo decodificar el archivo"]


def test_parsear_ventana():
    assert parsear_ventana("1;2;3") == (1, 2, 3)
    assert parsear_ventana("1, 2, 3") == (1, 2, 3)
    assert parsear_ventana([4, 5.0]) == (4, 5)
    for invalido in ("1;-2", "1;2.5", "a;b"):
        with pytest.raises(ValueError):
            parsear_ventana(invalido)


def test_dataframe_a_productos_uses_given_timestamp(now):
    df = pd.DataFrame([{"id": 1, "name": "A", "price": 1, "stock": 1, "sales_data": "0;0;0;0;0;0"}])
    productos, errores = dataframe_a_productos(df, now=now)
    assert errores == []
    assert productos[0].last_updated == now
    assert productos[0].category == "general"


def test_upload_rejects_fractional_id_and_stock():
    csv = "id,name,price,stock,sales_data\n1.7,Mouse,10,2.9,1;2;3;4;5;6\n"
    resultado = cargar_catalogo_desde_upload(_upload(csv), "catalogo.csv")
    assert resultado["success"] is False
    assert resultado["productos"] == []
    assert resultado["errores"] == ["Fila 2: id debe ser entero"]


def test_upload_rejects_legacy_excel():
    resultado = cargar_catalogo_desde_upload(_upload(CSV_VALIDO), "catalogo.xls")
    assert resultado["success"] is False
    assert resultado["errores"] == ["Extension '.xls' no permitida"]
