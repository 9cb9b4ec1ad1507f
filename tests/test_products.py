"""Tests de normalización de productos."""

import math

import pytest

from loaders.models import Product
from loaders.products import normalize_product, normalize_products, to_number


class TestToNumber:

    def test_numeric_string(self):
        assert to_number("5000") == 5000
        assert to_number(" 12.5 ") == 12.5

    def test_blank_string_is_zero(self):
        assert to_number("") == 0
        assert to_number("   ") == 0

    def test_invalid_string_is_nan(self):
        assert math.isnan(to_number("abc"))

    def test_numbers_pass_through(self):
        assert to_number(7) == 7
        assert to_number(3.5) == 3.5

    def test_booleans(self):
        assert to_number(True) == 1
        assert to_number(False) == 0

    def test_other_types_are_nan(self):
        assert math.isnan(to_number({"a": 1}))

    @pytest.mark.parametrize("text", ["1_000", "inf", "-infinity", "nan", "NaN", "\u0663"])
    def test_non_decimal_spellings_are_nan(self, text):
        assert math.isnan(to_number(text))

    def test_infinity_literal(self):
        assert to_number("Infinity") == math.inf
        assert to_number("-Infinity") == -math.inf


class TestNormalizeProduct:

    def test_example_record(self):
        raw = {
            "codigo_producto": "P1",
            "nombre_producto": "Torta",
            "precio_producto": "5000",
            "categoria": {"nombre": "Tortas Cuadradas"},
        }

        product = normalize_product(raw)

        assert product == Product(
            code="P1",
            product_name="Torta",
            price=5000,
            img="",
            category="tortas-cuadradas",
            desc="",
            stock=0,
            stock_critico=0,
        )

    def test_empty_record_uses_defaults(self):
        product = normalize_product({})

        assert product.code == ""
        assert product.product_name == "Sin nombre"
        assert product.price == 0
        assert product.img == ""
        assert product.desc == ""
        assert product.stock == 0
        assert product.stock_critico == 0
        assert product.category == "sin-categoria"

    @pytest.mark.parametrize("raw", [None, [], "texto", 42])
    def test_non_mapping_input(self, raw):
        product = normalize_product(raw)
        assert product.product_name == "Sin nombre"
        assert product.category == "sin-categoria"

    def test_english_aliases(self):
        raw = {
            "code": 10,
            "productName": "Pie de Limón",
            "price": 4500,
            "img": "/img/pie.jpg",
            "desc": "Ácido",
            "stock": "8",
            "stockCritico": 2,
            "category": "Pasteles",
        }

        product = normalize_product(raw)

        assert product.code == "10"
        assert product.product_name == "Pie de Limón"
        assert product.price == 4500
        assert product.img == "/img/pie.jpg"
        assert product.desc == "Ácido"
        assert product.stock == 8
        assert product.stock_critico == 2
        assert product.category == "pasteles"

    def test_first_non_null_alias_wins(self):
        raw = {"codigo_producto": None, "code": "", "id": 99}
        # "" no es nulo, así que gana sobre id
        assert normalize_product(raw).code == ""

        raw = {"codigo_producto": None, "code": None, "id": 99}
        assert normalize_product(raw).code == "99"

    def test_accented_description_alias(self):
        raw = {"descripción_producto": "con tilde", "descripcion_producto": "sin tilde"}
        assert normalize_product(raw).desc == "con tilde"

    def test_invalid_price_is_nan(self):
        product = normalize_product({"precio_producto": "gratis"})
        assert isinstance(product.price, float)
        assert math.isnan(product.price)

    def test_flat_category_aliases(self):
        assert normalize_product({"nombre_categoria": "Tortas Especiales"}).category == (
            "tortas-especiales"
        )
        assert normalize_product({"categoria": "Postres Individuales"}).category == (
            "postres-individuales"
        )

    def test_category_that_slugifies_to_empty(self):
        assert normalize_product({"categoria": "???"}).category == ""

    def test_nested_category_without_name_falls_back(self):
        raw = {"categoria": {"id": 3}, "category": "Sin Gluten"}
        assert normalize_product(raw).category == "sin-gluten"

    def test_fields_never_none(self):
        raw = {key: None for key in ("codigo_producto", "precio_producto", "stock", "img")}
        product = normalize_product(raw)
        assert all(value is not None for value in product.to_dict().values())
        assert not isinstance(product.price, str)
        assert not isinstance(product.stock, str)


class TestNormalizeProducts:

    def test_preserves_order(self):
        products = normalize_products([{"code": "A"}, {"code": "B"}, {"code": "C"}])
        assert [p.code for p in products] == ["A", "B", "C"]

    def test_none_payload(self):
        assert normalize_products(None) == []

    def test_non_list_payload(self):
        assert normalize_products({"productos": []}) == []
