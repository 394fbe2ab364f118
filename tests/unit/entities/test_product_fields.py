"""Unit tests for product field parsing and gallery resolution."""

import pytest

from src.storefront.core.exceptions import ValidationError
from src.storefront.entities.product import (
    Product,
    ProductFields,
    parse_deleted_image_ids,
    resolve_gallery,
)
from src.storefront.entities.product_image import ProductImage


class TestProductFields:
    def test_arabic_fields_default_to_base_language(self):
        fields = ProductFields.from_form(
            {"name": "  Shirt ", "description": "Cotton", "price": "100"}
        )

        assert fields.name == "Shirt"
        assert fields.name_ar == "Shirt"
        assert fields.description_ar == "Cotton"

    def test_explicit_arabic_fields_are_kept(self):
        fields = ProductFields.from_form(
            {"name": "Shirt", "name_ar": "قميص", "description_ar": "قطن", "price": "1"}
        )

        assert fields.name_ar == "قميص"
        assert fields.description_ar == "قطن"

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_name_is_required(self, name):
        with pytest.raises(ValidationError, match="name"):
            ProductFields.from_form({"name": name, "price": "10"})

    @pytest.mark.parametrize("price", [None, "", "abc", "0", "-5", "nan", "inf"])
    def test_price_must_be_positive_number(self, price):
        with pytest.raises(ValidationError, match="Price"):
            ProductFields.from_form({"name": "Shirt", "price": price})

    @pytest.mark.parametrize(
        ("discount", "expected"),
        [("80", 80.0), ("99.99", 99.99), ("100", None), ("150", None), ("0", None), ("-1", None), ("cheap", None), ("", None)],
    )
    def test_discount_price_kept_only_when_below_price(self, discount, expected):
        fields = ProductFields.from_form({"name": "Shirt", "price": "100", "discount_price": discount})

        assert fields.discount_price == expected

    def test_discount_percentage_is_optional(self):
        assert ProductFields.from_form({"name": "S", "price": "1"}).discount_percentage is None
        assert ProductFields.from_form({"name": "S", "price": "1", "discount_percentage": "0"}).discount_percentage == 0.0
        assert ProductFields.from_form({"name": "S", "price": "1", "discount_percentage": "20"}).discount_percentage == 20.0

    def test_non_numeric_discount_percentage_is_rejected(self):
        with pytest.raises(ValidationError, match="percentage"):
            ProductFields.from_form({"name": "S", "price": "1", "discount_percentage": "lots"})


class TestParseDeletedImageIds:
    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_blank_means_nothing_to_delete(self, raw):
        assert parse_deleted_image_ids(raw) == []

    def test_accepts_ints_and_digit_strings(self):
        assert parse_deleted_image_ids('[3, "7", 12]') == [3, 7, 12]

    @pytest.mark.parametrize("raw", ["not json", "{}", "5", "[true]", "[1.5]", '["x"]', "[null]"])
    def test_rejects_malformed_values(self, raw):
        with pytest.raises(ValidationError):
            parse_deleted_image_ids(raw)


class TestResolveGallery:
    def test_gallery_wins_over_legacy_image(self):
        product = Product(id=1, name="S", price=1, image="/uploads/legacy.png")
        gallery = [ProductImage(id=5, product_id=1, image_path="/uploads/a.png", display_order=0)]

        assert resolve_gallery(product, gallery) == gallery

    def test_legacy_image_synthesizes_single_entry(self):
        product = Product(id=1, name="S", price=1, image="/uploads/legacy.png")

        (image,) = resolve_gallery(product, [])

        assert image.id == 0
        assert image.image_path == "/uploads/legacy.png"
        assert image.display_order == 0

    @pytest.mark.parametrize("legacy", [None, ""])
    def test_no_images_at_all(self, legacy):
        product = Product(id=1, name="S", price=1, image=legacy)

        assert resolve_gallery(product, []) == []
