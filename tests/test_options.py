"""Unit tests for the options section parser."""
import logging

import pytest

from prerender.document import Document
from prerender.errors import OptionParseError
from prerender.models import OptionItem, OptionSpec
from prerender.options import parse_option_row, parse_options


def _details(document: Document):
    return document.find_one(".product-details")


class TestParseOptions:
    """Tests for parse_options."""

    def test_one_option_with_two_items(self, product_page):
        options = parse_options(product_page, _details(product_page))

        assert options == [
            OptionSpec(
                id="size",
                label="Size",
                required="true",
                items=[
                    OptionItem(id="s", label="Small", value="s", in_stock="true"),
                    OptionItem(id="l", label="Large", value="l", in_stock="false"),
                ],
            )
        ]

    def test_defaults(self, product_page):
        option = parse_options(product_page, _details(product_page))[0]
        assert option.type == "dropdown"
        assert all(item.selected == "false" for item in option.items)

    def test_no_options_section(self, page_builder):
        document = page_builder(options=False)
        assert parse_options(document, _details(document)) == []

    def test_option_without_items(self):
        document = Document.from_html(
            '<div class="product-details"><div>'
            '<div><h2 id="options">Options</h2></div>'
            "<div><ul><li><p>Engraving</p><p>engraving</p><p>false</p></li></ul></div>"
            "</div></div>"
        )
        options = parse_options(document, _details(document))
        assert len(options) == 1
        assert options[0].items == []

    def test_malformed_row_is_skipped(self, caplog):
        document = Document.from_html(
            '<div class="product-details"><div>'
            '<div><h2 id="options">Options</h2></div>'
            "<div><ul>"
            "<li><p>Color</p><p>color</p></li>"
            "<li><p>Size</p><p>size</p><p>true</p></li>"
            "</ul></div>"
            "</div></div>"
        )
        with caplog.at_level(logging.WARNING):
            options = parse_options(document, _details(document))

        assert [option.id for option in options] == ["size"]
        assert "Opción descartada" in caplog.text


class TestParseOptionRow:
    """Tests for parse_option_row column validation."""

    def test_malformed_item_is_skipped(self, caplog):
        document = Document.from_html(
            "<ul><li><p>Size</p><p>size</p><p>true</p>"
            "<ul>"
            "<li><p>Small</p><p>s</p></li>"
            "<li><p>Large</p><p>l</p><p>true</p></li>"
            "</ul></li></ul>"
        )

        with caplog.at_level(logging.WARNING):
            option = parse_option_row(document, document.find_one("li"))

        assert option.id == "size"
        assert [item.id for item in option.items] == ["l"]
        assert "Valor de opción descartado" in caplog.text

    def test_missing_column_raises(self):
        document = Document.from_html("<ul><li><p>Color</p><p>color</p></li></ul>")
        row = document.find_one("li")

        with pytest.raises(OptionParseError) as exc_info:
            parse_option_row(document, row)
        assert exc_info.value.columns == 2

    def test_extra_columns_are_ignored(self):
        document = Document.from_html(
            "<ul><li><p>Color</p><p>color</p><p>true</p><p>extra</p></li></ul>"
        )
        option = parse_option_row(document, document.find_one("li"))
        assert (option.label, option.id, option.required) == ("Color", "color", "true")
