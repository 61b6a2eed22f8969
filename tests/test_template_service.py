from __future__ import annotations

import unittest

from app.domain.data_source import RecordKind
from app.domain.errors import UnsupportedTemplateError
from app.services.template_service import generate_template, template_file_name


class TestTemplateService(unittest.TestCase):
    def test_product_template_shape(self) -> None:
        lines = generate_template(RecordKind.PRODUCT).split("\n")

        self.assertEqual(len(lines), 4)
        self.assertEqual(
            lines[0],
            "sku,name,category,subcategory,brand,price,cost,inventory_level,launch_date",
        )
        self.assertTrue(all(len(line.split(",")) == 9 for line in lines))

    def test_sales_template_uses_schema_headers(self) -> None:
        header = generate_template(RecordKind.SALES).split("\n")[0]

        self.assertEqual(header, "sku,date,unitsSold,revenue,channel,region")

    def test_no_trailing_newline(self) -> None:
        self.assertFalse(generate_template(RecordKind.SALES).endswith("\n"))

    def test_generic_has_no_template(self) -> None:
        with self.assertRaises(UnsupportedTemplateError):
            generate_template(RecordKind.GENERIC)

    def test_template_file_names(self) -> None:
        self.assertEqual(template_file_name(RecordKind.PRODUCT), "product_template.csv")
        self.assertEqual(template_file_name(RecordKind.SALES), "sales_template.csv")


if __name__ == "__main__":
    unittest.main()
