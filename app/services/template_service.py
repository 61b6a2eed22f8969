"""
app/services/template_service.py

Example CSV templates users can download and fill in before uploading.
"""

from __future__ import annotations

from app.domain.data_source import RecordKind
from app.domain.errors import UnsupportedTemplateError
from app.parsers.delimited import DELIMITER

_PRODUCT_TEMPLATE: tuple[tuple[str, ...], ...] = (
    ("sku", "name", "category", "subcategory", "brand", "price", "cost", "inventory_level", "launch_date"),
    ("ELEC-001", "Wireless Headphones", "Electronics", "Audio", "TechBrand", "99.99", "45.00", "150", "2024-01-15"),
    ("APPR-001", "Cotton T-Shirt", "Apparel", "Shirts", "FashionCo", "24.99", "12.50", "300", "2024-02-01"),
    ("HOME-001", "Coffee Maker", "Home & Garden", "Kitchen", "HomePlus", "149.99", "75.00", "75", "2024-01-20"),
)

# unitsSold matches the sales schema so the template validates as-is.
_SALES_TEMPLATE: tuple[tuple[str, ...], ...] = (
    ("sku", "date", "unitsSold", "revenue", "channel", "region"),
    ("ELEC-001", "2024-01-15", "5", "499.95", "online", "North America"),
    ("APPR-001", "2024-01-16", "12", "299.88", "retail", "Europe"),
    ("HOME-001", "2024-01-17", "3", "449.97", "online", "Asia Pacific"),
)

TEMPLATES_BY_KIND: dict[str, tuple[tuple[str, ...], ...]] = {
    RecordKind.PRODUCT: _PRODUCT_TEMPLATE,
    RecordKind.SALES: _SALES_TEMPLATE,
}


def generate_template(kind: str) -> str:
    """
    Render the header row and sample rows for a record kind as CSV text.
    """

    rows = TEMPLATES_BY_KIND.get(kind)
    if rows is None:
        raise UnsupportedTemplateError(f"No template available for record kind '{kind}'.")
    return "\n".join(DELIMITER.join(row) for row in rows)


def template_file_name(kind: str) -> str:
    if kind not in TEMPLATES_BY_KIND:
        raise UnsupportedTemplateError(f"No template available for record kind '{kind}'.")
    return f"{kind}_template.csv"
