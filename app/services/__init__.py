"""
app/services package marker.
"""

from app.services.data_import_service import DataImportService, get_data_import_service
from app.services.template_service import generate_template, template_file_name
from app.services.validation_report import build_validation_report

__all__ = [
    "DataImportService",
    "build_validation_report",
    "generate_template",
    "get_data_import_service",
    "template_file_name",
]
