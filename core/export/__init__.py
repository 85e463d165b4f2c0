"""
PDF Export

- pdf_adapter: DOCX -> PDF with LibreOffice headless or ReportLab
- transient: scoped lifetime for intermediate files
"""

from .pdf_adapter import (
    convert_docx_to_pdf,
    convert_docx_to_pdf_libreoffice,
    convert_docx_to_pdf_reportlab,
    is_libreoffice_available,
)
from .transient import TransientFile

__all__ = [
    "convert_docx_to_pdf",
    "convert_docx_to_pdf_libreoffice",
    "convert_docx_to_pdf_reportlab",
    "is_libreoffice_available",
    "TransientFile",
]
