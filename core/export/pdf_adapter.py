#!/usr/bin/env python3
"""
PDF Export Adapter

Converts the intermediate DOCX report to PDF using one of two engines:
1. LibreOffice Headless - high-fidelity, needs a local LibreOffice install
2. ReportLab - pure Python, reads the DOCX paragraphs back with python-docx

engine="auto" picks LibreOffice when it is installed, ReportLab otherwise.

Requirements:
- LibreOffice (optional): apt-get install libreoffice (Linux) or brew install libreoffice (macOS)
"""

import os
import shutil
import subprocess
from pathlib import Path
from typing import Optional, List, Tuple
from xml.sax.saxutils import escape

from docx import Document
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer

from config.constants import BODY_FONT_SIZE_PT, LIBREOFFICE_TIMEOUT_SECONDS
from config.logging_config import get_logger
from core.errors import PDFConversionError

logger = get_logger(__name__)

LIBREOFFICE_CANDIDATES = [
    "soffice",  # In PATH
    "libreoffice",  # In PATH
    "/Applications/LibreOffice.app/Contents/MacOS/soffice",  # macOS
    "/usr/bin/soffice",  # Linux
    "/usr/bin/libreoffice",  # Linux
]

# Unicode-capable font used when present; Helvetica otherwise
DEJAVU_SANS = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"
DEJAVU_SANS_BOLD = "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"


def _get_libreoffice_path() -> Optional[str]:
    """
    Get the path to the LibreOffice executable.

    Returns:
        Path to soffice executable, or None if not found.
    """
    for path in LIBREOFFICE_CANDIDATES:
        if shutil.which(path) or os.path.exists(path):
            return path
    return None


def is_libreoffice_available() -> bool:
    """Check if LibreOffice is installed and available."""
    return _get_libreoffice_path() is not None


def convert_docx_to_pdf_libreoffice(
    docx_path: Path,
    output_pdf_path: Optional[Path] = None,
    timeout: int = LIBREOFFICE_TIMEOUT_SECONDS
) -> Path:
    """
    Convert DOCX to PDF using LibreOffice headless mode.

    Args:
        docx_path: Path to input DOCX file.
        output_pdf_path: Path to output PDF file (optional, next to the DOCX if None).
        timeout: Conversion timeout in seconds.

    Returns:
        Path to generated PDF file.

    Raises:
        PDFConversionError: If conversion fails.
    """
    docx_path = Path(docx_path)
    if not docx_path.exists():
        raise PDFConversionError(f"Input DOCX file not found: {docx_path}")

    soffice = _get_libreoffice_path()
    if not soffice:
        raise PDFConversionError(
            "LibreOffice not found. Install with:\n"
            "  macOS: brew install libreoffice\n"
            "  Linux: apt-get install libreoffice"
        )

    output_pdf_path = Path(output_pdf_path) if output_pdf_path else docx_path.with_suffix(".pdf")

    # LibreOffice writes <stem>.pdf into --outdir; move afterwards if needed
    expected_pdf = docx_path.parent / f"{docx_path.stem}.pdf"

    cmd = [
        soffice,
        "--headless",
        "--convert-to", "pdf",
        "--outdir", str(docx_path.parent),
        str(docx_path)
    ]
    logger.debug(f"Running command: {' '.join(cmd)}")

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout
        )
    except subprocess.TimeoutExpired as e:
        raise PDFConversionError(f"LibreOffice conversion timed out after {timeout}s") from e

    if result.returncode != 0:
        logger.error(f"LibreOffice conversion failed with code {result.returncode}")
        logger.error(f"STDERR: {result.stderr}")
        raise PDFConversionError(
            f"LibreOffice conversion failed: {result.stderr or result.stdout}"
        )

    if not expected_pdf.exists():
        raise PDFConversionError(
            f"PDF file not created at expected location: {expected_pdf}"
        )

    if expected_pdf != output_pdf_path:
        output_pdf_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.move(str(expected_pdf), str(output_pdf_path))

    logger.info(f"PDF created with LibreOffice: {output_pdf_path} ({output_pdf_path.stat().st_size:,} bytes)")
    return output_pdf_path


# =========================================
# REPORTLAB ENGINE
# =========================================

def _register_fonts() -> Tuple[str, str]:
    """Return (regular, bold) font names, registering DejaVu Sans when available."""
    if not (os.path.exists(DEJAVU_SANS) and os.path.exists(DEJAVU_SANS_BOLD)):
        return "Helvetica", "Helvetica-Bold"

    if "ReportSans" not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont("ReportSans", DEJAVU_SANS))
        pdfmetrics.registerFont(TTFont("ReportSans-Bold", DEJAVU_SANS_BOLD))
    return "ReportSans", "ReportSans-Bold"


def _length_pt(length, default: float) -> float:
    return length.pt if length is not None else default


def _numbering_id(paragraph) -> Optional[int]:
    ppr = paragraph._p.pPr
    if ppr is None or ppr.numPr is None or ppr.numPr.numId is None:
        return None
    return ppr.numPr.numId.val


def _paragraph_style(paragraph, regular: str, bold: str, name: str) -> ParagraphStyle:
    """Translate a DOCX paragraph's run/paragraph formatting to a ReportLab style."""
    runs = paragraph.runs
    size = BODY_FONT_SIZE_PT
    if runs and runs[0].font.size is not None:
        size = runs[0].font.size.pt

    style_name = paragraph.style.name if paragraph.style is not None else ""
    is_bold = style_name.startswith("Heading") or any(run.bold for run in runs)
    if style_name == "Heading 1":
        size = max(size, 20)
    elif style_name == "Heading 2":
        size = max(size, 14)

    pf = paragraph.paragraph_format
    line_spacing = pf.line_spacing if isinstance(pf.line_spacing, float) else 1.2

    return ParagraphStyle(
        name=name,
        fontName=bold if is_bold else regular,
        fontSize=size,
        leading=size * line_spacing,
        alignment=TA_LEFT,
        spaceBefore=_length_pt(pf.space_before, 0),
        spaceAfter=_length_pt(pf.space_after, 4),
    )


def _docx_to_flowables(document) -> List:
    regular, bold = _register_fonts()
    flowables = []
    counter = 0
    last_num_id = None

    for index, paragraph in enumerate(document.paragraphs):
        style_name = paragraph.style.name if paragraph.style is not None else ""
        text = paragraph.text

        if style_name != "List Number":
            counter = 0
            last_num_id = None

        if not text.strip():
            flowables.append(Spacer(1, BODY_FONT_SIZE_PT))
            continue

        style = _paragraph_style(paragraph, regular, bold, name=f"p{index}")
        markup = escape(text)

        if style_name == "List Bullet":
            style.leftIndent = 18
            flowables.append(Paragraph(markup, style, bulletText="•"))
        elif style_name == "List Number":
            num_id = _numbering_id(paragraph)
            if num_id != last_num_id:
                counter = 0
                last_num_id = num_id
            counter += 1
            style.leftIndent = 18
            flowables.append(Paragraph(markup, style, bulletText=f"{counter}."))
        else:
            flowables.append(Paragraph(markup, style))

    return flowables


def convert_docx_to_pdf_reportlab(
    docx_path: Path,
    output_pdf_path: Optional[Path] = None,
) -> Path:
    """
    Convert DOCX to PDF with ReportLab.

    Page size and margins come from the DOCX's first section.

    Raises:
        PDFConversionError: If the DOCX cannot be read or the PDF cannot be built.
    """
    docx_path = Path(docx_path)
    if not docx_path.exists():
        raise PDFConversionError(f"Input DOCX file not found: {docx_path}")

    output_pdf_path = Path(output_pdf_path) if output_pdf_path else docx_path.with_suffix(".pdf")

    try:
        document = Document(str(docx_path))
        section = document.sections[0]
        pdf = SimpleDocTemplate(
            str(output_pdf_path),
            pagesize=(section.page_width.pt, section.page_height.pt),
            topMargin=section.top_margin.pt,
            bottomMargin=section.bottom_margin.pt,
            leftMargin=section.left_margin.pt,
            rightMargin=section.right_margin.pt,
            title=document.core_properties.title or docx_path.stem,
        )
        pdf.build(_docx_to_flowables(document))
    except PDFConversionError:
        raise
    except Exception as e:
        raise PDFConversionError(f"ReportLab conversion failed: {e}") from e

    logger.info(f"PDF created with ReportLab: {output_pdf_path} ({output_pdf_path.stat().st_size:,} bytes)")
    return output_pdf_path


def convert_docx_to_pdf(
    docx_path: Path,
    output_pdf_path: Optional[Path] = None,
    engine: str = "auto",
) -> Path:
    """
    Convert DOCX to PDF with the requested engine.

    Args:
        docx_path: Path to input DOCX file.
        output_pdf_path: Path to output PDF file.
        engine: "auto", "libreoffice" or "reportlab".

    Returns:
        Path to generated PDF file.

    Raises:
        PDFConversionError: If conversion fails or the engine is unknown.
    """
    if engine == "auto":
        engine = "libreoffice" if is_libreoffice_available() else "reportlab"
        logger.debug(f"PDF engine auto-selected: {engine}")

    if engine == "libreoffice":
        return convert_docx_to_pdf_libreoffice(docx_path, output_pdf_path)
    if engine == "reportlab":
        return convert_docx_to_pdf_reportlab(docx_path, output_pdf_path)

    raise PDFConversionError(f"Unknown PDF engine: {engine}")
