"""
Pytest configuration for local imports and source PDF fixtures.
"""

# Standard Library
import io
import os
import sys

# PIP3 modules
import fitz
import PIL.Image
import pypdf
import pytest
import reportlab.pdfgen.canvas

#============================================


def _ensure_repo_on_path() -> None:
	"""
	Ensure the repository root is on sys.path.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


_ensure_repo_on_path()


#============================================
def build_source_pdf(width: float, height: float, pages: int = 1) -> bytes:
	"""
	Build a source PDF whose pages are filled solid black.

	Args:
		width: Page width in points.
		height: Page height in points.
		pages: Number of pages.

	Returns:
		PDF bytes.
	"""
	buffer = io.BytesIO()
	pdf = reportlab.pdfgen.canvas.Canvas(buffer, pagesize=(width, height))
	for _ in range(pages):
		pdf.setFillColorRGB(0.0, 0.0, 0.0)
		pdf.rect(0, 0, width, height, stroke=0, fill=1)
		pdf.showPage()
	pdf.save()
	return buffer.getvalue()


#============================================
def build_empty_pdf() -> bytes:
	"""
	Build a structurally valid PDF with zero pages.
	"""
	buffer = io.BytesIO()
	pypdf.PdfWriter().write(buffer)
	return buffer.getvalue()


#============================================
def rasterize_page(data: bytes, dpi: int = 72) -> PIL.Image.Image:
	"""
	Rasterize the first page of a PDF into a grayscale image.

	Args:
		data: PDF bytes.
		dpi: Output resolution; 72 keeps one pixel per point.

	Returns:
		Grayscale PIL image, top row first.
	"""
	with fitz.open(stream=data, filetype="pdf") as document:
		zoom = dpi / 72.0
		pixmap = document[0].get_pixmap(matrix=fitz.Matrix(zoom, zoom), alpha=False)
		rgb = PIL.Image.frombytes("RGB", (pixmap.width, pixmap.height), pixmap.samples)
	return rgb.convert("L")


#============================================
def dark_fraction(image: PIL.Image.Image, box: tuple[int, int, int, int], threshold: int = 240) -> float:
	"""
	Share of pixels in a box darker than the threshold.

	Args:
		image: Grayscale image.
		box: Pixel box (left, top, right, bottom).
		threshold: Gray level below which a pixel counts as dark.

	Returns:
		Fraction between 0 and 1.
	"""
	histogram = image.crop(box).histogram()
	total = sum(histogram)
	if total == 0:
		return 0.0
	return sum(histogram[:threshold]) / total


@pytest.fixture
def check_pdf() -> bytes:
	return build_source_pdf(200.0, 100.0)


@pytest.fixture
def empty_pdf() -> bytes:
	return build_empty_pdf()
