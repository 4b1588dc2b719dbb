"""
Cut-guide overlays and layout manifests.
"""

# Standard Library
import io
import json
import pathlib

# PIP3 modules
import pypdf
import reportlab.pdfgen.canvas

# local repo modules
import check_tiler.config
import check_tiler.layout


LayoutOptions = check_tiler.config.LayoutOptions
Placement = check_tiler.config.Placement
SourcePageSize = check_tiler.config.SourcePageSize

GUIDE_LINE_WIDTH = check_tiler.config.GUIDE_LINE_WIDTH
GUIDE_GRAY = check_tiler.config.GUIDE_GRAY
INNER_PADDING = check_tiler.config.INNER_PADDING


#============================================
def draw_cell_outlines(pdf: reportlab.pdfgen.canvas.Canvas, options: LayoutOptions) -> None:
	"""
	Draw an outline around every grid cell on the current page.

	Args:
		pdf: ReportLab canvas.
		options: Layout options.
	"""
	cell_width, cell_height = check_tiler.layout.compute_cell_size(options)
	pdf.setLineWidth(GUIDE_LINE_WIDTH)
	pdf.setStrokeColorRGB(GUIDE_GRAY, GUIDE_GRAY, GUIDE_GRAY)
	for cell_x, cell_y in check_tiler.layout.iter_cell_origins(options):
		pdf.rect(cell_x, cell_y, cell_width, cell_height, stroke=1, fill=0)


#============================================
def build_guide_overlay(options: LayoutOptions) -> pypdf.PageObject:
	"""
	Build a PDF overlay page with cell cut guides.

	Args:
		options: Layout options.

	Returns:
		PDF page object.
	"""
	buffer = io.BytesIO()
	page_format = options.page_format
	pdf = reportlab.pdfgen.canvas.Canvas(buffer, pagesize=(page_format.width, page_format.height))
	draw_cell_outlines(pdf, options)
	pdf.save()
	buffer.seek(0)
	reader = pypdf.PdfReader(buffer)
	return reader.pages[0]


#============================================
def build_manifest(
	source_name: str,
	source_size: SourcePageSize,
	source_page_count: int,
	plan: list[Placement],
	options: LayoutOptions,
) -> dict:
	"""
	Describe a composed layout as a JSON-ready dict.

	Args:
		source_name: Source file name.
		source_size: Intrinsic size of the tiled page.
		source_page_count: Pages in the source document.
		plan: Placements drawn on the output page.
		options: Layout options.

	Returns:
		Manifest dict.
	"""
	page_format = options.page_format
	return {
		"source": source_name,
		"source_pages": source_page_count,
		"source_size": {
			"width": source_size.width,
			"height": source_size.height,
		},
		"layout": {
			"page_format": page_format.name,
			"page_width": page_format.width,
			"page_height": page_format.height,
			"columns": options.grid.columns,
			"rows": options.grid.rows,
			"margin": options.margin,
			"inner_padding": INNER_PADDING,
		},
		"placements": [
			{
				"x": placement.x,
				"y": placement.y,
				"width": placement.scaled_width,
				"height": placement.scaled_height,
			}
			for placement in plan
		],
	}


#============================================
def write_manifest(manifest_path: pathlib.Path, manifest: dict) -> None:
	"""
	Write a manifest JSON file.

	Args:
		manifest_path: Output path.
		manifest: Manifest from build_manifest.
	"""
	with manifest_path.open("w", encoding="utf-8") as handle:
		json.dump(manifest, handle, indent=2, sort_keys=True)
