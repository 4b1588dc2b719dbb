"""
Compose a tiled output page from the first page of a source PDF.
"""

# Standard Library
import dataclasses

# local repo modules
import check_tiler.config
import check_tiler.document
import check_tiler.errors
import check_tiler.layout
import check_tiler.render


LayoutOptions = check_tiler.config.LayoutOptions
Placement = check_tiler.config.Placement
SourcePageSize = check_tiler.config.SourcePageSize
EmptySourceError = check_tiler.errors.EmptySourceError
CompositionError = check_tiler.errors.CompositionError

COLLABORATOR_ERRORS = check_tiler.document.COLLABORATOR_ERRORS


@dataclasses.dataclass(frozen=True)
class ComposeResult:
	data: bytes
	source_size: SourcePageSize
	source_page_count: int
	plan: list[Placement]


#============================================
def compose_tiled_pdf_with_plan(
	source_bytes: bytes,
	options: LayoutOptions,
	draw_guides: bool = False,
) -> ComposeResult:
	"""
	Tile the first page of a source PDF onto one output page.

	The source page is embedded once and drawn at every placement.
	Pages after the first are ignored.

	Args:
		source_bytes: Source PDF bytes.
		options: Layout options.
		draw_guides: Draw cell cut guides under the tiles.

	Returns:
		ComposeResult with the output bytes and the plan that was drawn.
	"""
	reader = check_tiler.document.load_document(source_bytes)
	source_page_count = check_tiler.document.page_count(reader)
	if source_page_count == 0:
		raise EmptySourceError()
	source_page = reader.pages[0]
	source_size = check_tiler.document.read_page_size(source_page)

	try:
		writer = check_tiler.document.create_document()
		page = check_tiler.document.add_output_page(writer, options.page_format)
		embedded = check_tiler.document.embed_page(writer, source_page)
	except COLLABORATOR_ERRORS as error:
		raise CompositionError(f"Failed to embed the source page: {error}") from error

	plan = check_tiler.layout.plan_placements(embedded.intrinsic_size(), options)

	try:
		operations = [check_tiler.document.draw_embedded(embedded, placement) for placement in plan]
		check_tiler.document.write_page_contents(page, embedded, operations)
		if draw_guides:
			page.merge_page(check_tiler.render.build_guide_overlay(options), over=False)
		data = check_tiler.document.serialize(writer)
	except COLLABORATOR_ERRORS as error:
		raise CompositionError(f"Failed to write the tiled PDF: {error}") from error

	return ComposeResult(
		data=data,
		source_size=source_size,
		source_page_count=source_page_count,
		plan=plan,
	)


#============================================
def compose_tiled_pdf(
	source_bytes: bytes,
	options: LayoutOptions,
	draw_guides: bool = False,
) -> bytes:
	"""
	Tile the first page of a source PDF and return the output PDF bytes.

	Args:
		source_bytes: Source PDF bytes.
		options: Layout options.
		draw_guides: Draw cell cut guides under the tiles.

	Returns:
		Output PDF bytes.
	"""
	result = compose_tiled_pdf_with_plan(source_bytes, options, draw_guides)
	return result.data
