"""
Grid layout planning for tiled pages.
"""

# Standard Library
import math

# local repo modules
import check_tiler.config
import check_tiler.errors


LayoutOptions = check_tiler.config.LayoutOptions
SourcePageSize = check_tiler.config.SourcePageSize
Placement = check_tiler.config.Placement
InvalidLayoutError = check_tiler.errors.InvalidLayoutError

INNER_PADDING = check_tiler.config.INNER_PADDING


#============================================
def compute_working_area(options: LayoutOptions) -> tuple[float, float]:
	"""
	Compute the page area left inside the margins.

	Args:
		options: Layout options.

	Returns:
		Tuple of (working_width, working_height).
	"""
	margin = options.margin
	if not math.isfinite(margin) or margin < 0.0:
		raise InvalidLayoutError(f"Margin must be a finite, non-negative number, got {margin}")
	page_format = options.page_format
	working_width = page_format.width - 2.0 * margin
	working_height = page_format.height - 2.0 * margin
	if working_width <= 0.0 or working_height <= 0.0:
		raise InvalidLayoutError(
			f"Margin {margin} leaves no room on a "
			f"{page_format.width:g}x{page_format.height:g} page"
		)
	return (working_width, working_height)


#============================================
def compute_cell_size(options: LayoutOptions) -> tuple[float, float]:
	"""
	Compute the size of one grid cell.

	Args:
		options: Layout options.

	Returns:
		Tuple of (cell_width, cell_height).
	"""
	grid = options.grid
	if grid.columns < 1 or grid.rows < 1:
		raise InvalidLayoutError(f"Grid must have at least one column and row, got {grid.columns}x{grid.rows}")
	working_width, working_height = compute_working_area(options)
	return (working_width / grid.columns, working_height / grid.rows)


#============================================
def compute_scale(
	source_size: SourcePageSize,
	cell_width: float,
	cell_height: float,
) -> float:
	"""
	Compute the uniform scale that fits the source inside a padded cell.

	Args:
		source_size: Source page size.
		cell_width: Cell width.
		cell_height: Cell height.

	Returns:
		Scale factor.
	"""
	width_ok = math.isfinite(source_size.width) and source_size.width > 0.0
	height_ok = math.isfinite(source_size.height) and source_size.height > 0.0
	if not (width_ok and height_ok):
		raise InvalidLayoutError(
			f"Source page size must be finite and positive, got {source_size.width}x{source_size.height}"
		)
	available_width = cell_width - INNER_PADDING
	available_height = cell_height - INNER_PADDING
	if available_width <= 0.0 or available_height <= 0.0:
		raise InvalidLayoutError(
			f"Cells of {cell_width:.2f}x{cell_height:.2f} are too small for tiles"
		)
	return min(available_width / source_size.width, available_height / source_size.height)


#============================================
def iter_cell_origins(options: LayoutOptions) -> list[tuple[float, float]]:
	"""
	List the bottom-left corner of every cell, top row first.

	Args:
		options: Layout options.

	Returns:
		List of (cell_x, cell_y) in row-major order.
	"""
	cell_width, cell_height = compute_cell_size(options)
	margin = options.margin
	page_height = options.page_format.height
	origins = []
	for row in range(options.grid.rows):
		for col in range(options.grid.columns):
			cell_x = margin + col * cell_width
			# PDF origin is bottom-left, row 0 is the top row
			cell_y = page_height - margin - (row + 1) * cell_height
			origins.append((cell_x, cell_y))
	return origins


#============================================
def plan_placements(source_size: SourcePageSize, options: LayoutOptions) -> list[Placement]:
	"""
	Plan where each tile copy goes on the output page.

	Every tile is scaled by the same factor to fit its cell minus the
	inner padding, then centered in the cell.

	Args:
		source_size: Intrinsic size of the source page.
		options: Layout options.

	Returns:
		Placements in row-major order, top row first.
	"""
	cell_width, cell_height = compute_cell_size(options)
	scale = compute_scale(source_size, cell_width, cell_height)
	scaled_width = source_size.width * scale
	scaled_height = source_size.height * scale
	offset_x = (cell_width - scaled_width) / 2.0
	offset_y = (cell_height - scaled_height) / 2.0

	placements = []
	for cell_x, cell_y in iter_cell_origins(options):
		placements.append(
			Placement(
				x=cell_x + offset_x,
				y=cell_y + offset_y,
				scaled_width=scaled_width,
				scaled_height=scaled_height,
			)
		)
	return placements
