"""
Shared configuration, constants, and layout value types.
"""

# Standard Library
import dataclasses
import enum

# PIP3 modules
import reportlab.lib.pagesizes


DEFAULT_MARGIN = 18.0
INNER_PADDING = 10.0
DEFAULT_COPIES = 8

GUIDE_LINE_WIDTH = 0.3
GUIDE_GRAY = 0.7

# copies per page -> (columns, rows)
COPIES_TO_GRID = {
	1: (1, 1),
	4: (2, 2),
	8: (2, 4),
	9: (3, 3),
}


class PageLayout(enum.Enum):
	LETTER_PORTRAIT = "letter-portrait"
	LETTER_LANDSCAPE = "letter-landscape"
	A4_PORTRAIT = "a4-portrait"
	A4_LANDSCAPE = "a4-landscape"


DEFAULT_LAYOUT = PageLayout.LETTER_PORTRAIT

_LAYOUT_SIZES = {
	PageLayout.LETTER_PORTRAIT: ("Letter", reportlab.lib.pagesizes.portrait(reportlab.lib.pagesizes.letter)),
	PageLayout.LETTER_LANDSCAPE: ("Letter", reportlab.lib.pagesizes.landscape(reportlab.lib.pagesizes.letter)),
	PageLayout.A4_PORTRAIT: ("A4", reportlab.lib.pagesizes.portrait(reportlab.lib.pagesizes.A4)),
	PageLayout.A4_LANDSCAPE: ("A4", reportlab.lib.pagesizes.landscape(reportlab.lib.pagesizes.A4)),
}


@dataclasses.dataclass(frozen=True)
class PageFormat:
	name: str
	width: float
	height: float


@dataclasses.dataclass(frozen=True)
class GridShape:
	columns: int
	rows: int

	@property
	def tile_count(self) -> int:
		return self.columns * self.rows


@dataclasses.dataclass(frozen=True)
class LayoutOptions:
	page_format: PageFormat
	grid: GridShape
	margin: float = DEFAULT_MARGIN


@dataclasses.dataclass(frozen=True)
class SourcePageSize:
	width: float
	height: float


@dataclasses.dataclass(frozen=True)
class Placement:
	x: float
	y: float
	scaled_width: float
	scaled_height: float


#============================================
def resolve_page_format(layout: PageLayout) -> PageFormat:
	"""
	Resolve a page layout choice into concrete page dimensions.

	Landscape layouts swap the width and height of the base size.

	Args:
		layout: Page layout choice.

	Returns:
		PageFormat in points.
	"""
	name, (width, height) = _LAYOUT_SIZES[layout]
	orientation = "landscape" if width > height else "portrait"
	return PageFormat(name=f"{name} {orientation}", width=float(width), height=float(height))


#============================================
def grid_for_copies(copies: int) -> GridShape:
	"""
	Map a copies-per-page choice to its grid shape.

	Args:
		copies: Copies per page, one of COPIES_TO_GRID.

	Returns:
		GridShape.
	"""
	if copies not in COPIES_TO_GRID:
		choices = ", ".join(str(value) for value in sorted(COPIES_TO_GRID))
		raise ValueError(f"Unsupported copies per page: {copies} (choose from {choices})")
	columns, rows = COPIES_TO_GRID[copies]
	return GridShape(columns=columns, rows=rows)


#============================================
def build_layout_options(
	layout: PageLayout = DEFAULT_LAYOUT,
	copies: int = DEFAULT_COPIES,
	margin: float = DEFAULT_MARGIN,
) -> LayoutOptions:
	"""
	Build layout options from caller choices.

	Args:
		layout: Page layout choice.
		copies: Copies per page.
		margin: Page margin in points.

	Returns:
		LayoutOptions.
	"""
	return LayoutOptions(
		page_format=resolve_page_format(layout),
		grid=grid_for_copies(copies),
		margin=margin,
	)


#============================================
def build_output_name(source_name: str, copies: int) -> str:
	"""
	Build the output file name for a tiled document.

	Args:
		source_name: Source file name.
		copies: Copies per page.

	Returns:
		Output file name, for example "8-up-check.pdf".
	"""
	return f"{copies}-up-{source_name}"
