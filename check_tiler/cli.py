"""
CLI entry points for tiling a PDF page onto a sheet.
"""

# Standard Library
import argparse
import pathlib
import sys
import time

# local repo modules
import check_tiler.compose
import check_tiler.config
import check_tiler.errors
import check_tiler.render


PageLayout = check_tiler.config.PageLayout
LayoutOptions = check_tiler.config.LayoutOptions
TilerError = check_tiler.errors.TilerError

COPIES_TO_GRID = check_tiler.config.COPIES_TO_GRID
DEFAULT_COPIES = check_tiler.config.DEFAULT_COPIES
DEFAULT_LAYOUT = check_tiler.config.DEFAULT_LAYOUT
DEFAULT_MARGIN = check_tiler.config.DEFAULT_MARGIN


#============================================
def build_options(args: argparse.Namespace) -> LayoutOptions:
	"""
	Build layout options from CLI args.

	Args:
		args: Parsed argparse namespace.

	Returns:
		LayoutOptions.
	"""
	return check_tiler.config.build_layout_options(
		layout=PageLayout(args.page_layout),
		copies=args.copies,
		margin=args.margin,
	)


#============================================
def resolve_output_path(args: argparse.Namespace) -> pathlib.Path:
	"""
	Pick the output path, defaulting to "<copies>-up-<name>" beside the input.

	Args:
		args: Parsed argparse namespace.

	Returns:
		Output PDF path.
	"""
	if args.output_path:
		return pathlib.Path(args.output_path)
	input_path = pathlib.Path(args.input_path)
	return input_path.with_name(check_tiler.config.build_output_name(input_path.name, args.copies))


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Argument list, defaults to sys.argv.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Tile copies of a single-page PDF onto one printable sheet.")
	parser.add_argument("input_path", help="Source PDF file.")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", default=None, help="Output PDF path.")
	output_group.add_argument("-j", "--manifest", dest="manifest_path", default=None, help="Output layout manifest JSON path.")

	layout_group = parser.add_argument_group("Layout")
	layout_group.add_argument(
		"-f", "--format", dest="page_layout",
		choices=[layout.value for layout in PageLayout],
		default=DEFAULT_LAYOUT.value,
		help="Output page size and orientation.",
	)
	layout_group.add_argument(
		"-n", "--copies", dest="copies", type=int,
		choices=sorted(COPIES_TO_GRID),
		default=DEFAULT_COPIES,
		help="Copies per page.",
	)
	layout_group.add_argument("-m", "--margin", dest="margin", type=float, default=DEFAULT_MARGIN, help="Page margin in points, finite and not negative.")

	behavior_group = parser.add_argument_group("Behavior")
	behavior_group.add_argument("-g", "--guides", dest="draw_guides", action="store_true", help="Draw cell cut guides.")
	behavior_group.add_argument("-G", "--no-guides", dest="draw_guides", action="store_false", help="Disable cut guides.")

	parser.set_defaults(draw_guides=False)

	args = parser.parse_args(argv)
	return args


#============================================
def run_pipeline(args: argparse.Namespace) -> pathlib.Path:
	"""
	Read the source, compose the tiled page, and write the outputs.

	Args:
		args: Parsed argparse namespace.

	Returns:
		Written output path.
	"""
	input_path = pathlib.Path(args.input_path)
	output_path = resolve_output_path(args)
	options = build_options(args)

	print(f"Source PDF: {input_path}")
	print(f"Output PDF: {output_path}")
	print(f"Page format: {options.page_format.name} ({options.page_format.width:g}x{options.page_format.height:g} pt)")
	print(f"Grid: {options.grid.columns}x{options.grid.rows} ({options.grid.tile_count} copies)")
	print(f"Margin: {options.margin:g} pt")
	print(f"Cut guides: {args.draw_guides}")

	start_time = time.perf_counter()
	source_bytes = input_path.read_bytes()
	result = check_tiler.compose.compose_tiled_pdf_with_plan(source_bytes, options, args.draw_guides)
	compose_time = time.perf_counter() - start_time

	if result.source_page_count > 1:
		print(f"Source has {result.source_page_count} pages, only the first is tiled")
	print(f"Source page: {result.source_size.width:g}x{result.source_size.height:g} pt")
	tile = result.plan[0]
	print(f"Tile size: {tile.scaled_width:.2f}x{tile.scaled_height:.2f} pt")

	output_path.write_bytes(result.data)
	print(f"Tiles placed: {len(result.plan)}")

	if args.manifest_path:
		manifest = check_tiler.render.build_manifest(
			input_path.name,
			result.source_size,
			result.source_page_count,
			result.plan,
			options,
		)
		check_tiler.render.write_manifest(pathlib.Path(args.manifest_path), manifest)
		print(f"Manifest written: {args.manifest_path}")

	print(f"Timing: compose={compose_time:.2f}s")
	return output_path


#============================================
def main(argv: list[str] | None = None) -> None:
	"""
	Main entry point.
	"""
	args = parse_args(argv)
	try:
		run_pipeline(args)
	except (TilerError, OSError) as error:
		print(f"Error: {error}", file=sys.stderr)
		raise SystemExit(1) from error
