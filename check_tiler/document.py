"""
Thin document model layer over pypdf.

Reads source pages, embeds a page once as a form XObject, draws that
XObject onto output pages, and serializes the result.
"""

# Standard Library
import dataclasses
import io

# PIP3 modules
import pypdf
import pypdf.errors
import pypdf.generic

# local repo modules
import check_tiler.config
import check_tiler.errors


PageFormat = check_tiler.config.PageFormat
Placement = check_tiler.config.Placement
SourcePageSize = check_tiler.config.SourcePageSize
MalformedSourceError = check_tiler.errors.MalformedSourceError

NameObject = pypdf.generic.NameObject

# errors pypdf raises on broken or unsupported input
COLLABORATOR_ERRORS = (
	pypdf.errors.PyPdfError,
	ValueError,
	KeyError,
	TypeError,
	OSError,
	# unsupported stream filters
	NotImplementedError,
)

EMBEDDED_PAGE_NAME = "/TileSource"
PDF_HEADER = b"%PDF-"
HEADER_SEARCH_BYTES = 1024


@dataclasses.dataclass(frozen=True)
class EmbeddedPage:
	reference: pypdf.generic.IndirectObject
	name: str
	left: float
	bottom: float
	width: float
	height: float

	def intrinsic_size(self) -> SourcePageSize:
		return SourcePageSize(width=self.width, height=self.height)


#============================================
def load_document(source_bytes: bytes) -> pypdf.PdfReader:
	"""
	Parse a PDF from an in-memory buffer.

	Args:
		source_bytes: Raw PDF bytes.

	Returns:
		PdfReader with its page tree loaded.
	"""
	# readers accept the header anywhere in the first 1024 bytes
	if PDF_HEADER not in source_bytes[:HEADER_SEARCH_BYTES]:
		raise MalformedSourceError()
	try:
		reader = pypdf.PdfReader(io.BytesIO(source_bytes))
		# force the page tree to load so broken trees fail here
		len(reader.pages)
	except COLLABORATOR_ERRORS as error:
		raise MalformedSourceError() from error
	return reader


#============================================
def page_count(reader: pypdf.PdfReader) -> int:
	"""
	Count the pages in a parsed document.

	Args:
		reader: Parsed source document.

	Returns:
		Number of pages.
	"""
	return len(reader.pages)


#============================================
def read_page_size(page: pypdf.PageObject) -> SourcePageSize:
	"""
	Read the intrinsic size of a page from its media box.

	Args:
		page: Source page.

	Returns:
		SourcePageSize in points.
	"""
	try:
		box = page.mediabox
		width = float(box.width)
		height = float(box.height)
	except COLLABORATOR_ERRORS as error:
		raise MalformedSourceError() from error
	if width <= 0.0 or height <= 0.0:
		raise MalformedSourceError(f"The first page has an empty media box ({width:g}x{height:g}).")
	return SourcePageSize(width=width, height=height)


#============================================
def create_document() -> pypdf.PdfWriter:
	"""
	Create a new, empty output document.
	"""
	return pypdf.PdfWriter()


#============================================
def add_output_page(writer: pypdf.PdfWriter, page_format: PageFormat) -> pypdf.PageObject:
	"""
	Append a blank page sized to the page format.

	Args:
		writer: Output document.
		page_format: Target page format.

	Returns:
		The new page.
	"""
	return writer.add_blank_page(width=page_format.width, height=page_format.height)


#============================================
def embed_page(writer: pypdf.PdfWriter, page: pypdf.PageObject) -> EmbeddedPage:
	"""
	Embed a source page into the writer as a reusable form XObject.

	The page content and resources are copied once; every draw of the
	returned handle references the same object.

	Args:
		writer: Output document.
		page: Source page.

	Returns:
		EmbeddedPage handle.
	"""
	box = page.mediabox
	left = float(box.left)
	bottom = float(box.bottom)
	width = float(box.width)
	height = float(box.height)

	contents = page.get_contents()
	data = b"" if contents is None else contents.get_data()

	resources = page.get(NameObject("/Resources"))
	if resources is None:
		resources = pypdf.generic.DictionaryObject()

	form = pypdf.generic.DecodedStreamObject()
	form.set_data(data)
	form.update({
		NameObject("/Type"): NameObject("/XObject"),
		NameObject("/Subtype"): NameObject("/Form"),
		NameObject("/FormType"): pypdf.generic.NumberObject(1),
		NameObject("/BBox"): pypdf.generic.ArrayObject([
			pypdf.generic.FloatObject(left),
			pypdf.generic.FloatObject(bottom),
			pypdf.generic.FloatObject(left + width),
			pypdf.generic.FloatObject(bottom + height),
		]),
		NameObject("/Resources"): resources.clone(writer),
	})
	reference = writer._add_object(form.flate_encode())

	return EmbeddedPage(
		reference=reference,
		name=EMBEDDED_PAGE_NAME,
		left=left,
		bottom=bottom,
		width=width,
		height=height,
	)


#============================================
def draw_embedded(embedded: EmbeddedPage, placement: Placement) -> bytes:
	"""
	Build content operators that draw the embedded page into a rectangle.

	Args:
		embedded: Embedded page handle.
		placement: Target rectangle.

	Returns:
		Content stream bytes for one draw.
	"""
	transform = pypdf.Transformation().translate(-embedded.left, -embedded.bottom).scale(
		placement.scaled_width / embedded.width,
		placement.scaled_height / embedded.height,
	).translate(placement.x, placement.y)
	matrix = " ".join(f"{value:.6f}" for value in transform.ctm)
	return f"q {matrix} cm {embedded.name} Do Q\n".encode("ascii")


#============================================
def write_page_contents(
	page: pypdf.PageObject,
	embedded: EmbeddedPage,
	operations: list[bytes],
) -> None:
	"""
	Set the page content stream and register the embedded page resource.

	Args:
		page: Output page.
		embedded: Embedded page handle drawn by the operations.
		operations: Content stream chunks from draw_embedded.
	"""
	xobjects = pypdf.generic.DictionaryObject({
		NameObject(embedded.name): embedded.reference,
	})
	page[NameObject("/Resources")] = pypdf.generic.DictionaryObject({
		NameObject("/XObject"): xobjects,
	})
	content = pypdf.generic.DecodedStreamObject()
	content.set_data(b"".join(operations))
	page.replace_contents(content.flate_encode())


#============================================
def serialize(writer: pypdf.PdfWriter) -> bytes:
	"""
	Serialize a document to bytes.

	Args:
		writer: Output document.

	Returns:
		PDF bytes.
	"""
	buffer = io.BytesIO()
	writer.write(buffer)
	return buffer.getvalue()
