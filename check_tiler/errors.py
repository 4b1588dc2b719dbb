"""
Failure kinds raised while tiling a document.
"""


class TilerError(Exception):
	"""
	Base class for tiling failures.

	Callers branch on the subclass or the kind tag and show the
	message to the user as is.
	"""

	kind = "tiler_error"


class EmptySourceError(TilerError):
	kind = "empty_source"

	def __init__(self, message: str = "The uploaded PDF has no pages.") -> None:
		super().__init__(message)


class MalformedSourceError(TilerError):
	kind = "malformed_source"

	def __init__(self, message: str = "The source file could not be read. Ensure the file is a valid PDF.") -> None:
		super().__init__(message)


class InvalidLayoutError(TilerError):
	kind = "invalid_layout"


class CompositionError(TilerError):
	kind = "composition_failure"

	def __init__(self, message: str = "Failed to generate PDF.") -> None:
		super().__init__(message)
