"""Internal helpers shared by the capture combinators and decorators."""
