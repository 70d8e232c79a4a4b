"""Building blocks for PDF page content: units, paths, shapes, link annotations, layers and XObjects."""

__version__ = "0.1.0"

__all__ = [
    "annotations",
    "conformance",
    "forms",
    "line",
    "objects",
    "path",
    "point",
    "rectangle",
    "resources",
    "scale",
    "utils",
    "xobject",
]