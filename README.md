# pdfcanvas

Pure-Python building blocks for describing PDF page content.

`pdfcanvas` converts shapes, lines, polygons, link annotations and
external objects into PDF content-stream operations and PDF object
values, which are plain Python dicts and lists. It depends only on the
standard library.

## Installation

```
pip install pdfcanvas
```

## Modules

- `pdfcanvas.scale`: the length units `Mm`, `Pt` and `Px`.
  - `Mm.into_pt()`, `Mm.from_pt()`, `Pt.from_mm()` and `Pt.into_mm()`
    convert between millimetres and points.
  - `Px.into_pt(dpi)` gives the size of a pixel count at a given
    resolution.
  - `Mm` and `Pt` compare equal when their values agree to three decimal
    places. They support ordering, addition and subtraction with their
    own type, multiplication and division by numbers, and division by
    their own type, which gives a plain float.
- `pdfcanvas.point`: `Point`, a position in points measured from the
  bottom-left corner of the page. `Point.from_mm(x, y)` builds one from
  millimetres.
- `pdfcanvas.objects`: a small PDF object model.
  - `Name`, `PdfString` (with `StringFormat.LITERAL` or
    `StringFormat.HEXADECIMAL`), `Reference` and `Stream`.
  - `Operation`, an operator with its operands. `Operation.encode()`
    writes it in content-stream syntax, and `encode_operations()` joins
    several operations into one stream.
  - `ObjectStore`, which hands out numbered references through
    `new_object_id()` and `add_object()`, and looks objects up with
    `get()`.
- `pdfcanvas.path`: `WindingOrder` (`EVEN_ODD`, `NON_ZERO`) and
  `PaintMode` (`CLIP`, `FILL`, `STROKE`, `FILL_STROKE`). The methods
  `clip_op()`, `fill_op()`, `fill_stroke_op()` and
  `fill_stroke_close_op()` return the operator that matches the winding
  rule.
- `pdfcanvas.rectangle`: `Rect`, built from its lower-left and
  upper-right points or with `Rect.from_mm()`. `with_mode()` and
  `with_winding()` return modified copies. `to_operations()` returns an
  `re` operation followed by the paint operator; clip mode also adds
  `n`.
- `pdfcanvas.line`: `Line` and `Polygon`.
  - Each point is a `(Point, bool)` pair. `True` marks a Bézier handle.
  - `to_operations()` produces `m`, `l`, `c`, `v` and `y` operations.
  - A line ends with `S` when open and `s` when closed; use
    `set_closed()` to choose.
  - A polygon can have several rings. It ends with the operator for its
    paint mode, followed by `n`.
- `pdfcanvas.utils`:
  - `circle_points()` and `rect_points()` return point lists ready for
    `Line` or `Polygon`.
  - `random_character_string_32()` returns a pseudo-random 32-letter
    identifier. It is not suitable for security purposes.
  - `rgba_to_rgb()` splits interleaved RGBA bytes into RGB bytes and
    alpha bytes.
- `pdfcanvas.conformance`:
  - `PdfConformance` lists the PDF/A, PDF/UA, PDF/X, PDF/E and PDF/VT
    levels.
  - `CustomPdfConformance` is a hand-made profile.
  - `default_conformance()` returns the default custom profile.
  - Both types answer questions such as `must_have_xmp_metadata()`,
    `must_have_icc_profile()` and `is_layering_allowed()`.
- `pdfcanvas.annotations`:
  - `LinkAnnotation` holds a `Rect` and an action: either `GoToAction`
    with a `Destination`, or `UriAction`.
  - Its appearance is set with `BorderArray`, `DashPhase`, `ColorArray`
    and `HighlightingMode`.
  - `LinkAnnotationList` names annotations `PT0`, `PT1` and so on.
- `pdfcanvas.resources`:
  - `OCGList` names optional content groups (layers) `MC0`, `MC1` and so
    on.
  - `PatternList` stores `Pattern` placeholders. Its `to_dict()` is
    always empty.
- `pdfcanvas.forms`: `FormXObject`, `PostScriptXObject` (written as an
  empty stream), `ReferenceXObject`, `OptionalContentGroup`, and the
  enums `FormType`, `ImageFilter`, `GroupXObjectType` and `OCGIntent`.
- `pdfcanvas.xobject`:
  - `ExternalXObject` wraps a ready-made stream.
  - `XObjectList` names XObjects `X0`, `X1` and so on.
  - `XObjectList.to_dict(store)` adds each stream to an `ObjectStore`
    and maps each name to its reference.

## Example

```python
from pdfcanvas.scale import Mm
from pdfcanvas.point import Point
from pdfcanvas.line import Line
from pdfcanvas.rectangle import Rect
from pdfcanvas.path import PaintMode
from pdfcanvas.objects import encode_operations

rect = Rect.from_mm(Mm(10), Mm(10), Mm(50), Mm(30)).with_mode(PaintMode.STROKE)

line = Line(points=[
    (Point.from_mm(Mm(0), Mm(0)), False),
    (Point.from_mm(Mm(20), Mm(20)), False),
])
line.set_closed(True)

content = encode_operations(rect.to_operations() + line.to_operations())
print(content.decode("latin-1"))
```

## What it does not do

`pdfcanvas` produces page content and object values only. It does not:

- assemble pages into a document or write a PDF file (no cross-reference
  table, trailer or file output);
- handle fonts or text;
- decode images.

To produce a complete file, pass the operations and dictionaries it
returns to a PDF writer.

## Running the tests

```
pip install -e ".[test]"
pytest
```