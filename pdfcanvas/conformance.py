"""PDF standards a document can conform to, and what each one allows."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class PdfConformance(enum.Enum):
    """Published PDF standards (PDF/A, PDF/UA, PDF/X, PDF/E, PDF/VT)."""

    A1B_2005_PDF_1_4 = "PDF/A-1b:2005"
    A1A_2005_PDF_1_4 = "PDF/A-1a:2005"
    A2_2011_PDF_1_7 = "PDF/A-2:2011"
    A2A_2011_PDF_1_7 = "PDF/A-2a:2011"
    A2B_2011_PDF_1_7 = "PDF/A-2b:2011"
    A2U_2011_PDF_1_7 = "PDF/A-2u:2011"
    A3_2012_PDF_1_7 = "PDF/A-3:2012"
    UA_2014_PDF_1_6 = "PDF/UA"
    X1A_2001_PDF_1_3 = "PDF/X-1a:2001"
    X3_2002_PDF_1_3 = "PDF/X-3:2002"
    X1A_2003_PDF_1_4 = "PDF/X-1a:2003"
    X3_2003_PDF_1_4 = "PDF/X-3:2003"
    X4_2010_PDF_1_4 = "PDF/X-4"
    X4P_2010_PDF_1_6 = "PDF/X-4P"
    X5G_2010_PDF_1_6 = "PDF/X-5G"
    X5PG_2010_PDF_1_6 = "PDF/X-5PG"
    X5N_2010_PDF_1_6 = "PDF/X-5N"
    E1_2008_PDF_1_6 = "PDF/E-1"
    VT_2010_PDF_1_4 = "PDF/VT"

    def identifier_string(self) -> str:
        return self.value

    def is_3d_content_allowed(self) -> bool:
        return self is PdfConformance.E1_2008_PDF_1_6

    def is_video_content_allowed(self) -> bool:
        return False

    def is_audio_content_allowed(self) -> bool:
        return False

    def is_javascript_content_allowed(self) -> bool:
        return False

    def is_jpeg_content_allowed(self) -> bool:
        return True

    def must_have_xmp_metadata(self) -> bool:
        return self in _REQUIRES_XMP

    def must_have_icc_profile(self) -> bool:
        return self is not PdfConformance.X1A_2001_PDF_1_3

    def is_layering_allowed(self) -> bool:
        return self not in _NO_LAYERS


_REQUIRES_XMP = frozenset(
    {
        PdfConformance.X1A_2001_PDF_1_3,
        PdfConformance.X3_2002_PDF_1_3,
        PdfConformance.X1A_2003_PDF_1_4,
        PdfConformance.X3_2003_PDF_1_4,
        PdfConformance.X4_2010_PDF_1_4,
        PdfConformance.X4P_2010_PDF_1_6,
        PdfConformance.X5G_2010_PDF_1_6,
        PdfConformance.X5PG_2010_PDF_1_6,
    }
)

_NO_LAYERS = frozenset(
    {
        PdfConformance.X1A_2001_PDF_1_3,
        PdfConformance.X3_2002_PDF_1_3,
        PdfConformance.X1A_2003_PDF_1_4,
        PdfConformance.X3_2003_PDF_1_4,
    }
)


@dataclass(frozen=True)
class CustomPdfConformance:
    """A hand-made profile, for documents that need no particular standard."""

    identifier: str = ""
    allows_3d_content: bool = False
    allows_video_content: bool = False
    allows_audio_content: bool = False
    allows_embedded_javascript: bool = False
    allows_jpeg_content: bool = True
    requires_xmp_metadata: bool = False
    allows_default_fonts: bool = False
    requires_icc_profile: bool = False
    allows_pdf_layers: bool = True

    def identifier_string(self) -> str:
        return self.identifier

    def is_3d_content_allowed(self) -> bool:
        return self.allows_3d_content

    def is_video_content_allowed(self) -> bool:
        return self.allows_video_content

    def is_audio_content_allowed(self) -> bool:
        return self.allows_audio_content

    def is_javascript_content_allowed(self) -> bool:
        return self.allows_embedded_javascript

    def is_jpeg_content_allowed(self) -> bool:
        return self.allows_jpeg_content

    def must_have_xmp_metadata(self) -> bool:
        return self.requires_xmp_metadata

    def must_have_icc_profile(self) -> bool:
        return self.requires_icc_profile

    def is_layering_allowed(self) -> bool:
        return self.allows_pdf_layers


def default_conformance() -> CustomPdfConformance:
    """The default profile: no standard, small files."""
    return CustomPdfConformance()