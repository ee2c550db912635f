"""Office template + JSON → PDF generator built on the Apryse SDK."""

from office_template_pdf.converter import generate_pdf, sdk_session

__all__ = ["generate_pdf", "sdk_session"]
