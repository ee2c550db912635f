"""
Office template + JSON → PDF, delegated to the Apryse SDK.

The SDK does all of the real work:

1. ``Convert.CreateOfficeTemplate`` parses the Office document and finds its
   template fields.
2. ``TemplateDocument.FillTemplateJson`` merges a JSON string into those
   fields and lays the result out as a ``PDFDoc``.
3. ``PDFDoc.Save`` writes the PDF with the requested ``SDFDoc`` flags
   (linearized by default, for fast first-page display).

This module only sequences those calls, wraps their failures in
:class:`~office_template_pdf.errors.ConversionError`, and owns the
process-wide ``PDFNet`` runtime through :func:`sdk_session`.
"""

from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator

from apryse_sdk import Convert, OfficeToPDFOptions, PDFNet, SDFDoc

from office_template_pdf.errors import ConversionError, SdkInitializationError


# ── Save modes ───────────────────────────────────────────────────────────────

DEFAULT_SAVE_MODE = "linearized"
SAVE_MODES = ("linearized", "remove-unused", "compatibility")


def _save_flags() -> Dict[str, int]:
    return {
        "linearized": SDFDoc.e_linearized,
        "remove-unused": SDFDoc.e_remove_unused,
        "compatibility": SDFDoc.e_compatibility,
    }


def _log(message: str, verbose: bool) -> None:
    if verbose:
        print(f"  {message}", file=sys.stderr)


# ── SDK runtime ──────────────────────────────────────────────────────────────

@contextmanager
def sdk_session(api_key: str) -> Iterator[None]:
    """Initialize ``PDFNet`` for the duration of the ``with`` block.

    ``PDFNet.Terminate`` runs exactly once on every exit path, including a
    failed ``Initialize``.  A failing ``Terminate`` is reported on stderr so
    it never masks the error (or success) of the block itself.
    """
    try:
        try:
            PDFNet.Initialize(api_key)
        except Exception as exc:
            raise SdkInitializationError(str(exc)) from exc
        yield
    finally:
        try:
            PDFNet.Terminate()
        except Exception as exc:
            print(f"PDFNet shutdown error: {exc}", file=sys.stderr)


# ── Public API ───────────────────────────────────────────────────────────────

def generate_pdf(
    input_path: str | Path,
    output_path: str | Path,
    data: Any,
    *,
    save_mode: str = DEFAULT_SAVE_MODE,
    verbose: bool = False,
) -> Path:
    """Fill the Office template at *input_path* with *data* and save a PDF.

    Must be called inside :func:`sdk_session`.

    Parameters
    ----------
    input_path:
        Office document (e.g. ``.docx``) containing template fields.
    output_path:
        Destination PDF.  Parent directories are created as needed.
    data:
        Any JSON-serializable value; it is handed to the SDK as text.
    save_mode:
        One of :data:`SAVE_MODES`.
    verbose:
        Print progress to stderr.

    Raises
    ------
    ValueError
        Unknown *save_mode*.  No SDK call is made.
    ConversionError
        Any failure while creating, filling or saving the template.  A
        partially written output file is left as the SDK left it.
    """
    flags = _save_flags()
    if save_mode not in flags:
        raise ValueError(
            f"Unknown save mode {save_mode!r}; expected one of {', '.join(SAVE_MODES)}"
        )

    input_path = Path(input_path).resolve()
    output_path = Path(output_path).resolve()
    if not input_path.is_file():
        raise ConversionError(f"Template not found: {input_path}")

    _log("Initializing PDF generation…", verbose)

    try:
        options = OfficeToPDFOptions()
        template_doc = Convert.CreateOfficeTemplate(str(input_path), options)
    except Exception as exc:
        raise ConversionError(f"Could not load template {input_path}: {exc}") from exc
    _log(f"Loaded template {input_path.name}", verbose)

    try:
        json_text = json.dumps(data, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise ConversionError(f"Data is not JSON-serializable: {exc}") from exc

    try:
        pdf_doc = template_doc.FillTemplateJson(json_text)
    except Exception as exc:
        raise ConversionError(f"Could not fill template: {exc}") from exc
    _log("Filled template fields", verbose)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        pdf_doc.Save(str(output_path), flags[save_mode])
    except Exception as exc:
        raise ConversionError(f"Could not save {output_path}: {exc}") from exc
    finally:
        pdf_doc.Close()
    _log(f"Saved ({save_mode})", verbose)

    return output_path
