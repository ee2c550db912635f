"""Loading of the JSON payload that fills the template."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from office_template_pdf.errors import DataLoadError


def load_json_data(path: str | Path) -> Any:
    """Read *path* as UTF-8 and parse it as a single JSON value.

    Any read, decode or syntax failure is reported as :class:`DataLoadError`.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DataLoadError(path, str(exc)) from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(path, str(exc)) from exc
