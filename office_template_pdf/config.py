"""API key lookup from the process environment (and an optional ``.env``)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from office_template_pdf.errors import MissingApiKeyError

API_KEY_ENV = "APRYSE_API_KEY"


def load_api_key(env_file: Optional[str | Path] = None) -> str:
    """Return the Apryse license key or raise :class:`MissingApiKeyError`.

    Without *env_file*, the nearest ``.env`` at or above the working
    directory is used.  Values already present in the environment win over
    the ``.env`` file.
    """
    if env_file is not None:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(find_dotenv(usecwd=True), override=False)

    key = os.environ.get(API_KEY_ENV, "").strip()
    if not key:
        raise MissingApiKeyError(API_KEY_ENV)
    return key
