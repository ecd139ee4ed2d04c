"""Mini README: Slug and display-name helpers.

Structure:
    * slug_to_name - humanise ``negro-sport`` into ``Negro Sport``.
    * name_to_slug - canonical lowercase, accent-free, hyphenated token.
    * extract_number - trailing integer used to order sequence frames.
    * is_image_file - extension check against ``IMAGE_EXTENSIONS``.

The two conversions are not inverses: ``slug_to_name`` title-cases every
word, so ``name_to_slug(slug_to_name(x))`` only returns ``x`` when ``x`` is
already canonical. ``name_to_slug`` itself is idempotent.
"""

from __future__ import annotations

import re
import unicodedata
from pathlib import Path
from typing import Optional, Union

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp", ".gif", ".avif")

_SEPARATORS = re.compile(r"[-_]")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_TRAILING_NUMBER = re.compile(r"(\d+)(?:\.\w+)?$")


def slug_to_name(slug: str) -> str:
    """Turn a slug or filename stem into a title-cased display name."""

    words = _SEPARATORS.sub(" ", slug).split()
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def name_to_slug(name: str) -> str:
    """Turn a display name into a slug safe for folder and file names."""

    decomposed = unicodedata.normalize("NFD", name.lower())
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return _NON_ALNUM.sub("-", stripped).strip("-")


def extract_number(name: str) -> Optional[int]:
    """Return the trailing integer of ``name`` (extension tolerated) or ``None``."""

    match = _TRAILING_NUMBER.search(name)
    return int(match.group(1)) if match else None


def is_image_file(filename: Union[str, Path]) -> bool:
    return Path(filename).suffix.lower() in IMAGE_EXTENSIONS
