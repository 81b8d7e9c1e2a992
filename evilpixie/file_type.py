"""Guessing image file types from file names."""

from __future__ import annotations

import os
from enum import Enum

__all__ = ["Filetype", "filetype_from_filename"]


class Filetype(Enum):
    UNKNOWN = 0
    PNG = 1
    GIF = 2
    BMP = 3
    JPEG = 4
    TARGA = 5
    PCX = 6
    IFF_ILBM = 7


_BY_EXTENSION = {
    ".png": Filetype.PNG,
    ".gif": Filetype.GIF,
    ".jpg": Filetype.JPEG,
    ".jpeg": Filetype.JPEG,
    ".bmp": Filetype.BMP,
    ".tga": Filetype.TARGA,
    ".pcx": Filetype.PCX,
    ".iff": Filetype.IFF_ILBM,
    ".ilbm": Filetype.IFF_ILBM,
    ".lbm": Filetype.IFF_ILBM,
}


def filetype_from_filename(filename: str | os.PathLike) -> Filetype:
    """Best guess at a file's type from its extension alone."""
    ext = os.path.splitext(os.fspath(filename))[1].lower()
    return _BY_EXTENSION.get(ext, Filetype.UNKNOWN)