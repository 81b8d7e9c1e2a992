from pathlib import Path

import pytest

from evilpixie.file_type import Filetype, filetype_from_filename


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a.png", Filetype.PNG),
        ("a.gif", Filetype.GIF),
        ("a.jpg", Filetype.JPEG),
        ("a.jpeg", Filetype.JPEG),
        ("a.bmp", Filetype.BMP),
        ("a.tga", Filetype.TARGA),
        ("a.pcx", Filetype.PCX),
        ("a.iff", Filetype.IFF_ILBM),
        ("a.ilbm", Filetype.IFF_ILBM),
        ("a.lbm", Filetype.IFF_ILBM),
    ],
)
def test_known_extensions(name, expected):
    assert filetype_from_filename(name) is expected


def test_case_insensitive():
    assert filetype_from_filename("PIC.PNG") is Filetype.PNG
    assert filetype_from_filename("dir/Sprite.Gif") is Filetype.GIF


def test_unknown_and_missing_extension():
    assert filetype_from_filename("notes.txt") is Filetype.UNKNOWN
    assert filetype_from_filename("noextension") is Filetype.UNKNOWN


def test_accepts_path_objects():
    assert filetype_from_filename(Path("art") / "tiles.bmp") is Filetype.BMP