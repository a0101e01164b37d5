import io

import pytest

from videohub.errors import ValidationError
from videohub.uploads import is_image_filename, next_image_name, save_poster


@pytest.mark.parametrize("name", ["a.jpg", "a.JPEG", "b.png", "c.svg", "d.Gif", "e.webp", "f.tiff", "g.eps", "h.bmp"])
def test_accepts_image_extensions(name):
    assert is_image_filename(name)


@pytest.mark.parametrize("name", ["a.txt", "a.png.exe", "png", "", None])
def test_rejects_other_files(name):
    assert not is_image_filename(name)


def test_next_image_name_scans_for_highest_index(tmp_path):
    assert next_image_name(str(tmp_path), ".PNG") == "image0.png"
    for name in ["image0.png", "image7.jpg", "image3.gif", "poster.png", "imageX.png"]:
        (tmp_path / name).write_bytes(b"")
    assert next_image_name(str(tmp_path), ".png") == "image8.png"


def test_next_image_name_missing_dir(tmp_path):
    assert next_image_name(str(tmp_path / "nope"), ".jpg") == "image0.jpg"


def test_save_poster(tmp_path):
    path = save_poster(str(tmp_path), "Cat.JPG", io.BytesIO(b"meow"))
    assert path == "/image0.jpg"
    assert (tmp_path / "image0.jpg").read_bytes() == b"meow"


def test_save_poster_validation(tmp_path):
    with pytest.raises(ValidationError):
        save_poster(str(tmp_path), "", io.BytesIO(b""))
    with pytest.raises(ValidationError):
        save_poster(str(tmp_path), "cat.txt", io.BytesIO(b""))
