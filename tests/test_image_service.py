import pytest

from bitmap.models.errors import FormatError
from bitmap.models.image_model import PixelBuffer
from bitmap.services.image_service import ImageService
from bitmap.services.process_service import ProcessService

ROWS = [
    [(255, 0, 0), (0, 255, 0), (0, 0, 255)],
    [(10, 20, 30), (40, 50, 60), (70, 80, 90)],
]


@pytest.fixture
def service():
    return ImageService()


def test_load_image(service, write_bmp):
    path = write_bmp(ROWS)
    image = service.load_image(path)
    assert image.path == path
    assert (image.width, image.height) == (3, 2)
    assert image.buffer == PixelBuffer.from_rows(ROWS)
    assert image.file_header.magic == b"BM"


def test_load_missing_file(service, tmp_path):
    with pytest.raises(FileNotFoundError):
        service.load_image(tmp_path / "missing.bmp")


def test_load_directory_is_not_a_file(service, tmp_path):
    with pytest.raises(FileNotFoundError):
        service.load_headers(tmp_path)


def test_load_headers_rejects_non_bmp(service, tmp_path):
    path = tmp_path / "note.txt"
    path.write_bytes(b"hello, this is definitely not a bitmap file at all....." * 2)
    with pytest.raises(FormatError):
        service.load_headers(path)


def test_round_trip_is_byte_identical(service, write_bmp, make_bmp, tmp_path):
    source = write_bmp(ROWS, reserved=3, ppm=3780)
    out = service.save_image(service.load_image(source), tmp_path / "out.bmp")
    assert out.read_bytes() == make_bmp(ROWS, reserved=3, ppm=3780)


def test_save_normalizes_pixel_offset(service, write_bmp, make_bmp, tmp_path):
    source = write_bmp(ROWS, offset=64)
    out = service.save_image(service.load_image(source), tmp_path / "out.bmp")
    assert out.read_bytes() == make_bmp(ROWS)


def test_size_fields_follow_new_dimensions(service, write_bmp, tmp_path):
    image = service.load_image(write_bmp(ROWS))
    rotated = service.with_buffer(image, ProcessService().rotate(image.buffer, "90"))
    assert (rotated.info_header.width, rotated.info_header.height) == (2, 3)

    out = service.save_image(rotated, tmp_path / "out.bmp")
    reloaded = service.load_image(out)
    assert (reloaded.width, reloaded.height) == (2, 3)
    assert reloaded.info_header.image_size == 8 * 3
    assert reloaded.file_header.file_size == 54 + 8 * 3 == len(out.read_bytes())
    assert reloaded.buffer == rotated.buffer
