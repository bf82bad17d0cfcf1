"""Cross-checks the codec against Pillow's BMP reader and writer."""
import numpy as np
from PIL import Image

from bitmap.services.image_service import ImageService
from bitmap.services.process_service import ProcessService


def test_pillow_reads_our_output(write_bmp, gradient, tmp_path):
    service = ImageService()
    image = service.load_image(write_bmp(gradient(5, 3).pixels.tolist()))
    rotated = service.with_buffer(image, ProcessService().rotate(image.buffer, "90"))
    output = service.save_image(rotated, tmp_path / "out.bmp")

    with Image.open(output) as pil_image:
        assert pil_image.format == "BMP"
        assert pil_image.size == (3, 5)
        assert np.array_equal(np.asarray(pil_image.convert("RGB")), rotated.buffer.pixels)


def test_we_read_pillow_output(gradient, tmp_path):
    buffer = gradient(7, 4)
    path = tmp_path / "pillow.bmp"
    Image.fromarray(buffer.pixels).save(path, format="BMP")

    image = ImageService().load_image(path)
    assert image.info_header.bit_count == 24
    assert image.buffer == buffer
