import io

import pytest
from PIL import Image


def _render(fmt: str, size: tuple[int, int] = (32, 32)) -> bytes:
    buf = io.BytesIO()
    mode = "RGBA" if fmt == "PNG" else "RGB"
    Image.new(mode, size, color=(200, 30, 30) if mode == "RGB" else (200, 30, 30, 255)).save(
        buf, format=fmt
    )
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    """Generate a small opaque PNG."""
    return _render("PNG")


@pytest.fixture()
def jpeg_bytes() -> bytes:
    """Generate a small JPEG."""
    return _render("JPEG")


@pytest.fixture()
def processed_png_bytes() -> bytes:
    """Generate a PNG standing in for a background-removed result."""
    buf = io.BytesIO()
    Image.new("RGBA", (32, 32), color=(0, 0, 0, 0)).save(buf, format="PNG")
    return buf.getvalue()
