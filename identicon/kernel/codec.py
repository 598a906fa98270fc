import io

from .fingerprint import derive_code
from .renderer import render

DEFAULT_SIZE = 1024

def encode_png(image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()

def render_png(text, size: int = DEFAULT_SIZE, settings=None) -> bytes:
    return encode_png(render(derive_code(text), size, settings))
