from .arrays import arrays_bp
from .download import download_bp
from .jwt_decoder import jwt_decoder_bp
from .string_converter import string_converter_bp
from .url_processor import url_processor_bp

ALL_BLUEPRINTS = [
    arrays_bp,
    download_bp,
    jwt_decoder_bp,
    string_converter_bp,
    url_processor_bp,
]

__all__ = ['ALL_BLUEPRINTS']
