from .arrays import format_array, parse_array, process_arrays, reconcile
from .jwt_decoder import JWTDecodeError, decode_jwt
from .string_converter import convert_lines
from .url_processor import extract_parameter_values, process_urls

__all__ = [
    'JWTDecodeError',
    'convert_lines',
    'decode_jwt',
    'extract_parameter_values',
    'format_array',
    'parse_array',
    'process_arrays',
    'process_urls',
    'reconcile',
]
