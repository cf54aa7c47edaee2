"""
String converter: turns each line of a text block into one element of a
quoted string array.
"""

import json
import logging
from pathlib import PurePath
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_FILENAME = 'output.txt'


def text_to_lines(text: str) -> List[str]:
    """Return trimmed, non-empty lines"""
    return [line.strip() for line in text.split('\n') if line.strip()]


def lines_to_string_array(lines: List[str]) -> str:
    if not lines:
        return ''
    quoted = [f'  {json.dumps(line, ensure_ascii=False)}' for line in lines]
    return '[\n' + ',\n'.join(quoted) + '\n]'


def converted_filename(upload_name: Optional[str]) -> str:
    """Download name for an uploaded file, e.g. skus.csv -> skus_converted.txt"""
    if not upload_name:
        return DEFAULT_OUTPUT_FILENAME
    stem = PurePath(upload_name).name.split('.')[0]
    if not stem:
        return DEFAULT_OUTPUT_FILENAME
    return f'{stem}_converted.txt'


def convert_lines(text: str) -> Dict[str, Any]:
    """
    Convert text to a string array, one element per non-blank line.

    Returns:
        Dict with 'success', 'result' and 'count', or 'error' on failure
    """
    try:
        if not text or not text.strip():
            return {'success': True, 'result': '', 'count': 0}

        lines = text_to_lines(text)
        return {
            'success': True,
            'result': lines_to_string_array(lines),
            'count': len(lines)
        }

    except Exception as e:
        logger.exception('String conversion failed')
        return {
            'success': False,
            'result': '',
            'error': f'Unexpected error during conversion: {str(e)}'
        }
