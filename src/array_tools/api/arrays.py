"""
Array reconciliation core.
Parses array-like text into string tokens, merges or diffs two token lists,
and serializes the result back to a JSON string array or number array.

Numbers are carried as strings end to end so that 64-bit identifiers and
longer integers survive without any float rounding.
"""

import json
import logging
import re
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

MODE_MERGE = 'merge'
MODE_MERGE_DEDUP = 'merge-dedup'
MODE_DIFF_LEFT_ONLY = 'diff-left-only'
MODE_DIFF_RIGHT_ONLY = 'diff-right-only'
MODE_DIFF_SYMMETRIC = 'diff-symmetric'

RECONCILE_MODES = (
    MODE_MERGE,
    MODE_MERGE_DEDUP,
    MODE_DIFF_LEFT_ONLY,
    MODE_DIFF_RIGHT_ONLY,
    MODE_DIFF_SYMMETRIC,
)

OUTPUT_AUTO = 'auto'
OUTPUT_FORCE_STRING = 'forceString'
OUTPUT_FORCE_NUMBER = 'forceNumber'

OUTPUT_MODES = (OUTPUT_AUTO, OUTPUT_FORCE_STRING, OUTPUT_FORCE_NUMBER)

# Short names used by the diff tool's output selector
OUTPUT_MODE_ALIASES = {
    'string': OUTPUT_FORCE_STRING,
    'number': OUTPUT_FORCE_NUMBER,
}

# A JSON string literal, or a bare integer with an optional minus sign sitting
# between `[`, `,` or whitespace and a closing `,` or `]`. String literals are
# matched first so digits inside them are never rewritten.
_STRING_OR_BARE_INT_RE = re.compile(r'"(?:\\.|[^"\\])*"|(?<=[\[,\s])(-?\d+)(?=\s*[,\]])')
_SPLIT_RE = re.compile(r'[,\n]')
_NUMERIC_RE = re.compile(r'-?\d+(\.\d+)?')
_SURROUNDING_QUOTES_RE = re.compile(r'^"|"$')


def _quote_bare_integers(json_text: str) -> str:
    """Rewrite bare integer literals as JSON strings"""
    def replace(match):
        digits = match.group(1)
        if digits is None:
            return match.group(0)
        return f'"{digits}"'

    return _STRING_OR_BARE_INT_RE.sub(replace, json_text)


def _reject_constant(name: str):
    raise ValueError(f'Invalid JSON constant: {name}')


def _to_token(item: Any) -> str:
    """Coerce a decoded JSON value to the text a browser would display for it"""
    if isinstance(item, str):
        return item
    if item is None:
        return 'null'
    if isinstance(item, bool):
        return 'true' if item else 'false'
    if isinstance(item, int):
        return str(item)
    if isinstance(item, float):
        if item.is_integer() and abs(item) < 1e21:
            return str(int(item))
        return repr(item)
    return json.dumps(item, separators=(',', ':'), ensure_ascii=False)


def split_tokens(text: str) -> List[str]:
    """Split text on commas and newlines, dropping blank pieces"""
    return [piece.strip() for piece in _SPLIT_RE.split(text) if piece.strip()]


def parse_array(text: str) -> List[str]:
    """
    Parse free-form array text into a list of string tokens.

    Accepts a JSON array literal, a bare comma separated list, or one item
    per line. Malformed JSON falls back to splitting on commas and newlines,
    so this never raises for string input.
    """
    if not text or not text.strip():
        return []

    trimmed = text.strip()
    if trimmed.startswith('[') and trimmed.endswith(']'):
        json_text = trimmed
    else:
        json_text = f'[{trimmed}]'

    try:
        parsed = json.loads(_quote_bare_integers(json_text), parse_constant=_reject_constant)
        tokens = [_to_token(item) for item in parsed] if isinstance(parsed, list) else None
    except (ValueError, RecursionError):
        tokens = None

    if tokens is None:
        logger.debug('Input is not a JSON array, splitting on commas and newlines')
        return split_tokens(trimmed)
    return tokens


def reconcile(left: List[str], right: List[str], mode: str) -> List[str]:
    """
    Combine two token lists according to mode.

    Membership is exact string equality. Neither input list is modified.
    """
    if mode not in RECONCILE_MODES:
        raise ValueError(f'Invalid mode. Supported: {list(RECONCILE_MODES)}')

    if mode == MODE_MERGE:
        return [*left, *right]

    if mode == MODE_MERGE_DEDUP:
        # dict keeps first-seen order
        return list(dict.fromkeys([*left, *right]))

    left_set = set(left)
    right_set = set(right)
    left_only = [item for item in left if item not in right_set]
    right_only = [item for item in right if item not in left_set]

    if mode == MODE_DIFF_LEFT_ONLY:
        return left_only
    if mode == MODE_DIFF_RIGHT_ONLY:
        return right_only
    return left_only + right_only


def normalize_output_mode(output_mode: str) -> str:
    """Resolve aliases and validate an output mode name"""
    if not isinstance(output_mode, str):
        raise ValueError(f'Invalid output mode. Supported: {list(OUTPUT_MODES)}')
    output_mode = OUTPUT_MODE_ALIASES.get(output_mode, output_mode)
    if output_mode not in OUTPUT_MODES:
        raise ValueError(f'Invalid output mode. Supported: {list(OUTPUT_MODES)}')
    return output_mode


def is_numeric_token(token: str) -> bool:
    return bool(_NUMERIC_RE.fullmatch(_SURROUNDING_QUOTES_RE.sub('', token)))


def format_array(tokens: List[str], output_mode: str = OUTPUT_AUTO) -> str:
    """
    Serialize tokens as a pretty-printed JSON array.

    In number form the tokens are written out verbatim rather than through
    the JSON encoder, so long integers keep every digit.
    """
    output_mode = normalize_output_mode(output_mode)

    if not tokens:
        return '[]'

    if output_mode == OUTPUT_AUTO:
        as_numbers = all(is_numeric_token(token) for token in tokens)
    else:
        as_numbers = output_mode == OUTPUT_FORCE_NUMBER

    if not as_numbers:
        return json.dumps(tokens, indent=2, ensure_ascii=False)

    lines = [f'  {_SURROUNDING_QUOTES_RE.sub("", token)}' for token in tokens]
    return '[\n' + ',\n'.join(lines) + '\n]'


def process_arrays(left_text: str, right_text: str = '', mode: str = MODE_MERGE,
                   output_mode: str = OUTPUT_AUTO) -> Dict[str, Any]:
    """
    Parse, reconcile and format two array inputs.

    Args:
        left_text: First array as free-form text
        right_text: Second array as free-form text
        mode: One of RECONCILE_MODES
        output_mode: 'auto', 'forceString' or 'forceNumber'

    Returns:
        Dict with 'success', 'result' and either 'count' or 'error' keys
    """
    try:
        left = parse_array(left_text or '')
        right = parse_array(right_text or '')
        tokens = reconcile(left, right, mode)
        result = format_array(tokens, output_mode)

        return {
            'success': True,
            'result': result,
            'count': len(tokens),
            'mode': mode,
            'output_mode': normalize_output_mode(output_mode),
        }

    except ValueError as e:
        return {
            'success': False,
            'result': '',
            'error': str(e)
        }
    except Exception as e:
        logger.exception('Array processing failed')
        return {
            'success': False,
            'result': '',
            'error': f'Unexpected error during processing: {str(e)}'
        }
