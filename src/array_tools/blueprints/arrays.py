import logging

from flask import Blueprint, jsonify
from werkzeug.exceptions import HTTPException

from array_tools.api.arrays import (
    MODE_DIFF_LEFT_ONLY,
    MODE_DIFF_RIGHT_ONLY,
    MODE_DIFF_SYMMETRIC,
    MODE_MERGE,
    MODE_MERGE_DEDUP,
    OUTPUT_AUTO,
    process_arrays,
)
from array_tools.blueprints.common import InputError, get_json_body, get_text_field, require_tool, tool_default

logger = logging.getLogger(__name__)

arrays_bp = Blueprint('arrays', __name__)

# Diff selector names used by the array diff page
DIFF_MODE_ALIASES = {
    'onlyInFirst': MODE_DIFF_LEFT_ONLY,
    'onlyInSecond': MODE_DIFF_RIGHT_ONLY,
    'both': MODE_DIFF_SYMMETRIC,
}

MERGE_MODES = (MODE_MERGE, MODE_MERGE_DEDUP)


def _respond(result):
    if result['success']:
        return jsonify(result)
    return jsonify(result), 400


def _read_inputs(data):
    first = get_text_field(data, 'first')
    second = get_text_field(data, 'second')
    output_mode = get_text_field(data, 'output_mode') or tool_default('output_mode', OUTPUT_AUTO)
    return first, second, output_mode


@arrays_bp.route('/api/arrays/merge', methods=['POST'])
def merge_arrays():
    """Merge two arrays, optionally removing duplicates"""
    require_tool('array-merger')
    try:
        data = get_json_body()
        first, second, output_mode = _read_inputs(data)
        mode = MODE_MERGE_DEDUP if data.get('remove_duplicates') else MODE_MERGE

        return _respond(process_arrays(first, second, mode, output_mode))

    except InputError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception('Array merge request failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@arrays_bp.route('/api/arrays/diff', methods=['POST'])
def diff_arrays():
    """Items only in the first array, only in the second, or in either one"""
    require_tool('array-diff')
    try:
        data = get_json_body()
        first, second, output_mode = _read_inputs(data)
        diff_mode = get_text_field(data, 'diff_mode') or 'onlyInFirst'
        mode = DIFF_MODE_ALIASES.get(diff_mode, diff_mode)
        if mode in MERGE_MODES:
            return jsonify({'success': False, 'error': f'Invalid diff mode: {diff_mode}'}), 400

        return _respond(process_arrays(first, second, mode, output_mode))

    except InputError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception('Array diff request failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@arrays_bp.route('/api/arrays/reconcile', methods=['POST'])
def reconcile_arrays():
    """Run any reconciliation mode directly"""
    try:
        data = get_json_body()
        mode = get_text_field(data, 'mode') or MODE_MERGE
        require_tool('array-merger' if mode in MERGE_MODES else 'array-diff')
        first, second, output_mode = _read_inputs(data)

        return _respond(process_arrays(first, second, mode, output_mode))

    except InputError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except HTTPException:
        raise
    except Exception as e:
        logger.exception('Array reconcile request failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500
