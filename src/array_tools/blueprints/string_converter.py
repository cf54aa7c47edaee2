import logging

from flask import Blueprint, request, jsonify

from array_tools.api.string_converter import convert_lines, converted_filename
from array_tools.blueprints.common import InputError, get_json_body, get_text_field, require_tool

logger = logging.getLogger(__name__)

string_converter_bp = Blueprint('string_converter', __name__)


@string_converter_bp.route('/api/string-converter/convert', methods=['POST'])
def convert_text():
    """Convert each line of text into a quoted string array element"""
    require_tool('string-converter')
    try:
        data = get_json_body()
        text = get_text_field(data, 'text')

        result = convert_lines(text)
        if result['success']:
            return jsonify(result)
        return jsonify(result), 400

    except InputError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception('String conversion request failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@string_converter_bp.route('/api/string-converter/upload', methods=['POST'])
def convert_upload():
    """Convert an uploaded text file and suggest a download name"""
    require_tool('string-converter')
    try:
        if 'file' not in request.files:
            return jsonify({'success': False, 'error': 'No file uploaded'}), 400

        file = request.files['file']
        if file.filename == '':
            return jsonify({'success': False, 'error': 'No file selected'}), 400

        content = file.read().decode('utf-8')
        result = convert_lines(content)
        result['filename'] = converted_filename(file.filename)

        if result['success']:
            return jsonify(result)
        return jsonify(result), 400

    except UnicodeDecodeError:
        return jsonify({'success': False, 'error': 'File is not valid UTF-8 text'}), 400
    except Exception as e:
        logger.exception('String conversion upload failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500
