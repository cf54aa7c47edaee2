import logging

from flask import Blueprint, jsonify

from array_tools.api.url_processor import DEFAULT_PARAMETER, process_urls
from array_tools.blueprints.common import InputError, get_json_body, get_text_field, require_tool, tool_default

logger = logging.getLogger(__name__)

url_processor_bp = Blueprint('url_processor', __name__)


@url_processor_bp.route('/api/url-processor/extract', methods=['POST'])
def extract_parameter():
    """Extract one parameter value per distinct URL endpoint"""
    require_tool('url-processor')
    try:
        data = get_json_body()
        urls = get_text_field(data, 'urls')
        parameter = get_text_field(data, 'parameter', None) or tool_default('url_parameter', DEFAULT_PARAMETER)

        result = process_urls(urls, parameter)
        if result['success']:
            return jsonify(result)
        return jsonify(result), 400

    except InputError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception('URL extraction request failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500
