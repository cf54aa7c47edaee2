import logging

from flask import Blueprint, jsonify

from array_tools.api.jwt_decoder import decode_jwt
from array_tools.blueprints.common import InputError, get_json_body, get_text_field, require_tool

logger = logging.getLogger(__name__)

jwt_decoder_bp = Blueprint('jwt_decoder', __name__)


@jwt_decoder_bp.route('/api/jwt/decode', methods=['POST'])
def decode_token():
    """Decode a JWT header and payload without verifying the signature"""
    require_tool('jwt-decoder')
    try:
        data = get_json_body()
        token = get_text_field(data, 'token')

        result = decode_jwt(token)
        if result['success']:
            return jsonify(result)
        return jsonify(result), 400

    except InputError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception('JWT decode request failed')
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500
