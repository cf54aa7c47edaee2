"""
JWT decoder.
Splits a token into its three segments and decodes the header and payload.
The signature is passed through untouched and never verified.
"""

import base64
import binascii
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

# Numbers above this are treated as unix timestamps when displayed
TIMESTAMP_THRESHOLD = 1000000000

HEADER_FIELDS = [
    ('alg', 'the algorithm used for signing the JWT'),
    ('typ', 'always set to "JWT"'),
]

PAYLOAD_FIELDS = [
    ('token_type', ''),
    ('exp', 'the expiration time after which JWT must not be accepted'),
    ('iat', 'the time at which the JWT was issued'),
    ('jti', 'unique identifier of the token even among different issuers'),
    ('id', ''),
    ('email', ''),
    ('first_name', ''),
    ('last_name', ''),
    ('role', ''),
]

# Claims shown through format_claim_value; the rest are shown as plain text
FORMATTED_CLAIMS = {'exp', 'iat', 'role'}


class JWTDecodeError(ValueError):
    """Raised when a token cannot be decoded because of its structure or content."""
    pass


def _b64_decode_segment(segment: str) -> bytes:
    """Decode a base64url segment; padding is optional and the standard alphabet is accepted"""
    normalized = segment.replace('+', '-').replace('/', '_')
    normalized += '=' * (-len(normalized) % 4)
    return base64.urlsafe_b64decode(normalized.encode('ascii'))


def decode_segment(segment: str, name: str) -> Dict[str, Any]:
    try:
        raw = _b64_decode_segment(segment)
        data = json.loads(raw.decode('utf-8'))
    except (binascii.Error, UnicodeError, ValueError) as e:
        raise JWTDecodeError(f'Invalid JWT {name}: {str(e)}')

    if not isinstance(data, dict):
        raise JWTDecodeError(f'Invalid JWT {name}: expected a JSON object')
    return data


def format_claim_value(value: Any) -> str:
    """Render a claim the way the decoder table shows it"""
    if isinstance(value, list):
        return '[' + ', '.join(str(item) for item in value) + ']'
    if isinstance(value, bool):
        return 'true' if value else ''
    if isinstance(value, (int, float)) and value > TIMESTAMP_THRESHOLD:
        try:
            moment = datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return str(value)
        return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')
    if not value:
        return ''
    return str(value)


def plain_claim_value(value: Any) -> str:
    if not value:
        return ''
    if value is True:
        return 'true'
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(',', ':'), ensure_ascii=False)
    return str(value)


def _claim_value(field: str, value: Any) -> str:
    if field in FORMATTED_CLAIMS:
        return format_claim_value(value)
    return plain_claim_value(value)


def explain_claims(header: Dict[str, Any], payload: Dict[str, Any]) -> Dict[str, List[Dict[str, str]]]:
    """Build the field/value/explanation rows; payload fields with no value are skipped"""
    header_rows = [
        {'field': field, 'value': str(header.get(field) or ''), 'explanation': explanation}
        for field, explanation in HEADER_FIELDS
    ]
    payload_rows = [
        {'field': field, 'value': _claim_value(field, payload.get(field)), 'explanation': explanation}
        for field, explanation in PAYLOAD_FIELDS
    ]
    return {
        'header': header_rows,
        'payload': [row for row in payload_rows if row['value'] != ''],
    }


def split_token(token: str) -> List[str]:
    parts = token.strip().split('.')
    if len(parts) != 3:
        raise JWTDecodeError('Invalid JWT token format')
    return parts


def decode_jwt(token: Optional[str]) -> Dict[str, Any]:
    """
    Decode a JWT without verifying it.

    Returns:
        Dict with 'success', 'header', 'payload', 'signature' and
        'explanations', or 'success': False and 'error'
    """
    try:
        if not token or not token.strip():
            return {'success': True, 'header': None, 'payload': None, 'signature': None, 'explanations': None}

        header_segment, payload_segment, signature = split_token(token)
        header = decode_segment(header_segment, 'header')
        payload = decode_segment(payload_segment, 'payload')

        return {
            'success': True,
            'header': header,
            'payload': payload,
            'signature': signature,
            'explanations': explain_claims(header, payload)
        }

    except JWTDecodeError as e:
        return {'success': False, 'error': str(e)}
    except Exception as e:
        logger.exception('JWT decoding failed')
        return {'success': False, 'error': f'Unexpected error during decoding: {str(e)}'}
