"""
URL parameter extractor.
Pulls one query parameter value out of each distinct endpoint in a list of URLs.
"""

import json
import logging
import re
from typing import Any, Dict, List, Optional
from urllib.parse import unquote, urlsplit

logger = logging.getLogger(__name__)

DEFAULT_PARAMETER = 'sku'

_SPLIT_RE = re.compile(r'[,\n]')
_DEFAULT_PORTS = {'http': 80, 'https': 443, 'ws': 80, 'wss': 443, 'ftp': 21}


def split_urls(text: str) -> List[str]:
    """Read URLs from a JSON array or from comma/newline separated text"""
    trimmed = text.strip()
    if trimmed.startswith('[') and trimmed.endswith(']'):
        try:
            parsed = json.loads(trimmed)
        except ValueError:
            parsed = None
        if isinstance(parsed, list):
            return [str(url) for url in parsed]
    return [url for url in _SPLIT_RE.split(trimmed) if url != '']


def url_origin(url: str) -> Optional[str]:
    """Return scheme://host[:port] for an absolute URL, None if it is not one"""
    parts = urlsplit(url)
    if not parts.scheme or not parts.hostname:
        return None
    scheme = parts.scheme.lower()
    origin = f'{scheme}://{parts.hostname.lower()}'
    port = parts.port
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        origin += f':{port}'
    return origin


def extract_parameter_values(urls: List[str], param_name: str) -> List[str]:
    """
    Return the value of param_name for each distinct origin+path.

    An endpoint counts as seen as soon as its first URL is read, even when
    that URL lacks the parameter; later URLs for the same endpoint are skipped.
    """
    seen = set()
    result: List[str] = []
    param_re = re.compile(rf'[?&]{re.escape(param_name)}=([^&]*)')

    for url in urls:
        url = url.strip()
        try:
            origin = url_origin(url)
            if origin is None:
                logger.warning('Skipping URL that cannot be parsed: %s', url)
                continue

            parts = urlsplit(url)
            endpoint = f'{origin}{parts.path or "/"}?{param_name}='
            if endpoint in seen:
                continue
            seen.add(endpoint)

            search = f'?{parts.query}' if parts.query else ''
            match = param_re.search(search)
            if match:
                result.append(unquote(match.group(1)).strip())
        except ValueError:
            # invalid port numbers and similar
            logger.warning('Skipping URL that cannot be parsed: %s', url)

    return result


def process_urls(text: str, param_name: str = DEFAULT_PARAMETER) -> Dict[str, Any]:
    """
    Extract parameter values from URL text and format them as a JSON array.

    Returns:
        Dict with 'success', 'result' and 'count', or 'error' on failure
    """
    try:
        if not text or not text.strip():
            return {'success': True, 'result': '', 'count': 0}

        urls = split_urls(text)
        if not urls:
            return {'success': True, 'result': '[]', 'count': 0}

        values = extract_parameter_values(urls, param_name)
        return {
            'success': True,
            'result': json.dumps(values, indent=2, ensure_ascii=False),
            'count': len(values)
        }

    except Exception as e:
        logger.exception('URL processing failed')
        return {
            'success': False,
            'result': '',
            'error': f'Unexpected error while processing URLs: {str(e)}'
        }
