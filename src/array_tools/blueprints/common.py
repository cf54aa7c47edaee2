from typing import Any, Dict, Optional

from flask import abort, current_app, request

from array_tools.config import is_tool_enabled


class InputError(ValueError):
    """Raised for request bodies that are missing or malformed."""
    pass


def require_tool(tool_id: str) -> None:
    """Abort with 404 when the tool is disabled in config"""
    if not is_tool_enabled(current_app.config['TOOLS_CONFIG'], tool_id):
        abort(404)


def tool_default(key: str, fallback: Any) -> Any:
    return current_app.config['TOOLS_CONFIG'].get('defaults', {}).get(key, fallback)


def get_json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        raise InputError('No data provided')
    return data


def get_text_field(data: Dict[str, Any], name: str, default: Optional[str] = '') -> str:
    value = data.get(name, default)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise InputError(f'Field "{name}" must be a string')
    return value
