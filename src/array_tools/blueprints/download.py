import io

from flask import Blueprint, jsonify, send_file
from werkzeug.utils import secure_filename

from array_tools.blueprints.common import InputError, get_json_body, get_text_field
from array_tools.config import TOOLS

download_bp = Blueprint('download', __name__)

DEFAULT_FILENAME = 'output.txt'


def default_filename(tool_id: str) -> str:
    """The download name a tool suggests for its results"""
    for tool in TOOLS:
        if tool['id'] == tool_id:
            return tool.get('download_name') or DEFAULT_FILENAME
    return DEFAULT_FILENAME


@download_bp.route('/api/download', methods=['POST'])
def download_result():
    """Return a tool result as a plain text attachment"""
    try:
        data = get_json_body()
        content = get_text_field(data, 'content')
        tool_id = get_text_field(data, 'tool')
        filename = secure_filename(get_text_field(data, 'filename')) or default_filename(tool_id)
    except InputError as e:
        return jsonify({'success': False, 'error': str(e)}), 400

    if not content:
        return jsonify({'success': False, 'error': 'Nothing to download'}), 400

    return send_file(
        io.BytesIO(content.encode('utf-8')),
        mimetype='text/plain; charset=utf-8',
        as_attachment=True,
        download_name=filename
    )
