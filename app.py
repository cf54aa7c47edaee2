#!/usr/bin/env python3
"""
Main entry point for the Array Tools application.
Adds src/ to the path and runs the Flask app.
"""

import sys
import os
import argparse
from pathlib import Path

project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from array_tools.main import app


def get_default_port():
    """Port from ARRAY_TOOLS_PORT, falling back to 8000."""
    port = os.environ.get('ARRAY_TOOLS_PORT', '8000')
    try:
        return int(port)
    except ValueError:
        return 8000


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Array Tools Server')
    parser.add_argument('--port', '-p', type=int, default=get_default_port(),
                        help='Port to run the server on (default: 8000)')
    parser.add_argument('--host', default='127.0.0.1',
                        help='Host to bind to (default: 127.0.0.1)')
    parser.add_argument('--debug', action='store_true',
                        help='Run Flask in debug mode')
    args = parser.parse_args()

    app.logger.info('Starting Array Tools on http://%s:%s', args.host, args.port)
    try:
        app.run(host=args.host, port=args.port, debug=args.debug)
    except KeyboardInterrupt:
        print("\nServer stopped by user")
