import logging
from datetime import datetime
from typing import Any, Dict, Optional

from flask import Flask, jsonify, render_template_string

from array_tools.blueprints import ALL_BLUEPRINTS
from array_tools.config import TOOLS, get_enabled_tools, load_config
from array_tools.config.template import DASHBOARD_TEMPLATE

logger = logging.getLogger(__name__)


def configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )


def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    """Build the Flask app with every tool blueprint registered"""
    tools_config = config if config is not None else load_config()
    configure_logging(tools_config.get('log_level', 'INFO'))

    app = Flask(__name__)
    app.config['TOOLS_CONFIG'] = tools_config

    for blueprint in ALL_BLUEPRINTS:
        app.register_blueprint(blueprint)

    @app.route('/')
    def dashboard():
        return render_template_string(DASHBOARD_TEMPLATE, tools=get_enabled_tools(tools_config, TOOLS))

    @app.route('/api/tools')
    def api_tools():
        return jsonify({'tools': get_enabled_tools(tools_config, TOOLS)})

    @app.route('/health')
    def health():
        return jsonify({
            'status': 'healthy',
            'timestamp': datetime.now().isoformat(),
            'tools_count': len(get_enabled_tools(tools_config, TOOLS))
        })

    return app


app = create_app()


if __name__ == '__main__':
    logger.info('Starting Array Tools on http://127.0.0.1:8000')
    app.run(host='127.0.0.1', port=8000, debug=True)
