import json
import os
from pathlib import Path
from typing import Any, Dict

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent

DEFAULT_CONFIG: Dict[str, Any] = {
    'tools': {},
    'defaults': {
        'output_mode': 'auto',
        'url_parameter': 'sku',
    },
    'log_level': 'INFO',
}


def get_config_path() -> Path:
    """Get the config file path, honouring ARRAY_TOOLS_CONFIG."""
    config_path = os.environ.get('ARRAY_TOOLS_CONFIG')
    if config_path:
        return Path(config_path)
    return PROJECT_ROOT / "config" / "config.json"


def load_config(config_file: Path = None) -> Dict[str, Any]:
    """Load configuration from config/config.json, falling back to defaults"""
    config_file = config_file or get_config_path()
    config = {
        'tools': {},
        'defaults': dict(DEFAULT_CONFIG['defaults']),
        'log_level': DEFAULT_CONFIG['log_level'],
    }

    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (json.JSONDecodeError, IOError):
            loaded = {}
        if isinstance(loaded, dict):
            config['tools'].update(loaded.get('tools', {}))
            config['defaults'].update(loaded.get('defaults', {}))
            config['log_level'] = loaded.get('log_level', config['log_level'])

    env_level = os.environ.get('ARRAY_TOOLS_LOG_LEVEL')
    if env_level:
        config['log_level'] = env_level

    return config


def is_tool_enabled(config: Dict[str, Any], tool_id: str) -> bool:
    """Check if a tool is enabled in config. Defaults to True if not specified."""
    tool_conf = config.get('tools', {}).get(tool_id, {})
    return tool_conf.get('enabled', True)


def get_enabled_tools(config: Dict[str, Any], tools_list):
    """Filter tools list to only include enabled tools."""
    return [tool for tool in tools_list if is_tool_enabled(config, tool.get('id', ''))]
