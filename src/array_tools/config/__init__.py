from .settings import load_config, is_tool_enabled, get_enabled_tools
from .tools import TOOLS

__all__ = ['load_config', 'is_tool_enabled', 'get_enabled_tools', 'TOOLS']
