"""牌组构建CLI用户界面模块.

这个包提供命令行界面，包括：
- click命令入口
- 渲染器（显示逻辑）
"""

from .cli_app import main
from .render import DeckRenderer

__all__ = ['main', 'DeckRenderer']
