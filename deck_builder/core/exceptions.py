"""
牌组构建异常定义.

牌组变换本身不会抛出异常，异常只出现在解析文本和校验配置等边界处.
"""


class DeckError(Exception):
    """牌组构建基础异常类"""
    pass


class InvalidCardError(DeckError, TypeError):
    """卡牌构造参数类型错误异常"""
    pass


class CardParseError(DeckError, ValueError):
    """卡牌文本无法解析异常"""
    pass


class DeckConfigError(DeckError, ValueError):
    """牌组配置错误异常"""
    pass
