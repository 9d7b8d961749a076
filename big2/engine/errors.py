"""引擎异常定义"""


class InvalidHand(ValueError):
    """一组牌不构成合法牌型（或牌力计算时内部数据不一致）"""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class DeckError(ValueError):
    """牌堆无法按要求切分"""
