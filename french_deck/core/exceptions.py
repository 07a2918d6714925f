"""
牌组业务异常定义
空牌组发牌不是异常，返回None由调用方处理
"""

from typing import Optional


class DeckError(Exception):
    """牌组基础异常类"""
    pass


class ProtocolViolation(DeckError):
    """
    牌组阶段协议违规异常
    
    在错误的生命周期阶段调用操作，或复用已被消费的牌组对象时抛出。
    属于编程错误，不应重试。
    """

    def __init__(self, operation: str, expected: Optional[object], actual: Optional[object]):
        """
        Args:
            operation: 被调用的操作名
            expected: 该操作要求的阶段
            actual: 牌组当前所处的阶段，None表示牌组已被消费
        """
        self.operation = operation
        self.expected = expected
        self.actual = actual
        actual_desc = "已消费" if actual is None else getattr(actual, 'name', actual)
        expected_desc = getattr(expected, 'name', expected)
        super().__init__(
            f"操作 {operation} 要求阶段 {expected_desc}，当前阶段: {actual_desc}"
        )
