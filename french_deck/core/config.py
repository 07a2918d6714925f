"""
牌组配置相关类的实现
包含默认牌组设置和日志设置
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .deck.types import DeckType

PACKAGE_LOGGER_NAME = "french_deck"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DeckConfig:
    """
    默认牌组配置
    Deck.default_new()根据该配置构建并洗牌
    """
    default_shuffles: int = 7                     # 默认洗牌次数
    random_seed: Optional[int] = None             # 随机种子，用于可重现的洗牌
    deck_type: DeckType = DeckType.FULL_FRENCH    # 牌组类型

    def __post_init__(self):
        """验证配置的有效性"""
        if isinstance(self.default_shuffles, bool) or not isinstance(self.default_shuffles, int):
            raise TypeError(f"洗牌次数必须是整数: {self.default_shuffles!r}")

        if self.default_shuffles < 0:
            raise ValueError(f"洗牌次数不能为负数: {self.default_shuffles}")

        if self.random_seed is not None and not isinstance(self.random_seed, int):
            raise TypeError(f"随机种子必须是整数或None: {self.random_seed!r}")

        if not isinstance(self.deck_type, DeckType):
            raise TypeError(f"无效的牌组类型: {self.deck_type!r}")

    def create_rng(self) -> random.Random:
        """根据随机种子创建随机数生成器"""
        if self.random_seed is not None:
            return random.Random(self.random_seed)
        return random.Random()


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    enable_console_logging: bool = True
    log_file_path: Optional[str] = None

    def __post_init__(self):
        """规范化并验证日志级别"""
        self.log_level = str(self.log_level).upper()
        if self.log_level not in _VALID_LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {self.log_level}")

    @classmethod
    def debug(cls) -> 'LoggingConfig':
        """调试配置，输出所有阶段转换和发牌记录"""
        return cls(log_level='DEBUG')


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    为包日志记录器安装处理器
    
    重复调用时会先移除此前安装的处理器，避免重复输出。
    
    Args:
        config: 日志配置，None时使用默认配置
        
    Returns:
        配置好的包日志记录器
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    for handler in logger.handlers[:]:
        if getattr(handler, '_french_deck_handler', False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(config.log_format)
    handlers = []
    if config.enable_console_logging:
        handlers.append(logging.StreamHandler())
    if config.log_file_path:
        handlers.append(logging.FileHandler(config.log_file_path, mode='a', encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._french_deck_handler = True
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, config.log_level))
    logger.debug(f"日志配置完成: level={config.log_level}, handlers={len(handlers)}")
    return logger
