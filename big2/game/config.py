"""对局配置 - 人数、残局阈值、随机种子与尚未实现的房规开关"""

import os
from dataclasses import dataclass
from typing import Optional

# 任一对手剩余牌数 ≤ 该值时进入残局压制
ENDGAME_THRESHOLD = 5

DEFAULT_PLAYERS = 4


@dataclass
class GameConfig:
    """一局游戏的配置"""
    n_players: int = DEFAULT_PLAYERS
    endgame_threshold: int = ENDGAME_THRESHOLD
    seed: Optional[int] = None

    # 以下房规尚未实现，开启时 GameController 会拒绝启动
    starting_card_opens: bool = False    # 持有指定起始牌的玩家先出
    uneven_deal: bool = False            # 人数无法整除 52 时不均分发牌

    def check_house_rules(self) -> None:
        """开启了未实现的房规时抛出 NotImplementedError"""
        if self.starting_card_opens:
            raise NotImplementedError("持起始牌者先出的规则尚未实现")
        if self.uneven_deal:
            raise NotImplementedError("不均分发牌的规则尚未实现")

    @classmethod
    def from_env(cls) -> "GameConfig":
        """
        从环境变量创建配置。

        环境变量：BIG2_PLAYERS / BIG2_ENDGAME_THRESHOLD / BIG2_SEED
        未设置的项使用默认值。
        """
        return cls(
            n_players=_env_int("BIG2_PLAYERS", DEFAULT_PLAYERS),
            endgame_threshold=_env_int("BIG2_ENDGAME_THRESHOLD", ENDGAME_THRESHOLD),
            seed=_env_int("BIG2_SEED", None),
        )


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    """读取整数环境变量，未设置或为空时返回默认值"""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"环境变量 {name} 必须是整数: {raw!r}") from None
