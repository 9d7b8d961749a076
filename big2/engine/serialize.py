"""序列化工具 - 牌与出牌的 JSON 交换格式（用于测试夹具与回放）"""

import json
from pathlib import Path
from typing import Iterable, List, Union

from .card import Card, Rank, Suit
from .hand_type import Hand


def card_to_dict(c: Card) -> dict:
    """将 Card 序列化为 (rank, suit) 对"""
    return {"rank": c.rank.name, "suit": c.suit.name}


def card_from_dict(data: dict) -> Card:
    """从 (rank, suit) 对还原 Card，名称不区分大小写"""
    try:
        rank = Rank[str(data["rank"]).upper()]
        suit = Suit[str(data["suit"]).upper()]
    except (KeyError, TypeError) as e:
        raise ValueError(f"无法解析卡牌: {data!r}") from e
    return Card(rank=rank, suit=suit)


def cards_to_json(cards: Iterable[Card]) -> str:
    """牌列表 → JSON 数组（保持顺序）"""
    return json.dumps([card_to_dict(c) for c in cards])


def cards_from_json(text: str) -> List[Card]:
    """JSON 数组 → 牌列表"""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("牌列表必须是 JSON 数组")
    return [card_from_dict(item) for item in data]


def hand_to_json(hand: Hand) -> str:
    """一手牌按其有序牌列表序列化"""
    return cards_to_json(hand.cards)


def load_cards(path: Union[str, Path]) -> List[Card]:
    """读取 JSON 夹具文件中的牌列表"""
    return cards_from_json(Path(path).read_text(encoding="utf-8"))


def dump_cards(cards: Iterable[Card], path: Union[str, Path]) -> None:
    """把牌列表写入 JSON 夹具文件"""
    Path(path).write_text(cards_to_json(cards), encoding="utf-8")
