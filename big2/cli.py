"""锄大地 AI 对局 - 命令行入口（python -m big2 或 big2）"""

import sys
import argparse
import logging
from dataclasses import replace
from typing import List, Optional

from big2.ai.rule_ai import RuleAI
from big2.engine.errors import DeckError
from big2.game.config import GameConfig
from big2.game.controller import GameController
from big2.ui.renderer import TerminalRenderer


def create_players(n_players: int, config: GameConfig):
    """创建 n 个规则 AI 玩家"""
    names = [f"玩家{i + 1}" for i in range(n_players)]
    strategies = [RuleAI(endgame_threshold=config.endgame_threshold) for _ in names]
    return names, strategies


def run_one_game(config: GameConfig, delay: float = 0.8) -> None:
    """运行一局完整对局"""
    renderer = TerminalRenderer(delay=delay)
    names, strategies = create_players(config.n_players, config)

    gc = GameController(player_names=names, strategies=strategies, config=config)
    gc.on_event(renderer.make_event_callback(gc.players))

    renderer.print_header("🀄 锄大地 AI 对局开始")

    gc.deal()
    renderer.show_deal(gc.players)
    renderer.pause(1.0)

    renderer.print_header("🎴 出牌阶段")
    gc.run_playing()

    renderer.show_result(gc.state, gc.players)


def main(argv: Optional[List[str]] = None) -> None:
    """命令行入口"""
    parser = argparse.ArgumentParser(description="锄大地 AI 对局")
    parser.add_argument("--players", type=int, default=None, help="玩家人数 (默认4，需整除52)")
    parser.add_argument("--rounds", type=int, default=1, help="对局数 (默认1)")
    parser.add_argument("--delay", type=float, default=0.8, help="出牌延迟秒数 (默认0.8)")
    parser.add_argument("--fast", action="store_true", help="快速模式 (无延迟)")
    parser.add_argument("--seed", type=int, default=None, help="随机种子")
    parser.add_argument("--verbose", action="store_true", help="输出调试日志")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GameConfig.from_env()
    except ValueError as e:
        print(f"配置错误: {e}", file=sys.stderr)
        sys.exit(2)
    if args.players is not None:
        config = replace(config, n_players=args.players)
    if args.seed is not None:
        config = replace(config, seed=args.seed)

    delay = 0.0 if args.fast else args.delay

    for i in range(args.rounds):
        if args.rounds > 1:
            print(f"\n{'=' * 60}")
            print(f"  第 {i + 1}/{args.rounds} 局")
            print(f"{'=' * 60}")
        round_config = config if config.seed is None else replace(config, seed=config.seed + i)
        try:
            run_one_game(round_config, delay=delay)
        except DeckError as e:
            print(f"无法发牌: {e}", file=sys.stderr)
            sys.exit(2)


if __name__ == "__main__":
    main()
