"""终端渲染器测试"""

from big2.ai.rule_ai import RuleAI
from big2.engine.card import Card, Rank, Suit
from big2.engine.hand_detector import detect_hand
from big2.game.config import GameConfig
from big2.game.controller import GameController
from big2.ui.renderer import TerminalRenderer, RED


class TestTerminalRenderer:

    def setup_method(self):
        self.renderer = TerminalRenderer(delay=0)

    def test_red_suits_are_coloured(self):
        text = self.renderer.format_cards([Card(Rank.ACE, Suit.HEART), Card(Rank.ACE, Suit.SPADE)])
        assert text.startswith(RED)
        assert text.endswith("♠A")

    def test_hand_name(self):
        single = detect_hand([Card(Rank.TWO, Suit.CLUB)])
        flush = detect_hand([Card(r, Suit.CLUB) for r in
                             (Rank.THREE, Rank.FIVE, Rank.SEVEN, Rank.NINE, Rank.JACK)])
        assert self.renderer.hand_name(single) == "单张"
        assert self.renderer.hand_name(flush) == "同花"

    def test_full_game_output(self, capsys):
        gc = GameController(
            ["甲", "乙"], [RuleAI(), RuleAI()], config=GameConfig(n_players=2, seed=5)
        )
        gc.on_event(self.renderer.make_event_callback(gc.players))
        gc.deal()
        self.renderer.show_deal(gc.players)
        gc.run_playing()
        self.renderer.show_result(gc.state, gc.players)

        out = capsys.readouterr().out
        assert "出牌" in out
        assert "游戏结束" in out
        assert gc.players[gc.state.winner].name in out
