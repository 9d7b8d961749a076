"""GameController 集成测试"""

import pytest
from dataclasses import fields
from typing import List, Optional

from big2.ai.rule_ai import RuleAI
from big2.engine.card import Card, Rank, Suit
from big2.engine.errors import DeckError
from big2.game.config import GameConfig, DEFAULT_PLAYERS, ENDGAME_THRESHOLD
from big2.game.controller import GameController
from big2.game.game_state import GameState, GamePhase
from big2.game.player import Player


class AlwaysPass:
    """永远不出的策略"""

    def decide_play(self, player: Player, state: GameState) -> Optional[List[Card]]:
        return None


class PlaysForeignCard:
    """总是出一张不在手里的牌"""

    def decide_play(self, player: Player, state: GameState) -> Optional[List[Card]]:
        for rank in Rank:
            card = Card(rank, Suit.SPADE)
            if card not in player.hand:
                return [card]
        return None


def _make_controller(n: int, strategy_factory, seed: int = 7) -> GameController:
    names = [f"P{i}" for i in range(n)]
    config = GameConfig(n_players=n, seed=seed)
    return GameController(names, [strategy_factory() for _ in names], config=config)


class TestFullGame:

    def test_rule_ai_game_finishes(self):
        gc = _make_controller(4, RuleAI)
        state = gc.run_game()

        assert state.phase == GamePhase.FINISHED
        assert state.winner is not None
        assert gc.players[state.winner].hand_size == 0

        # 每张牌要么已出，要么还在手里
        played = [card for _, hand in state.play_history for card in hand.cards]
        in_hand = [card for p in gc.players for card in p.hand]
        assert len(played) + len(in_hand) == 52
        assert len(set(played) | set(in_hand)) == 52

        last_pid, _ = state.play_history[-1]
        assert last_pid == state.winner

    def test_history_matches_play_counts(self):
        gc = _make_controller(4, RuleAI, seed=11)
        state = gc.run_game()
        for p in gc.players:
            assert p.play_count == sum(1 for pid, _ in state.play_history if pid == p.id)
            for pid, hand in state.play_history:
                if pid == p.id:
                    assert hand.player == p.id

    def test_seed_is_repeatable(self):
        first = _make_controller(4, RuleAI, seed=3).run_game()
        second = _make_controller(4, RuleAI, seed=3).run_game()
        assert [h.cards for _, h in first.play_history] == [h.cards for _, h in second.play_history]

    def test_events_are_emitted(self):
        gc = _make_controller(2, RuleAI)
        seen = []
        gc.on_event(seen.append)
        state = gc.run_game()
        assert seen == state.events
        assert any(e.action == "play" for e in seen)

    def test_run_game_twice(self):
        gc = _make_controller(4, RuleAI)
        gc.run_game()
        state = gc.run_game()
        assert state.phase == GamePhase.FINISHED
        assert sum(p.hand_size for p in gc.players) + sum(
            len(h.cards) for _, h in state.play_history
        ) == 52


class TestDegenerateStrategies:

    def test_always_pass_still_terminates(self):
        """自由出牌时不出会被改为最小单张，对局仍能结束"""
        gc = _make_controller(2, AlwaysPass)
        state = gc.run_game()
        assert state.phase == GamePhase.FINISHED
        assert all(h.kind.value == "SINGLE" for _, h in state.play_history)
        assert any(e.action == "clear" for e in state.events)
        # 对手从未出牌
        loser = 1 - state.winner
        assert gc.players[loser].hand_size == 26

    def test_illegal_cards_are_not_played(self):
        gc = _make_controller(2, PlaysForeignCard)
        state = gc.run_game()
        assert state.phase == GamePhase.FINISHED
        for pid, hand in state.play_history:
            assert len(hand.cards) == 1


class TestDealing:

    def test_four_players_get_thirteen(self):
        gc = _make_controller(4, RuleAI)
        gc.deal()
        assert [p.hand_size for p in gc.players] == [13, 13, 13, 13]
        assert gc.state.phase == GamePhase.PLAYING
        for p in gc.players:
            assert p.hand == sorted(p.hand)

    def test_three_players_cannot_deal(self):
        gc = _make_controller(3, RuleAI)
        with pytest.raises(DeckError):
            gc.deal()

    def test_house_rules_are_rejected(self):
        config = GameConfig(starting_card_opens=True)
        with pytest.raises(NotImplementedError):
            GameController(["a", "b"], [RuleAI(), RuleAI()], config=config)
        with pytest.raises(NotImplementedError):
            GameConfig(uneven_deal=True).check_house_rules()


class TestConfig:

    def test_defaults(self, monkeypatch):
        for key in ("BIG2_PLAYERS", "BIG2_ENDGAME_THRESHOLD", "BIG2_SEED"):
            monkeypatch.delenv(key, raising=False)
        config = GameConfig.from_env()
        assert config.n_players == DEFAULT_PLAYERS
        assert config.endgame_threshold == ENDGAME_THRESHOLD == 5
        assert config.seed is None

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("BIG2_PLAYERS", "2")
        monkeypatch.setenv("BIG2_ENDGAME_THRESHOLD", "3")
        monkeypatch.setenv("BIG2_SEED", "42")
        config = GameConfig.from_env()
        assert config == GameConfig(n_players=2, endgame_threshold=3, seed=42)

    @pytest.mark.parametrize("key", ["BIG2_PLAYERS", "BIG2_ENDGAME_THRESHOLD", "BIG2_SEED"])
    def test_bad_env_value_names_variable(self, monkeypatch, key):
        monkeypatch.setenv(key, "four")
        with pytest.raises(ValueError, match=key):
            GameConfig.from_env()

    def test_blank_seed_means_unseeded(self, monkeypatch):
        monkeypatch.setenv("BIG2_SEED", "  ")
        assert GameConfig.from_env().seed is None


class TestTrickClearing:

    def test_trick_clears_when_top_owner_leads_again(self):
        """每次清空牌堆时，轮到的玩家正是上一手被接受出牌的玩家"""
        gc = _make_controller(4, RuleAI, seed=19)
        state = gc.run_game()

        last_player = None
        clears = 0
        for event in state.events:
            if event.action == "play":
                last_player = event.player_id
            elif event.action == "clear":
                clears += 1
                assert event.player_id == last_player
        assert clears > 0

    def test_game_state_fields(self):
        """轮次由牌堆的最大牌归属决定，状态里不另设不出计数"""
        assert [f.name for f in fields(GameState)] == [
            "players", "phase", "pile", "turn", "current_player",
            "winner", "events", "play_history",
        ]
