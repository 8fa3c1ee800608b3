"""
Tests for PlayerService roster rules.
"""

import pytest


class TestCreatePlayer:
    def test_create_strips_name(self, player_service):
        player = player_service.create_player("  Caps ", mid=9, player_id="caps")
        assert player.name == "Caps"
        assert player_service.get_player("caps").mid == 9

    def test_blank_name_rejected(self, player_service):
        with pytest.raises(ValueError, match="Name required"):
            player_service.create_player("   ", top=3)

    @pytest.mark.parametrize("score", [-1, 101])
    def test_out_of_range_score_rejected(self, player_service, score):
        with pytest.raises(ValueError):
            player_service.create_player("X", top=score)

    def test_non_integer_score_rejected(self, player_service):
        with pytest.raises(ValueError):
            player_service.create_player("X", top="5")

    def test_unknown_role_rejected(self, player_service):
        with pytest.raises(ValueError, match="Unknown role"):
            player_service.create_player("X", carry=5)


class TestEditAndDelete:
    def test_edit_player(self, player_service):
        player_service.create_player("Old", top=2, player_id="p1")
        updated = player_service.edit_player("p1", name="New", adc=8)
        assert updated.name == "New"
        assert updated.adc == 8
        assert updated.top == 2

    def test_edit_missing_player(self, player_service):
        with pytest.raises(ValueError, match="not found"):
            player_service.edit_player("missing", top=1)

    def test_delete_player(self, player_service):
        player_service.create_player("Gone", player_id="p1")
        player_service.delete_player("p1")
        assert player_service.get_player("p1") is None
        with pytest.raises(ValueError):
            player_service.delete_player("p1")


class TestListing:
    def test_selectable_players_need_a_role(self, player_service):
        player_service.create_player("Bench", player_id="b")
        player_service.create_player("Ready", support=1, player_id="r")

        assert [p.player_id for p in player_service.list_players()] == ["b", "r"]
        assert [p.player_id for p in player_service.list_selectable_players()] == ["r"]
