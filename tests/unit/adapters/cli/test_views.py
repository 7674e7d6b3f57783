"""
Tests des constructeurs d'affichage Rich (grille, fiche, episodes).
"""

from anidesk.adapters.cli.views import (
    MAX_EPISODES_SHOWN,
    build_details_panel,
    build_episode_table,
    build_grid,
)
from anidesk.core.entities import AnimeDetails, AnimeSummary
from anidesk.data.sample_data import create_episodes
from anidesk.services.browser import placeholder_episodes


class TestBuildGrid:
    def test_one_row_per_card(self):
        cards = [AnimeSummary(id=f"a-{n}", title=f"Anime {n}") for n in range(3)]

        table = build_grid(cards, "Tendances")

        assert table.row_count == 3
        assert table.title == "Tendances"

    def test_empty_grid(self):
        assert build_grid([], "Vide").row_count == 0


class TestDetailsPanel:
    def test_empty_fields_are_hidden(self):
        panel = build_details_panel(AnimeDetails(id="x", title="X", type="TV", genres=["Action", "Drama"]))

        assert panel.title == "X"
        assert "Type :" in panel.renderable
        assert "Action, Drama" in panel.renderable
        assert "Statut" not in panel.renderable

    def test_title_falls_back_to_id(self):
        panel = build_details_panel(AnimeDetails(id="mystery"))

        assert panel.title == "mystery"
        assert "Aucune information" in panel.renderable


class TestEpisodeTable:
    def test_short_list_has_no_caption(self):
        table = build_episode_table(placeholder_episodes())

        assert table.row_count == 12
        assert table.caption is None

    def test_long_list_is_truncated(self):
        table = build_episode_table(create_episodes(100, "One Piece"))

        assert table.row_count == MAX_EPISODES_SHOWN
        assert table.caption == f"... et {100 - MAX_EPISODES_SHOWN} autres episodes"
