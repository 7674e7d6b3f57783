"""
Tests unitaires des chaines de repli des selecteurs.

Chaque accesseur est teste isolement sur des fragments HTML, puis
resolve() est verifie sur l'ordre de priorite des chaines.
"""

from bs4 import BeautifulSoup

from anidesk.adapters.scraping.selectors import (
    SUMMARY_FIELDS,
    attr_of,
    path_segment_of,
    resolve,
    text_of,
)


def _fragment(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


class TestAccessors:
    """Tests des fabriques d'accesseurs."""

    def test_text_of_strips_whitespace(self):
        node = _fragment('<div class="fdi-type">  TV \n</div>')
        assert text_of(".fdi-type")(node) == "TV"

    def test_text_of_missing_returns_none(self):
        assert text_of(".fdi-type")(_fragment("<div></div>")) is None

    def test_attr_of_skips_elements_without_attribute(self):
        """attr_of prend le premier element qui porte l'attribut."""
        node = _fragment('<img class="p"><img class="p" data-src="b.jpg">')
        assert attr_of(".p", "data-src")(node) == "b.jpg"

    def test_attr_of_missing_returns_none(self):
        assert attr_of("img", "src")(_fragment("<img>")) is None

    def test_path_segment_of_third_segment(self):
        node = _fragment('<a href="/watch/naruto-677">x</a>')
        assert path_segment_of("a", 2)(node) == "naruto-677"

    def test_path_segment_of_short_path_returns_none(self):
        node = _fragment('<a href="/naruto">x</a>')
        assert path_segment_of("a", 2)(node) is None

    def test_path_segment_of_ignores_links_without_href(self):
        node = _fragment('<a name="top">x</a><a href="/watch/bleach-1">y</a>')
        assert path_segment_of("a", 2)(node) == "bleach-1"

    def test_path_segment_of_last_segment(self):
        node = _fragment('<a href="/genre/slice-of-life">x</a>')
        assert path_segment_of("a", -1)(node) == "slice-of-life"


class TestResolve:
    """Tests de resolve() sur les chaines ordonnees."""

    def test_first_non_empty_wins(self):
        node = _fragment('<h3 class="film-name"><a title="Primary">x</a></h3><a title="Secondary"></a>')
        assert resolve(node, SUMMARY_FIELDS["title"]) == "Primary"

    def test_falls_back_to_secondary(self):
        node = _fragment('<a href="/x" title="Secondary"></a>')
        assert resolve(node, SUMMARY_FIELDS["title"]) == "Secondary"

    def test_empty_primary_value_falls_through(self):
        """Une valeur vide ou blanche ne bloque pas la chaine."""
        node = _fragment('<span class="fdi-episode">  </span><span class="tick-eps">12</span>')
        assert resolve(node, SUMMARY_FIELDS["episode_count"]) == "12"

    def test_nothing_matches_returns_empty_string(self):
        node = _fragment("<div></div>")
        assert all(resolve(node, chain) == "" for chain in SUMMARY_FIELDS.values())

    def test_poster_prefers_lazy_source(self):
        node = _fragment('<img class="film-poster-img" src="placeholder.gif" data-src="real.jpg">')
        assert resolve(node, SUMMARY_FIELDS["poster_url"]) == "real.jpg"
