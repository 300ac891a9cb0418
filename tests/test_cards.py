import pygame
import pytest

from arenalegends.card import CARD_NAMES, CardType
from arenalegends.cards import (
    CARD_CLASSES,
    Archers,
    Barbarians,
    Giant,
    Heal,
    HogRider,
    Knight,
    Poison,
    Skeletons,
    SpellPlacement,
    Zap,
    create_card,
)
from arenalegends.point import Point
from arenalegends.resources import Resources

FAR = Point(-1000, -1000)


class FakeFont:
    def __init__(self, size, rendered):
        self.font_size = size
        self.rendered = rendered

    def render(self, text, antialias, color):
        self.rendered.append((self.font_size, text))
        return pygame.Surface((1, 1))

    def size(self, text):
        return (len(text) * 10, 20)

    def get_linesize(self):
        return 20


@pytest.fixture
def drawing():
    rendered = []
    resources = Resources(
        bitmap_loader=lambda path: pygame.Surface((10, 10)),
        font_loader=lambda path, size: FakeFont(size, rendered),
    )
    return resources, rendered


def test_knight_stats_differ_between_editor_and_match():
    editor = Knight(0, 0, mouse=FAR)
    match = Knight(0, 0, in_play=True, mouse=FAR)
    assert editor.hp == match.hp == 1766
    assert editor.atk == 202
    assert editor.speed == 3
    assert match.speed == 2
    assert editor.description == "A tough melee fighter."
    assert match.description == ""


def test_giant_detect_radius_in_match():
    assert Giant(0, 0, mouse=FAR).detect_radius == 50
    assert Giant(0, 0, in_play=True, mouse=FAR).detect_radius == 6


def test_skeletons_deploy_fifteen_consecutive_troops():
    card = Skeletons(0, 0, in_play=True, mouse=FAR)
    command, troops = card.place_army(10, 5, 3.0, 40)
    assert len(troops) == 15
    assert [t.instance_id for t in troops] == list(range(40, 55))
    assert all(t.scale == 0.5 and t.army_type == 0 for t in troops)
    assert command == card.deploy_command(10, 5, 3.0)


def test_ranged_and_pair_cards():
    _, archers = Archers(0, 0, in_play=True, mouse=FAR).place_army(4, 4, 1.0, 0)
    assert [(t.army_type, t.scale) for t in archers] == [(1, 0.6), (1, 0.6)]
    _, barbs = Barbarians(0, 0, in_play=True, mouse=FAR).place_army(4, 4, 1.0, 7)
    assert [t.instance_id for t in barbs] == [7, 8]
    assert all(t.name == "Barbarians" for t in barbs)


def test_hog_rider_name_and_speed():
    card = HogRider(0, 0, in_play=True, mouse=FAR)
    assert card.name == "Hog Rider"
    assert card.speed == 4


def test_army_card_casts_no_spell():
    assert Knight(0, 0, in_play=True, mouse=FAR).place_spell(1, 2, 3, 4.0) is None


def test_zap_place_spell():
    card = Zap(0, 0, in_play=True, mouse=FAR)
    spell = card.place_spell(12, 6, 9, 5.0)
    assert isinstance(spell, SpellPlacement)
    assert spell.color == (0, 140, 255)
    assert spell.duration == 0.5
    assert spell.atk_tower == 58
    assert spell.pt == 192
    assert spell.instance_id == 12
    assert (spell.x, spell.y) == (6, 9)
    assert spell.command == card.deploy_command(6, 9, 5.0)


def test_zap_editor_duration():
    assert Zap(0, 0, mouse=FAR).duration == 1


def test_spell_colors():
    assert Poison(0, 0, in_play=True, mouse=FAR).place_spell(0, 0, 0, 1.0).color == (150, 50, 30)
    assert Heal(0, 0, in_play=True, mouse=FAR).place_spell(0, 0, 0, 1.0).color == (255, 220, 0)


def test_spell_card_cannot_place_army():
    with pytest.raises(TypeError):
        Poison(0, 0, in_play=True, mouse=FAR).place_army(1, 1, 1.0, 0)


def test_spell_editor_font_sizes():
    editor = Heal(0, 0, mouse=FAR)
    match = Heal(0, 0, in_play=True, mouse=FAR)
    assert (editor.desc_font_size, editor.desc_hover_font_size) == (16, 17)
    assert (match.desc_font_size, match.desc_hover_font_size) == (22, 23)


def test_card_classes_match_names_and_ids():
    for card_id, cls in enumerate(CARD_CLASSES):
        card = cls(0, 0, mouse=FAR)
        assert card.card_id == card_id
        assert card.name == CARD_NAMES[card_id]
        expected = CardType.SPELL if card_id >= 9 else CardType.ARMY
        assert card.card_type is expected


def test_create_card_returns_right_class():
    card = create_card(10, 500, 500, in_play=True)
    assert isinstance(card, Poison)
    assert card.in_play is True
    assert card.selected is False


@pytest.mark.parametrize("bad_id", [-1, 12])
def test_create_card_rejects_unknown_id(bad_id):
    with pytest.raises(ValueError):
        create_card(bad_id, 0, 0)


def test_heal_editor_draw_shows_interval(drawing):
    resources, rendered = drawing
    card = Heal(0, 0, mouse=FAR, resources=resources)
    card.draw(pygame.Surface((600, 1200)))
    texts = [text for _, text in rendered]
    assert "Interval: 0.5" in texts
    assert "Radius: 3.5" in texts
    assert "Heal" in texts
    assert (16, "Atk: 75") in rendered


def test_zap_match_draw_uses_short_labels(drawing):
    resources, rendered = drawing
    card = Zap(0, 0, in_play=True, mouse=FAR, resources=resources)
    card.draw(pygame.Surface((600, 1200)))
    texts = [text for _, text in rendered]
    assert "Rad.: 2.5" in texts
    assert "Dur.: 0.5" in texts
    assert "Atk T: 58" in texts
    assert "Atk Tower: 58" not in texts


def test_hovered_editor_spell_draw_shows_description(drawing):
    resources, rendered = drawing
    card = Poison(0, 0, mouse=Point(10, 10), resources=resources)
    assert card.hovered is True
    card.draw(pygame.Surface((600, 1200)))
    assert (17, "Atk Tower: 23") in rendered
    assert "Covers the area in a deadly toxin." in [text for _, text in rendered]