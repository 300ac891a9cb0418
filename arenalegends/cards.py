"""The concrete troop and spell cards of the game."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .card import WHITE, DIFF, Card, CardType, format_float
from .point import Point


@dataclass(frozen=True)
class _ArmyStats:
    hp: int
    atk: int
    cool_down: float
    speed: float
    atk_radius: float
    detect_radius: float
    count: int
    cost: int


@dataclass(frozen=True)
class _SpellStats:
    pt: int
    radius: float
    duration: float
    interval: float
    atk_tower: int
    cost: int


@dataclass(frozen=True)
class SpellPlacement:
    """A spell cast on the field, with the command that announces it."""

    command: str
    card_id: int
    instance_id: int
    x: float
    y: float
    name: str
    pt: int
    radius: float
    duration: float
    interval: float
    atk_tower: int
    color: tuple[int, int, int]


class _ArmyCard(Card):
    """A card that deploys troops; subclasses give its identity and stats."""

    ID: int
    NAME: str
    DESCRIPTION: str
    SET_STATS: _ArmyStats
    PLAY_STATS: _ArmyStats

    def __init__(
        self, x: float, y: float, *, selected: bool = False, in_play: bool = False, **kwargs: Any
    ) -> None:
        stats = self.PLAY_STATS if in_play else self.SET_STATS
        super().__init__(
            self.ID,
            self.NAME,
            x,
            y,
            card_type=CardType.ARMY,
            cost=stats.cost,
            description="" if in_play else self.DESCRIPTION,
            selected=selected,
            in_play=in_play,
            hp=stats.hp,
            atk=stats.atk,
            cool_down=stats.cool_down,
            speed=stats.speed,
            atk_radius=stats.atk_radius,
            detect_radius=stats.detect_radius,
            count=stats.count,
            **kwargs,
        )


class Knight(_ArmyCard):
    ID = 0
    NAME = "Knight"
    DESCRIPTION = "A tough melee fighter."
    SET_STATS = _ArmyStats(1766, 202, 1.2, 3, 1.2, 5, 1, 3)
    PLAY_STATS = replace(SET_STATS, speed=2)
    army_type = 0
    army_scale = 0.7


class Archers(_ArmyCard):
    ID = 1
    NAME = "Archers"
    DESCRIPTION = "A pair of lightly armored ranged attackers."
    SET_STATS = _ArmyStats(304, 107, 0.9, 3, 5, 5, 2, 3)
    PLAY_STATS = replace(SET_STATS, speed=2)
    army_type = 1
    army_scale = 0.6


class Musketeer(_ArmyCard):
    ID = 2
    NAME = "Musketeer"
    DESCRIPTION = "The Musketeer is a mean shot with her trusty boomstick."
    SET_STATS = _ArmyStats(720, 218, 1, 3, 6, 5, 1, 4)
    PLAY_STATS = replace(SET_STATS, speed=2)
    army_type = 1
    army_scale = 0.7


class Skeletons(_ArmyCard):
    ID = 3
    NAME = "Skeletons"
    DESCRIPTION = "Spawns an army of Skeletons."
    SET_STATS = _ArmyStats(81, 81, 1, 4, 1.2, 5, 15, 3)
    PLAY_STATS = replace(SET_STATS, speed=3)
    army_type = 0
    army_scale = 0.5


class Giant(_ArmyCard):
    ID = 4
    NAME = "Giant"
    DESCRIPTION = "Slow but durable, only attacks buildings."
    SET_STATS = _ArmyStats(4091, 254, 1.5, 2, 1.2, 50, 1, 5)
    PLAY_STATS = replace(SET_STATS, speed=1, detect_radius=6)
    army_type = 0
    army_scale = 0.8


class Pekka(_ArmyCard):
    ID = 5
    NAME = "P.E.K.K.A."
    DESCRIPTION = "A heavily armored, slow melee fighter."
    SET_STATS = _ArmyStats(3760, 816, 1.8, 2, 1.2, 5, 1, 7)
    PLAY_STATS = replace(SET_STATS, speed=1)
    army_type = 0
    army_scale = 0.9


class Wizard(_ArmyCard):
    ID = 6
    NAME = "Wizard"
    DESCRIPTION = "Using his fireballs to cause area-damage."
    SET_STATS = _ArmyStats(720, 281, 1.4, 3, 5.5, 5, 1, 5)
    PLAY_STATS = replace(SET_STATS, speed=2)
    army_type = 1
    army_scale = 0.7


class HogRider(_ArmyCard):
    ID = 7
    NAME = "Hog Rider"
    DESCRIPTION = "Fast melee troop that targets buildings and can jump over the river."
    SET_STATS = _ArmyStats(1696, 318, 1.6, 5, 1.2, 50, 1, 4)
    PLAY_STATS = replace(SET_STATS, speed=4)
    army_type = 0
    army_scale = 0.7


class Barbarians(_ArmyCard):
    ID = 8
    NAME = "Barbarians"
    DESCRIPTION = "Spawns a pair of leveled up Barbarians."
    SET_STATS = _ArmyStats(1341, 384, 1.4, 4, 1.2, 5, 2, 6)
    PLAY_STATS = replace(SET_STATS, speed=3)
    army_type = 0
    army_scale = 0.7


class SpellCard(Card):
    """A card that casts a spell; subclasses give its identity, stats and labels."""

    ID: int
    NAME: str
    DESCRIPTION: str
    SET_STATS: _SpellStats
    PLAY_STATS: _SpellStats
    COLOR: tuple[int, int, int]
    SET_LABELS: tuple[str, ...]
    PLAY_LABELS: tuple[str, ...]

    _SET_FONT_SIZES = (16, 17)
    _SET_TEXT_X = 190
    _SET_TEXT_YS = (90, 125, 160, 195)
    _PLAY_TEXT_X = 220
    _PLAY_TEXT_YS = (90, 130, 170, 210)

    def __init__(
        self, x: float, y: float, *, selected: bool = False, in_play: bool = False, **kwargs: Any
    ) -> None:
        stats = self.PLAY_STATS if in_play else self.SET_STATS
        super().__init__(
            self.ID,
            self.NAME,
            x,
            y,
            card_type=CardType.SPELL,
            cost=stats.cost,
            description="" if in_play else self.DESCRIPTION,
            selected=selected,
            in_play=in_play,
            pt=stats.pt,
            radius=stats.radius,
            duration=stats.duration,
            interval=stats.interval,
            atk_tower=stats.atk_tower,
            **kwargs,
        )
        if not in_play:
            self.desc_font_size, self.desc_hover_font_size = self._SET_FONT_SIZES

    def _spell_values(self) -> list[str]:
        return [str(self.pt), str(self.atk_tower), format_float(self.radius), format_float(self.duration)]

    def draw(self, surface: Any) -> None:
        """Draw the card, then the spell's figures beside its picture."""
        super().draw(surface)
        d = DIFF if self.hovered else 0
        step = 2 if self.hovered else 0
        if self.in_play:
            text_x, text_ys, labels = self._PLAY_TEXT_X, self._PLAY_TEXT_YS, self.PLAY_LABELS
        else:
            text_x, text_ys, labels = self._SET_TEXT_X, self._SET_TEXT_YS, self.SET_LABELS
        font = self._font(self.desc_hover_font_size if self.hovered else self.desc_font_size)
        origin = Point(self.position.x - d, self.position.y - d)
        for index, (label, value, line_y) in enumerate(zip(labels, self._spell_values(), text_ys)):
            self._draw_text(
                surface, font, f"{label}{value}", WHITE,
                origin.x + text_x,
                origin.y + line_y + step * index,
            )

    def place_spell(self, instance_id: int, xb: float, yb: float, game_time: float) -> SpellPlacement:
        """Return the spell cast at (xb, yb) together with its deploy command."""
        return SpellPlacement(
            command=self.deploy_command(xb, yb, game_time),
            card_id=self.card_id,
            instance_id=instance_id,
            x=xb,
            y=yb,
            name=self.name,
            pt=self.pt,
            radius=self.radius,
            duration=self.duration,
            interval=self.interval,
            atk_tower=self.atk_tower,
            color=self.COLOR,
        )


class Zap(SpellCard):
    ID = 9
    NAME = "Zap"
    DESCRIPTION = "Zaps enemies and briefly stunning them."
    # The interval exceeds the duration, so the spell strikes only once.
    SET_STATS = _SpellStats(192, 2.5, 1, 1, 58, 2)
    PLAY_STATS = replace(SET_STATS, duration=0.5)
    COLOR = (0, 140, 255)
    SET_LABELS = ("Atk: ", "Atk Tower: ", "Radius: ", "Duration: ")
    PLAY_LABELS = ("Atk: ", "Atk T: ", "Rad.: ", "Dur.: ")


class Poison(SpellCard):
    ID = 10
    NAME = "Poison"
    DESCRIPTION = "Covers the area in a deadly toxin."
    SET_STATS = _SpellStats(78, 4, 8, 1, 23, 4)
    PLAY_STATS = SET_STATS
    COLOR = (150, 50, 30)
    SET_LABELS = ("Atk: ", "Atk Tower: ", "Radius: ", "Duration: ")
    PLAY_LABELS = ("Atk: ", "Atk T: ", "Rad.: ", "Dur.: ")


class Heal(SpellCard):
    ID = 11
    NAME = "Heal"
    DESCRIPTION = "Heal your troops to keep them in the fight!"
    SET_STATS = _SpellStats(75, 3.5, 2, 0.5, 0, 1)
    PLAY_STATS = SET_STATS
    COLOR = (255, 220, 0)
    SET_LABELS = ("Atk: ", "Radius: ", "Duration: ", "Interval: ")
    PLAY_LABELS = ("Atk: ", "Rad.: ", "Dur.: ", "Int.: ")

    def _spell_values(self) -> list[str]:
        return [
            str(self.pt),
            format_float(self.radius),
            format_float(self.duration),
            format_float(self.interval),
        ]


CARD_CLASSES: tuple[type[Card], ...] = (
    Knight,
    Archers,
    Musketeer,
    Skeletons,
    Giant,
    Pekka,
    Wizard,
    HogRider,
    Barbarians,
    Zap,
    Poison,
    Heal,
)


def create_card(
    card_id: int, x: float, y: float, in_play: bool = False, selected: bool = False
) -> Card:
    """Create the card with the given id at (x, y)."""
    if not 0 <= card_id < len(CARD_CLASSES):
        raise ValueError(f"unknown card id: {card_id}")
    return CARD_CLASSES[card_id](x, y, selected=selected, in_play=in_play)