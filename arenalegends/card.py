"""Playing cards shown in the deck editor and in the hand during a match."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

import pygame

from .collider import is_point_in_rect
from .point import Point
from .resources import Resources, default_resources
from .userdata import GameData

CARD_NAMES = (
    "Knight",
    "Archers",
    "Musketeer",
    "Skeletons",
    "Giant",
    "P.E.K.K.A.",
    "Wizard",
    "Hog Rider",
    "Barbarians",
    "Zap",
    "Poison",
    "Heal",
)

CARD_WIDTH = 350
CARD_HEIGHT = 250
HEAD_DIAMETER = 150
DIFF = 5
CARD_WIDTH_PLAY = 380
CARD_HEIGHT_PLAY = 280
HEAD_DIAMETER_PLAY = 180
ELIXIR_WIDTH = 60

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

FONT_FILE = "recharge.otf"
_BELOW_FONT_SIZE = 40
_ELIXIR_FONT_SIZE = 32
_DESCRIPTION_Y = 1130
_LEFT_BUTTON = 1


def format_float(value: float) -> str:
    """Format a number with six decimals, then drop trailing zeros and a bare point."""
    return f"{value:f}".rstrip("0").rstrip(".")


class CardType(Enum):
    """Whether a card deploys troops or casts a spell."""

    ARMY = "army"
    SPELL = "spell"


@dataclass(frozen=True)
class ArmyDeployment:
    """One troop to be put on the field at deploy_time."""

    deploy_time: float
    card_id: int
    instance_id: int
    x: float
    y: float
    name: str
    army_type: int
    hp: int
    atk: int
    cool_down: float
    speed: float
    atk_radius: float
    detect_radius: float
    scale: float


@dataclass(frozen=True)
class _Layout:
    head_offset: tuple[int, int]
    head_diameter: int
    elixir_offset: tuple[int, int]
    cost_center: tuple[int, int]
    stat_x: int
    stat_ys: tuple[int, ...]


_SET_LAYOUT = _Layout((25, 75), HEAD_DIAMETER, (280, 10), (311, 39), 200, (90, 125, 160, 195))
_PLAY_LAYOUT = _Layout((20, 80), HEAD_DIAMETER_PLAY, (302, 17), (333, 46), 220, (90, 130, 170, 210))


class Card(GameObject if False else object):  # replaced below
    pass


from .objects import Control, GameObject  # noqa: E402


class Card(GameObject, Control):  # type: ignore[no-redef]
    """A card of the deck editor (in_play False) or of the hand in a match (in_play True)."""

    army_type = 0
    army_scale = 0.7

    def __init__(
        self,
        card_id: int,
        name: str,
        x: float,
        y: float,
        *,
        card_type: CardType,
        cost: int,
        description: str = "",
        selected: bool = False,
        in_play: bool = False,
        hp: int = 0,
        atk: int = 0,
        cool_down: float = 0.0,
        speed: float = 0.0,
        atk_radius: float = 0.0,
        detect_radius: float = 0.0,
        count: int = 0,
        pt: int = 0,
        radius: float = 0.0,
        duration: float = 0.0,
        interval: float = 0.0,
        atk_tower: int = 0,
        hand: list[Card] | None = None,
        deck: set[int] | None = None,
        on_change: Callable[[Card], None] | None = None,
        game_data: GameData | None = None,
        resources: Resources | None = None,
        mouse: Point | None = None,
    ) -> None:
        if in_play:
            super().__init__(x, y, CARD_WIDTH_PLAY, CARD_HEIGHT_PLAY)
        else:
            super().__init__(x, y, CARD_WIDTH, CARD_HEIGHT)
        self.card_id = card_id
        self.name = name
        self.description = description
        self.card_type = card_type
        self.cost = cost
        self.selected = False if in_play else selected
        self.in_play = in_play
        self.hp = hp
        self.atk = atk
        self.cool_down = cool_down
        self.speed = speed
        self.atk_radius = atk_radius
        self.detect_radius = detect_radius
        self.count = count
        self.pt = pt
        self.radius = radius
        self.duration = duration
        self.interval = interval
        self.atk_tower = atk_tower
        self.hand = hand
        self.deck = deck
        self.on_change = on_change
        self._game_data = game_data
        self._resources = resources

        self.name_font_size = 36 if card_type is CardType.ARMY else 40
        self.desc_font_size, self.desc_hover_font_size = (22, 23) if in_play else (20, 21)

        if mouse is None:
            from .engine import get_engine

            mouse = get_engine().get_mouse_position()
        self.hovered = is_point_in_rect(mouse, self.position, self.size)

    # -- shared state ---------------------------------------------------------

    @property
    def resources(self) -> Resources:
        if self._resources is None:
            self._resources = default_resources()
        return self._resources

    @property
    def game_data(self) -> GameData:
        if self._game_data is None:
            from .engine import get_engine

            self._game_data = get_engine().data
        return self._game_data

    # -- drawing --------------------------------------------------------------

    def _font(self, size: int) -> Any:
        return self.resources.get_font(FONT_FILE, size)

    @staticmethod
    def _blit_scaled(surface: Any, bitmap: Any, x: float, y: float, w: float, h: float) -> None:
        scaled = pygame.transform.scale(bitmap, (int(w), int(h)))
        surface.blit(scaled, (int(x), int(y)))

    @staticmethod
    def _draw_text(surface: Any, font: Any, text: str, color: tuple[int, int, int], x: float, y: float) -> None:
        surface.blit(font.render(text, True, color), (int(x), int(y)))

    def _stat_lines(self) -> list[str]:
        if self.card_type is not CardType.ARMY:
            return []
        return [
            f"HP: {self.hp}",
            f"Atk: {self.atk}",
            f"CD: {format_float(self.cool_down)}",
            f"Count: {self.count}",
        ]

    def draw(self, surface: Any) -> None:
        """Draw the card, enlarged while hovered and framed in white while selected."""
        d = DIFF if self.hovered else 0
        half = d // 2
        layout = _PLAY_LAYOUT if self.in_play else _SET_LAYOUT
        pos = Point(self.position.x - d, self.position.y - d)
        size = Point(self.size.x + 2 * d, self.size.y + 2 * d)

        if self.selected:
            frame = pygame.Rect(int(pos.x - 5), int(pos.y - 5), int(size.x + 10), int(size.y + 10))
            pygame.draw.rect(surface, WHITE, frame)

        background = "card/ArmyCard.png" if self.card_type is CardType.ARMY else "card/SpellCard.png"
        self._blit_scaled(surface, self.resources.get_bitmap(background), pos.x, pos.y, size.x, size.y)
        head_x, head_y = layout.head_offset
        head_size = layout.head_diameter + 2 * d
        self._blit_scaled(
            surface,
            self.resources.get_bitmap(f"card/{self.name}.png"),
            pos.x + head_x,
            pos.y + head_y,
            head_size,
            head_size,
        )
        self._draw_text(surface, self._font(self.name_font_size), self.name, WHITE, pos.x + 30, pos.y + 20)

        elixir_x, elixir_y = layout.elixir_offset
        self._blit_scaled(
            surface,
            self.resources.get_bitmap("elixir.png"),
            self.position.x + elixir_x + half,
            self.position.y + elixir_y - half,
            ELIXIR_WIDTH,
            ELIXIR_WIDTH,
        )
        self._draw_cost(surface, layout, half)

        font = self._font(self.desc_hover_font_size if self.hovered else self.desc_font_size)
        step = 2 if self.hovered else 0
        for index, (line, line_y) in enumerate(zip(self._stat_lines(), layout.stat_ys)):
            self._draw_text(
                surface, font, line, WHITE,
                pos.x + d + layout.stat_x,
                pos.y + d + line_y + step * index,
            )

        if self.hovered and not self.in_play:
            below = self._font(_BELOW_FONT_SIZE)
            text_w = below.size(self.description)[0]
            self._draw_text(
                surface, below, self.description, WHITE,
                surface.get_width() / 2 - text_w // 2,
                _DESCRIPTION_Y - below.get_linesize() // 2,
            )

    def _draw_cost(self, surface: Any, layout: _Layout, half: int) -> None:
        font = self._font(_ELIXIR_FONT_SIZE)
        text = str(self.cost)
        center_x, center_y = layout.cost_center
        x = self.position.x + center_x - font.size(text)[0] // 2 + half
        y = self.position.y - font.get_linesize() // 2 + center_y - half
        for dx, dy in ((-2, 0), (2, 0), (0, -2), (0, 2)):
            self._draw_text(surface, font, text, BLACK, x + dx, y + dy)
        self._draw_text(surface, font, text, WHITE, x, y)

    # -- input ----------------------------------------------------------------

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        """Left click toggles the card in the deck editor, or selects it in the hand."""
        if not (button & _LEFT_BUTTON) or not self.hovered:
            return
        if not self.in_play:
            self.selected = not self.selected
            if self.deck is not None:
                if self.selected:
                    self.deck.add(self.card_id)
                else:
                    self.deck.discard(self.card_id)
        else:
            self.game_data.a.selected_card = int((self.position.x - 110) / 400)
            for card in self.hand or ():
                card.selected = False
            self.selected = True
        if self.on_change is not None:
            self.on_change(self)

    def on_mouse_move(self, mx: int, my: int) -> None:
        self.hovered = is_point_in_rect(Point(mx, my), self.position, self.size)

    # -- placing on the field -------------------------------------------------

    def deploy_command(self, xb: float, yb: float, game_time: float) -> str:
        """Return the line telling the opponent where and when this card was played."""
        return f"{self.card_id} {int(31 - xb)} {int(yb)} {game_time - 0.5:f}\n"

    def place_army(
        self, xb: float, yb: float, game_time: float, first_instance_id: int
    ) -> tuple[str, list[ArmyDeployment]]:
        """Return the deploy command and one deployment per troop, with consecutive instance ids."""
        if self.card_type is not CardType.ARMY:
            raise TypeError(f"{self.name} is not an army card")
        command = self.deploy_command(xb, yb, game_time)
        deploy_time = game_time - 0.5
        deployments = [
            ArmyDeployment(
                deploy_time=deploy_time,
                card_id=self.card_id,
                instance_id=first_instance_id + offset,
                x=xb,
                y=yb,
                name=self.name,
                army_type=self.army_type,
                hp=self.hp,
                atk=self.atk,
                cool_down=self.cool_down,
                speed=self.speed,
                atk_radius=self.atk_radius,
                detect_radius=self.detect_radius,
                scale=self.army_scale,
            )
            for offset in range(self.count)
        ]
        return command, deployments

    def place_spell(self, instance_id: int, xb: float, yb: float, game_time: float) -> Any:
        """Return the spell this card casts; a card that casts none returns None."""
        return None