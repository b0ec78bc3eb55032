from dataclasses import dataclass, field, replace
from typing import List, Optional

from config import GameConfig
from scoundrel.deck import Card


# -----------------------------
# WEAPON
# -----------------------------

@dataclass(frozen=True)
class Weapon:
    """
    An equipped weapon card and the last monster it was used on.
    """
    card: Card
    last_defeated_monster: Optional[Card] = None

    @property
    def numeric_value(self):
        return self.card.numeric_value

    def can_fight(self, monster):
        if self.last_defeated_monster is None:
            return True
        return monster.numeric_value < self.last_defeated_monster.numeric_value

    def after_kill(self, monster):
        return replace(self, last_defeated_monster=monster)

    def to_view(self):
        return {
            "card": self.card.to_view(),
            "last_defeated_monster": (
                self.last_defeated_monster.to_view()
                if self.last_defeated_monster else None
            ),
        }


# -----------------------------
# GAME STATE
# -----------------------------

@dataclass
class GameState:
    """
    Holds mutable game state. Cards and weapons are immutable, so a
    snapshot only needs fresh deck and room lists.
    """
    deck: List[Card] = field(default_factory=list)
    room: List[Card] = field(default_factory=list)
    health: int = GameConfig.MAX_HEALTH
    weapon: Optional[Weapon] = None
    current_room_number: int = 0
    last_forfeit_room_number: int = GameConfig.NEVER_FORFEITED
    game_over: bool = False
    won: bool = False
    started: bool = False

    def snapshot(self):
        return replace(self, deck=list(self.deck), room=list(self.room))

    def find_in_room(self, card_id):
        for card in self.room:
            if card.id == card_id:
                return card
        return None

    def remove_from_room(self, card_id):
        self.room = [c for c in self.room if c.id != card_id]

    def draw(self, count):
        drawn = self.deck[:count]
        self.deck = self.deck[count:]
        return drawn
