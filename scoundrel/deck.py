import random
from dataclasses import dataclass

# -----------------------------
# CARD TAXONOMY
# -----------------------------

MONSTER = "monster"
POTION = "potion"
WEAPON = "weapon"

SUIT_KINDS = {
    "♠": MONSTER,
    "♣": MONSTER,
    "♥": POTION,
    "♦": WEAPON,
}

RED_SUITS = ("♥", "♦")

NUMBER_RANKS = [(str(n), n) for n in range(2, 11)]
FACE_RANKS = [("J", 11), ("Q", 12), ("K", 13), ("Ace", 14)]
RANK_VALUES = dict(NUMBER_RANKS + FACE_RANKS)

DECK_SIZE = 44


@dataclass(frozen=True)
class Card:
    id: int
    suit: str
    rank: str            # '2'...'10','J','Q','K','Ace'
    numeric_value: int   # 2..14
    kind: str            # monster | potion | weapon

    @property
    def color(self):
        return "red" if self.suit in RED_SUITS else "black"

    def to_view(self):
        return {
            "id": self.id,
            "suit": self.suit,
            "rank": self.rank,
            "numeric_value": self.numeric_value,
            "kind": self.kind,
            "color": self.color,
        }

    def __str__(self):
        return f"{self.rank}{self.suit}"


def make_card(card_id, suit, rank):
    """
    Build a card from its suit and rank, deriving value and kind.
    Raises ValueError for combinations that are not part of the deck.
    """
    if suit not in SUIT_KINDS:
        raise ValueError(f"Unknown suit: {suit!r}")
    if rank not in RANK_VALUES:
        raise ValueError(f"Unknown rank: {rank!r}")

    kind = SUIT_KINDS[suit]
    value = RANK_VALUES[rank]
    if kind != MONSTER and value > 10:
        raise ValueError(f"{kind} cards only go up to 10, got {rank}{suit}")

    return Card(card_id, suit, rank, value, kind)


# -----------------------------
# SHUFFLE
# -----------------------------

def shuffle(cards, rng=None):
    """
    Fisher-Yates in place: walk from the last index down, swapping each
    position with a uniformly chosen position at or before it.
    """
    rng = rng or random
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]
    return cards


# -----------------------------
# DECK
# -----------------------------

def create_deck(rng=None):
    """
    Returns a freshly shuffled 44-card Scoundrel deck.

    Clubs and spades are monsters (2..Ace), hearts are potions and
    diamonds are weapons (2..10 only). Ids are sequential in build order.
    """
    cards = []
    next_id = 0

    for suit, kind in SUIT_KINDS.items():
        ranks = NUMBER_RANKS + FACE_RANKS if kind == MONSTER else NUMBER_RANKS
        for rank, _ in ranks:
            cards.append(make_card(next_id, suit, rank))
            next_id += 1

    return shuffle(cards, rng)
