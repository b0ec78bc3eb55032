from config import GameConfig
from scoundrel.deck import MONSTER, POTION, WEAPON, create_deck, shuffle
from scoundrel.history import History
from scoundrel.models import GameState, Weapon
from scoundrel.rules import (
    can_advance_room,
    can_fight_with_weapon,
    can_forfeit,
    evaluate,
    weapon_damage,
)
from utils import get_logger

logger = get_logger("scoundrel.engine")

'''
[**SCOUNDREL RULES**]

The deck holds 44 cards. Clubs and spades are monsters (2..Ace = 2..14),
hearts are potions and diamonds are weapons (2..10 only).

1. ROOMS:
Four cards are dealt face up. Resolve cards one at a time. When one card
(or none) is left, the next room is dealt: the survivor stays and three
new cards join it.

2. POTIONS heal by their value, never above 20 health.

3. WEAPONS replace whatever was equipped before. A monster fought with a
weapon deals (monster - weapon) damage, never less than 0. After a kill
the weapon may only be used on monsters strictly weaker than the last one
it killed. Bare-handed fights take the monster's full value.

4. RUNNING AWAY puts the room back under the deck (shuffled) and deals a
new room. You cannot run from two rooms in a row.

5. Health at 0 or below loses. Clearing every card from deck and room wins.
'''


class ScoundrelEngine:
    def __init__(self, rng=None, state=None, history=None):
        self.rng = rng
        self.state = state if state is not None else GameState()
        self.history = history if history is not None else History()
        self.ui_log = []

    # ---------------------
    # STATE HELPERS
    # ---------------------

    @property
    def deck_count(self):
        return len(self.state.deck)

    @property
    def room(self):
        return list(self.state.room)

    @property
    def health(self):
        return self.state.health

    @property
    def weapon_view(self):
        return self.state.weapon.to_view() if self.state.weapon else None

    @property
    def can_advance_room(self):
        return can_advance_room(self.state)

    @property
    def can_forfeit(self):
        return can_forfeit(self.state)

    @property
    def game_over(self):
        return self.state.game_over

    @property
    def won(self):
        return self.state.won

    @property
    def started(self):
        return self.state.started

    @property
    def history_depth(self):
        return len(self.history)

    def get_state(self):
        room = []
        for card in self.state.room:
            view = card.to_view()
            view["can_fight_with_weapon"] = can_fight_with_weapon(self.state, card)
            room.append(view)

        return {
            "started": self.state.started,
            "health": self.state.health,
            "max_health": GameConfig.MAX_HEALTH,
            "deck_count": self.deck_count,
            "room": room,
            "weapon": self.weapon_view,
            "current_room_number": self.state.current_room_number,
            "can_advance_room": self.can_advance_room,
            "can_forfeit": self.can_forfeit,
            "game_over": self.state.game_over,
            "won": self.state.won,
            "history_depth": self.history_depth,
            "ui_log": list(self.ui_log),
        }

    def consume_ui_state(self):
        data = self.get_state()
        self.ui_log.clear()
        return data

    def _log(self, msg):
        # log and append to ui log for frontend consumption
        logger.info(msg)
        self.ui_log.append(msg)

    def _reject(self, action, reason):
        logger.debug("%s rejected: %s", action, reason)
        return {"error": reason}

    def _check_game_over(self):
        if evaluate(self.state):
            if self.state.won:
                self._log("The dungeon is cleared. You win!")
            else:
                self._log("You have died. Game over.")

    def _take_card(self, action, card_id, kind):
        """
        Shared precondition check for card actions. Returns (card, None)
        when the action may proceed, else (None, error result).
        """
        if not self.state.started:
            return None, self._reject(action, "Game has not started")
        if self.state.game_over:
            return None, self._reject(action, "Game is already over")

        card = self.state.find_in_room(card_id)
        if card is None:
            return None, self._reject(action, f"Card {card_id} is not in the room")
        if card.kind != kind:
            return None, self._reject(action, f"{card} is not a {kind}")

        return card, None

    # ---------------------
    # NEW GAME
    # ---------------------

    def new_game(self):
        self.state = GameState(deck=create_deck(self.rng), started=True)
        self.state.room = self.state.draw(GameConfig.ROOM_SIZE)
        self.history.clear()
        self.ui_log.clear()

        self._log("A new dungeon awaits")
        return {"ok": True}

    # ---------------------
    # CARD ACTIONS
    # ---------------------

    def drink(self, card_id):
        card, error = self._take_card("drink", card_id, POTION)
        if error:
            return error

        self.history.push(self.state)
        before = self.state.health
        self.state.health = min(GameConfig.MAX_HEALTH, before + card.numeric_value)
        self.state.remove_from_room(card.id)

        self._log(f"Drank {card}: health {before} -> {self.state.health}")
        self._check_game_over()
        return {"ok": True, "healed": self.state.health - before}

    def equip(self, card_id):
        card, error = self._take_card("equip", card_id, WEAPON)
        if error:
            return error

        self.history.push(self.state)
        previous = self.state.weapon
        self.state.weapon = Weapon(card)
        self.state.remove_from_room(card.id)

        if previous:
            self._log(f"Equipped {card}, discarding {previous.card}")
        else:
            self._log(f"Equipped {card}")
        self._check_game_over()
        return {"ok": True}

    def fight_bare_hands(self, card_id):
        card, error = self._take_card("fight_bare_hands", card_id, MONSTER)
        if error:
            return error

        self.history.push(self.state)
        self.state.health -= card.numeric_value
        self.state.remove_from_room(card.id)

        self._log(f"Fought {card} bare-handed: took {card.numeric_value} damage")
        self._check_game_over()
        return {"ok": True, "damage": card.numeric_value}

    def fight_with_weapon(self, card_id):
        card, error = self._take_card("fight_with_weapon", card_id, MONSTER)
        if error:
            return error

        weapon = self.state.weapon
        if weapon is None:
            return self._reject("fight_with_weapon", "No weapon equipped")
        if not weapon.can_fight(card):
            return self._reject(
                "fight_with_weapon",
                f"{weapon.card} can only fight monsters weaker than "
                f"{weapon.last_defeated_monster}",
            )

        self.history.push(self.state)
        damage = weapon_damage(weapon, card)
        self.state.health -= damage
        self.state.weapon = weapon.after_kill(card)
        self.state.remove_from_room(card.id)

        self._log(f"Slew {card} with {weapon.card}: took {damage} damage")
        self._check_game_over()
        return {"ok": True, "damage": damage}

    # ---------------------
    # ROOM CONTROL
    # ---------------------

    def _deal_next_room(self):
        if self.state.room:
            drawn = self.state.draw(GameConfig.REFILL_SIZE)
        else:
            drawn = self.state.draw(GameConfig.ROOM_SIZE)
        self.state.room = self.state.room + drawn
        self.state.current_room_number += 1

    def next_room(self):
        if not self.state.started:
            return self._reject("next_room", "Game has not started")
        if self.state.game_over:
            return self._reject("next_room", "Game is already over")
        if not can_advance_room(self.state):
            return self._reject(
                "next_room",
                f"Resolve more cards first ({len(self.state.room)} left)",
            )

        self.history.push(self.state)
        self._deal_next_room()

        self._log(f"Entered room {self.state.current_room_number}")
        self._check_game_over()
        return {"ok": True}

    def forfeit(self):
        if not self.state.started:
            return self._reject("forfeit", "Game has not started")
        if self.state.game_over:
            return self._reject("forfeit", "Game is already over")
        if not can_forfeit(self.state):
            return self._reject("forfeit", "Cannot run away from two rooms in a row")

        self.history.push(self.state)
        fled = shuffle(list(self.state.room), self.rng)
        self.state.deck = self.state.deck + fled
        self.state.room = []
        self.state.last_forfeit_room_number = self.state.current_room_number
        self._deal_next_room()

        self._log(
            f"Ran away from room {self.state.last_forfeit_room_number}, "
            f"{len(fled)} cards returned to the deck"
        )
        self._check_game_over()
        return {"ok": True}

    # ---------------------
    # UNDO
    # ---------------------

    def undo(self):
        previous = self.history.pop()
        if previous is None:
            return self._reject("undo", "Nothing to undo")

        self.state = previous
        self._log("Undid last action")
        return {"ok": True}
