from config import GameConfig
from scoundrel.deck import MONSTER


def can_advance_room(state):
    if not state.started or state.game_over:
        return False
    return len(state.room) <= 1


def can_forfeit(state):
    if not state.started or state.game_over:
        return False
    if state.last_forfeit_room_number == GameConfig.NEVER_FORFEITED:
        return True
    gap = state.current_room_number - state.last_forfeit_room_number
    return gap >= GameConfig.FORFEIT_COOLDOWN


def can_fight_with_weapon(state, card):
    if state.weapon is None or card.kind != MONSTER:
        return False
    return state.weapon.can_fight(card)


def weapon_damage(weapon, monster):
    return max(0, monster.numeric_value - weapon.numeric_value)


def is_lost(state):
    return state.health <= 0


def is_won(state):
    return (
        state.started
        and not state.game_over
        and state.health > 0
        and not state.deck
        and not state.room
    )


def evaluate(state):
    """
    Marks the state as finished when the player died or cleared the
    dungeon. Returns True if this call ended the game.
    """
    if state.game_over:
        return False

    if is_lost(state):
        state.game_over = True
        state.won = False
        return True

    if is_won(state):
        state.game_over = True
        state.won = True
        return True

    return False
