from utils import safe_print

CARD_COMMANDS = {
    "d": "drink",
    "e": "equip",
    "f": "fight_bare_hands",
    "w": "fight_with_weapon",
}

ROOM_COMMANDS = {
    "n": "next_room",
    "r": "forfeit",
    "u": "undo",
    "new": "new_game",
}

HELP = (
    "Commands: d <id> drink | e <id> equip | f <id> fight bare-handed | "
    "w <id> fight with weapon | n next room | r run away | u undo | new | q quit"
)


class CLIController:
    def __init__(self, engine, save=None):
        self.engine = engine
        # callback(engine) invoked after every command that changed state
        self.save = save

    # -----------------------------
    # DISPLAY HELPERS
    # -----------------------------

    def show_state(self):
        state = self.engine.consume_ui_state()

        for msg in state["ui_log"]:
            safe_print(f"  > {msg}")

        safe_print("\n===== SCOUNDREL =====")
        safe_print(f"Health: {state['health']} / {state['max_health']}")

        weapon = state["weapon"]
        if weapon:
            card = weapon["card"]
            last = weapon["last_defeated_monster"]
            last_text = f"{last['rank']}{last['suit']}" if last else "None"
            safe_print(f"Weapon: {card['rank']}{card['suit']} (last kill: {last_text})")
        else:
            safe_print("Weapon: none")

        safe_print(f"Deck: {state['deck_count']} cards | Room {state['current_room_number']}")
        for card in state["room"]:
            hint = " (weapon ok)" if card["can_fight_with_weapon"] else ""
            safe_print(f"  [{card['id']}] {card['rank']}{card['suit']} {card['kind']}{hint}")

        flags = []
        if state["can_advance_room"]:
            flags.append("next room available")
        if state["can_forfeit"]:
            flags.append("can run away")
        if state["history_depth"]:
            flags.append(f"undo x{state['history_depth']}")
        safe_print(" | ".join(flags))
        safe_print("=====================\n")

    def show_result(self):
        if not self.engine.game_over:
            return
        if self.engine.won:
            safe_print("You win! Type 'new' to play again.")
        else:
            safe_print("Game over! Type 'u' to undo or 'new' to play again.")

    # -----------------------------
    # COMMAND HANDLING
    # -----------------------------

    def handle(self, line):
        """
        Runs one command. Returns False when the player quits.
        """
        parts = line.strip().split()
        if not parts:
            return True

        command = parts[0].lower()

        if command in ("q", "quit"):
            return False

        if command in ROOM_COMMANDS:
            result = getattr(self.engine, ROOM_COMMANDS[command])()
        elif command in CARD_COMMANDS:
            if len(parts) != 2 or not parts[1].isdigit():
                safe_print("Enter a card id, e.g. 'f 12'.")
                return True
            result = getattr(self.engine, CARD_COMMANDS[command])(int(parts[1]))
        else:
            safe_print(HELP)
            return True

        if "error" in result:
            safe_print(result["error"])
        elif self.save:
            self.save(self.engine)

        return True

    # -----------------------------
    # MAIN GAME LOOP
    # -----------------------------

    def run(self, read=input):
        safe_print("=== SCOUNDREL CLI ===")
        safe_print(HELP)

        if not self.engine.started:
            self.engine.new_game()
            if self.save:
                self.save(self.engine)

        while True:
            self.show_state()
            self.show_result()
            try:
                line = read("> ")
            except EOFError:
                break
            if not self.handle(line):
                break

        safe_print("Bye.")
