class History:
    """
    Undo stack of GameState snapshots, newest last.
    """

    def __init__(self, entries=None):
        self.entries = list(entries or [])

    def push(self, state):
        self.entries.append(state.snapshot())

    def pop(self):
        if not self.entries:
            return None
        return self.entries.pop()

    def clear(self):
        self.entries.clear()

    def __len__(self):
        return len(self.entries)
