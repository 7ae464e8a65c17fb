import time

DEFAULT_STALE_TIME = 5 * 60  # seconden


class QueryCache:
    """
    Expliciete query cache met een vaste levensduur.

    Wordt één keer per client-applicatie aangemaakt en doorgegeven aan wie
    het nodig heeft. Enkel geslaagde loads worden bewaard; er is geen
    refetch op de achtergrond.
    """

    def __init__(self, stale_time=DEFAULT_STALE_TIME, clock=time.monotonic):
        self.stale_time = stale_time
        self.clock = clock
        self._entries = {}

    def is_fresh(self, key):
        entry = self._entries.get(key)
        if entry is None:
            return False
        _, fetched_at = entry
        return self.clock() - fetched_at < self.stale_time

    def get(self, key):
        if not self.is_fresh(key):
            return None
        return self._entries[key][0]

    def fetch(self, key, loader):
        if self.is_fresh(key):
            return self._entries[key][0]
        data = loader()
        self._entries[key] = (data, self.clock())
        return data

    def invalidate(self, key):
        self._entries.pop(key, None)

    def clear(self):
        self._entries.clear()

    def __len__(self):
        return len(self._entries)
