# cache.py
import collections
import logging

logger = logging.getLogger(__name__)

CacheEntry = collections.namedtuple("CacheEntry", ["key", "value"])


class LRUCache:
    """
    Fixed-capacity cache ordered by recency of access.
    Leftmost entry = most recently used, rightmost = next to be evicted.
    """

    def __init__(self, max_size):
        self.max_size = max_size
        self.entries = collections.OrderedDict()  # key -> CacheEntry
        self.evictions = 0

    def __len__(self):
        return len(self.entries)

    def __contains__(self, key):
        return key in self.entries

    def keys(self):
        return list(self.entries)

    def lookup(self, key):
        """
        Return the cached value for `key`, or None on a miss.
        A hit promotes the entry to the most-recently-used position.
        """
        entry = self.entries.get(key)
        if entry is None:
            return None
        self.entries.move_to_end(key, last=False)
        return entry.value

    def insert(self, key, value):
        """
        Add a key known to be absent. When the cache was already full the
        least recently used entry goes; with max_size 0 that is the new entry.
        """
        self.entries[key] = CacheEntry(key, value)
        self.entries.move_to_end(key, last=False)
        if len(self.entries) > self.max_size:
            evicted, _ = self.entries.popitem(last=True)
            self.evictions += 1
            logger.debug("LRU evicted %d", evicted)

    def stats(self):
        return {
            "policy": "LRU",
            "max_size": self.max_size,
            "used_entries": len(self.entries),
            "evictions": self.evictions,
        }


class _LFUNode:
    __slots__ = ("entry", "frequency", "seq")

    def __init__(self, entry, seq):
        self.entry = entry
        self.frequency = 1
        self.seq = seq

    def rank(self):
        return self.frequency, self.seq


class LFUCache:
    """
    Fixed-capacity cache ordered by access frequency, ascending.
    Entries of equal frequency keep insertion order, so the head is always
    the least frequently used entry and, among those, the oldest one.
    """

    def __init__(self, max_size):
        self.max_size = max_size
        self.order = []  # _LFUNode, head is evicted first
        self.index = {}  # key -> _LFUNode
        self.evictions = 0
        self._next_seq = 0

    def __len__(self):
        return len(self.order)

    def __contains__(self, key):
        return key in self.index

    def keys(self):
        return [node.entry.key for node in self.order]

    def frequency(self, key):
        node = self.index.get(key)
        return node.frequency if node is not None else 0

    def lookup(self, key):
        """
        Return the cached value for `key`, or None on a miss.
        A hit bumps the entry's frequency and slides it past every entry
        that now ranks below it.
        """
        node = self.index.get(key)
        if node is None:
            return None
        pos = self.order.index(node)
        del self.order[pos]
        node.frequency += 1
        while pos < len(self.order) and self.order[pos].rank() < node.rank():
            pos += 1
        self.order.insert(pos, node)
        return node.entry.value

    def insert(self, key, value):
        """
        Add a key known to be absent with frequency 1, placed after every
        existing frequency-1 entry. Evicts the head once over capacity.
        """
        node = _LFUNode(CacheEntry(key, value), self._next_seq)
        self._next_seq += 1

        pos = 0
        while pos < len(self.order) and self.order[pos].frequency <= node.frequency:
            pos += 1
        self.order.insert(pos, node)
        self.index[key] = node

        if len(self.order) > self.max_size:
            victim = self.order.pop(0)
            del self.index[victim.entry.key]
            self.evictions += 1
            logger.debug("LFU evicted %d (frequency %d)", victim.entry.key, victim.frequency)

    def stats(self):
        return {
            "policy": "LFU",
            "max_size": self.max_size,
            "used_entries": len(self.order),
            "evictions": self.evictions,
        }
