"""
Plan cache module.

Plans are expensive to build compared to one execution, so callers
transforming many buffers of the same few lengths keep them in a
cache. The cache is an explicit object: `Plan.build` and
`Plan.execute` never look at it.

Rules
-----

1. Entries are keyed by (length, direction).

2. `insert` stores a plan as the most recently used entry. When the
number of entries exceeds `max_entries`, the least recently used
entries are evicted and returned to the caller.

3. `get` marks a hit as most recently used. `evict` removes one key
and `clear` removes everything.

4. All operations hold a lock, so the cache can be shared between
threads. `get_or_build` keeps the lock while it builds, so a plan
missing from the cache is built once even when several threads ask
for it together. Plans themselves are immutable and need no locking.
"""

import threading
from collections import OrderedDict

from ..direction import Direction
from ..plan import Plan
from .sizes import validate_length


class PlanCache:
    """Least recently used cache of transform plans."""

    def __init__(self, max_entries=32):
        if max_entries < 1:
            raise ValueError(f"Cache capacity must be positive, got {max_entries}.")
        self.max_entries = max_entries
        self._plans = OrderedDict()
        self._lock = threading.RLock()
        self.hits = 0
        self.misses = 0

    @staticmethod
    def _key(length, direction):
        return validate_length(length), Direction.parse(direction)

    def get(self, length, direction=Direction.FORWARD):
        """Return the cached plan or None."""
        key = self._key(length, direction)
        with self._lock:
            plan = self._plans.get(key)
            if plan is None:
                self.misses += 1
                return None
            self._plans.move_to_end(key)
            self.hits += 1
            return plan

    def insert(self, plan):
        """
        Store `plan`, replacing any plan with the same key.

        Returns
        -------
        evicted : list of Plan
            Plans dropped to respect `max_entries`, oldest first.

        """
        key = (plan.length, plan.direction)
        evicted = []
        with self._lock:
            self._plans[key] = plan
            self._plans.move_to_end(key)
            while len(self._plans) > self.max_entries:
                _, old = self._plans.popitem(last=False)
                evicted.append(old)
        return evicted

    def evict(self, length, direction=Direction.FORWARD):
        """Remove one entry, returning True if it was present."""
        key = self._key(length, direction)
        with self._lock:
            return self._plans.pop(key, None) is not None

    def clear(self):
        with self._lock:
            self._plans.clear()
            self.hits = 0
            self.misses = 0

    def get_or_build(self, length, direction=Direction.FORWARD):
        """Return the cached plan, building and inserting it on a miss."""
        with self._lock:
            plan = self.get(length, direction)
            if plan is None:
                plan = Plan.build(length, direction)
                self.insert(plan)
            return plan

    def keys(self):
        with self._lock:
            return list(self._plans)

    def __contains__(self, key):
        length, direction = key
        with self._lock:
            return self._key(length, direction) in self._plans

    def __len__(self):
        with self._lock:
            return len(self._plans)
