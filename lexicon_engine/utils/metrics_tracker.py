# metrics_tracker.py - running averages for query timings

import json
import os
from collections import defaultdict


class Metrics:
    def __init__(self, path=None):
        self.path = path
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        if self.path:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        with open(self.path, "r", encoding="utf8") as f:
            d = json.load(f)
        for k, v in d.items():
            self.m[k] = v["sum"]
            self.n[k] = v["count"]

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.snapshot(), f, indent=2)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def avg(self, key):
        if self.n[key] == 0:
            return 0.0
        return self.m[key] / self.n[key]

    def snapshot(self):
        return {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
