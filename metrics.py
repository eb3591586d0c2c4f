"""Simple timing and counting helpers for an MST run."""
import time
from typing import Optional


class Metrics:
    def __init__(self):
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self.step_times = []
        self.edges_accepted = 0
        self.edges_rejected = 0

    def start(self):
        self.start_time = time.perf_counter()

    def stop(self):
        self.end_time = time.perf_counter()

    def start_step(self):
        self._step_start = time.perf_counter()

    def end_step(self, accepted: bool):
        self.step_times.append(time.perf_counter() - self._step_start)
        if accepted:
            self.edges_accepted += 1
        else:
            self.edges_rejected += 1

    def summary(self):
        total = None
        if self.start_time is not None and self.end_time is not None:
            total = self.end_time - self.start_time
        return {
            'total_time': total,
            'edges_examined': len(self.step_times),
            'edges_accepted': self.edges_accepted,
            'edges_rejected': self.edges_rejected,
            'avg_step_time': sum(self.step_times)/len(self.step_times) if self.step_times else None,
        }
