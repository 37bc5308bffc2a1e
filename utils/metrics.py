"""Runtime measurement for filter steps."""

import time
from typing import Dict


class Timer:
    """Records wall-clock time per named step."""
    
    def __init__(self):
        self.timings_ms: Dict[str, float] = {}
    
    def measure(self, label: str, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.timings_ms[label] = (time.perf_counter() - start) * 1000.0
        return result
    
    @property
    def total_ms(self) -> float:
        return sum(self.timings_ms.values())
