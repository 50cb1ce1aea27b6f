"""Thread-safe in-memory match metrics with Prometheus export."""

from __future__ import annotations

import threading

__all__ = ["MetricsCollector"]

_DESCRIPTIONS = {
    "pyglob_matches_total": "Total wildcard match calls",
    "pyglob_match_states": "Memo states used per match",
    "pyglob_match_duration_seconds": "Wildcard match duration",
}

_LabelsKey = tuple[tuple[str, str], ...]


class MetricsCollector:
    """Thread-safe in-memory metrics store for counters and histograms.

    Each histogram keeps the bucket bounds it was first observed with, so
    durations and state counts can use different scales.
    """

    DEFAULT_BUCKETS: list[float] = [
        0.00001,
        0.0001,
        0.001,
        0.01,
        0.1,
        1.0,
        10.0,
    ]

    STATE_BUCKETS: list[float] = [
        10.0,
        100.0,
        1000.0,
        10000.0,
        100000.0,
        1000000.0,
    ]

    def __init__(self, buckets: list[float] | None = None) -> None:
        self._buckets = (
            sorted(buckets) if buckets is not None else list(self.DEFAULT_BUCKETS)
        )
        self._lock = threading.Lock()
        self._counters: dict[tuple[str, _LabelsKey], int] = {}
        self._histogram_bounds: dict[str, list[float]] = {}
        self._histogram_sums: dict[tuple[str, _LabelsKey], float] = {}
        self._histogram_counts: dict[tuple[str, _LabelsKey], int] = {}
        self._histogram_buckets: dict[tuple[str, _LabelsKey, float], int] = {}

    @staticmethod
    def _labels_key(labels: dict[str, str]) -> _LabelsKey:
        return tuple(sorted(labels.items()))

    def increment(self, name: str, labels: dict[str, str], amount: int = 1) -> None:
        key = (name, self._labels_key(labels))
        with self._lock:
            self._counters[key] = self._counters.get(key, 0) + amount

    def observe(
        self,
        name: str,
        labels: dict[str, str],
        value: float,
        buckets: list[float] | None = None,
    ) -> None:
        labels_key = self._labels_key(labels)
        key = (name, labels_key)
        with self._lock:
            bounds = self._histogram_bounds.setdefault(
                name, sorted(buckets) if buckets is not None else self._buckets
            )
            self._histogram_sums[key] = self._histogram_sums.get(key, 0.0) + value
            self._histogram_counts[key] = self._histogram_counts.get(key, 0) + 1
            for b in bounds:
                if value <= b:
                    bkey = (name, labels_key, b)
                    self._histogram_buckets[bkey] = (
                        self._histogram_buckets.get(bkey, 0) + 1
                    )
            inf_key = (name, labels_key, float("inf"))
            self._histogram_buckets[inf_key] = (
                self._histogram_buckets.get(inf_key, 0) + 1
            )

    def snapshot(self) -> dict:
        with self._lock:
            return {
                "counters": dict(self._counters),
                "histograms": {
                    "sums": dict(self._histogram_sums),
                    "counts": dict(self._histogram_counts),
                    "buckets": dict(self._histogram_buckets),
                },
            }

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()
            self._histogram_bounds.clear()
            self._histogram_sums.clear()
            self._histogram_counts.clear()
            self._histogram_buckets.clear()

    def export_prometheus(self) -> str:
        with self._lock:
            lines: list[str] = []

            counter_names: set[str] = set()
            for (name, labels_tuple), value in sorted(self._counters.items()):
                if name not in counter_names:
                    desc = _DESCRIPTIONS.get(name, name)
                    lines.append(f"# HELP {name} {desc}")
                    lines.append(f"# TYPE {name} counter")
                    counter_names.add(name)
                labels_str = self._format_labels(dict(labels_tuple))
                lines.append(f"{name}{labels_str} {value}")

            hist_names: set[str] = set()
            for name, labels_tuple in sorted(self._histogram_sums.keys()):
                if name not in hist_names:
                    desc = _DESCRIPTIONS.get(name, name)
                    lines.append(f"# HELP {name} {desc}")
                    lines.append(f"# TYPE {name} histogram")
                    hist_names.add(name)

                labels_dict = dict(labels_tuple)
                labels_str = self._format_labels(labels_dict)

                for b in self._histogram_bounds.get(name, self._buckets):
                    count = self._histogram_buckets.get((name, labels_tuple, b), 0)
                    le_labels = {**labels_dict, "le": f"{b:g}"}
                    lines.append(
                        f"{name}_bucket{self._format_labels(le_labels)} {count}"
                    )

                inf_count = self._histogram_buckets.get(
                    (name, labels_tuple, float("inf")), 0
                )
                inf_labels = {**labels_dict, "le": "+Inf"}
                lines.append(
                    f"{name}_bucket{self._format_labels(inf_labels)} {inf_count}"
                )

                sum_val = self._histogram_sums.get((name, labels_tuple), 0.0)
                count_val = self._histogram_counts.get((name, labels_tuple), 0)
                lines.append(f"{name}_sum{labels_str} {sum_val}")
                lines.append(f"{name}_count{labels_str} {count_val}")

            return "\n".join(lines) + "\n" if lines else ""

    @staticmethod
    def _format_labels(labels: dict[str, str]) -> str:
        if not labels:
            return ""
        # 'le' goes last on bucket lines
        sorted_items = sorted(labels.items(), key=lambda x: (x[0] == "le", x[0]))
        pairs = ",".join(f'{k}="{v}"' for k, v in sorted_items)
        return "{" + pairs + "}"

    # --- Convenience methods ---

    def increment_matches(self, matched: bool, memo: str) -> None:
        self.increment(
            "pyglob_matches_total",
            {"matched": "true" if matched else "false", "memo": memo},
        )

    def observe_states(self, memo: str, states: int) -> None:
        self.observe(
            "pyglob_match_states",
            {"memo": memo},
            float(states),
            buckets=self.STATE_BUCKETS,
        )

    def observe_duration(self, memo: str, duration_seconds: float) -> None:
        self.observe(
            "pyglob_match_duration_seconds", {"memo": memo}, duration_seconds
        )
