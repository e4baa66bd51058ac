import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ...domain.services.normalized_compression_distance import (
    NormalizedCompressionDistance,
)
from ...domain.value_objects.byte_data import TextOrBytes, to_byte_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DistanceMatrix:

    labels: List[str]
    values: List[List[float]]

    @property
    def size(self) -> int:
        return len(self.labels)

    def distance(self, row: str, column: str) -> float:
        return self.values[self._index(row)][self._index(column)]

    def closest(self, label: str) -> Optional[str]:
        """Label at the smallest distance from ``label``, excluding itself."""
        index = self._index(label)
        candidates = [
            (value, other)
            for other_index, (other, value) in enumerate(
                zip(self.labels, self.values[index])
            )
            if other_index != index
        ]
        if not candidates:
            return None
        return min(candidates)[1]

    def _index(self, label: str) -> int:
        try:
            return self.labels.index(label)
        except ValueError:
            raise KeyError(label) from None


class DistanceMatrixUseCase:

    DEFAULT_MAX_WORKERS = 4

    def __init__(
        self,
        distance: NormalizedCompressionDistance,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self._distance = distance
        self._max_workers = max_workers

    @property
    def max_workers(self) -> int:
        return self._max_workers

    def execute(
        self,
        items: Sequence[TextOrBytes],
        labels: Optional[Sequence[str]] = None,
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> DistanceMatrix:
        if labels is None:
            labels = [str(i) for i in range(len(items))]
        if len(labels) != len(items):
            raise ValueError(
                f"Got {len(labels)} labels for {len(items)} items"
            )
        if len(set(labels)) != len(labels):
            raise ValueError("Labels must be unique")

        data = [to_byte_data(item) for item in items]
        total = len(data)
        rows: List[List[float]] = [[] for _ in range(total)]

        if total == 0:
            return DistanceMatrix(labels=[], values=[])

        logger.info(
            "Computing %dx%d distance matrix (max_workers=%d)",
            total,
            total,
            self._max_workers,
        )

        completed = 0
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            future_to_index = {
                executor.submit(self._compute_row, data[idx], data): idx
                for idx in range(total)
            }

            for future in as_completed(future_to_index):
                idx = future_to_index[future]
                rows[idx] = future.result()

                completed += 1
                if progress_callback:
                    progress_callback(completed, total)

        logger.info("Distance matrix complete: %d rows", total)
        return DistanceMatrix(labels=list(labels), values=rows)

    def _compute_row(self, x: bytes, data: List[bytes]) -> List[float]:
        return [self._distance(x, y) for y in data]
