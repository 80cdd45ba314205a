"""Shared types used across modules."""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Tuple


@dataclass
class SparseVector:
    """
    Sparse vector representation.

    Attributes:
        indices: Feature indices with explicit values
        values: Value for each index
        size: Declared dense length (defaults to max index + 1)
        name: Optional vector name (e.g. a document id)
    """
    indices: List[int]
    values: List[float]
    size: Optional[int] = None
    name: Optional[str] = None

    def __post_init__(self):
        if len(self.indices) != len(self.values):
            raise ValueError(
                f"indices and values differ in length: "
                f"{len(self.indices)} != {len(self.values)}"
            )
        if any(i < 0 for i in self.indices):
            raise ValueError("Vector indices must be non-negative")

        if self.size is not None and (isinstance(self.size, bool) or not isinstance(self.size, int)):
            raise ValueError(f"Vector size must be an integer, got {self.size!r}")

        inferred = max(self.indices) + 1 if self.indices else 0
        if self.size is None:
            self.size = inferred
        elif self.size < inferred:
            raise ValueError(
                f"Index {inferred - 1} out of range for vector of size {self.size}"
            )

    @classmethod
    def from_dict(
        cls,
        mapping: Mapping[int, float],
        size: Optional[int] = None,
        name: Optional[str] = None,
    ) -> "SparseVector":
        """Build a vector from an {index: value} mapping."""
        indices = sorted(mapping)
        return cls(
            indices=indices,
            values=[mapping[i] for i in indices],
            size=size,
            name=name,
        )

    def to_dict(self) -> Dict[int, float]:
        """Convert to {index: value} dict."""
        return dict(zip(self.indices, self.values))

    def iter_all(self) -> Iterator[Tuple[int, float]]:
        """Yield (index, value) for every position, zeros included."""
        values = self.to_dict()
        for index in range(self.size):
            yield index, values.get(index, 0.0)

    def iter_nonzero(self) -> Iterator[Tuple[int, float]]:
        """Yield (index, value) for non-zero entries in index order."""
        for index, value in sorted(self.to_dict().items()):
            if value != 0:
                yield index, value

    def __repr__(self) -> str:
        if self.name is not None:
            return f"SparseVector(name='{self.name}', size={self.size}, nnz={len(self.indices)})"
        return f"SparseVector(size={self.size}, nnz={len(self.indices)})"
