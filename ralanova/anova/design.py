"""
Input model for CRD (RAL) analysis.

RALConfig holds the recognized configuration fields of an analysis request.
Dataset is the rectangular table collection a form layer edits: it can be
created zero-filled or at random and resized without losing overlapping
observations.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np

from ralanova.core.exceptions import DimensionError, ValidationError
from ralanova.core.validation import check_bounds, check_count, is_sequence
from ralanova.descriptive._moments import as_observations

MIN_TREATMENTS = 2
MIN_REPLICATIONS = 2
MIN_TABLES = 1

Table = tuple[tuple[float, ...], ...]


def _parse_json(text: str | bytes, name: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: invalid JSON: {e}") from e


@dataclass(frozen=True)
class RALConfig:
    """
    Configuration of one analysis request.

    Attributes:
        treatments: Number of treatments (columns), >= 2
        replications: Number of replications (rows), >= 2
        tables: Number of independent tables, >= 1
        data: Sequence of tables or a Dataset. The shape is not enforced
            here; ragged or malformed tables are handled by the orchestrator.
    """
    treatments: int
    replications: int
    tables: int
    data: Any

    def __post_init__(self) -> None:
        check_count(self.treatments, "treatments", minimum=MIN_TREATMENTS)
        check_count(self.replications, "replications", minimum=MIN_REPLICATIONS)
        check_count(self.tables, "tables", minimum=MIN_TABLES)
        if not (is_sequence(self.data) or isinstance(self.data, Dataset)):
            raise ValidationError(
                f"data: expected a sequence of tables or a Dataset, "
                f"got {type(self.data).__name__}"
            )

    @staticmethod
    def from_mapping(mapping: Mapping[str, Any]) -> 'RALConfig':
        """
        Build a config from a mapping with the recognized fields.

        'treatments', 'replications' and 'tables' are required. A missing
        'data' field is filled with zeros of the declared shape. Unknown
        keys are ignored.

        Raises:
            ValidationError: If mapping is not a mapping or a count is
                missing or invalid
        """
        if not isinstance(mapping, Mapping):
            raise ValidationError(
                f"config: expected a mapping, got {type(mapping).__name__}"
            )
        missing = [k for k in ('treatments', 'replications', 'tables') if k not in mapping]
        if missing:
            raise ValidationError(f"config: missing fields {missing}")

        treatments = mapping['treatments']
        replications = mapping['replications']
        tables = mapping['tables']
        data = mapping.get('data')
        if data is None:
            data = Dataset.zeros(
                check_count(treatments, "treatments", minimum=MIN_TREATMENTS),
                check_count(replications, "replications", minimum=MIN_REPLICATIONS),
                check_count(tables, "tables", minimum=MIN_TABLES),
            ).to_list()

        return RALConfig(
            treatments=treatments,
            replications=replications,
            tables=tables,
            data=data,
        )

    @staticmethod
    def from_json(text: str | bytes) -> 'RALConfig':
        """Parse a JSON object with the recognized fields."""
        return RALConfig.from_mapping(_parse_json(text, "config"))

    def to_dict(self) -> dict[str, Any]:
        data = self.data.to_list() if isinstance(self.data, Dataset) else self.data
        if isinstance(data, np.ndarray):
            data = data.tolist()
        return {
            'treatments': self.treatments,
            'replications': self.replications,
            'tables': self.tables,
            'data': data,
        }


@dataclass(frozen=True)
class Dataset:
    """
    Collection of replication tables.

    Tables are stored as tuples of tuples of floats. Replications may differ
    in length; use resize() to bring a dataset to a rectangular shape.

    Created via factory methods, not directly.
    """
    tables: tuple[Table, ...]

    @property
    def n_tables(self) -> int:
        return len(self.tables)

    @property
    def shape(self) -> tuple[int, int, int] | None:
        """(tables, replications, treatments) if rectangular, else None."""
        if not self.tables:
            return (0, 0, 0)
        n_reps = {len(t) for t in self.tables}
        n_trts = {len(row) for t in self.tables for row in t}
        if len(n_reps) != 1 or len(n_trts) > 1:
            return None
        return (len(self.tables), n_reps.pop(), n_trts.pop() if n_trts else 0)

    @staticmethod
    def from_nested(data: Any) -> 'Dataset':
        """
        Build a dataset from nested sequences (or a 3D array).

        Raises:
            ValidationError: If data or any of its tables is not a sequence
        """
        if not is_sequence(data):
            raise ValidationError(
                f"data: expected a sequence of tables, got {type(data).__name__}"
            )
        tables = []
        for i, table in enumerate(data):
            if not is_sequence(table):
                raise ValidationError(
                    f"data[{i}]: expected a sequence of replications, "
                    f"got {type(table).__name__}"
                )
            tables.append(tuple(
                tuple(float(v) for v in as_observations(row)) for row in table
            ))
        return Dataset(tables=tuple(tables))

    @staticmethod
    def from_config(config: RALConfig) -> 'Dataset':
        if isinstance(config.data, Dataset):
            return config.data
        return Dataset.from_nested(config.data)

    @staticmethod
    def from_json(text: str | bytes) -> 'Dataset':
        """Parse a JSON array of tables."""
        return Dataset.from_nested(_parse_json(text, "data"))

    @staticmethod
    def zeros(treatments: int, replications: int, tables: int) -> 'Dataset':
        """Zero-filled dataset of the given shape."""
        t = check_count(treatments, "treatments")
        r = check_count(replications, "replications")
        n = check_count(tables, "tables")
        row = (0.0,) * t
        return Dataset(tables=tuple((row,) * r for _ in range(n)))

    @staticmethod
    def random(
        treatments: int,
        replications: int,
        tables: int,
        *,
        seed: int | np.random.Generator | None = None,
        low: int = 1,
        high: int = 100,
    ) -> 'Dataset':
        """
        Dataset of integers drawn uniformly from [low, high].

        Args:
            treatments: Number of treatments per replication
            replications: Number of replications per table
            tables: Number of tables
            seed: Seed or Generator for reproducibility
            low: Smallest value (inclusive)
            high: Largest value (inclusive)
        """
        t = check_count(treatments, "treatments")
        r = check_count(replications, "replications")
        n = check_count(tables, "tables")
        lo, hi = check_bounds(low, high, "random")

        rng = np.random.default_rng(seed)
        values = rng.integers(lo, hi, size=(n, r, t), endpoint=True)
        return Dataset(tables=tuple(
            tuple(tuple(float(v) for v in row) for row in table)
            for table in values
        ))

    def resize(self, treatments: int, replications: int, tables: int) -> 'Dataset':
        """
        Reshape to tables x replications x treatments.

        Observations at overlapping indices are kept and new cells are
        zero-filled. Kept observations that are zero or NaN are written as 0.
        """
        t = check_count(treatments, "treatments")
        r = check_count(replications, "replications")
        n = check_count(tables, "tables")

        def cell(table: Table, i: int, j: int) -> float:
            if i < len(table) and j < len(table[i]):
                v = table[i][j]
                if v and not np.isnan(v):
                    return v
            return 0.0

        resized = []
        for k in range(n):
            existing = self.tables[k] if k < len(self.tables) else ()
            resized.append(tuple(
                tuple(cell(existing, i, j) for j in range(t)) for i in range(r)
            ))
        return Dataset(tables=tuple(resized))

    def to_list(self) -> list[list[list[float]]]:
        """Nested lists, suitable for JSON or calculate_ral()."""
        return [[list(row) for row in table] for table in self.tables]

    def to_array(self) -> np.ndarray:
        """
        3D float64 array of shape (tables, replications, treatments).

        Raises:
            DimensionError: If the dataset is ragged
        """
        shape = self.shape
        if shape is None:
            raise DimensionError("dataset: ragged tables cannot form a 3D array")
        return np.array(self.to_list(), dtype=np.float64).reshape(shape)
