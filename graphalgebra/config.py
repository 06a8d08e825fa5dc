"""
Configuration for graph algebra operations.

This module gathers the default labels, weights and limits used when the
library has to create edges or identifiers on its own (copies, complements,
compositions and products).
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping

logger = logging.getLogger(__name__)

#: Reserved identifier meaning "absent" or "error"
ERROR_ID = 0

#: Largest identifier an allocator may mint (unsigned 32-bit range)
MAX_IDENTIFIER = 2**32 - 1


@dataclass(frozen=True)
class GraphConfig:
    """
    Defaults applied by operators that create edges or labels themselves.

    Attributes:
        copied_edge_label: Label for edges created while copying a graph
            without a source edge to copy from
        copied_edge_weight: Weight for the same edges
        complemented_edge_label: Label for edges created by the complement
        complemented_edge_weight: Weight for edges created by the complement
        series_edge_label: Label for the two bridge edges of a series composition
        series_edge_weight: Weight for the series bridge edges
        cartesian_edge_label: Label for inter-layer edges of a Cartesian product
        cartesian_edge_weight: Weight for inter-layer edges
        duplicated_node_label_prefix: Prefix used when renaming duplicated labels
        max_identifier: Ceiling for identifiers minted by an allocator
    """

    copied_edge_label: str = "copied_edge"
    copied_edge_weight: int = 0
    complemented_edge_label: str = "complemented_edge"
    complemented_edge_weight: int = 0
    series_edge_label: str = "series_composition_edge"
    series_edge_weight: int = 0
    cartesian_edge_label: str = "cartesian_product_edge"
    cartesian_edge_weight: int = 0
    duplicated_node_label_prefix: str = "duplicated_node_"
    max_identifier: int = MAX_IDENTIFIER

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> "GraphConfig":
        """
        Build a configuration from a plain mapping.

        Args:
            mapping: Field names to values; missing fields keep their defaults

        Returns:
            A new GraphConfig

        Raises:
            ValueError: If the mapping contains unknown keys or a non-positive
                identifier ceiling
        """
        known = {f.name for f in fields(cls)}
        unknown = set(mapping) - known
        if unknown:
            raise ValueError(f"Unknown graph configuration keys: {sorted(unknown)}")

        config = cls(**dict(mapping))
        if config.max_identifier <= ERROR_ID:
            raise ValueError("max_identifier must be a positive integer")

        logger.debug(f"Loaded graph configuration overriding {sorted(mapping)}")
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a plain dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def with_overrides(self, **kwargs) -> "GraphConfig":
        """Return a copy of this configuration with some fields replaced."""
        return replace(self, **kwargs)


DEFAULT_CONFIG = GraphConfig()
