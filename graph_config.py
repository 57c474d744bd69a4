"""
Construction-time options for AdjacencyListGraph.
"""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class GraphConfig:
    """Behavioural switches for a graph instance.

    Attributes
    ----------
    full_predecessor_scan : bool
        When False (the default), ``predecessors`` stops after the first
        source vertex that has an edge into the queried vertex. When True,
        every source vertex is reported.
    synchronized : bool
        Guard every public operation with a single re-entrant lock so that
        one instance can be shared between threads.
    """

    full_predecessor_scan: bool = False
    synchronized: bool = False

    def validate(self) -> None:
        """Check field types.

        Raises
        ------
        TypeError
            If any option is not a ``bool``.
        """

        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise TypeError(
                    f"GraphConfig.{f.name} must be a bool, got {type(value).__name__}"
                )
