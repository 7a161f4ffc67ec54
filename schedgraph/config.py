"""Configuration classes for SchedGraph components."""

from dataclasses import dataclass


@dataclass
class AnalysisConfig:
    """Tunables shared by graph loading, path analysis and rendering."""

    # Weight assigned to an edge record that omits "w"
    default_weight: float = 1.0

    # Above this many vertices the all-sources critical path logs a warning
    critical_path_vertex_limit: int = 2000

    # Format spec used when rendering distances and path lengths
    float_format: str = ".2f"

    def format_distance(self, value: float) -> str:
        """Render a distance with the configured precision."""
        return format(value, self.float_format)

    def exceeds_critical_path_limit(self, num_vertices: int) -> bool:
        """Return True if an all-sources critical path search is considered large."""
        return num_vertices > self.critical_path_vertex_limit


# Global configuration instance
ANALYSIS_CONFIG = AnalysisConfig()
