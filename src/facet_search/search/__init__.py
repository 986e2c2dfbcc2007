"""
Faceted search package.

- engine: in-memory per-axis indexes and the search() query
- metrics: rolling latency and result-size statistics for searches
"""

from facet_search.search.engine import FacetSearchEngine, combine_candidates


__all__ = ["FacetSearchEngine", "combine_candidates"]
