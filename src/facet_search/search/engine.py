"""In-memory faceted search over a fixed item catalog.

The engine indexes the catalog once, per attribute axis, and answers filter
queries by set operations over item ids. Indexes are never mutated after
construction, so concurrent searches need no locking.
"""

from collections.abc import Iterable, Mapping, Sequence
import logging
import time
from types import MappingProxyType
from uuid import UUID

from facet_search.domain.model import ALL_COLORS, ALL_SIZES, Color, Item, Size
from facet_search.domain.search import (
    ColorCount,
    InvalidArgumentError,
    SearchOptions,
    SearchResults,
    SizeCount,
)
from facet_search.observability.tracing import create_span
from facet_search.search.metrics import MetricsCollector, SearchMetrics, get_metrics_collector


logger = logging.getLogger(__name__)


def combine_candidates(
    color_ids: set[UUID],
    size_ids: set[UUID],
    color_constrained: bool,
    size_constrained: bool,
    all_ids: Iterable[UUID],
) -> set[UUID]:
    """Merge per-axis matches into the final candidate ids.

    An unconstrained axis matches everything, so it drops out of the
    intersection; with neither axis constrained every catalog id matches.
    """
    if color_constrained and size_constrained:
        return color_ids & size_ids
    if color_constrained:
        return color_ids
    if size_constrained:
        return size_ids
    return set(all_ids)


def _group_ids(items: Sequence[Item], key: str) -> Mapping[UUID, tuple[UUID, ...]]:
    groups: dict[UUID, list[UUID]] = {}
    for item in items:
        groups.setdefault(getattr(item, key).id, []).append(item.id)
    return MappingProxyType({value_id: tuple(ids) for value_id, ids in groups.items()})


class FacetSearchEngine:
    """Faceted search engine with a simple interface.

    Build it once from the full catalog, then call search() as often as
    needed. Facet counts are reported for every value of the color and size
    registries, including values no result item holds.
    """

    def __init__(
        self,
        items: Sequence[Item] | None,
        *,
        colors: Sequence[Color] = ALL_COLORS,
        sizes: Sequence[Size] = ALL_SIZES,
        metrics: MetricsCollector | None = None,
    ):
        if items is None:
            raise InvalidArgumentError("items", "the item catalog cannot be None")

        self._colors = tuple(colors)
        self._sizes = tuple(sizes)
        self._metrics = metrics

        items = list(items)
        self._validate_catalog(items)

        self._by_color = _group_ids(items, "color")
        self._by_size = _group_ids(items, "size")
        self._items: Mapping[UUID, Item] = MappingProxyType({item.id: item for item in items})
        self._positions: Mapping[UUID, int] = MappingProxyType({item.id: pos for pos, item in enumerate(items)})

        logger.info(
            "Indexed %d items (%d colors, %d sizes)",
            len(self._items),
            len(self._by_color),
            len(self._by_size),
        )

    def _validate_catalog(self, items: list[Item]) -> None:
        known_colors = {color.id for color in self._colors}
        known_sizes = {size.id for size in self._sizes}
        seen: set[UUID] = set()
        for item in items:
            if item.id in seen:
                raise InvalidArgumentError("items", f"duplicate item id {item.id}")
            seen.add(item.id)
            if item.color.id not in known_colors:
                raise InvalidArgumentError("items", f"item {item.id} has unregistered color {item.color.name!r}")
            if item.size.id not in known_sizes:
                raise InvalidArgumentError("items", f"item {item.id} has unregistered size {item.size.name!r}")

    @property
    def colors(self) -> tuple[Color, ...]:
        return self._colors

    @property
    def sizes(self) -> tuple[Size, ...]:
        return self._sizes

    def __len__(self) -> int:
        return len(self._items)

    def get(self, item_id: UUID) -> Item | None:
        """Look up a catalog item by id."""
        return self._items.get(item_id)

    def search(self, options: SearchOptions | None) -> SearchResults:
        """Filter the catalog and compute facet counts.

        Args:
            options: Allowed values per axis; an empty list leaves that axis
                unrestricted.

        Returns:
            SearchResults with the matching items in catalog order and one
            count per registered color and size.

        Raises:
            InvalidArgumentError: options, or one of its value lists, is None.
        """
        if options is None or getattr(options, "colors", None) is None or getattr(options, "sizes", None) is None:
            raise InvalidArgumentError("options", "the search options and their value lists cannot be None")

        # Any iterable is accepted; read each axis exactly once
        colors = list(options.colors)
        sizes = list(options.sizes)

        started = time.perf_counter()
        with create_span(
            "facet_search.search",
            attributes={
                "search.selected_colors": len(colors),
                "search.selected_sizes": len(sizes),
                "search.catalog_size": len(self._items),
            },
        ) as span:
            color_ids = self._resolve(self._by_color, colors)
            size_ids = self._resolve(self._by_size, sizes)
            candidates = combine_candidates(
                color_ids,
                size_ids,
                color_constrained=len(colors) > 0,
                size_constrained=len(sizes) > 0,
                all_ids=self._items.keys(),
            )
            results = self._materialize(candidates)
            span.set_attribute("search.result_count", results.total)

            latency_ms = (time.perf_counter() - started) * 1000
            (self._metrics or get_metrics_collector()).record_search(
                SearchMetrics(
                    latency_ms=latency_ms,
                    result_count=results.total,
                    selected_colors=len(colors),
                    selected_sizes=len(sizes),
                )
            )
            logger.debug(
                "Search matched %d of %d items in %.3fms",
                results.total,
                len(self._items),
                latency_ms,
                extra={"selected_colors": len(colors), "selected_sizes": len(sizes)},
            )
        return results

    @staticmethod
    def _resolve(index: Mapping[UUID, tuple[UUID, ...]], values: Iterable[Color | Size]) -> set[UUID]:
        """Union of item ids indexed under any of the values; unknown values add nothing."""
        ids: set[UUID] = set()
        for value in values:
            ids.update(index.get(value.id, ()))
        return ids

    def _materialize(self, candidates: set[UUID]) -> SearchResults:
        color_counts = dict.fromkeys((color.id for color in self._colors), 0)
        size_counts = dict.fromkeys((size.id for size in self._sizes), 0)
        items: list[Item] = []

        for item_id in sorted(candidates, key=self._positions.__getitem__):
            item = self._items[item_id]
            items.append(item)
            color_counts[item.color.id] += 1
            size_counts[item.size.id] += 1

        return SearchResults(
            items=items,
            color_counts=[ColorCount(color=color, count=color_counts[color.id]) for color in self._colors],
            size_counts=[SizeCount(size=size, count=size_counts[size.id]) for size in self._sizes],
        )
