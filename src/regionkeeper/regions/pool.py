"""Region pool — protected regions captured from the previous output.

Region ids are unique across the whole corpus. The pool records which
source each region came from so that two parsers covering the same file
do not report a false duplicate.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from regionkeeper.errors import BuilderStateError, DuplicateRegionIdError
from regionkeeper.regions.document import Document, Segment


class RegionPool(Mapping[str, Segment]):
    def __init__(self) -> None:
        self._regions: dict[str, Segment] = {}
        self._sources: dict[str, str | None] = {}
        self._frozen = False

    def ingest(self, document: Document, source: str | None = None) -> int:
        """Add all protected regions of ``document``.

        Args:
            document: Parsed document.
            source: Identity of the document (usually its path).

        Returns:
            Number of regions newly added.

        Raises:
            DuplicateRegionIdError: If an id is already pooled from another
                source, or appears again (in ``document`` or from the same
                source) with different content.
            BuilderStateError: If the pool is frozen.
        """
        if self._frozen:
            raise BuilderStateError("Region pool is frozen; no more regions can be ingested")

        added: dict[str, Segment] = {}
        for region in document.regions:
            region_id = region.id
            if region_id in added:
                if added[region_id].content != region.content:
                    raise DuplicateRegionIdError(region_id, source, source)
                continue

            if region_id in self._regions:
                # Same file seen through a second parser is not a collision.
                same_file = source is not None and self._sources[region_id] == source
                if same_file and self._regions[region_id].content == region.content:
                    continue
                raise DuplicateRegionIdError(region_id, self._sources[region_id], source)
            added[region_id] = region

        for region in added.values():
            self._regions[region.id] = region
            self._sources[region.id] = source
        return len(added)

    def source_of(self, region_id: str) -> str | None:
        return self._sources.get(region_id)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __getitem__(self, region_id: str) -> Segment:
        return self._regions[region_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._regions)

    def __len__(self) -> int:
        return len(self._regions)

    def __repr__(self) -> str:
        return f"RegionPool({len(self)} regions{', frozen' if self._frozen else ''})"
