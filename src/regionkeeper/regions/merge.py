"""Merge freshly generated documents with previously edited regions.

Forward merge takes region bodies from the pool; inverse merge (fill-in)
takes them from a second parsed document. In both cases the markers come
from the fresh document, so marker syntax always follows the generator.
"""

from __future__ import annotations

from collections.abc import Mapping

from regionkeeper.regions.document import Document, Segment


def merge(fresh: Document, pool: Mapping[str, Segment]) -> Document:
    """Replace the body of every region of ``fresh`` that exists in ``pool``.

    Regions unknown to the pool keep their generated body.
    """
    segments = []
    for segment in fresh:
        if segment.is_marked:
            pooled = pool.get(segment.id)
            if pooled is not None:
                segment = segment.with_content(pooled.content)
        segments.append(segment)
    return Document.of(segments)


def fill_in(template: Document, source: Document) -> Document:
    """Fill the regions of ``template`` with the bodies found in ``source``.

    Regions only present in ``source`` are dropped.
    """
    return merge(template, source.region_map())
