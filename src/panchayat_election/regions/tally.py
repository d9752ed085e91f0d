"""Vote aggregation over a nested region tree.

A region tree is a ward / village / block hierarchy where each node carries
its own ``votes`` and a list of ``sub_regions``.  A parent's own count does
not include its children, so totals are summed over the whole tree.

Example
-------
>>> tree = {
...     "name": "Block", "votes": 5,
...     "subRegions": [
...         {"name": "Ward 1", "votes": 3, "subRegions": []},
...         {"name": "Ward 2", "votes": 2, "subRegions": [{"name": "Hamlet", "votes": 1}]},
...     ],
... }
>>> count_votes_in_regions(tree)
11
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from panchayat_election._records import first_field, get_field, is_number, is_record


@dataclass
class RegionNode:
    """One region in the tree.

    Attributes
    ----------
    name:
        Display name of the region.
    votes:
        Votes counted directly in this region, excluding sub-regions.
    sub_regions:
        Child regions; empty for a leaf.
    """

    name: str
    votes: int = 0
    sub_regions: list[RegionNode] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> RegionNode:
        """Build a tree from nested mappings (``subRegions`` or ``sub_regions``)."""
        children = first_field(data, "sub_regions", "subRegions") or []
        return cls(
            name=str(data.get("name", "")),
            votes=data.get("votes", 0),  # type: ignore[arg-type]
            sub_regions=[cls.from_dict(child) for child in children],  # type: ignore[union-attr]
        )


def _children(node: object) -> Sequence[object]:
    children = first_field(node, "sub_regions", "subRegions")
    if isinstance(children, Sequence) and not isinstance(children, (str, bytes)):
        return children
    return ()


def count_votes_in_regions(region_tree: object) -> int | float:
    """Sum ``votes`` over *region_tree* and every nested sub-region.

    A node that is not a record, or whose ``votes`` is not a number, counts
    as 0 together with everything below it.  A missing ``sub_regions`` makes
    the node a leaf.  The tree is walked with an explicit stack, so depth is
    not bounded by the interpreter recursion limit, and it is never mutated.

    Parameters
    ----------
    region_tree:
        A ``RegionNode`` or a mapping with ``votes`` and ``subRegions`` /
        ``sub_regions`` keys.

    Returns
    -------
    int | float
        Total votes; 0 for a malformed or missing tree.
    """
    total: int | float = 0
    stack: list[object] = [region_tree]
    while stack:
        node = stack.pop()
        if not is_record(node):
            continue
        votes = get_field(node, "votes")
        if not is_number(votes):
            continue
        total += votes  # type: ignore[operator]
        stack.extend(_children(node))
    return total
