from __future__ import annotations

from dataclasses import dataclass
from typing import List, Set, Tuple

import numpy as np

from .geometry import as_point_array, check_radius
from .index_set import IndexSet, intersect
from .neighbors import build_neighbor_sets


Edge = Tuple[int, int]
Triangle = Tuple[int, int, int]


@dataclass
class RipsComplex:
    points: np.ndarray  # (n, 2)
    radius: float
    edges: List[Edge]  # (i, j), i < j
    triangles: List[Triangle]  # (i, j, k), i < j < k

    @property
    def n(self) -> int:
        return self.points.shape[0]

    def edge_set(self) -> Set[Edge]:
        return set(self.edges)

    def triangle_set(self) -> Set[Triangle]:
        return set(self.triangles)


def rips_triangles(neighbor_sets: List[IndexSet]) -> List[Triangle]:
    """All 2-simplices from the forward neighbor sets of build_neighbor_sets.

    三角形 (i, j, k), i < j < k 只会在遍历 i 自己的邻居集合时产生：
    j 来自 N(i)，k 来自 N(i) ∩ N(j)。由于 N(i) 只含大于 i 的下标，
    N(j) 只含大于 j 的下标，同一组三个点的其他排列不会走到这里，所以不会重复。
    """

    triangles: List[Triangle] = []
    for i, ahead in enumerate(neighbor_sets):
        for j in ahead:
            for k in intersect(ahead, neighbor_sets[j]):
                triangles.append((i, j, k))
    return triangles


def compute_rips_complex(points, radius: float) -> Tuple[List[Edge], List[Triangle]]:
    """Edges and triangles of the Vietoris–Rips complex at the given ball radius.

    Two points are joined when their radius balls intersect (distance <= 2r,
    tangent included); a triangle is present iff all three of its edges are.
    Raises InvalidInputError for non-finite coordinates or a negative radius.
    """

    neighbor_sets, edges = build_neighbor_sets(points, radius)
    triangles = rips_triangles(neighbor_sets)
    return edges, triangles


def build_rips_complex(points, radius: float) -> RipsComplex:
    pts = as_point_array(points)
    r = check_radius(radius)
    edges, triangles = compute_rips_complex(pts, r)
    return RipsComplex(points=pts, radius=r, edges=edges, triangles=triangles)
