from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .geometry import as_point_array, balls_intersect, check_radius
from .index_set import IndexSet


def build_neighbor_sets(points, radius: float) -> Tuple[List[IndexSet], List[Tuple[int, int]]]:
    """For every point i, the indices j > i whose radius balls meet ball i.

    只存下标更大的邻居：第 i 个集合里只有 j > i。这不是偶然的写法，
    rips_triangles 依赖这种不对称结构保证每个三角形恰好生成一次；
    改成对称邻接会重新引入重复三角形。

    Returns (neighbor_sets, edges). edges lists every (i, j) with
    j in neighbor_sets[i], ordered by i then j.
    """

    pts = as_point_array(points)
    r = check_radius(radius)
    n = pts.shape[0]

    neighbor_sets: List[IndexSet] = []
    edges: List[Tuple[int, int]] = []

    for i in range(n):
        ahead = pts[i + 1 :]
        # 一行一次向量化判定，仍然是每对点恰好一次谓词
        hits = balls_intersect(pts[i, 0], pts[i, 1], r, ahead[:, 0], ahead[:, 1], r)
        js = np.flatnonzero(hits) + (i + 1)

        mask = np.zeros(n, dtype=bool)
        mask[js] = True
        neighbor_sets.append(IndexSet.from_mask(mask))
        edges.extend((i, int(j)) for j in js)

    return neighbor_sets, edges
