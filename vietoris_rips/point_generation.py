from __future__ import annotations

from typing import Tuple

import numpy as np

from .geometry import linear_map


def random_points_in_square(n: int, side: float = 1.0, seed: int | None = None) -> np.ndarray:
    """Sample n random points in [0, side] x [0, side]."""
    rng = np.random.default_rng(seed)
    return rng.random((max(0, n), 2)) * side


def random_points_on_ellipse(
    n: int,
    center: Tuple[float, float],
    radius: float,
    aspect: float = 1.0,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Points on the boundary of an axis-aligned ellipse.

    半轴为 radius（x 方向）和 radius * aspect（y 方向）；角度在 [0, 2π) 上均匀采样。
    """

    if rng is None:
        rng = np.random.default_rng()

    theta = rng.uniform(0.0, 2.0 * np.pi, size=max(0, n))
    cx, cy = center
    x = linear_map(np.cos(theta), -1.0, 1.0, cx - radius, cx + radius)
    y = linear_map(np.sin(theta), -1.0, 1.0, cy - radius * aspect, cy + radius * aspect)
    return np.stack([x, y], axis=1)


def demo_point_cloud(
    n_uniform: int = 10,
    n_clusters: int = 4,
    cluster_size: int = 20,
    cluster_radius: float = 0.1,
    aspect: float = 1.5,
    seed: int | None = None,
) -> np.ndarray:
    """Demo fixture in the unit square: a sparse uniform scatter plus ring clusters.

    - n_uniform 个点均匀撒在 [0.13, 0.9]^2 内；
    - 再放 n_clusters 个椭圆环簇，每簇 cluster_size 个点落在椭圆边界上，
      椭圆中心的取值范围保证整个簇留在单位正方形内。
    环簇在中等半径下会先连成环、再填满三角形，适合观察复形随半径的变化。
    """

    rng = np.random.default_rng(seed)

    scatter = linear_map(rng.random((max(0, n_uniform), 2)), 0.0, 1.0, 0.13, 0.9)
    parts = [scatter]

    for _ in range(max(0, n_clusters)):
        cx = float(linear_map(rng.random(), 0.0, 1.0, cluster_radius, 1.0 - cluster_radius))
        cy = float(
            linear_map(
                rng.random(),
                0.0,
                1.0,
                0.05 + cluster_radius * aspect,
                0.98 - cluster_radius * aspect,
            )
        )
        parts.append(
            random_points_on_ellipse(
                cluster_size,
                center=(cx, cy),
                radius=cluster_radius,
                aspect=aspect,
                rng=rng,
            )
        )

    return np.vstack(parts)
