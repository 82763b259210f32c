from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .complex import RipsComplex, build_rips_complex
from .geometry import linear_map
from .point_generation import demo_point_cloud


# 原界面一次最多画这么多三角形，超过时提示
MAX_RENDERABLE_TRIANGLES = 8000


def slider_radius(fraction: float, min_radius: float = 10.0, max_radius: float = 100.0) -> float:
    """Map a slider position in [0, 1] to a ball radius in [min_radius, max_radius]."""
    return float(linear_map(fraction, 0.0, 1.0, min_radius, max_radius))


def radius_sweep(
    points,
    fractions: Sequence[float],
    min_radius: float = 10.0,
    max_radius: float = 100.0,
) -> List[RipsComplex]:
    """One full, independent complex per slider position."""
    return [
        build_rips_complex(points, slider_radius(f, min_radius, max_radius))
        for f in fractions
    ]


def main():
    # ========== 参数 ==========
    side = 600.0             # 点云放大到 [0, side]^2，半径以同样单位计
    n_steps = 10             # 滑块从 0 拖到 1 的采样步数
    min_radius = 10.0
    max_radius = 100.0
    seed = 0

    points = demo_point_cloud(seed=seed) * side
    fractions = np.linspace(0.0, 1.0, n_steps + 1)

    print(f"Demo cloud: n={points.shape[0]}, side={side}, seed={seed}")

    complexes = radius_sweep(points, fractions, min_radius=min_radius, max_radius=max_radius)
    for t, cx in enumerate(complexes):
        line = (
            f"step {t}/{n_steps}: r={cx.radius:.1f}, "
            f"|E|={len(cx.edges)}, |T|={len(cx.triangles)}"
        )
        if len(cx.triangles) > MAX_RENDERABLE_TRIANGLES:
            line += f"  (over display budget of {MAX_RENDERABLE_TRIANGLES} triangles)"
        print(line)

    print("Done.")


if __name__ == "__main__":
    main()
