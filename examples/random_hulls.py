"""Example: hulls of random point clouds checked against the brute-force distance."""

import math

import numpy as np

from rotcal import CaliperConfig, brute_force_distance, convex_hull, min_convex_poly_dist


def main(seed: int = 7, trials: int = 5) -> None:
    rng = np.random.default_rng(seed)
    config = CaliperConfig(validate_inputs=True)
    for trial in range(trials):
        phi = rng.uniform(0.0, 2.0 * math.pi)
        poly1 = convex_hull(rng.random((12, 2)))
        poly2 = convex_hull(rng.random((9, 2)) + 2.0 * np.array([math.cos(phi), math.sin(phi)]))
        fast = min_convex_poly_dist(poly1, poly2, config=config)
        slow = brute_force_distance(poly1, poly2)
        print(f"trial {trial}: {len(poly1)} x {len(poly2)} vertices, calipers={fast:.9f} brute={slow:.9f}")


if __name__ == "__main__":
    main()
