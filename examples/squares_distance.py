"""Example: distance between two unit squares, with the rotation trace."""

from rotcal import Polygon, iter_caliper_steps, min_convex_poly_dist

SQUARE_A = Polygon.from_coords([(0, 0), (1, 0), (1, 1), (0, 1)])
SQUARE_B = Polygon.from_coords([(2, 0), (3, 0), (3, 1), (2, 1)])


def main() -> None:
    for step in iter_caliper_steps(SQUARE_A, SQUARE_B):
        print(f"[{step.index}] {step.alignment.name:<8} angle={step.angle:.4f} dist={step.dist:.4f}")
    print("Distance:", min_convex_poly_dist(SQUARE_A, SQUARE_B))


if __name__ == "__main__":
    main()
