"""Example: convex hull, area and centroid of a random point cloud."""

import numpy as np

from planegeom import area_polygon, centroid_polygon, monotone_chain, point_in_polygon


def main() -> None:
    rng = np.random.default_rng(123)
    cloud = rng.normal(size=(200, 2))
    hull = monotone_chain(cloud)
    print("Hull vertices:", len(hull))
    for p in hull:
        print(f"  ({p.x:.6f}, {p.y:.6f})")
    print("Area:", area_polygon(hull))
    center = centroid_polygon(hull)
    print(f"Centroid: ({center.x:.6f}, {center.y:.6f})")
    print("Centroid inside:", point_in_polygon(hull, center))


if __name__ == "__main__":
    main()
