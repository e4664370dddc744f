"""Example: circle/line intersections and common tangents of two circles."""

from planegeom import Circle, Line, circle_circle, circle_line, tangents


def main() -> None:
    unit = Circle((0.0, 0.0), 1.0)
    other = Circle((1.5, 0.0), 1.0)
    axis = Line.through((0.0, 0.0), (1.0, 0.0))

    print("circle/line:", circle_line(unit, axis))
    print("circle/circle:", circle_circle(unit, other))
    for inner in (False, True):
        label = "inner" if inner else "outer"
        for on_first, on_second in tangents(unit, other, inner=inner):
            print(f"{label} tangent: {on_first} -> {on_second}")


if __name__ == "__main__":
    main()
