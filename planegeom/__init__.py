from .errors import GeometryError, InvalidGeometry
from .tolerance import Tolerance, get_tolerance, set_tolerance, using_tolerance, sign, is_zero, isclose
from .vector import (
    Vec2,
    as_point,
    as_points,
    sq,
    norm,
    dot,
    cross,
    translate,
    scale,
    rot,
    perp,
    small_angle,
)
from .predicates import orient, turn, in_angle, in_disk, on_segment, is_perp
from .line import Line, are_parallel, are_same, inter, int_bisector
from .segment import proper_inter, inters, seg_point, seg_seg
from .circle import Circle, circum_center, circum_circle, circle_2pts_rad, circle_line, circle_circle, tangents
from .polygon import (
    is_convex,
    area_triangle,
    signed_area,
    area_polygon,
    centroid_polygon,
    point_in_polygon,
    on_polygon_boundary,
)
from .hull import monotone_chain

__all__ = [
    'GeometryError',
    'InvalidGeometry',
    'Tolerance',
    'get_tolerance',
    'set_tolerance',
    'using_tolerance',
    'sign',
    'is_zero',
    'isclose',
    'Vec2',
    'as_point',
    'as_points',
    'sq',
    'norm',
    'dot',
    'cross',
    'translate',
    'scale',
    'rot',
    'perp',
    'small_angle',
    'orient',
    'turn',
    'in_angle',
    'in_disk',
    'on_segment',
    'is_perp',
    'Line',
    'are_parallel',
    'are_same',
    'inter',
    'int_bisector',
    'proper_inter',
    'inters',
    'seg_point',
    'seg_seg',
    'Circle',
    'circum_center',
    'circum_circle',
    'circle_2pts_rad',
    'circle_line',
    'circle_circle',
    'tangents',
    'is_convex',
    'area_triangle',
    'signed_area',
    'area_polygon',
    'centroid_polygon',
    'point_in_polygon',
    'on_polygon_boundary',
    'monotone_chain',
]
