"""
Boolean operations on flattened paths (union, intersect, subtract, xor)

Inputs are sequences of `PathPoint` holding any number of MOVE-delimited
subpaths; each subpath is treated as a closed polygon ring and curves
are flattened first. The engine runs in four stages:

1. Segmentation: clean the points, split them into rings, split each
   input at its own crossings and direct every edge so the even-odd
   fill lies on its left (outer boundaries counterclockwise, holes and
   opposite lobes of self-intersecting rings accordingly).
2. Intersection discovery: solve every edge pair of the two inputs and
   split edges at crossings and at collinear-overlap endpoints. This is
   O(n * m) in edge counts; pre-simplify very large paths.
3. Classification: each split arc is INSIDE, OUTSIDE or ON the other
   polygon, judged at its midpoint. ON arcs also record whether they run
   in the same direction as the boundary they lie on.
4. Assembly: keep the arcs the operation needs and chain them back into
   closed rings, cut apart wherever a ring passes a vertex twice.

# Winding convention
`signed_area` is positive for counterclockwise rings in y-up coordinates.
On a y-down screen the same ring appears clockwise.

# Tolerances
``parallel_epsilon`` rejects segment pairs whose cross denominator is
tiny. Raising it drops near-tangent crossings (they are then handled by
the collinear-overlap check or missed); lowering it accepts them with
less accurate t values. ``boundary_epsilon`` decides when a point lies on
a boundary and when two points coincide.
"""

import logging
import math
from collections import defaultdict
from dataclasses import replace

from .core import resolve
from .decompose import flatten_path
from .errors import DegenerateGeometry
from .primitives import (
    BooleanOperation,
    BoundaryPolicy,
    PathIntersectionPoint,
    PathKind,
    PathPoint,
    PathSegment,
    WindingDirection,
)

logger = logging.getLogger(__name__)

# Slack on t when accepting crossings at segment endpoints
PARAM_TOLERANCE = 1e-9

INSIDE = "inside"
OUTSIDE = "outside"
ON_SAME = "on_same"
ON_OPPOSITE = "on_opposite"

# (operation, arc belongs to the first path) -> arc states kept
KEEP_RULES = {
    (BooleanOperation.UNION, True): {OUTSIDE, ON_SAME},
    (BooleanOperation.UNION, False): {OUTSIDE},
    (BooleanOperation.INTERSECT, True): {INSIDE, ON_SAME},
    (BooleanOperation.INTERSECT, False): {INSIDE},
    (BooleanOperation.SUBTRACT, True): {OUTSIDE, ON_OPPOSITE},
    (BooleanOperation.SUBTRACT, False): {INSIDE},
}


def _xy(point):
    if isinstance(point, PathPoint):
        return (point.x, point.y)
    x, y = point
    return (float(x), float(y))


def _distance(a, b):
    return math.hypot(b[0] - a[0], b[1] - a[1])


def clean_points(points, epsilon=None):
    """
    Drop zero-length LINE points and collapse consecutive MOVE points

    Run before segmentation so the intersection solver never sees a
    zero-length segment.
    """
    epsilon = resolve("boundary_epsilon", epsilon)
    result = []
    for point in points:
        if result:
            last = result[-1]
            if point.is_move and last.is_move:
                result[-1] = point
                continue
            if point.kind == PathKind.LINE and _distance(last.xy, point.xy) <= epsilon:
                continue
        result.append(point)
    return result


def path_to_segments(points, epsilon=None):
    """
    Convert path points into directed segments

    A MOVE point starts a new subpath and never forms a segment with the
    point before it; the first point always acts as a MOVE. Curves are
    flattened and zero-length segments are skipped.

    Parameters:
    -----------
    points : sequence of PathPoint

    Returns:
    --------
    list of PathSegment
    """
    epsilon = resolve("boundary_epsilon", epsilon)
    segments = []
    current = None
    for point in flatten_path(points):
        if point.is_move or current is None:
            current = point
            continue
        if _distance(current.xy, point.xy) > epsilon:
            segments.append(PathSegment(current, point))
            current = point
    return segments


def _subpaths(points, epsilon):
    subpaths = []
    for point in clean_points(flatten_path(points), epsilon):
        if point.is_move or not subpaths:
            subpaths.append([])
        subpaths[-1].append(point.xy)
    return subpaths


def path_to_rings(points, epsilon=None):
    """
    Split a path into closed polygon rings

    Returns:
    --------
    list of list of (x, y)
        One ring per subpath, without a repeated closing point. Subpaths
        with fewer than 3 distinct points or with every vertex on one
        line are dropped. Self-intersecting rings are kept even when
        their lobes cancel to zero net area.
    """
    epsilon = resolve("boundary_epsilon", epsilon)
    rings = []
    for ring in _subpaths(points, epsilon):
        if len(ring) > 1 and _distance(ring[0], ring[-1]) <= epsilon:
            ring = ring[:-1]
        if len(ring) >= 3 and not _is_collinear(ring, epsilon):
            rings.append(ring)
    return rings


def _is_collinear(ring, epsilon):
    """True when the turns at every vertex add up to no area"""
    total = 0.0
    n = len(ring)
    for i in range(n):
        a, b, c = ring[i - 1], ring[i], ring[(i + 1) % n]
        total += abs((b[0] - a[0]) * (c[1] - b[1]) - (b[1] - a[1]) * (c[0] - b[0]))
    return total <= epsilon


def _solve(a, b, c, d, parallel_epsilon):
    """Parametric positions (t1, t2) where ab meets cd, None when parallel"""
    x1, y1 = a
    x2, y2 = b
    x3, y3 = c
    x4, y4 = d
    denominator = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denominator) < parallel_epsilon:
        return None
    t1 = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denominator
    t2 = ((x1 - x3) * (y1 - y2) - (y1 - y3) * (x1 - x2)) / denominator
    return t1, t2


def _clamp_param(t):
    if -PARAM_TOLERANCE <= t < 0:
        return 0.0
    if 1 < t <= 1 + PARAM_TOLERANCE:
        return 1.0
    return t


def find_segment_intersection(seg1, seg2, epsilon=None):
    """
    Intersection of two segments

    Solves ``seg1.start + t1 * (seg1.end - seg1.start) =
    seg2.start + t2 * (seg2.end - seg2.start)``.

    Parameters:
    -----------
    seg1, seg2 : PathSegment
    epsilon : float, optional
        Parallel threshold on the denominator (default: ``parallel_epsilon``)

    Returns:
    --------
    PathIntersectionPoint or None
        None for parallel segments or when t1/t2 fall outside [0, 1]

    Raises:
    -------
    DegenerateGeometry
        If either segment has zero length
    """
    if seg1.length == 0 or seg2.length == 0:
        raise DegenerateGeometry("Cannot intersect a zero-length segment")

    solution = _solve(
        seg1.start.xy, seg1.end.xy, seg2.start.xy, seg2.end.xy,
        resolve("parallel_epsilon", epsilon),
    )
    if solution is None:
        return None
    t1, t2 = (_clamp_param(t) for t in solution)
    if t1 < 0 or t1 > 1 or t2 < 0 or t2 > 1:
        return None

    x1, y1 = seg1.start.xy
    x2, y2 = seg1.end.xy
    return PathIntersectionPoint(
        x=x1 + t1 * (x2 - x1),
        y=y1 + t1 * (y2 - y1),
        t1=t1,
        t2=t2,
    )


def find_path_intersections(path1, path2, epsilon=None):
    """
    All crossings between the segments of two paths

    Every segment pair is tested, so the cost is O(n * m).

    Returns:
    --------
    list of PathIntersectionPoint
        With ``segment_index1`` / ``segment_index2`` set
    """
    segments1 = path_to_segments(path1)
    segments2 = path_to_segments(path2)
    intersections = []
    for i, seg1 in enumerate(segments1):
        for j, seg2 in enumerate(segments2):
            hit = find_segment_intersection(seg1, seg2, epsilon)
            if hit is not None:
                intersections.append(replace(hit, segment_index1=i, segment_index2=j))
    return intersections


def signed_area(points):
    """Shoelace area; positive for counterclockwise rings (y up)"""
    coords = [_xy(p) for p in points]
    area = 0.0
    n = len(coords)
    for i in range(n):
        x_i, y_i = coords[i]
        x_j, y_j = coords[(i + 1) % n]
        area += x_i * y_j - x_j * y_i
    return area / 2.0


def get_path_winding_direction(points):
    """
    Winding direction from the signed area

    Zero-area input reports CLOCKWISE.
    """
    if signed_area(points) > 0:
        return WindingDirection.COUNTERCLOCKWISE
    return WindingDirection.CLOCKWISE


def _point_in_ring(x, y, ring):
    inside = False
    j = len(ring) - 1
    for i in range(len(ring)):
        xi, yi = ring[i]
        xj, yj = ring[j]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def point_in_rings(point, rings):
    """Even-odd containment against several rings"""
    x, y = _xy(point)
    inside = False
    for ring in rings:
        if _point_in_ring(x, y, ring):
            inside = not inside
    return inside


def is_point_in_path(point, path):
    """
    Ray-casting containment test

    Casts a horizontal ray from ``point`` and counts crossings with every
    subpath (each implicitly closed); inside iff the count is odd.

    Parameters:
    -----------
    point : Vector2D or (x, y)
    path : sequence of PathPoint
    """
    rings = [ring for ring in _subpaths(path, 0.0) if len(ring) >= 3]
    return point_in_rings(point, rings)


def _sides(start, end, epsilon):
    """Points just left and just right of the middle of start -> end"""
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = math.hypot(dx, dy)
    offset = max(length * 1e-6, 4 * epsilon) / length
    mid = ((start[0] + end[0]) / 2, (start[1] + end[1]) / 2)
    return (
        (mid[0] - dy * offset, mid[1] + dx * offset),
        (mid[0] + dy * offset, mid[1] - dx * offset),
    )


def _oriented_edges(points, parallel_epsilon, epsilon):
    """
    Boundary of the even-odd fill of ``points``

    Rings are split at their own crossings and every piece is directed so
    the filled side lies on its left: outer boundaries run
    counterclockwise, holes clockwise, and each lobe of a self-intersecting
    ring gets its own direction. Pieces with the same fill on both sides
    (edges traced twice) are dropped.

    Returns:
    --------
    (rings, edges)
        The rings used for even-odd containment and the directed edges
    """
    rings = path_to_rings(points, epsilon)
    edges = _edges(rings)
    splits = [[] for _ in edges]
    for i, (a, b) in enumerate(edges):
        for j in range(i + 1, len(edges)):
            c, d = edges[j]
            _split_pair(a, b, c, d, splits[i], splits[j], parallel_epsilon, epsilon)

    oriented = []
    for start, end in _arcs(edges, splits, epsilon):
        left, right = _sides(start, end, epsilon)
        left_inside = point_in_rings(left, rings)
        if left_inside == point_in_rings(right, rings):
            continue
        oriented.append((start, end) if left_inside else (end, start))
    return rings, oriented


def _edges(rings):
    return [
        (ring[i], ring[(i + 1) % len(ring)])
        for ring in rings
        for i in range(len(ring))
    ]


def _project(point, a, b):
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return ((point[0] - a[0]) * dx + (point[1] - a[1]) * dy) / (dx * dx + dy * dy)


def _segment_distance(point, a, b):
    t = max(0.0, min(1.0, _project(point, a, b)))
    return _distance(point, (a[0] + t * (b[0] - a[0]), a[1] + t * (b[1] - a[1])))


def _add_split(splits, t, point, a, b, epsilon):
    if _distance(point, a) > epsilon and _distance(point, b) > epsilon:
        splits.append((t, point))


def _split_pair(a, b, c, d, splits_ab, splits_cd, parallel_epsilon, epsilon):
    """
    Record where edges ab and cd must be split

    Returns True when the edges cross or touch at a single point.
    """
    if (max(a[0], b[0]) + epsilon < min(c[0], d[0])
            or max(c[0], d[0]) + epsilon < min(a[0], b[0])
            or max(a[1], b[1]) + epsilon < min(c[1], d[1])
            or max(c[1], d[1]) + epsilon < min(a[1], b[1])):
        return False

    solution = _solve(a, b, c, d, parallel_epsilon)
    if solution is None:
        # collinear overlap: split each edge at the other's endpoints
        for p in (c, d):
            if _segment_distance(p, a, b) <= epsilon:
                _add_split(splits_ab, _project(p, a, b), p, a, b, epsilon)
        for p in (a, b):
            if _segment_distance(p, c, d) <= epsilon:
                _add_split(splits_cd, _project(p, c, d), p, c, d, epsilon)
        return False

    t1, t2 = (_clamp_param(t) for t in solution)
    if t1 < 0 or t1 > 1 or t2 < 0 or t2 > 1:
        return False
    point = (a[0] + t1 * (b[0] - a[0]), a[1] + t1 * (b[1] - a[1]))
    # reuse existing vertices so both edges share exact coordinates
    for vertex in (a, b, c, d):
        if _distance(point, vertex) <= epsilon:
            point = vertex
            break
    _add_split(splits_ab, t1, point, a, b, epsilon)
    _add_split(splits_cd, t2, point, c, d, epsilon)
    return True


def _split_edges(edges1, edges2, parallel_epsilon, epsilon):
    splits1 = [[] for _ in edges1]
    splits2 = [[] for _ in edges2]
    crossings = 0

    for i, (a, b) in enumerate(edges1):
        for j, (c, d) in enumerate(edges2):
            if _split_pair(a, b, c, d, splits1[i], splits2[j], parallel_epsilon, epsilon):
                crossings += 1

    logger.debug(
        "Split %d x %d edges at %d crossings", len(edges1), len(edges2), crossings
    )
    return _arcs(edges1, splits1, epsilon), _arcs(edges2, splits2, epsilon)


def _arcs(edges, splits, epsilon):
    arcs = []
    for (a, b), edge_splits in zip(edges, splits):
        chain = [a]
        for _, point in sorted(edge_splits, key=lambda s: s[0]):
            if _distance(chain[-1], point) > epsilon:
                chain.append(point)
        if _distance(chain[-1], b) <= epsilon:
            chain[-1] = b
        else:
            chain.append(b)
        arcs.extend(zip(chain, chain[1:]))
    return arcs


def _classify(arc, other_rings, other_edges, epsilon):
    start, end = arc
    mid = ((start[0] + end[0]) / 2, (start[1] + end[1]) / 2)
    for c, d in other_edges:
        if _segment_distance(mid, c, d) <= epsilon:
            dot = (end[0] - start[0]) * (d[0] - c[0]) + (end[1] - start[1]) * (d[1] - c[1])
            return ON_SAME if dot > 0 else ON_OPPOSITE
    return INSIDE if point_in_rings(mid, other_rings) else OUTSIDE


def _key(point, epsilon):
    quantum = max(epsilon, 1e-12)
    return (round(point[0] / quantum), round(point[1] / quantum))


def _remove_collinear(ring):
    changed = True
    while changed and len(ring) >= 3:
        changed = False
        for i in range(len(ring)):
            prev = ring[i - 1]
            curr = ring[i]
            nxt = ring[(i + 1) % len(ring)]
            d1 = (curr[0] - prev[0], curr[1] - prev[1])
            d2 = (nxt[0] - curr[0], nxt[1] - curr[1])
            scale = math.hypot(*d1) * math.hypot(*d2)
            if scale == 0:
                del ring[i]
                changed = True
                break
            cross = d1[0] * d2[1] - d1[1] * d2[0]
            dot = d1[0] * d2[0] + d1[1] * d2[1]
            if abs(cross) / scale <= 1e-12 and dot > 0:
                del ring[i]
                changed = True
                break
    return ring


def _assemble(arcs, epsilon):
    """Chain directed arcs into closed rings"""
    by_start = defaultdict(list)
    by_end = defaultdict(list)
    for index, (start, end) in enumerate(arcs):
        by_start[_key(start, epsilon)].append(index)
        by_end[_key(end, epsilon)].append(index)

    used = [False] * len(arcs)

    def take(candidates):
        for index in candidates:
            if not used[index]:
                used[index] = True
                return index
        return None

    # start open chains at their head so each one is walked in one piece
    heads = [i for i, (start, _) in enumerate(arcs) if not by_end[_key(start, epsilon)]]
    head_set = set(heads)
    order = heads + [i for i in range(len(arcs)) if i not in head_set]

    rings = []
    for first in order:
        if used[first]:
            continue
        used[first] = True
        start, current = arcs[first]
        ring = [start]
        start_key = _key(start, epsilon)
        while _key(current, epsilon) != start_key:
            ring.append(current)
            key = _key(current, epsilon)
            index = take(by_start[key])
            if index is not None:
                current = arcs[index][1]
                continue
            # fall back to walking an arc backwards
            index = take(by_end[key])
            if index is None:
                logger.debug("Open chain of %d points closed implicitly", len(ring))
                break
            current = arcs[index][0]

        for loop in _simple_loops(ring, epsilon):
            loop = _remove_collinear(loop)
            if len(loop) >= 3:
                rings.append(loop)
    return rings


def _simple_loops(ring, epsilon):
    """Cut a ring that passes through a vertex twice into separate loops"""
    loops = []
    stack = []
    seen = {}
    for point in ring:
        key = _key(point, epsilon)
        if key not in seen:
            seen[key] = len(stack)
            stack.append(point)
            continue
        index = seen[key]
        loops.append(stack[index:])
        for dropped in stack[index + 1:]:
            del seen[_key(dropped, epsilon)]
        del stack[index + 1:]
    loops.append(stack)
    return loops


def _emit(rings):
    points = []
    for ring in rings:
        points.append(PathPoint(ring[0][0], ring[0][1], PathKind.MOVE))
        points.extend(PathPoint(x, y, PathKind.LINE) for x, y in ring[1:])
        points.append(PathPoint(ring[0][0], ring[0][1], PathKind.LINE))
    return points


def perform_path_boolean_operation(path1, path2, operation,
                                   boundary=BoundaryPolicy.INCLUDE,
                                   epsilon=None, parallel_epsilon=None):
    """
    Combine two paths

    Parameters:
    -----------
    path1, path2 : sequence of PathPoint
        Flattened (or flattenable) polygons, any number of subpaths
    operation : BooleanOperation or str
        'union', 'intersect', 'subtract' (path1 - path2) or 'xor'
    boundary : BoundaryPolicy or str
        How edges shared by both paths are treated. INCLUDE keeps each
        shared edge once, from path1, where the result needs it: edges
        running the same way for union/intersect, opposite ways for
        subtract. EXCLUDE drops every shared edge.
    epsilon : float, optional
        On-boundary / coincidence distance (default: ``boundary_epsilon``)
    parallel_epsilon : float, optional
        Parallel-segment threshold (default: ``parallel_epsilon``)

    Returns:
    --------
    list of PathPoint
        One closed subpath (MOVE, LINEs, closing LINE) per output ring;
        holes run opposite to outer rings

    Examples:
    ---------
    >>> from vectorgeometry import Rectangle
    >>> square = Rectangle(0, 0, 100, 100).to_path()
    >>> perform_path_boolean_operation(square, square, "union") == square
    True
    """
    operation = BooleanOperation(operation)
    boundary = BoundaryPolicy(boundary)
    epsilon = resolve("boundary_epsilon", epsilon)
    parallel_epsilon = resolve("parallel_epsilon", parallel_epsilon)

    if operation == BooleanOperation.XOR:
        return (
            perform_path_boolean_operation(path1, path2, BooleanOperation.SUBTRACT,
                                           boundary, epsilon, parallel_epsilon)
            + perform_path_boolean_operation(path2, path1, BooleanOperation.SUBTRACT,
                                             boundary, epsilon, parallel_epsilon)
        )

    rings1, edges1 = _oriented_edges(path1, parallel_epsilon, epsilon)
    rings2, edges2 = _oriented_edges(path2, parallel_epsilon, epsilon)
    logger.debug(
        "%s: %d ring(s) vs %d ring(s)", operation.value, len(rings1), len(rings2)
    )

    if not edges1 or not edges2:
        if operation == BooleanOperation.UNION:
            return _emit(_assemble(edges1 or edges2, epsilon))
        if operation == BooleanOperation.SUBTRACT:
            return _emit(_assemble(edges1, epsilon))
        return []

    arcs1, arcs2 = _split_edges(edges1, edges2, parallel_epsilon, epsilon)

    keep1 = set(KEEP_RULES[(operation, True)])
    keep2 = set(KEEP_RULES[(operation, False)])
    if boundary == BoundaryPolicy.EXCLUDE:
        keep1 -= {ON_SAME, ON_OPPOSITE}
        keep2 -= {ON_SAME, ON_OPPOSITE}

    kept = [arc for arc in arcs1 if _classify(arc, rings2, edges2, epsilon) in keep1]
    for start, end in arcs2:
        if _classify((start, end), rings1, edges1, epsilon) in keep2:
            kept.append((end, start) if operation == BooleanOperation.SUBTRACT else (start, end))

    rings = _assemble(kept, epsilon)
    logger.debug(
        "%s kept %d of %d arcs, %d ring(s)",
        operation.value, len(kept), len(arcs1) + len(arcs2), len(rings),
    )
    return _emit(rings)


def combine_shapes(shape1, shape2, operation, **kwargs):
    """
    Run a boolean operation on two shapes and wrap the result in a Path

    Both shapes are flattened with ``to_path()`` in their current
    coordinates, so the result carries an identity transform. The style of
    ``shape1`` is copied.
    """
    from .paths import Path

    points = perform_path_boolean_operation(
        shape1.to_path(), shape2.to_path(), operation, **kwargs
    )
    return Path(points=points, style=shape1.style)
