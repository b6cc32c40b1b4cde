import logging

logger = logging.getLogger(__name__)

MIN_POLYGON_VERTICES = 3


def line_points(p1, p2):
    """Bresenham's Line Algorithm, both endpoints included."""
    x0, y0 = p1
    x1, y1 = p2
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


def draw_line(fb, p1, p2, color):
    for x, y in line_points(p1, p2):
        fb.set_pixel(x, y, color)


def polygon_edges(vertices):
    """Consecutive vertex pairs of a closed ring, last vertex wrapping to the first."""
    n = len(vertices)
    for i in range(n):
        yield vertices[i], vertices[(i + 1) % n]


def _div_trunc(a, b):
    # Integer division rounding toward zero; `//` would floor negative quotients.
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def scanline_crossings(vertices, y):
    """Sorted x-coordinates where row `y` crosses the polygon boundary.

    An edge counts when `y1 <= y < y2` (or mirrored), so a vertex lying on the
    row belongs to exactly one of its two edges. Horizontal edges never count.
    """
    xs = []
    for (x1, y1), (x2, y2) in polygon_edges(vertices):
        if y1 != y2 and ((y1 <= y < y2) or (y2 <= y < y1)):
            xs.append(x1 + _div_trunc((y - y1) * (x2 - x1), y2 - y1))
    xs.sort()
    return xs


def scanline_spans(vertices):
    """Yield `(y, x_start, x_end)` interior spans, rows ascending.

    Crossings pair up even-odd; each span is shrunk by one pixel per side so
    the boundary pixels stay free for the outline. Empty spans and a trailing
    unpaired crossing are skipped.
    """
    if len(vertices) < MIN_POLYGON_VERTICES:
        return
    min_y = min(p[1] for p in vertices)
    max_y = max(p[1] for p in vertices)

    for y in range(min_y, max_y + 1):
        xs = scanline_crossings(vertices, y)
        for i in range(0, len(xs) - 1, 2):
            x_start = xs[i] + 1
            x_end = xs[i + 1] - 1
            if x_start <= x_end:
                yield y, x_start, x_end


def fill_interior(fb, vertices, fill_color):
    """Paint the polygon interior without touching its boundary or drawing an outline."""
    spans = 0
    for y, x_start, x_end in scanline_spans(vertices):
        for x in range(x_start, x_end + 1):
            fb.set_pixel(x, y, fill_color)
        spans += 1
    logger.debug("filled %d spans for %d-vertex polygon", spans, len(vertices))


def draw_outline(fb, vertices, color):
    if len(vertices) < MIN_POLYGON_VERTICES:
        return
    for p1, p2 in polygon_edges(vertices):
        draw_line(fb, p1, p2, color)


def fill_polygon(fb, vertices, fill_color, outline_color):
    """Fill first, then outline, so the outline always ends up on top."""
    if len(vertices) < MIN_POLYGON_VERTICES:
        return
    fill_interior(fb, vertices, fill_color)
    draw_outline(fb, vertices, outline_color)


def fill_with_holes(fb, outer_vertices, holes, outer_color, hole_color, outline_color):
    """
    Simplified hole support by overpainting.

    The outer interior is filled, every hole interior is then repainted with
    `hole_color` in list order (overlapping holes: last one wins), and finally
    the outer outline and all hole outlines are drawn over both fills.
    """
    if len(outer_vertices) < MIN_POLYGON_VERTICES:
        return

    fill_interior(fb, outer_vertices, outer_color)
    for hole in holes:
        fill_interior(fb, hole, hole_color)

    draw_outline(fb, outer_vertices, outline_color)
    for hole in holes:
        draw_outline(fb, hole, outline_color)
