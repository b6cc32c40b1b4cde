import logging
from collections import namedtuple

from raster import render
from raster.framebuffer import BLACK, BLUE, GREEN, RED, WHITE, YELLOW, Framebuffer, Point

logger = logging.getLogger(__name__)

WIDTH = 800
HEIGHT = 600
OUTPUT_PATH = "out.png"
BACKGROUND = WHITE

SceneItem = namedtuple(
    "SceneItem",
    ["vertices", "fill_color", "outline_color", "holes", "hole_color"],
    defaults=((), WHITE),
)


def _points(*coords):
    return tuple(Point(x, y) for x, y in coords)


POLYGON_1 = _points(
    (165, 380), (185, 360), (180, 330), (207, 345), (233, 330),
    (230, 360), (250, 380), (220, 385), (205, 410), (193, 383),
)
POLYGON_2 = _points((321, 335), (288, 286), (339, 251), (374, 302))
POLYGON_3 = _points((377, 249), (411, 197), (436, 249))
POLYGON_4 = _points(
    (413, 177), (448, 159), (502, 88), (553, 53), (535, 36), (676, 37),
    (660, 52), (750, 145), (761, 179), (672, 192), (659, 214), (615, 214),
    (632, 230), (580, 230), (597, 215), (552, 214), (517, 144), (466, 180),
)
# Sits inside POLYGON_4.
HOLE_1 = _points((682, 175), (708, 120), (735, 148), (739, 170))

SCENE = (
    SceneItem(POLYGON_1, RED, BLACK),
    SceneItem(POLYGON_2, GREEN, BLACK),
    SceneItem(POLYGON_3, BLUE, BLACK),
    SceneItem(POLYGON_4, YELLOW, BLACK, holes=(HOLE_1,), hole_color=WHITE),
)

# Text preview glyphs for the palette above.
GLYPHS = {
    WHITE: " ",
    BLACK: "#",
    RED: "r",
    GREEN: "g",
    BLUE: "b",
    YELLOW: "y",
}


def render_scene(fb, scene=SCENE):
    for item in scene:
        if item.holes:
            render.fill_with_holes(
                fb,
                item.vertices,
                item.holes,
                item.fill_color,
                item.hole_color,
                item.outline_color,
            )
        else:
            render.fill_polygon(fb, item.vertices, item.fill_color, item.outline_color)
    logger.debug("rendered %d scene items", len(scene))


def build_scene_framebuffer(width=WIDTH, height=HEIGHT, scene=SCENE):
    fb = Framebuffer(width, height, background=BACKGROUND)
    render_scene(fb, scene)
    return fb
