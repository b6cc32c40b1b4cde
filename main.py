import logging
import sys

from raster import scene

DEFAULT_DUMP_PATH = "scene.txt"
DEFAULT_DUMP_STEP = 8


def _str_arg(name, default):
    token = f"--{name}="
    for arg in sys.argv:
        if arg.startswith(token):
            value = arg.split("=", 1)[1]
            return value or default
    return default


def _int_arg(name, default):
    token = f"--{name}="
    for arg in sys.argv:
        if arg.startswith(token):
            try:
                return int(arg.split("=", 1)[1])
            except ValueError:
                return int(default)
    return int(default)


def _canvas_size():
    width = _int_arg("width", scene.WIDTH)
    height = _int_arg("height", scene.HEIGHT)
    if width <= 0:
        width = scene.WIDTH
    if height <= 0:
        height = scene.HEIGHT
    return width, height


def run_dump_mode():
    width, height = _canvas_size()
    path = _str_arg("dump-path", DEFAULT_DUMP_PATH)
    step = _int_arg("step", DEFAULT_DUMP_STEP)
    fb = scene.build_scene_framebuffer(width, height)
    with open(path, "w") as f:
        f.write(fb.to_text(scene.GLYPHS, step=step) + "\n")
    print(f"Text preview saved as {path}")


def main():
    width, height = _canvas_size()
    path = _str_arg("out", scene.OUTPUT_PATH)
    fb = scene.build_scene_framebuffer(width, height)
    fb.save(path)
    print(f"Image saved as {path}")


def main_wrapper():
    logging.basicConfig(
        level=logging.DEBUG if "--verbose" in sys.argv else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if "--dump" in sys.argv:
            run_dump_mode()
        else:
            main()
    except OSError as e:
        print(f"Error saving image: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main_wrapper()
