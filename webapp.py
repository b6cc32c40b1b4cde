from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlparse

from raster import scene

HOST = "127.0.0.1"
PORT = 8000
MAX_SIZE = 4000

HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>Polygon Raster</title>
  <style>
    body {
      margin: 0;
      background: #101010;
      color: #e9e9e9;
      font-family: "IBM Plex Mono", "Menlo", "Consolas", monospace;
    }
    .bar {
      border-bottom: 1px solid #2a2a2a;
      padding: 10px;
      display: flex;
      gap: 8px;
      align-items: center;
    }
    .bar input {
      width: 80px;
      background: #0f0f0f;
      color: #e9e9e9;
      border: 1px solid #2a2a2a;
      padding: 6px;
    }
    #scene {
      margin: 10px;
      border: 1px solid #2a2a2a;
      image-rendering: pixelated;
    }
  </style>
</head>
<body>
  <div class="bar">
    <input id="width" title="width" value="%(width)s" />
    <input id="height" title="height" value="%(height)s" />
    <button id="apply">Render</button>
  </div>
  <img id="scene" src="/scene.png?width=%(width)s&height=%(height)s" alt="scene" />
  <script>
    document.getElementById("apply").addEventListener("click", () => {
      const query = new URLSearchParams({
        width: document.getElementById("width").value,
        height: document.getElementById("height").value
      });
      document.getElementById("scene").src = "/scene.png?" + query.toString();
    });
  </script>
</body>
</html>
""" % {
    "width": scene.WIDTH,
    "height": scene.HEIGHT,
}


def _int_arg(query, name, default):
    try:
        return int(query.get(name, [default])[0])
    except (TypeError, ValueError):
        return int(default)


def render_png(query):
    width = _int_arg(query, "width", scene.WIDTH)
    height = _int_arg(query, "height", scene.HEIGHT)
    width = max(1, min(width, MAX_SIZE))
    height = max(1, min(height, MAX_SIZE))
    return scene.build_scene_framebuffer(width, height).to_png_bytes()


class Handler(BaseHTTPRequestHandler):
    def _send(self, status, content_type, body, cache=True):
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        if not cache:
            self.send_header("Cache-Control", "no-store")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self):
        parsed = urlparse(self.path)
        if parsed.path == "/":
            self._send(200, "text/html; charset=utf-8", HTML.encode("utf-8"))
            return

        if parsed.path == "/scene.png":
            body = render_png(parse_qs(parsed.query))
            self._send(200, "image/png", body, cache=False)
            return

        self._send(404, "text/plain; charset=utf-8", b"Not found")

    def log_message(self, format, *args):
        return


def main():
    server = ThreadingHTTPServer((HOST, PORT), Handler)
    print(f"Polygon raster preview running at http://{HOST}:{PORT}")
    server.serve_forever()


if __name__ == "__main__":
    main()
