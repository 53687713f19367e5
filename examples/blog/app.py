"""Blog — the article table served by wren.

Every article path renders its view from templates/blog/. Unknown
paths get a short 404 page.

Run:
    python app.py
"""

import html
from pathlib import Path

from wren import AppConfig, Request
from wren.blog import create_app

TEMPLATES_DIR = Path(__file__).parent / "templates"

app = create_app(AppConfig(template_dir=TEMPLATES_DIR))


@app.error(404)
def not_found(request: Request):
    return f"<h1>404</h1><p>No article at {html.escape(request.path)}</p>"


if __name__ == "__main__":
    app.run()
