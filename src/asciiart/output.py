import html
import logging
import sys
from pathlib import Path
from typing import Protocol, TextIO

logger = logging.getLogger(__name__)

_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>ASCII Art</title>
</head>
<body style="background-color: white;">
<pre style="font-family: '{font}', monospace; font-size: 8px; line-height: 1.0; letter-spacing: 0.2em;">
{body}
</pre>
</body>
</html>
"""


class Output(Protocol):
    def out(self, rows: list[str]) -> None:
        """Deliver a rendered character grid, one string per row."""
        ...


class ConsoleOutput:
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def out(self, rows: list[str]) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        for row in rows:
            stream.write(row + "\n")


class HtmlOutput:
    """Writes the grid to an HTML file inside a <pre> block in a fixed font."""

    def __init__(self, path: str | Path = "out.html", font: str = "Courier New"):
        self.path = Path(path)
        self.font = font

    def render(self, rows: list[str]) -> str:
        body = "\n".join(html.escape(row) for row in rows)
        return _HTML_TEMPLATE.format(font=html.escape(self.font), body=body)

    def out(self, rows: list[str]) -> None:
        self.path.write_text(self.render(rows), encoding="utf-8")
        logger.debug("Wrote %d rows to %s", len(rows), self.path)
