"""Example input documents, one per supported format."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Union

from pdfgen.utils import ensure_directory

logger = logging.getLogger(__name__)

EXAMPLE_TEXT = """This is a simple text document.

It contains multiple paragraphs to demonstrate
how plain text is converted to PDF format.

The converter will automatically format line breaks
and create a clean, readable document."""

EXAMPLE_HTML = """<h1>HTML Document Example</h1>
<h2>Features</h2>
<p>This HTML document demonstrates various HTML elements:</p>
<ul>
    <li><strong>Bold text</strong></li>
    <li><em>Italic text</em></li>
    <li><a href="https://example.com">Links</a></li>
</ul>
<h3>Table Example</h3>
<table>
    <thead>
        <tr><th>Name</th><th>Age</th><th>City</th></tr>
    </thead>
    <tbody>
        <tr><td>John</td><td>30</td><td>New York</td></tr>
        <tr><td>Jane</td><td>25</td><td>London</td></tr>
    </tbody>
</table>"""

EXAMPLE_DATA = {
    "title": "Sample JSON Document",
    "author": "PDF Generator",
    "data": {
        "users": [
            {"name": "Alice", "age": 30, "role": "Developer"},
            {"name": "Bob", "age": 25, "role": "Designer"},
            {"name": "Charlie", "age": 35, "role": "Manager"},
        ],
        "settings": {"theme": "dark", "language": "en", "notifications": True},
    },
    "metadata": {"created": "2024-01-01", "version": "1.0.0"},
}

EXAMPLE_MARKDOWN = """---
title: Markdown Example Document
author: PDF Generator
date: 2024-01-01
---

# Markdown Document Example

This is a comprehensive example of **Markdown** formatting.

## Text Formatting

- **Bold text**
- *Italic text*
- ~~Strikethrough text~~
- `Inline code`

## Lists

1. First item
2. Second item
3. Third item

## Code Block

```python
def greet(name):
    return f"Hello, {name}!"
```

## Table

| Name    | Age | City      |
|---------|-----|-----------|
| Alice   | 30  | New York  |
| Bob     | 25  | London    |

## Blockquote

> This is a blockquote example.
> It can span multiple lines.

[Visit Example.com](https://example.com)

---

That's all for this example!
"""

EXAMPLES: Dict[str, str] = {
    "example.txt": EXAMPLE_TEXT,
    "example.html": EXAMPLE_HTML,
    "example.json": json.dumps(EXAMPLE_DATA, indent=2),
    "example.md": EXAMPLE_MARKDOWN,
}


def create_example_files(directory: Union[str, Path] = "examples") -> List[Path]:
    """Write the example inputs into ``directory``; existing files are left alone.

    Returns the paths that were newly written.
    """
    target = ensure_directory(directory)
    written = []
    for name, content in EXAMPLES.items():
        path = target / name
        if path.exists():
            logger.debug("Keeping existing %s", path)
            continue
        path.write_text(content, encoding="utf-8")
        written.append(path)
    logger.info("Example files created in: %s", target)
    return written
