"""Stylesheets embedded into generated documents, one per converter."""

BASE_CSS = """
body {
  font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
  line-height: 1.6;
  color: #333;
  max-width: 800px;
  margin: 0 auto;
  padding: 20px;
}

h1 {
  color: #2c3e50;
  border-bottom: 2px solid #3498db;
  padding-bottom: 10px;
}
"""

# Appended to every document, and injected into complete HTML documents.
PRINT_CSS = """
@media print {
  body { margin: 0; padding: 0; }
  .no-print { display: none; }
  .page-break { page-break-before: always; }
  .page-break-avoid { page-break-inside: avoid; }
  h1, h2, h3, h4, h5, h6 { page-break-after: avoid; }
  table, figure, img { page-break-inside: avoid; }
}

* { box-sizing: border-box; }

img { max-width: 100%; height: auto; }
"""

TEXT_CSS = BASE_CSS + """
p {
  margin-bottom: 1em;
  text-align: justify;
}

.text-content {
  font-size: 14px;
  white-space: pre-wrap;
}
"""

HTML_CSS = BASE_CSS + """
h1, h2, h3, h4, h5, h6 { color: #2c3e50; margin-top: 1.5em; margin-bottom: 0.5em; }
p { margin-bottom: 1em; text-align: justify; }
table { width: 100%; border-collapse: collapse; margin: 1em 0; }
th, td { border: 1px solid #ddd; padding: 8px; text-align: left; }
th { background-color: #f2f2f2; font-weight: bold; }
blockquote { border-left: 4px solid #3498db; margin: 1em 0; padding: 0.5em 1em; background-color: #f9f9f9; }
code { background-color: #f4f4f4; padding: 2px 4px; border-radius: 3px; font-family: 'Courier New', monospace; }
pre { background-color: #f4f4f4; padding: 1em; border-radius: 5px; overflow-x: auto; }
""" + PRINT_CSS

JSON_CSS = BASE_CSS + """
.json-object, .json-array { margin: 0.5em 0; }
.json-object-item, .json-array-item { margin: 0.25em 0; padding: 2px 0; }
.json-key { font-weight: bold; color: #8b5cf6; margin-right: 0.5em; }
.json-string { color: #059669; }
.json-number { color: #dc2626; }
.json-boolean { color: #0891b2; font-weight: bold; }
.json-null { color: #6b7280; font-style: italic; }
.json-bracket { color: #374151; font-weight: bold; margin: 0.25em 0; }
.json-index { color: #7c3aed; font-weight: bold; margin-right: 0.5em; }
.json-empty { color: #9ca3af; font-style: italic; }

.json-table { width: 100%; border-collapse: collapse; margin: 1em 0; font-size: 14px; }
.json-table th, .json-table td {
  border: 1px solid #d1d5db;
  padding: 8px 12px;
  text-align: left;
  vertical-align: top;
}
.json-table th { background-color: #f3f4f6; font-weight: bold; color: #374151; }
.json-table tbody tr:nth-child(even) { background-color: #f9fafb; }

.json-nested {
  background-color: #f3f4f6;
  padding: 0.5em;
  border-radius: 4px;
  font-size: 12px;
  white-space: pre-wrap;
}

.json-raw {
  background-color: #1f2937;
  color: #f9fafb;
  padding: 1em;
  border-radius: 6px;
  font-size: 13px;
  line-height: 1.4;
  white-space: pre-wrap;
}
.json-raw code { color: inherit; background: none; }

.json-simple-value {
  padding: 1em;
  background-color: #f9fafb;
  border-left: 4px solid #3b82f6;
  margin: 1em 0;
}
""" + PRINT_CSS

MARKDOWN_CSS = """
body {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Roboto', 'Oxygen', 'Ubuntu', 'Cantarell', sans-serif;
  line-height: 1.6;
  color: #24292e;
  max-width: 800px;
  margin: 0 auto;
  padding: 20px;
  background-color: #ffffff;
}

h1, h2, h3, h4, h5, h6 {
  margin-top: 24px;
  margin-bottom: 16px;
  font-weight: 600;
  line-height: 1.25;
  color: #1a1a1a;
}
h1 { font-size: 2em; border-bottom: 1px solid #eaecef; padding-bottom: 0.3em; }
h2 { font-size: 1.5em; border-bottom: 1px solid #eaecef; padding-bottom: 0.3em; }
h3 { font-size: 1.25em; }
h4 { font-size: 1em; }
h5 { font-size: 0.875em; }
h6 { font-size: 0.85em; color: #6a737d; }

p { margin-top: 0; margin-bottom: 16px; text-align: justify; }
a { color: #0366d6; text-decoration: none; }

.markdown-list { padding-left: 2em; margin-top: 0; margin-bottom: 16px; }
.markdown-list li { margin-bottom: 0.25em; }
.markdown-list li > p { margin-bottom: 0; }

.markdown-table { border-spacing: 0; border-collapse: collapse; width: 100%; margin-bottom: 16px; }
.markdown-table th { font-weight: 600; background-color: #f6f8fa; }
.markdown-table th, .markdown-table td { padding: 6px 13px; border: 1px solid #dfe2e5; }
.markdown-table tbody tr:nth-child(even) { background-color: #f6f8fa; }

code {
  padding: 0.2em 0.4em;
  font-size: 85%;
  background-color: rgba(27, 31, 35, 0.05);
  border-radius: 3px;
  font-family: 'SFMono-Regular', Consolas, 'Liberation Mono', Menlo, monospace;
}

.code-block {
  padding: 16px;
  overflow: auto;
  font-size: 85%;
  line-height: 1.45;
  background-color: #f6f8fa;
  border-radius: 6px;
  margin-bottom: 16px;
}
.code-block code {
  background: transparent;
  padding: 0;
  white-space: pre;
  font-size: inherit;
}

.markdown-blockquote {
  padding: 0 1em;
  color: #6a737d;
  border-left: 0.25em solid #dfe2e5;
  margin: 0 0 16px 0;
}
.markdown-blockquote > :first-child { margin-top: 0; }
.markdown-blockquote > :last-child { margin-bottom: 0; }

hr { height: 0.25em; padding: 0; margin: 24px 0; background-color: #e1e4e8; border: 0; }
img { max-width: 100%; height: auto; box-sizing: content-box; }

@media print {
  body { -webkit-print-color-adjust: exact; color-adjust: exact; }
  .markdown-table th, .markdown-table tbody tr:nth-child(even), .code-block {
    background-color: #f6f8fa !important;
  }
  h1, h2, h3, h4, h5, h6 { page-break-after: avoid; }
  .markdown-table, .code-block { page-break-inside: avoid; }
}
"""
