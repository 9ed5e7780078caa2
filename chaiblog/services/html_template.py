import html

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Chai &amp; Blogs - Articles</title>
  <style>
    body {{
      font-family: monospace;
      white-space: pre-wrap;
      word-wrap: break-word;
      padding: 20px;
      background-color: #1e1e1e;
      color: #d4d4d4;
    }}
  </style>
</head>
<body>
{content}
  <script>
    window.va = window.va || function () {{ (window.vaq = window.vaq || []).push(arguments); }};
  </script>
  <script defer src="/_vercel/insights/script.js"></script>
</body>
</html>"""


def wrap_html(content: str) -> str:
    """Embed already-safe HTML in the page shell with the analytics snippet."""
    return HTML_TEMPLATE.format(content=content)


def wrap_pre(text: str) -> str:
    return wrap_html(f"<pre>{html.escape(text, quote=False)}</pre>")
