"""Server render artifact for the blog example.

A real project emits this file from its own build; wren only imports it
and calls ``render`` once per static page.
"""

_PAGES = {
    "/": "<h1>Home</h1>",
    "/index.html": "<h1>Home</h1>",
    "/about": "<h1>About</h1>",
    "/posts": "<h1>All posts</h1>",
}


def render(path, html_template):
    if path.startswith("/posts/"):
        body = f"<article><h1>{path.rsplit('/', 1)[-1].replace('-', ' ').title()}</h1></article>"
    else:
        body = _PAGES[path]
    return {"html": html_template.replace('<div id="root"></div>', f'<div id="root">{body}</div>')}
