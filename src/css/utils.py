import pathlib

CSS_DIR = pathlib.Path(__file__).parent

def load_css(name: str) -> str:
    path = CSS_DIR / name
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return f"/* missing CSS file: {name} */"


def load_page_css(*names: str) -> str:
    """Concatenate stylesheets for a page; selector.css is always included."""
    ordered = ["selector.css", *[name for name in names if name != "selector.css"]]
    return "\n".join(load_css(name) for name in ordered)
