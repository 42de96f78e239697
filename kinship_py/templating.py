from jinja2 import Environment, FileSystemLoader, select_autoescape
from pathlib import Path
from typing import Any, Dict

TEMPLATES_DIR = Path(__file__).resolve().parent / "web" / "templates"


def get_env(templates_dir: str | Path = TEMPLATES_DIR) -> Environment:
    templates_dir = str(templates_dir)
    return Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(["html", "xml", "txt"]),
    )


def render_template(template_name: str, ctx: Dict[str, Any], templates_dir: str | Path = TEMPLATES_DIR) -> str:
    env = get_env(templates_dir)
    tmpl = env.get_template(template_name)
    return tmpl.render(**ctx)
