"""Render the doc model into static HTML pages.

Rendering is a pure mapping from immutable Modules to markup: no state,
no I/O. Writing the returned pages to disk belongs to whoever publishes the
site. Anchors come from ``docs.locations`` so that search record locations
resolve to the rendered elements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from jinja2 import Environment, StrictUndefined, select_autoescape
from markdown import markdown
from markupsafe import Markup

from aiken_docs_mcp.docs.locations import anchor_for, page_path
from aiken_docs_mcp.docs.models import Module, RecordKind

if TYPE_CHECKING:
    from aiken_docs_mcp.docs.site import DocsSite

SEARCH_DATA_PATH = "search-data.json"

_MODULE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ module.name }}{% if project %} - {{ project }}{% endif %}</title>
</head>
<body data-search-data="{{ root }}{{ search_data }}">
<nav><a href="{{ root }}index.html">{{ project or "Modules" }}</a></nav>
<main>
<h1 class="module-name">{{ module.name }}</h1>
{% if module.docs %}<section class="module-docs">{{ module.docs | markdown }}</section>{% endif %}
{% if module.types %}
<section class="types">
<h2>Types</h2>
{% for type in module.types %}
<div class="member" id="{{ anchor('type', type.name) }}">
<h3><a href="#{{ anchor('type', type.name) }}">{{ type.name }}</a></h3>
{% if type.definition %}<pre><code>{{ type.definition }}</code></pre>{% endif %}
{% if type.docs %}<div class="docs">{{ type.docs | markdown }}</div>{% endif %}
{% if type.constructors %}
<ul class="constructors">
{% for constructor in type.constructors %}
<li id="{{ anchor('constructor', constructor.name, type.name) }}">
<pre><code>{{ constructor.definition or constructor.name }}</code></pre>
{% if constructor.docs %}<div class="docs">{{ constructor.docs | markdown }}</div>{% endif %}
{% if constructor.arguments %}
<dl class="arguments">
{% for argument in constructor.arguments %}<dt>{{ argument.label }}</dt><dd>{{ argument.docs | markdown }}</dd>
{% endfor %}</dl>
{% endif %}
</li>
{% endfor %}
</ul>
{% endif %}
</div>
{% endfor %}
</section>
{% endif %}
{% if module.constants %}
<section class="constants">
<h2>Constants</h2>
{% for constant in module.constants %}
<div class="member" id="{{ anchor('constant', constant.name) }}">
<h3><a href="#{{ anchor('constant', constant.name) }}">{{ constant.name }}</a></h3>
{% if constant.definition %}<pre><code>{{ constant.definition }}</code></pre>{% endif %}
{% if constant.docs %}<div class="docs">{{ constant.docs | markdown }}</div>{% endif %}
</div>
{% endfor %}
</section>
{% endif %}
{% if module.functions %}
<section class="functions">
<h2>Functions</h2>
{% for function in module.functions %}
<div class="member" id="{{ anchor('function', function.name) }}">
<h3><a href="#{{ anchor('function', function.name) }}">{{ function.name }}</a></h3>
{% if function.signature %}<pre><code>{{ function.signature }}</code></pre>{% endif %}
{% if function.docs %}<div class="docs">{{ function.docs | markdown }}</div>{% endif %}
</div>
{% endfor %}
</section>
{% endif %}
</main>
</body>
</html>
"""

_INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ project or "Modules" }}</title>
</head>
<body data-search-data="{{ search_data }}">
<main>
<h1>{{ project or "Modules" }}</h1>
<ul class="modules">
{% for module in modules %}<li><a href="{{ page(module.name) }}">{{ module.name }}</a></li>
{% endfor %}</ul>
</main>
</body>
</html>
"""


def _markdown_filter(text: str) -> Markup:
    return Markup(markdown(text or ""))


def _anchor(kind: str, name: str, owner: str | None = None) -> str:
    return anchor_for(RecordKind(kind), name, owner)


def _build_environment() -> Environment:
    env = Environment(
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=select_autoescape(default_for_string=True, default=True),
    )
    env.filters["markdown"] = _markdown_filter
    env.globals["anchor"] = _anchor
    env.globals["page"] = page_path
    env.globals["search_data"] = SEARCH_DATA_PATH
    return env


_ENV = _build_environment()
_MODULE_TEMPLATE_OBJ = _ENV.from_string(_MODULE_TEMPLATE)
_INDEX_TEMPLATE_OBJ = _ENV.from_string(_INDEX_TEMPLATE)


def render_module_page(module: Module, project: str = "") -> str:
    """Render one module page.

    Example:
        >>> html = render_module_page(module)
        >>> 'id="function-map"' in html
        True
    """
    root = "../" * module.name.count("/")
    return _MODULE_TEMPLATE_OBJ.render(module=module, project=project, root=root)


def render_index_page(modules: Iterable[Module], project: str = "") -> str:
    """Render the landing page listing every module."""
    return _INDEX_TEMPLATE_OBJ.render(modules=list(modules), project=project)


def render_site(site: DocsSite, project: str = "") -> dict[str, str]:
    """Map a site to its output files: relative path -> content.

    Contains one page per module, ``index.html`` and the search payload.
    """
    pages = {page_path(module.name): render_module_page(module, project) for module in site.modules}
    pages["index.html"] = render_index_page(site.modules, project)
    pages[SEARCH_DATA_PATH] = site.search_payload_json()
    return pages
