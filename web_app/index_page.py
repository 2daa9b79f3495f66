"""Index page rendering. No app imports to avoid circular deps."""

from typing import Iterable

from jinja2 import Environment

from shrtn.database.models import Mapping

INDEX_TEMPLATE = """<html>
  <head>
    <title>Shrtn</title>
  </head>
  <body>
    <form action="{{ path_prefix }}/new" method="POST">
      <div><input type="text" name="longurl" size="64"></div>
      <div><input type="submit" value="Shorten URL"></div>
    </form>

    <ul>
    {%- for mapping in mappings %}
      <li><a href="{{ path_prefix }}/s/{{ mapping.short_code }}">{{ mapping.short_code }}</a> redirects to {{ mapping.long_url }}</li>
    {%- endfor %}
    </ul>
  </body>
</html>
"""

# Autoescaping keeps stored URLs from injecting markup into the page
_env = Environment(autoescape=True)
_index_template = _env.from_string(INDEX_TEMPLATE)


def render_index(mappings: Iterable[Mapping], path_prefix: str = "") -> str:
    """Render the submission form and the list of mappings.

    path_prefix is the proxy prefix (leading slash, no trailing) prepended to the
    form action and the short links; empty when served directly.
    """
    return _index_template.render(mappings=list(mappings), path_prefix=path_prefix)
