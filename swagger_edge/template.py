"""Index page for the Swagger UI bundle."""

from __future__ import annotations

from jinja2 import Environment, Template, TemplateSyntaxError

from .config import Config
from .errors import SwaggerTemplateError

SWAGGER_UI_VERSION = "5.17.14"
SWAGGER_UI_CDN = f"https://cdnjs.cloudflare.com/ajax/libs/swagger-ui/{SWAGGER_UI_VERSION}"

INDEX_TEMPLATE = """<!-- HTML for static distribution bundle build -->
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>{{ config.title }}</title>
  <link rel="stylesheet" type="text/css" href="{{ cdn }}/swagger-ui.min.css">
  <style>
    html { box-sizing: border-box; overflow: -moz-scrollbars-vertical; overflow-y: scroll; }
    *, *:before, *:after { box-sizing: inherit; }
    body { margin: 0; background: #fafafa; }
  </style>
  {%- if config.custom_style %}
  <style>
    {{ config.custom_style | safe }}
  </style>
  {%- endif %}
  {%- if config.custom_script %}
  <script>
    {{ config.custom_script | safe }}
  </script>
  {%- endif %}
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="{{ cdn }}/swagger-ui-bundle.min.js"></script>
  <script src="{{ cdn }}/swagger-ui-standalone-preset.min.js"></script>
  <script>
    window.onload = function() {
      const config = {{ options | tojson }};
      {%- if config.plugins %}
      config.plugins = [
        {%- for plugin in config.plugins %}
        {{ plugin | safe }},
        {%- endfor %}
      ];
      {%- endif %}
      {%- if config.presets %}
      config.presets = [
        {%- for preset in config.presets %}
        {{ preset | safe }},
        {%- endfor %}
      ];
      {%- endif %}
      {%- if config.tags_sorter %}
      config.tagsSorter = {{ config.tags_sorter | safe }};
      {%- endif %}
      {%- if config.operations_sorter %}
      config.operationsSorter = {{ config.operations_sorter | safe }};
      {%- endif %}
      {%- if config.on_complete %}
      config.onComplete = {{ config.on_complete | safe }};
      {%- endif %}
      {%- if config.request_interceptor %}
      config.requestInterceptor = {{ config.request_interceptor | safe }};
      {%- endif %}
      {%- if config.response_interceptor %}
      config.responseInterceptor = {{ config.response_interceptor | safe }};
      {%- endif %}
      {%- if config.model_property_macro %}
      config.modelPropertyMacro = {{ config.model_property_macro | safe }};
      {%- endif %}
      {%- if config.parameter_macro %}
      config.parameterMacro = {{ config.parameter_macro | safe }};
      {%- endif %}
      config.dom_id = '#swagger-ui';

      const ui = SwaggerUIBundle(config);
      {%- if config.oauth %}
      ui.initOAuth({{ config.oauth.model_dump(by_alias=True, exclude_none=True) | tojson }});
      {%- endif %}
      {%- if config.preauthorize_basic %}
      ui.preauthorizeBasic({{ config.preauthorize_basic.auth_key | tojson }}, {{ config.preauthorize_basic.username | tojson }}, {{ config.preauthorize_basic.password | tojson }});
      {%- endif %}
      {%- if config.preauthorize_api_key %}
      ui.preauthorizeApiKey({{ config.preauthorize_api_key.auth_key | tojson }}, {{ config.preauthorize_api_key.api_key | tojson }});
      {%- endif %}
      window.ui = ui;
    };
  </script>
</body>
</html>
"""

_environment = Environment(autoescape=True)


def compile_index(source: str = INDEX_TEMPLATE) -> Template:
    try:
        return _environment.from_string(source)
    except TemplateSyntaxError as exc:
        raise SwaggerTemplateError(f"swagger middleware error -> {exc}") from exc


def render_index(template: Template, config: Config) -> str:
    return template.render(config=config, options=config.ui_options(), cdn=SWAGGER_UI_CDN)


__all__ = ["INDEX_TEMPLATE", "SWAGGER_UI_CDN", "compile_index", "render_index"]
