"""Swagger UI configuration models."""

from __future__ import annotations

from typing import Any, Dict, Final, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_INSTANCE_NAME: Final[str] = "swagger"
DEFAULT_TITLE: Final[str] = "Swagger UI"
DEFAULT_LAYOUT: Final[str] = "StandaloneLayout"
DEFAULT_DOC_EXPANSION: Final[str] = "list"
DEFAULT_MODEL_RENDERING: Final[str] = "example"
DEFAULT_PLUGINS: Final[tuple[str, ...]] = ("SwaggerUIBundle.plugins.DownloadUrl",)
DEFAULT_PRESETS: Final[tuple[str, ...]] = (
    "SwaggerUIBundle.presets.apis",
    "SwaggerUIStandalonePreset",
)
DEFAULT_SUBMIT_METHODS: Final[tuple[str, ...]] = (
    "get",
    "put",
    "post",
    "delete",
    "options",
    "head",
    "patch",
    "trace",
)

# Values written into the page as JavaScript expressions instead of JSON.
JS_FIELDS: Final[frozenset[str]] = frozenset(
    {
        "plugins",
        "presets",
        "tags_sorter",
        "operations_sorter",
        "on_complete",
        "request_interceptor",
        "response_interceptor",
        "model_property_macro",
        "parameter_macro",
    }
)

# Consumed by the page itself rather than by SwaggerUIBundle(config).
PAGE_FIELDS: Final[frozenset[str]] = frozenset(
    {
        "instance_name",
        "title",
        "oauth",
        "preauthorize_basic",
        "preauthorize_api_key",
        "custom_style",
        "custom_script",
    }
)


class _UIModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        protected_namespaces=(),
    )


class SyntaxHighlightConfig(_UIModel):
    activate: bool = True
    theme: str = "agate"


class OAuthConfig(_UIModel):
    """Arguments for ``ui.initOAuth``."""

    app_name: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    realm: Optional[str] = None
    scopes: Optional[List[str]] = None
    scope_separator: Optional[str] = None
    additional_query_string_params: Optional[Dict[str, str]] = None
    use_basic_authentication_with_access_code_grant: Optional[bool] = None
    use_pkce_with_authorization_code_grant: Optional[bool] = None


class PreauthorizeBasic(_UIModel):
    auth_key: str
    username: str
    password: str


class PreauthorizeApiKey(_UIModel):
    auth_key: str
    api_key: str


class Config(_UIModel):
    """Options for a :class:`~swagger_edge.handler.SwaggerHandler`.

    ``url`` left empty is filled in on the first request with the mount
    prefix joined to ``doc.json``.
    """

    url: str = ""
    instance_name: str = DEFAULT_INSTANCE_NAME
    title: str = DEFAULT_TITLE

    query_config_enabled: bool = False
    layout: str = DEFAULT_LAYOUT
    plugins: Optional[List[str]] = None
    presets: Optional[List[str]] = None
    deep_linking: bool = True
    display_operation_id: bool = False
    default_models_expand_depth: int = 1
    default_model_expand_depth: int = 1
    default_model_rendering: str = DEFAULT_MODEL_RENDERING
    display_request_duration: bool = False
    doc_expansion: str = DEFAULT_DOC_EXPANSION
    filter: Optional[Union[bool, str]] = None
    max_displayed_tags: Optional[int] = None
    show_extensions: bool = False
    show_common_extensions: bool = False
    tags_sorter: Optional[str] = None
    operations_sorter: Optional[str] = None
    on_complete: Optional[str] = None
    syntax_highlight: SyntaxHighlightConfig = Field(default_factory=SyntaxHighlightConfig)
    try_it_out_enabled: bool = False
    request_snippets_enabled: bool = False
    oauth2_redirect_url: Optional[str] = None
    request_interceptor: Optional[str] = None
    response_interceptor: Optional[str] = None
    request_curl_options: Optional[List[str]] = None
    show_mutated_request: bool = True
    supported_submit_methods: List[str] = Field(default_factory=lambda: list(DEFAULT_SUBMIT_METHODS))
    validator_url: Optional[str] = None
    with_credentials: bool = False
    model_property_macro: Optional[str] = None
    parameter_macro: Optional[str] = None
    persist_authorization: bool = False

    oauth: Optional[OAuthConfig] = None
    preauthorize_basic: Optional[PreauthorizeBasic] = None
    preauthorize_api_key: Optional[PreauthorizeApiKey] = None
    custom_style: Optional[str] = None
    custom_script: Optional[str] = None

    def ui_options(self) -> Dict[str, Any]:
        """JSON-safe ``SwaggerUIBundle`` options keyed the way the UI expects."""
        return self.model_dump(by_alias=True, exclude=set(JS_FIELDS | PAGE_FIELDS), exclude_none=True)


def config_default(config: Optional[Config] = None) -> Config:
    """Return a private copy of ``config`` with blank fields set to their defaults."""
    if config is None:
        return _with_js_defaults(Config())

    cfg = config.model_copy(deep=True)
    if not cfg.instance_name.strip():
        cfg.instance_name = DEFAULT_INSTANCE_NAME
    if not cfg.title.strip():
        cfg.title = DEFAULT_TITLE
    if not cfg.layout.strip():
        cfg.layout = DEFAULT_LAYOUT
    if not cfg.doc_expansion.strip():
        cfg.doc_expansion = DEFAULT_DOC_EXPANSION
    if not cfg.default_model_rendering.strip():
        cfg.default_model_rendering = DEFAULT_MODEL_RENDERING
    return _with_js_defaults(cfg)


def _with_js_defaults(cfg: Config) -> Config:
    if cfg.plugins is None:
        cfg.plugins = list(DEFAULT_PLUGINS)
    if cfg.presets is None:
        cfg.presets = list(DEFAULT_PRESETS)
    return cfg


__all__ = [
    "Config",
    "DEFAULT_INSTANCE_NAME",
    "OAuthConfig",
    "PreauthorizeApiKey",
    "PreauthorizeBasic",
    "SyntaxHighlightConfig",
    "config_default",
]
