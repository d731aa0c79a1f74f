"""Record rendering.

Templates are Jinja2 sources rendered against a single record. The context
exposes ``timestamp``, ``level``, ``level_name``, ``message`` and ``attrs``
(sorted by key) plus ``color`` and ``reset``, the escape sequences for the
record's level, and ``paint``, which wraps text in them. All three are
no-ops when colors are disabled, so a template never needs to branch on the
colorize flag itself.
"""
import json
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError

from consolelog.core.exceptions import InvalidTemplateError, RenderError
from consolelog.core.schema.record import Record
from consolelog.core.template.colors import color_code, color_func, reset_code

DEFAULT_TEMPLATE = "[{{ color }}{{ level_name | ucase }}{{ reset }}] {{ message }}"


def _to_json(value: Any) -> str:
    return json.dumps(value, default=str, sort_keys=True)


def _build_environment() -> Environment:
    environment = Environment(
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    environment.filters["ucase"] = lambda value: str(value).upper()
    environment.filters["lcase"] = lambda value: str(value).lower()
    environment.filters["title"] = lambda value: str(value).title()
    environment.filters["json"] = _to_json
    return environment


_ENVIRONMENT = _build_environment()


class Template:
    def __init__(self, source: str) -> None:
        self._source = source
        try:
            self._template = _ENVIRONMENT.from_string(source)
        except TemplateSyntaxError as error:
            raise InvalidTemplateError(
                f"Could not compile template: {error.message}"
            ) from error

    @property
    def source(self) -> str:
        return self._source

    def execute(self, record: Record, colorize: bool) -> str:
        try:
            return self._template.render(
                timestamp=record.timestamp,
                level=record.level,
                level_name=record.level_name,
                message=record.message,
                attrs=record.attrs,
                color=color_code(record.level, colorize),
                reset=reset_code(record.level, colorize),
                paint=color_func(record.level, colorize),
            )
        except Exception as error:
            raise RenderError(f"Could not render template: {error}") from error

    def __repr__(self) -> str:
        return f"Template({self._source!r})"


def new_template_default() -> Template:
    return Template(DEFAULT_TEMPLATE)
