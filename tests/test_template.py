from __future__ import annotations

import pytest

from ejforge.template import TemplateRenderer, TemplateRenderingError


@pytest.fixture()
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def test_render_string_with_filters(renderer: TemplateRenderer):
    template = "app: {{ app|atom }}, file: {{ path|inspect }}"
    context = {"app": "my_app", "path": 'config/"x".exs'}
    rendered = renderer.render_string(template, context)
    assert rendered == 'app: :my_app, file: "config/\\"x\\".exs"'


def test_missing_value_raises(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError, match="missing"):
        renderer.render_string("Hello {{ missing }}", {"name": "demo"})


def test_dotted_keys_are_not_resolved(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("{{ project.name }}", {"project": {"name": "demo"}})


def test_empty_placeholder_raises(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("{{ | }}", {})


def test_single_braces_are_left_alone(renderer: TemplateRenderer):
    template = "[{:ejabberd, \"~> {{ version }}\"}] %{}"
    assert renderer.render_string(template, {"version": "16.4.1"}) == '[{:ejabberd, "~> 16.4.1"}] %{}'


def test_unknown_filter_raises(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("{{ name|upper }}", {"name": "demo"})
