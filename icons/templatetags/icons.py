from django import template
from django.utils.safestring import SafeString

from ..components import Component
from ..factory import components, get_factory
from ..registry import SVG_RENDERER

register = template.Library()


def _html_attributes(attrs: dict) -> dict:
    return {key.replace("_", "-"): value for key, value in attrs.items()}


@register.simple_tag
def svg(name: str, class_or_attrs="", **attrs) -> SafeString:
    """Render an icon from a registered set inline.

    Parameters
    ----------
    name: str
        Icon reference, ``<prefix>-<name>`` (e.g. "brand-github").
    class_or_attrs: str | dict
        Extra CSS classes appended to the default class, or a dict that
        replaces every other attribute.
    **attrs: dict
        Additional HTML attributes. Underscores become hyphens
        (``aria_hidden`` renders ``aria-hidden``).
    """
    return get_factory().svg(name, class_or_attrs, _html_attributes(attrs)).to_html()


def _render_svg_component(component: Component, attrs: dict) -> SafeString:
    css_class = attrs.pop("class", "")
    return get_factory().svg(component.alias, css_class, attrs).to_html()


RENDERERS = {SVG_RENDERER: _render_svg_component}


@register.simple_tag
def icon(alias: str, **attrs) -> SafeString:
    """Render the component registered under ``alias`` (e.g. "brand-solid.user")."""
    get_factory()
    component = components.get(alias)
    if component is None:
        raise template.TemplateSyntaxError(f"Componente de ícone desconhecido: {alias!r}")
    return RENDERERS[component.renderer](component, _html_attributes(attrs))
