"""Process-wide defaults for screen presentation.

Presentation steps wrap a screen in a navigation container. When a
step does not name the navigation bar or toolbar class, the defaults
configured here are used. Both defaults start unset (`None`) and are
usually set once per test run.
"""

_defaults: dict[str, type | None] = {
    'navigation_bar_class': None,
    'toolbar_class': None,
}


def set_default_navigation_bar_class(navigation_bar_class: type | None) -> None:
    """Set the navigation bar class used when a step names none."""
    _defaults['navigation_bar_class'] = navigation_bar_class


def get_default_navigation_bar_class() -> type | None:
    """Return the default navigation bar class."""
    return _defaults['navigation_bar_class']


def set_default_toolbar_class(toolbar_class: type | None) -> None:
    """Set the toolbar class used when a step names none."""
    _defaults['toolbar_class'] = toolbar_class


def get_default_toolbar_class() -> type | None:
    """Return the default toolbar class."""
    return _defaults['toolbar_class']


def reset_defaults() -> None:
    """Restore both defaults to `None`."""
    _defaults['navigation_bar_class'] = None
    _defaults['toolbar_class'] = None
