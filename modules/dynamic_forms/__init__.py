"""Dynamic forms module (QtWidgets only).

Renders an interactive form from a declarative document, hides fields the
active role may not see, keeps conditional fields in sync with the field
they depend on and shows the captured values on submit.

Importing the package does not pull in Qt; widgets are loaded by
:func:`get_form_panel`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .config_provider import ConfigProvider
from .exceptions import ConfigFetchError, DynamicFormError, FormConfigError
from .params import LaunchParams

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .panels.form_panel import DynamicFormPanel

__all__ = [
    "get_form_panel",
    "ConfigProvider",
    "LaunchParams",
    "DynamicFormError",
    "ConfigFetchError",
    "FormConfigError",
]

logger = logging.getLogger(__name__)


def get_form_panel(
    params: Optional[LaunchParams] = None,
    provider: Optional[ConfigProvider] = None,
) -> "DynamicFormPanel":
    """Return a panel rendering the form selected by ``params``.

    When the document cannot be loaded the panel is returned without a form
    and with a visible error message.
    """

    from .panels.form_panel import DynamicFormPanel

    params = params or LaunchParams()
    provider = provider or ConfigProvider()
    panel = DynamicFormPanel()
    try:
        config = provider.load(params.form_kind, params.language)
    except DynamicFormError as exc:
        logger.error("Failed to load %s form: %s", params.form_kind, exc)
        panel.show_load_error(f"Unable to load the {params.form_kind} form: {exc}")
        return panel
    panel.render(config, params.role)
    return panel
