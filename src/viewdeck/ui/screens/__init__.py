"""Page-level views."""

from viewdeck.ui.screens.base import ViewScreen
from viewdeck.ui.screens.counter import CounterView
from viewdeck.ui.screens.forecast import ForecastView
from viewdeck.ui.screens.index import IndexView

__all__ = ["CounterView", "ForecastView", "IndexView", "ViewScreen"]
