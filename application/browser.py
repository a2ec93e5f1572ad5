"""Interactive browsing workflow: category and filter coordination over a TreeView."""

import logging
from collections.abc import Mapping

from domain.schemas import Category, TaxonomyRecord
from domain.taxonomy.filtering import filter_records
from domain.taxonomy.store import RecordStore
from domain.taxonomy.tree import build_forest
from domain.taxonomy.view import DEFAULT_PAGE_SIZE, TreeView
from infrastructure.observability import set_log_context
from infrastructure.terminal.keys import Action

logger = logging.getLogger(__name__)


class TaxonomyBrowser:
    """
    Holds the loaded RecordStores and the state of one browsing session.

    The forest is rebuilt only when the filter text or the category changes;
    navigation reuses it. A rebuild resets the TreeView, auto-expanding every
    branch when a filter is active.
    """

    def __init__(
        self,
        stores: Mapping[Category, RecordStore],
        *,
        category: Category = Category.PRODUCT,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if not stores:
            raise ValueError("TaxonomyBrowser needs at least one RecordStore")
        if category not in stores:
            raise KeyError(f"No records loaded for category {category.value!r}")

        self._stores = dict(stores)
        self._order = [c for c in Category if c in self._stores]
        self.category = category
        self.filter_text = ""
        self.detail_open = False
        self.running = True
        self.view = TreeView(page_size=page_size)
        self.rebuild()

    # ----- State -----

    @property
    def categories(self) -> list[Category]:
        return list(self._order)

    @property
    def store(self) -> RecordStore:
        return self._stores[self.category]

    def rebuild(self) -> None:
        records = filter_records(self.store.records, self.filter_text)
        forest = build_forest(records)
        self.view.reset(forest, expand_all=bool(self.filter_text))
        self.detail_open = False
        set_log_context(category=self.category.value, query=self.filter_text)
        logger.debug(
            "Rebuilt forest: %d/%d records, %d roots, %d visible rows",
            len(records),
            len(self.store),
            len(forest),
            self.view.visible_count(),
        )

    def selected_record(self) -> TaxonomyRecord | None:
        if self.view.selection is None:
            return None
        return self.store.get(self.view.selection[-1])

    # ----- Category -----

    def switch_category(self, category: Category) -> None:
        if category not in self._stores:
            raise KeyError(f"No records loaded for category {category.value!r}")
        if category is self.category:
            return
        self.category = category
        logger.info("Switched to %s taxonomy", category.value)
        self.rebuild()

    def _cycle_category(self, step: int) -> None:
        idx = self._order.index(self.category)
        self.switch_category(self._order[(idx + step) % len(self._order)])

    def next_category(self) -> None:
        self._cycle_category(1)

    def previous_category(self) -> None:
        self._cycle_category(-1)

    # ----- Filter -----

    def set_filter(self, text: str) -> None:
        if text == self.filter_text:
            return
        self.filter_text = text
        self.rebuild()

    def append_filter(self, char: str) -> None:
        self.set_filter(self.filter_text + char)

    def backspace(self) -> None:
        if self.filter_text:
            self.set_filter(self.filter_text[:-1])

    # ----- Detail popup -----

    def open_detail(self) -> None:
        self.detail_open = self.selected_record() is not None

    def close_detail(self) -> None:
        self.detail_open = False

    def toggle_detail(self) -> None:
        if self.detail_open:
            self.close_detail()
        else:
            self.open_detail()

    # ----- Dispatch -----

    def dispatch(self, action: Action) -> None:
        """Apply one user action; every action completes before the next render."""
        handlers = {
            Action.NEXT_CATEGORY: self.next_category,
            Action.PREVIOUS_CATEGORY: self.previous_category,
            Action.BACKSPACE: self.backspace,
            Action.DOWN: self.view.move_down,
            Action.UP: self.view.move_up,
            Action.LEFT: self.view.move_left,
            Action.RIGHT: self.view.move_right,
            Action.PAGE_DOWN: self.view.page_down,
            Action.PAGE_UP: self.view.page_up,
            Action.TOGGLE: self.view.toggle,
            Action.TOGGLE_DETAIL: self.toggle_detail,
            Action.ESCAPE: self.escape,
            Action.QUIT: self.quit,
        }
        handlers[action]()

    def escape(self) -> None:
        """Close the detail popup if it is open, otherwise end the session."""
        if self.detail_open:
            self.close_detail()
        else:
            self.quit()

    def quit(self) -> None:
        self.running = False
