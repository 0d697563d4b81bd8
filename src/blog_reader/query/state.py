"""Mutable query state driven by user input."""

from dataclasses import dataclass, field

from blog_reader.data import SortOrder


@dataclass
class QueryState:
    """User-controlled inputs of the query pipeline.

    ``raw_term`` follows every keystroke; ``debounced_term`` is the value the
    pipeline filters on and only catches up once typing pauses.
    """

    raw_term: str = ""
    debounced_term: str = ""
    selected_categories: set[str] = field(default_factory=set)
    sort_by: SortOrder = SortOrder.NEWEST

    def set_raw_term(self, term: str) -> None:
        self.raw_term = term

    def set_debounced_term(self, term: str) -> None:
        self.debounced_term = term

    def toggle_category(self, category: str) -> bool:
        """Select ``category`` if absent, deselect it otherwise.

        Returns:
            True if the category is selected after the toggle.
        """
        if category in self.selected_categories:
            self.selected_categories.remove(category)
            return False
        self.selected_categories.add(category)
        return True

    def set_sort(self, sort_by: SortOrder | str) -> None:
        self.sort_by = SortOrder(sort_by)

    def clear_filters(self) -> None:
        """Reset the search term and category selection; sort order is kept."""
        self.raw_term = ""
        self.debounced_term = ""
        self.selected_categories.clear()

    @property
    def has_active_filters(self) -> bool:
        return bool(self.raw_term) or bool(self.selected_categories)

    @property
    def is_settled(self) -> bool:
        """True once the debounced term has caught up with the raw term."""
        return self.raw_term == self.debounced_term
