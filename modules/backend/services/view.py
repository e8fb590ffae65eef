"""
View Derivation.

The displayed view is the note collection sorted, then filtered by the
search text. It is recomputed from scratch on every call; nothing here
holds state.
"""

from collections.abc import Iterable

from modules.backend.schemas.note import Note, SortOption


def sort_notes(notes: Iterable[Note], option: SortOption | str) -> list[Note]:
    """
    Sort notes ascending by title or creation date.

    Title comparison is case-sensitive on the stored string. The sort is
    stable, so equal keys keep their collection order.
    """
    option = SortOption(option)
    if option is SortOption.TITLE:
        return sorted(notes, key=lambda note: note.title)
    return sorted(notes, key=lambda note: note.date)


def matches(note: Note, search_text: str) -> bool:
    """Case-insensitive substring match against title or content."""
    needle = search_text.casefold()
    return needle in note.title.casefold() or needle in note.content.casefold()


def filter_notes(notes: Iterable[Note], search_text: str) -> list[Note]:
    if not search_text:
        return list(notes)
    return [note for note in notes if matches(note, search_text)]


def derive_view(
    notes: Iterable[Note],
    sort_option: SortOption | str = SortOption.TITLE,
    search_text: str = "",
) -> list[Note]:
    """
    Compute the displayed view.

    Args:
        notes: Collection in storage order
        sort_option: Title or date ordering
        search_text: Substring to keep; empty keeps everything

    Returns:
        New list; positions in it are what delete-by-position refers to
    """
    return filter_notes(sort_notes(notes, sort_option), search_text)
