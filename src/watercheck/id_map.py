# SPDX-License-Identifier: MIT

from contextvars import ContextVar

from watercheck.repository.id_map import ID_MAP_REPO

# Tables number their rows from 1 again on every view unless this is off
_clear_ids_on_view: ContextVar[bool] = ContextVar("clear_ids_on_view", default=True)


def set_clear_ids_on_view(value: bool) -> None:
    _clear_ids_on_view.set(value)


def clear_id_map_if_required() -> None:
    """Forget the short ids handed out by the previous view."""
    if _clear_ids_on_view.get():
        ID_MAP_REPO.clear_ids()
