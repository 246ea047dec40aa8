"""interactive checkbox list used to pick the two versions to compare."""

from typing import List, Optional, Sequence, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings, merge_key_bindings
from prompt_toolkit.layout import FormattedTextControl, HSplit, Layout, Window

from ..domain.models import sort_versions
from ..session import Session
from .prompts import abort_key_bindings

QUESTION = "Select two versions to compare:"
HELP_TEXT = "(Press ↑/↓ or j/k to move, Space or l to select, Enter to finish, Esc to quit)"


class MultiSelectState:
    """cursor, selection and confirmation rules of a multi select list."""

    def __init__(
        self,
        choices: Sequence[str],
        min_selected: Optional[int] = None,
        max_selected: Optional[int] = None,
        per_page: int = 15,
    ):
        if not choices:
            raise ValueError("nothing to select from")
        self.choices = list(choices)
        self.min_selected = min_selected
        self.max_selected = max_selected
        self.per_page = max(1, per_page)
        self.cursor = 0
        self.selected: List[int] = []
        self.confirmed = False
        self.touched = False

    @property
    def count(self) -> int:
        return len(self.selected)

    @property
    def chosen(self) -> List[str]:
        return [self.choices[i] for i in self.selected]

    def move_down(self):
        self.touched = True
        self.cursor = (self.cursor + 1) % len(self.choices)

    def move_up(self):
        self.touched = True
        self.cursor = (self.cursor - 1) % len(self.choices)

    def toggle(self) -> bool:
        """select or unselect the item under the cursor; refuses to go past max_selected."""
        self.touched = True
        if self.cursor in self.selected:
            self.selected.remove(self.cursor)
            return True
        if self.max_selected is not None and self.count >= self.max_selected:
            return False
        self.selected.append(self.cursor)
        return True

    def is_valid(self) -> bool:
        if self.min_selected is not None and self.count < self.min_selected:
            return False
        if self.max_selected is not None and self.count > self.max_selected:
            return False
        return True

    def confirm(self) -> bool:
        """accept the selection only when its size is within bounds."""
        self.touched = True
        if not self.is_valid():
            return False
        self.confirmed = True
        return True

    def page_bounds(self) -> Tuple[int, int]:
        start = (self.cursor // self.per_page) * self.per_page
        return start, min(start + self.per_page, len(self.choices))


def render(question: str, state: MultiSelectState, show_help: bool = True) -> list:
    """formatted text fragments for the current state."""
    fragments = [("bold", f"{question} ")]
    if state.chosen:
        fragments.append(("fg:ansigreen", ", ".join(state.chosen)))
    elif show_help and not state.touched:
        fragments.append(("fg:ansibrightblack", HELP_TEXT))
    fragments.append(("", "\n"))

    start, end = state.page_bounds()
    for index in range(start, end):
        pointer = "‣ " if index == state.cursor else "  "
        marker = "⬢ " if index in state.selected else "⬡ "
        style = "fg:ansigreen" if index == state.cursor else ""
        fragments.append((style, f"{pointer}{marker}{state.choices[index]}\n"))

    if len(state.choices) > state.per_page:
        fragments.append(("fg:ansibrightblack", "(Move up or down to reveal more choices)\n"))
    return fragments


class VersionSelector:
    """asks the operator for exactly two versions of a gem."""

    def __init__(self, session: Session, per_page: int = 15, input=None, output=None):
        self.session = session
        self.per_page = per_page
        self.input = input
        self.output = output

    def select_two(self, versions: Sequence[str]) -> Tuple[str, str]:
        """returns the chosen pair in ascending version order."""
        ordered = sort_versions(versions, descending=True)
        state = MultiSelectState(ordered, min_selected=2, max_selected=2, per_page=self.per_page)
        chosen = self.ask(QUESTION, state)
        version_a, version_b = sort_versions(chosen)
        return version_a, version_b

    def ask(self, question: str, state: MultiSelectState) -> List[str]:
        app = self._build_application(question, state)
        result = app.run()
        self.session.console.print(f"[bold]{question}[/bold] [green]{', '.join(result)}[/green]")
        return result

    def _build_application(self, question: str, state: MultiSelectState) -> Application:
        control = FormattedTextControl(lambda: render(question, state))
        layout = Layout(HSplit([Window(content=control, dont_extend_height=True)]))
        return Application(
            layout=layout,
            key_bindings=self._build_key_bindings(state),
            input=self.input,
            output=self.output,
            full_screen=False,
            erase_when_done=True,
            mouse_support=False,
        )

    def _build_key_bindings(self, state: MultiSelectState):
        kb = KeyBindings()

        def bind(key: str, handler):
            for k in [key, *self.session.aliases_for(key)]:
                kb.add(k)(handler)

        def _down(event):
            state.move_down()

        def _up(event):
            state.move_up()

        def _toggle(event):
            state.toggle()

        def _confirm(event):
            if state.confirm():
                event.app.exit(result=state.chosen)

        bind("down", _down)
        bind("up", _up)
        bind("space", _toggle)
        bind("enter", _confirm)
        return merge_key_bindings([kb, abort_key_bindings(self.session)])
