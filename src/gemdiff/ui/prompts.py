"""line prompts that share the session's escape handling."""

from typing import Optional, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.validation import Validator

from ..domain.errors import SelectionAborted
from ..session import Session

YES = ("y", "yes")
NO = ("n", "no")


def abort_key_bindings(session: Session) -> KeyBindings:
    """escape (or ctrl-c) leaves any prompt and ends the run."""
    kb = KeyBindings()

    def _abort(event):
        event.app.exit(exception=SelectionAborted("prompt cancelled"))

    kb.add(session.abort_key, eager=True)(_abort)
    kb.add("c-c")(_abort)
    return kb


class Prompter:
    """asks the operator for text, a choice, or yes/no."""

    def __init__(self, session: Session, input=None, output=None):
        self.session = session
        self.input = input
        self.output = output

    def _prompt(self, message: str, **kwargs) -> str:
        prompt_session = PromptSession(
            input=self.input,
            output=self.output,
            key_bindings=abort_key_bindings(self.session),
        )
        try:
            return prompt_session.prompt(message, **kwargs)
        except (KeyboardInterrupt, EOFError) as e:
            raise SelectionAborted("prompt cancelled") from e

    def ask(self, message: str) -> str:
        return self._prompt(f"{message}: ").strip()

    def select(self, message: str, choices: Sequence[str], default: Optional[str] = None) -> str:
        """
        pick one of `choices` by typing it; tab completes, enter alone takes the default.
        """
        choices = list(choices)
        default = default or choices[0]
        validator = Validator.from_callable(
            lambda text: not text.strip() or text.strip() in choices,
            error_message=f"Choose one of: {', '.join(choices)}",
        )
        answer = self._prompt(
            f"{message} [{'/'.join(choices)}] ({default}): ",
            completer=WordCompleter(choices),
            validator=validator,
            validate_while_typing=False,
        ).strip()
        return answer or default

    def yes(self, message: str, default: bool = True) -> bool:
        validator = Validator.from_callable(
            lambda text: text.strip().lower() in ("",) + YES + NO,
            error_message="Please answer y or n",
        )
        hint = "Y/n" if default else "y/N"
        answer = self._prompt(f"{message} ({hint}) ", validator=validator, validate_while_typing=False)
        answer = answer.strip().lower()
        if not answer:
            return default
        return answer in YES
