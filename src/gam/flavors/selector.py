"""Interactive flavor selection."""

from __future__ import annotations

from collections.abc import Callable

import typer

from gam.common import create_logger

from .models import BuiltinFlavor, Flavor, parse_flavor

logger = create_logger("flavors")

type PromptFn = Callable[[str], str]
type EchoFn = Callable[[str], None]

DEFAULT_LABEL = "Which package do you want your app to be based of?"


def _typer_prompt(text: str) -> str:
    return typer.prompt(text, prompt_suffix=" ")


class FlavorSelector:
    """Let the operator pick a flavor, adding free-form entries on the way.

    An answer may be an item number or an item's exact text. Any other answer
    is added to the candidate list and the prompt is shown again, so the
    loop only ends once an existing item is chosen. Interruptions raised by
    the prompt (``click.Abort``, ``EOFError``) propagate to the caller.
    """

    def __init__(self, prompt: PromptFn | None = None, echo: EchoFn | None = None) -> None:
        self._prompt = prompt or _typer_prompt
        self._echo = echo or typer.echo
        self.items: list[str] = [flavor.value for flavor in BuiltinFlavor]

    def select(self, label: str = DEFAULT_LABEL) -> Flavor:
        while True:
            self._echo(label)
            for index, item in enumerate(self.items, start=1):
                self._echo(f"  {index}) {item}")

            answer = self._prompt("Select a package or type a new one:").strip()
            choice = self._match(answer)
            if choice is not None:
                logger.debug("Flavor selected", flavor=choice)
                self._echo(f"Input: {choice}")
                return parse_flavor(choice)

            if answer.isdigit():
                self._echo(f"{answer} is not in the list (1-{len(self.items)}).")
            elif answer:
                logger.debug("Flavor added to candidates", flavor=answer)
                self.items.append(answer)

    def _match(self, answer: str) -> str | None:
        if answer.isdigit():
            index = int(answer)
            if 1 <= index <= len(self.items):
                return self.items[index - 1]
            return None
        return answer if answer in self.items else None
