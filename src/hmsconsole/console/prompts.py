"""Validated line-based prompts built on rich.prompt."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, TextIO

from rich.prompt import IntPrompt, InvalidResponse, Prompt, PromptBase

from hmsconsole.core.billing import to_amount


if TYPE_CHECKING:
    from rich.console import Console
    from rich.text import TextType


class _StreamEOFMixin:
    """Raise EOFError when a scripted input stream runs dry.

    ``Console.input`` returns ``""`` at end of stream, which would otherwise
    loop forever on a prompt that rejects empty input.
    """

    @classmethod
    def get_input(
        cls, console: Console, prompt: TextType, password: bool, stream: TextIO | None = None
    ) -> str:
        value = console.input(prompt, password=password, stream=stream)
        if stream is not None and value == "":
            raise EOFError
        return value


class TextPrompt(_StreamEOFMixin, Prompt):
    """Prompt for a non-empty line of text."""

    def process_response(self, value: str) -> str:
        value = value.strip()
        if not value:
            raise InvalidResponse("[prompt.invalid]Input cannot be empty. Try again.")
        return value


class RangedIntPrompt(_StreamEOFMixin, IntPrompt):
    """Prompt for an integer within ``[minimum, maximum]``."""

    validate_error_message = "[prompt.invalid]Invalid input. Enter a number."

    def __init__(self, prompt: TextType = "", *, minimum: int, maximum: int, **kwargs: Any) -> None:
        super().__init__(prompt, **kwargs)
        self.minimum = minimum
        self.maximum = maximum

    def process_response(self, value: str) -> int:
        number = super().process_response(value)
        if not self.minimum <= number <= self.maximum:
            raise InvalidResponse(
                f"[prompt.invalid]Enter a number between {self.minimum} and {self.maximum}."
            )
        return number


class AmountPrompt(_StreamEOFMixin, PromptBase[Decimal]):
    """Prompt for a positive money amount, with or without a leading currency symbol."""

    response_type = Decimal
    validate_error_message = "[prompt.invalid]Invalid amount."

    def __init__(self, prompt: TextType = "", *, currency: str = "$", **kwargs: Any) -> None:
        super().__init__(prompt, **kwargs)
        self.currency = currency

    def process_response(self, value: str) -> Decimal:
        value = value.strip()
        if self.currency and value.startswith(self.currency):
            value = value[len(self.currency):]
        amount = to_amount(value)
        if amount is None:
            raise InvalidResponse(self.validate_error_message)
        return amount


class InputReader:
    """Reads validated values for the shell from a console or a stream."""

    def __init__(self, console: Console, stream: TextIO | None = None, currency: str = "$") -> None:
        self.console = console
        self.stream = stream
        self.currency = currency

    def text(self, prompt: str) -> str:
        return TextPrompt(prompt, console=self.console)(stream=self.stream)

    def secret(self, prompt: str) -> str:
        # getpass cannot read from a scripted stream
        return TextPrompt(prompt, console=self.console, password=self.stream is None)(stream=self.stream)

    def integer(self, prompt: str, minimum: int, maximum: int) -> int:
        return RangedIntPrompt(prompt, minimum=minimum, maximum=maximum, console=self.console)(stream=self.stream)

    def amount(self, prompt: str) -> Decimal:
        return AmountPrompt(prompt, currency=self.currency, console=self.console)(stream=self.stream)

    def choice(self, prompt: str, options: list[str]) -> int:
        """Show numbered options and return the chosen index (0-based)."""
        for number, option in enumerate(options, start=1):
            self.console.print(f"  [cyan]{number}.[/cyan] {option}")
        return self.integer(prompt, 1, len(options)) - 1
