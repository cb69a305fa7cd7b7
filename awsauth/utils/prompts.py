"""
Interactive prompts used by the CLI.

ConsolePrompter wraps input/getpass so the handlers can be driven with
scripted answers in tests.
"""

import getpass
from typing import Callable, Optional

from ..aws_profiles.errors import ValidationError

Validator = Callable[[str], str]


class ConsolePrompter:
    """Asks the user for values on the terminal."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 secret_func: Callable[[str], str] = getpass.getpass,
                 print_func: Callable[[str], None] = print):
        self._input = input_func
        self._secret = secret_func
        self._print = print_func

    def _ask(self, read: Callable[[str], str], message: str,
             default: Optional[str], validate: Optional[Validator]) -> str:
        prompt = f"{message} [{default}] " if default else f"{message} "
        while True:
            answer = read(prompt).strip()
            if not answer and default:
                answer = default
            if validate is None:
                return answer
            try:
                return validate(answer)
            except ValidationError as e:
                self._print(f">> {e}")

    def ask_text(self, message: str, default: Optional[str] = None,
                 validate: Optional[Validator] = None) -> str:
        """
        Ask for a line of text, repeating the question until it validates.

        Args:
            message: Question shown to the user
            default: Value used when the answer is empty
            validate: Returns the cleaned value or raises ValidationError
        """
        return self._ask(self._input, message, default, validate)

    def ask_secret(self, message: str, validate: Optional[Validator] = None) -> str:
        """Like ask_text, without echoing the answer."""
        return self._ask(self._secret, message, None, validate)

    def ask_confirm(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        suffix = "(Y/n)" if default else "(y/N)"
        while True:
            answer = self._input(f"{message} {suffix} ").strip().lower()
            if not answer:
                return default
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            self._print(">> Please answer yes or no")
