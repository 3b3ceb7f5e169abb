"""Interactive terminal prompts."""

from typing import Callable, TypeVar

T = TypeVar("T")


def select_prompt(
    message: str,
    options: list[tuple[str, T]],
    input_fn: Callable[[str], str] = input,
) -> T:
    """
    Ask the user to pick one option by number. Blocks until a valid answer.

    Args:
        message: Question shown above the options
        options: (label, value) pairs, shown 1-based
        input_fn: Line reader (defaults to input())

    Returns:
        The value of the chosen option
    """
    if not options:
        raise ValueError("select_prompt needs at least one option")

    print(f"\n{message}", flush=True)
    for i, (label, _) in enumerate(options, start=1):
        print(f"  {i}) {label}", flush=True)

    while True:
        answer = input_fn("\nSelect (number): ").strip()
        if answer.isdecimal() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1][1]
        print(f"Enter a number between 1 and {len(options)}.", flush=True)
