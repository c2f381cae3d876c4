import sys
from typing import TypeVar

import inquirer
from inquirer.render import ConsoleRender


def isatty() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


T = TypeVar('T')


def choice(message: str, choices: list[tuple[str, T]]) -> T:
    render = ConsoleRender()
    return render.render(inquirer.List('option', message=message, choices=choices), {})


__all__ = ['isatty', 'choice']
