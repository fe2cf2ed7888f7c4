"""One exception subclass per member of an elemental.

The message catalog lives in ``ProgrammersErrorMessages``; the exception
classes are derived from it, so adding a member adds an exception type.
"""

from __future__ import annotations

import sys

from elemental import Element, Elemental

ProgrammersErrorMessages = Elemental.declare(
    "ProgrammersErrorMessages",
    ("unspecified_programmers", {"display": "An unspecified error occurred."}),
    ("abstract_method", {"display": "Called an abstract method."}),
    ("invalid_field_passed", {"display": "Invalid field was passed in arguments."}),
)


class ProgrammersError(RuntimeError):
    message_key: Element = ProgrammersErrorMessages.first()

    def __str__(self) -> str:
        detail = super().__str__()
        text = f"Programmer's Error: {self.message_key.display}"
        return f"{text} ({detail})" if detail else text


def _class_name(element: Element) -> str:
    return "".join(part.capitalize() for part in element.name.split("_")) + "Error"


ERRORS: dict[str, type[ProgrammersError]] = {
    e.name: type(_class_name(e), (ProgrammersError,), {"message_key": e}) for e in ProgrammersErrorMessages
}


def main() -> None:
    print("Pick an error to raise:")
    for e in ProgrammersErrorMessages:
        print(f"     {e.ordinal + 1}. {e.display}")

    choice = input(f"choice [1..{ProgrammersErrorMessages.size()}]: ").strip()
    if choice.isdigit() and 1 <= int(choice) <= ProgrammersErrorMessages.size():
        element = ProgrammersErrorMessages[int(choice) - 1]
        raise ERRORS[element.name]()
    raise ProgrammersError(f"no such choice: {choice!r}")


if __name__ == "__main__":
    try:
        main()
    except ProgrammersError as ex:
        print(f"{type(ex).__name__}: {ex}", file=sys.stderr)
        raise SystemExit(1)
