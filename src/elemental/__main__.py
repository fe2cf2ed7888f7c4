from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys

from .api.serializers import elemental_to_item
from .core.registry import Elemental

logger = logging.getLogger("elemental.cli")


def resolve_target(target: str) -> list[Elemental]:
    """Import ``package.module[:attribute]`` and return the elementals it names."""

    module_name, _, attr = target.partition(":")
    module = importlib.import_module(module_name)
    if attr:
        obj = getattr(module, attr, None)
        if not isinstance(obj, Elemental):
            raise LookupError(f"{target} is not an Elemental")
        return [obj]

    found: list[Elemental] = []
    for value in vars(module).values():
        if isinstance(value, Elemental) and not any(value is f for f in found):
            found.append(value)
    if not found:
        raise LookupError(f"{module_name} defines no Elemental")
    return found


def _format_text(el: Elemental, order: str) -> list[str]:
    members = list(el) if order == "ordinal" else el.sorted_by_position()
    flags = " (persisted ordinally)" if el.value_as_ordinal else ""
    lines = [f"{el.name}: {el.size()} member(s){flags}"]
    for e in members:
        line = f"  {e.ordinal}. {e.name}"
        if e.display != e.name:
            line += f"  {e.display}"
        if order == "position":
            line += f"  [position {e.position}]"
        if e.default:
            line += "  (default)"
        lines.append(line)
    for alias, name in el.synonyms().items():
        lines.append(f"  {alias} -> {name}")
    return lines


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="elemental", description="elemental: inspect declared enumerations")
    p.add_argument("target", help="package.module or package.module:attribute")
    p.add_argument("--order", choices=("ordinal", "position"), default="ordinal")
    p.add_argument("--json", action="store_true", help="print JSON instead of a table")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        elementals = resolve_target(args.target)
    except (ImportError, LookupError) as e:
        print(f"elemental: {e}", file=sys.stderr)
        return 2
    logger.debug("resolved %d elemental(s) from %s", len(elementals), args.target)

    if args.json:
        items = [elemental_to_item(el, order=args.order) for el in elementals]
        # A module:attr target names one elemental; a module target always yields a list.
        print(json.dumps(items[0] if ":" in args.target else items, indent=2, default=str))
        return 0

    blocks = ["\n".join(_format_text(el, args.order)) for el in elementals]
    print("\n\n".join(blocks))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
