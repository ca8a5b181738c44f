"""Display names for AIRs."""

from __future__ import annotations

from typing import Any, get_args


def simplify_type_name(full_name: str) -> str:
    """Strips ``::``-separated module paths from a type name and its generics."""
    if "<" in full_name:
        main_part, generics_part = full_name.split("<", 1)
        main_type = main_part.split("::")[-1]
        generics = [
            generic.split("::")[-1]
            for generic in generics_part.rstrip(">").split(", ")
        ]
        return f"{main_type}<{', '.join(generics)}>"
    return full_name.split("::")[-1]


def _qualified_name(tp: Any) -> str:
    module = getattr(tp, "__module__", "") or ""
    qualname = getattr(tp, "__qualname__", None) or getattr(tp, "__name__", None)
    if qualname is None:
        qualname = repr(tp)
    parts = [p for p in module.split(".") if p] + qualname.split(".")
    return "::".join(parts)


def get_air_name(rap: object) -> str:
    """Derives a short display name from the type of ``rap``.

    Generic parameters of an instance created as ``Cls[Arg](...)`` are shown
    as ``Cls<Arg>``.
    """
    full_name = _qualified_name(type(rap))
    orig_class = getattr(rap, "__orig_class__", None)
    if orig_class is not None:
        args = get_args(orig_class)
        if args:
            full_name += "<" + ", ".join(_qualified_name(a) for a in args) + ">"
    return simplify_type_name(full_name)