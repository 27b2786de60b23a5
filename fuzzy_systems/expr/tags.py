"""
Data-free display labels.

A Tag's text lives on its class, so instances carry nothing and attaching
one to an atom adds no payload. Each Tag class has a single instance.

Usage:
    a = Hamacher1.atom(0.1).with_label(TagA)
    str(a)                         # "a"
    THRESHOLD = new_tag("Threshold", "threshold")
"""

from __future__ import annotations

from typing import ClassVar, Dict


class Tag:
    """Base class for zero-payload labels."""

    __slots__ = ()

    text: ClassVar[str] = ""
    _instances: ClassVar[Dict[type, "Tag"]] = {}

    def __new__(cls):
        instance = Tag._instances.get(cls)
        if instance is None:
            instance = super().__new__(cls)
            Tag._instances[cls] = instance
        return instance

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return type(self).__name__


def new_tag(name: str, text: str) -> Tag:
    """
    Create a new Tag class and return its instance.

    Args:
        name: Class name (shown by repr)
        text: Display text (shown when rendering)
    """
    if not text:
        raise ValueError(f"new_tag: text is required for tag '{name}'")
    cls = type(name, (Tag,), {"__slots__": (), "text": text, "__module__": __name__})
    return cls()


TagA = new_tag("TagA", "a")
TagB = new_tag("TagB", "b")
TagC = new_tag("TagC", "c")
TagD = new_tag("TagD", "d")
TagE = new_tag("TagE", "e")
TagF = new_tag("TagF", "f")
TagG = new_tag("TagG", "g")
TagH = new_tag("TagH", "h")
TagI = new_tag("TagI", "i")
TagJ = new_tag("TagJ", "j")
TagK = new_tag("TagK", "k")
TagL = new_tag("TagL", "l")
TagM = new_tag("TagM", "m")
TagN = new_tag("TagN", "n")
TagO = new_tag("TagO", "o")
TagP = new_tag("TagP", "p")
TagQ = new_tag("TagQ", "q")
TagR = new_tag("TagR", "r")
TagS = new_tag("TagS", "s")
TagT = new_tag("TagT", "t")
TagU = new_tag("TagU", "u")
TagV = new_tag("TagV", "v")
TagW = new_tag("TagW", "w")
TagX = new_tag("TagX", "x")
TagY = new_tag("TagY", "y")
TagZ = new_tag("TagZ", "z")


__all__ = [
    "Tag",
    "new_tag",
    "TagA", "TagB", "TagC", "TagD", "TagE", "TagF", "TagG",
    "TagH", "TagI", "TagJ", "TagK", "TagL", "TagM", "TagN",
    "TagO", "TagP", "TagQ", "TagR", "TagS", "TagT", "TagU",
    "TagV", "TagW", "TagX", "TagY", "TagZ",
]
