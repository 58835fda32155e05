"""Catalogue of known engine map variants."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Variant:
    """A known map variant.

    ``resource`` identifies the stock map image; ``map_name`` is the name
    shown for it, which for a few variants differs from the resource.
    """

    resource: str
    map_name: str
    description: str


_VARIANTS: tuple[Variant, ...] = (
    Variant("sthde021sttdp009", "sthde021sttdp009", "Disco, Manual, Europe, EU2, NNN000120"),
    Variant("sthde021sttdp010", "sthde021sttdp010", "Disco, Manual, Europe, EU2, NNN500020"),
    Variant("sthdr009sttdp009", "sthdr009sttdp009", "Disco, Manual, ROW, EU2, NNN000120"),
    Variant("sthdr009sttdp010", "sthdr009sttdp010", "Disco, Manual, ROW, EU2, NNN500020"),
    Variant("sthle022sttlp009", "sthle022sttlp009", "Defender, Manual, Europe, EU2, NNN000120"),
    Variant("sthle022sttlp010", "sthle022sttlp010", "Defender, Manual, Europe, EU2, NNN500020"),
    Variant("suhde036sutdp012", "suhde036sutdp012", "Disco, Auto, Europe, EU2, NNN000130"),
    Variant("suhde036sutdp014", "suhde036sutdp014", "Disco, Auto, Europe, EU2, NNN500030"),
    Variant("suhdr009sutzp004", "suhdr009sutzp004", "Disco, Auto, ROW, EU2, NNN000130"),
    Variant("suhdr009sutzp005", "suhdr009sutzp005", "Disco, Auto, ROW, EU2, NNN500030"),
    Variant("surdk004sutzp004", "surdk004sutzp004", "Disco, Auto, Korea, EU2, NNN000130"),
    Variant("surdk004sutzp005", "surdk004sutzp005", "Disco, Auto, Korea, EU2, NNN500030"),
    Variant("svdxe003svtnp003", "svdxe003svtnp003", "Discovery, Manual, Europe, EU3, NNN000120"),
    Variant("svdxe004svtnp003", "svdxe004svtnp003", "Discovery, Manual, Europe, EU3, NNN000120"),
    Variant("svdxe006svtnp003", "svdxe006svtnp003", "Discovery, Manual, Europe, EU3, NNN000120"),
    Variant("svdxe008svtnp005", "svdxe008svtnp005", "Discovery, Manual, Europe, EU3, NNN000120"),
    Variant("svdxe008svtnp006", "svdxe008svtnp006", "Discovery, Manual, Europe, EU3, NNN500020"),
    Variant("svdxg003svtnp006", "svdxg003svtnp006", "Discovery, Manual, Unknown, EU3, NNN500250"),
    Variant("svdxr002svtnp003", "svdxr002svtnp003", "Discovery, Manual, ROW, EU3, NNN000120"),
    Variant("svdxr005svtnp003", "svdxr005svtnp003", "Discovery, Manual, ROW, EU3, NNN000120"),
    Variant("svdxr007svtnp005", "svdxr007svtnp005", "Discovery, Manual, ROW, EU3, NNN000120"),
    Variant("svdxr007svtnp006", "svdxr007svtnp006", "Discovery, Manual, ROW, EU3, NNN500020"),
    Variant("svlne004svtnp003", "svlne004svtnp003", "Defender 90, Manual, Europe, EU3, NNN000120"),
    Variant("svlne006svtnp003", "svlne006svtnp003", "Defender 90, Manual, Europe, EU3, NNN000120"),
    Variant("svlne007svtnp005", "svlne007svtnp005", "Defender 90, Manual, Europe, EU3, NNN000120"),
    Variant("svlne007svtnp006", "svlne007svtnp006", "Defender 90, Manual, Europe, EU3, NNN500020"),
    Variant("svlnr002svtnp003", "svlnr002svtnp003", "Defender 90, Manual, ROW, EU3, NNN000120"),
    Variant("svlnr004svtnp003", "svlnr004svtnp003", "Defender 90, Manual, ROW, EU3, NNN000120"),
    Variant("svlnr005svtnp005", "svlnr005svtnp005", "Defender 90, Manual, ROW, EU3, NNN000120"),
    Variant("svlnr005svtnp006", "svlnr005svtnp006", "Defender 90, Manual, ROW, EU3, NNN500020"),
    Variant("svloe002svtnp003", "svloe002svtnp003", "Defender 110, Manual, Europe, EU3, NNN000120"),
    Variant("svloe004svtnp003", "svloe004svtnp003", "Defender 110, Manual, Europe, EU3, NNN000120"),
    Variant("svloe005svtnp005", "svloe005svtnp005", "Defender 110, Manual, Europe, EU3, NNN000120"),
    Variant("svloe005svtnp006", "svloe005svtnp006", "Defender 110, Manual, Europe, EU3, NNN500020"),
    Variant("svloj002svtnp003", "svloj002svtnp003", "Defender 110, Manual, Japan, EU3, NNN000120"),
    Variant("svloj002svtnp006", "svloj002svtnp006", "Defender 110, Manual, Japan, EU3, NNN500020"),
    Variant("svlor002svtnp003", "svlor002svtnp003", "Defender 110, Manual, ROW, EU3, NNN000120"),
    Variant("svlor004svtnp003", "svlor004svtnp003", "Defender 110, Manual, ROW, EU3, NNN000120"),
    Variant("svlor005svtnp005", "svlor005svtnp005", "Defender 110, Manual, ROW, EU3, NNN000120"),
    Variant("svlor005svtnp006", "svlor005svtnp006", "Defender 110, Manual, ROW, EU3, NNN500020"),
    Variant("swdxe004swtnp004", "swdxe004swtnp004", "Discovery, Automatic, Europe, EU3, NNN000130"),
    Variant("swdxe007swtnp004", "swdxe007swtnp004", "Discovery, Automatic, Europe, EU3, NNN000130"),
    Variant("swdxe007swtnp006", "swdxe007swtnp006", "Discovery, Automatic, Europe, EU3, NNN500030"),
    Variant("swdxk001swtnp004", "swdxk001swtnp004", "Discovery, Automatic, Korea, EU3, NNN000130"),
    Variant("swdxk003swtnp004", "swdxk003swtnp004", "Discovery, Automatic, Korea, EU3, NNN000130"),
    Variant("swdxk003swtnp006", "swdxk003swtnp006", "Discovery, Automatic, Korea, EU3, NNN500030"),
    Variant("swdxr002swtnp004", "swdxr001swtnp004", "Discovery, Automatic, ROW, EU3, NNN000130"),
    Variant("swdxr004swtnp004", "swdxr003swtnp004", "Discovery, Automatic, ROW, EU3, NNN000130"),
    Variant("swdxr004swtnp006", "swdxr003swtnp006", "Discovery, Automatic, ROW, EU3, NNN500030"),
)


class VariantCatalog:
    """Ordered, read-only collection of the known map variants."""

    def __init__(self) -> None:
        self._variants = _VARIANTS

    def __len__(self) -> int:
        return len(self._variants)

    def __iter__(self) -> Iterator[Variant]:
        return iter(self._variants)

    def __getitem__(self, index: int) -> Variant:
        return self._variants[index]

    def map_name(self, index: int) -> str:
        """Map name of the variant at ``index``."""
        return self._variants[index].map_name

    def description(self, index: int) -> str:
        """Human-readable description of the variant at ``index``."""
        return self._variants[index].description

    def find(self, map_name: str) -> Variant | None:
        """Return the variant with the given map name, or None if unknown.

        When several variants share a name the last one listed wins.
        """
        found = None
        for variant in self._variants:
            if variant.map_name == map_name:
                found = variant
        return found