"""
Color Assignment — Deterministic Domain Palette

A domain's color is its index in the run's domain list, taken
modulo the palette length. Stable within one layout run only:
a different domain list may shift a domain to another color.
"""

from __future__ import annotations

from typing import Dict, List, Sequence


# Navy → medium blue → periwinkle → teal/cyan.
DOMAIN_PALETTE: tuple[str, ...] = (
    "#1a2e5a", "#1e3a8a", "#1d4ed8", "#2563eb",
    "#3b82f6", "#6366f1", "#818cf8", "#7c9fc3",
    "#0e7490", "#0891b2", "#06b6d4", "#22d3ee",
    "#0d9488", "#14b8a6", "#2dd4bf", "#5eead4",
)


def domain_color(domain: str, all_domains: Sequence[str]) -> str:
    """
    Palette color for `domain` given the ordered domains of this run.
    A domain missing from all_domains is treated as appended to it.
    """
    try:
        idx = list(all_domains).index(domain)
    except ValueError:
        idx = len(all_domains)
    return DOMAIN_PALETTE[idx % len(DOMAIN_PALETTE)]


def assign_colors(domains: List[str]) -> Dict[str, str]:
    """domain → color for every domain in the run."""
    return {d: domain_color(d, domains) for d in domains}


def shade_variant(hex_color: str, amount: int) -> str:
    """
    Shift each RGB channel by `amount`, clamped to 0..255.
    Positive amounts lighten, negative amounts darken.
    """
    num = int(hex_color.lstrip("#"), 16)
    channels = ((num >> 16) & 0xFF, (num >> 8) & 0xFF, num & 0xFF)
    shaded = [max(0, min(255, c + amount)) for c in channels]
    return "#" + "".join(f"{c:02x}" for c in shaded)
