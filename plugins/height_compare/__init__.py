"""Height comparison plugin."""

manifest = {
    "title": "Height Compare",
    "summary": "Unit-aware height conversion, smart metric/imperial labels and chart scales from quarks to galaxies.",
    "blueprint": "height_compare",
    "category": "General Utilities",
}


__all__ = ["manifest"]
