"""Height-map and XPM readers, X11 colour names and 3D rotations for wireframes."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "colornames",
    "geometry",
    "heightmap",
    "numbers",
    "textops",
    "xpm",
]