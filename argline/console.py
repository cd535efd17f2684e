# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argline."""
from rich.console import Console
from rich.theme import Theme

ARGLINE_THEME = Theme(
    {
        "argline.error": "bold red",
        "argline.comment": "grey50",
        "argline.kind": "magenta",
        "argline.value": "green",
    }
)

console = Console(color_system="truecolor", theme=ARGLINE_THEME)
