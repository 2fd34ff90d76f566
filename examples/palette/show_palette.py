"""Print the basic, indexed and RGB palettes using the configuration in this directory."""

import os
from pathlib import Path

from dotenv import load_dotenv

from sgrfmt import MACROS, bg_256, bold, fg_rgb, paint
from sgrfmt.codes.registry import BASE_COLOR_NAMES
from sgrfmt.config import load_settings, use_settings

# Load environment variables
load_dotenv()
os.environ.setdefault("PALETTE_CONST_FORMAT", "true")


def main():
    """Show every basic color, the 256-color cube and an RGB gradient."""
    settings = use_settings(load_settings(Path(__file__).parent / "sgrfmt.yaml"))
    print(f"Constant formatting enabled: {settings.const_format}")

    print(bold("\nBasic colors"))
    for name in BASE_COLOR_NAMES:
        normal, bright = MACROS[name], MACROS[f"{name}_bright"]
        print(f"  {normal(name.ljust(10))}{bright(name + ' (bright)')}")

    print(bold("\n256-color cube"))
    for row in range(16, 232, 36):
        print("".join(bg_256[i]("  ") for i in range(row, row + 36)))

    print(bold("\nRGB gradient"))
    print("".join(fg_rgb[i * 8, 64, 255 - i * 8]("#") for i in range(32)))

    print()
    print(paint("white in blue")["@"]("{} is {}", "paint", "done"))
    if settings.const_format:
        print(bold["#"]("{} constant", 1))


if __name__ == "__main__":
    main()
