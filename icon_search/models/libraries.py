"""Seed table of the icon libraries known to the catalog.

Declared icon counts are informational only; the number of icons actually
indexed depends on the configured symbol source.
"""

from __future__ import annotations

from .entities import LibraryInfo


def _lib(
    prefix: str,
    name: str,
    description: str,
    total_icons: int,
    license: str,
    url: str,
) -> LibraryInfo:
    return LibraryInfo(
        prefix=prefix,
        name=name,
        description=description,
        total_icons=total_icons,
        license=license,
        url=url,
    )


ICON_LIBRARIES: tuple[LibraryInfo, ...] = (
    _lib("ai", "Ant Design Icons", "Icons from Ant Design", 831, "MIT",
         "https://github.com/ant-design/ant-design-icons"),
    _lib("bs", "Bootstrap Icons", "Icons from Bootstrap", 2716, "MIT",
         "https://github.com/twbs/icons"),
    _lib("bi", "BoxIcons", "High quality web icons", 1634, "MIT",
         "https://github.com/atisawd/boxicons"),
    _lib("ci", "Circum Icons", "Circle-based icons", 288, "MPL-2.0",
         "https://circumicons.com/"),
    _lib("cg", "css.gg", "Pure CSS icons", 704, "MIT",
         "https://github.com/astrit/css.gg"),
    _lib("di", "Devicons", "Developer tool icons", 192, "MIT",
         "https://vorillaz.github.io/devicons/"),
    _lib("fa", "Font Awesome 5", "Popular icon toolkit", 1612, "CC BY 4.0",
         "https://fontawesome.com/"),
    _lib("fa6", "Font Awesome 6", "Latest Font Awesome icons", 2045, "CC BY 4.0",
         "https://fontawesome.com/"),
    _lib("fc", "Flat Color Icons", "Colored flat icons", 329, "MIT",
         "https://github.com/icons8/flat-color-icons"),
    _lib("fi", "Feather", "Simply beautiful icons", 287, "MIT",
         "https://feathericons.com/"),
    _lib("gi", "Game Icons", "Icons for games", 4040, "CC BY 3.0",
         "https://game-icons.net/"),
    _lib("go", "Github Octicons", "GitHub's icons", 264, "MIT",
         "https://octicons.github.com/"),
    _lib("gr", "Grommet-Icons", "Grommet UI icons", 635, "Apache License v2.0",
         "https://github.com/grommet/grommet-icons"),
    _lib("hi", "Heroicons", "Tailwind UI icons", 460, "MIT",
         "https://github.com/tailwindlabs/heroicons"),
    _lib("hi2", "Heroicons 2", "Heroicons v2", 888, "MIT",
         "https://github.com/tailwindlabs/heroicons"),
    _lib("im", "IcoMoon Free", "IcoMoon icon set", 491, "CC BY 4.0",
         "https://github.com/Keyamoon/IcoMoon-Free"),
    _lib("io", "Ionicons 4", "Ionic Framework icons v4", 696, "MIT",
         "https://ionicons.com/"),
    _lib("io5", "Ionicons 5", "Ionic Framework icons v5", 1332, "MIT",
         "https://ionicons.com/"),
    _lib("lia", "Icons8 Line Awesome", "Beautiful icon set", 1544, "MIT",
         "https://icons8.com/line-awesome"),
    _lib("lu", "Lucide", "Fork of Feather Icons", 1215, "ISC",
         "https://lucide.dev/"),
    _lib("md", "Material Design Icons", "Google's Material Design icons", 4341,
         "Apache License v2.0", "http://google.github.io/material-design-icons/"),
    _lib("pi", "Phosphor Icons", "Flexible icon family", 9072, "MIT",
         "https://github.com/phosphor-icons/core"),
    _lib("ri", "Remix Icon", "Neutral-style icon system", 2860, "Apache License v2.0",
         "https://github.com/Remix-Design/RemixIcon"),
    _lib("rx", "Radix Icons", "Radix UI Icon set", 318, "MIT",
         "https://icons.radix-ui.com"),
    _lib("si", "Simple Icons", "Brand icons", 3209, "CC0 1.0 Universal",
         "https://simpleicons.org/"),
    _lib("sl", "Simple Line Icons", "Simple and clean line icons", 189, "MIT",
         "https://thesabbir.github.io/simple-line-icons/"),
    _lib("tb", "Tabler Icons", "Fully customizable icons", 5237, "MIT",
         "https://github.com/tabler/tabler-icons"),
    _lib("tfi", "Themify Icons", "Themify icon set", 352, "MIT",
         "https://github.com/lykmapipo/themify-icons"),
    _lib("ti", "Typicons", "Rounded icon set", 336, "CC BY-SA 3.0",
         "http://s-ings.com/typicons/"),
    _lib("vsc", "VS Code Icons", "Visual Studio Code icons", 461, "CC BY 4.0",
         "https://github.com/microsoft/vscode-codicons"),
    _lib("wi", "Weather Icons", "Weather-themed icons", 219, "SIL OFL 1.1",
         "https://erikflowers.github.io/weather-icons/"),
)
