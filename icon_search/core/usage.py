"""Code snippets showing how to use catalog icons from react-icons."""

from __future__ import annotations

from typing import Optional

from icon_search.models.entities import LibraryInfo

from .catalog import IconCatalog

DEFAULT_EXAMPLE_ICON = "FaUser"
DEFAULT_EXAMPLE_LIBRARY = "fa"
DEFAULT_EXAMPLE_LIBRARY_NAME = "Font Awesome 5"


def icon_usage(library: LibraryInfo | str, icon_name: str) -> dict[str, str]:
    prefix = library.prefix if isinstance(library, LibraryInfo) else library
    return {
        "import": f'import {{ {icon_name} }} from "react-icons/{prefix}";',
        "jsx": f"<{icon_name} />",
        "with_props": f'<{icon_name} size={{24}} color="blue" />',
    }


def usage_examples(catalog: IconCatalog, library_prefix: Optional[str] = None) -> dict[str, dict[str, str]]:
    """Titled usage examples, built around the first icon of a library

    Falls back to FaUser from Font Awesome 5 when the library is unknown or
    has no indexed icons.
    """
    icon = DEFAULT_EXAMPLE_ICON
    library_name = DEFAULT_EXAMPLE_LIBRARY_NAME
    module = DEFAULT_EXAMPLE_LIBRARY

    # Switch library only together with an icon it exports, so the import
    # line never pairs FaUser with another module.
    if library_prefix:
        library = catalog.get_library(library_prefix)
        icons = catalog.list_icons(library_prefix) if library is not None else []
        if icons:
            icon = icons[0].icon_name
            library_name = library.name
            module = library.prefix

    return {
        "basic": {
            "title": "Basic Usage",
            "description": f"Import and use a {library_name} icon",
            "code": f"""import {{ {icon} }} from "react-icons/{module}";

function MyComponent() {{
  return (
    <div>
      <{icon} />
      <p>This is my content with an icon</p>
    </div>
  );
}}""",
        },
        "with_props": {
            "title": "Customizing Icons",
            "description": "Customize icon size, color, and other properties",
            "code": f"""import {{ {icon} }} from "react-icons/{module}";

function MyComponent() {{
  return (
    <div>
      <{icon}
        size={{24}}
        color="blue"
        className="my-icon"
        onClick={{() => alert('Icon clicked!')}}
      />
    </div>
  );
}}""",
        },
        "with_context": {
            "title": "Using IconContext",
            "description": "Set default properties for all icons within a context",
            "code": f"""import {{ {icon} }} from "react-icons/{module}";
import {{ IconContext }} from "react-icons";

function MyComponent() {{
  return (
    <IconContext.Provider value={{{{ color: "blue", size: "1.5em", className: "global-icon" }}}}>
      <div>
        <{icon} />
        <p>This is my content</p>
        <{icon} color="red" />
      </div>
    </IconContext.Provider>
  );
}}""",
        },
        "dynamic_import": {
            "title": "Dynamic Import",
            "description": "Pick icon components at runtime from a lookup table",
            "code": """import { FaUser, FaCog } from "react-icons/fa";
import { MdHome } from "react-icons/md";

const icons = {
  user: FaUser,
  settings: FaCog,
  home: MdHome,
};

function DynamicIcon({ type }) {
  const IconComponent = icons[type] || FaUser;
  return <IconComponent />;
}""",
        },
    }
