"""CSS for favicon links, for the live page and the block editor canvas."""
from typing import Dict, List

EDITOR_WRAPPER_SELECTOR = ".editor-styles-wrapper"

# Typography preset slug -> suffix of its --wp--preset--font-size-- variable.
PRESETS: Dict[str, str] = {
    "small": "small",
    "medium": "medium",
    "large": "large",
    "x-large": "x-large",
    "xx-large": "xx-large",
}


def css_rules(in_editor: bool = False) -> List[str]:
    """Return the rule list; editor rules are scoped under the canvas wrapper."""
    base = f"{EDITOR_WRAPPER_SELECTOR} " if in_editor else ""

    rules = [
        # inline-flex keeps icon and text together; themes like to indent links.
        f"{base}.favlink{{display:inline-flex;align-items:baseline;gap:.35em;vertical-align:baseline;"
        "max-width:100%;text-indent:0!important;margin:0!important;padding:0!important;line-height:inherit}",
        # Auto size: 1em of the current font size.
        f"{base}.favlink img{{flex:0 0 auto;height:1em!important;width:auto!important;vertical-align:baseline}}",
        # Negative first-child indents.
        f"{base}p > .favlink:first-child{{margin-left:0!important;text-indent:0!important}}",
    ]

    for slug, var in PRESETS.items():
        rules.append(
            f"{base}.has-{slug}-font-size .favlink img{{height:var(--wp--preset--font-size--{var})!important}}"
        )

    return rules


def build_css(in_editor: bool = False) -> str:
    return "".join(css_rules(in_editor))
