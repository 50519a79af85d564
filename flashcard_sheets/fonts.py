import logging
import os
import sys

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.pdfmetrics import registerFontFamily
from reportlab.pdfbase.ttfonts import TTFont

logger = logging.getLogger(__name__)

# Public font names used by the card renderer. setup_unicode_fonts() points
# them at a Unicode TrueType family when one is found (so "→" and accented
# vocabulary render); otherwise the built-in Helvetica family is kept.
FONT_REGULAR_NAME = "Helvetica"
FONT_BOLD_NAME = "Helvetica-Bold"

# Candidate families: (family, regular files, bold files, italic files)
_CANDIDATES = [
    ("DejaVuSans", ["DejaVuSans.ttf"], ["DejaVuSans-Bold.ttf"], ["DejaVuSans-Oblique.ttf"]),
    ("NotoSans", ["NotoSans-Regular.ttf"], ["NotoSans-Bold.ttf"], ["NotoSans-Italic.ttf"]),
    ("Arial", ["arial.ttf", "ARIAL.TTF", "Arial.ttf"], ["arialbd.ttf", "ARIALBD.TTF", "Arial Bold.ttf"], ["ariali.ttf", "ARIALI.TTF", "Arial Italic.ttf"]),
    ("SegoeUI", ["segoeui.ttf", "SEGOEUI.TTF"], ["segoeuib.ttf", "SEGOEUIB.TTF"], ["segoeuii.ttf", "SEGOEUII.TTF"]),
    ("LiberationSans", ["LiberationSans-Regular.ttf"], ["LiberationSans-Bold.ttf"], ["LiberationSans-Italic.ttf"]),
]


def _font_dirs():
    dirs = []
    if sys.platform.startswith("win"):
        dirs.append(os.path.join(os.environ.get("WINDIR", r"C:\Windows"), "Fonts"))
    elif sys.platform == "darwin":
        dirs.extend(["/Library/Fonts", "/System/Library/Fonts/Supplemental", os.path.expanduser("~/Library/Fonts")])
    else:
        dirs.extend([
            "/usr/share/fonts/truetype/dejavu",
            "/usr/share/fonts/dejavu",
            "/usr/share/fonts/truetype/noto",
            "/usr/share/fonts/truetype/liberation",
            os.path.expanduser("~/.fonts"),
        ])
    # Fonts dropped next to the deck or the working directory
    dirs.append(os.path.abspath("."))
    return dirs


def _find_file(font_dirs, possible_names):
    for d in font_dirs:
        for name in possible_names:
            p = os.path.join(d, name)
            if os.path.isfile(p):
                return p
    return None


def _register_family(family_name, regular_path, bold_path=None, italic_path=None):
    """Register a TTF family with ReportLab. Returns (regular_name, bold_name)."""
    regular_name = family_name
    bold_name = f"{family_name}-Bold" if bold_path else family_name
    italic_name = f"{family_name}-Italic" if italic_path else family_name
    pdfmetrics.registerFont(TTFont(regular_name, regular_path))
    if bold_path:
        pdfmetrics.registerFont(TTFont(bold_name, bold_path))
    if italic_path:
        pdfmetrics.registerFont(TTFont(italic_name, italic_path))
    # Paragraph markup (<b>, <i>) resolves through the family mapping
    registerFontFamily(family_name, normal=regular_name, bold=bold_name, italic=italic_name, boldItalic=bold_name)
    return regular_name, bold_name


def setup_unicode_fonts(font_dirs=None):
    """Best-effort registration of a Unicode font family; keeps Helvetica if none is found."""
    global FONT_REGULAR_NAME, FONT_BOLD_NAME
    if font_dirs is None:
        font_dirs = _font_dirs()
    for family, reg_list, bold_list, italic_list in _CANDIDATES:
        reg_path = _find_file(font_dirs, reg_list)
        if not reg_path:
            continue
        try:
            FONT_REGULAR_NAME, FONT_BOLD_NAME = _register_family(
                family,
                reg_path,
                _find_file(font_dirs, bold_list),
                _find_file(font_dirs, italic_list),
            )
        except Exception as exc:
            logger.debug("Could not register font family %s from %s: %s", family, reg_path, exc)
            continue
        logger.debug("Using font family %s (%s)", family, reg_path)
        return FONT_REGULAR_NAME
    logger.debug("No Unicode TrueType font found; falling back to %s", FONT_REGULAR_NAME)
    return FONT_REGULAR_NAME
