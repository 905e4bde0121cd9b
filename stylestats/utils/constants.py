"""
Shared constants for stylestats.

Contains default analysis options and common configuration values used
across multiple modules.
"""

# Default user agent string for stylesheet requests
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# Mobile user agents selectable with --ua
USER_AGENTS = {
    "ios": (
        "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) "
        "AppleWebKit/605.1.15 (KHTML, like Gecko) "
        "Version/17.0 Mobile/15E148 Safari/604.1"
    ),
    "android": (
        "Mozilla/5.0 (Linux; Android 14; Pixel 8) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Mobile Safari/537.36"
    ),
}

# Default request timeout in seconds
DEFAULT_TIMEOUT = 30

# Default concurrent stylesheet downloads
DEFAULT_CONCURRENCY = 10

# CSS named color keywords recognized in color-bearing declarations.
# "transparent" is matched so it can be filtered out afterwards.
NAMED_COLORS = [
    "aliceblue", "antiquewhite", "aqua", "aquamarine", "azure", "beige",
    "bisque", "black", "blanchedalmond", "blue", "blueviolet", "brown",
    "burlywood", "cadetblue", "chartreuse", "chocolate", "coral",
    "cornflowerblue", "cornsilk", "crimson", "cyan", "darkblue", "darkcyan",
    "darkgoldenrod", "darkgray", "darkgreen", "darkgrey", "darkkhaki",
    "darkmagenta", "darkolivegreen", "darkorange", "darkorchid", "darkred",
    "darksalmon", "darkseagreen", "darkslateblue", "darkslategray",
    "darkslategrey", "darkturquoise", "darkviolet", "deeppink", "deepskyblue",
    "dimgray", "dimgrey", "dodgerblue", "firebrick", "floralwhite",
    "forestgreen", "fuchsia", "gainsboro", "ghostwhite", "gold", "goldenrod",
    "gray", "green", "greenyellow", "grey", "honeydew", "hotpink",
    "indianred", "indigo", "ivory", "khaki", "lavender", "lavenderblush",
    "lawngreen", "lemonchiffon", "lightblue", "lightcoral", "lightcyan",
    "lightgoldenrodyellow", "lightgray", "lightgreen", "lightgrey",
    "lightpink", "lightsalmon", "lightseagreen", "lightskyblue",
    "lightslategray", "lightslategrey", "lightsteelblue", "lightyellow",
    "lime", "limegreen", "linen", "magenta", "maroon", "mediumaquamarine",
    "mediumblue", "mediumorchid", "mediumpurple", "mediumseagreen",
    "mediumslateblue", "mediumspringgreen", "mediumturquoise",
    "mediumvioletred", "midnightblue", "mintcream", "mistyrose", "moccasin",
    "navajowhite", "navy", "oldlace", "olive", "olivedrab", "orange",
    "orangered", "orchid", "palegoldenrod", "palegreen", "paleturquoise",
    "palevioletred", "papayawhip", "peachpuff", "peru", "pink", "plum",
    "powderblue", "purple", "rebeccapurple", "red", "rosybrown", "royalblue",
    "saddlebrown", "salmon", "sandybrown", "seagreen", "seashell", "sienna",
    "silver", "skyblue", "slateblue", "slategray", "slategrey", "snow",
    "springgreen", "steelblue", "tan", "teal", "thistle", "tomato",
    "transparent", "turquoise", "violet", "wheat", "white", "whitesmoke",
    "yellow", "yellowgreen",
]

# Metrics reported when no config file overrides them
DEFAULT_OPTIONS = {
    "published": True,
    "paths": True,
    "stylesheets": True,
    "styleElements": True,
    "size": True,
    "dataUriSize": True,
    "ratioOfDataUriSize": True,
    "gzippedSize": False,
    "rules": True,
    "selectors": True,
    "declarations": True,
    "simplicity": True,
    "averageOfIdentifier": True,
    "mostIdentifier": True,
    "mostIdentifierSelector": True,
    "mostIdentifierCount": 1,
    "averageOfCohesion": True,
    "lowestCohesion": True,
    "lowestCohesionSelector": True,
    "totalUniqueFontSizes": True,
    "uniqueFontSize": True,
    "uniqueFontSizeDic": False,
    "totalUniqueFontFamilies": True,
    "uniqueFontFamily": True,
    "uniqueFontFamilyDic": False,
    "totalUniqueColors": True,
    "uniqueColor": True,
    "uniqueColorDic": False,
    "idSelectors": True,
    "universalSelectors": True,
    "unqualifiedAttributeSelectors": True,
    "attributeSelectors": False,
    "elementSelectors": False,
    "classSelectors": False,
    "javascriptSpecificSelectors": r"[#\.]js\-",
    "importantKeywords": True,
    "floatProperties": True,
    "propertiesCount": 10,
    "mediaQueries": True,
    "sourceMap": False,
    "namedColors": NAMED_COLORS,
}

# Options switched off by --number so only numeric metrics remain
NUMBER_ONLY_OPTIONS = {
    "published": False,
    "paths": False,
    "mostIdentifierSelector": False,
    "lowestCohesionSelector": False,
    "uniqueFontSize": False,
    "uniqueFontSizeDic": False,
    "uniqueFontFamily": False,
    "uniqueFontFamilyDic": False,
    "uniqueColor": False,
    "uniqueColorDic": False,
    "propertiesCount": False,
    "mediaQueries": False,
    "sourceMap": False,
}
