# region ---[ Default Extensions ]---

DEFAULT_EXTENSIONS: list[str] = [
    "dpx",
    "exr",
    "gif",
    "heic",
    "jpeg",
    "jpg",
    "png",
    "svg",
    "tiff",
    "webp",
]

# endregion ---[ Default Extensions ]---
# region ---[ Default CLI Options ]---

DEFAULT_RUN_PATH = "."
DEFAULT_INCLUDE_HIDDEN = False
DEFAULT_NO_SORT = False
DEFAULT_NULL = False
DEFAULT_QUOTE = False
DEFAULT_OUTPUT = None
DEFAULT_VERBOSITY = 0

# endregion ---[ Default CLI Options ]---
