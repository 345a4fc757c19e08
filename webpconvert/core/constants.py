"""Constants and configuration values for the WebP converter."""

# Only files with this extension (compared case-insensitively) are converted
INPUT_EXTENSION = ".webp"

# Output formats and their accepted shorthands
DEFAULT_OUTPUT_FORMAT = "jpg"
SUPPORTED_OUTPUT_FORMATS = ("jpg", "png")
FORMAT_ALIASES = {
    "j": "jpg",
    "p": "png",
}

# Folder created next to the input file in single-file mode
CONVERTED_FOLDER_NAME = "converted"

# Prefix of the timestamped folder created inside the input directory
OUTPUT_FOLDER_PREFIX = "output_"

# Characters of an ISO timestamp that are not filesystem-safe
TIMESTAMP_UNSAFE_CHARS = (":", ".", "-")
TIMESTAMP_REPLACEMENT = "_"

# Encoder defaults
DEFAULT_JPEG_QUALITY = 80
DEFAULT_PNG_COMPRESS_LEVEL = 6

# Background used when flattening transparency for formats without alpha
FLATTEN_BACKGROUND = (255, 255, 255)
