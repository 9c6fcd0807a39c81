"""Constants used throughout the application."""

# Per-package product override file name
PRODUCT_OVERRIDES_FILE = "tpgtools_product.yaml"

# Separator between segments of package paths and document titles
PATH_SEPARATOR = "/"
