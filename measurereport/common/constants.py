"""Shared constants for measurement reports."""

# Statistic captions
MEAN_AND_STD_CAPTION = "Mean and Std"
MEDIAN_CAPTION = "Median"

# (display_label, Measurement attribute), in report order
FIELD_DEFS: list[tuple[str, str]] = [
    ("Temperature", "temperature"),
    ("Humidity",    "humidity"),
]

# ── HTML markup ─────────────────────────────────────────────────────────────
# Items have no closing </li>.
HTML_CAPTION = "<h1>{caption}</h1>"
HTML_BEGIN_LIST = "<ul>"
HTML_END_LIST = "</ul>"
HTML_ITEM = "<li><b>{label}</b>: {value}"

# ── Markdown markup ─────────────────────────────────────────────────────────
MARKDOWN_CAPTION = "## {caption}\n\n"
MARKDOWN_BEGIN_LIST = ""
MARKDOWN_END_LIST = ""
MARKDOWN_ITEM = " * **{label}**: {value}\n\n"
