from __future__ import annotations

# ── card box ──────────────────────────────────────────────────────────────────
TEXT_W     = 20                     # name / number field width
CARD_W     = TEXT_W + 4             # "| " + text + " |"
TOP        = "/" + "-" * (TEXT_W + 2) + "\\"
BOTTOM     = "\\" + "-" * (TEXT_W + 2) + "/"
BLANK      = "|" + " " * (TEXT_W + 2) + "|"
SEPARATOR  = "|"                    # between the B and A cards of a setup row
SEPARATOR_AFTER = 1                 # index of the card it follows

# ── text colours, by category label (rich style names) ───────────────────────
CATEGORY_STYLES = {
    "Anytime":         "blue",
    "Immediately":     "red",
    "Once":            "yellow",
    "Victory Points":  "bright_yellow",
    "Special Ability": "bright_black",
    "Whenever":        "green",
}
DEFAULT_STYLE = "white"
SPOILER_STYLE = "black"             # unreadable on a dark terminal

# ── headers ───────────────────────────────────────────────────────────────────
ROUND_3_HEADER = "********* ROUND 3 CARDS *********"
ROUND_4_HEADER = "******** ROUND 4 CARDS ********"
ROUND_5_HEADER = "********* ROUND 5 CARDS *********"
PLAYER_HEADER  = "Player {n}"
