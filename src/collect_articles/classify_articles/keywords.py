"""Keyword tables for article classification.

Keywords are lower-case Polish stems matched as substrings, because the
configured feeds publish in Polish. Category order matters: on equal scores
the category listed first wins.
"""

CATCH_ALL_CATEGORY = "Other"

CATEGORY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "Politics": ("polityk", "wybory", "rząd", "parlament", "prezydent", "minister", "sejm", "senat"),
    "Economy": ("ekonomia", "biznes", "firma", "bank", "giełda", "inwestycja", "złoty", "euro"),
    "Technology": ("technologia", "ai", "komputer", "internet", "aplikacja", "smartfon", "cyber"),
    "Sport": ("piłka", "football", "mecz", "liga", "reprezentacja", "sport", "olimpiad", "mundial"),
    "Security": ("policja", "wypadek", "przestępst", "sąd", "zatrzyman", "pożar", "awaria"),
    "Education": ("szkoła", "student", "uniwers", "nauka", "badania", "uczniowie", "nauczyciel"),
    "Culture": ("film", "muzyka", "teatr", "książka", "wystawa", "koncert", "festiwal"),
    "Health": ("lekarz", "szpital", "pandemia", "szczepion", "choroba", "medycyn", "nfz"),
}

URGENT_KEYWORDS: tuple[str, ...] = (
    "pilne", "breaking", "tragiczny", "wypadek", "zmarł", "zginął", "atak", "wybuch",
)
IMPORTANT_KEYWORDS: tuple[str, ...] = (
    "prezydent", "premier", "rząd", "parlament", "wybory", "sąd",
)

URGENT_WEIGHT = 3
IMPORTANT_WEIGHT = 1
