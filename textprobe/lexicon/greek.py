"""
Closed word and phrase lists for the Greek profile.

Phrases are matched as substrings of the lowercased text, words as exact lowercased
tokens. Casual Greek is often typed without accents, so the informal lists carry
unaccented spellings as well.
"""

from typing import Final

PERSONAL_PRONOUNS: Final[frozenset[str]] = frozenset(
    {
        "εγώ", "εμένα", "μένα", "μου",
        "εσύ", "εσένα", "σένα", "σου",
        "αυτός", "αυτή", "αυτό", "αυτόν", "αυτού", "αυτής",
        "εμείς", "εμάς", "μας",
        "εσείς", "εσάς", "σας",
        "αυτοί", "αυτές", "αυτά", "αυτών", "αυτούς",
    }
)  # fmt: skip

# AI-leaning (formal) register.

GENERIC_ATTRIBUTION_PHRASES: Final[tuple[str, ...]] = (
    "είναι γεγονός ότι",
    "είναι ευρέως γνωστό",
    "είναι κοινώς αποδεκτό",
    "σύμφωνα με τους ειδικούς",
    "σύμφωνα με ειδικούς",
    "οι ειδικοί επισημαίνουν",
    "πολλοί πιστεύουν",
    "πολλοί υποστηρίζουν",
    "έρευνες δείχνουν",
    "μελέτες δείχνουν",
    "μελέτες έχουν δείξει",
    "θεωρείται ότι",
    "στη σημερινή εποχή",
)

HEDGING_PHRASES: Final[tuple[str, ...]] = (
    "είναι σημαντικό να σημειωθεί",
    "αξίζει να αναφερθεί",
    "αξίζει να σημειωθεί",
    "θα πρέπει να σημειωθεί",
    "θα μπορούσε να ειπωθεί",
    "θα μπορούσε να υποστηριχθεί",
    "σε μεγάλο βαθμό",
    "σε κάποιο βαθμό",
    "ως ένα βαθμό",
    "ενδεχομένως",
    "ενδέχεται",
    "φαίνεται ότι",
)

TRANSITIONAL_PHRASES: Final[tuple[str, ...]] = (
    "επιπλέον",
    "επιπροσθέτως",
    "επιπρόσθετα",
    "συνεπώς",
    "κατά συνέπεια",
    "επομένως",
    "ωστόσο",
    "παρ' όλα αυτά",
    "παρόλα αυτά",
    "εντούτοις",
    "από την άλλη πλευρά",
    "εν κατακλείδι",
    "συμπερασματικά",
    "συνοψίζοντας",
    "εν τέλει",
)

OVERFORMAL_WORDS: Final[frozenset[str]] = frozenset(
    {
        "καίριος", "καίρια", "καίριο", "καίριας",
        "θεμελιώδης", "θεμελιώδες", "θεμελιώδη", "θεμελιώδους",
        "ολιστικός", "ολιστική", "ολιστικό", "ολιστικής",
        "αξιοποιώ", "αξιοποιεί", "αξιοποίηση", "αξιοποιώντας",
        "διευκολύνω", "διευκολύνει", "διευκόλυνση",
        "βελτιστοποίηση", "βελτιστοποιεί",
        "πρωταρχικός", "πρωταρχική", "πρωταρχικής", "πρωταρχικό",
        "αναμφισβήτητα", "αναμφίβολα",
        "πολυδιάστατος", "πολυδιάστατη", "πολυδιάστατο",
        "εξαιρετικά", "απολύτως", "ιδιαιτέρως",
        "δεδομένου", "προκειμένου", "διασφάλιση", "διασφαλίζει",
    }
)  # fmt: skip

# Human-leaning (informal) register.

FILLER_WORDS: Final[tuple[str, ...]] = (
    "δηλαδή",
    "δηλαδη",
    "τέλος πάντων",
    "τελος παντων",
    "ας πούμε",
    "ας πουμε",
    "κάπως έτσι",
    "καπως ετσι",
    "βασικά",
    "βασικα",
    "λοιπόν",
    "λοιπον",
    "που λες",
    "ξέρεις",
    "ξερεις",
    "έτσι κι αλλιώς",
    "μωρέ",
)

ABBREVIATIONS: Final[frozenset[str]] = frozenset(
    {
        "δλδ", "κλπ", "κτλ", "πχ", "τλπ", "τπτ", "νταξ", "οκ",
        "ok", "lol", "btw", "thx", "pls",
    }
)  # fmt: skip

COLLOQUIAL_EXPRESSIONS: Final[tuple[str, ...]] = (
    "έλα ρε",
    "ελα ρε",
    "τι να κάνουμε",
    "δεν βαριέσαι",
    "καλά κρασιά",
    "σιγά μην",
    "σιγα μην",
    "χαχα",
    "εντάξει",
    "ενταξει",
)

COLLOQUIAL_PUNCTUATION: Final[tuple[str, ...]] = (
    "!!",
    "?!",
    ";!",
    "...",
    "…",
    ":)",
    ":(",
    ":p",
    ":d",
)
