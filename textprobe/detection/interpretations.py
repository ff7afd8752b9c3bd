"""Human-readable names and interpretations of signals in every language."""

from typing import Final, Literal

from pydantic import BaseModel, ConfigDict

from textprobe.data_models import Language

Band = Literal["ai", "neutral", "human"]
Verdict = Literal["high", "mixed", "human", "insufficient"]


class SignalTexts(BaseModel):
    """Display name of a signal and interpretations of its likelihood bands."""

    name: str
    ai: str
    neutral: str
    human: str

    model_config = ConfigDict(frozen=True)

    def interpret(self, band: Band) -> str:
        """
        Get the interpretation of a likelihood band.

        Args:
            band (Band): Band of the likelihood.

        Returns:
            str: The interpretation.
        """
        return getattr(self, band)


_ENGLISH: Final[dict[str, SignalTexts]] = {
    "burstiness": SignalTexts(
        name="Burstiness",
        ai="Very uniform sentence structure typical of AI",
        neutral="Moderate sentence structure variation",
        human="High variability in sentence structure suggests human writing",
    ),
    "vocabulary_diversity": SignalTexts(
        name="Vocabulary Diversity",
        ai="Limited vocabulary variety often seen in AI text",
        neutral="Moderate vocabulary diversity",
        human="Rich vocabulary suggests human writing",
    ),
    "sentence_variance": SignalTexts(
        name="Sentence Variance",
        ai="Uniform sentence lengths typical of AI",
        neutral="Moderate sentence length variation",
        human="High sentence length variation suggests human writing",
    ),
    "repetition": SignalTexts(
        name="Repetition",
        ai="Repetitive phrasing patterns detected",
        neutral="Some repeated phrasing",
        human="Low phrase repetition",
    ),
    "starter_diversity": SignalTexts(
        name="Starter Diversity",
        ai="Repetitive sentence beginnings",
        neutral="Somewhat varied sentence openings",
        human="Varied sentence openings",
    ),
    "contractions": SignalTexts(
        name="Contractions",
        ai="Formal style with few contractions",
        neutral="Moderate contraction usage",
        human="Natural contraction usage",
    ),
    "word_length_variance": SignalTexts(
        name="Word Length Variance",
        ai="Uniform word lengths",
        neutral="Moderately varied word lengths",
        human="Varied word lengths",
    ),
    "llm": SignalTexts(
        name="LLM Pattern Analysis",
        ai="LLM detected AI-like patterns in writing style",
        neutral="LLM found mixed signals in writing patterns",
        human="LLM detected human-like writing patterns",
    ),
}

_GREEK: Final[dict[str, SignalTexts]] = {
    "burstiness": SignalTexts(
        name="Εκρηκτικότητα",
        ai="Πολύ ομοιόμορφη δομή προτάσεων, τυπική για κείμενο AI",
        neutral="Μέτρια διακύμανση στη δομή των προτάσεων",
        human="Μεγάλη ποικιλία στη δομή των προτάσεων, ένδειξη ανθρώπινης γραφής",
    ),
    "vocabulary_diversity": SignalTexts(
        name="Ποικιλία Λεξιλογίου",
        ai="Περιορισμένη ποικιλία λεξιλογίου, συχνή σε κείμενα AI",
        neutral="Μέτρια ποικιλία λεξιλογίου",
        human="Πλούσιο λεξιλόγιο, ένδειξη ανθρώπινης γραφής",
    ),
    "sentence_variance": SignalTexts(
        name="Διακύμανση Προτάσεων",
        ai="Ομοιόμορφο μήκος προτάσεων, τυπικό για AI",
        neutral="Μέτρια διακύμανση στο μήκος των προτάσεων",
        human="Μεγάλη διακύμανση στο μήκος των προτάσεων, ένδειξη ανθρώπινης γραφής",
    ),
    "repetition": SignalTexts(
        name="Επανάληψη",
        ai="Εντοπίστηκαν επαναλαμβανόμενα μοτίβα διατύπωσης",
        neutral="Κάποιες επαναλαμβανόμενες διατυπώσεις",
        human="Χαμηλή επανάληψη φράσεων",
    ),
    "starter_diversity": SignalTexts(
        name="Ποικιλία Αρχών Προτάσεων",
        ai="Επαναλαμβανόμενες αρχές προτάσεων",
        neutral="Σχετικά ποικίλες αρχές προτάσεων",
        human="Ποικίλες αρχές προτάσεων",
    ),
    "word_length_variance": SignalTexts(
        name="Διακύμανση Μήκους Λέξεων",
        ai="Ομοιόμορφο μήκος λέξεων",
        neutral="Μέτρια ποικιλία στο μήκος λέξεων",
        human="Ποικίλο μήκος λέξεων",
    ),
    "generic_attribution": SignalTexts(
        name="Γενικές Αναφορές",
        ai="Συχνές γενικόλογες αναφορές σε ειδικούς και έρευνες",
        neutral="Λίγες γενικόλογες αναφορές",
        human="Χωρίς γενικόλογες αναφορές",
    ),
    "hedging": SignalTexts(
        name="Επιφυλακτικές Διατυπώσεις",
        ai="Πολλές επιφυλακτικές φράσεις, τυπικές για AI",
        neutral="Λίγες επιφυλακτικές φράσεις",
        human="Άμεση διατύπωση χωρίς επιφυλάξεις",
    ),
    "transitions": SignalTexts(
        name="Μεταβατικές Φράσεις",
        ai="Συχνές μεταβατικές φράσεις όπως «επιπλέον» και «συνεπώς»",
        neutral="Μέτρια χρήση μεταβατικών φράσεων",
        human="Φυσική ροή χωρίς τυποποιημένες μεταβάσεις",
    ),
    "overformal_vocabulary": SignalTexts(
        name="Υπερβολικά Επίσημο Λεξιλόγιο",
        ai="Υπερβολικά επίσημο λεξιλόγιο για το θέμα",
        neutral="Κάποιες επίσημες λέξεις",
        human="Απλό, καθημερινό λεξιλόγιο",
    ),
    "filler_words": SignalTexts(
        name="Λέξεις Γεμίσματος",
        ai="Απουσία λέξεων όπως «δηλαδή» και «βασικά»",
        neutral="Λίγες λέξεις γεμίσματος",
        human="Φυσική χρήση λέξεων γεμίσματος του προφορικού λόγου",
    ),
    "abbreviations": SignalTexts(
        name="Συντομογραφίες",
        ai="Καμία άτυπη συντομογραφία",
        neutral="Λίγες άτυπες συντομογραφίες",
        human="Άτυπες συντομογραφίες όπως «δλδ» και «κλπ»",
    ),
    "colloquial_markers": SignalTexts(
        name="Καθομιλουμένη",
        ai="Απουσία εκφράσεων της καθομιλουμένης",
        neutral="Λίγες εκφράσεις της καθομιλουμένης",
        human="Εκφράσεις και στίξη της καθομιλουμένης",
    ),
    "personal_pronouns": SignalTexts(
        name="Προσωπικές Αντωνυμίες",
        ai="Απρόσωπο ύφος με ελάχιστες προσωπικές αντωνυμίες",
        neutral="Μέτρια χρήση προσωπικών αντωνυμιών",
        human="Προσωπικό ύφος με συχνές αντωνυμίες",
    ),
    "llm": SignalTexts(
        name="Ανάλυση Μοτίβων LLM",
        ai="Το LLM εντόπισε μοτίβα γραφής τυπικά για AI",
        neutral="Το LLM βρήκε μικτές ενδείξεις στο ύφος γραφής",
        human="Το LLM εντόπισε μοτίβα ανθρώπινης γραφής",
    ),
}

SIGNAL_TEXTS: Final[dict[Language, dict[str, SignalTexts]]] = {
    "english": _ENGLISH,
    "greek": _GREEK,
}

SUMMARY_TEMPLATES: Final[dict[Language, dict[Verdict, str]]] = {
    "english": {
        "high": "High AI probability based on: {factors}",
        "mixed": "Mixed signals detected. Key factors: {factors}",
        "human": "Likely human-written based on: {factors}",
        "insufficient": "Not enough text to estimate the AI probability.",
    },
    "greek": {
        "high": "Υψηλή πιθανότητα AI με βάση: {factors}",
        "mixed": "Εντοπίστηκαν μικτές ενδείξεις. Βασικοί παράγοντες: {factors}",
        "human": "Πιθανότατα γραμμένο από άνθρωπο με βάση: {factors}",
        "insufficient": "Δεν υπάρχει αρκετό κείμενο για εκτίμηση πιθανότητας AI.",
    },
}


def get_signal_texts(key: str, language: Language) -> SignalTexts:
    """
    Get display texts of a signal in a language.

    Args:
        key (str): Key of the signal as in the tuning tables.
        language (Language): Language of the analysed text.

    Raises:
        KeyError: Raised if there are no texts for the signal.

    Returns:
        SignalTexts: Name and interpretations of the signal.
    """
    try:
        return SIGNAL_TEXTS[language][key]
    except KeyError as e:
        raise KeyError(f"There are no texts for `{key}` signal in {language}.") from e
