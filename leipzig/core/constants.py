"""
Core Constants Module.

Default lexer grammar, class names and the Leipzig Glossing Rules
abbreviation table.
"""

# Tokens are either {...} groups or runs of non-whitespace
DEFAULT_LEXER = r"\{(.*?)\}|([^\s]+)"

# Person digits before an uppercase letter or a word boundary, or an
# optionally N-prefixed run of capitals
ABBREVIATION_PATTERN = r"(\b[0-4])(?=[A-Z]|\b)|(N?[A-Z]+\b)"

DEFAULT_SELECTOR = "[data-gloss]"

# Class on the outer container produced by the tag adapter
WRAPPER_CLASS = "gloss"

DEFAULT_CLASSES = {
    "glossed": "gloss--glossed",
    "no_space": "gloss--no-space",
    "words": "gloss__words",
    "word": "gloss__word",
    "spacer": "gloss__word--spacer",
    "abbr": "gloss__abbr",
    "line": "gloss__line",
    "line_num_prefix": "gloss__line--",
    "original": "gloss__line--original",
    "free_translation": "gloss__line--free",
    "no_align": "gloss__line--no-align",
    "hidden": "gloss__line--hidden",
}

ABBREVIATIONS = {
    "1": "first person",
    "2": "second person",
    "3": "third person",
    "A": "agent-like argument of canonical transitive verb",
    "ABL": "ablative",
    "ABS": "absolutive",
    "ACC": "accusative",
    "ADJ": "adjective",
    "ADV": "adverb(ial)",
    "AGR": "agreement",
    "ALL": "allative",
    "ANTIP": "antipassive",
    "APPL": "applicative",
    "ART": "article",
    "AUX": "auxiliary",
    "BEN": "benefactive",
    "CAUS": "causative",
    "CLF": "classifier",
    "COM": "comitative",
    "COMP": "complementizer",
    "COMPL": "completive",
    "COND": "conditional",
    "COP": "copula",
    "CVB": "converb",
    "DAT": "dative",
    "DECL": "declarative",
    "DEF": "definite",
    "DEM": "demonstrative",
    "DET": "determiner",
    "DIST": "distal",
    "DISTR": "distributive",
    "DU": "dual",
    "DUR": "durative",
    "ERG": "ergative",
    "EXCL": "exclusive",
    "F": "feminine",
    "FOC": "focus",
    "FUT": "future",
    "GEN": "genitive",
    "IMP": "imperative",
    "INCL": "inclusive",
    "IND": "indicative",
    "INDF": "indefinite",
    "INF": "infinitive",
    "INS": "instrumental",
    "INTR": "intransitive",
    "IPFV": "imperfective",
    "IRR": "irrealis",
    "LOC": "locative",
    "M": "masculine",
    "N": "neuter",
    "NEG": "negation / negative",
    "NMLZ": "nominalizer / nominalization",
    "NOM": "nominative",
    "OBJ": "object",
    "OBL": "oblique",
    "P": "patient-like argument of canonical transitive verb",
    "PASS": "passive",
    "PFV": "perfective",
    "PL": "plural",
    "POSS": "possessive",
    "PRED": "predicative",
    "PRF": "perfect",
    "PRS": "present",
    "PROG": "progressive",
    "PROH": "prohibitive",
    "PROX": "proximal / proximate",
    "PST": "past",
    "PTCP": "participle",
    "PURP": "purposive",
    "Q": "question particle / marker",
    "QUOT": "quotative",
    "RECP": "reciprocal",
    "REFL": "reflexive",
    "REL": "relative",
    "RES": "resultative",
    "S": "single argument of canonical intransitive verb",
    "SBJ": "subject",
    "SBJV": "subjunctive",
    "SG": "singular",
    "TOP": "topic",
    "TR": "transitive",
    "VOC": "vocative",
}
