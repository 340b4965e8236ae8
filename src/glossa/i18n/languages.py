"""
Language data tables.

Only data lives here so the tables can be reviewed and extended
without touching the lookup code in glossa.i18n.locales.
"""

# Locale used when the site configuration does not name one
BUILTIN_DEFAULT_LANG = "en"
BUILTIN_DEFAULT_DIR = "ltr"

# Primary language subtags written right-to-left
RTL_LANGUAGES = frozenset(
    {
        # Arabic and its regional varieties
        "ar", "arb", "arq", "ars", "ary", "arz", "acm", "acq", "acw", "acx",
        "acy", "adf", "aeb", "aec", "afb", "ajp", "apc", "apd", "auz", "avl",
        "ayh", "ayl", "ayn", "ayp", "pga", "shu", "ssh",
        # Hebrew and Yiddish
        "he", "iw", "hbo", "yi", "ji", "ydd", "yih", "jpr",
        # Persian and Iranian languages
        "fa", "pes", "prs", "peo", "ps", "pbt", "pbu", "pst", "ckb",
        # Urdu and others
        "ur", "ug", "dv", "sam", "syr", "men", "xmn",
    }
)

# Script subtag forcing right-to-left rendering (e.g. "ks-Arab")
RTL_SCRIPTS = frozenset({"arab", "hebr", "syrc", "thaa", "nkoo", "adlm"})
