"""
Bundled weak-password corpus.

Grouped by theme. Point WORD_DICTIONARY_PATH at a larger list in production.
"""

COMMON_PASSWORD_GROUPS: dict[str, tuple[str, ...]] = {
    "common": (
        "password",
        "passwort",
        "passe",
        "secret",
        "letmein",
        "welcome",
        "login",
        "admin",
        "administrator",
        "master",
        "default",
        "changeme",
        "guest",
        "root",
        "access",
        "trustno",
        "whatever",
        "nothing",
        "freedom",
        "iloveyou",
        "hello",
        "test",
        "user",
    ),
    "keyboard": (
        "qwerty",
        "qwertz",
        "azerty",
        "asdfgh",
        "asdf",
        "zxcvbn",
        "qazwsx",
        "abc",
        "abcdef",
    ),
    "names": (
        "michael",
        "jennifer",
        "jordan",
        "ashley",
        "bailey",
        "charlie",
        "thomas",
        "daniel",
        "jessica",
        "andrew",
        "robert",
        "george",
    ),
    "animals": (
        "dragon",
        "monkey",
        "tiger",
        "eagle",
        "falcon",
        "dolphin",
        "shadow",
    ),
    "sports": (
        "football",
        "baseball",
        "soccer",
        "hockey",
        "basketball",
        "golf",
        "tennis",
        "yankees",
    ),
    "culture": (
        "superman",
        "batman",
        "starwars",
        "pokemon",
        "princess",
        "matrix",
        "mustang",
        "ferrari",
        "harley",
    ),
    "seasons": (
        "summer",
        "winter",
        "spring",
        "autumn",
        "sunshine",
        "monday",
        "friday",
    ),
}
