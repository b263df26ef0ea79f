"""
Operations de renommage par lot.

Les quatre operations exposees (remplacer, ajouter a la fin, ajouter au debut,
supprimer) sont des variantes explicites. Elles ne sont converties en couple
(motif, remplacement) qu'a la frontiere avec la primitive de renommage.

Le remplacement accepte deux syntaxes de reference aux groupes :
- $1, $2... (et $& pour la correspondance entiere, $$ pour un dollar)
- \\g<1> comme dans re.sub

to_python_replacement() ramene la premiere a la seconde une fois le motif
compile, car la lecture de $12 depend du nombre de groupes.

La recherche ignore la casse par defaut.
"""

import re
from dataclasses import dataclass

# Motif capturant le nom complet, utilise par Append et Prepend
WHOLE_NAME_PATTERN = r"^(.*)$"
WHOLE_NAME_GROUP = r"\g<1>"

# Drapeaux globaux en tete de motif, ex: (?x) ou (?ms)
LEADING_FLAGS = re.compile(r"^\(\?([aiLmsux]+)\)")

# $$, $&, $<nom> ou $ suivi d'un ou deux chiffres
DOLLAR_REFERENCE = re.compile(r"\$(\$|&|<([^>]*)>|\d{1,2})")


def _escape_replacement(text: str) -> str:
    """Echappe un texte litteral pour les deux syntaxes de remplacement."""
    return text.replace("\\", "\\\\").replace("$", "$$")


def _with_case(pattern: str, case_sensitive: bool) -> str:
    """
    Ajoute le drapeau i au motif si la recherche ignore la casse.

    Un groupe de drapeaux deja present en tete est complete plutot que
    precede d'un second groupe.
    """
    if case_sensitive:
        return pattern
    leading = LEADING_FLAGS.match(pattern)
    if leading is None:
        return f"(?i){pattern}"
    flags = leading.group(1)
    if "i" in flags:
        return pattern
    return f"(?{flags}i){pattern[leading.end():]}"


def to_python_replacement(replacement: str, regex: re.Pattern) -> str:
    """
    Traduit les references $n d'un remplacement en syntaxe re.sub.

    $12 designe le groupe 12 s'il existe, sinon le groupe 1 suivi de "2".
    Une reference a un groupe absent ($0, $7 sans 7 groupes) reste du
    texte. Les \\g<n> deja presents passent tels quels.

    Args:
        replacement: Remplacement saisi par l'utilisateur
        regex: Motif compile auquel le remplacement s'applique

    Returns:
        Remplacement utilisable par regex.sub
    """
    groups = regex.groups

    def convert(match: re.Match) -> str:
        token = match.group(1)
        if token == "$":
            return "$"
        if token == "&":
            return r"\g<0>"
        if token.startswith("<"):
            name = match.group(2)
            return rf"\g<{name}>" if name in regex.groupindex else match.group(0)
        if len(token) == 2 and 1 <= int(token) <= groups:
            return rf"\g<{int(token)}>"
        first = int(token[0])
        if 1 <= first <= groups:
            return rf"\g<{first}>" + token[1:]
        return match.group(0)

    return DOLLAR_REFERENCE.sub(convert, replacement)


@dataclass(frozen=True)
class Replace:
    """Remplace chaque occurrence du motif par le remplacement."""

    pattern: str
    replacement: str = ""
    case_sensitive: bool = False

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError("Le motif a rechercher est obligatoire")

    @property
    def kind(self) -> str:
        return "replace"

    def to_substitution(self) -> tuple[str, str]:
        return _with_case(self.pattern, self.case_sensitive), self.replacement


@dataclass(frozen=True)
class Append:
    """Ajoute un texte a la fin du nom."""

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Le texte a ajouter est obligatoire")

    @property
    def kind(self) -> str:
        return "append"

    def to_substitution(self) -> tuple[str, str]:
        return WHOLE_NAME_PATTERN, WHOLE_NAME_GROUP + _escape_replacement(self.text)


@dataclass(frozen=True)
class Prepend:
    """Ajoute un texte au debut du nom."""

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Le texte a ajouter est obligatoire")

    @property
    def kind(self) -> str:
        return "prepend"

    def to_substitution(self) -> tuple[str, str]:
        return WHOLE_NAME_PATTERN, _escape_replacement(self.text) + WHOLE_NAME_GROUP


@dataclass(frozen=True)
class Remove:
    """Supprime chaque occurrence du motif."""

    pattern: str
    case_sensitive: bool = False

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError("Le motif a supprimer est obligatoire")

    @property
    def kind(self) -> str:
        return "remove"

    def to_substitution(self) -> tuple[str, str]:
        return _with_case(self.pattern, self.case_sensitive), ""


RenameOperation = Replace | Append | Prepend | Remove


def literal(text: str) -> str:
    """
    Convertit un texte litteral en motif regex.

    Pratique pour Replace/Remove quand l'utilisateur cherche un texte brut
    (ex: "(1)") et non une expression reguliere.
    """
    return re.escape(text)
