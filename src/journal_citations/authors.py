"""Author-list formatting, one policy per citation style."""
from typing import Sequence

from .models import Author

APA_MAX_AUTHORS = 7
APA_TRUNCATED_HEAD = 6
MLA_MAX_AUTHORS = 2
CHICAGO_MAX_AUTHORS = 3
VANCOUVER_MAX_AUTHORS = 6
VANCOUVER_TRUNCATED_HEAD = 3
CUSTOM_MAX_AUTHORS = 3


def _initial(name: str, length: int = 1) -> str:
    """First ``length`` characters of a given name, letters untouched."""
    return (name or "")[:length]


def _inverted(author: Author) -> str:
    """'Last, First'."""
    return f"{author.last_name}, {author.first_name}"


def _apa_name(author: Author) -> str:
    return f"{author.last_name}, {_initial(author.first_name)}."


def _vancouver_name(author: Author) -> str:
    return f"{author.last_name} {_initial(author.first_name)}"


def _custom_name(author: Author) -> str:
    return f"{author.last_name} {_initial(author.first_name, 2)}"


def format_authors_apa(authors: Sequence[Author]) -> str:
    """
    Format author list in APA style.

    Up to seven authors are listed with the last one joined by '&'. Longer
    lists show the first six, an ellipsis and the final author.
    """
    if not authors:
        return ""
    if len(authors) == 1:
        return _apa_name(authors[0])
    if len(authors) <= APA_MAX_AUTHORS:
        names = [_apa_name(a) for a in authors]
        names[-1] = f"& {names[-1]}"
        return ", ".join(names)
    head = ", ".join(_apa_name(a) for a in authors[:APA_TRUNCATED_HEAD])
    return f"{head}, ... {_apa_name(authors[-1])}"


def format_authors_mla(authors: Sequence[Author]) -> str:
    """Format author list in MLA style."""
    if not authors:
        return ""
    if len(authors) == 1:
        return _inverted(authors[0])
    if len(authors) == MLA_MAX_AUTHORS:
        return f"{_inverted(authors[0])}, and {authors[1].full_name}"
    return f"{_inverted(authors[0])}, et al."


def format_authors_chicago(authors: Sequence[Author]) -> str:
    """Format author list in Chicago style."""
    if not authors:
        return ""
    if len(authors) == 1:
        return _inverted(authors[0])
    if len(authors) <= CHICAGO_MAX_AUTHORS:
        # Only the first author is inverted
        names = [_inverted(authors[0])]
        names.extend(a.full_name for a in authors[1:-1])
        names.append(f"and {authors[-1].full_name}")
        return ", ".join(names)
    return f"{_inverted(authors[0])}, et al."


def format_authors_vancouver(authors: Sequence[Author]) -> str:
    """Format author list in Vancouver style."""
    if not authors:
        return ""
    if len(authors) <= VANCOUVER_MAX_AUTHORS:
        return ", ".join(_vancouver_name(a) for a in authors)
    head = ", ".join(_vancouver_name(a) for a in authors[:VANCOUVER_TRUNCATED_HEAD])
    return f"{head}, et al."


def format_authors_custom(authors: Sequence[Author]) -> str:
    """Format author list in the AMHSJ house style ('Doe Ja, and Roe Ri')."""
    if not authors:
        return ""
    if len(authors) == 1:
        return _custom_name(authors[0])
    if len(authors) <= CUSTOM_MAX_AUTHORS:
        names = [_custom_name(a) for a in authors]
        names[-1] = f"and {names[-1]}"
        return ", ".join(names)
    return f"{_custom_name(authors[0])}, et al."


def format_authors_bibtex(authors: Sequence[Author]) -> str:
    """BibTeX author field: 'First Last and First Last'."""
    return " and ".join(a.full_name for a in authors)
