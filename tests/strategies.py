"""Hypothesis strategies for generating ICU messages and ARB documents.

Provides custom strategies for property-based testing of the scanner,
placeholder extraction and key aggregation.
"""

from __future__ import annotations

import string

from hypothesis import strategies as st
from hypothesis.strategies import composite

from arblexengine.localization import LocaleDocument

# Control variable and placeholder names used across generated messages
NAMES = ["count", "gender", "name", "place", "total", "user"]

# Locales known to CLDR, in both POSIX and BCP-47 spelling
LOCALES = ["en", "de", "fr", "ar", "pt_BR", "pt-PT", "zh_Hans"]

# Literal text never containing a brace
plain_text = st.text(
    alphabet=string.ascii_letters + string.digits + " .,!?'-#=",
    max_size=20,
)

names = st.sampled_from(NAMES)


@composite
def placeholders(draw: st.DrawFn) -> str:
    """Generate a simple ``{name}`` placeholder."""
    return "{" + draw(names) + "}"


@composite
def case_bodies(draw: st.DrawFn, depth: int = 0) -> str:
    """Generate a case body: text, placeholders and (shallowly) nested ICU."""
    parts = draw(
        st.lists(
            st.one_of(plain_text, placeholders())
            if depth >= 2
            else st.one_of(plain_text, placeholders(), icu_messages(depth=depth + 1)),
            max_size=3,
        )
    )
    return "".join(parts)


@composite
def icu_messages(draw: st.DrawFn, depth: int = 0) -> str:
    """Generate a balanced ICU expression, always declaring ``other``."""
    variable = draw(names)
    icu_type = draw(st.sampled_from(["plural", "select", "selectordinal"]))
    selectors = draw(
        st.lists(st.sampled_from(["=0", "=1", "one", "few", "male", "female"]), max_size=3)
    )
    cases = [f"{s}{{{draw(case_bodies(depth=depth))}}}" for s in selectors]
    cases.append(f"other{{{draw(case_bodies(depth=depth))}}}")
    return f"{{{variable}, {icu_type}, {' '.join(cases)}}}"


@composite
def messages(draw: st.DrawFn) -> str:
    """Generate a balanced message mixing text, placeholders and ICU blocks."""
    parts = draw(st.lists(st.one_of(plain_text, placeholders(), icu_messages()), max_size=5))
    return "".join(parts)


@composite
def locale_documents(draw: st.DrawFn, module: str = "shop") -> list[LocaleDocument]:
    """Generate one document per distinct locale with overlapping keys."""
    locales = draw(st.lists(st.sampled_from(LOCALES), min_size=1, max_size=4, unique=True))
    keys = st.sampled_from(["title", "itemCount", "greeting", "farewell", "cartTotal"])
    documents = []
    for locale in locales:
        entries: dict[str, object] = {"@@locale": locale, "@@context": module}
        for key in draw(st.lists(keys, max_size=5, unique=True)):
            entries[key] = draw(plain_text)
            if draw(st.booleans()):
                entries[f"@{key}"] = {
                    "description": f"{key} in {locale}",
                    "placeholders": {draw(names): {"type": "String"}},
                }
        documents.append(
            LocaleDocument(
                locale=locale,
                module=module,
                entries=entries,
                source_path=f"lib/{module}/l10n/{module}_{locale}.arb",
            )
        )
    return documents
