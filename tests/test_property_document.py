"""Property-based tests for the precedence merge and the config locator.

Uses hypothesis to check the ordering rules for arbitrary values and
names, not only hand-picked examples.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from aztoolkit.adapters.config.locator import locate_config
from aztoolkit.domain.document import ConfigDocument, merge_value
from aztoolkit.domain.errors import ConfigNotFoundError

non_blank_text = st.text(min_size=1).filter(lambda s: s.strip() != "")
json_scalars = st.one_of(st.none(), st.booleans(), st.integers(), st.text())
file_token = st.from_regex(r"[A-Za-z0-9][A-Za-z0-9_-]{0,20}", fullmatch=True)


@pytest.mark.os_agnostic
@given(explicit=non_blank_text, primary=json_scalars, alias=json_scalars)
@settings(max_examples=200)
def test_non_blank_explicit_value_always_wins(explicit: str, primary: object, alias: object) -> None:
    doc = ConfigDocument({"context": {"subscriptionId": primary, "defaultSubscriptionId": alias}})

    assert merge_value(explicit, doc, "context", "subscriptionId", "defaultSubscriptionId") == explicit


@pytest.mark.os_agnostic
@given(primary=non_blank_text, alias=json_scalars)
def test_non_blank_primary_always_beats_alias(primary: str, alias: object) -> None:
    doc = ConfigDocument({"context": {"subscriptionId": primary, "defaultSubscriptionId": alias}})

    assert merge_value(None, doc, "context", "subscriptionId", "defaultSubscriptionId") == primary


@pytest.mark.os_agnostic
@given(data=st.recursive(json_scalars, lambda children: st.dictionaries(st.text(), children), max_leaves=20))
def test_merge_never_raises_on_arbitrary_documents(data: object) -> None:
    doc = ConfigDocument(data if isinstance(data, dict) else {"context": data})

    merge_value(None, doc, "context.nested", "subscriptionId", "defaultSubscriptionId")


@pytest.mark.os_agnostic
@given(explicit=st.text(min_size=1).filter(lambda s: "\x00" not in s), name=st.none() | file_token, prefix=file_token)
def test_explicit_path_is_returned_verbatim(explicit: str, name: str | None, prefix: str) -> None:
    assert locate_config(explicit_path=explicit, name=name, directory="/nowhere", prefix=prefix) == Path(explicit)


@pytest.mark.os_agnostic
@given(name=file_token, prefix=file_token)
@settings(max_examples=50)
def test_missing_named_config_error_names_the_constructed_path(name: str, prefix: str) -> None:
    directory = Path("/nonexistent-aztoolkit-dir")

    with pytest.raises(ConfigNotFoundError) as exc:
        locate_config(name=name, directory=directory, prefix=prefix)

    expected = directory / f"{prefix}.{name}.json"
    assert exc.value.path == expected
    assert str(expected) in str(exc.value)
