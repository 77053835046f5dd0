"""Testes do lookup em lista ordenada de fontes."""

from __future__ import annotations

from config.settings.sources import first_non_empty, read_env_chain


def test_first_non_empty_skips_none_and_blank() -> None:
    assert first_non_empty([None, "", "  ", " value ", "other"]) == "value"


def test_first_non_empty_returns_none_when_all_empty() -> None:
    assert first_non_empty([None, "", "   "]) is None
    assert first_non_empty([]) is None


def test_first_non_empty_is_lazy() -> None:
    seen: list[str] = []

    def candidates():
        for value in ("first", "second"):
            seen.append(value)
            yield value

    assert first_non_empty(candidates()) == "first"
    assert seen == ["first"]


def test_read_env_chain_respects_key_order() -> None:
    environ = {"B": "from-b", "C": "from-c"}

    assert read_env_chain(["A", "B", "C"], environ=environ) == "from-b"
    assert read_env_chain(["A"], environ=environ) is None
